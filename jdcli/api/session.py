"""
Scoped access to a MyJDownloader device.

Every device command runs through `DeviceSession.with_device`, which loads the
stored credentials, opens a connection, resolves the target device, hands it
to the command and always closes the connection afterwards.
"""

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, TypeVar

from myjdapi import Myjdapi
from myjdapi.exception import MYJDDeviceNotFoundException, MYJDException

from jdcli.exceptions import DeviceNotFoundError, NoDeviceError, RemoteConnectionError
from jdcli.models.config import Credentials
from jdcli.models.remote import DeviceInfo
from jdcli.storage.config_manager import ConfigManager
from jdcli.utils.structured_logger import (
    SessionLogger,
    create_session_logger,
    setup_logging,
)

if TYPE_CHECKING:
    from myjdapi.myjdapi import Jddevice

APP_KEY = "jdcli"

# myjdapi lets transport errors from requests (OSError subclasses) through
REMOTE_ERRORS = (MYJDException, OSError)

T = TypeVar("T")


def pick_device(client: Myjdapi) -> str:
    """
    Returns the name of the first device registered with the account.

    Raises:
        NoDeviceError: If the account has no devices, or the first one has no name.
    """
    devices = DeviceInfo.parse_list(client.list_devices())
    if not devices:
        raise NoDeviceError(
            "No device available. Make sure JDownloader is running and "
            "connected to your MyJDownloader account."
        )
    if not devices[0].name:
        raise NoDeviceError(f"The first device ({devices[0].id}) reports no name.")
    return devices[0].name


class DeviceSession:
    """
    Owns one connection to the MyJDownloader service for a single command.
    """

    def __init__(
        self,
        debug: bool = False,
        config_manager: ConfigManager | None = None,
        credentials: Credentials | None = None,
        client_factory: Callable[[], Myjdapi] | None = None,
    ):
        """
        Args:
            debug: Log at debug verbosity.
            config_manager: Source of the stored credentials.
            credentials: Credentials to use instead of the stored ones.
            client_factory: Builds the remote client (Myjdapi by default).
        """
        self.debug = debug
        self._config_manager = config_manager
        self._credentials = credentials
        self._client_factory = client_factory or Myjdapi
        self._events: SessionLogger = create_session_logger(__name__)

    @property
    def credentials(self) -> Credentials:
        if self._credentials is None:
            config_manager = self._config_manager or ConfigManager()
            self._credentials = config_manager.load()
        return self._credentials

    def create_client(self) -> Myjdapi:
        """Builds an unconnected client with logging configured for this session."""
        setup_logging(self.debug)
        client = self._client_factory()
        client.set_app_key(APP_KEY)
        return client

    @contextmanager
    def connect(self) -> Iterator[Myjdapi]:
        """
        Yields a connected client and disconnects it on every exit path.

        Raises:
            ConfigurationError: If no usable credentials are stored.
            RemoteConnectionError: If the connection cannot be opened.
        """
        credentials = self.credentials
        client = self.create_client()

        self._events.connecting(credentials.mail)
        try:
            client.connect(credentials.mail, credentials.password)
        except REMOTE_ERRORS as e:
            raise RemoteConnectionError(
                f"Failed to connect as {credentials.mail}: {e}"
            ) from e
        self._events.connected(credentials.mail, len(client.list_devices() or []))

        try:
            yield client
        finally:
            self._disconnect(client)

    def _disconnect(self, client: Myjdapi) -> None:
        try:
            client.disconnect()
        except REMOTE_ERRORS as e:
            self._events.disconnect_failed(str(e))
        else:
            self._events.disconnected()

    def resolve_device_name(self, client: Myjdapi, device_name: str | None) -> str:
        """
        Picks the device to act on: the given name, then the preferred device
        from the credentials file, then the first device of the account.
        """
        if device_name:
            source = "argument"
        elif self.credentials.device:
            device_name, source = self.credentials.device, "config"
        else:
            device_name, source = pick_device(client), "first available"
        self._events.device_resolved(device_name, source)
        return device_name

    def with_device(
        self, device_name: str | None, action: Callable[["Jddevice"], T]
    ) -> T:
        """
        Runs `action` against the resolved device and returns its result.

        Errors raised by `action` propagate unchanged; the connection is
        closed either way.

        Raises:
            NoDeviceError: If no name was given and the account has no device.
            DeviceNotFoundError: If the resolved device does not exist.
        """
        with self.connect() as client:
            name = self.resolve_device_name(client, device_name)
            try:
                device = client.get_device(device_name=name)
            except MYJDDeviceNotFoundException as e:
                raise DeviceNotFoundError(f"Device '{name}' not found.") from e
            return action(device)


def with_device(
    debug: bool, device_name: str | None, action: Callable[["Jddevice"], T]
) -> T:
    """Runs `action` against a device using the stored credentials."""
    return DeviceSession(debug=debug).with_device(device_name, action)


def verify_credentials(credentials: Credentials, debug: bool = False) -> None:
    """
    Opens and closes a session to prove the credentials are accepted.

    Raises:
        RemoteConnectionError: If the service rejects the credentials.
    """
    with DeviceSession(debug=debug, credentials=credentials).connect():
        pass
