"""
Commands for the devices registered with the account.
"""

import typer

from jdcli.api.session import DeviceSession
from jdcli.models.remote import DeviceInfo

from .common import debug_option, json_option, report_errors
from .formatters import print_devices, print_json

device_app = typer.Typer(help="Manages devices.", no_args_is_help=True)


@device_app.command("list")
def device_list(
    json_output: bool = json_option(),
    debug: bool = debug_option(),
):
    """List all devices."""
    with report_errors(), DeviceSession(debug=debug).connect() as client:
        devices = DeviceInfo.parse_list(client.list_devices())

    if json_output:
        print_json(devices)
    else:
        print_devices(devices)
