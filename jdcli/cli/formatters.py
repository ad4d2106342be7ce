"""
Functions for formatting and displaying data in the console using Rich.
"""

from collections.abc import Sequence
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from jdcli.models.build_info import BuildInfo
from jdcli.models.remote import (
    CollectorLink,
    DeviceInfo,
    DownloadLink,
    DownloadPackage,
    RemoteModel,
)
from jdcli.utils.formatting import compress_url, format_eta, format_size, format_speed

console = Console()
err_console = Console(stderr=True)

DEVICE_COLUMNS = ["ID", "Type", "Name", "Status"]
DOWNLOAD_LINK_COLUMNS = ["ID", "URL", "State", "ETA", "Speed", "Size"]
DOWNLOAD_PACKAGE_COLUMNS = ["ID", "Name", "Status", "Save to", "Total size"]
COLLECTOR_LINK_COLUMNS = ["ID", "Name", "URL", "Status", "Size"]


def _cell(value: Any) -> str:
    return "" if value is None else escape(str(value))


def _table(columns: list[str]) -> Table:
    table = Table(show_header=True, header_style="bold")
    for column in columns:
        table.add_column(column, no_wrap=column == "ID")
    return table


def format_error_with_suggestions(
    error: BaseException, context: dict | None = None
) -> Panel:
    """Formats an error with actionable suggestions into a Rich Panel."""
    error_type = type(error).__name__
    error_msg = str(error).strip()

    suggestions_map = {
        "ConfigurationError": [
            "• Run `jdcli login` to store your MyJDownloader credentials.",
            "• Set JD_CONFIG if the credentials file lives somewhere else.",
        ],
        "RemoteConnectionError": [
            "• Verify your email and password with `jdcli login`.",
            "• Check that my.jdownloader.org is reachable.",
        ],
        "NoDeviceError": [
            "• Start JDownloader and connect it to your MyJDownloader account.",
        ],
        "DeviceNotFoundError": [
            "• Run `jdcli device list` to see the registered devices.",
            "• Device names are case sensitive.",
        ],
        "ArgumentValidationError": [
            "• Run the command with --help to see its required options.",
        ],
        "MYJDConnectionException": [
            "• The MyJDownloader service could not be reached.",
            "• Please try again in a few minutes.",
        ],
        "MYJDDeviceNotFoundException": [
            "• Run `jdcli device list` to see the registered devices.",
        ],
    }

    suggestions = suggestions_map.get(
        error_type, ["• Run the command with --debug for detailed logs."]
    )

    error_text = Text()
    error_text.append(f"{error_type}: ", style="bold red")
    error_text.append(error_msg)

    content = Table.grid(padding=(1, 0))
    content.add_row(error_text)
    content.add_row()
    content.add_row(Text("Suggestions", style="bold yellow"))
    content.add_row(Text("\n".join(suggestions)))

    if context:
        content.add_row()
        content.add_row(Text(f"Context: {context}", style="dim"))

    return Panel(
        content,
        title="[bold red]An Error Occurred[/bold red]",
        border_style="red",
        expand=False,
    )


def print_json(items: Sequence[RemoteModel] | BuildInfo):
    """Prints models as indented JSON using the remote API's field names."""
    if isinstance(items, BuildInfo):
        data = items.model_dump()
    else:
        data = [item.to_json() for item in items]
    console.print_json(data=data, indent=4)


def print_devices(devices: Sequence[DeviceInfo]):
    """Displays the devices registered with the account."""
    table = _table(DEVICE_COLUMNS)
    for dev in devices:
        table.add_row(_cell(dev.id), _cell(dev.type), _cell(dev.name), _cell(dev.status))
    console.print(table)


def print_download_links(links: Sequence[DownloadLink]):
    """Displays the download list, one row per link."""
    table = _table(DOWNLOAD_LINK_COLUMNS)
    for link in links:
        table.add_row(
            _cell(link.uuid),
            _cell(compress_url(link.url or "")),
            _cell(link.status),
            format_eta(link.eta),
            format_speed(link.speed),
            format_size(link.bytes_total),
        )
    console.print(table)


def print_download_packages(packages: Sequence[DownloadPackage]):
    """Displays the download packages."""
    table = _table(DOWNLOAD_PACKAGE_COLUMNS)
    for pkg in packages:
        table.add_row(
            _cell(pkg.uuid),
            _cell(pkg.name),
            _cell(pkg.status),
            _cell(pkg.save_to),
            format_size(pkg.bytes_total),
        )
    console.print(table)


def print_collector_links(links: Sequence[CollectorLink]):
    """Displays the links waiting in the link collector."""
    table = _table(COLLECTOR_LINK_COLUMNS)
    for link in links:
        table.add_row(
            _cell(link.uuid),
            _cell(link.name),
            _cell(compress_url(link.url or "")),
            _cell(link.status or link.availability),
            "" if link.bytes_total is None else format_size(link.bytes_total),
        )
    console.print(table)


def print_build_info(info: BuildInfo):
    """Displays the build information."""
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style="bold cyan")
    table.add_column()
    table.add_row("Version:", info.version)
    table.add_row("Python:", info.python_version)
    table.add_row("Platform:", f"{info.platform}/{info.arch}")
    console.print(table)
