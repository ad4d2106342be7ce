"""
Commands for the download list and the download controller of a device.
"""

import typer

from jdcli.api.queries import DOWNLOAD_LINKS_QUERY, DOWNLOAD_PACKAGES_QUERY
from jdcli.api.session import with_device
from jdcli.models.remote import DownloadLink, DownloadPackage
from jdcli.utils.formatting import format_speed

from .common import debug_option, device_option, json_option, report_errors, require
from .formatters import console, print_download_links, print_download_packages, print_json

FINISHED_STATUS = "Finished"

download_app = typer.Typer(help="Manages downloads.", no_args_is_help=True)
link_app = typer.Typer(help="Manages download links.", no_args_is_help=True)
package_app = typer.Typer(help="Manages download packages.", no_args_is_help=True)

download_app.add_typer(link_app, name="link")
download_app.add_typer(package_app, name="package")


def _query_links(device) -> list[DownloadLink]:
    return DownloadLink.parse_list(device.downloads.query_links(DOWNLOAD_LINKS_QUERY))


@link_app.command("list")
def link_list(
    json_output: bool = json_option(),
    debug: bool = debug_option(),
    device: str | None = device_option(),
):
    """List downloads."""
    with report_errors():
        links = with_device(debug, device, _query_links)

    if json_output:
        print_json(links)
    else:
        print_download_links(links)


@link_app.command("rm")
def link_rm(
    ids: list[int] | None = typer.Option(  # noqa: B008
        None, "--id", help="Link identifier. Can be specified multiple times."
    ),
    debug: bool = debug_option(),
    device: str | None = device_option(),
):
    """Remove one or more links."""
    with report_errors():
        link_ids = require(
            ids, "No link identifier was specified (use --id ID1 --id ID2 ...)."
        )
        with_device(
            debug, device, lambda dev: dev.downloads.remove_links(link_ids, [])
        )
    console.print(f"{len(link_ids)} link(s) removed")


@package_app.command("list")
def package_list(
    json_output: bool = json_option(),
    debug: bool = debug_option(),
    device: str | None = device_option(),
):
    """List download packages."""
    with report_errors():
        packages = with_device(
            debug,
            device,
            lambda dev: DownloadPackage.parse_list(
                dev.downloads.query_packages(DOWNLOAD_PACKAGES_QUERY)
            ),
        )

    if json_output:
        print_json(packages)
    else:
        print_download_packages(packages)


@download_app.command("status")
def status(
    debug: bool = debug_option(),
    device: str | None = device_option(),
):
    """Show downloader status."""

    def _status(dev):
        controller = dev.downloadcontroller
        speed = controller.get_speed_in_bytes()
        state = controller.get_current_state()
        return state, speed

    with report_errors():
        state, speed = with_device(debug, device, _status)

    console.print(f"Download status: {state}", markup=False)
    console.print(
        f"Download speed: {format_speed(None if speed is None else float(speed))}",
        markup=False,
    )


@download_app.command("clean")
def clean(
    debug: bool = debug_option(),
    device: str | None = device_option(),
):
    """Clean completed downloads."""

    def _clean(dev) -> int:
        to_remove = []
        for link in _query_links(dev):
            if link.status == FINISHED_STATUS and link.uuid is not None:
                console.print(f"{link.url} is completed and will be removed", markup=False)
                to_remove.append(link.uuid)
        if to_remove:
            dev.downloads.remove_links(to_remove, [])
        return len(to_remove)

    with report_errors():
        cleaned = with_device(debug, device, _clean)

    if cleaned:
        console.print(f"{cleaned} links cleaned")
    else:
        console.print("Nothing to clean")


@download_app.command("pause")
def pause(
    debug: bool = debug_option(),
    device: str | None = device_option(),
):
    """Pause downloads."""
    with report_errors():
        result = with_device(
            debug, device, lambda dev: dev.downloadcontroller.pause_downloads(True)
        )
    console.print(f"Result: {result}")


@download_app.command("stop")
def stop(
    debug: bool = debug_option(),
    device: str | None = device_option(),
):
    """Stop downloads."""
    with report_errors():
        result = with_device(
            debug, device, lambda dev: dev.downloadcontroller.stop_downloads()
        )
    console.print(f"Result: {result}")


@download_app.command("start")
def start(
    debug: bool = debug_option(),
    device: str | None = device_option(),
):
    """Start downloads."""
    with report_errors():
        result = with_device(
            debug, device, lambda dev: dev.downloadcontroller.start_downloads()
        )
    console.print(f"Result: {result}")
