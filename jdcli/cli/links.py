"""
Commands for the link collector of a device.
"""

from pathlib import Path
from typing import Any

import typer

from jdcli.api.queries import COLLECTOR_LINKS_QUERY
from jdcli.api.session import with_device
from jdcli.models.remote import CollectorLink
from jdcli.utils.links_file import parse_links_file

from .common import debug_option, device_option, json_option, report_errors, require
from .formatters import console, print_collector_links, print_json

links_app = typer.Typer(help="Interacts with the link collector.", no_args_is_help=True)


def build_add_links_query(
    links: list[str],
    auto_start: bool = False,
    package_name: str | None = None,
    download_dir: str | None = None,
) -> list[dict[str, Any]]:
    """Builds the `linkgrabberv2/addLinks` payload; unset options are omitted."""
    query: dict[str, Any] = {
        "autostart": auto_start,
        "links": "\n".join(links),
    }
    if package_name:
        query["packageName"] = package_name
    if download_dir:
        query["destinationFolder"] = download_dir
    return [query]


@links_app.command("add")
def add(
    links: list[str] | None = typer.Option(  # noqa: B008
        None, "--link", help="Link to add. Can be specified multiple times."
    ),
    from_file: Path | None = typer.Option(  # noqa: B008
        None,
        "--from-file",
        help="Path to a file with a URL on each line. Lines starting with ';' are ignored.",
    ),
    package_name: str | None = typer.Option(
        None, "--package-name", help="Name of the download package."
    ),
    download_dir: str | None = typer.Option(
        None, "--download-dir", help="Directory where to download files."
    ),
    auto_start: bool = typer.Option(
        False, "--auto-start", help="Start downloading the files immediately."
    ),
    debug: bool = debug_option(),
    device: str | None = device_option(),
):
    """Add one or more links to the link collector."""
    with report_errors():
        all_links = list(links or [])
        if from_file:
            all_links.extend(parse_links_file(from_file))
        all_links = require(all_links, "No links specified (use --link or --from-file).")

        query = build_add_links_query(all_links, auto_start, package_name, download_dir)
        response = with_device(debug, device, lambda dev: dev.linkgrabber.add_links(query))

    console.print(f"Response: {response}", markup=False)


@links_app.command("list")
def list_links(
    json_output: bool = json_option(),
    debug: bool = debug_option(),
    device: str | None = device_option(),
):
    """List all links in the link collector."""
    with report_errors():
        links = with_device(
            debug,
            device,
            lambda dev: CollectorLink.parse_list(
                dev.linkgrabber.query_links(COLLECTOR_LINKS_QUERY)
            ),
        )

    if json_output:
        print_json(links)
    elif links:
        print_collector_links(links)
    else:
        console.print("No links")
