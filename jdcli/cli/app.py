"""
Defines the command-line interface for the application using Typer.
"""

import logging

import typer

from jdcli.api.session import verify_credentials
from jdcli.exceptions import ArgumentValidationError
from jdcli.models.build_info import BuildInfo
from jdcli.models.config import Credentials
from jdcli.storage.config_manager import ConfigManager
from jdcli.utils.structured_logger import setup_logging

from .common import debug_option, json_option, report_errors
from .devices import device_app
from .downloads import download_app
from .formatters import console, err_console, print_build_info, print_json
from .links import links_app

log = logging.getLogger("jdcli")

app = typer.Typer(
    name="jdcli",
    help="JDownloader CLI tool. Use 'jdcli <command> --help' for more info.",
    rich_markup_mode="rich",
    pretty_exceptions_show_locals=False,
    add_completion=False,
)
app.add_typer(device_app, name="device")
app.add_typer(download_app, name="download")
app.add_typer(links_app, name="links")


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False, "--version", help="Show version and exit.", is_eager=True
    ),
):
    """JDownloader CLI"""
    if version:
        build_version = BuildInfo.collect().version
        console.print(f"[bold]jdcli[/bold] version [cyan]{build_version}[/cyan]")
        raise typer.Exit()

    setup_logging(debug=False, console=err_console)

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


@app.command()
def login(
    device: str | None = typer.Option(
        None,
        "--device",
        help="Device to use by default when a command is run without --device.",
    ),
    debug: bool = debug_option(),
):
    """Log into the account and save the credentials into the config file."""
    mail = typer.prompt("Enter username/email").strip()
    password = typer.prompt("Enter password", hide_input=True).strip()
    credentials = Credentials(mail=mail, password=password, device=device)

    with report_errors():
        if not credentials.is_complete:
            raise ArgumentValidationError("Both email and password are required.")
        verify_credentials(credentials, debug=debug)
        config_manager = ConfigManager()
        config_manager.save(credentials)

    log.debug(f"Credentials for {mail} verified")
    console.print(
        f"[green]✓ Credentials saved to '{config_manager.config_file_path}'[/green]"
    )


@app.command()
def version(json_output: bool = json_option()):
    """Show build information."""
    info = BuildInfo.collect()
    if json_output:
        print_json(info)
    else:
        print_build_info(info)
