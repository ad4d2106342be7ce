"""
Options and error handling shared by all commands.
"""

from collections.abc import Iterator
from contextlib import contextmanager

import typer
from myjdapi.exception import MYJDException

from jdcli.exceptions import ArgumentValidationError, JdCliError

from .formatters import err_console, format_error_with_suggestions


def debug_option():
    return typer.Option(False, "--debug", help="Enable debug logging.")


def device_option():
    return typer.Option(
        None,
        "--device",
        help="Device name to use for this operation (defaults to the first device).",
    )


def json_option():
    return typer.Option(False, "--json", help="Print the result as JSON.")


@contextmanager
def report_errors() -> Iterator[None]:
    """Renders application and remote API errors and exits with status 1."""
    try:
        yield
    except JdCliError as e:
        err_console.print(format_error_with_suggestions(e))
        raise typer.Exit(code=1) from e
    except MYJDException as e:
        err_console.print(format_error_with_suggestions(e))
        raise typer.Exit(code=1) from e


def require(values: list | None, message: str) -> list:
    """Returns `values`, or raises ArgumentValidationError when there are none."""
    if not values:
        raise ArgumentValidationError(message)
    return list(values)
