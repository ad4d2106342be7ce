"""
Reads link lists prepared for the `links add --from-file` command.
"""

import logging
from pathlib import Path
from urllib.parse import urlparse

from jdcli.exceptions import ArgumentValidationError

log = logging.getLogger(__name__)

COMMENT_PREFIX = ";"


def parse_links_file(path: Path | str) -> list[str]:
    """
    Reads URLs from a text file, one per line.

    Blank lines and lines starting with ';' are skipped, as are lines that
    cannot be parsed as a URL.

    Raises:
        ArgumentValidationError: If the file cannot be read.
    """
    try:
        content = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise ArgumentValidationError(f"Cannot read links file '{path}': {e}") from e

    links = []
    for line in content.splitlines():
        line = line.strip()
        if not line or line.startswith(COMMENT_PREFIX):
            continue
        try:
            urlparse(line)
        except ValueError:
            log.debug(f"Skipping unparsable line in '{path}': {line}")
            continue
        links.append(line)
    return links
