"""
Helper functions for formatting data into human-readable strings.
"""

SIZE_UNIT = 1024
SIZE_PREFIXES = "KMGTPE"
MAX_URL_LENGTH = 80


def format_size(num_bytes: int | None) -> str:
    """Formats bytes into a binary size string (e.g., '1.5 KiB')."""
    if num_bytes is None:
        return "N/A"
    if num_bytes < SIZE_UNIT:
        return f"{num_bytes} B"
    divisor, exponent = SIZE_UNIT, 0
    n = num_bytes // SIZE_UNIT
    while n >= SIZE_UNIT and exponent < len(SIZE_PREFIXES) - 1:
        divisor *= SIZE_UNIT
        exponent += 1
        n //= SIZE_UNIT
    return f"{num_bytes / divisor:.1f} {SIZE_PREFIXES[exponent]}iB"


def format_eta(seconds: int | None) -> str:
    """
    Formats a remaining time in seconds as 'HH:MM:SS', prefixed with the
    number of days when there is at least one (e.g., '8 days 21:32:34').
    """
    if seconds is None or seconds < 0:
        return "N/A"
    days, remainder = divmod(int(seconds), 86400)
    hours, remainder = divmod(remainder, 3600)
    minutes, secs = divmod(remainder, 60)
    prefix = f"{days} days " if days > 0 else ""
    return f"{prefix}{hours:02d}:{minutes:02d}:{secs:02d}"


def format_speed(bytes_per_second: float | None) -> str:
    """Formats a transfer rate, truncated to whole bytes (e.g., '9.8 KiB/s')."""
    if bytes_per_second is None:
        return "N/A"
    return f"{format_size(int(bytes_per_second))}/s"


def compress_url(url: str) -> str:
    """Shortens a URL to fit a table column."""
    if len(url) > MAX_URL_LENGTH:
        return url[:MAX_URL_LENGTH]
    return url
