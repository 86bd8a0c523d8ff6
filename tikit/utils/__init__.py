import datetime
import sys
import webbrowser

import click

from tikit.api.exceptions import ParseError, SideEffectError
from tikit.config import defaults


def make_full_url(ticket, server):
    if not server:
        raise SideEffectError("No Jira server URL provided")
    return f"{server}/browse/{ticket}"


def browser_open_ticket(ticket, server):
    url = make_full_url(ticket, server)
    try:
        opened = webbrowser.open(url)
    except webbrowser.Error as e:
        raise SideEffectError(f"Error opening browser: {e}") from e
    if not opened:
        raise SideEffectError(f"Error opening browser: no browser available for {url}")
    return url


def log(message, level="INFO", verbose_only=False, verbose=False, file=sys.stdout):
    """
    Log a message with color-coded level prefix.

    Args:
        message (str): The message to log.
        level (str): The log level (e.g., INFO, WARNING, ERROR).
        verbose_only (bool): Only log if verbose mode is enabled.
        verbose (bool): Whether verbose mode is enabled.
        file (file): The file to write to.
    """
    if verbose_only and not verbose:
        return

    color = defaults.LOG_LEVELS.get(level, "reset")
    prefix = f"[{level}] " if level else ""

    click.secho(f"{prefix}{message}", fg=color.lower(), err=file == sys.stderr)


def colorize(color, text):
    """Colorize text with Click's style function"""
    return click.style(text, fg=color.lower())


def parse_time(s) -> datetime.datetime:
    """Parse a Jira wire timestamp, e.g. 2023-01-01T10:00:00.000+0000."""
    if not isinstance(s, str):
        raise ParseError(f"Invalid timestamp: {s!r}")
    try:
        return datetime.datetime.strptime(s, defaults.TIME_FORMAT)
    except ValueError as e:
        raise ParseError(f"Invalid timestamp {s!r}: {e}") from e


def show_time(dt: datetime.datetime, fmt: str = defaults.DISPLAY_DATETIME_FORMAT):
    return dt.strftime(fmt)
