"""CGI-style HTTP response helpers."""

import sys
from typing import TextIO

from fouroneone.errors import HeaderInjectionError

REDIRECT_STATUS = "302 Found"


def redirect(
    url: str,
    *,
    stream: TextIO | None = None,
    exit: bool = True,  # pylint: disable=redefined-builtin
) -> None:
    """Send a 302 redirect to the browser.

    Writes the ``Status`` and ``Location`` headers followed by the blank line
    that ends the header block, then exits with status 0 unless `exit` is
    False.

    Args:
        url: Redirect target.
        stream: Where the response is written. Defaults to ``sys.stdout``.
        exit: Terminate the process after the headers are written.

    Raises:
        HeaderInjectionError: If `url` contains CR or LF.
        SystemExit: With code 0 when `exit` is True.
    """
    if "\r" in url or "\n" in url:
        raise HeaderInjectionError("Location", url)
    stream = stream or sys.stdout
    stream.write(f"Status: {REDIRECT_STATUS}\r\nLocation: {url}\r\n\r\n")
    stream.flush()
    if exit:
        sys.exit(0)
