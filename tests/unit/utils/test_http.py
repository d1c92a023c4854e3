"""Unit tests for fouroneone.utils.http.redirect."""

import io

import pytest

from fouroneone.errors import HeaderInjectionError
from fouroneone.utils.http import redirect


def test_redirect_writes_headers_and_exits_zero():
    """A redirect writes the 302 header block and exits with status 0."""
    out = io.StringIO()
    with pytest.raises(SystemExit) as exc_info:
        redirect("/alerts?id=3", stream=out)
    assert exc_info.value.code == 0
    assert out.getvalue() == (
        "Status: 302 Found\r\nLocation: /alerts?id=3\r\n\r\n"
    )


def test_redirect_without_exit_returns():
    """With exit=False the headers are written and control returns."""
    out = io.StringIO()
    redirect("https://example.com/", stream=out, exit=False)
    assert "Location: https://example.com/\r\n" in out.getvalue()


@pytest.mark.parametrize("url", ["/a\r\nSet-Cookie: x=1", "/a\nX: y", "/a\r"])
def test_redirect_rejects_header_injection(url):
    """CR/LF in the target raises and nothing is written."""
    out = io.StringIO()
    with pytest.raises(HeaderInjectionError):
        redirect(url, stream=out)
    assert out.getvalue() == ""
