"""OSC-8 terminal hyperlinks with a plain-text fallback."""

import os
import sys
from typing import TextIO

OSC8_TERMINAL_PROGRAMS = {"apple_terminal", "vscode", "iterm.app", "wezterm", "kitty"}


def supports_osc8(stream: TextIO | None = None) -> bool:
    """Best-effort check that `stream` is a terminal that renders OSC-8 links.

    Non-TTY streams (pipes, files, CliRunner) always return False.
    """
    stream = stream or sys.stdout
    if not getattr(stream, "isatty", lambda: False)():
        return False
    return bool(
        (os.getenv("TERM_PROGRAM") or "").lower() in OSC8_TERMINAL_PROGRAMS
        or os.getenv("WT_SESSION")  # Windows Terminal
        or os.getenv("VTE_VERSION")  # GNOME Terminal, Tilix, etc.
        or os.getenv("TERM", "").startswith(("alacritty", "konsole"))
    )


def hyperlink(url: str, stream: TextIO | None = None) -> str:
    """Return `url` as a clickable OSC-8 link, or unchanged if unsupported."""
    if not supports_osc8(stream):
        return url
    return f"\x1b]8;;{url}\x07{url}\x1b]8;;\x07"
