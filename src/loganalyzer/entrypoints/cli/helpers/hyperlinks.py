"""OSC-8 hyperlinks for the LOGANALYZER CLI epilog."""

import os
import sys
from typing import TextIO

OSC8_TERMINALS = {"apple_terminal", "vscode", "iterm.app", "wezterm", "kitty"}


def supports_osc8(stream: TextIO | None = None) -> bool:
    """Best-effort guess whether `stream` renders OSC-8 hyperlinks.

    Non-TTY streams never do. Otherwise a small allowlist of terminal
    identifiers from the environment decides.
    """
    stream = stream or sys.stdout
    if not getattr(stream, "isatty", lambda: False)():
        return False
    program = (os.getenv("TERM_PROGRAM") or "").lower()
    return bool(
        program in OSC8_TERMINALS
        or os.getenv("WT_SESSION")
        or os.getenv("VTE_VERSION")
        or os.getenv("TERM", "").startswith(("alacritty", "konsole"))
    )


def hyperlink(url: str, stream: TextIO | None = None) -> str:
    """Render `url` as a clickable link, or as plain text when unsupported."""
    if not supports_osc8(stream):
        return url
    return f"\x1b]8;;{url}\x07{url}\x1b]8;;\x07"
