"""Terminal message helpers for the LOGANALYZER CLI.

Status lines go to stderr so stdout carries only per-file results. Glyphs
fall back to ASCII when stderr cannot encode the emoji.
"""

import click

GLYPHS = {
    "warn": ("⚠️", "[!]"),
    "success": ("✅", "[OK]"),
    "error": ("❌", "[X]"),
}


def _supports_character(character: str) -> bool:
    """Return True if `character` can be encoded on Click's stderr stream."""
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def glyph(kind: str) -> str:
    """Return the emoji for `kind` ("warn", "success", "error") or its fallback."""
    emoji, fallback = GLYPHS[kind]
    return emoji if _supports_character(emoji) else fallback


def warn(msg: str) -> None:
    """Emit a bold yellow warning line to stderr."""
    click.secho(f"{glyph('warn')}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Emit a bold green success line to stderr."""
    click.secho(f"{glyph('success')}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a bold red error line to stderr.

    Example:
        ``❌  LOGANALYZER_MIN_NAME_LENGTH='zero': not an integer``
    """
    click.secho(f"{glyph('error')}  {msg}", fg="red", bold=True, err=True)
