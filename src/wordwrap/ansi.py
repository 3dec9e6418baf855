"""Helpers for measuring text that carries ANSI escape sequences."""
from __future__ import annotations

import re

ANSI_RE = re.compile(r"\x1b.*?m")


def strip_ansi(s: str) -> str:
    """Return *s* with every ``ESC ... m`` sequence removed."""
    return ANSI_RE.sub("", s)


def visible_len(s: str) -> int:
    """Return the printable length of *s*, ignoring ANSI codes."""
    return len(strip_ansi(s))


__all__ = ["ANSI_RE", "strip_ansi", "visible_len"]
