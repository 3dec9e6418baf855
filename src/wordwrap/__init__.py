"""Word-wrap text to a column width, measuring ANSI-coloured text by what is visible."""
from __future__ import annotations

from .ansi import strip_ansi, visible_len
from .chunks import EMPTY_LINE
from .options import WrapOptions, resolve_options
from .wordwrap import Wordwrap, get_chunks, is_wrappable, lines, wrap

__version__ = "1.0.0"

__all__ = [
    "EMPTY_LINE",
    "Wordwrap",
    "WrapOptions",
    "get_chunks",
    "is_wrappable",
    "lines",
    "resolve_options",
    "strip_ansi",
    "visible_len",
    "wrap",
]
