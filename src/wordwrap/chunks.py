"""Split text into the indivisible chunks the packer works with.

A chunk is one of:

- a word fragment ending in a hyphen, when a word character follows the
  hyphen (``"well-known"`` yields ``"well-"`` then ``"known"``);
- a maximal run of non-whitespace;
- a maximal run of whitespace, newlines included.

Joining the chunks of a string reproduces it exactly.
"""
from __future__ import annotations

import re
import string
from enum import Enum
from typing import Final, List, Tuple

_WORD_CHARS: Final[frozenset[str]] = frozenset(string.ascii_letters + string.digits + "_")
_LINE_BREAK_RE = re.compile(r"\r\n|\n")

# ASCII spaces, Unicode space separators, line/paragraph separators and BOM.
# NEL and the C0 separators U+001C..U+001F are not whitespace here.
WHITESPACE: Final[str] = (
    "\t\n\v\f\r \u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006"
    "\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
)
_WHITESPACE_CHARS: Final[frozenset[str]] = frozenset(WHITESPACE)


class LineMarker(Enum):
    """Tags carried through the pipeline in place of chunk text."""

    EMPTY_LINE = "empty_line"


EMPTY_LINE: Final = LineMarker.EMPTY_LINE


def _hyphen_chunk_end(text: str, start: int) -> int:
    """Return the end of a hyphen-trailing fragment at *start*, or ``-1``."""
    i = start
    size = len(text)
    while i < size and text[i] != "-" and text[i] not in _WHITESPACE_CHARS:
        i += 1
    if i == start or i + 1 >= size or text[i] != "-":
        return -1
    if text[i + 1] not in _WORD_CHARS:
        return -1
    return i + 1


def get_chunks(text: str) -> List[str]:
    """Return *text* split into words, whitespace runs and hyphen fragments."""
    chunks: List[str] = []
    pos = 0
    size = len(text)
    while pos < size:
        if text[pos] in _WHITESPACE_CHARS:
            end = pos + 1
            while end < size and text[end] in _WHITESPACE_CHARS:
                end += 1
        else:
            end = _hyphen_chunk_end(text, pos)
            if end < 0:
                end = pos + 1
                while end < size and text[end] not in _WHITESPACE_CHARS:
                    end += 1
        chunks.append(text[pos:end])
        pos = end
    return chunks


def strip_space(text: str) -> str:
    """Strip leading and trailing :data:`WHITESPACE` from *text*."""
    return text.strip(WHITESPACE)


def line_chunks(line: str) -> List[str | LineMarker]:
    """Chunk one physical line, substituting :data:`EMPTY_LINE` when blank."""
    chunks = get_chunks(line)
    if not chunks:
        return [EMPTY_LINE]
    return chunks


def is_wrappable(text: str = "") -> bool:
    """Return ``True`` when *text* holds more than one chunk."""
    if text is None:
        return False
    return len(get_chunks(str(text))) > 1


def split_lines(text: str) -> Tuple[str, ...]:
    """Split *text* into physical lines on ``\\r\\n`` or ``\\n``."""
    return tuple(_LINE_BREAK_RE.split(text))


__all__ = ["EMPTY_LINE", "WHITESPACE", "LineMarker", "strip_space", "get_chunks", "line_chunks", "is_wrappable", "split_lines"]
