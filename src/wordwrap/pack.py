"""Greedy packing of chunks into width-limited lines."""
from __future__ import annotations

from typing import Iterable, List

from .ansi import visible_len


def break_chunk(chunk: str, width: int) -> List[str]:
    """Split *chunk* into pieces of *width* characters when it is too wide.

    Width is measured with :func:`visible_len` but the pieces are cut on raw
    character positions, so an escape sequence may end up split across two
    pieces. Chunks that fit, and any chunk when ``width < 1``, are returned
    whole.
    """

    if width < 1 or visible_len(chunk) <= width:
        return [chunk]
    return [chunk[i : i + width] for i in range(0, len(chunk), width)]


def break_chunks(chunks: Iterable[str], width: int) -> List[str]:
    pieces: List[str] = []
    for chunk in chunks:
        pieces.extend(break_chunk(chunk, width))
    return pieces


def pack_chunks(chunks: Iterable[str], width: int) -> List[str]:
    """Hard-wrap *chunks* to *width* visible columns preserving chunk boundaries.

    A chunk that does not fit next to the current line starts a new line, even
    when it is wider than *width* on its own. Chunks are concatenated as-is;
    whitespace chunks supply the spacing. The first line may be left empty
    when the very first chunk does not fit.
    """

    lines: List[str] = [""]
    current_len = 0
    for chunk in chunks:
        chunk_len = visible_len(chunk)
        if chunk_len + current_len > width:
            lines.append(chunk)
            current_len = chunk_len
        else:
            lines[-1] += chunk
            current_len = visible_len(lines[-1])
    return lines


__all__ = ["break_chunk", "break_chunks", "pack_chunks"]
