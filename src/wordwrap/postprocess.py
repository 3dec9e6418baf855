"""Final touches applied to packed lines: indent, escape, trim and filtering."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

from .chunks import WHITESPACE, strip_space
from .options import WrapOptions


@dataclass(frozen=True)
class WrappedLine:
    """A packed output line; ``empty`` marks a blank line from the input."""

    text: str
    empty: bool = False


def _indent(line: WrappedLine, options: WrapOptions) -> WrappedLine:
    if not options.indent:
        return line
    return WrappedLine(options.indent + line.text, line.empty)


def _escape(line: WrappedLine, options: WrapOptions) -> WrappedLine:
    if not options.escape:
        return line
    return WrappedLine(options.escape(line.text), line.empty)


def _trim(line: WrappedLine, options: WrapOptions) -> WrappedLine:
    if not options.trim:
        return line
    # a blank input line only loses the whitespace in front of it
    text = line.text.lstrip(WHITESPACE) if line.empty else strip_space(line.text)
    return WrappedLine(text, line.empty)


def finish_lines(lines: Iterable[WrappedLine], options: WrapOptions) -> List[str]:
    """Return the final output strings for *lines*.

    Every line is indented, escaped and trimmed in that order. Lines left
    blank afterwards are dropped, except the ones standing for an empty input
    line, which always come through.
    """

    finished: List[str] = []
    for line in lines:
        line = _trim(_escape(_indent(line, options), options), options)
        if line.empty or strip_space(line.text):
            finished.append(line.text)
    return finished


__all__ = ["WrappedLine", "finish_lines"]
