"""Wrap text to a fixed column width.

>>> wrap("the quick brown fox", width=10)
'the quick\\nbrown fox'
"""
from __future__ import annotations

import logging
from typing import Any, List, Mapping, Tuple

from .chunks import EMPTY_LINE, get_chunks as _get_chunks, is_wrappable as _is_wrappable
from .chunks import line_chunks, split_lines, strip_space
from .options import WrapOptions, resolve_options
from .pack import break_chunks, pack_chunks
from .postprocess import WrappedLine, finish_lines

LOG = logging.getLogger(__name__)


class Wordwrap:
    """A block of text together with the options used to wrap it."""

    def __init__(
        self,
        text: Any = "",
        options: WrapOptions | Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        self.options: WrapOptions = resolve_options(options, **kwargs)
        self._lines: Tuple[str, ...] = split_lines("" if text is None else str(text))

    def _pack_line(self, line: str) -> List[WrappedLine]:
        opts = self.options
        if opts.trim:
            line = strip_space(line)
        chunks = line_chunks(line)
        if chunks == [EMPTY_LINE]:
            return [WrappedLine("", empty=True)]
        if opts.break_words:
            chunks = break_chunks(chunks, opts.width)
        return [WrappedLine(packed) for packed in pack_chunks(chunks, opts.width)]

    def lines(self) -> List[str]:
        """Return the wrapped output lines."""
        packed: List[WrappedLine] = []
        for line in self._lines:
            packed.extend(self._pack_line(line))
        result = finish_lines(packed, self.options)
        LOG.debug(
            "wrapped %d input line(s) into %d line(s) at width %s",
            len(self._lines),
            len(result),
            self.options.width,
        )
        return result

    def wrap(self) -> str:
        """Return the wrapped lines joined with ``newline`` or ``eol``."""
        return self.options.line_separator.join(self.lines())

    def __str__(self) -> str:
        return self.wrap()

    def __repr__(self) -> str:
        return f"Wordwrap(lines={len(self._lines)}, options={self.options!r})"

    @classmethod
    def wrap_text(
        cls, text: Any = "", options: WrapOptions | Mapping[str, Any] | None = None, **kwargs: Any
    ) -> str:
        return cls(text, options, **kwargs).wrap()

    @classmethod
    def wrap_lines(
        cls, text: Any = "", options: WrapOptions | Mapping[str, Any] | None = None, **kwargs: Any
    ) -> List[str]:
        return cls(text, options, **kwargs).lines()

    @staticmethod
    def is_wrappable(text: Any = "") -> bool:
        return _is_wrappable(text)

    @staticmethod
    def get_chunks(text: str) -> List[str]:
        return _get_chunks(text)


def wrap(text: Any = "", options: WrapOptions | Mapping[str, Any] | None = None, **kwargs: Any) -> str:
    """Wrap *text* and return it as a single string.

    Options may be given as a :class:`~wordwrap.options.WrapOptions`, a
    mapping (``{"width": 20, "break": True}``) or keyword arguments.
    """

    return Wordwrap.wrap_text(text, options, **kwargs)


def lines(text: Any = "", options: WrapOptions | Mapping[str, Any] | None = None, **kwargs: Any) -> List[str]:
    """Wrap *text* and return the list of output lines."""

    return Wordwrap.wrap_lines(text, options, **kwargs)


def is_wrappable(text: Any = "") -> bool:
    """Return ``True`` if *text* splits into more than one chunk."""

    return _is_wrappable(text)


def get_chunks(text: str) -> List[str]:
    """Split *text* into words, whitespace runs and hyphen fragments."""

    return _get_chunks(text)


__all__ = ["Wordwrap", "wrap", "lines", "is_wrappable", "get_chunks"]
