"""Wrap options and their defaults.

Callers may hand over a :class:`WrapOptions`, a mapping, keyword arguments, or
a mix of a mapping and keywords (keywords win). Mappings accept the Python
field names as well as the historical option names:

==================  ==========================================
Option name         Field
==================  ==========================================
``break``, ``cut``  ``break_words``
``noTrim``          ``trim`` (inverted)
``no_trim``         ``trim`` (inverted)
==================  ==========================================

Either alias of ``break_words`` being truthy enables breaking. Trimming is
disabled when ``noTrim`` is truthy or ``trim`` is explicitly false.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Callable, Dict, Mapping, Optional

LOG = logging.getLogger(__name__)

DEFAULT_WIDTH = 30
DEFAULT_EOL = "\n"

_BREAK_KEYS = ("break", "cut", "break_words")
_NO_TRIM_KEYS = ("noTrim", "no_trim")
_VALUE_KEYS = ("width", "eol", "newline", "indent", "escape")


@dataclass(frozen=True)
class WrapOptions:
    """Resolved settings for one wrap operation."""

    width: int = DEFAULT_WIDTH
    break_words: bool = False
    trim: bool = True
    eol: str = DEFAULT_EOL
    newline: Optional[str] = None
    indent: str = ""
    escape: Optional[Callable[[str], str]] = None

    @property
    def line_separator(self) -> str:
        """Return the string used to join output lines."""
        return self.newline if self.newline else self.eol


_DEFAULT_OPTIONS = WrapOptions()
_DEFAULTED_ON_NONE = {"width", "eol", "indent"}


def _overrides_from_mapping(raw: Mapping[str, Any]) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}

    for name in _VALUE_KEYS:
        if name not in raw:
            continue
        value = raw[name]
        if value is None and name in _DEFAULTED_ON_NONE:
            continue
        overrides[name] = value

    if any(key in raw for key in _BREAK_KEYS):
        overrides["break_words"] = any(bool(raw.get(key)) for key in _BREAK_KEYS)

    if any(bool(raw.get(key)) for key in _NO_TRIM_KEYS):
        overrides["trim"] = False
    elif "trim" in raw:
        overrides["trim"] = raw["trim"] is not False

    recognized = set(_VALUE_KEYS) | set(_BREAK_KEYS) | set(_NO_TRIM_KEYS) | {"trim"}
    unused = sorted(str(key) for key in set(raw) - recognized)
    if unused:
        LOG.debug("wrap options ignored keys: %s", ", ".join(unused))

    return overrides


def resolve_options(
    options: WrapOptions | Mapping[str, Any] | None = None, **kwargs: Any
) -> WrapOptions:
    """Return a :class:`WrapOptions` built from *options* and *kwargs*.

    Parameters
    ----------
    options:
        An existing :class:`WrapOptions`, a mapping of option names, or
        ``None`` for the defaults.
    **kwargs:
        Extra options applied on top of *options*; ``break`` can be passed as
        ``cut=True`` or ``break_words=True``.

    Raises
    ------
    TypeError
        If *options* is neither ``None``, a mapping nor a :class:`WrapOptions`.
    """

    if options is None:
        base = _DEFAULT_OPTIONS
    elif isinstance(options, WrapOptions):
        base = options
    elif isinstance(options, Mapping):
        base = replace(_DEFAULT_OPTIONS, **_overrides_from_mapping(options))
    else:
        raise TypeError(f"Unsupported wrap options: {type(options)!r}")

    if not kwargs:
        return base

    overrides = _overrides_from_mapping(kwargs)
    LOG.debug("wrap option overrides applied: %s", ", ".join(sorted(overrides)))
    return replace(base, **overrides)


__all__ = ["DEFAULT_EOL", "DEFAULT_WIDTH", "WrapOptions", "resolve_options"]
