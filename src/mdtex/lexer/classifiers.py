"""List marker classifiers.

Two dispatch decisions are ambiguous from the current character alone:

- ``*`` is a bullet marker when followed by a space, otherwise emphasis.
- A digit starts an ordered item only for ``<digits>.`` followed by inline
  whitespace, otherwise it is plain text.

Both are answered here by pure lookahead over ``(source, pos)``. Nothing in
this module moves the lexer cursor.
"""

from __future__ import annotations

from mdtex.charsets import DIGITS, EMPHASIS_MARKER, INLINE_WHITESPACE, ORDERED_DELIMITER


def is_bullet_star(source: str, pos: int) -> bool:
    """Return True if the ``*`` at ``pos`` is a bullet marker."""
    return source[pos] == EMPHASIS_MARKER and source[pos + 1 : pos + 2] == " "


def is_ordered_marker(source: str, pos: int) -> bool:
    """Return True if ``source[pos:]`` starts with ``<digits>.`` + whitespace.

    Example:
        >>> is_ordered_marker("12. item", 0)
        True
        >>> is_ordered_marker("1.item", 0)
        False
    """
    end = len(source)
    scan = pos
    while scan < end and source[scan] in DIGITS:
        scan += 1
    if scan == pos:
        return False
    if scan >= end or source[scan] != ORDERED_DELIMITER:
        return False
    return scan + 1 < end and source[scan + 1] in INLINE_WHITESPACE


class ListClassifierMixin:
    """Mixin exposing the classifiers at the lexer's current position."""

    _source: str
    _pos: int

    def _at_bullet_star(self) -> bool:
        return is_bullet_star(self._source, self._pos)

    def _at_ordered_marker(self) -> bool:
        return is_ordered_marker(self._source, self._pos)
