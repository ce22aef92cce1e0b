"""StringBuilder for O(n) string accumulation.

Appends fragments to a list and joins once at the end, instead of repeated
string concatenation while folding tokens into LaTeX.

Thread Safety:
StringBuilder instances are local to each render() call.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient string accumulator.

    Usage:
            >>> sb = StringBuilder()
            >>> _ = sb.append("Hello").append(" ").append("World")
            >>> sb.build()
            'Hello World'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a string (empty strings are skipped)."""
        if s:
            self._parts.append(s)
        return self

    def append_line(self, s: str = "") -> StringBuilder:
        """Append a string followed by newline."""
        if s:
            self._parts.append(s)
        self._parts.append("\n")
        return self

    def build(self) -> str:
        """Join all parts into final string."""
        return "".join(self._parts)

    def ends_with_newline(self) -> bool:
        """Return True if the last appended fragment ends a line."""
        return bool(self._parts) and self._parts[-1].endswith("\n")

    def __bool__(self) -> bool:
        return bool(self._parts)
