"""Token scanners.

Each scanner is entered with the cursor on the character that selected it,
consumes exactly one token's span, and returns the token. Scanners always
advance at least one character, which guarantees the lexer terminates.

Malformed input (missing closing ``*``, ``]``, ``(``, ``)`` or ``$``) is
taken verbatim under the scanning rules and runs to end of input. In strict
mode the same situations raise ParseError at the span's start instead.
"""

from __future__ import annotations

from mdtex.charsets import (
    DIGITS,
    EMPHASIS_MARKER,
    HEADER_MARKER,
    LINK_TEXT_CLOSE,
    LINK_URL_CLOSE,
    LINK_URL_OPEN,
    MATH_MARKER,
    ORDERED_DELIMITER,
)
from mdtex.tokens import Bold, Formula, Header, Italic, Link, ListItem, Newline, Text

_LINE_END = frozenset("\n")
_EMPHASIS_END = frozenset(EMPHASIS_MARKER)
_LINK_TEXT_END = frozenset(LINK_TEXT_CLOSE)
_LINK_URL_END = frozenset(LINK_URL_CLOSE)
_MATH_END = frozenset(MATH_MARKER)


class InlineScannerMixin:
    """Mixin providing one scanner per token kind."""

    _stop_chars: frozenset[str]

    def _advance(self) -> str:
        """Advance one character. Implemented by Lexer."""
        raise NotImplementedError

    def _consume(self, char: str) -> bool:
        """Consume ``char`` if current. Implemented by Lexer."""
        raise NotImplementedError

    def _take_while(self, chars: frozenset[str]) -> str:
        """Consume a run of ``chars``. Implemented by Lexer."""
        raise NotImplementedError

    def _take_until(self, stop: frozenset[str]) -> str:
        """Consume up to a char in ``stop``. Implemented by Lexer."""
        raise NotImplementedError

    def _skip_inline_whitespace(self) -> None:
        """Skip whitespace on the current line. Implemented by Lexer."""
        raise NotImplementedError

    def _save_location(self) -> None:
        """Remember where the current span starts. Implemented by Lexer."""
        raise NotImplementedError

    def _malformed(self, message: str) -> None:
        """Report malformed markup (strict mode). Implemented by Lexer."""
        raise NotImplementedError

    def _clean(self, text: str) -> str:
        """Apply configured text cleaning. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_header(self) -> Header:
        level = len(self._take_while(frozenset(HEADER_MARKER)))
        self._skip_inline_whitespace()
        text = self._take_until(_LINE_END)
        return Header(self._clean(text.strip()), level)

    def _scan_emphasis(self) -> Bold | Italic:
        """Scan ``*italic*`` or ``**bold**``."""
        self._save_location()
        self._advance()
        is_bold = self._consume(EMPHASIS_MARKER)
        text = self._take_until(_EMPHASIS_END)

        if not self._consume(EMPHASIS_MARKER):
            self._malformed("unterminated emphasis")
        elif is_bold and not self._consume(EMPHASIS_MARKER):
            self._malformed("bold span closed by a single '*'")

        if is_bold:
            return Bold(self._clean(text))
        return Italic(self._clean(text))

    def _scan_link(self) -> Link:
        """Scan ``[text](url)``.

        The URL is kept verbatim; only the display text is cleaned.
        """
        self._save_location()
        self._advance()
        text = self._take_until(_LINK_TEXT_END)
        if not self._consume(LINK_TEXT_CLOSE):
            self._malformed("link text is missing ']'")
        if not self._consume(LINK_URL_OPEN):
            self._malformed("link is missing '(' after ']'")
        url = self._take_until(_LINK_URL_END)
        if not self._consume(LINK_URL_CLOSE):
            self._malformed("link URL is missing ')'")
        return Link(self._clean(text), url)

    def _scan_list_item(self, numbered: bool) -> ListItem:
        """Scan a list item line.

        Entered on ``-``, on a ``*`` followed by a space, or on the first
        digit of a confirmed ``<digits>.`` marker.
        """
        if numbered:
            self._take_while(DIGITS)
            self._consume(ORDERED_DELIMITER)
        else:
            self._advance()
        self._skip_inline_whitespace()
        text = self._take_until(_LINE_END)
        return ListItem(self._clean(text), numbered)

    def _scan_formula(self) -> Formula:
        """Scan ``$inline$`` or ``$$display$$``; content is not cleaned."""
        self._save_location()
        self._advance()
        display = self._consume(MATH_MARKER)
        text = self._take_until(_MATH_END)

        if not self._consume(MATH_MARKER):
            self._malformed("unterminated math")
        elif display and not self._consume(MATH_MARKER):
            self._malformed("display math closed by a single '$'")

        return Formula(text, display)

    def _scan_newline(self) -> Newline:
        self._advance()
        return Newline()

    def _scan_text(self) -> Text:
        return Text(self._clean(self._take_until(self._stop_chars)))


__all__ = ["InlineScannerMixin"]
