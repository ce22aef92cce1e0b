"""Character-scanning lexer with O(n) guaranteed performance.

The lexer holds a single index cursor into the source string. Each step
looks at the current character, asks a classifier when the character alone
is ambiguous, and hands off to one scanner which consumes one token's span.
There is no backtracking once a scanner is chosen.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from mdtex.charsets import (
    BULLET_MARKER,
    DIGITS,
    EMPHASIS_MARKER,
    HEADER_MARKER,
    INLINE_WHITESPACE,
    LINK_TEXT_OPEN,
    MATH_MARKER,
    TEXT_STOP_CHARS,
    TEXT_STOP_CHARS_MATH,
)
from mdtex.config import ConvertConfig, get_convert_config
from mdtex.errors import ParseError
from mdtex.lexer.classifiers import ListClassifierMixin
from mdtex.lexer.scanners import InlineScannerMixin
from mdtex.text import clean_text
from mdtex.tokens import Token
from mdtex.utils.logger import get_logger

logger = get_logger(__name__)


class Lexer(
    # Classifiers (pure lookahead, no position mutation)
    ListClassifierMixin,
    # Scanners (one per token kind)
    InlineScannerMixin,
):
    """Greedy single-pass lexer.

    Usage:
        >>> lexer = Lexer("# Title\\nSome **bold** text")
        >>> for token in lexer.tokenize():
        ...     print(token)
        Header(text='Title', level=1)
        Newline()
        Text(text='Some ')
        Bold(text='bold')
        Text(text=' text')

    Thread Safety:
        Lexer instances are single-use. Create one per source string.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source)
        "_pos",
        "_lineno",
        "_col",
        "_saved_lineno",
        "_saved_col",
        "_source_file",
        "_config",
        "_stop_chars",
    )

    def __init__(
        self,
        source: str,
        *,
        config: ConvertConfig | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize lexer with source text.

        Args:
            source: Markup source text
            config: Conversion config (defaults to the active context config)
            source_file: Optional source file path for strict-mode errors
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._lineno = 1
        self._col = 1
        self._saved_lineno = 1
        self._saved_col = 1
        self._source_file = source_file
        self._config = config if config is not None else get_convert_config()
        self._stop_chars = (
            TEXT_STOP_CHARS_MATH if self._config.math_enabled else TEXT_STOP_CHARS
        )

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into a token stream.

        Yields:
            Token objects one at a time

        Complexity: O(n) where n = len(source)
        """
        while self._pos < self._source_len:
            yield self._dispatch()

    def _dispatch(self) -> Token:
        """Select and run the scanner for the current character."""
        char = self._source[self._pos]

        if char == HEADER_MARKER:
            return self._scan_header()
        if char == EMPHASIS_MARKER:
            if self._at_bullet_star():
                return self._scan_list_item(numbered=False)
            return self._scan_emphasis()
        if char == LINK_TEXT_OPEN:
            return self._scan_link()
        if char in DIGITS and self._at_ordered_marker():
            return self._scan_list_item(numbered=True)
        if char == BULLET_MARKER:
            return self._scan_list_item(numbered=False)
        if char == "\n":
            return self._scan_newline()
        if char == MATH_MARKER and self._config.math_enabled:
            return self._scan_formula()
        return self._scan_text()

    # =========================================================================
    # Cursor navigation
    # =========================================================================

    def _advance(self) -> str:
        """Advance position by one character, tracking line and column.

        Returns:
            The consumed character, or empty string at end of input.
        """
        if self._pos >= self._source_len:
            return ""

        char = self._source[self._pos]
        self._pos += 1

        if char == "\n":
            self._lineno += 1
            self._col = 1
        else:
            self._col += 1

        return char

    def _consume(self, char: str) -> bool:
        """Consume ``char`` if it is the current character."""
        if self._pos < self._source_len and self._source[self._pos] == char:
            self._advance()
            return True
        return False

    def _take_while(self, chars: frozenset[str]) -> str:
        """Consume and return the maximal run of characters in ``chars``."""
        source = self._source
        end = self._pos
        while end < self._source_len and source[end] in chars:
            end += 1
        return self._commit_to(end)

    def _take_until(self, stop: frozenset[str]) -> str:
        """Consume and return characters up to (not including) one in ``stop``.

        Runs to end of input when no stop character follows.
        """
        source = self._source
        end = self._pos
        while end < self._source_len and source[end] not in stop:
            end += 1
        return self._commit_to(end)

    def _skip_inline_whitespace(self) -> None:
        self._take_while(INLINE_WHITESPACE)

    def _commit_to(self, end: int) -> str:
        """Move the cursor to ``end`` and return the skipped segment.

        Uses str.count/rfind instead of a per-character loop for line tracking.
        """
        segment = self._source[self._pos : end]
        newline_count = segment.count("\n")
        if newline_count > 0:
            self._lineno += newline_count
            self._col = len(segment) - segment.rfind("\n")
        else:
            self._col += len(segment)
        self._pos = end
        return segment

    # =========================================================================
    # Payloads and diagnostics
    # =========================================================================

    def _clean(self, text: str) -> str:
        return clean_text(
            text,
            collapse=self._config.collapse_spaces,
            dashes=self._config.dash_rewrite,
        )

    def _save_location(self) -> None:
        """Save current location as the start of the span being scanned."""
        self._saved_lineno = self._lineno
        self._saved_col = self._col

    def _malformed(self, message: str) -> None:
        """Raise ParseError in strict mode; otherwise accept the span as scanned."""
        if self._config.strict:
            raise ParseError(
                message,
                lineno=self._saved_lineno,
                col_offset=self._saved_col,
                source_file=self._source_file,
            )


def tokenize(
    source: str,
    *,
    config: ConvertConfig | None = None,
    source_file: str | None = None,
) -> list[Token]:
    """Tokenize ``source`` completely.

    Args:
        source: Markup source text
        config: Conversion config (defaults to the active context config)
        source_file: Optional source file path for strict-mode errors

    Returns:
        List of tokens in source order; empty for empty input
    """
    tokens = list(Lexer(source, config=config, source_file=source_file).tokenize())
    logger.debug("Tokenized %d characters into %d tokens", len(source), len(tokens))
    return tokens
