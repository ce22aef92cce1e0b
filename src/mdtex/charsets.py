"""Character sets for O(1) classification.

All sets are frozensets: O(1) membership, immutable, built once at import.

Usage:
    from mdtex.charsets import TEXT_STOP_CHARS

    if char in TEXT_STOP_CHARS:
        ...
"""

DIGITS: frozenset[str] = frozenset("0123456789")

# Whitespace skipped after markers; never crosses a line boundary
INLINE_WHITESPACE: frozenset[str] = frozenset(" \t\r\f\v")

# Characters that end a plain text run
TEXT_STOP_CHARS: frozenset[str] = frozenset("#*[\n")

# Same, with math enabled
TEXT_STOP_CHARS_MATH: frozenset[str] = TEXT_STOP_CHARS | frozenset("$")

HEADER_MARKER = "#"
EMPHASIS_MARKER = "*"
BULLET_MARKER = "-"
ORDERED_DELIMITER = "."
LINK_TEXT_OPEN = "["
LINK_TEXT_CLOSE = "]"
LINK_URL_OPEN = "("
LINK_URL_CLOSE = ")"
MATH_MARKER = "$"
