"""Text cleaning for token payloads.

A single-pass, best-effort normalization applied to every text-bearing
payload before it is wrapped in a token. It is not a canonicalization:
running it twice over text that already contains ``~--`` is not guaranteed
to be stable, and a run of three spaces only loses one of them.

Example:
    >>> from mdtex.text import clean_text
    >>> clean_text("pages 10 - 20")
    'pages 10~-- 20'
    >>> clean_text("two  spaces")
    'two spaces'
"""

from __future__ import annotations

# Non-breaking space followed by an en dash
NBSP_EN_DASH = "~--"


def collapse_spaces(text: str) -> str:
    """Replace each non-overlapping pair of spaces with one space."""
    return text.replace("  ", " ")


def rewrite_dashes(text: str) -> str:
    """Rewrite a space followed by a hyphen into a non-breaking en dash.

    `` --`` is handled first so that an existing en dash is not widened.
    """
    text = text.replace(" --", NBSP_EN_DASH)
    return text.replace(" -", NBSP_EN_DASH)


def clean_text(
    text: str,
    *,
    collapse: bool = True,
    dashes: bool = True,
) -> str:
    """Apply the enabled cleaning steps to ``text``.

    Args:
        text: Raw payload text
        collapse: Collapse doubled spaces
        dashes: Rewrite space+hyphen into ``~--``

    Returns:
        Cleaned text
    """
    if collapse:
        text = collapse_spaces(text)
    if dashes:
        text = rewrite_dashes(text)
    return text


__all__ = ["NBSP_EN_DASH", "clean_text", "collapse_spaces", "rewrite_dashes"]
