"""Hand-written lexer for the mdtex markup dialect.

lexer/
├── __init__.py          # Re-exports Lexer, tokenize
├── core.py              # Lexer class (cursor navigation + dispatch)
├── classifiers.py       # Pure lookahead predicates (bullet vs emphasis, ordered marker)
└── scanners.py          # One scanner per token kind

Usage:
    >>> from mdtex.lexer import tokenize
    >>> tokenize("1. First")
    [ListItem(text='First', numbered=True)]

"""

from mdtex.lexer.core import Lexer, tokenize

__all__ = ["Lexer", "tokenize"]
