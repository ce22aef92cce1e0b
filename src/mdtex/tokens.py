"""Token definitions for the mdtex lexer.

The lexer produces a flat sequence of tokens that the renderer folds into
LaTeX. Each variant is its own frozen dataclass carrying only the payload
needed for rendering; tokens hold no reference to their source position.

Token Variants:
- Header: heading line (level = number of leading ``#``)
- Bold / Italic: emphasis spans
- Link: display text plus target URL
- ListItem: one ordered or unordered list item
- Text: literal run without markup meaning
- Formula: math span (only produced when math is enabled)
- Newline: a line boundary

Thread Safety:
All tokens are frozen (immutable) and safe to share across threads.

"""

from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias


class ListKind(Enum):
    """Kind of list environment a ListItem belongs to."""

    NUMBERED = "enumerate"
    BULLETED = "itemize"

    @classmethod
    def of(cls, numbered: bool) -> "ListKind":
        return cls.NUMBERED if numbered else cls.BULLETED

    @property
    def environment(self) -> str:
        """LaTeX environment name for this list kind."""
        return self.value


@dataclass(frozen=True, slots=True)
class Header:
    """Heading line.

    Levels 1-5 map to sectioning commands; any other level is rendered
    as bold text.
    """

    text: str
    level: int


@dataclass(frozen=True, slots=True)
class Bold:
    text: str


@dataclass(frozen=True, slots=True)
class Italic:
    text: str


@dataclass(frozen=True, slots=True)
class Link:
    """Hyperlink: display text bound to a target URL."""

    text: str
    url: str


@dataclass(frozen=True, slots=True)
class ListItem:
    """One list item.

    Consecutive items of the same kind share a single list environment.
    """

    text: str
    numbered: bool

    @property
    def kind(self) -> ListKind:
        return ListKind.of(self.numbered)


@dataclass(frozen=True, slots=True)
class Text:
    text: str


@dataclass(frozen=True, slots=True)
class Formula:
    """Math span: ``$...$`` (inline) or ``$$...$$`` (display)."""

    text: str
    display: bool = False


@dataclass(frozen=True, slots=True)
class Newline:
    pass


Token: TypeAlias = Header | Bold | Italic | Link | ListItem | Text | Formula | Newline


TOKEN_TYPES: tuple[type, ...] = (
    Header,
    Bold,
    Italic,
    Link,
    ListItem,
    Text,
    Formula,
    Newline,
)

__all__ = [
    "Bold",
    "Formula",
    "Header",
    "Italic",
    "Link",
    "ListItem",
    "ListKind",
    "Newline",
    "TOKEN_TYPES",
    "Text",
    "Token",
]
