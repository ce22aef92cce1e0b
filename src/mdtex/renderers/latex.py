"""LaTeX renderer: folds a token sequence into LaTeX source.

The only state carried across tokens is whether a list environment is open
and of which kind. A list opens on the first ListItem, stays open across
items of the same kind and across line breaks, and closes on the first
other token, on a ListItem of the other kind, or at end of stream.
Newline is the one non-item token that never closes a list: source lists
put one item per line, and closing on each line break would split them.

Example:
    >>> from mdtex.tokens import Bold, Text
    >>> render_latex([Text("a "), Bold("b")])
    'a \\\\textbf{b}'

LaTeX special characters in payloads are passed through unescaped.

Thread Safety:
Renderer state is reset at the start of each render() call and the output
buffer is local to it. Use one renderer per thread.

"""

from collections.abc import Sequence

from mdtex.config import ConvertConfig, get_convert_config
from mdtex.errors import RenderError
from mdtex.stringbuilder import StringBuilder
from mdtex.tokens import (
    Bold,
    Formula,
    Header,
    Italic,
    Link,
    ListItem,
    ListKind,
    Newline,
    Text,
    Token,
)

# Sectioning command per header level; other levels fall back to \textbf
SECTION_COMMANDS: dict[int, str] = {
    1: "section",
    2: "subsection",
    3: "subsubsection",
    4: "paragraph",
    5: "subparagraph",
}

PREAMBLE_PACKAGES: tuple[str, ...] = (
    "\\usepackage[utf8]{inputenc}",
    "\\usepackage{hyperref}",
)


class LatexRenderer:
    """Render tokens to LaTeX.

    List state:
        ``_in_list`` and ``_list_kind`` form a one-deep state machine:
        closed, or open with a kind (numbered or bulleted).

    """

    __slots__ = ("_config", "_in_list", "_list_kind")

    def __init__(self, config: ConvertConfig | None = None) -> None:
        self._config = config if config is not None else get_convert_config()
        self._in_list = False
        self._list_kind: ListKind | None = None

    def render(self, tokens: Sequence[Token]) -> str:
        """Render tokens to LaTeX.

        Args:
            tokens: Tokens in source order (may be empty).

        Returns:
            LaTeX body, or a complete document when ``standalone`` is set.
        """
        self._in_list = False
        self._list_kind = None

        sb = StringBuilder()
        for token in tokens:
            self._render_token(token, sb)
        self._close_list(sb)

        if self._config.standalone:
            return self._wrap_document(sb)
        return sb.build()

    def _render_token(self, token: Token, sb: StringBuilder) -> None:
        match token:
            case ListItem():
                self._render_list_item(token, sb)
            case Newline():
                # Leaves an open list open
                sb.append("\n")
            case Header():
                self._close_list(sb)
                sb.append(self._format_header(token))
            case Bold():
                self._close_list(sb)
                sb.append(f"\\textbf{{{token.text}}}")
            case Italic():
                self._close_list(sb)
                sb.append(f"\\textit{{{token.text}}}")
            case Link():
                self._close_list(sb)
                sb.append(f"\\href{{{token.url}}}{{{token.text}}}")
            case Text():
                self._close_list(sb)
                sb.append(token.text)
            case Formula():
                self._close_list(sb)
                sb.append(self._format_formula(token))
            case _:
                raise RenderError(f"Cannot render {type(token).__name__!r} as a token")

    def _format_header(self, header: Header) -> str:
        command = SECTION_COMMANDS.get(header.level, "textbf")
        return f"\\{command}{{{header.text}}}\n"

    def _format_formula(self, formula: Formula) -> str:
        if formula.display:
            return f"\\[{formula.text}\\]"
        return f"${formula.text}$"

    def _render_list_item(self, item: ListItem, sb: StringBuilder) -> None:
        kind = item.kind
        if not self._in_list or self._list_kind is not kind:
            self._close_list(sb)
            sb.append_line(f"\\begin{{{kind.environment}}}")
            self._in_list = True
            self._list_kind = kind
        sb.append(f"\\item {item.text}")

    def _close_list(self, sb: StringBuilder) -> None:
        """Close the open list environment, if any."""
        if not self._in_list:
            return
        kind = self._list_kind or ListKind.BULLETED
        sb.append_line(f"\\end{{{kind.environment}}}")
        self._in_list = False
        self._list_kind = None

    def _wrap_document(self, body: StringBuilder) -> str:
        doc = StringBuilder()
        doc.append_line(f"\\documentclass{{{self._config.document_class}}}")
        for package in PREAMBLE_PACKAGES:
            doc.append_line(package)
        doc.append_line("\\begin{document}")
        if body:
            doc.append(body.build())
            if not body.ends_with_newline():
                doc.append_line()
        doc.append_line("\\end{document}")
        return doc.build()


def render_latex(
    tokens: Sequence[Token],
    *,
    config: ConvertConfig | None = None,
) -> str:
    """Render a token sequence to LaTeX.

    Args:
        tokens: Tokens in source order.
        config: Conversion config (defaults to the active context config).

    Returns:
        LaTeX string.
    """
    return LatexRenderer(config=config).render(tokens)
