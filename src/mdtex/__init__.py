"""
mdtex: Lightweight Markdown to LaTeX converter

Converts a restricted Markdown dialect (headers, bold, italic, links,
ordered and unordered list items, plain text) into LaTeX through two
strictly sequential stages: a hand-written lexer producing a flat token
sequence, and a renderer folding those tokens into LaTeX.

Quick Start:
    >>> from mdtex import convert
    >>> print(convert("# Hello\\nSome **bold** text"))
    \\section{Hello}
    <BLANKLINE>
    Some \\textbf{bold} text

    >>> # Or keep the stages apart
    >>> from mdtex import tokenize, render
    >>> tokens = tokenize("- one\\n- two")
    >>> latex = render(tokens)

    >>> # Or use the high-level Converter class
    >>> from mdtex import Converter
    >>> tex = Converter(math_enabled=True, standalone=True)
    >>> document = tex("Euler: $e^{i\\\\pi} + 1 = 0$")

Installation:
    pip install mdtex              # Core converter (zero deps)
    pip install mdtex[test]        # + pytest and hypothesis
"""

from collections.abc import Sequence
from pathlib import Path
from typing import Any

from mdtex.config import (
    ConvertConfig,
    convert_config_context,
    get_convert_config,
    reset_convert_config,
    set_convert_config,
)
from mdtex.errors import (
    ConversionIOError,
    MdTexError,
    OutputWriteError,
    ParseError,
    RenderError,
    SourceNotFoundError,
    SourcePermissionError,
    SourceReadError,
)
from mdtex.files import default_output_path, read_source, resolve_output_path, write_output
from mdtex.lexer import Lexer, tokenize
from mdtex.renderers.latex import LatexRenderer
from mdtex.renderers.protocol import TokenRenderer
from mdtex.serialization import from_dict, from_json, to_dict, to_json
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
from mdtex.utils.logger import get_logger

__version__ = "0.1.0"

logger = get_logger(__name__)


def render(tokens: Sequence[Token], *, config: ConvertConfig | None = None) -> str:
    """Render a token sequence to LaTeX.

    Example:
        >>> render([Header("Header 1", 1)])
        '\\\\section{Header 1}\\n'
    """
    return LatexRenderer(config=config).render(tokens)


def convert(
    source: str,
    *,
    config: ConvertConfig | None = None,
    source_file: str | None = None,
) -> str:
    """Convert markup source to LaTeX (tokenize, then render).

    When ``config`` is given it is installed as the context config for the
    duration of the call.
    """
    if config is None:
        tokens = tokenize(source, source_file=source_file)
        return render(tokens)

    with convert_config_context(config):
        tokens = tokenize(source, source_file=source_file)
        return render(tokens)


def convert_file(
    source_path: str | Path,
    output_path: str | Path | None = None,
    *,
    config: ConvertConfig | None = None,
) -> Path:
    """Read ``source_path``, convert it, and write the LaTeX output.

    Args:
        source_path: Markup document to read
        output_path: Destination (defaults to ``source_path`` with ``.tex`` suffix)
        config: Conversion config

    Returns:
        Path of the written output

    Raises:
        ConversionIOError: Reading or writing failed, or the destination is
            the source file itself
        ParseError: Strict mode rejected the markup
    """
    destination = resolve_output_path(source_path, output_path)
    source = read_source(source_path)
    latex = convert(source, config=config, source_file=str(source_path))
    written = write_output(destination, latex)
    logger.debug("Converted %s -> %s", source_path, written)
    return written


class Converter:
    """High-level converter bound to one configuration.

    Usage:
        >>> tex = Converter()
        >>> tex("Some *italic* text")
        'Some \\\\textit{italic} text'

        >>> tex = Converter(math_enabled=True, dash_rewrite=False)
        >>> tex.tokenize("$x$")
        [Formula(text='x', display=False)]

    Thread Safety:
        The bound config is immutable; each call creates its own lexer and
        renderer. Safe to share between threads.

    """

    __slots__ = ("_config",)

    def __init__(self, config: ConvertConfig | None = None, **options: Any) -> None:
        """Initialize converter.

        Args:
            config: Base configuration (defaults to ``ConvertConfig()``)
            **options: ConvertConfig fields overriding the base; unknown
                names raise TypeError
        """
        base = config if config is not None else ConvertConfig()
        if options:
            values = {f: getattr(base, f) for f in base.__dataclass_fields__}
            unknown = sorted(set(options) - set(values))
            if unknown:
                raise TypeError(f"Unknown Converter option(s): {', '.join(unknown)}")
            values.update(options)
            base = ConvertConfig(**values)
        self._config = base

    @property
    def config(self) -> ConvertConfig:
        return self._config

    def __call__(self, source: str) -> str:
        return convert(source, config=self._config)

    def tokenize(self, source: str) -> list[Token]:
        return tokenize(source, config=self._config)

    def render(self, tokens: Sequence[Token]) -> str:
        return render(tokens, config=self._config)

    def convert_file(
        self,
        source_path: str | Path,
        output_path: str | Path | None = None,
    ) -> Path:
        return convert_file(source_path, output_path, config=self._config)


__all__ = [
    # High-level API
    "Converter",
    "convert",
    "convert_file",
    "render",
    "tokenize",
    # Stages
    "LatexRenderer",
    "Lexer",
    "TokenRenderer",
    # Tokens
    "Bold",
    "Formula",
    "Header",
    "Italic",
    "Link",
    "ListItem",
    "ListKind",
    "Newline",
    "Text",
    "Token",
    # Configuration
    "ConvertConfig",
    "convert_config_context",
    "get_convert_config",
    "reset_convert_config",
    "set_convert_config",
    # Errors
    "ConversionIOError",
    "MdTexError",
    "OutputWriteError",
    "ParseError",
    "RenderError",
    "SourceNotFoundError",
    "SourcePermissionError",
    "SourceReadError",
    # Files and serialization
    "default_output_path",
    "from_dict",
    "from_json",
    "read_source",
    "resolve_output_path",
    "to_dict",
    "to_json",
    "write_output",
    "__version__",
]
