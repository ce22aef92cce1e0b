"""Exception classes for mdtex.

Tokenizing and rendering are total by default and never raise. Errors come
from two places only: strict-mode validation in the lexer (ParseError) and
the file helpers around the core (ConversionIOError and subclasses).
"""

from __future__ import annotations

from pathlib import Path


class MdTexError(Exception):
    """Base exception for all mdtex errors.

    Subclass this for specific error categories.
    """

    pass


class ParseError(MdTexError):
    """Malformed markup detected in strict mode.

    Raised only when ``ConvertConfig.strict`` is enabled; the default lexer
    degrades silently instead.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            lineno: Line number where the offending span starts (1-indexed)
            col_offset: Column where the offending span starts (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class RenderError(MdTexError):
    """Error during LaTeX rendering.

    Raised when the renderer is handed an object that is not a token.
    """

    pass


class ConversionIOError(MdTexError):
    """Base class for failures reading the source or writing the output.

    The underlying OSError is chained as ``__cause__``.
    """

    def __init__(self, path: str | Path, message: str) -> None:
        self.path = Path(path)
        super().__init__(f"{self.path}: {message}")


class SourceNotFoundError(ConversionIOError):
    """Input document does not exist."""


class SourcePermissionError(ConversionIOError):
    """Input document exists but cannot be read."""


class SourceReadError(ConversionIOError):
    """Input document could not be read or decoded."""


class OutputWriteError(ConversionIOError):
    """Rendered output could not be written."""
