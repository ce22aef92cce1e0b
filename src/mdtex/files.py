"""Reading source documents and writing rendered output.

Thin wrappers around pathlib that translate OSError into the named
ConversionIOError subclasses. Failures are reported once; nothing retries.
"""

from __future__ import annotations

from pathlib import Path

from mdtex.errors import (
    OutputWriteError,
    SourceNotFoundError,
    SourcePermissionError,
    SourceReadError,
)
from mdtex.utils.logger import get_logger

logger = get_logger(__name__)

ENCODING = "utf-8"


def read_source(path: str | Path) -> str:
    """Read an entire source document as UTF-8 text.

    Raises:
        SourceNotFoundError: The path does not exist.
        SourcePermissionError: The file cannot be opened for reading.
        SourceReadError: The path is a directory, cannot be read, or is not UTF-8.
    """
    path = Path(path)
    logger.debug("Reading source %s", path)
    try:
        return path.read_text(encoding=ENCODING)
    except FileNotFoundError as e:
        raise SourceNotFoundError(path, "no such file") from e
    except PermissionError as e:
        raise SourcePermissionError(path, "permission denied") from e
    except IsADirectoryError as e:
        raise SourceReadError(path, "is a directory") from e
    except UnicodeDecodeError as e:
        raise SourceReadError(path, f"not valid {ENCODING}: {e.reason}") from e
    except OSError as e:
        raise SourceReadError(path, e.strerror or str(e)) from e


def write_output(path: str | Path, text: str) -> Path:
    """Write rendered output, creating parent directories as needed.

    Returns:
        The path written to.

    Raises:
        OutputWriteError: The file or its parent directory cannot be written.
    """
    path = Path(path)
    logger.debug("Writing %d characters to %s", len(text), path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding=ENCODING)
    except OSError as e:
        raise OutputWriteError(path, e.strerror or str(e)) from e
    return path


def default_output_path(source: str | Path) -> Path:
    """Return ``source`` with its suffix replaced by ``.tex``."""
    return Path(source).with_suffix(".tex")


def resolve_output_path(source: str | Path, output: str | Path | None = None) -> Path:
    """Pick the destination for ``source`` and refuse to overwrite it.

    Falls back to :func:`default_output_path` when ``output`` is None, so a
    source already named ``*.tex`` would otherwise be its own destination.

    Raises:
        OutputWriteError: The destination is the source file itself.
    """
    destination = Path(output) if output is not None else default_output_path(source)
    if destination.resolve() == Path(source).resolve():
        raise OutputWriteError(destination, "output would overwrite input")
    return destination


__all__ = ["default_output_path", "read_source", "resolve_output_path", "write_output"]
