"""Logger factory for mdtex modules.

Every module logs under the ``mdtex`` namespace, so one handler on that
logger (or ``mdtex -v`` on the command line) covers the lexer, the
renderer and file I/O. The library itself never configures handlers.

Example:
    >>> from mdtex.utils.logger import get_logger
    >>> logger = get_logger(__name__)  # inside mdtex.files -> "mdtex.files"
    >>> logger.debug("Reading source %s", "notes.md")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``mdtex`` namespace.

    Names already inside the namespace are used as-is; anything else gets
    the ``mdtex.`` prefix.

    Example:
        >>> get_logger("mdtex.lexer.core").name
        'mdtex.lexer.core'
        >>> get_logger("cli").name
        'mdtex.cli'
    """
    if not (name == "mdtex" or name.startswith("mdtex.")):
        name = f"mdtex.{name}"
    return logging.getLogger(name)
