"""Utility modules for mdtex.

Provides:
- logger: get_logger for namespaced logging
"""

from mdtex.utils.logger import get_logger

__all__ = ["get_logger"]
