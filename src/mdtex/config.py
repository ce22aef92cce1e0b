"""ContextVar-based conversion configuration for mdtex.

Provides context-local configuration using Python's ContextVars (PEP 567).
Config is set once per conversion and read by the lexer and the renderer
when no explicit config is passed to them.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so concurrent conversions with different settings do not interfere.

Usage:
    # Through the high-level API
    latex = convert("# Hello", config=ConvertConfig(math_enabled=True))

    # Direct lexer usage
    from mdtex.config import ConvertConfig, convert_config_context

    with convert_config_context(ConvertConfig(dash_rewrite=False)):
        tokens = list(Lexer(source).tokenize())

"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any, Iterator


@dataclass(frozen=True, slots=True)
class ConvertConfig:
    """Immutable conversion configuration.

    Attributes:
        collapse_spaces: Replace doubled spaces in text payloads with one
        dash_rewrite: Rewrite `` -`` / `` --`` into ``~--`` (non-breaking en dash)
        math_enabled: Recognise ``$inline$`` and ``$$display$$`` math
        strict: Raise ParseError on unterminated spans instead of degrading
        standalone: Wrap rendered output in a complete LaTeX document
        document_class: Document class used when ``standalone`` is set

    """

    collapse_spaces: bool = True
    dash_rewrite: bool = True
    math_enabled: bool = False
    strict: bool = False
    standalone: bool = False
    document_class: str = "article"

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "ConvertConfig":
        """Create ConvertConfig from dictionary.

        Only includes keys that are valid ConvertConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = ConvertConfig.from_dict({"math_enabled": True, "x": 1})
            >>> config.math_enabled
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ConvertConfig = ConvertConfig()

_convert_config: ContextVar[ConvertConfig] = ContextVar(
    "convert_config",
    default=_DEFAULT_CONFIG,
)


def get_convert_config() -> ConvertConfig:
    """Get current conversion configuration (context-local)."""
    return _convert_config.get()


def set_convert_config(config: ConvertConfig) -> None:
    """Set conversion configuration for current context.

    Args:
        config: ConvertConfig instance to use for this context.

    """
    _convert_config.set(config)


def reset_convert_config() -> None:
    """Reset to the module-level default configuration."""
    _convert_config.set(_DEFAULT_CONFIG)


@contextmanager
def convert_config_context(config: ConvertConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with convert_config_context(ConvertConfig(math_enabled=True)):
        ...     tokens = tokenize("$x$")
        >>> # Previous config restored here

    """
    previous = _convert_config.get()
    _convert_config.set(config)
    try:
        yield
    finally:
        _convert_config.set(previous)


__all__ = [
    "ConvertConfig",
    "convert_config_context",
    "get_convert_config",
    "reset_convert_config",
    "set_convert_config",
]
