"""Tests for ContextVar-based conversion configuration.

Validates defaults, immutability, context manager behavior and thread
isolation.
"""

from threading import Thread

import pytest

from mdtex import (
    ConvertConfig,
    Lexer,
    convert,
    convert_config_context,
    get_convert_config,
    reset_convert_config,
    set_convert_config,
)
from mdtex.tokens import Formula, Text


class TestConvertConfigDataclass:
    """Test ConvertConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = ConvertConfig()
        assert config.collapse_spaces is True
        assert config.dash_rewrite is True
        assert config.math_enabled is False
        assert config.strict is False
        assert config.standalone is False
        assert config.document_class == "article"

    def test_immutability(self) -> None:
        config = ConvertConfig()
        with pytest.raises(AttributeError):
            config.math_enabled = True  # type: ignore[misc]

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = ConvertConfig.from_dict({"math_enabled": True, "unknown_key": "ignored"})
        assert config.math_enabled is True
        assert config.strict is False

    def test_from_dict_empty(self) -> None:
        assert ConvertConfig.from_dict({}) == ConvertConfig()


class TestContextVarFunctions:
    def setup_method(self) -> None:
        reset_convert_config()

    def teardown_method(self) -> None:
        reset_convert_config()

    def test_get_returns_default(self) -> None:
        assert get_convert_config() == ConvertConfig()

    def test_set_and_reset(self) -> None:
        set_convert_config(ConvertConfig(math_enabled=True))
        assert get_convert_config().math_enabled is True
        reset_convert_config()
        assert get_convert_config().math_enabled is False

    def test_context_manager_restores(self) -> None:
        with convert_config_context(ConvertConfig(strict=True)):
            assert get_convert_config().strict is True
        assert get_convert_config().strict is False

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with convert_config_context(ConvertConfig(strict=True)):
                raise RuntimeError("boom")
        assert get_convert_config().strict is False

    def test_nested_contexts(self) -> None:
        with convert_config_context(ConvertConfig(math_enabled=True)):
            with convert_config_context(ConvertConfig(strict=True)):
                assert get_convert_config().math_enabled is False
            assert get_convert_config().math_enabled is True

    def test_lexer_reads_context(self) -> None:
        with convert_config_context(ConvertConfig(math_enabled=True)):
            assert list(Lexer("$x$").tokenize()) == [Formula("x")]
        assert list(Lexer("$x$").tokenize()) == [Text("$x$")]

    def test_convert_with_config_restores_previous(self) -> None:
        set_convert_config(ConvertConfig(dash_rewrite=False))
        convert("a - b", config=ConvertConfig(math_enabled=True))
        assert get_convert_config() == ConvertConfig(dash_rewrite=False)


class TestThreadIsolation:
    def test_threads_have_independent_config(self) -> None:
        results: dict[str, str] = {}

        def worker(name: str, config: ConvertConfig) -> None:
            set_convert_config(config)
            results[name] = convert("a  - b $x$")

        threads = [
            Thread(target=worker, args=("raw", ConvertConfig(collapse_spaces=False, dash_rewrite=False))),
            Thread(target=worker, args=("math", ConvertConfig(math_enabled=True))),
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results["raw"] == "a  - b $x$"
        assert results["math"] == "a~-- b $x$"
        assert get_convert_config() == ConvertConfig()
