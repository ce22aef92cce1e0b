"""Tests for utility modules."""

import logging

import pytest


class TestLogger:
    """Tests for logger module."""

    def test_get_logger(self) -> None:
        from mdtex.utils.logger import get_logger

        logger = get_logger("mymodule")
        assert logger.name == "mdtex.mymodule"

    def test_logger_with_mdtex_prefix(self) -> None:
        from mdtex.utils.logger import get_logger

        logger = get_logger("mdtex.lexer")
        assert logger.name == "mdtex.lexer"

    def test_logger_name_starting_with_mdtex_not_submodule(self) -> None:
        """Names starting with 'mdtex' but not submodules should get prefix."""
        from mdtex.utils.logger import get_logger

        logger = get_logger("mdtex_other")
        assert logger.name == "mdtex.mdtex_other"

    def test_logger_exact_mdtex_name(self) -> None:
        from mdtex.utils.logger import get_logger

        assert get_logger("mdtex").name == "mdtex"

    def test_tokenize_logs_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        from mdtex import tokenize

        with caplog.at_level(logging.DEBUG, logger="mdtex"):
            tokenize("# a\nb")
        assert "into 3 tokens" in caplog.text


class TestStringBuilder:
    def test_append_and_build(self) -> None:
        from mdtex.stringbuilder import StringBuilder

        sb = StringBuilder()
        sb.append("a").append("").append_line("b")
        assert sb.build() == "ab\n"
        assert sb.ends_with_newline()

    def test_empty(self) -> None:
        from mdtex.stringbuilder import StringBuilder

        sb = StringBuilder()
        assert not sb
        assert not sb.ends_with_newline()
        assert sb.build() == ""
