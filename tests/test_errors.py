"""Tests for the mdtex exception hierarchy."""

from pathlib import Path

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


class TestParseErrorFormatting:
    """Verify ParseError produces well-formatted messages."""

    def test_message_only(self) -> None:
        err = ParseError("unterminated emphasis")
        assert str(err) == "unterminated emphasis"
        assert err.lineno is None
        assert err.col_offset is None

    def test_with_line_number(self) -> None:
        err = ParseError("bad link", lineno=42)
        assert str(err) == "42 bad link"

    def test_with_line_and_column(self) -> None:
        err = ParseError("bad link", lineno=10, col_offset=5)
        assert str(err) == "10:5 bad link"

    def test_with_source_file(self) -> None:
        err = ParseError("error", lineno=1, col_offset=1, source_file="test.md")
        assert str(err) == "test.md:1:1 error"

    def test_is_mdtex_error(self) -> None:
        assert isinstance(ParseError("x"), MdTexError)
        assert isinstance(RenderError("x"), MdTexError)


class TestConversionIOErrors:
    def test_message_includes_path(self) -> None:
        err = OutputWriteError("out/doc.tex", "permission denied")
        assert str(err) == f"{Path('out/doc.tex')}: permission denied"
        assert err.path == Path("out/doc.tex")

    def test_distinct_kinds_share_base(self) -> None:
        for cls in (SourceNotFoundError, SourcePermissionError, SourceReadError, OutputWriteError):
            err = cls("x.md", "failed")
            assert isinstance(err, ConversionIOError)
            assert isinstance(err, MdTexError)
            assert not isinstance(err, ParseError)
