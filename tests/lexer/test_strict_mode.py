"""Tests for strict mode: malformed markup raises ParseError with a location."""

import pytest

from mdtex import tokenize
from mdtex.config import ConvertConfig
from mdtex.errors import MdTexError, ParseError
from mdtex.tokens import Bold, Formula, Link, Text

STRICT = ConvertConfig(strict=True)
STRICT_MATH = ConvertConfig(strict=True, math_enabled=True)


class TestStrictRejects:
    @pytest.mark.parametrize(
        "source,message",
        [
            ("*oops", "unterminated emphasis"),
            ("**oops", "unterminated emphasis"),
            ("**a*b", "bold span closed by a single '*'"),
            ("[abc", "link text is missing ']'"),
            ("[a]b)", "link is missing '(' after ']'"),
            ("[a](b", "link URL is missing ')'"),
        ],
    )
    def test_malformed_markup(self, source: str, message: str) -> None:
        with pytest.raises(ParseError) as exc_info:
            tokenize(source, config=STRICT)
        assert exc_info.value.message == message

    def test_unterminated_math(self) -> None:
        with pytest.raises(ParseError, match="unterminated math"):
            tokenize("$x", config=STRICT_MATH)

    def test_display_math_single_close(self) -> None:
        with pytest.raises(ParseError, match="display math"):
            tokenize("$$x$", config=STRICT_MATH)

    def test_location_is_span_start(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            tokenize("ok\n  **x*", config=STRICT)
        err = exc_info.value
        assert err.lineno == 2
        assert err.col_offset == 3

    def test_source_file_in_message(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            tokenize("*oops", config=STRICT, source_file="doc.md")
        assert str(exc_info.value) == "doc.md:1:1 unterminated emphasis"

    def test_is_mdtex_error(self) -> None:
        with pytest.raises(MdTexError):
            tokenize("[x", config=STRICT)


class TestStrictAccepts:
    def test_well_formed_input(self) -> None:
        source = "# T\nSome **b** and *i* [l](u)\n- a\n1. b"
        assert tokenize(source, config=STRICT) == tokenize(source)

    def test_well_formed_math(self) -> None:
        assert tokenize("$a$ $$b$$", config=STRICT_MATH) == [
            Formula("a", False),
            Text(" "),
            Formula("b", True),
        ]

    def test_default_mode_degrades_silently(self) -> None:
        assert tokenize("**a*b") == [Bold("a"), Text("b")]
        assert tokenize("[a](b") == [Link("a", "b")]
