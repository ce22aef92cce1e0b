"""Tests for mdtex.text cleaning helpers."""

import pytest

from mdtex.text import NBSP_EN_DASH, clean_text, collapse_spaces, rewrite_dashes


class TestCollapseSpaces:
    def test_double_space(self) -> None:
        assert collapse_spaces("a  b") == "a b"

    def test_single_pass(self) -> None:
        """A run of three spaces only loses one."""
        assert collapse_spaces("a   b") == "a  b"

    def test_untouched(self) -> None:
        assert collapse_spaces("a b") == "a b"


class TestRewriteDashes:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("a - b", "a~-- b"),
            ("a -- b", "a~-- b"),
            ("a --- b", "a~--- b"),
            ("well-known", "well-known"),
            ("-leading", "-leading"),
        ],
    )
    def test_rewrite(self, text: str, expected: str) -> None:
        assert rewrite_dashes(text) == expected

    def test_marker_constant(self) -> None:
        assert NBSP_EN_DASH == "~--"


class TestCleanText:
    def test_both_steps(self) -> None:
        assert clean_text("a  -  b") == "a~-- b"

    def test_collapse_only(self) -> None:
        assert clean_text("a  - b", dashes=False) == "a - b"

    def test_dashes_only(self) -> None:
        assert clean_text("a  - b", collapse=False) == "a ~-- b"

    def test_disabled(self) -> None:
        assert clean_text("a  - b", collapse=False, dashes=False) == "a  - b"

    def test_empty(self) -> None:
        assert clean_text("") == ""
