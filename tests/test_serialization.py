"""Tests for mdtex.serialization: token JSON round-trip."""

import json

import pytest

from mdtex import tokenize
from mdtex.config import ConvertConfig
from mdtex.serialization import from_dict, from_json, to_dict, to_json
from mdtex.tokens import Link, Newline


class TestToDict:
    def test_link(self) -> None:
        assert to_dict(Link("docs", "https://example.com")) == {
            "_type": "Link",
            "text": "docs",
            "url": "https://example.com",
        }

    def test_newline_has_only_type(self) -> None:
        assert to_dict(Newline()) == {"_type": "Newline"}


class TestFromDict:
    def test_unknown_type(self) -> None:
        with pytest.raises(ValueError, match="Unknown token type"):
            from_dict({"_type": "Table"})

    def test_missing_type(self) -> None:
        with pytest.raises(ValueError):
            from_dict({"text": "x"})


class TestJson:
    def test_document_round_trip(self) -> None:
        source = "# T\nSome *i* **b** [l](u)\n- a\n1. b\n$x$ $$y$$"
        tokens = tokenize(source, config=ConvertConfig(math_enabled=True))
        assert from_json(to_json(tokens)) == tokens

    def test_deterministic_sorted_keys(self) -> None:
        out = to_json([Link("t", "u")])
        assert out == '[{"_type": "Link", "text": "t", "url": "u"}]'

    def test_indent(self) -> None:
        out = to_json([Newline()], indent=2)
        assert json.loads(out) == [{"_type": "Newline"}]
        assert "\n" in out

    def test_non_ascii_kept(self) -> None:
        assert "Überblick" in to_json(tokenize("# Überblick"))
