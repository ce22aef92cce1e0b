"""Token serialization: JSON round-trip for mdtex tokens.

Converts tokens to/from JSON-compatible dicts for debugging and inspection
(``mdtex --dump-tokens``). Output is deterministic (sorted keys).

Example:
    from mdtex import tokenize
    from mdtex.serialization import to_json, from_json

    tokens = tokenize("# Hello **World**")
    assert from_json(to_json(tokens)) == tokens

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from collections.abc import Sequence
from dataclasses import fields
from typing import Any

from mdtex.tokens import TOKEN_TYPES, Token

# Registry of token type names to classes for deserialization
_TOKEN_TYPES: dict[str, type] = {cls.__name__: cls for cls in TOKEN_TYPES}


def to_dict(token: Token) -> dict[str, Any]:
    """Convert a token to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.
    """
    result: dict[str, Any] = {"_type": type(token).__name__}
    for f in fields(token):
        result[f.name] = getattr(token, f.name)
    return result


def from_dict(data: dict[str, Any]) -> Token:
    """Reconstruct a token from a dict produced by :func:`to_dict`.

    Raises:
        ValueError: If ``_type`` is missing or names no token type.
    """
    type_name = data.get("_type")
    cls = _TOKEN_TYPES.get(type_name) if isinstance(type_name, str) else None
    if cls is None:
        raise ValueError(f"Unknown token type: {type_name!r}")
    kwargs = {k: v for k, v in data.items() if k != "_type"}
    return cls(**kwargs)


def to_json(tokens: Sequence[Token], *, indent: int | None = None) -> str:
    """Serialize a token sequence to a JSON array string."""
    return json.dumps(
        [to_dict(t) for t in tokens],
        sort_keys=True,
        indent=indent,
        ensure_ascii=False,
    )


def from_json(json_str: str) -> list[Token]:
    """Deserialize a JSON array string produced by :func:`to_json`."""
    return [from_dict(item) for item in json.loads(json_str)]


__all__ = ["from_dict", "from_json", "to_dict", "to_json"]
