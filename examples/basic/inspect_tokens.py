"""Look at the token stream between the two stages."""

from mdtex import render, tokenize
from mdtex.serialization import to_json

tokens = tokenize("Some *italic* text\n- one\n- two\n1. first")
print(to_json(tokens, indent=2))
print(render(tokens))
