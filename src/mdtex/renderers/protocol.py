"""TokenRenderer protocol: stable interface for token renderers.

Any renderer that implements ``render(tokens) -> str`` conforms to this
protocol. The built-in ``LatexRenderer`` is the reference implementation.

Example:
    from mdtex.renderers.protocol import TokenRenderer

    def render_page(renderer: TokenRenderer, tokens: list[Token]) -> str:
        return renderer.render(tokens)

"""

from collections.abc import Sequence
from typing import Protocol

from mdtex.tokens import Token


class TokenRenderer(Protocol):
    """Protocol for token renderers."""

    def render(self, tokens: Sequence[Token]) -> str:
        """Fold a token sequence into output text.

        Args:
            tokens: Tokens in source order.

        Returns:
            Rendered string output.

        """
        ...
