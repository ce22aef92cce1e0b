"""mdtex renderers.

Renderers fold a token sequence into an output format.

Available Renderers:
- LatexRenderer: Renders tokens to LaTeX using the StringBuilder pattern

"""

from mdtex.renderers.latex import LatexRenderer, render_latex
from mdtex.renderers.protocol import TokenRenderer

__all__ = ["LatexRenderer", "TokenRenderer", "render_latex"]
