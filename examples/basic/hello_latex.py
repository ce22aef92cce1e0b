"""Convert Markdown to LaTeX in 3 lines with zero config."""

from mdtex import convert

latex = convert("# Hello **World**")
print(latex)
