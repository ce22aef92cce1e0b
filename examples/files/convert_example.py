"""Convert data/example.md into data/output.tex as a standalone document."""

import sys
from pathlib import Path

from mdtex import ConversionIOError, ConvertConfig, convert_file

HERE = Path(__file__).parent

try:
    written = convert_file(
        HERE / "data" / "example.md",
        HERE / "data" / "output.tex",
        config=ConvertConfig(standalone=True, math_enabled=True),
    )
except ConversionIOError as e:
    print(f"Error: {e}", file=sys.stderr)
    sys.exit(1)

print(f"Tex was saved to {written}")
