"""cProfile wrapper for mdtex conversion.

Run with:
    python benchmarks/profile_convert.py
"""

from __future__ import annotations

import cProfile
import io
import pstats
import sys

SAMPLE = """# Section
Some *italic* and **bold** text with a [link](https://example.com) - and a dash.
- bullet one
- bullet two
1. first
2. second
## Subsection
Plain  text  with  doubled  spaces.
"""


def convert_corpus(iterations: int = 200) -> None:
    """Convert a synthetic document multiple times."""
    from mdtex import Converter

    tex = Converter(math_enabled=True)
    doc = SAMPLE * 50

    for _ in range(iterations):
        tex(doc)


def main() -> None:
    """Run profiling and print results."""
    print("mdtex Profiling")
    print("=" * 60)
    print(f"Python {sys.version.split()[0]}")

    iterations = 200
    print(f"\nConverting sample document {iterations}x...")

    profiler = cProfile.Profile()
    profiler.enable()

    convert_corpus(iterations)

    profiler.disable()

    print("\n" + "=" * 60)
    print("TOP 30 FUNCTIONS BY CUMULATIVE TIME")
    print("=" * 60 + "\n")

    s = io.StringIO()
    ps = pstats.Stats(profiler, stream=s).sort_stats(pstats.SortKey.CUMULATIVE)
    ps.print_stats(30)
    print(s.getvalue())

    print("\n" + "=" * 60)
    print("TOP 30 FUNCTIONS BY TOTAL (SELF) TIME")
    print("=" * 60 + "\n")

    s = io.StringIO()
    ps = pstats.Stats(profiler, stream=s).sort_stats(pstats.SortKey.TIME)
    ps.print_stats(30)
    print(s.getvalue())


if __name__ == "__main__":
    main()
