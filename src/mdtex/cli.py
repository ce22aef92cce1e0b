"""Command-line interface.

Usage:
    mdtex INPUT [-o OUTPUT] [--math] [--strict] [--standalone]
          [--document-class NAME] [--no-collapse-spaces] [--no-dash-rewrite]
          [--dump-tokens] [-v]

Exit codes:
    0  success
    1  the input could not be read or the output could not be written
    2  strict mode rejected the markup (argparse also uses 2 for bad usage)
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from mdtex import __version__
from mdtex.config import ConvertConfig, convert_config_context
from mdtex.errors import ConversionIOError, ParseError
from mdtex.files import read_source, resolve_output_path, write_output
from mdtex.lexer import tokenize
from mdtex.renderers.latex import render_latex
from mdtex.serialization import to_json
from mdtex.utils.logger import get_logger

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_PARSE_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdtex",
        description="Convert lightweight Markdown to LaTeX",
    )
    parser.add_argument("input", help="Markdown file to convert")
    parser.add_argument(
        "-o",
        "--output",
        help="Output file (default: INPUT with a .tex suffix; never INPUT itself)",
    )
    parser.add_argument("--math", action="store_true", help="Recognise $inline$ and $$display$$ math")
    parser.add_argument("--strict", action="store_true", help="Fail on unterminated emphasis, links or math")
    parser.add_argument("--standalone", action="store_true", help="Emit a complete LaTeX document")
    parser.add_argument(
        "--document-class",
        default="article",
        help="Document class for --standalone (default: article)",
    )
    parser.add_argument(
        "--no-collapse-spaces",
        action="store_true",
        help="Keep doubled spaces in text",
    )
    parser.add_argument(
        "--no-dash-rewrite",
        action="store_true",
        help="Do not rewrite ' -' into a non-breaking en dash",
    )
    parser.add_argument(
        "--dump-tokens",
        action="store_true",
        help="Print the token stream as JSON instead of writing LaTeX",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def config_from_args(args: argparse.Namespace) -> ConvertConfig:
    return ConvertConfig(
        collapse_spaces=not args.no_collapse_spaces,
        dash_rewrite=not args.no_dash_rewrite,
        math_enabled=args.math,
        strict=args.strict,
        standalone=args.standalone,
        document_class=args.document_class,
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    config = config_from_args(args)

    try:
        source = read_source(args.input)
        with convert_config_context(config):
            tokens = tokenize(source, source_file=args.input)
            if args.dump_tokens:
                print(to_json(tokens, indent=2))
                return EXIT_OK
            latex = render_latex(tokens)
        destination = write_output(resolve_output_path(args.input, args.output), latex)
    except ConversionIOError as e:
        print(f"mdtex: {e}", file=sys.stderr)
        return EXIT_IO_ERROR
    except ParseError as e:
        print(f"mdtex: {e}", file=sys.stderr)
        return EXIT_PARSE_ERROR

    logger.info("Wrote %s", destination)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
