"""
CLI entry point for supertable.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path

from .config import DEFAULT_CONFIG, Config
from .converter import PandocError, convert_file, run_filter
from .layout import LAYOUTS
from .messages import print_error, print_info
from .pandoc import PandocFormatError


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="supertable",
        description="Pandoc filter rendering tables as supertabular LaTeX",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  pandoc input.md -o output.tex --filter supertable    Use as a pandoc filter
  supertable -i input.md                                Convert to input.tex
  supertable -i input.md -o output.tex --layout simple  Fixed alignment columns
  supertable --init-config                              Generate default config file
        """,
    )
    parser.add_argument("target_format", nargs="?", help="Output format passed by pandoc (filter mode)")
    parser.add_argument("-i", "--input", help="Input Markdown file path (runs pandoc)")
    parser.add_argument("-o", "--output", help="Output LaTeX file path (default: input with .tex extension)")
    parser.add_argument(
        "-c", "--config", default="supertable.json", help="Config file path (default: supertable.json)"
    )
    parser.add_argument(
        "--layout",
        choices=sorted(LAYOUTS),
        help="Column layout (default: from config); overrides supertable-layout document metadata",
    )
    parser.add_argument("--trace", action="store_true", help="Print per-table diagnostics to stderr")
    parser.add_argument("--init-config", action="store_true", help="Generate default config file")
    parser.add_argument("-v", "--version", action="store_true", help="Show version")

    args = parser.parse_args(argv)

    if args.version:
        from . import __version__

        print(f"supertable {__version__}")
        return 0

    if args.init_config:
        import json

        config_path = Path(args.config)
        if config_path.exists():
            print_error(f"Config file already exists: {config_path}")
            return 1
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(DEFAULT_CONFIG, f, ensure_ascii=False, indent=4)
        print_info(f"Config file created: {config_path}")
        return 0

    # Load config
    config_path = Path(args.config)
    if config_path.exists():
        config = Config.from_file(config_path)
    else:
        config = Config()
    if args.layout:
        config = replace(config, layout=args.layout, layout_from_metadata=False)
    if args.trace:
        config = replace(config, trace=True)

    if args.input:
        input_path = Path(args.input)
        if not input_path.exists():
            print_error(f"Input file not found: {input_path}")
            return 1
        try:
            convert_file(input_path, args.output, config)
            return 0
        except (PandocError, PandocFormatError) as e:
            print_error(f"Conversion failed: {e}")
            return 1

    if args.target_format and args.target_format not in ("latex", "beamer"):
        print_info(f"Target format is {args.target_format}, tables are still rendered as LaTeX")

    try:
        run_filter(sys.stdin, sys.stdout, config)
        return 0
    except PandocFormatError as e:
        print_error(f"Filter failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
