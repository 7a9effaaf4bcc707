"""Command line interface for yrxlsim.

Usage:
    yrxlsim render <file> [--format ascii|html] [--view formulas|values|both] [-o PATH]
    yrxlsim render -                 Read YAML from stdin
    yrxlsim --examples               Print every bundled example as one YAML document
"""

from __future__ import annotations

import argparse
import sys
from importlib import resources
from pathlib import Path
from typing import List, Optional

import yaml
from loguru import logger

from yrxlsim import __version__
from yrxlsim.config import DEFAULT_FORMAT, DEFAULT_VIEW, FORMATS, VIEWS, default_config
from yrxlsim.exceptions import YrxlsimError
from yrxlsim.logging import configure_logging
from yrxlsim.pipeline import build_html_page, load_document, render_document
from yrxlsim.spreadsheet.sheet import get_sheets

DESCRIPTION = """\
Render yrxlsim YAML spreadsheet files to ASCII (terminal) or standalone HTML.

A document is a single sheet (rows, cells, fill, values, meta) or several
sheets under a top-level "sheets" list. Cells starting with = are formulas;
prefix a literal that starts with = with a single quote ('=not a formula).
"""

EXAMPLES_EPILOG = """\
examples:
  yrxlsim render sheet.yaml
  yrxlsim render sheet.yaml --format html -o sheet.html
  yrxlsim render sheet.yaml --view values
  cat sheet.yaml | yrxlsim render -
  yrxlsim --examples > examples.yaml && yrxlsim render examples.yaml
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="yrxlsim",
        description=DESCRIPTION,
        epilog=EXAMPLES_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-e", "--examples",
        action="store_true",
        help="Print all bundled example sheets as one YAML document, then usage hints",
    )
    subparsers = parser.add_subparsers(dest="command")

    render = subparsers.add_parser(
        "render",
        help="Render a YAML sheet file",
        description="Render a YAML sheet file to ASCII or standalone HTML.",
    )
    render.add_argument("file", help="Path to a .yaml/.yml sheet file, or - for stdin")
    render.add_argument(
        "--format", choices=FORMATS, default=DEFAULT_FORMAT,
        help=f"Output format (default: {DEFAULT_FORMAT})",
    )
    render.add_argument(
        "--view", choices=VIEWS, default=DEFAULT_VIEW,
        help=f"Which view(s) to include (default: {DEFAULT_VIEW})",
    )
    render.add_argument("-o", "--output", help="Write output to this file instead of stdout")
    render.add_argument(
        "--no-evaluate", action="store_true",
        help="Skip formula evaluation; formula cells show a placeholder in the values view",
    )
    render.add_argument(
        "--include-source", action="store_true",
        help="Embed the YAML source in HTML output",
    )
    render.add_argument("-v", "--verbose", action="store_true", help="Log each fill operation")
    return parser


def read_source(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def write_output(content: str, output: Optional[str]) -> None:
    if output:
        Path(output).write_text(content, encoding="utf-8")
        return
    sys.stdout.write(content if content.endswith("\n") else content + "\n")


def cmd_render(args: argparse.Namespace) -> int:
    """Render a sheet file (or stdin) to stdout or --output."""
    configure_logging(args.verbose)
    config = default_config()
    if args.no_evaluate:
        config = config.without_evaluator()

    try:
        source = read_source(args.file)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: cannot read {args.file}: {e}", file=sys.stderr)
        return 1

    try:
        document = load_document(source, config)
        if args.format == "html":
            content = build_html_page(
                document,
                view=args.view,
                config=config,
                source=source if args.include_source else None,
            )
        else:
            content = render_document(document, format="ascii", view=args.view, config=config)
    except YrxlsimError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        write_output(content, args.output)
    except OSError as e:
        print(f"Error: cannot write {args.output}: {e}", file=sys.stderr)
        return 1
    if args.output:
        logger.info("Wrote {}", args.output)
    return 0


def example_files() -> List[Path]:
    """Bundled example documents, sorted by file name."""
    folder = resources.files("yrxlsim") / "examples"
    return sorted(
        (Path(str(entry)) for entry in folder.iterdir()
         if entry.name.lower().endswith((".yaml", ".yml"))),
        key=lambda p: p.name,
    )


def cmd_examples() -> int:
    """Print every bundled example as a single multi-sheet YAML document."""
    configure_logging()
    sheets = []
    for path in example_files():
        try:
            document = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as e:
            print(f"yrxlsim: Skip {path.name}: {e}", file=sys.stderr)
            continue
        sheets.extend(get_sheets(document))
    if not sheets:
        print("Error: no bundled example sheets found", file=sys.stderr)
        return 1

    sys.stdout.write(yaml.safe_dump({"sheets": sheets}, sort_keys=False, allow_unicode=True, width=1000))
    sys.stdout.write(
        "\n# --- Instructions ---\n"
        "# To render the above YAML to ASCII, pipe it to yrxlsim:\n"
        "#   yrxlsim -e | yrxlsim render -\n"
        "# To save to a file and then render:\n"
        "#   yrxlsim --examples > examples.yaml\n"
        "#   yrxlsim render examples.yaml\n"
    )
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point; returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.examples:
        return cmd_examples()
    if args.command == "render":
        return cmd_render(args)

    parser.print_usage(sys.stderr)
    return 1
