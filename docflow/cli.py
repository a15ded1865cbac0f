"""
Command-line interface for docflow.

Usage:
    docflow render layout.json --output invoice.pdf
    docflow render layout.json --backend html --output invoice.pdf
    docflow render layout.json --markup-only --output invoice.html
    docflow plan layout.json --json
    docflow version
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from .config import RenderConfig
from .exceptions import DocflowError
from .utils.logger import configure_logging

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="docflow",
        description="docflow - paginated business documents from declarative layouts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  docflow render invoice.json -o invoice.pdf
  docflow render invoice.json --markup-only -o invoice.html
  docflow plan invoice.json
  docflow version
        """,
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (default: DOCFLOW_LOG_LEVEL or INFO)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    render_parser = subparsers.add_parser("render", help="Render a JSON layout to PDF or HTML")
    render_parser.add_argument("input", help="Input layout JSON file")
    render_parser.add_argument(
        "-o", "--output",
        help="Output file path (default: input name with .pdf or .html)",
    )
    render_parser.add_argument(
        "--backend",
        choices=["canvas", "html"],
        default="canvas",
        help="PDF backend (default: canvas)",
    )
    render_parser.add_argument(
        "--markup-only",
        action="store_true",
        help="Write the HTML markup instead of a PDF",
    )

    plan_parser = subparsers.add_parser("plan", help="Show how records are split across pages")
    plan_parser.add_argument("input", help="Input layout JSON file")
    plan_parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )

    subparsers.add_parser("version", help="Show version information")

    return parser


def _load_layout(path: Path):
    from .layouts.loader import layout_from_dict

    with path.open("r", encoding="utf-8") as handle:
        data = json.load(handle)
    return layout_from_dict(data)


def cmd_render(args, config: RenderConfig) -> int:
    """Handle render command."""
    from .renderers import CanvasRenderer, HTMLRenderer

    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: File not found: {input_path}", file=sys.stderr)
        return 1

    suffix = ".html" if args.markup_only else ".pdf"
    output_path = Path(args.output) if args.output else input_path.with_suffix(suffix)

    document = _load_layout(input_path).build()
    if args.markup_only:
        html = HTMLRenderer(config=config).render_markup(document)
        output_path.write_text(html, encoding="utf-8")
    else:
        renderer = HTMLRenderer(config=config) if args.backend == "html" else CanvasRenderer()
        document.write(output_path, renderer)

    print(f"Saved: {output_path} ({len(document.pages)} pages)")
    return 0


def cmd_plan(args) -> int:
    """Handle plan command."""
    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: File not found: {input_path}", file=sys.stderr)
        return 1

    layout = _load_layout(input_path)
    inputs = layout.pagination_inputs()
    plan = layout.plan()
    info = {
        "style": layout.style.value,
        "records": len(layout.records),
        "pages": plan.page_count,
        "rows_per_page": [len(chunk) for chunk in plan.chunks],
        "max_rows_first": plan.max_rows_first,
        "max_rows_continuation": plan.max_rows_continuation,
        "overflow_page_added": plan.overflow_page_added,
        "body_height": inputs.body_height,
        "first_page_overhead": inputs.first_page_overhead,
        "trailing_height": inputs.trailing_height,
    }

    if args.json:
        print(json.dumps(info, indent=2))
    else:
        print(f"Layout: {info['style']}")
        print(f"   Records: {info['records']}")
        print(f"   Pages: {info['pages']}")
        for index, rows in enumerate(info["rows_per_page"], start=1):
            print(f"   Page {index}: {rows} rows")
        if plan.overflow_page_added:
            print("   Trailing content moved to its own page")
    return 0


def cmd_version(args=None) -> int:
    """Handle version command."""
    from .version import __version__

    print(f"docflow v{__version__}")
    return 0


def main(argv=None) -> int:
    """Main entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = RenderConfig.from_env()
        configure_logging(args.log_level or config.log_level)
    except ValueError as exc:
        print(f"Error: invalid configuration: {exc}", file=sys.stderr)
        return 1

    try:
        if args.command == "render":
            return cmd_render(args, config)
        if args.command == "plan":
            return cmd_plan(args)
        if args.command == "version":
            return cmd_version(args)
    except (DocflowError, json.JSONDecodeError) as exc:
        logger.error(f"{exc}")
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
