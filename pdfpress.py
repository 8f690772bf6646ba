#!/usr/bin/env python3
"""
pdfpress - PDF Compressor CLI Tool
Recompresses a PDF with Ghostscript at one of four quality presets.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from gs_compressor import (
    DEFAULT_MODE,
    GhostscriptError,
    InvocationPlan,
    Mode,
    compress_pdf,
    format_size,
    get_file_size,
)

__version__ = "1.0.0"

logger = logging.getLogger(__name__)

FALLBACK_STEM = "pdfpress"
OUTPUT_SUFFIX = "_pressed"


def file_stem(name: str) -> str:
    """Strip the last extension; a leading dot alone does not start one."""
    before, _, _ = name.rpartition(".")
    return before or name


def default_output_path(source: Path) -> Path:
    """Derive '<stem>_pressed.pdf' next to the source file."""
    name = source.name
    if name in ("", ".."):
        # No usable file name: append to the path itself.
        return source / f"{FALLBACK_STEM}{OUTPUT_SUFFIX}.pdf"
    return source.with_name(f"{file_stem(name)}{OUTPUT_SUFFIX}.pdf")


def resolve_plan(args: argparse.Namespace) -> InvocationPlan:
    output = args.output if args.output is not None else default_output_path(args.input)
    return InvocationPlan(source_path=args.input, destination_path=output, mode=args.mode)


def build_parser() -> argparse.ArgumentParser:
    mode_help = "\n".join(f"  {mode.value:<9} {mode.description}" for mode in Mode)
    parser = argparse.ArgumentParser(
        prog='pdfpress',
        description='Compress PDF files with Ghostscript',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Modes:
{mode_help}

Examples:
  pdfpress report.pdf                       # writes report_pressed.pdf
  pdfpress report.pdf small.pdf -m screen
  pdfpress scans/book.pdf --mode prepress

Requires Ghostscript (gs) on PATH.
        """
    )

    parser.add_argument(
        'input',
        type=Path,
        help='Path to the PDF file to compress'
    )

    parser.add_argument(
        'output',
        type=Path,
        nargs='?',
        default=None,
        help=f'Output PDF file path (default: input name with "{OUTPUT_SUFFIX}" appended, same folder)'
    )

    parser.add_argument(
        '-m', '--mode',
        type=Mode,
        choices=list(Mode),
        default=DEFAULT_MODE,
        help=f'Compression mode, determines quality and file size (default: {DEFAULT_MODE})'
    )

    parser.add_argument(
        '--log-level',
        default='WARNING',
        choices=['CRITICAL', 'ERROR', 'WARNING', 'INFO', 'DEBUG'],
        help='Verbosity of logging output (default: WARNING)'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    return parser


def print_summary(plan: InvocationPlan) -> None:
    try:
        original_size = get_file_size(plan.source_path)
        compressed_size = get_file_size(plan.destination_path)
    except OSError:
        return

    print(f"Original: {format_size(original_size)} → Compressed: {format_size(compressed_size)}")
    if original_size:
        reduction = ((original_size - compressed_size) / original_size) * 100
        print(f"Size reduction: {reduction:.1f}%")


def main(argv: Optional[List[str]] = None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    plan = resolve_plan(args)
    logger.info("Compressing %s -> %s (mode: %s)", plan.source_path, plan.destination_path, plan.mode)

    try:
        returncode = compress_pdf(plan)
    except GhostscriptError as e:
        logger.debug("Ghostscript failure", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    # gs's own exit status does not decide ours; it ran and was waited on.
    if returncode == 0:
        print_summary(plan)
        print(f"✓ Compressed PDF saved to: {plan.destination_path}")
    sys.exit(0)


if __name__ == '__main__':
    main()
