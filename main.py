#!/usr/bin/env python3
"""
Shaper Domino Label Generator

Generates printable domino tiles: two columns of eight pips encoding a
unique 16-bit code, laid out on paper pages or continuous label strips.

Usage:
    python main.py                          # One letter page as PDF
    python main.py --pages 4 --paper a4     # Four A4 pages
    python main.py --strip 36 --width 2.4   # Label strip, one tile per row
    python main.py --info                   # Code set statistics
"""

import argparse
import random
import sys

from domino_codes import ValidCodeSet, find_symmetric_codes, format_code
from factory import DominoFactory
from measurement import Measurement
from page_setup import PAPER_SIZES, PageSetup
from renderer import PdfRenderer, SvgRenderer


def display_code_info(code_set: ValidCodeSet, count: int = 10):
    """Display information about the valid code set."""
    print("=" * 60)
    print("SHAPER DOMINO CODES")
    print("=" * 60)

    print(f"\n  Valid dominoes:     {len(code_set)}")
    print(f"  Symmetric (180°):   {len(find_symmetric_codes(code_set))}")

    print(f"\n  First {min(count, len(code_set))} codes:")
    print("-" * 40)
    for i, code in enumerate(code_set.codes[:count]):
        print(f"  {i + 1:3}. {format_code(code)}")


def build_page_setup(args) -> PageSetup:
    """Page setup from --paper, with --width/--height/--margin overriding it."""
    margin = Measurement.parse(args.margin) if args.margin else None

    if args.strip is not None:
        if args.paper or args.height:
            raise ValueError("--paper and --height apply to page output only; "
                             "a strip takes its size from --width")
        width = Measurement.parse(args.width) if args.width else Measurement.parse("2.4in")
        return PageSetup.continuous_label(width, margin)

    setup = PAPER_SIZES[args.paper or 'letter'](margin)
    if args.width or args.height:
        setup = PageSetup(
            Measurement.parse(args.width) if args.width else setup.width,
            Measurement.parse(args.height) if args.height else setup.height,
            setup.margin,
        )
    return setup


def generate(args) -> list:
    """Generate the requested document and write it; returns the written paths."""
    page_setup = build_page_setup(args)
    spacing = Measurement.parse(args.spacing) if args.spacing else None
    rng = random.Random(args.seed) if args.seed is not None else None

    factory = DominoFactory(
        spacing=spacing,
        page_setup=page_setup,
        rng=rng,
        center=not args.no_center,
        allow_repeats=args.allow_repeats,
    )

    if args.strip is not None:
        columns = 1 if args.layout == 'strip' else None
        layout, pages = factory.generate_strip(args.strip, columns=columns)
        print(f"Strip: {page_setup}, {layout.tiles_per_row} per row, "
              f"{layout.content_height:.2f}in long")
    else:
        layout, pages = factory.generate_pages(args.pages)
        print(f"Pages: {page_setup}, {layout.tiles_per_row} x {layout.tiles_per_column} "
              f"= {layout.tiles_per_page} per page")

    output = args.output or f"dominoes.{args.format}"
    if args.format == 'svg':
        return SvgRenderer(layout).save(pages, output)
    return [PdfRenderer(layout).save(pages, output)]


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Shaper Domino Label Generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py --pages 2                        # Two letter pages (PDF)
  python main.py --paper a4 --spacing 3mm         # A4 page, 3mm between columns
  python main.py --strip 20 --width 2.4 -f svg    # 20-tile label strip (SVG)
  python main.py --strip 40 --layout rows         # Fill each strip row
  python main.py --info                           # Code set statistics
        """
    )

    parser.add_argument(
        '--pages',
        type=int,
        default=1,
        help='Number of full pages to generate (default: 1)'
    )
    parser.add_argument(
        '--strip',
        type=int,
        metavar='COUNT',
        help='Generate COUNT dominoes on a continuous strip instead of pages'
    )
    parser.add_argument(
        '--paper',
        choices=sorted(PAPER_SIZES),
        help='Paper size for page output (default: letter; not valid with --strip)'
    )
    parser.add_argument(
        '--width',
        help='Medium width, e.g. 8.5in, 210mm, "2 3/8" (strip default: 2.4in)'
    )
    parser.add_argument('--height', help='Page height (page output only; not valid with --strip)')
    parser.add_argument('--margin', help='Page margin (default depends on paper)')
    parser.add_argument('--spacing', help='Gap between tile columns (default: 0.125in)')
    parser.add_argument(
        '--layout',
        choices=['strip', 'rows'],
        default='strip',
        help='Strip layout: one tile per row, or as many as fit (default: strip)'
    )
    parser.add_argument(
        '--format', '-f',
        choices=['pdf', 'svg'],
        default='pdf',
        help='Output format (default: pdf)'
    )
    parser.add_argument(
        '--output', '-o',
        help='Output file (default: dominoes.<format>)'
    )
    parser.add_argument(
        '--no-center',
        action='store_true',
        help='Align tiles to the left edge instead of centering each row'
    )
    parser.add_argument(
        '--allow-repeats',
        action='store_true',
        help='Reuse codes once every valid code has been used'
    )
    parser.add_argument('--seed', type=int, help='Random seed for reproducible sheets')
    parser.add_argument(
        '--info',
        action='store_true',
        help='Display information about the valid code set'
    )

    args = parser.parse_args(argv)

    if args.info:
        display_code_info(ValidCodeSet.default())
        return 0

    try:
        generate(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
