"""
Renderers for laid-out domino pages: PDF via fpdf2 and SVG via svgwrite.

Both draw in inches. Tiles are black rounded rectangles with white pips.
"""
from pathlib import Path
from typing import List, Sequence
import math

import svgwrite
from fpdf import FPDF

from domino_tile import TilePrimitives, tile_primitives
from layout import Layout, Page

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)

# Decimal places written to SVG coordinates
SVG_PRECISION = 4


def _primitives(page: Page) -> List[TilePrimitives]:
    return [tile_primitives(tile.code, tile.x, tile.y) for tile in page]


class PdfRenderer:
    """Renders pages of dominoes to a PDF, one PDF page per layout page."""

    CORNER_STEPS = 6  # Segments per rounded corner

    def __init__(self, layout: Layout):
        self.layout = layout
        self.pdf = None

    def _new_document(self) -> FPDF:
        pdf = FPDF(orientation='P', unit='in',
                   format=(self.layout.medium_width, self.layout.page_height(0)))
        pdf.set_auto_page_break(auto=False)
        return pdf

    def _draw_rounded_rect(self, x: float, y: float, w: float, h: float, r: float):
        """Fill a rectangle with rounded corners, approximating arcs with segments."""
        r = min(r, w / 2, h / 2)
        corners = [
            (x + r, y + r, math.pi),
            (x + w - r, y + r, 3 * math.pi / 2),
            (x + w - r, y + h - r, 0),
            (x + r, y + h - r, math.pi / 2),
        ]

        points = []
        for cx, cy, start in corners:
            for i in range(self.CORNER_STEPS + 1):
                angle = start + (math.pi / 2) * (i / self.CORNER_STEPS)
                points.append((cx + r * math.cos(angle), cy + r * math.sin(angle)))

        self.pdf.polygon(points, style='F')

    def draw_pip(self, cx: float, cy: float, radius: float):
        self.pdf.ellipse(cx - radius, cy - radius, radius * 2, radius * 2, style='F')

    def draw_tile(self, primitives: TilePrimitives):
        body = primitives.body
        self.pdf.set_fill_color(*BLACK)
        self._draw_rounded_rect(body.x, body.y, body.width, body.height, body.corner_radius)

        self.pdf.set_fill_color(*WHITE)
        for pip in primitives.pips:
            self.draw_pip(pip.cx, pip.cy, pip.radius)

    def render(self, pages: Sequence[Page]) -> FPDF:
        self.pdf = self._new_document()
        for page in pages:
            height = self.layout.page_height(len(page))
            self.pdf.add_page(format=(self.layout.medium_width, height))
            for primitives in _primitives(page):
                self.draw_tile(primitives)
        return self.pdf

    def to_bytes(self, pages: Sequence[Page]) -> bytes:
        self.render(pages)
        return bytes(self.pdf.output())

    def save(self, pages: Sequence[Page], output_path: str) -> Path:
        path = Path(output_path)
        path.write_bytes(self.to_bytes(pages))
        print(f"Saved {len(pages)} page(s) to: {path}")
        return path


class SvgRenderer:
    """Renders each layout page as a standalone SVG document in inches."""

    def __init__(self, layout: Layout):
        self.layout = layout

    def render_page(self, page: Page) -> svgwrite.Drawing:
        width = self.layout.medium_width
        height = self.layout.page_height(len(page))

        dwg = svgwrite.Drawing(size=(f"{width:.2f}in", f"{height:.2f}in"))
        dwg.viewbox(0, 0, round(width, 2), round(height, 2))

        p = SVG_PRECISION
        for primitives in _primitives(page):
            body = primitives.body
            dwg.add(dwg.rect(
                insert=(round(body.x, p), round(body.y, p)),
                size=(round(body.width, p), round(body.height, p)),
                rx=round(body.corner_radius, p),
                ry=round(body.corner_radius, p),
                fill='black',
            ))
            for pip in primitives.pips:
                dwg.add(dwg.circle(
                    center=(round(pip.cx, p), round(pip.cy, p)),
                    r=round(pip.radius, p),
                    fill='white',
                ))
        return dwg

    def render(self, pages: Sequence[Page]) -> List[svgwrite.Drawing]:
        return [self.render_page(page) for page in pages]

    def to_strings(self, pages: Sequence[Page]) -> List[str]:
        return [dwg.tostring() for dwg in self.render(pages)]

    def save(self, pages: Sequence[Page], output_path: str) -> List[Path]:
        """
        Write the pages as SVG files.

        A single page goes to `output_path`; several pages are numbered
        next to it (`name-01.svg`, `name-02.svg`, ...).
        """
        path = Path(output_path)
        documents = self.to_strings(pages)
        if len(documents) == 1:
            paths = [path]
        else:
            paths = [path.with_name(f"{path.stem}-{i:02d}{path.suffix or '.svg'}")
                     for i in range(1, len(documents) + 1)]

        for target, document in zip(paths, documents):
            target.write_text(document, encoding='utf-8')
            print(f"Saved SVG to: {target}")
        return paths
