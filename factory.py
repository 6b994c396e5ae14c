"""
Domino sheet generation: picks codes, lays them out and hands them to a renderer.
"""
from typing import List, Optional, Tuple

from domino_codes import ValidCodeSet, sample_repeating, sample_unique
from layout import Layout, Page, compute_layout
from measurement import Measurement
from page_setup import DEFAULT_STRIP_SPACING, PageSetup
from renderer import PdfRenderer, SvgRenderer


class DominoFactory:
    """
    Generates pages or strips of unique dominoes for one page setup.

    `spacing` is the horizontal gap between tile columns; the vertical gap
    between rows is the fixed tile margin.
    """

    def __init__(
        self,
        spacing: Optional[Measurement] = None,
        page_setup: Optional[PageSetup] = None,
        code_set: Optional[ValidCodeSet] = None,
        rng=None,
        center: bool = True,
        allow_repeats: bool = False,
    ):
        self.spacing = spacing if spacing is not None else DEFAULT_STRIP_SPACING
        self.page_setup = page_setup if page_setup is not None else PageSetup.letter_portrait()
        self.code_set = code_set if code_set is not None else ValidCodeSet.default()
        self.rng = rng
        self.center = center
        self.allow_repeats = allow_repeats

    def _layout(self, height: Optional[float], count: Optional[int] = None,
                columns: Optional[int] = None) -> Layout:
        width, _, margin = self.page_setup.resolve()
        return compute_layout(
            width,
            height,
            margin=margin,
            spacing=self.spacing.to_inches(),
            count=count,
            center=self.center,
            columns=columns,
        )

    def _pick(self, count: int) -> List[int]:
        if self.allow_repeats:
            return sample_repeating(count, self.code_set.codes, self.rng)
        return sample_unique(count, self.code_set.codes, self.rng)

    def page_layout(self) -> Layout:
        """Layout of one page of this setup (the setup must have a height)."""
        _, height, _ = self.page_setup.resolve()
        if height is None:
            raise ValueError("Page layout needs a fixed page height; use generate_strip for continuous media")
        return self._layout(height)

    def generate_pages(self, page_count: int) -> Tuple[Layout, List[Page]]:
        """Fill `page_count` whole pages with dominoes."""
        if page_count < 1:
            raise ValueError(f"Page count must be at least 1 (got {page_count})")

        layout = self.page_layout()
        codes = self._pick(page_count * layout.tiles_per_page)
        return layout, layout.paginate(codes)

    def generate_strip(self, count: int, columns: Optional[int] = 1) -> Tuple[Layout, List[Page]]:
        """
        Lay `count` dominoes on a strip that grows to fit.

        `columns=1` gives a single file of tiles; `None` fits as many per
        row as the width allows.
        """
        if count < 0:
            raise ValueError(f"Domino count must not be negative (got {count})")

        layout = self._layout(None, count=count, columns=columns)
        codes = self._pick(count)
        return layout, layout.paginate(codes)

    def pages_svg(self, page_count: int) -> List[str]:
        layout, pages = self.generate_pages(page_count)
        return SvgRenderer(layout).to_strings(pages)

    def pages_pdf(self, page_count: int) -> bytes:
        layout, pages = self.generate_pages(page_count)
        return PdfRenderer(layout).to_bytes(pages)

    def strip_svg(self, count: int, columns: Optional[int] = 1) -> str:
        layout, pages = self.generate_strip(count, columns)
        (document,) = SvgRenderer(layout).to_strings(pages)
        return document

    def strip_pdf(self, count: int, columns: Optional[int] = 1) -> bytes:
        layout, pages = self.generate_strip(count, columns)
        return PdfRenderer(layout).to_bytes(pages)
