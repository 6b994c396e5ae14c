"""
Page layout for domino tiles.

Works out how many tiles fit across and down a medium, where the row is
centered, and splits a sequence of codes into pages of placed tiles.
Every length is in inches; callers convert measurements before calling in.
"""
from dataclasses import dataclass, field
from typing import List, Optional, Sequence
import math

from domino_tile import TILE_HEIGHT, TILE_MARGIN, TILE_WIDTH

# Absorbs float error so that an exact fit isn't floored one tile short
FIT_TOLERANCE = 1e-9


class LayoutInfeasibleError(ValueError):
    """Raised when not even one tile fits on the medium."""


@dataclass(frozen=True)
class PlacedTile:
    """A code with its grid slot and physical top-left corner."""
    code: int
    column: int
    row: int
    x: float
    y: float


@dataclass
class Page:
    """One output sheet (or the whole strip)."""
    number: int
    tiles: List[PlacedTile] = field(default_factory=list)

    @property
    def codes(self) -> List[int]:
        return [tile.code for tile in self.tiles]

    @property
    def rows(self) -> int:
        return max((tile.row for tile in self.tiles), default=-1) + 1

    def __len__(self):
        return len(self.tiles)

    def __iter__(self):
        return iter(self.tiles)


@dataclass(frozen=True)
class Layout:
    """Tile capacity and placement numbers for one medium."""
    medium_width: float
    medium_height: Optional[float]
    spacing: float
    tiles_per_row: int
    tiles_per_column: Optional[int]
    tiles_per_page: Optional[int]
    x_offset: float
    content_height: float

    @property
    def is_strip(self) -> bool:
        return self.medium_height is None

    def page_height(self, tile_count: int) -> float:
        """Height of a sheet: fixed pages keep theirs, strips grow to fit."""
        if self.medium_height is not None:
            return self.medium_height
        return content_height(tile_count, self.tiles_per_row)

    def paginate(self, codes: Sequence[int]) -> List[Page]:
        """Place codes on pages; a strip always yields its one page, even empty."""
        pages = paginate(codes, self.tiles_per_row, self.tiles_per_page,
                         x_offset=self.x_offset, spacing=self.spacing)
        if not pages and self.is_strip:
            pages.append(Page(number=1))
        return pages


def _fit(length: float, pitch: float) -> int:
    return math.floor(length / pitch + FIT_TOLERANCE)


def tiles_across(printable_width: float, spacing: float) -> int:
    return _fit(printable_width, TILE_WIDTH + spacing)


def tiles_down(printable_height: float) -> int:
    return _fit(printable_height - TILE_MARGIN, TILE_HEIGHT + TILE_MARGIN)


def horizontal_offset(medium_width: float, tiles_per_row: int, spacing: float,
                      center: bool = True) -> float:
    """
    Left edge of the first tile.

    A row uses one spacing before each tile and one after the last; when
    centering, whatever is left over is split between both sides.
    """
    if not center:
        return spacing
    used_width = tiles_per_row * TILE_WIDTH + (tiles_per_row + 1) * spacing
    return spacing + (medium_width - used_width) / 2


def content_height(count: int, tiles_per_row: int) -> float:
    """Height needed to hold `count` tiles, including top and bottom margins."""
    rows = math.ceil(count / tiles_per_row)
    return rows * (TILE_HEIGHT + TILE_MARGIN) + TILE_MARGIN


def tile_position(column: int, row: int, x_start: float,
                  spacing: float) -> tuple:
    x = column * (TILE_WIDTH + spacing) + x_start
    y = row * (TILE_HEIGHT + TILE_MARGIN) + TILE_MARGIN
    return x, y


def compute_layout(
    medium_width: float,
    medium_height: Optional[float] = None,
    margin: float = 0.0,
    spacing: float = TILE_MARGIN,
    count: Optional[int] = None,
    center: bool = True,
    columns: Optional[int] = None,
) -> Layout:
    """
    Compute capacity and placement for a medium.

    `medium_height` of None means a continuous strip: one page that holds
    every tile. `columns` caps the tiles per row (1 gives a single-file
    strip). `count`, when known, sizes `content_height`.
    """
    if margin < 0:
        raise ValueError(f"Margin must not be negative (got {margin})")
    if spacing < 0:
        raise ValueError(f"Spacing must not be negative (got {spacing})")
    if columns is not None and columns < 1:
        raise ValueError(f"Columns must be at least 1 (got {columns})")
    if count is not None and count < 0:
        raise ValueError(f"Tile count must not be negative (got {count})")

    printable_width = medium_width - 2 * margin
    per_row = tiles_across(printable_width, spacing)
    if per_row < 1:
        raise LayoutInfeasibleError(
            f"No tile fits across {medium_width:g}in with margin {margin:g}in "
            f"and spacing {spacing:g}in (need {TILE_WIDTH + spacing + 2 * margin:g}in)"
        )
    if columns is not None:
        per_row = min(per_row, columns)

    per_column = None
    per_page = None
    if medium_height is not None:
        printable_height = medium_height - 2 * margin
        per_column = tiles_down(printable_height)
        if per_column < 1:
            raise LayoutInfeasibleError(
                f"No tile fits down {medium_height:g}in with margin {margin:g}in "
                f"(need {TILE_HEIGHT + 2 * TILE_MARGIN + 2 * margin:g}in)"
            )
        per_page = per_row * per_column

    if count is not None:
        height = content_height(count, per_row)
    elif per_page is not None:
        height = content_height(per_page, per_row)
    else:
        height = content_height(0, per_row)

    return Layout(
        medium_width=medium_width,
        medium_height=medium_height,
        spacing=spacing,
        tiles_per_row=per_row,
        tiles_per_column=per_column,
        tiles_per_page=per_page,
        x_offset=horizontal_offset(medium_width, per_row, spacing, center),
        content_height=height,
    )


def paginate(
    codes: Sequence[int],
    tiles_per_row: int,
    tiles_per_page: Optional[int],
    x_offset: float = TILE_MARGIN,
    spacing: float = TILE_MARGIN,
) -> List[Page]:
    """
    Split codes into pages and place each one.

    Chunks of `tiles_per_page` become pages (a single page when it is None);
    within a page tiles fill rows left to right, top to bottom.
    """
    if tiles_per_row < 1:
        raise ValueError(f"tiles_per_row must be at least 1 (got {tiles_per_row})")
    if tiles_per_page is None:
        tiles_per_page = max(len(codes), 1)
    elif tiles_per_page < 1:
        raise ValueError(f"tiles_per_page must be at least 1 (got {tiles_per_page})")

    pages = []
    for start in range(0, len(codes), tiles_per_page):
        page = Page(number=len(pages) + 1)
        for i, code in enumerate(codes[start:start + tiles_per_page]):
            column, row = i % tiles_per_row, i // tiles_per_row
            x, y = tile_position(column, row, x_offset, spacing)
            page.tiles.append(PlacedTile(code, column, row, x, y))
        pages.append(page)
    return pages
