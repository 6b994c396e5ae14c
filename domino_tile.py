"""
Tile geometry: turns a domino code and a position into draw primitives.

All sizes are in inches. A tile is a black rounded rectangle holding two
columns of eight pips; set bits become white pips, unset bits are left
out because they match the tile body.
"""
from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

from domino_codes import CODE_MASK, COLUMNS_PER_TILE, PIPS_PER_COLUMN

PIP_DIAMETER = 0.1
PIP_MARGIN = 0.1      # Between pips and from the inner edge of the tile
PIP_RADIUS = PIP_DIAMETER / 2
PIP_PITCH = PIP_DIAMETER + PIP_MARGIN

CORNER_RADIUS = 0.1
TILE_MARGIN = 0.125   # Between tiles (1/8")

TILE_WIDTH = PIP_DIAMETER * COLUMNS_PER_TILE + PIP_MARGIN * (COLUMNS_PER_TILE + 1)   # 0.5"
TILE_HEIGHT = PIP_DIAMETER * PIPS_PER_COLUMN + PIP_MARGIN * (PIPS_PER_COLUMN + 1)    # 1.7"


@dataclass(frozen=True)
class RoundedRect:
    x: float
    y: float
    width: float
    height: float
    corner_radius: float


@dataclass(frozen=True)
class Circle:
    cx: float
    cy: float
    radius: float


@dataclass(frozen=True)
class TilePrimitives:
    """Everything a renderer needs to draw one tile."""
    code: int
    body: RoundedRect
    pips: List[Circle] = field(default_factory=list)


def pip_centers(code: int, x: float, y: float) -> Iterator[Tuple[float, float]]:
    """Yield the center of every set pip, column by column."""
    code &= CODE_MASK
    for column in range(COLUMNS_PER_TILE):
        cx = x + PIP_MARGIN + PIP_RADIUS + column * PIP_PITCH
        mask = 1 << (column * PIPS_PER_COLUMN)
        for row in range(PIPS_PER_COLUMN):
            if code & mask:
                yield cx, y + PIP_MARGIN + PIP_RADIUS + row * PIP_PITCH
            mask <<= 1


def tile_primitives(code: int, x: float, y: float) -> TilePrimitives:
    """Build the body and pip circles for a tile whose top-left corner is (x, y)."""
    body = RoundedRect(x, y, TILE_WIDTH, TILE_HEIGHT, CORNER_RADIUS)
    pips = [Circle(cx, cy, PIP_RADIUS) for cx, cy in pip_centers(code, x, y)]
    return TilePrimitives(code & CODE_MASK, body, pips)
