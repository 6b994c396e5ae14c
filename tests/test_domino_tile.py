import pytest

from domino_codes import enumerate_valid_codes
from domino_tile import (
    CORNER_RADIUS,
    PIP_RADIUS,
    TILE_HEIGHT,
    TILE_WIDTH,
    Circle,
    RoundedRect,
    pip_centers,
    tile_primitives,
)


def test_tile_dimensions_come_from_pip_geometry():
    assert TILE_WIDTH == pytest.approx(0.5)
    assert TILE_HEIGHT == pytest.approx(1.7)


def test_body_is_rounded_rect_at_position():
    prims = tile_primitives(0, 1.0, 2.0)
    assert prims.body == RoundedRect(1.0, 2.0, TILE_WIDTH, TILE_HEIGHT, CORNER_RADIUS)


def test_unset_bits_draw_nothing():
    assert tile_primitives(0, 0.0, 0.0).pips == []


def test_all_bits_draw_sixteen_pips():
    assert len(tile_primitives(0xFFFF, 0.0, 0.0).pips) == 16


def test_pip_placement_by_column_and_row():
    # Bit 0: column 0 row 0; bit 15: column 1 row 7
    pips = tile_primitives(0b10000000_00000001, 1.0, 1.0).pips
    assert len(pips) == 2
    first, last = pips
    assert first.cx == pytest.approx(1.15)
    assert first.cy == pytest.approx(1.15)
    assert last.cx == pytest.approx(1.35)
    assert last.cy == pytest.approx(2.55)
    assert first.radius == PIP_RADIUS


def test_bit_nine_is_second_row_of_second_column():
    (center,) = list(pip_centers(1 << 9, 0.0, 0.0))
    assert center == (pytest.approx(0.35), pytest.approx(0.35))


def test_valid_codes_draw_ten_pips_inside_the_body():
    for code in enumerate_valid_codes()[:50]:
        prims = tile_primitives(code, 0.5, 0.25)
        assert len(prims.pips) == 10
        body = prims.body
        for pip in prims.pips:
            assert isinstance(pip, Circle)
            assert body.x < pip.cx - pip.radius
            assert pip.cx + pip.radius < body.x + body.width
            assert body.y < pip.cy - pip.radius
            assert pip.cy + pip.radius < body.y + body.height


def test_code_is_masked_to_sixteen_bits():
    prims = tile_primitives(0x1FFFF, 0.0, 0.0)
    assert prims.code == 0xFFFF
    assert len(prims.pips) == 16
