import random

import pytest

from domino_codes import InsufficientCapacityError, ValidCodeSet
from factory import DominoFactory
from layout import LayoutInfeasibleError
from measurement import inches, millimeters
from page_setup import PageSetup


def _factory(**kwargs):
    kwargs.setdefault('rng', random.Random(42))
    kwargs.setdefault('code_set', ValidCodeSet())
    return DominoFactory(**kwargs)


def test_defaults_are_letter_with_eighth_inch_spacing():
    factory = DominoFactory()
    assert factory.page_setup == PageSetup.letter_portrait()
    assert factory.spacing == inches(0.125)
    assert factory.code_set is ValidCodeSet.default()


def test_generate_pages_fills_every_page_with_unique_codes():
    layout, pages = _factory().generate_pages(2)
    assert layout.tiles_per_page == 60
    assert [len(page) for page in pages] == [60, 60]
    codes = [code for page in pages for code in page.codes]
    assert len(set(codes)) == 120


def test_generate_pages_is_reproducible_with_seed():
    _, first = _factory(rng=random.Random(5)).generate_pages(1)
    _, second = _factory(rng=random.Random(5)).generate_pages(1)
    assert first[0].codes == second[0].codes


def test_too_many_pages_fails():
    factory = _factory()
    max_pages = len(factory.code_set) // 60
    factory.generate_pages(max_pages)
    with pytest.raises(InsufficientCapacityError):
        factory.generate_pages(max_pages + 1)


def test_allow_repeats_lifts_capacity_limit():
    factory = _factory(allow_repeats=True)
    _, pages = factory.generate_pages(20)
    assert len(pages) == 20
    first_pass = [code for page in pages for code in page.codes][:len(factory.code_set)]
    assert len(set(first_pass)) == len(factory.code_set)


def test_page_count_must_be_positive():
    with pytest.raises(ValueError):
        _factory().generate_pages(0)


def test_a4_metric_layout():
    layout = _factory(page_setup=PageSetup.a4_portrait()).page_layout()
    assert layout.tiles_per_row == 11
    assert layout.tiles_per_column == 5
    assert layout.tiles_per_page == 55


def test_metric_spacing():
    layout = _factory(spacing=millimeters(25.4)).page_layout()
    assert layout.tiles_per_row == 5


def test_uncentered_pages_start_at_spacing():
    layout = _factory(center=False).page_layout()
    assert layout.x_offset == pytest.approx(0.125)


def test_page_layout_needs_fixed_height():
    factory = _factory(page_setup=PageSetup.continuous_label(inches(2.4)))
    with pytest.raises(ValueError):
        factory.page_layout()


def test_generate_strip_single_file():
    factory = _factory(page_setup=PageSetup.continuous_label(inches(2.4)))
    layout, pages = factory.generate_strip(12)
    assert layout.is_strip
    assert len(pages) == 1
    assert len(pages[0]) == 12
    assert {tile.column for tile in pages[0]} == {0}


def test_generate_strip_rows():
    factory = _factory(page_setup=PageSetup.continuous_label(inches(2.4)))
    layout, pages = factory.generate_strip(10, columns=None)
    assert layout.tiles_per_row == 3
    assert pages[0].rows == 4


def test_strip_on_paper_width_ignores_paper_height():
    layout, pages = _factory().generate_strip(100, columns=None)
    assert layout.is_strip
    assert len(pages) == 1


def test_strip_too_narrow_is_infeasible():
    factory = _factory(page_setup=PageSetup.continuous_label(inches(0.5)))
    with pytest.raises(LayoutInfeasibleError):
        factory.generate_strip(3)


def test_strip_count_must_not_be_negative():
    with pytest.raises(ValueError):
        _factory().generate_strip(-1)


def test_output_helpers():
    factory = _factory()
    documents = factory.pages_svg(2)
    assert len(documents) == 2
    assert factory.pages_pdf(1).startswith(b'%PDF')

    strip = _factory(page_setup=PageSetup.continuous_label(inches(1)))
    assert strip.strip_svg(4).count('<rect') == 4
    assert strip.strip_pdf(4).startswith(b'%PDF')


def test_empty_strip_outputs_are_documents():
    strip = _factory(page_setup=PageSetup.continuous_label(inches(2.4)))
    layout, pages = strip.generate_strip(0)
    assert len(pages) == 1
    assert len(pages[0]) == 0

    document = strip.strip_svg(0)
    assert document.startswith('<svg')
    assert '<rect' not in document
    assert 'height="0.12in"' in document
    assert strip.strip_pdf(0).startswith(b'%PDF')
