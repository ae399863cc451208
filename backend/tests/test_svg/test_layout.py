"""Tests for vertical-flow placement."""

import pytest

from prophecy.svg.layout import DEFAULT_GEOMETRY, compute_layout, layout_for


def test_compute_layout_formula():
    block = compute_layout(1000.0, 3, 100, 40, 140)
    assert block.separator_y == 1340.0
    assert block.author_y == 1440.0


@pytest.mark.parametrize("n1,n2", [(1, 2), (1, 5), (3, 4), (0, 7)])
def test_separator_moves_by_line_height(n1, n2):
    a = layout_for(n1)
    b = layout_for(n2)
    step = DEFAULT_GEOMETRY.per_line_height
    assert b.separator_y - a.separator_y == pytest.approx((n2 - n1) * step)
    assert b.author_y - a.author_y == pytest.approx((n2 - n1) * step)


def test_author_below_separator():
    block = layout_for(2)
    assert block.author_y > block.separator_y


def test_quote_start_is_fraction_of_height():
    assert DEFAULT_GEOMETRY.quote_start_y() == pytest.approx(2868 * 0.35)
    assert DEFAULT_GEOMETRY.quote_start_y(1000) == pytest.approx(350)
