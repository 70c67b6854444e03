import pytest

from util.responsive import MIN_COLUMN_WIDTH, column_widths


@pytest.mark.parametrize("width", [0, 1, 9, 12, 38, 80, 201])
def test_widths_always_fill_the_row(width):
    widths = column_widths(width, 2)
    assert sum(widths) == width
    assert all(w >= 0 for w in widths)


def test_title_column_gets_the_larger_share():
    assert column_widths(30, 2) == [20, 10]
    assert column_widths(38, 2) == [26, 12]


def test_narrow_tags_column_borrows_from_title():
    widths = column_widths(20, 2)
    assert widths[1] >= MIN_COLUMN_WIDTH
    assert widths == [12, 8]


def test_too_narrow_to_borrow_keeps_proportions():
    assert column_widths(12, 2) == [8, 4]


def test_no_columns():
    assert column_widths(40, 0) == []


def test_custom_weights():
    assert column_widths(40, 2, weights=[1, 1]) == [20, 20]
