import pytest
from hypothesis import given
from hypothesis import strategies as st

from audiofp.integral_image import RollingIntegralImage


def test_reference_case():
    image = RollingIntegralImage(4)

    image.add_row([1, 2, 3])
    assert image.num_columns == 3
    assert image.num_rows == 1
    assert image.area(0, 0, 1, 1) == pytest.approx(1)
    assert image.area(0, 1, 1, 2) == pytest.approx(2)
    assert image.area(0, 2, 1, 3) == pytest.approx(3)
    assert image.area(0, 0, 1, 3) == pytest.approx(1 + 2 + 3)

    image.add_row([4, 5, 6])
    assert image.num_columns == 3
    assert image.num_rows == 2
    assert image.area(1, 0, 2, 1) == pytest.approx(4)
    assert image.area(1, 1, 2, 2) == pytest.approx(5)
    assert image.area(1, 2, 2, 3) == pytest.approx(6)
    assert image.area(0, 0, 2, 3) == pytest.approx(1 + 2 + 3 + 4 + 5 + 6)

    image.add_row([7, 8, 9])
    assert image.num_columns == 3
    assert image.num_rows == 3

    image.add_row([10, 11, 12])
    assert image.num_columns == 3
    assert image.num_rows == 4
    assert image.area(0, 0, 4, 3) == pytest.approx(
        (1 + 2 + 3) + (4 + 5 + 6) + (7 + 8 + 9) + (10 + 11 + 12)
    )

    image.add_row([13, 14, 15])
    assert image.num_columns == 3
    assert image.num_rows == 5
    assert image.area(1, 0, 2, 1) == pytest.approx(4)
    assert image.area(1, 1, 2, 2) == pytest.approx(5)
    assert image.area(1, 2, 2, 3) == pytest.approx(6)
    assert image.area(4, 0, 5, 1) == pytest.approx(13)
    assert image.area(4, 1, 5, 2) == pytest.approx(14)
    assert image.area(4, 2, 5, 3) == pytest.approx(15)
    assert image.area(1, 0, 5, 3) == pytest.approx(
        (4 + 5 + 6) + (7 + 8 + 9) + (10 + 11 + 12) + (13 + 14 + 15)
    )

    image.add_row([16, 17, 18])
    assert image.num_columns == 3
    assert image.num_rows == 6
    assert image.area(2, 0, 3, 1) == pytest.approx(7)
    assert image.area(2, 1, 3, 2) == pytest.approx(8)
    assert image.area(2, 2, 3, 3) == pytest.approx(9)
    assert image.area(5, 0, 6, 1) == pytest.approx(16)
    assert image.area(5, 1, 6, 2) == pytest.approx(17)
    assert image.area(5, 2, 6, 3) == pytest.approx(18)
    assert image.area(2, 0, 6, 3) == pytest.approx(
        (7 + 8 + 9) + (10 + 11 + 12) + (13 + 14 + 15) + (16 + 17 + 18)
    )


def test_empty_area_is_zero():
    image = RollingIntegralImage(2)
    image.add_row([1, 2])
    assert image.area(0, 1, 0, 2) == 0.0
    assert image.area(0, 1, 1, 1) == 0.0


def test_mismatched_row_width_is_rejected():
    image = RollingIntegralImage(2)
    image.add_row([1, 2, 3])
    with pytest.raises(ValueError):
        image.add_row([1, 2])


def test_row_beyond_end_is_rejected():
    image = RollingIntegralImage(2)
    image.add_row([1, 2])
    with pytest.raises(IndexError):
        image.area(0, 0, 2, 1)


def test_column_beyond_width_is_rejected():
    image = RollingIntegralImage(2)
    image.add_row([1, 2])
    with pytest.raises(IndexError):
        image.area(0, 0, 1, 3)


def test_forgotten_rows_are_rejected():
    image = RollingIntegralImage(1)
    for value in range(4):
        image.add_row([value])
    with pytest.raises(IndexError):
        image.area(1, 0, 4, 1)
    assert image.area(3, 0, 4, 1) == pytest.approx(3)


def test_reversed_corners_are_rejected():
    image = RollingIntegralImage(3)
    image.add_row([1, 2])
    image.add_row([3, 4])
    with pytest.raises(ValueError):
        image.area(2, 0, 1, 2)


def test_reset_clears_image():
    image = RollingIntegralImage(3)
    image.add_row([1, 2, 3])
    image.reset()
    assert image.num_rows == 0
    assert image.num_columns == 0
    image.add_row([5, 6])
    assert image.num_columns == 2
    assert image.area(0, 0, 1, 2) == pytest.approx(11)


@given(
    rows=st.lists(
        st.lists(st.integers(-50, 50), min_size=3, max_size=3),
        min_size=1,
        max_size=12,
    ),
    max_rows=st.integers(1, 6),
    data=st.data(),
)
def test_area_matches_direct_sum(rows, max_rows, data):
    image = RollingIntegralImage(max_rows)
    for row in rows:
        image.add_row(row)
    total = len(rows)
    lowest = max(0, total - max_rows)
    r1 = data.draw(st.integers(lowest, total))
    r2 = data.draw(st.integers(r1, total))
    c1 = data.draw(st.integers(0, 3))
    c2 = data.draw(st.integers(c1, 3))
    expected = sum(sum(row[c1:c2]) for row in rows[r1:r2])
    assert image.area(r1, c1, r2, c2) == pytest.approx(expected)