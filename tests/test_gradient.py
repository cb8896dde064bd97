from hypothesis import given
from hypothesis import strategies as st

from audiofp.gradient import gradient


def test_empty_input():
    assert gradient([]) == []


def test_single_value_has_zero_gradient():
    assert gradient([7]) == [0]


def test_two_values_repeat_the_difference():
    assert gradient([2, 9]) == [9 - 2, 9 - 2]


def test_ends_use_one_sided_differences():
    data = [1, 4, 2, 8]
    result = gradient(data)
    assert result[0] == data[1] - data[0]
    assert result[-1] == data[-1] - data[-2]
    assert result[1] == (data[2] - data[0]) / 2
    assert result[2] == (data[3] - data[1]) / 2


@given(
    start=st.integers(-100, 100),
    slope=st.integers(-20, 20),
    count=st.integers(2, 30),
)
def test_linear_sequence_has_constant_gradient(start, slope, count):
    data = [start + slope * i for i in range(count)]
    assert gradient(data) == [slope] * count


@given(data=st.lists(st.integers(-1000, 1000), max_size=40))
def test_length_is_preserved(data):
    assert len(gradient(data)) == len(data)


@given(data=st.lists(st.integers(-1000, 1000), min_size=2, max_size=40))
def test_reversal_negates_and_reverses(data):
    forward = gradient(data)
    backward = gradient(data[::-1])
    assert backward == [-value for value in forward[::-1]]