import pytest

from learnkit.simplemath import add, sqrt


def test_add_int():
    assert add(3, 5) == 8


def test_add_float():
    assert add(3.2, 5.8) == 9.0


def test_add_keeps_int_type():
    result = add(3, 5)
    assert isinstance(result, int) and result == 8


def test_sqrt_int():
    result = sqrt(9)
    assert result == 3
    assert isinstance(result, int)


def test_sqrt_float64():
    result = sqrt(9.0)
    assert result == 3
    assert isinstance(result, float)


def test_sqrt_int_truncates():
    assert sqrt(10) == 3


@pytest.mark.parametrize("value", [-1, -9, -2.5])
def test_sqrt_negative_is_zero(value):
    assert sqrt(value) == 0


def test_sqrt_squares_back():
    for n in range(50):
        assert sqrt(n * n) == n