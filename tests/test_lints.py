import pytest

from rustdrills.drills.lints import add_optional, floats_differ


def test_close_but_distinct_floats_differ():
    assert floats_differ(1.2331, 1.2332) is True


def test_equal_floats_do_not_differ():
    assert floats_differ(1.2331, 1.2331) is False


def test_rounding_noise_is_ignored():
    assert floats_differ(0.1 + 0.2, 0.3) is False


@pytest.mark.parametrize("x, y", [(1.2331, 1.2332), (0.0, 1.0), (-3.5, 2.25)])
def test_floats_differ_is_symmetric(x, y):
    assert floats_differ(x, y) == floats_differ(y, x)


def test_add_optional_with_value():
    assert add_optional(42, 12) == 54


def test_add_optional_without_value():
    assert add_optional(42, None) == 42