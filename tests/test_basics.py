import pytest

from rustdrills.drills.basics import (
    bigger,
    calculate_apple_price,
    character_kind,
    current_favorite_color,
    describe_array,
    fizz_if_foo,
    greeting,
    is_a_color_word,
    is_even,
    ring_calls,
    sale_price,
    square,
    string_values,
    times_two,
)


def test_apple_prices():
    assert calculate_apple_price(35) == 70
    assert calculate_apple_price(40) == 80
    assert calculate_apple_price(65) == 65


def test_returns_twice_of_positive_numbers():
    assert times_two(4) == 8


def test_returns_twice_of_negative_numbers():
    assert times_two(-4) == -8


def test_is_true_when_even():
    assert is_even(12)


def test_is_false_when_odd():
    assert not is_even(11)


def test_is_even_negative_odd():
    assert not is_even(-3)


def test_sale_price_odd_and_even():
    assert sale_price(51) == 48
    assert sale_price(50) == 40


def test_square():
    assert square(3) == 9


def test_ring_calls():
    assert ring_calls(3) == [
        "Ring! Call number 1",
        "Ring! Call number 2",
        "Ring! Call number 3",
    ]
    assert ring_calls(0) == []


def test_ten_is_bigger_than_eight():
    assert bigger(10, 8) == 10


def test_fortytwo_is_bigger_than_thirtytwo():
    assert bigger(32, 42) == 42


@pytest.mark.parametrize(
    ("word", "expected"),
    [("fizz", "foo"), ("fuzz", "bar"), ("literally anything", "baz")],
)
def test_fizz_if_foo(word, expected):
    assert fizz_if_foo(word) == expected


@pytest.mark.parametrize(
    ("ch", "expected"),
    [("C", "Alphabetical!"), ("a", "Alphabetical!"), ("7", "Numerical!"), ("#", "Neither alphabetic nor numeric!")],
)
def test_character_kind(ch, expected):
    assert character_kind(ch) == expected


def test_character_kind_rejects_longer_text():
    with pytest.raises(ValueError):
        character_kind("ab")


def test_describe_array():
    assert describe_array([4, 101]) == "Meh, I eat arrays like that for breakfast."
    assert describe_array(list(range(100))) == "Wow, that's a big array!"


def test_greeting():
    assert greeting(True, False) == ["Good morning!"]
    assert greeting(False, False) == []


def test_colours():
    assert current_favorite_color() == "blue"
    assert is_a_color_word("green")
    assert not is_a_color_word("purple")


def test_string_values():
    values = string_values()
    assert values[5] == "Interpolation Station"
    assert values[6] == "a"
    assert values[7] == "hello there"
    assert values[8] == "Happy Tuesday!"
    assert values[9] == "my shift key is sticky"