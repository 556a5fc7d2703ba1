import itertools

from rustdrills.drills.baskets import (
    Fruit,
    array_and_vec,
    fill_fruit_basket,
    fruit_basket,
    vec_loop,
)


def test_at_least_three_types_of_fruits():
    assert len(fruit_basket()) >= 3


def test_at_least_five_fruits():
    assert sum(fruit_basket().values()) >= 5


def _get_fruit_basket():
    return {Fruit.APPLE: 4, Fruit.MANGO: 2, Fruit.LYCHEE: 5}


def test_given_fruits_are_not_modified():
    basket = _get_fruit_basket()
    fill_fruit_basket(basket)
    assert basket[Fruit.APPLE] == 4
    assert basket[Fruit.MANGO] == 2
    assert basket[Fruit.LYCHEE] == 5


def test_at_least_five_types_of_fruits():
    basket = _get_fruit_basket()
    fill_fruit_basket(basket)
    assert len(basket) >= 5


def test_greater_than_eleven_fruits():
    basket = _get_fruit_basket()
    fill_fruit_basket(basket)
    assert sum(basket.values()) > 11


def test_fill_returns_same_basket():
    basket = _get_fruit_basket()
    assert fill_fruit_basket(basket) is basket


def test_array_and_vec_similarity():
    a, v = array_and_vec()
    assert list(a) == v


def test_vec_loop():
    evens = list(itertools.islice((x for x in itertools.count(1) if x % 2 == 0), 5))
    assert vec_loop(evens) == [4, 8, 12, 16, 20]


def test_vec_loop_does_not_touch_input():
    values = [2, 4]
    vec_loop(values)
    assert values == [2, 4]