from rustdrills.drills.sequences import (
    add_through_references,
    describe_vec,
    favorite_fruits,
    fill_vec,
)


def test_fill_vec_from_nothing():
    assert fill_vec() == [22, 44, 66]


def test_fill_vec_keeps_input_untouched():
    original = [1, 2]
    filled = fill_vec(original)
    assert original == [1, 2]
    assert filled[: len(original)] == original
    assert filled[len(original):] == fill_vec()


def test_fill_vec_returns_fresh_list():
    first = fill_vec()
    first.append(88)
    assert fill_vec() == [22, 44, 66]


def test_describe_vec_mentions_length_and_label():
    values = fill_vec()
    line = describe_vec("vec1", values)
    assert line.startswith("vec1 has length 3 ")
    assert line.endswith(f"`{values!r}`")


def test_describe_empty_vec():
    assert describe_vec("vec0", []) == "vec0 has length 0 content `[]`"


def test_add_through_references():
    assert add_through_references() == 1200


def test_add_through_references_is_shift():
    assert add_through_references(0) + 100 == add_through_references(100)


def test_favorite_fruits_sequence():
    fruits = favorite_fruits()
    assert next(fruits) == "banana"
    assert next(fruits) == "custard apple"
    assert next(fruits) == "avocado"
    assert next(fruits) == "peach"
    assert next(fruits) == "raspberry"
    assert next(fruits, None) is None