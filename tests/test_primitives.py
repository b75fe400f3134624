import pytest

from rustdrill.lessons.primitives import (
    classify_char,
    describe_cat,
    nice_slice,
    second,
    size_verdict,
)


def test_slice_out_of_array():
    a = [1, 2, 3, 4, 5]
    assert list(nice_slice(a)) == [2, 3, 4]


def test_slice_too_short():
    with pytest.raises(IndexError):
        nice_slice([1, 2, 3])


def test_indexing_tuple():
    numbers = (1, 2, 3)
    assert second(numbers) == 2


@pytest.mark.parametrize(
    "character, expected",
    [
        ("C", "Alphabetical!"),
        ("7", "Numerical!"),
        ("\n", "Neither alphabetic nor numeric!"),
        ("é", "Alphabetical!"),
    ],
)
def test_classify_char(character, expected):
    assert classify_char(character) == expected


def test_classify_char_needs_one_character():
    with pytest.raises(ValueError):
        classify_char("ab")


def test_size_verdict():
    assert size_verdict([1] * 1000) == "Wow, that's a big array!"
    assert size_verdict([1] * 99) == "Meh, I eat arrays like that for breakfast."


def test_describe_cat():
    assert describe_cat(("Furry McFurson", 3.5)) == "Furry McFurson is 3.5 years old."