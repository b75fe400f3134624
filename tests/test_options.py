from rustdrill.lessons.options import (
    Point,
    describe_number,
    describe_point,
    describe_word,
    generated_numbers,
    pop_all,
)


def test_describe_number_present():
    assert describe_number(13) == "printing: 13"


def test_describe_number_missing():
    assert describe_number(None) == "No number"


def test_generated_numbers_shape():
    numbers = generated_numbers()
    assert len(numbers) == 5
    assert numbers == sorted(numbers)
    assert all(0 <= n < 2**16 for n in numbers)


def test_generated_numbers_starts_at_zero():
    assert generated_numbers()[0] == 0


def test_describe_word_present():
    assert describe_word("rustlings") == "The word is: rustlings"


def test_describe_word_missing():
    assert describe_word(None) == "The optional word doesn't contain anything"


def test_pop_all_reverses_and_drains():
    values = list(range(1, 10))
    popped = pop_all(values)
    assert popped == list(reversed(range(1, 10)))
    assert values == []


def test_pop_all_empty():
    assert pop_all([]) == []


def test_describe_point_present():
    assert describe_point(Point(100, 200)) == "Co-ordinates are 100,200 "


def test_describe_point_missing():
    assert describe_point(None) == "no match"


def test_describe_point_keeps_point():
    point = Point(x=100, y=200)
    describe_point(point)
    assert (point.x, point.y) == (100, 200)