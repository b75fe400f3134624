import pytest

from rustdrill.lessons.shared import (
    Cons,
    Nil,
    create_empty_list,
    create_non_empty_list,
    offset_sums,
)


def test_create_empty_list():
    assert create_empty_list() == Nil()


def test_create_non_empty_list():
    assert create_empty_list() != create_non_empty_list()
    assert create_non_empty_list() == Cons(1, Nil())


def test_offset_sums_cover_all_numbers():
    numbers = list(range(100))
    sums = offset_sums(numbers, 8)
    assert len(sums) == 8
    assert sum(sums) == sum(numbers)


def test_offset_sums_single_worker():
    assert offset_sums([3, 4, 5], 1) == [12]


def test_offset_sums_more_workers_than_values():
    assert offset_sums([7, 9], 4) == [7, 9, 0, 0]


def test_offset_sums_rejects_no_workers():
    with pytest.raises(ValueError):
        offset_sums([1, 2, 3], 0)