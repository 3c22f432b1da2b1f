import re

import pytest

from digitlist.number import Number
from digitlist.numberlist import (
    EmptyListError,
    NumberList,
    border_line,
    middle_line,
)


def make_list(*values):
    return NumberList(Number.from_int(v) for v in values)


def test_border_line():
    assert border_line(2) == "############   " + "*******   " * 2


def test_middle_line_without_cells():
    assert middle_line(0) == "#----------#   "


def test_append_and_iterate_in_order():
    numbers = [Number.from_int(v) for v in (5, 17, 300)]
    collection = NumberList()
    for number in numbers:
        collection.append(number)
    assert len(collection) == 3
    assert list(collection) == numbers


def test_remove_largest_returns_max_and_keeps_order():
    collection = make_list(12, 907, 45, 3)
    removed = collection.remove_largest()
    assert removed.value() == 907
    assert [n.value() for n in collection] == [12, 45, 3]


def test_remove_largest_first_of_ties():
    first = Number.from_int(88)
    second = Number.from_int(88)
    collection = NumberList([Number.from_int(1), first, second])
    assert collection.remove_largest() is first
    assert list(collection)[-1] is second


def test_remove_largest_empty_raises():
    with pytest.raises(EmptyListError):
        NumberList().remove_largest()


def test_remove_largest_uses_current_digit_order():
    collection = make_list(91, 29)
    collection.reverse_digits()
    removed = collection.remove_largest()
    assert removed.value() == 92


def test_odd_digits_first_applies_to_all():
    collection = make_list(214, 63)
    collection.odd_digits_first()
    for number in collection:
        digits = list(number)
        odd_count = sum(1 for d in digits if d % 2 == 1)
        assert all(d % 2 == 1 for d in digits[:odd_count])


def test_reverse_digits_twice_restores():
    collection = make_list(123, 4567)
    collection.reverse_digits()
    collection.reverse_digits()
    assert [n.value() for n in collection] == [123, 4567]


def test_render_empty_is_empty():
    assert NumberList().render() == ""


def test_render_one_box_per_number():
    text = make_list(7, 81, 926).render()
    assert text.count(middle_line(1) + "\n") == 1
    assert text.count(middle_line(2) + "\n") == 1
    assert text.count(middle_line(3) + "\n") == 1


def test_render_empty_number_raises():
    with pytest.raises(ValueError):
        NumberList([Number.from_int(0)]).render()