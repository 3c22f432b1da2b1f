"""An ordered collection of digit-list numbers with a boxed text rendering."""

from __future__ import annotations

from typing import Iterable, Iterator

from digitlist.number import Number

_CELL = "*******   "


class EmptyListError(LookupError):
    """Raised when an operation needs at least one number."""


def border_line(count: int) -> str:
    """Top or bottom line of a box with `count` digit cells."""
    return "############   " + _CELL * count


def middle_line(count: int) -> str:
    """Separator line inside a box with `count` digit cells."""
    return "#----------#   " + _CELL * count


class NumberList:
    """A list of numbers, each kept as its own digit sequence."""

    def __init__(self, numbers: Iterable[Number] | None = None) -> None:
        self._numbers: list[Number] = list(numbers or ())

    def append(self, number: Number) -> None:
        self._numbers.append(number)

    def __iter__(self) -> Iterator[Number]:
        return iter(self._numbers)

    def __len__(self) -> int:
        return len(self._numbers)

    def odd_digits_first(self) -> None:
        """Move odd digits to the front in every number."""
        for number in self._numbers:
            number.odd_digits_first()

    def reverse_digits(self) -> None:
        """Reverse the digit order of every number."""
        for number in self._numbers:
            number.reverse()

    def remove_largest(self) -> Number:
        """Remove and return the number of largest value; the first wins ties."""
        if not self._numbers:
            raise EmptyListError("Listede eleman yok.")
        largest_index = 0
        largest_value = self._numbers[0].value()
        for index, number in enumerate(self._numbers[1:], start=1):
            current = number.value()
            if current > largest_value:
                largest_value = current
                largest_index = index
        return self._numbers.pop(largest_index)

    def render(self) -> str:
        """Draw every number as a box of digit cells.

        Each box shows the number's identity and each cell's identity,
        then the number's value and each digit.
        """
        parts: list[str] = []
        for number in self._numbers:
            count = number.digit_count()
            address_cells = "".join(
                f"{'*':>4}{id(digit) % 1000:>4x} *" for digit in number.digits
            )
            value_cells = "".join(
                f"{'*':>4}{digit.value:>3}  *" for digit in number.digits
            )
            parts.append(border_line(count) + "\n")
            parts.append(f"#{hex(id(number)):>10}#{address_cells}\n")
            parts.append(middle_line(count) + "\n")
            parts.append(f"#{number.display()}#{value_cells}\n")
            parts.append(border_line(count) + "\n")
            parts.append("\n")
        return "".join(parts)