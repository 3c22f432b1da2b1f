"""A number stored as an ordered sequence of its decimal digits."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Iterator

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass(eq=False)
class Digit:
    """A single digit cell; cells are compared by identity."""

    value: int


class Number:
    """A number held as a list of digit cells, most significant first."""

    def __init__(self, digits: Iterable[int] = ()) -> None:
        self.digits: list[Digit] = [Digit(d) for d in digits]

    @classmethod
    def from_int(cls, value: int) -> "Number":
        """Split an integer into digits; zero yields no digits at all.

        Digits of a negative value carry its sign, one per digit.
        """
        sign = -1 if value < 0 else 1
        magnitude = abs(value)
        digits: list[int] = []
        while magnitude:
            magnitude, digit = divmod(magnitude, 10)
            digits.append(sign * digit)
        digits.reverse()
        return cls(digits)

    def reverse(self) -> None:
        """Reverse the order of the digits in place."""
        self.digits.reverse()

    def odd_digits_first(self) -> None:
        """Move positive odd digits to the front, keeping relative order."""
        odd = [d for d in self.digits if d.value > 0 and d.value % 2 == 1]
        rest = [d for d in self.digits if not (d.value > 0 and d.value % 2 == 1)]
        self.digits = odd + rest

    def digit_count(self) -> int:
        return len(self.digits)

    def value(self) -> int:
        """The integer the digits spell out, in their current order."""
        result = 0
        for digit in self.digits:
            result = result * 10 + digit.value
        return result

    def display(self) -> str:
        """The digits read back as an integer, right-aligned in 10 columns.

        Raises ValueError when there are no digits and OverflowError when
        the value does not fit in a signed 32-bit integer.
        """
        text = "".join(str(d.value) for d in self.digits)
        match = _LEADING_INT.match(text)
        if match is None:
            raise ValueError("number has no digits to display")
        number = int(match.group(1))
        if not _INT_MIN <= number <= _INT_MAX:
            raise OverflowError(f"value {text} out of range")
        return f"{number:>10}"

    def __iter__(self) -> Iterator[int]:
        return (d.value for d in self.digits)

    def __len__(self) -> int:
        return len(self.digits)

    def __repr__(self) -> str:
        return f"Number({[d.value for d in self.digits]!r})"