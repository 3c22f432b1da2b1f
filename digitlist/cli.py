"""Interactive menu over a list of numbers read from a text file."""

from __future__ import annotations

import argparse
import re
import sys
from typing import Iterable, Iterator, TextIO

from digitlist.number import Number
from digitlist.numberlist import EmptyListError, NumberList

DEFAULT_FILE = "Sayilar.txt"

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_INTEGER_PATTERN = re.compile(r"\s*([+-]?\d+)")

MENU = (
    "1.Tek basamaklari Basa Al\n"
    "2.Basamaklari Tersle\n"
    "3.En Buyuk Cikar\n"
    "4.cikis\n"
)
INVALID_CHOICE = "\nLutfen 1,2,3 veya 4 tuslayiniz.!!\n\n"
CHOICES = ("1", "2", "3", "4")


def read_numbers(lines: Iterable[str]) -> list[int]:
    """Collect integers from each line, stopping a line at its first bad entry."""
    numbers: list[int] = []
    for line in lines:
        position = 0
        while True:
            match = _INTEGER_PATTERN.match(line, position)
            if match is None:
                break
            value = int(match.group(1))
            if not _INT_MIN <= value <= _INT_MAX:
                break
            numbers.append(value)
            position = match.end()
    return numbers


def load_file(path: str) -> NumberList:
    """Build a list from a file; a file that cannot be opened gives an empty list."""
    try:
        with open(path, encoding="utf-8") as handle:
            values = read_numbers(handle)
    except OSError:
        values = []
    return NumberList(Number.from_int(v) for v in values)


def _words(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def run_menu(
    numbers: NumberList,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Show the list, then apply menu choices until 4 or end of input."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    words = _words(stdin)

    stdout.write(numbers.render())
    while True:
        stdout.write("\n" + MENU)
        choice = None
        for word in words:
            if word in CHOICES:
                choice = word
                break
            stdout.write(INVALID_CHOICE + MENU)
        if choice is None or choice == "4":
            return 0
        if choice == "1":
            numbers.odd_digits_first()
        elif choice == "2":
            numbers.reverse_digits()
        else:
            try:
                numbers.remove_largest()
            except EmptyListError as error:
                stdout.write(f"{error}\n")
        stdout.write(numbers.render())


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Show and rearrange the digits of numbers read from a file."
    )
    parser.add_argument("path", nargs="?", default=DEFAULT_FILE)
    args = parser.parse_args(argv)
    numbers = load_file(args.path)
    try:
        return run_menu(numbers)
    except (ValueError, OverflowError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())