# digitlist

`digitlist` reads whole numbers from a text file and stores each one as a
sequence of digit cells. It draws every number as a box with one cell per
digit. A small menu lets you rearrange the numbers.

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Command line

```
digitlist [PATH]
```

`PATH` is a text file of whitespace-separated integers. It defaults to
`Sayilar.txt` in the current directory. If the file cannot be opened, the list
starts empty.

Reading stops for the rest of a line at the first entry that is not an
integer, and also at the first value that does not fit in a signed 32-bit
integer.

The list is drawn once at start-up. The menu then reads whitespace-separated
words from standard input. The menu text is in Turkish:

1. `Tek basamaklari Basa Al`: in every number, move the positive odd digits to
   the front. The odd digits keep their relative order, and so do the others.
   The list is drawn again.
2. `Basamaklari Tersle`: reverse the digits of every number, then draw the
   list again.
3. `En Buyuk Cikar`: remove the number with the largest value, then draw the
   list again. When values tie, the first of them is removed. On an empty list
   the message `Listede eleman yok.` is printed.
4. `cikis`: quit.

Any other word reprints the menu with a warning. The program also ends when
input runs out.

### Drawing

Each box has two rows:

- The first row shows an identifier of the number and, for each digit cell,
  an identifier in hexadecimal. These identifiers come from Python object
  identities, so they differ from run to run.
- The second row shows the number's value, right-aligned in ten columns, and
  then each digit.

### Zero and out-of-range values

A number is split into digits by repeated division, so `0` becomes a number
with no digits at all. Drawing such a number raises `ValueError`. Drawing
also raises `OverflowError` when the digits, read back in their current
order, no longer fit in a signed 32-bit integer. The command prints either
error to standard error and exits with status 1.

## Library use

```python
from digitlist.number import Number
from digitlist.numberlist import NumberList

numbers = NumberList([Number.from_int(1234), Number.from_int(507)])
numbers.odd_digits_first()
print([n.value() for n in numbers])   # [1324, 570]

numbers.remove_largest()               # returns the removed Number
print(numbers.render())
```

### `digitlist.number`

- `Number(digits)` builds a number from an iterable of digits.
- `Number.from_int(value)` builds a number from an integer. A negative value
  gives digits that each carry the minus sign.
- The other methods are `reverse()`, `odd_digits_first()`, `digit_count()`,
  `value()` and `display()`.
- Iterating a `Number` yields its digit values. `len()` gives its digit count.
- Each cell is a `Digit`. Cells are compared by identity.

### `digitlist.numberlist`

- `NumberList(numbers)` has the methods `append()`, `odd_digits_first()`,
  `reverse_digits()`, `remove_largest()` and `render()`.
- Iterating a `NumberList` yields its numbers, and `len()` gives how many it
  holds.
- On an empty list, `remove_largest()` raises `EmptyListError`.
- `border_line(count)` and `middle_line(count)` give the box's frame lines.

### `digitlist.cli`

- `read_numbers(lines)` collects integers from text lines.
- `load_file(path)` builds a `NumberList` from a file.
- `run_menu(numbers, stdin, stdout)` runs the menu against any pair of text
  streams and returns 0.
- `main(argv)` is the command's entry point.

## What it does not do

The list lives only in memory while the program runs. Changes made from the
menu are never written back to the file.