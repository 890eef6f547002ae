# crossbow_toolkit

A handful of small office utilities for the terminal:

- a calculator that remembers what you computed,
- a one-line invoice summary with a discount,
- a register of items kept in a binary file on disk.

It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

Add the `test` extra to pull in pytest:

```
pip install ".[test]"
```

## Commands

### `crossbow-calc`

An interactive calculator. It first asks whether history should be kept
between sessions (`y` to enable). It then asks for two numbers and an
operator (`+ - * /`) and prints the result to two decimal places. Invalid
numbers or an empty operator are asked for again; an unknown operator is
reported. Dividing by zero is reported and is not recorded.

After each calculation you can continue with `y`, stop with anything else,
or press `h` to see the history. From the history view, `c` clears every
entry and `d` deletes one entry by its number (counting from 1). The
session also ends when input runs out.

When saving is enabled, the history is read from the history file at
start and written back on exit. When it is disabled, any existing history
file is removed.

Options:

- `--history-file PATH` — file used to keep history between runs
  (default: `history.dat` in the current directory).

### `crossbow-invoice`

Prints an invoice summary: the total, the discount and the amount after
the discount. The discounted amount is truncated to a whole number.

Options:

- `--price N` — unit price (default: 5000).
- `--qty N` — quantity (default: 3).
- `--discount F` — discount as a fraction (default: 0.15).

### `crossbow-inventory`

Asks how many items to enter and then, for each one, its name, price and
quantity (input is read as whitespace-separated words, so names are a
single word of at most 29 bytes). The items are saved to the database
file, then read back from disk and listed. Invalid input is reported and
the command exits with status 1.

Options:

- `--database PATH` — file the items are stored in (default:
  `database.dat` in the current directory).

## Using it as a library

```python
from crossbow_toolkit.calculator import add, divide, operation_for
from crossbow_toolkit.history import History

history = History()
result = operation_for("*")(6, 7)
history.add(6, 7, "*", result)
print(history.render())
history.save("history.dat")
```

Modules:

- `crossbow_toolkit.calculator` — `add`, `subtract`, `multiply`,
  `divide` (returns 0 when dividing by zero) and `operation_for`, which
  maps an operator symbol to its function and raises `ValueError` for an
  unknown one.
- `crossbow_toolkit.history` — `CalcRecord` and `History` with `add`,
  `clear`, `delete_at` (raises `IndexError` on an empty history or a bad
  index), `save`, `load` and `render`.
- `crossbow_toolkit.prompts` — `banner`, and `parse_double` and
  `parse_operator`, which validate a line of user input and raise
  `ValueError` when it is not acceptable.
- `crossbow_toolkit.calc_cli` — `run(stdin, stdout, history_path)` runs
  the calculator on any pair of text streams; `main` is the command.
- `crossbow_toolkit.invoice` — `calculate_total`, `total_discount`,
  `calculate_discount` and `invoice_report`; `main` is the command.
- `crossbow_toolkit.inventory` — the `Item` record, `save_items`,
  `load_items`, `format_items` and `run(stdin, stdout, path)`; `main` is
  the command.
- `crossbow_toolkit.lessons` — small checks: `validate_initial`,
  `identity_report`, `check_access`, `grade`, `system_menu_message` and
  `countdown`, plus the `Invoice` record with `describe`, and
  `write_invoice_file` / `read_invoice_file` for a sample invoice text
  file. These have no command of their own.

## File formats

The history and item files are little-endian binary: a 32-bit record
count followed by fixed-size records. They are not meant to be edited by
hand.

## Running the tests

```
pytest
```