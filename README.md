# pocketdemos

A collection of small console programs. Each one is a short, self-contained
exercise: number crunching, string handling, matrix products, a few games and
some lookups against public web APIs. The logic behind every program is also
importable, so the same functions can be used from Python code or from tests.

## Installation

```
pip install pocketdemos
```

To run the test suite:

```
pip install "pocketdemos[test]"
pytest
```

## Commands

Some commands take their input as arguments, and the others ask for it on the
terminal.

| Command                  | What it does                                                                 |
|--------------------------|------------------------------------------------------------------------------|
| `pocketdemos-arith`      | Subcommands `prime`, `factorial`, `fibonacci`, `hcf`, `lcm`, `pascal`, `range`, `scientific`, `interest`, `sqrt`, `table` |
| `pocketdemos-arrays`     | Asks for integers, then prints the sum, extremes, average, reversed and sorted list, and searches for a value |
| `pocketdemos-calculator` | Evaluates `<number> <operator> <number>` with `+ - * /`, from the arguments or a prompt |
| `pocketdemos-complex`    | Asks for two complex numbers and prints sum, difference, product, quotient, magnitudes and conjugates |
| `pocketdemos-matrix`     | Asks for two integer matrices and prints their product                       |
| `pocketdemos-text`       | `longest`, `palindrome`, `vowels` or `length` followed by a text             |
| `pocketdemos-patterns`   | Prints a star triangle of the given number of rows; `--reversed` turns it upside down |
| `pocketdemos-tictactoe`  | Tic-tac-toe against a minimax opponent                                       |
| `pocketdemos-guess`      | Mode `game` (difficulty levels, the default), `classic` (1 to 100) or `random` (a number between two bounds) |
| `pocketdemos-rps`        | Rock, paper, scissors against the computer                                   |
| `pocketdemos-colour`     | Shows a block of a colour given as `#rrggbb`                                 |
| `pocketdemos-contacts`   | An in-memory contact list with a small menu                                  |
| `pocketdemos-examples`   | Demo `hello` (the default), `messages`, `capitals` or `employee`             |
| `pocketdemos-web`        | Task `location`, `pokemon`, `download` or `open`                             |

Examples:

```
pocketdemos-arith prime 97
pocketdemos-arith hcf 12 18
pocketdemos-calculator 3 / 4
pocketdemos-text longest "a quick fox"
pocketdemos-patterns 4 --reversed
pocketdemos-guess random
pocketdemos-web location
```

The colour, tic-tac-toe and guessing programs use ANSI escape codes, so they
look best in a terminal that understands them. The web commands need network
access.

## Using the functions

```python
from pocketdemos.arith import is_prime, hcf, lcm, pascal_rows
from pocketdemos.text import longest_word, is_palindrome, count_vowels
from pocketdemos.matrix import multiply, format_matrix
from pocketdemos.tictactoe import new_board, best_move, evaluate

is_prime(97)                  # True
hcf(12, 18), lcm(4, 6)        # (6, 12)
pascal_rows(3)                # [[1], [1, 1], [1, 2, 1]]
longest_word("a quick fox")   # "quick"
is_palindrome("level")        # True
count_vowels("Education")     # 5

print(format_matrix(multiply([[1, 2], [3, 4]], [[5, 6], [7, 8]])))

board = new_board()
row, col = best_move(board)   # (0, 0) on an empty board
evaluate(board)               # None while the game is still open
```

Modules and what they offer:

- `pocketdemos.arith`: `is_prime`, `factorial`, `fibonacci`, `hcf`, `lcm`,
  `binomial`, `pascal_rows`, `classify_range`, `scientific`,
  `simple_interest`, `square_root`, `multiplication_table`.
- `pocketdemos.arrays`: `summarize`, which returns an `ArrayStats`, and `find`.
- `pocketdemos.calculator`: `evaluate`.
- `pocketdemos.complexnum`: `format_complex` and `describe`.
- `pocketdemos.matrix`: `multiply` and `format_matrix`.
- `pocketdemos.text`: `longest_word`, `is_palindrome`, `count_vowels`,
  `byte_length`.
- `pocketdemos.patterns`: `star_triangle` and `reversed_star_triangle`.
- `pocketdemos.tictactoe`: `Cell`, `new_board`, `evaluate`, `score_for`,
  `minimax`, `best_move`, `render_board`.
- `pocketdemos.guessing`: `settings_for`, `judge`, `pick_number`.
- `pocketdemos.rps`: `Choice`, `Result`, `choice_from_number`, `decide`.
- `pocketdemos.colour`: `hex_to_rgb` and `colour_block`.
- `pocketdemos.contacts`: `Contact` and `ContactBook`.
- `pocketdemos.examples`: the messages `Quit`, `Move` and `Write` with
  `process_message`, `capital_lines`, and `Employee`.
- `pocketdemos.web`: `Location`, `fetch_location`, `format_location`,
  `Pokemon`, `pokemon_slug`, `fetch_pokemon`, `format_pokemon`,
  `download_page`, `open_url`. The fetch and download functions accept an
  optional `session` with a `get` method, such as a `requests.Session`.

Invalid input raises an exception: `ValueError` for things such as a negative
count, a malformed colour or an unknown operator, and `ZeroDivisionError` for
division by zero in `evaluate`.

## What it does not do

- Contacts are kept in memory only. Nothing is saved when the program exits.
- `pocketdemos-web open` and `open_url` do not launch a web browser. They send
  an HTTP request to the URL and report whether it answered successfully.
- `download_page` saves the page's HTML text only. It does not fetch images,
  scripts or other resources.