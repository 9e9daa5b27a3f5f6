"""Noughts and crosses against an unbeatable minimax opponent."""

from __future__ import annotations

from enum import Enum
from functools import lru_cache

_BLUE = "\x1b[38;5;12m"
_RED = "\x1b[38;5;9m"
_RESET = "\x1b[0m"


class Cell(Enum):
    """Contents of one square of the board."""

    EMPTY = "."
    X = "X"
    O = "O"


Board = list[list[Cell]]

# Rows and columns interleaved, then the two diagonals, as flat indices.
_LINES = tuple(
    line
    for i in range(3)
    for line in ((3 * i, 3 * i + 1, 3 * i + 2), (i, i + 3, i + 6))
) + ((0, 4, 8), (2, 4, 6))

_OUTCOMES = {
    Cell.X: "Congratulations! You have defeated the AI!",
    Cell.O: "Oops... AI wins this time....",
    Cell.EMPTY: "This game ends in a draw!",
}


def new_board() -> Board:
    """A 3x3 board of empty cells."""
    return [[Cell.EMPTY] * 3 for _ in range(3)]


def _flatten(board: Board) -> tuple[Cell, ...]:
    if len(board) != 3 or any(len(row) != 3 for row in board):
        raise ValueError("board must be 3x3")
    return tuple(cell for row in board for cell in row)


def _evaluate(cells: tuple[Cell, ...]) -> Cell | None:
    for a, b, c in _LINES:
        if cells[a] is not Cell.EMPTY and cells[a] == cells[b] == cells[c]:
            return cells[a]
    if all(cell is not Cell.EMPTY for cell in cells):
        return Cell.EMPTY
    return None


def evaluate(board: Board) -> Cell | None:
    """The winner, Cell.EMPTY for a draw, or None while play continues."""
    return _evaluate(_flatten(board))


def score_for(cell: Cell) -> int:
    """Score of a finished game from the computer's (O's) point of view."""
    return {Cell.O: 1, Cell.X: -1}.get(cell, 0)


def _place(cells: tuple[Cell, ...], index: int, mark: Cell) -> tuple[Cell, ...]:
    return cells[:index] + (mark,) + cells[index + 1:]


@lru_cache(maxsize=None)
def _minimax(cells: tuple[Cell, ...], maximizing: bool) -> int:
    result = _evaluate(cells)
    if result is not None:
        return score_for(result)
    mark = Cell.O if maximizing else Cell.X
    scores = [
        _minimax(_place(cells, i, mark), not maximizing)
        for i, cell in enumerate(cells)
        if cell is Cell.EMPTY
    ]
    return max(scores) if maximizing else min(scores)


def minimax(board: Board, maximizing: bool) -> int:
    """Value of the position with O maximizing and X minimizing."""
    return _minimax(_flatten(board), bool(maximizing))


def best_move(board: Board) -> tuple[int, int]:
    """The first square, in reading order, with the best score for O."""
    cells = _flatten(board)
    best: tuple[int, int] | None = None
    best_score = None
    for i, cell in enumerate(cells):
        if cell is not Cell.EMPTY:
            continue
        score = _minimax(_place(cells, i, Cell.O), False)
        if best_score is None or score > best_score:
            best_score = score
            best = divmod(i, 3)
    if best is None:
        raise ValueError("no empty square left on the board")
    return best


def _render_cell(cell: Cell) -> str:
    colour = {Cell.X: _BLUE, Cell.O: _RED}.get(cell, "")
    return f"{colour}{cell.value} {_RESET}"


def render_board(board: Board) -> str:
    """The board as three coloured lines of text."""
    return "\n".join("".join(_render_cell(cell) for cell in row) for row in board)


def _show(board: Board) -> None:
    print("\nBoard:")
    print(render_board(board))
    print()


def _ask_move(board: Board) -> tuple[int, int]:
    while True:
        try:
            row = int(input("Enter Row of your move (1, 2 or 3): ").strip())
        except ValueError:
            print("Invalid move....")
            continue
        try:
            col = int(input("Enter the column (1, 2 or 3): ").strip())
        except ValueError:
            print("Invalid move.....")
            continue
        if not (1 <= row <= 3 and 1 <= col <= 3) or board[row - 1][col - 1] is not Cell.EMPTY:
            print("Invalid move, please try again!")
            continue
        return row - 1, col - 1


def main(argv: list[str] | None = None) -> int:
    board = new_board()
    human_turn = True
    while True:
        _show(board)
        if human_turn:
            r, c = _ask_move(board)
            board[r][c] = Cell.X
        else:
            r, c = best_move(board)
            board[r][c] = Cell.O
        human_turn = not human_turn
        winner = evaluate(board)
        if winner is not None:
            _show(board)
            print(_OUTCOMES[winner])
            return 0