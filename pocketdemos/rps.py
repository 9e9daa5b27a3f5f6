"""Rock, paper, scissors against the computer."""

from __future__ import annotations

import random
from enum import Enum


class Choice(Enum):
    """A hand, numbered as the player enters it."""

    ROCK = 1
    PAPER = 2
    SCISSORS = 3


class Result(Enum):
    """Outcome of a round, valued by its announcement."""

    WIN = "You win!"
    TIE = "Its a tie!"
    LOSE = "Oops.... You lose...."


_WINNING = {
    (Choice.ROCK, Choice.SCISSORS),
    (Choice.PAPER, Choice.ROCK),
    (Choice.SCISSORS, Choice.ROCK),
}


def choice_from_number(n: int) -> Choice:
    """The hand for 1, 2 or 3."""
    try:
        return Choice(n)
    except ValueError:
        raise ValueError("Invalid input....") from None


def decide(player: Choice, computer: Choice) -> Result:
    """The outcome of player against computer."""
    if (player, computer) in _WINNING:
        return Result.WIN
    if player is computer:
        return Result.TIE
    return Result.LOSE


def main(argv: list[str] | None = None) -> int:
    number = int(input("Enter '1' for Rock, '2' for Paper or '3' for Scissors: ").strip())
    try:
        player = choice_from_number(number)
    except ValueError as exc:
        print(exc)
        return 1
    computer = Choice(random.randint(1, 3))
    print(decide(player, computer).value)
    return 0