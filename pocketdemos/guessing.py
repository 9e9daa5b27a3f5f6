"""Number guessing games and a bounded random number picker."""

from __future__ import annotations

import argparse
import random

_LEVELS = {1: (50, 10), 2: (100, 8), 3: (200, 7)}
_FALLBACK = (100, 7)

_BOLD_CYAN = "\x1b[1;36m"
_YELLOW = "\x1b[33m"
_BLUE = "\x1b[34m"
_MAGENTA = "\x1b[35m"
_RESET = "\x1b[0m"


def _paint(text: str, style: str) -> str:
    return f"{style}{text}{_RESET}"


def settings_for(level: int) -> tuple[int, int]:
    """(largest secret number, allowed attempts) for a difficulty level."""
    return _LEVELS.get(level, _FALLBACK)


def judge(guess: int, secret: int) -> str:
    """'low', 'high' or 'correct' for a guess against the secret."""
    if guess < secret:
        return "low"
    if guess > secret:
        return "high"
    return "correct"


def pick_number(low: int, high: int, rng: random.Random | None = None) -> int:
    """A random integer in the inclusive range low..high."""
    if low >= high:
        raise ValueError("Lower bound must be less than upper bound.")
    return (rng or random).randint(low, high)


def _read_unsigned(prompt: str) -> int:
    value = int(input(prompt).strip())
    if value < 0:
        raise ValueError(f"expected a non-negative integer, got {value}")
    return value


def _play_levels() -> int:
    print(_paint("🎮 Welcome to Guess the Number!", _BOLD_CYAN))
    level = _read_unsigned(
        "Choose your difficulty level (1 = Easy; 2 = Medium; 3 = Difficult): ")
    if level not in _LEVELS:
        print(f"Invalid value.... defaulting to {_paint('MEDIUM', _YELLOW)}")
    max_number, max_attempts = settings_for(level)
    secret = pick_number(1, max_number)
    attempts = 0
    print(f"You would have {max_attempts} attempts ot guess a random number "
          f"between 1 and {max_number}")
    while True:
        if attempts > max_attempts:
            print(f"Sorry, max attempts exceeded, the actual number was {secret}....")
            return 0
        attempts += 1
        guess = _read_unsigned(f"Enter guess {attempts}: ")
        match judge(guess, secret):
            case "low":
                print(_paint("Too low!", _BLUE))
            case "high":
                print(_paint("Too high!", _MAGENTA))
            case _:
                print("Congratulations!! You guessed the correct number "
                      f"in {attempts} attempts")
                return 0


def _play_classic() -> int:
    secret = pick_number(1, 100)
    attempts = 0
    print("A random number is generated which has to be guessed in 10 attempts "
          "based on the hints provided!")
    while True:
        try:
            guess = _read_unsigned(f"\nEnter guess #{attempts + 1}: ")
        except ValueError:
            print("Please enter a valid positive integer....")
            attempts -= 1
            continue
        attempts += 1
        match judge(guess, secret):
            case "low":
                print("GUESS IS TOO LOW!")
            case "high":
                print("GUESS IS TOO HIGH!")
            case _:
                print(f"Congratulations! You guessed the correct number {guess} "
                      f"in {attempts} attempts!!")
                return 0


def _random_number() -> int:
    low = _read_unsigned("Enter the lower bound: ")
    high = _read_unsigned("Enter the upper bound: ")
    try:
        result = pick_number(low, high)
    except ValueError as exc:
        print(f"❌ {exc}")
        return 1
    print(f"🎲 The generated number is: {result}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="guessing", description=__doc__)
    parser.add_argument("mode", nargs="?", default="game",
                        choices=["game", "classic", "random"])
    args = parser.parse_args(argv)
    match args.mode:
        case "game":
            return _play_levels()
        case "classic":
            return _play_classic()
        case _:
            return _random_number()