"""Simple string utilities."""

from __future__ import annotations

import argparse

_VOWELS = frozenset("aeiou")


def byte_length(text: str) -> int:
    """Length of text in UTF-8 bytes."""
    return len(text.encode("utf-8"))


def longest_word(sentence: str) -> str | None:
    """Longest whitespace-separated word; the last one wins ties."""
    best = None
    for word in sentence.split():
        if best is None or byte_length(word) >= byte_length(best):
            best = word
    return best


def is_palindrome(text: str) -> bool:
    """Case-sensitive palindrome check."""
    return text == text[::-1]


def count_vowels(text: str) -> int:
    """Number of a, e, i, o, u in text, ignoring case."""
    return sum(1 for ch in text.lower() if ch in _VOWELS)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="text", description=__doc__)
    parser.add_argument("command", choices=["longest", "palindrome", "vowels", "length"])
    parser.add_argument("text")
    args = parser.parse_args(argv)
    text = args.text.strip()
    match args.command:
        case "longest":
            word = longest_word(text)
            print("No words found.... Please try again!" if word is None
                  else f"'{word}' was the longest word found.")
        case "palindrome":
            verdict = "palindrome" if is_palindrome(text) else "not palindrome"
            print(f"The entered string is {verdict}.")
        case "vowels":
            print(f"Number of vowels found: {count_vowels(text)}")
        case "length":
            print(f"Length of string: {byte_length(args.text)}")
            print(f"Original string: {args.text}")
    return 0