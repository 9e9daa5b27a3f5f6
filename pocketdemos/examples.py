"""Small demonstrations of tagged messages, mappings and records."""

from __future__ import annotations

import argparse
import json
from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class Quit:
    """A request to stop."""


@dataclass(frozen=True)
class Move:
    """A request to move to a point."""

    x: int
    y: int


@dataclass(frozen=True)
class Write:
    """A request to write some text."""

    text: str


Message = Quit | Move | Write


def process_message(message: Message) -> str:
    """Describe the message that was received."""
    match message:
        case Quit():
            return "Quit message received."
        case Move(x=x, y=y):
            return f"Move message received with coordinates: ({x}, {y})"
        case Write(text=text):
            return f"Write message received with text: {text}"
    raise TypeError(f"unknown message: {message!r}")


DEFAULT_CAPITALS = {
    "USA": "Washington DC",
    "India": "New Delhi",
    "Norway": "Oslo",
}


def _debug_mapping(mapping: Mapping[str, str]) -> str:
    body = ", ".join(f"{json.dumps(k)}: {json.dumps(v)}" for k, v in mapping.items())
    return "{" + body + "}"


def capital_lines(capitals: Mapping[str, str]) -> list[str]:
    """One sentence per country naming its capital."""
    return [f"The capital of {country} is {city}" for country, city in capitals.items()]


@dataclass(frozen=True)
class Employee:
    """An employee record."""

    name: str
    company: str
    phone: str
    department: str

    def describe(self) -> list[str]:
        """Lines presenting the employee's details."""
        return [
            f"Employee {self.name} of {self.company} company details:",
            f"\t- Phone Number: {self.phone}",
            f"\t- Department: {self.department}",
        ]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="examples", description=__doc__)
    parser.add_argument("demo", nargs="?", default="hello",
                        choices=["hello", "messages", "capitals", "employee"])
    args = parser.parse_args(argv)
    match args.demo:
        case "hello":
            print("Hello World!")
        case "messages":
            for message in (Quit(), Move(25, 444), Write("Alex")):
                print(process_message(message))
        case "capitals":
            print(f"The Hash Map created is:\n{_debug_mapping(DEFAULT_CAPITALS)}\n")
            print("\n".join(capital_lines(DEFAULT_CAPITALS)))
        case "employee":
            employee = Employee("Alex", "Example Corp", "[phone]", "Python Developer")
            print("\n".join(employee.describe()))
    return 0