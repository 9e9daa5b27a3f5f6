"""An in-memory contact list driven from a text menu."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

_MENU = ("Enter 1 to add a contact\n"
         "Enter 2 to view saved contacts\n"
         "Enter 3 to exit: ")


@dataclass(frozen=True)
class Contact:
    """A saved person with an e-mail address and a phone number."""

    name: str
    email: str
    phone: str

    def describe(self) -> str:
        """The contact as three labelled lines."""
        return (f"Name: {self.name}\n"
                f"Email ID: {self.email}\n"
                f"Phone Number: {self.phone}")


@dataclass
class ContactBook:
    """Contacts in the order they were added."""

    contacts: list[Contact] = field(default_factory=list)

    def add(self, contact: Contact) -> None:
        """Append a contact to the book."""
        self.contacts.append(contact)

    def __iter__(self) -> Iterator[Contact]:
        return iter(self.contacts)

    def __len__(self) -> int:
        return len(self.contacts)


def _ask_contact() -> Contact:
    name = input("Enter the name: ").strip()
    email = input("Enter the Email ID: ").strip()
    phone = input("Enter the mobile number: ").strip()
    return Contact(name, email, phone)


def main(argv: list[str] | None = None) -> int:
    book = ContactBook()
    while True:
        choice = int(input(_MENU).strip())
        match choice:
            case 1:
                book.add(_ask_contact())
                print("New contact added successfully!\n")
            case 2:
                if not book:
                    print("No contacts were found....\n")
                for contact in book:
                    print(contact.describe())
                    print("\n")
            case 3:
                print("Thanks for using! Exiting the program now!")
                return 0
            case _:
                print("Invalid choice! Please enter a valid option.\n")