import pytest

from pocketdemos.contacts import Contact, ContactBook, main


def _feed(monkeypatch, answers):
    replies = iter(answers)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(replies))


def test_describe_lists_fields():
    contact = Contact("Ann", "ann@example.com", "12345")
    assert contact.describe() == (
        "Name: Ann\nEmail ID: ann@example.com\nPhone Number: 12345"
    )


def test_book_keeps_insertion_order():
    book = ContactBook()
    first = Contact("A", "a@example.com", "1")
    second = Contact("B", "b@example.com", "2")
    book.add(first)
    book.add(second)
    assert list(book) == [first, second]
    assert len(book) == 2


def test_new_book_is_empty():
    assert len(ContactBook()) == 0


def test_main_add_view_exit(monkeypatch, capsys):
    _feed(monkeypatch, ["1", " Ann ", "ann@example.com", "12345", "2", "3"])
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "New contact added successfully!" in out
    assert "Name: Ann\n" in out
    assert "Email ID: ann@example.com" in out
    assert out.rstrip().endswith("Thanks for using! Exiting the program now!")


def test_main_view_empty(monkeypatch, capsys):
    _feed(monkeypatch, ["2", "3"])
    main([])
    assert "No contacts were found...." in capsys.readouterr().out


def test_main_invalid_choice_number(monkeypatch, capsys):
    _feed(monkeypatch, ["7", "3"])
    main([])
    assert "Invalid choice! Please enter a valid option." in capsys.readouterr().out


def test_main_non_numeric_choice(monkeypatch):
    _feed(monkeypatch, ["abc"])
    with pytest.raises(ValueError):
        main([])