import pytest

from pocketdemos.examples import (
    DEFAULT_CAPITALS,
    Employee,
    Move,
    Quit,
    Write,
    capital_lines,
    main,
    process_message,
)


def test_quit_message():
    assert process_message(Quit()) == "Quit message received."


def test_move_message():
    assert process_message(Move(25, 444)) == (
        "Move message received with coordinates: (25, 444)"
    )


def test_write_message():
    assert process_message(Write("hi")) == "Write message received with text: hi"


def test_unknown_message_rejected():
    with pytest.raises(TypeError):
        process_message("nope")


def test_capital_lines_follow_mapping_order():
    lines = capital_lines({"Norway": "Oslo", "India": "New Delhi"})
    assert lines == ["The capital of Norway is Oslo",
                     "The capital of India is New Delhi"]


def test_capital_lines_cover_defaults():
    lines = capital_lines(DEFAULT_CAPITALS)
    assert len(lines) == len(DEFAULT_CAPITALS)
    assert "The capital of USA is Washington DC" in lines


def test_employee_describe():
    employee = Employee("Bo", "Acme", "[phone]", "Sales")
    assert employee.describe() == [
        "Employee Bo of Acme company details:",
        "\t- Phone Number: [phone]",
        "\t- Department: Sales",
    ]


def test_main_hello(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "Hello World!\n"


def test_main_capitals_prints_map(capsys):
    main(["capitals"])
    out = capsys.readouterr().out
    assert '"India": "New Delhi"' in out
    assert "The capital of Norway is Oslo" in out