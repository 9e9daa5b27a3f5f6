import pytest

from pocketdemos.colour import colour_block, hex_to_rgb, main


def test_pinned_extremes():
    assert hex_to_rgb("#ffffff") == (255, 255, 255)
    assert hex_to_rgb("000000") == (0, 0, 0)


@pytest.mark.parametrize("rgb", [(14, 14, 14), (1, 128, 254), (200, 3, 77)])
def test_round_trip(rgb):
    r, g, b = rgb
    assert hex_to_rgb(f"#{r:02x}{g:02x}{b:02x}") == rgb


def test_case_insensitive():
    assert hex_to_rgb("#ABCDEF") == hex_to_rgb("#abcdef")


def test_surrounding_space_and_repeated_hash():
    r, g, b = 10, 11, 12
    assert hex_to_rgb(f"  ##{r:02x}{g:02x}{b:02x} ") == (r, g, b)


@pytest.mark.parametrize("value", ["", "#12345", "#1234567", "#gg0000", "#12 456"])
def test_invalid_values(value):
    with pytest.raises(ValueError):
        hex_to_rgb(value)


def test_colour_block_shape():
    r, g, b = 1, 2, 3
    lines = colour_block(r, g, b).split("\n")
    cell = f"\x1b[48;2;{r};{g};{b}m  \x1b[0m"
    assert len(lines) == 5
    assert all(line == cell * 10 for line in lines)


def test_colour_block_rejects_out_of_range():
    with pytest.raises(ValueError):
        colour_block(256, 0, 0)


def test_main_previews_colour(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt="": "#0e0e0e")
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Preview of Colour #0e0e0e" in out
    r, g, b = hex_to_rgb("#0e0e0e")
    assert out.count(f"\x1b[48;2;{r};{g};{b}m") == 50


def test_main_reports_invalid(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt="": "#xyz")
    assert main([]) == 1
    assert "Invalid colour entered" in capsys.readouterr().err