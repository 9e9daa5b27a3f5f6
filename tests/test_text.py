from pocketdemos import text


def test_longest_word_last_tie_wins():
    assert text.longest_word("ab cd ef") == "ef"
    assert text.longest_word("a quick fox") == "quick"
    assert text.longest_word("   ") is None


def test_is_palindrome_case_sensitive():
    assert text.is_palindrome("racecar")
    assert not text.is_palindrome("Racecar")
    assert text.is_palindrome("")


def test_count_vowels_ignores_case():
    assert text.count_vowels("AEIOU aeiou") == 10
    assert text.count_vowels("rhythm") == 0


def test_byte_length_counts_utf8():
    assert text.byte_length("Rustacean") == len("Rustacean")
    assert text.byte_length("é") == 2


def test_main_longest(capsys):
    assert text.main(["longest", "hello there world"]) == 0
    assert "'world' was the longest word found." in capsys.readouterr().out