import pytest

from hshell.text import (
    atoi,
    convert_number,
    erratoi,
    remove_comments,
    split_words,
    starts_with,
)


def test_starts_with_returns_remainder():
    assert starts_with("PATH=/bin", "PATH") == "=/bin"


def test_starts_with_no_match():
    assert starts_with("PA", "PATH") is None
    assert starts_with("HOME=/x", "PATH") is None


def test_starts_with_empty_needle():
    assert starts_with("abc", "") == "abc"


def test_split_words_ignores_repeated_delimiters():
    assert split_words("  ls \t  -l  ", " \t") == ["ls", "-l"]


def test_split_words_empty_and_only_delims():
    assert split_words("", " ") == []
    assert split_words(None, " ") == []
    assert split_words("   ", " ") == []


def test_split_words_default_delimiter():
    assert split_words("a b\tc", None) == ["a", "b\tc"]


def test_split_words_join_roundtrip():
    words = ["echo", "hello", "world"]
    assert split_words(" ".join(words), " ") == words


def test_atoi_plain_and_embedded():
    assert atoi("123") == int("123")
    assert atoi("abc42def") == int("42")


def test_atoi_no_digits():
    assert atoi("hello") == 0


def test_atoi_sign_handling():
    assert atoi("-7") == -int("7")
    assert atoi("--7") == int("7")
    assert atoi("12-") == -int("12")


def test_atoi_stops_after_first_number():
    assert atoi("12 34") == int("12")


def test_erratoi_valid():
    assert erratoi("98") == int("98")
    assert erratoi("+5") == int("5")
    assert erratoi("2147483647") == 2147483647


def test_erratoi_empty_is_zero():
    assert erratoi("") == 0


@pytest.mark.parametrize("text", ["abc", "-1", "12x", "2147483648", "++1"])
def test_erratoi_rejects(text):
    with pytest.raises(ValueError):
        erratoi(text)


@pytest.mark.parametrize("num", [0, 1, 9, 10, 255, 4096, 123456789])
@pytest.mark.parametrize("base", [2, 8, 10, 16])
def test_convert_number_roundtrip(num, base):
    assert int(convert_number(num, base), base) == num


def test_convert_number_negative_signed():
    text = convert_number(-300, 10)
    assert text.startswith("-")
    assert int(text) == -300


def test_convert_number_case():
    assert convert_number(0xABC, 16) == convert_number(0xABC, 16, lowercase=True).upper()
    assert convert_number(0xABC, 16, lowercase=True).islower()


def test_convert_number_unsigned_wraps_64_bits():
    assert convert_number(-1, 16, unsigned=True) == "F" * 16


def test_convert_number_bad_base():
    with pytest.raises(ValueError):
        convert_number(5, 1)


def test_remove_comments():
    assert remove_comments("echo hi # note") == "echo hi "
    assert remove_comments("#whole line") == ""
    assert remove_comments("echo a#b") == "echo a#b"