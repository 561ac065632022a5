import pytest

from bsdcompat.units import dehumanize_number, expand_number


@pytest.mark.parametrize(
    "text, expected",
    [
        ("7b", 7),
        ("7B", 7),
        ("7k", 7 << 10),
        ("7K", 7 << 10),
        ("7m", 7 << 20),
        ("7g", 7 << 30),
        ("7t", 7 << 40),
        ("7p", 7 << 50),
        ("7e", 7 << 60),
    ],
)
def test_expand_suffixes(text, expected):
    assert expand_number(text) == expected


def test_expand_plain_number():
    assert expand_number("12345") == 12345


def test_expand_hex_and_octal():
    assert expand_number("0x10") == 16
    assert expand_number("010") == 8


def test_expand_ignores_text_after_unit():
    assert expand_number("1kfoo") == expand_number("1k")


def test_expand_leading_whitespace():
    assert expand_number("  42") == 42


@pytest.mark.parametrize("text", ["", "abc", "10q", "k", "08"])
def test_expand_invalid(text):
    with pytest.raises(ValueError):
        expand_number(text)


def test_expand_overflow_on_shift():
    assert expand_number("15e") == 15 << 60
    with pytest.raises(OverflowError):
        expand_number("16e")


def test_expand_overflow_on_digits():
    with pytest.raises(OverflowError):
        expand_number(str(1 << 64))


def test_expand_max_uint64():
    text = str((1 << 64) - 1)
    assert expand_number(text) == (1 << 64) - 1


def test_dehumanize_positive_matches_expand():
    for text in ("5", "3k", "2M", "1g"):
        assert dehumanize_number(text) == expand_number(text)


def test_dehumanize_negative():
    assert dehumanize_number("-1k") == -(1 << 10)
    assert dehumanize_number("  -5") == -5


def test_dehumanize_limits():
    assert dehumanize_number("-8e") == -(1 << 63)
    with pytest.raises(OverflowError):
        dehumanize_number("8e")
    with pytest.raises(OverflowError):
        dehumanize_number("-9e")


def test_dehumanize_invalid():
    with pytest.raises(ValueError):
        dehumanize_number("-x")