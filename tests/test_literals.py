from fractions import Fraction

import pytest

from rippertok.translate import literals


@pytest.mark.parametrize(
    ("text", "value"),
    [
        ("0", 0),
        ("42", 42),
        ("1_000", 1000),
        ("0x1f", 31),
        ("0X1F", 31),
        ("0b1010", 10),
        ("0o17", 15),
        ("017", 15),
        ("0d99", 99),
        ("+5", 5),
    ],
)
def test_parse_integer(text: str, value: int) -> None:
    assert literals.parse_integer(text) == value


@pytest.mark.parametrize("text", ["1__0", "_1", "0x", "09", "1.5"])
def test_parse_integer_rejects_malformed_text(text: str) -> None:
    with pytest.raises(ValueError):
        literals.parse_integer(text)


def test_parse_float() -> None:
    assert literals.parse_float("1.5") == 1.5
    assert literals.parse_float("1_000.25") == 1000.25
    assert literals.parse_float("1e3") == 1000.0
    assert literals.parse_float("2.5E-1") == 0.25


def test_parse_float_does_not_evaluate_text() -> None:
    with pytest.raises(ValueError):
        literals.parse_float("__import__('os')")


def test_parse_rational_is_exact() -> None:
    assert literals.parse_rational("3r") == Fraction(3)
    assert literals.parse_rational("1.5r") == Fraction(3, 2)
    assert literals.parse_rational("0.1r") == Fraction(1, 10)
    assert literals.parse_rational("0x10r") == Fraction(16)


def test_parse_imaginary() -> None:
    assert literals.parse_imaginary("2i") == 2j
    assert literals.parse_imaginary("1.5i") == 1.5j
    assert literals.parse_imaginary("3ri") == 3j
    assert literals.parse_imaginary("0b11i") == 3j


def test_back_references() -> None:
    assert literals.nth_ref_number("$1") == 1
    assert literals.nth_ref_number("$12") == 12
    assert literals.nth_ref_number("$&") is None
    assert literals.nth_ref_number("$`") is None


def test_character_payload_drops_marker() -> None:
    assert literals.character_payload("?a") == "a"
    assert literals.character_payload("?\\n") == "\\n"
