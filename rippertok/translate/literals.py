"""Numeric and special literal payloads.

Numeric text is parsed against Ruby's literal grammar directly; nothing is
evaluated.
"""

from fractions import Fraction
import re

_RADIX_PREFIXES = {
    "0x": 16,
    "0b": 2,
    "0o": 8,
    "0d": 10,
    "0_": 8,
}
_NTH_REF = re.compile(r"\$(\d+)")
_FLOAT = re.compile(r"[+-]?\d+(?:\.\d+)?(?:[eE][+-]?\d+)?")


def _split_sign(text: str) -> tuple[int, str]:
    if text[:1] == "-":
        return -1, text[1:]
    if text[:1] == "+":
        return 1, text[1:]
    return 1, text


def parse_integer(text: str) -> int:
    """Parse a Ruby integer literal (``1_000``, ``0x1f``, ``0b1010``, ``017``)."""
    sign, digits = _split_sign(text)
    lowered = digits.lower()
    radix = 10
    for prefix, prefix_radix in _RADIX_PREFIXES.items():
        if lowered.startswith(prefix):
            radix = prefix_radix
            lowered = lowered[len(prefix) :]
            break
    else:
        if len(lowered) > 1 and lowered.startswith("0"):
            radix = 8
            lowered = lowered[1:]

    if not lowered or lowered.startswith("_") or lowered.endswith("_") or "__" in lowered:
        raise ValueError(f"Malformed integer literal: {text!r}")
    return sign * int(lowered.replace("_", ""), radix)


def parse_float(text: str) -> float:
    cleaned = text.replace("_", "")
    if not _FLOAT.fullmatch(cleaned):
        raise ValueError(f"Malformed float literal: {text!r}")
    return float(cleaned)


def parse_rational(text: str) -> Fraction:
    """Parse ``3r``, ``1.5r`` or ``0x10r`` exactly."""
    if not text.endswith("r"):
        raise ValueError(f"Malformed rational literal: {text!r}")
    body = text[:-1]
    if "." in body:
        cleaned = body.replace("_", "")
        if not _FLOAT.fullmatch(cleaned) or "e" in cleaned.lower():
            raise ValueError(f"Malformed rational literal: {text!r}")
        return Fraction(cleaned)
    return Fraction(parse_integer(body))


def parse_imaginary(text: str) -> complex:
    """Parse ``2i``, ``1.5i`` or ``3ri`` into a purely imaginary number."""
    if not text.endswith("i"):
        raise ValueError(f"Malformed imaginary literal: {text!r}")
    body = text[:-1]
    if body.endswith("r"):
        magnitude: float = float(parse_rational(body))
    else:
        try:
            magnitude = float(parse_integer(body))
        except ValueError:
            magnitude = parse_float(body)
    return complex(0, magnitude)


def nth_ref_number(text: str) -> int | None:
    """``"$1"`` -> ``1``; ``None`` for named/special back-references like ``$&``."""
    match = _NTH_REF.fullmatch(text)
    if match is None:
        return None
    return int(match.group(1))


def character_payload(text: str) -> str:
    """``"?a"`` -> ``"a"``."""
    return text[1:]
