"""Cleaning and separator classification for Indonesian numeric text."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional, Tuple

__all__ = [
    "SeparatorCase",
    "Classified",
    "split_sign",
    "keep_first_comma",
    "strip_noise",
    "strip_leading_zeros",
    "classify",
    "coerce_text",
]

_NOISE_PATTERN = re.compile(r"[^0-9.,]")
_NON_DIGIT_PATTERN = re.compile(r"\D")
_LEADING_ZEROS_PATTERN = re.compile(r"^0+(?!$)")
# 1-3 leading digits, then one or more ".ddd" groups: "1.500", "12.345.678"
_THOUSANDS_PATTERN = re.compile(r"^\d{1,3}(?:\.\d{3})+$")


class SeparatorCase(str, Enum):
    DECIMAL_COMMA = "decimal_comma"
    THOUSANDS_DOT = "thousands_dot"
    DECIMAL_DOT = "decimal_dot"
    DIGITS = "digits"


@dataclass(frozen=True, slots=True)
class Classified:
    """Sanitized magnitude split into integer and decimal digit runs.

    ``dec_digits`` is ``None`` when the text carried no decimal marker and may be
    an empty string when a marker was typed without digits after it (``"12,"``).
    """

    case: SeparatorCase
    int_digits: str
    dec_digits: Optional[str] = None


def split_sign(text: str) -> Tuple[bool, str]:
    """Trim ``text`` and detach a leading minus sign."""
    text = text.strip()
    if text.startswith("-"):
        return True, text[1:]
    return False, text


def keep_first_comma(text: str) -> str:
    """Keep only the first comma as decimal marker; drop the rest."""
    head, sep, tail = text.partition(",")
    if not sep:
        return text
    return head + sep + tail.replace(",", "")


def strip_noise(text: str) -> str:
    """Drop every character that is not a digit, dot or comma."""
    return _NOISE_PATTERN.sub("", text)


def strip_leading_zeros(digits: str) -> str:
    return _LEADING_ZEROS_PATTERN.sub("", digits) or "0"


def _digits_only(text: str) -> str:
    return _NON_DIGIT_PATTERN.sub("", text)


def classify(text: str) -> Classified:
    """Classify unsigned numeric text by its separator usage.

    - a comma makes the first comma the decimal marker; dots are noise
    - otherwise a valid thousands grouping (``1.500``) makes every dot a
      thousands separator, and any other dotted text uses its first dot as
      the decimal point
    - plain digits are an integer
    """
    cleaned = strip_noise(text)

    if "," in cleaned:
        int_part, _, dec_part = keep_first_comma(cleaned).partition(",")
        return Classified(
            SeparatorCase.DECIMAL_COMMA,
            strip_leading_zeros(_digits_only(int_part)),
            _digits_only(dec_part),
        )

    if "." in cleaned:
        if _THOUSANDS_PATTERN.match(cleaned):
            return Classified(SeparatorCase.THOUSANDS_DOT, strip_leading_zeros(_digits_only(cleaned)))
        int_part, _, dec_part = cleaned.partition(".")
        return Classified(
            SeparatorCase.DECIMAL_DOT,
            strip_leading_zeros(int_part),
            _digits_only(dec_part),
        )

    return Classified(SeparatorCase.DIGITS, strip_leading_zeros(cleaned))


def coerce_text(value: object) -> str:
    """Render text or a number as positional decimal text.

    Floats keep their shortest repr digits, integral floats drop their
    fractional part (``1e23`` -> ``"1" + "0" * 23``) and no value is ever
    rendered in exponent notation.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        raise TypeError("boolean values are not numbers")
    if isinstance(value, int):
        return str(Decimal(value))
    if isinstance(value, float):
        if not math.isfinite(value):
            return str(value)
        if value == 0:
            return "0"
        text = format(Decimal(repr(value)), "f")
        if value.is_integer():
            return text.partition(".")[0]
        return text
    if isinstance(value, Decimal):
        if not value.is_finite():
            return str(value)
        return format(value, "f")
    raise TypeError(f"unsupported value type: {type(value).__name__}")
