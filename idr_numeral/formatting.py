"""Render numbers in Indonesian display style ("1.234.567,89")."""

from __future__ import annotations

from decimal import Decimal
from typing import Optional, Tuple, Union

from .fixed import FixedPoint
from .models import FormatOptions
from .sanitize import classify, coerce_text, split_sign, strip_leading_zeros

__all__ = ["format_idr", "group_thousands", "round_digits"]

THOUSANDS_SEPARATOR = "."
DECIMAL_SEPARATOR = ","


def group_thousands(digits: str) -> str:
    """Group an integer digit run by three from the right: ``"1234567"`` -> ``"1.234.567"``."""
    digits = strip_leading_zeros(digits)
    head = len(digits) % 3 or 3
    groups = [digits[:head]]
    groups.extend(digits[i:i + 3] for i in range(head, len(digits), 3))
    return THOUSANDS_SEPARATOR.join(groups)


def _increment(digits: str) -> str:
    """Add one to a digit run: trailing nines roll over to zeros."""
    head = digits.rstrip("9")
    zeros = "0" * (len(digits) - len(head))
    if not head:
        return "1" + zeros
    return head[:-1] + str(int(head[-1]) + 1) + zeros


def round_digits(int_digits: str, dec_digits: str, decimals: int) -> Tuple[str, str]:
    """Round ``int_digits`` + ``dec_digits`` to exactly ``decimals`` digits, half-up.

    The carry runs through every digit of the magnitude, so
    ``("999", "99", 1)`` becomes ``("1000", "0")``.
    """
    int_digits = int_digits or "0"
    dec_digits = dec_digits or ""

    if decimals == 0:
        if dec_digits and int(dec_digits[0]) >= 5:
            int_digits = _increment(int_digits)
        return strip_leading_zeros(int_digits), ""

    if len(dec_digits) <= decimals:
        return int_digits, dec_digits.ljust(decimals, "0")

    kept = dec_digits[:decimals]
    if int(dec_digits[decimals]) < 5:
        return int_digits, kept

    bumped = _increment(int_digits + kept)
    return strip_leading_zeros(bumped[:-decimals]), bumped[-decimals:]


def _finish(int_digits: str, dec_digits: Optional[str], options: FormatOptions) -> str:
    if options.preserve:
        grouped = group_thousands(int_digits)
        if not dec_digits:
            return grouped
        if options.pad_zeros:
            dec_digits = dec_digits.ljust(2, "0")
        return f"{grouped}{DECIMAL_SEPARATOR}{dec_digits}"

    int_digits, dec_digits = round_digits(int_digits, dec_digits or "", options.decimals)
    grouped = group_thousands(int_digits)
    if options.decimals == 0:
        return grouped
    return f"{grouped}{DECIMAL_SEPARATOR}{dec_digits}"


def format_idr(
    value: Union[str, int, float, Decimal, FixedPoint, None],
    options: Optional[FormatOptions] = None,
    **overrides,
) -> str:
    """Format a value in Indonesian numeric style.

    ``"."`` groups thousands and ``","`` marks decimals. Text input is read with
    these rules:

    - a comma is the decimal separator (only the first one counts)
    - without a comma, dots forming a valid thousands grouping (``"1.500"``,
      ``"12.345.678"``) are thousands separators; otherwise the first dot is
      the decimal point (``"12.34"`` -> ``"12,34"``)
    - currency symbols, letters and spaces are ignored
    - a leading minus is kept

    Decimal digits are preserved as typed unless ``decimals`` is set, in which
    case they are rounded half-up or padded. Keyword overrides (``decimals=``,
    ``pad_zeros=``) replace the matching fields of ``options``.

    Empty input yields ``""``; text with no digits renders as ``"0"``.
    """
    options = options or FormatOptions()
    if overrides:
        options = FormatOptions(
            decimals=overrides.pop("decimals", options.decimals),
            pad_zeros=overrides.pop("pad_zeros", options.pad_zeros),
        )
        if overrides:
            raise TypeError(f"unexpected format options: {', '.join(sorted(overrides))}")

    if value is None or value == "":
        return ""
    if isinstance(value, FixedPoint):
        value = value.to_canonical_string()
    elif isinstance(value, str):
        return _format_text(value, options)
    # the point in a rendered number is always a decimal point, never a grouping
    return _format_text(coerce_text(value).replace(".", DECIMAL_SEPARATOR), options)


def _format_text(value: str, options: FormatOptions) -> str:
    negative, text = split_sign(value)
    classified = classify(text)
    display = _finish(classified.int_digits, classified.dec_digits, options)
    return f"-{display}" if negative else display
