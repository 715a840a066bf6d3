"""Exact fixed-point decimal values backed by Python integers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal

__all__ = ["FixedPoint"]


def _digits_to_int(digits: str) -> int:
    # Decimal sidesteps the int/str digit limit for very long runs
    return int(Decimal(digits))


def _int_to_digits(value: int) -> str:
    return str(Decimal(value))


@dataclass(frozen=True, slots=True)
class FixedPoint:
    """Exact decimal value: ``sign * unscaled / 10 ** scale``.

    ``scale`` counts the decimal digits exactly as they were supplied, so
    ``FixedPoint.from_digits(1, "12", "50")`` keeps scale 2 rather than
    collapsing to ``12.5``.
    """

    sign: int
    unscaled: int
    scale: int

    def __post_init__(self) -> None:
        if self.sign not in (1, -1):
            raise ValueError(f"sign must be 1 or -1, got {self.sign!r}")
        if isinstance(self.unscaled, bool) or not isinstance(self.unscaled, int):
            raise ValueError("unscaled must be an integer")
        if self.unscaled < 0:
            raise ValueError("unscaled must not be negative")
        if isinstance(self.scale, bool) or not isinstance(self.scale, int) or self.scale < 0:
            raise ValueError(f"scale must be a non-negative integer, got {self.scale!r}")

    @classmethod
    def from_digits(cls, sign: int, int_digits: str, dec_digits: str = "") -> "FixedPoint":
        """Build a value from integer and decimal digit runs.

        Non-digit characters in either run are ignored.
        """
        int_digits = "".join(ch for ch in int_digits if ch.isdigit()) or "0"
        dec_digits = "".join(ch for ch in dec_digits if ch.isdigit())
        return cls(sign=sign, unscaled=_digits_to_int(int_digits + dec_digits), scale=len(dec_digits))

    @classmethod
    def from_decimal(cls, value: Decimal) -> "FixedPoint":
        if not value.is_finite():
            raise ValueError(f"cannot represent non-finite value {value}")
        sign_bit, digits, exponent = value.as_tuple()
        unscaled = int(Decimal((0, digits, 0)))
        if exponent >= 0:
            unscaled *= 10**exponent
            scale = 0
        else:
            scale = -exponent
        return cls(sign=-1 if sign_bit else 1, unscaled=unscaled, scale=scale)

    @property
    def unscaled_integer(self) -> int:
        return self.unscaled

    @property
    def unscaled_digits(self) -> str:
        return _int_to_digits(self.unscaled)

    def to_approximate_number(self) -> float:
        """Return the nearest float; a signed infinity when out of double range.

        The quotient is computed with exact integer true division and rounded
        once, instead of rounding the unscaled integer to a float first, so
        values with more than 17 significant digits still land on the nearest
        double.
        """
        try:
            value = self.unscaled / 10**self.scale
        except OverflowError:
            value = math.inf
        return -value if self.sign == -1 else value

    def to_canonical_string(self) -> str:
        prefix = "-" if self.sign == -1 else ""
        digits = self.unscaled_digits
        if self.scale == 0:
            return prefix + digits
        digits = digits.zfill(self.scale + 1)
        return f"{prefix}{digits[:-self.scale]}.{digits[-self.scale:]}"

    def to_decimal(self) -> Decimal:
        return Decimal(self.to_canonical_string())

    def __float__(self) -> float:
        return self.to_approximate_number()

    def __str__(self) -> str:
        return self.to_canonical_string()
