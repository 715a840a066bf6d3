"""Parse Indonesian formatted numbers into floats or exact fixed-point values."""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Optional, Union

from .fixed import FixedPoint
from .logging import get_logger
from .models import ParseOptions
from .sanitize import coerce_text, keep_first_comma, split_sign, strip_leading_zeros, strip_noise

__all__ = ["parse_idr"]

logger = get_logger(__name__)


def parse_idr(
    value: Union[str, int, float, Decimal, None],
    options: Optional[ParseOptions] = None,
    **overrides,
) -> Union[float, FixedPoint, None]:
    """Parse an Indonesian formatted value.

    Rules for text:

    - ``"."`` is a thousands separator and is removed
    - ``","`` is the decimal separator; only the first comma counts
    - a leading minus is kept, anything else that is not a digit is ignored

    Numbers keep their own decimal point. Returns ``None`` for empty or
    invalid input. In ``"approximate"`` mode (default) the result is a
    ``float`` and may lose precision for large magnitudes; ``"exact"`` mode
    returns a :class:`FixedPoint` that keeps every digit.
    """
    options = options or ParseOptions()
    if overrides:
        options = ParseOptions(mode=overrides.pop("mode", options.mode))
        if overrides:
            raise TypeError(f"unexpected parse options: {', '.join(sorted(overrides))}")

    if value is None or value == "":
        return None

    if isinstance(value, str):
        negative, text = split_sign(value)
        text = keep_first_comma(strip_noise(text))
        normalized = text.replace(".", "").replace(",", ".", 1)
    else:
        negative, normalized = split_sign(coerce_text(value))
        normalized = strip_noise(normalized)

    if normalized in ("", "."):
        return None

    int_part, _, dec_part = normalized.partition(".")
    int_digits = strip_leading_zeros(int_part)
    dec_digits = dec_part

    if options.exact:
        return FixedPoint.from_digits(-1 if negative else 1, int_digits, dec_digits)

    number = float(("-" if negative else "") + int_digits + ("." + dec_digits if dec_digits else ""))
    if not math.isfinite(number):
        logger.warning("parse_non_finite", digits=len(int_digits) + len(dec_digits))
        return None
    return number
