"""Option records for formatting and parsing Indonesian numbers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

DECIMALS_PRESERVE = "preserve"

MODE_APPROXIMATE = "approximate"
MODE_EXACT = "exact"
PARSE_MODES = (MODE_APPROXIMATE, MODE_EXACT)


@dataclass(frozen=True, slots=True)
class FormatOptions:
    """How :func:`~idr_numeral.formatting.format_idr` renders decimals.

    ``decimals`` is either ``"preserve"`` (keep the decimal digits as typed) or a
    non-negative count of decimal digits to force by rounding half-up or padding.
    ``pad_zeros`` only applies to ``"preserve"``: a typed decimal part shorter than
    two digits is padded with trailing zeros.
    """

    decimals: Union[int, str] = DECIMALS_PRESERVE
    pad_zeros: bool = False

    def __post_init__(self) -> None:
        if self.decimals == DECIMALS_PRESERVE:
            return
        if isinstance(self.decimals, bool) or not isinstance(self.decimals, int):
            raise ValueError(
                f"decimals must be '{DECIMALS_PRESERVE}' or a non-negative integer, got {self.decimals!r}"
            )
        if self.decimals < 0:
            raise ValueError(f"decimals must not be negative, got {self.decimals}")

    @property
    def preserve(self) -> bool:
        return self.decimals == DECIMALS_PRESERVE


@dataclass(frozen=True, slots=True)
class ParseOptions:
    """Result shape of :func:`~idr_numeral.parsing.parse_idr`.

    ``"approximate"`` returns a ``float``; ``"exact"`` returns a
    :class:`~idr_numeral.fixed.FixedPoint`.
    """

    mode: str = MODE_APPROXIMATE

    def __post_init__(self) -> None:
        if self.mode not in PARSE_MODES:
            raise ValueError(f"mode must be one of {', '.join(PARSE_MODES)}, got {self.mode!r}")

    @property
    def exact(self) -> bool:
        return self.mode == MODE_EXACT
