"""Indonesian-style number formatting and parsing with exact fixed-point values."""

__version__ = "1.0.0"

from .fixed import FixedPoint
from .formatting import format_idr
from .models import FormatOptions, ParseOptions
from .parsing import parse_idr

__all__ = ["FixedPoint", "FormatOptions", "ParseOptions", "format_idr", "parse_idr"]
