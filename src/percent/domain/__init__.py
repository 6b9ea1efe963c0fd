"""
Domain models and value objects.

Contains the BoundedPercentage value object, its bounds model,
scale converters and string conversions.
"""

from src.percent.domain.bounds import PercentBounds
from src.percent.domain.conversions import (
    PERCENT_SIGN,
    decimal_of_string_percent,
    format_percent,
    is_string_percent,
    parse_percent_string,
    to_string_percent,
    to_string_percent_decimal,
)
from src.percent.domain.percentage import BoundedPercentage, Percent
from src.percent.domain.units import (
    DECIMAL_EMPTY,
    DECIMAL_FULL,
    PERCENT_EMPTY,
    PERCENT_FULL,
    decimal_to_full,
    decimal_to_percent,
    percent_to_decimal,
    percent_to_full,
)

__all__ = [
    # Units module
    "PERCENT_EMPTY",
    "PERCENT_FULL",
    "DECIMAL_EMPTY",
    "DECIMAL_FULL",
    "percent_to_decimal",
    "decimal_to_percent",
    "percent_to_full",
    "decimal_to_full",
    # Conversions
    "PERCENT_SIGN",
    "parse_percent_string",
    "decimal_of_string_percent",
    "is_string_percent",
    "format_percent",
    "to_string_percent",
    "to_string_percent_decimal",
    # Bounds model
    "PercentBounds",
    # Percentage model
    "BoundedPercentage",
    "Percent",
]
