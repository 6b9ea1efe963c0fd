"""
Core math modules для percent

Численные примитивы: clamp и проверки конечности float.
"""

from src.percent.math.numerical_safeguards import (
    PercentDomainError,
    clamp,
    clamp_to_max,
    clamp_to_min,
    is_valid_float,
    validate_finite,
)

__all__ = [
    # Exceptions
    "PercentDomainError",
    # NaN/Inf checks
    "is_valid_float",
    "validate_finite",
    # Clamp
    "clamp",
    "clamp_to_min",
    "clamp_to_max",
]
