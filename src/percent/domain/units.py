"""
Units — Конверсия шкал процента

Единственный допустимый способ преобразований между:
- percent-шкалой (величина из 100: 50.0 = 50%)
- decimal-шкалой (величина из 1: 0.5 = 50%)

ЗАПРЕЩЕНО смешивать шкалы без явного конвертера из этого модуля.
"""

from typing import Final


# =============================================================================
# КОНСТАНТЫ ШКАЛ
# =============================================================================

# Пустое и полное значение на percent-шкале
PERCENT_EMPTY: Final[float] = 0.0
PERCENT_FULL: Final[float] = 100.0

# Пустое и полное значение на decimal-шкале
DECIMAL_EMPTY: Final[float] = 0.0
DECIMAL_FULL: Final[float] = 1.0


# =============================================================================
# БАЗОВЫЕ КОНВЕРТЕРЫ
# =============================================================================


def percent_to_decimal(percent: float) -> float:
    """
    Конверсия: percent-шкала → decimal-шкала

    Args:
        percent: Величина из 100 (например, 50.0 = 50%)

    Returns:
        Величина из 1 (например, 0.5)
    """
    return percent / PERCENT_FULL


def decimal_to_percent(decimal: float) -> float:
    """
    Конверсия: decimal-шкала → percent-шкала

    Args:
        decimal: Величина из 1 (например, 0.5 = 50%)

    Returns:
        Величина из 100 (например, 50.0)
    """
    return decimal * PERCENT_FULL


def percent_to_full(percent: float) -> float:
    """Разрыв до 100% на percent-шкале (30.0 → 70.0)."""
    return PERCENT_FULL - percent


def decimal_to_full(decimal: float) -> float:
    """Разрыв до 1.0 на decimal-шкале (0.3 → 0.7)."""
    return DECIMAL_FULL - decimal
