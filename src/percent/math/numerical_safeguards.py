"""
Numerical Safeguards — Clamp & Finite-Float Primitives

Модуль обеспечивает численную корректность хранения процентов:
- Clamp значения в инклюзивный диапазон [min, max] (границы опциональны)
- Проверка float на NaN/Inf
- Отклонение невалидных значений на входе (PercentDomainError)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. clamp применяет сначала min, затем max: при min > max результат равен max
2. NaN/Inf никогда не попадают в хранимое значение (отклоняются на входе)
3. Все операции детерминированы и воспроизводимы
"""

import math
from numbers import Real


# =============================================================================
# EXCEPTIONS
# =============================================================================


class PercentDomainError(ValueError):
    """
    Значение вне домена процента: NaN, Inf или нулевой знаменатель дроби.

    Наследует ValueError, поэтому ловится стандартным `except ValueError`.
    """

    pass


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def validate_finite(value: float, name: str) -> float:
    """
    Валидация, что значение конечное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value, приведённое к float

    Raises:
        TypeError: Если value не число (строки не приводятся)
        PercentDomainError: Если value NaN/Inf или не помещается в float
    """
    if not isinstance(value, Real):
        raise TypeError(f"{name} must be a real number, got {type(value).__name__}")

    try:
        value = float(value)
    except OverflowError:
        raise PercentDomainError(f"{name} is too large for a float")

    if not is_valid_float(value):
        raise PercentDomainError(f"{name} must be a valid float (not NaN/Inf), got {value}")
    return value


# =============================================================================
# CLAMP
# =============================================================================


def clamp_to_min(value: float, min_value: float | None = None) -> float:
    """Поднимает value до min_value (если min_value задан)."""
    if min_value is None:
        return value
    return max(value, min_value)


def clamp_to_max(value: float, max_value: float | None = None) -> float:
    """Опускает value до max_value (если max_value задан)."""
    if max_value is None:
        return value
    return min(value, max_value)


def clamp(
    value: float,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """
    Ограничение значения в заданном диапазоне.

    Порядок фиксирован: сначала min, затем max. Если min_value > max_value,
    результат всегда равен max_value (последняя применённая граница).

    Args:
        value: Исходное значение
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Returns:
        Значение, ограниченное диапазоном [min_value, max_value]

    Examples:
        >>> clamp(5.0, 0.0, 10.0)
        5.0
        >>> clamp(-1.0, 0.0, 10.0)
        0.0
        >>> clamp(15.0, 0.0, 10.0)
        10.0
        >>> clamp(5.0, 10.0, 0.0)
        0.0
    """
    return clamp_to_max(clamp_to_min(value, min_value), max_value)
