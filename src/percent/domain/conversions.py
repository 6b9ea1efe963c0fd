"""
Conversions — Строковое представление процента

Формат:
- Опциональный завершающий символ '%' ("50%", "25.2%", "50")
- Всё до '%' (или вся строка) — обычный десятичный литерал:
  знак (optional), цифры, дробная часть (optional)
- НЕ допускаются: экспонента, разделители разрядов, пробелы, inf/nan

Ошибка разбора — это отсутствие результата (None), а не exception.
"""

import logging
import re

from src.percent.domain.units import decimal_to_percent, percent_to_decimal

logger = logging.getLogger(__name__)

PERCENT_SIGN = "%"

# Обычный десятичный литерал: "50", "-2.5", "+.5", "7."
_PLAIN_DECIMAL = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")


# =============================================================================
# РАЗБОР
# =============================================================================


def parse_percent_string(text: str) -> float | None:
    """
    Конверсия строки процента в значение на percent-шкале.

    Args:
        text: Процент строкой ("100%", "50%", "25.2%" или "50")

    Returns:
        Значение из 100 или None, если строка не является процентом

    Examples:
        >>> parse_percent_string("25.2%")
        25.2
        >>> parse_percent_string("50")
        50.0
        >>> parse_percent_string(" 50%") is None
        True
    """
    number = text[:-1] if text.endswith(PERCENT_SIGN) else text

    if _PLAIN_DECIMAL.fullmatch(number) is None:
        logger.debug("percent_string_rejected", extra={"text": text})
        return None

    return float(number)


def decimal_of_string_percent(text: str) -> float | None:
    """Как parse_percent_string, но результат на decimal-шкале ("50%" → 0.5)."""
    value = parse_percent_string(text)
    if value is None:
        return None
    return percent_to_decimal(value)


def is_string_percent(text: str) -> bool:
    """True если строка разбирается как процент."""
    return parse_percent_string(text) is not None


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def format_percent(value: float) -> str:
    """
    Форматирование числа без лишних нулей.

    Examples:
        >>> format_percent(50.0)
        '50'
        >>> format_percent(50.3)
        '50.3'
    """
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def to_string_percent(percent: float) -> str:
    """Значение percent-шкалы → строка с '%' (50.0 → "50%")."""
    return f"{format_percent(percent)}{PERCENT_SIGN}"


def to_string_percent_decimal(decimal: float) -> str:
    """Значение decimal-шкалы → строка с '%' (0.5 → "50%", без завершающего ".0")."""
    return to_string_percent(decimal_to_percent(decimal))
