"""
BoundedPercentage — Процент как value object

Хранение:
- percent: величина из 100 (50.0 = 50%) — ЕДИНСТВЕННОЕ хранимое значение
- decimal: производное, percent / 100 (0.5 = 50%), никогда не хранится
- minimum / maximum: опциональные инклюзивные границы на percent-шкале

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. percent всегда внутри границ: clamp при создании и после каждой мутации
2. decimal == percent / 100 всегда
3. Результат бинарной операции двух процентов наследует границы ЛЕВОГО операнда
4. NaN/Inf отклоняются на входе (PercentDomainError)

ОПЕРАТОРЫ (p, q — проценты, x — число):
    p + q, p - q       → процент (percent-шкала), границы p
    p * q              → процент (decimal-шкала), границы p
    p / q              → float: p.decimal / q.decimal
    x + p, x - p       → float: x ± x * p.decimal
    p * x              → float: clamp(p.decimal * x, p.minimum, p.maximum)
    x * p, x / p       → float: x * p.decimal, x / p.decimal
    p / x              → процент: p.percent / x, границы p
    p < q              → сравнение percent
    p < x, x < p       → сравнение decimal с x
"""

import logging
from numbers import Real
from typing import Any, Dict, Optional

from src.percent.contracts.validators import validate_percent
from src.percent.domain.bounds import PercentBounds
from src.percent.domain.conversions import (
    decimal_of_string_percent,
    is_string_percent,
    parse_percent_string,
    to_string_percent,
    to_string_percent_decimal,
)
from src.percent.domain.units import (
    PERCENT_FULL,
    decimal_to_full,
    decimal_to_percent,
    percent_to_decimal,
    percent_to_full,
)
from src.percent.math.numerical_safeguards import PercentDomainError, validate_finite

logger = logging.getLogger(__name__)


class BoundedPercentage:
    """
    Процент с опциональными границами.

    Mutable только через сеттеры percent / decimal, которые повторно
    применяют clamp. Границы неизменны после создания.

    Examples:
        >>> p = BoundedPercentage(50)
        >>> str(p)
        '50%'
        >>> p.decimal
        0.5
        >>> str(BoundedPercentage(150, maximum=100))
        '100%'
    """

    __slots__ = ("_percent", "_bounds")

    def __init__(
        self,
        percent: float = PERCENT_FULL,
        minimum: Optional[float] = None,
        maximum: Optional[float] = None,
    ) -> None:
        """
        Args:
            percent: Величина из 100 (100.0 = 100%, 50.0 = 50%)
            minimum: Нижняя граница (None = без ограничения)
            maximum: Верхняя граница (None = без ограничения)

        Raises:
            PercentDomainError: Если percent NaN/Inf
            ValueError: Если граница NaN/Inf
        """
        self._bounds = PercentBounds(minimum=minimum, maximum=maximum)
        self._percent = self._clamped(percent)

    def _clamped(self, value: float) -> float:
        raw = validate_finite(value, "percent")
        stored = float(self._bounds.clamp(raw))
        if stored != raw:
            logger.debug(
                "percent_clamped",
                extra={"raw": raw, "stored": stored, "bounds": self._bounds.model_dump()},
            )
        return stored

    # =========================================================================
    # КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def from_percent(
        cls,
        value: float,
        minimum: Optional[float] = None,
        maximum: Optional[float] = None,
    ) -> "BoundedPercentage":
        """Создание из величины на percent-шкале (50.0 = 50%)."""
        return cls(value, minimum=minimum, maximum=maximum)

    @classmethod
    def from_decimal(
        cls,
        value: float,
        minimum: Optional[float] = None,
        maximum: Optional[float] = None,
    ) -> "BoundedPercentage":
        """
        Создание из величины на decimal-шкале (0.5 = 50%).

        Границы задаются на percent-шкале, как и во всех конструкторах.
        """
        return cls(decimal_to_percent(value), minimum=minimum, maximum=maximum)

    @classmethod
    def from_string(
        cls,
        text: str,
        minimum: Optional[float] = None,
        maximum: Optional[float] = None,
    ) -> Optional["BoundedPercentage"]:
        """
        Создание из строки ("50%", "25.2%", "50").

        Returns:
            Процент или None, если строка не разбирается
        """
        value = parse_percent_string(text)
        if value is None:
            return None
        return cls(value, minimum=minimum, maximum=maximum)

    @classmethod
    def from_fraction(
        cls,
        numerator: float,
        denominator: float,
        minimum: Optional[float] = None,
        maximum: Optional[float] = None,
    ) -> "BoundedPercentage":
        """
        Создание из дроби numerator / denominator (1, 4 → 25%).

        Принимает int и float. Деление int на int точное для любых
        размеров (10**400 / 10**401 → 10%).

        Raises:
            TypeError: Если numerator или denominator не число
            PercentDomainError: Если denominator == 0 или частное не помещается в float
        """
        for name, value in (("numerator", numerator), ("denominator", denominator)):
            if not isinstance(value, Real):
                raise TypeError(f"{name} must be a real number, got {type(value).__name__}")
        if denominator == 0:
            raise PercentDomainError("denominator must be non-zero")

        try:
            quotient = numerator / denominator
        except OverflowError:
            raise PercentDomainError("fraction is out of float range")
        return cls.from_decimal(quotient, minimum=minimum, maximum=maximum)

    @classmethod
    def one_over(
        cls,
        denominator: float,
        minimum: Optional[float] = None,
        maximum: Optional[float] = None,
    ) -> "BoundedPercentage":
        """Создание из дроби 1 / denominator (4 → 25%)."""
        return cls.from_fraction(1, denominator, minimum=minimum, maximum=maximum)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BoundedPercentage":
        """
        Создание из сериализованного вида (см. to_dict).

        Raises:
            ValidationError: Если data не соответствует контракту percent.json
        """
        validate_percent(data)
        return cls(
            data["percent"],
            minimum=data.get("minimum"),
            maximum=data.get("maximum"),
        )

    # =========================================================================
    # СВОЙСТВА
    # =========================================================================

    @property
    def percent(self) -> float:
        """Величина из 100 (100.0 = 100%, 50.0 = 50%)."""
        return self._percent

    @percent.setter
    def percent(self, value: float) -> None:
        self._percent = self._clamped(value)

    @property
    def decimal(self) -> float:
        """Величина из 1 (1.0 = 100%, 0.5 = 50%)."""
        return percent_to_decimal(self._percent)

    @decimal.setter
    def decimal(self, value: float) -> None:
        # границы на percent-шкале: конвертируем до clamp
        self.percent = decimal_to_percent(value)

    @property
    def minimum(self) -> Optional[float]:
        return self._bounds.minimum

    @property
    def maximum(self) -> Optional[float]:
        return self._bounds.maximum

    @property
    def bounds(self) -> PercentBounds:
        return self._bounds

    @property
    def to_one_hundred(self) -> float:
        """Разрыв до 100% на percent-шкале (30% → 70.0)."""
        return percent_to_full(self._percent)

    @property
    def to_one(self) -> float:
        """Разрыв до 1.0 на decimal-шкале (30% → 0.7)."""
        return decimal_to_full(self.decimal)

    # =========================================================================
    # МЕТОДЫ
    # =========================================================================

    def of(self, number: float) -> float:
        """
        Процент от числа.

        Examples:
            >>> BoundedPercentage(50).of(10)
            5.0
        """
        return number * self.decimal

    def to_dict(self) -> Dict[str, Any]:
        """Сериализация: {"percent": ..., "minimum": ..., "maximum": ...}."""
        return {"percent": self._percent, **self._bounds.model_dump()}

    value_of_string_percent = staticmethod(parse_percent_string)
    decimal_of_string_percent = staticmethod(decimal_of_string_percent)
    is_string_percent = staticmethod(is_string_percent)
    to_string_percent = staticmethod(to_string_percent)
    to_string_percent_decimal = staticmethod(to_string_percent_decimal)

    def _with_bounds_of_self(self, percent: float) -> "BoundedPercentage":
        return type(self)(percent, minimum=self.minimum, maximum=self.maximum)

    def __str__(self) -> str:
        return to_string_percent(self._percent)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self._percent!r}, "
            f"minimum={self.minimum!r}, maximum={self.maximum!r})"
        )

    def __hash__(self) -> int:
        return hash(self._percent)

    # =========================================================================
    # СРАВНЕНИЕ
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BoundedPercentage):
            return self._percent == other._percent
        return NotImplemented

    def __lt__(self, other: Any) -> bool:
        if isinstance(other, BoundedPercentage):
            return self._percent < other._percent
        if isinstance(other, Real):
            return self.decimal < other
        return NotImplemented

    def __le__(self, other: Any) -> bool:
        if isinstance(other, BoundedPercentage):
            return self._percent <= other._percent
        if isinstance(other, Real):
            return self.decimal <= other
        return NotImplemented

    def __gt__(self, other: Any) -> bool:
        if isinstance(other, BoundedPercentage):
            return self._percent > other._percent
        if isinstance(other, Real):
            return self.decimal > other
        return NotImplemented

    def __ge__(self, other: Any) -> bool:
        if isinstance(other, BoundedPercentage):
            return self._percent >= other._percent
        if isinstance(other, Real):
            return self.decimal >= other
        return NotImplemented

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def __add__(self, other: Any) -> "BoundedPercentage":
        """50% + 5% = 55% (границы левого операнда)."""
        if isinstance(other, BoundedPercentage):
            return self._with_bounds_of_self(self._percent + other._percent)
        return NotImplemented

    def __radd__(self, other: Any) -> float:
        """50 + 50% = 75."""
        if isinstance(other, Real):
            return other + other * self.decimal
        return NotImplemented

    def __sub__(self, other: Any) -> "BoundedPercentage":
        """50% - 5% = 45% (границы левого операнда)."""
        if isinstance(other, BoundedPercentage):
            return self._with_bounds_of_self(self._percent - other._percent)
        return NotImplemented

    def __rsub__(self, other: Any) -> float:
        """50 - 50% = 25."""
        if isinstance(other, Real):
            return other - other * self.decimal
        return NotImplemented

    def __mul__(self, other: Any) -> Any:
        """
        50% * 50% = 25% (границы левого операнда).

        Процент на число даёт число, ограниченное границами процента:
        результат на decimal-шкале, границы на percent-шкале.
        """
        if isinstance(other, BoundedPercentage):
            return type(self).from_decimal(
                self.decimal * other.decimal, minimum=self.minimum, maximum=self.maximum
            )
        if isinstance(other, Real):
            return self._bounds.clamp(self.decimal * other)
        return NotImplemented

    def __rmul__(self, other: Any) -> float:
        """10 * 50% = 5."""
        if isinstance(other, Real):
            return other * self.decimal
        return NotImplemented

    def __truediv__(self, other: Any) -> Any:
        """
        50% / 25% = 2.0 (число, а не процент).
        50% / 2 = 25% (границы левого операнда).
        """
        if isinstance(other, BoundedPercentage):
            return self.decimal / other.decimal
        if isinstance(other, Real):
            return self._with_bounds_of_self(self._percent / other)
        return NotImplemented

    def __rtruediv__(self, other: Any) -> float:
        """50 / 50% = 100."""
        if isinstance(other, Real):
            return other / self.decimal
        return NotImplemented


# Каноническое короткое имя
Percent = BoundedPercentage
