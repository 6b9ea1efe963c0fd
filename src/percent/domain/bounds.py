"""
PercentBounds — Модель границ процента

Immutable Pydantic модель пары инклюзивных границ [minimum, maximum]
на percent-шкале. Отсутствующая граница означает "без ограничения".

minimum <= maximum НЕ проверяется: при minimum > maximum clamp
возвращает maximum.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from src.percent.math.numerical_safeguards import clamp, is_valid_float


class PercentBounds(BaseModel):
    """
    Границы хранимого процента.

    Immutable модель (frozen=True): границы задаются один раз при создании
    процента и далее не меняются.
    """

    minimum: Optional[float] = Field(
        None, description="Нижняя граница (percent-шкала, включительно)"
    )
    maximum: Optional[float] = Field(
        None, description="Верхняя граница (percent-шкала, включительно)"
    )

    model_config = {"frozen": True}

    @field_validator("minimum", "maximum")
    @classmethod
    def validate_finite_bound(cls, v: Optional[float]) -> Optional[float]:
        """NaN/Inf границы отклоняются: сравнение с NaN не определено."""
        if v is not None and not is_valid_float(v):
            raise ValueError(f"bound must be a valid float (not NaN/Inf), got {v}")
        return v

    @property
    def is_bounded(self) -> bool:
        """True если задана хотя бы одна граница."""
        return self.minimum is not None or self.maximum is not None

    def clamp(self, value: float) -> float:
        """
        Ограничение value границами.

        Args:
            value: Значение на percent-шкале

        Returns:
            clamp(value, minimum, maximum)
        """
        return clamp(value, self.minimum, self.maximum)
