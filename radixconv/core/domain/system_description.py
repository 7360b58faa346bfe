"""
System Description — описание системы счисления из конфигурации

Immutable Pydantic модели, соответствующие схемам numeral_system.json и
conversion_config.json. Описание ещё не является NumeralSystem: его
разрешает radixconv.config.build_system.

Формат одной стороны:
    {
        "kind": "constant" | "computed",
        "base": 16,                  # для constant, может быть отрицательным
        "function": "n + 2",         # для computed: выражение или имя пресета
        "alphabet": [[0, "0"], ...], # необязательно
        "max_position": 1000         # необязательно, только для computed
    }
"""

from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator, model_validator


# =============================================================================
# ENUMS
# =============================================================================


class RadixKind(str, Enum):
    """Вид источника основания"""

    CONSTANT = "constant"
    COMPUTED = "computed"


# =============================================================================
# MODELS
# =============================================================================


class SystemDescription(BaseModel):
    """
    Описание одной системы счисления.

    Для constant обязательно base (ноль отвергает ConstantRadix), для computed — function.
    """

    kind: RadixKind = Field(..., description="Вид основания (constant/computed)")
    base: Optional[int] = Field(None, description="Постоянное основание (может быть отрицательным)")
    function: Optional[str] = Field(
        None, min_length=1, description="Функция основания: выражение от n или имя пресета"
    )
    alphabet: Optional[List[Tuple[int, str]]] = Field(
        None, min_length=1, description="Пары (value, symbol)"
    )
    max_position: Optional[int] = Field(
        None, ge=0, description="Наибольшая позиция для функции основания"
    )

    model_config = {"frozen": True}

    @field_validator("alphabet")
    @classmethod
    def validate_alphabet_values(
        cls, v: Optional[List[Tuple[int, str]]]
    ) -> Optional[List[Tuple[int, str]]]:
        """Значения цифр не повторяются, символы непусты."""
        if v is None:
            return v
        values = [value for value, _ in v]
        if len(set(values)) != len(values):
            raise ValueError("alphabet digit values must be unique")
        if any(not symbol for _, symbol in v):
            raise ValueError("alphabet symbols must be non-empty")
        return v

    @model_validator(mode="after")
    def validate_kind_fields(self) -> "SystemDescription":
        if self.kind is RadixKind.CONSTANT:
            if self.base is None:
                raise ValueError("constant system requires 'base'")
        elif self.function is None:
            raise ValueError("computed system requires 'function'")
        return self


class ConversionDescription(BaseModel):
    """Описание конверсии: исходная и целевая системы, необязательное число."""

    source: SystemDescription
    target: SystemDescription
    number: Optional[str] = Field(None, min_length=1, description="Число для конверсии")

    model_config = {"frozen": True}
