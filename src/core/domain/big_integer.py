"""
BigInteger — Модель целого произвольной точности

Immutable Pydantic модель: знак + последовательность limbs по основанию 2^26,
младший limb первым. Полная совместимость с JSON Schema
(src/core/contracts/schema/big_integer.json).

КАНОНИЧЕСКАЯ ФОРМА (инварианты):
1. len(limbs) >= 1
2. limbs[-1] != 0, если len(limbs) > 1 (нет ведущих нулевых limbs)
3. Ноль представлен единственным образом: sign=0, limbs=(0,) (нет "-0")
4. Каждый limb в диапазоне [0, 2^26)

Любой конструктор ре-канонизирует значение. Значения никогда не изменяются
после создания, поэтому разделять их между потоками безопасно.
"""

from typing import Any, Final, Sequence

from pydantic import BaseModel, Field, field_validator, model_validator


# =============================================================================
# LIMB-ПАРАМЕТРЫ
# =============================================================================

# Разрядность одного limb
BITS: Final[int] = 26

# Основание системы счисления (radix)
SHIFT: Final[int] = 1 << BITS

# Максимальное значение limb
MASK: Final[int] = SHIFT - 1


# =============================================================================
# BIG INTEGER MODEL
# =============================================================================


class BigInteger(BaseModel):
    """
    Целое произвольной точности (sign-magnitude, limbs по основанию 2^26).

    Immutable модель (frozen=True). Арифметика всегда создаёт новый экземпляр.
    Равенство и hash структурные; благодаря канонической форме они совпадают
    с численным равенством.
    """

    sign: int = Field(..., ge=0, le=1, description="0 — неотрицательное, 1 — отрицательное")
    limbs: tuple[int, ...] = Field(
        ..., min_length=1, description="Limbs модуля, младший первым, каждый в [0, 2^26)"
    )

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="before")
    @classmethod
    def canonicalize(cls, data: Any) -> Any:
        """
        Приведение к канонической форме до валидации полей.

        Убирает ведущие нулевые limbs и знак у нуля.
        """
        if not isinstance(data, dict):
            return data

        limbs = data.get("limbs")
        if not isinstance(limbs, (list, tuple)) or not limbs:
            return data

        length = len(limbs)
        while length > 1 and limbs[length - 1] == 0:
            length -= 1

        data = {**data, "limbs": tuple(limbs[:length])}
        if length == 1 and limbs[0] == 0 and "sign" in data:
            data["sign"] = 0
        return data

    @field_validator("limbs")
    @classmethod
    def validate_limb_range(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Каждый limb должен помещаться в 26 бит."""
        for index, limb in enumerate(v):
            if limb < 0 or limb > MASK:
                raise ValueError(f"limb[{index}]={limb} outside [0, {MASK}]")
        return v

    @classmethod
    def from_limbs(cls, sign: int, limbs: Sequence[int]) -> "BigInteger":
        """
        Быстрый конструктор для результатов арифметики.

        Limbs уже гарантированно в диапазоне, поэтому валидация полей
        пропускается (model_construct), выполняется только канонизация.

        Args:
            sign: 0 или 1
            limbs: Limbs модуля, младший первым (могут содержать ведущие нули)

        Returns:
            Канонический BigInteger
        """
        length = len(limbs)
        while length > 1 and limbs[length - 1] == 0:
            length -= 1

        if length == 0 or (length == 1 and limbs[0] == 0):
            return cls.model_construct(sign=0, limbs=(0,))
        return cls.model_construct(sign=sign, limbs=tuple(limbs[:length]))

    @property
    def length(self) -> int:
        """Количество значащих limbs."""
        return len(self.limbs)

    @property
    def is_zero(self) -> bool:
        return len(self.limbs) == 1 and self.limbs[0] == 0

    @property
    def is_negative(self) -> bool:
        return self.sign == 1

    @property
    def bit_length(self) -> int:
        """Битовая длина модуля: (length - 1) * 26 + биты старшего limb."""
        return (len(self.limbs) - 1) * BITS + self.limbs[-1].bit_length()

    def __str__(self) -> str:
        from src.core.math.limb_arithmetic import to_decimal_string

        return to_decimal_string(self)
