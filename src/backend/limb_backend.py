"""
LimbBackend — backend поверх limb-движка (src.core.math.limb_arithmetic)

Не имеет требований к runtime и доступен всегда.
"""

from typing import Any, Union

from src.backend.contract import BackendKind, IntegerBackend
from src.core.domain.big_integer import BigInteger
from src.core.math import limb_arithmetic as engine


class LimbBackend(IntegerBackend):
    """Backend на 26-битных limbs."""

    kind = BackendKind.LIMB

    def is_value(self, x: Any) -> bool:
        return isinstance(x, BigInteger)

    def from_hex(self, text: str) -> BigInteger:
        return engine.parse_hex(text)

    def from_number(self, value: Union[int, float]) -> BigInteger:
        return engine.from_number(value)

    def to_float(self, x: BigInteger) -> float:
        return engine.to_float(x)

    def to_decimal_string(self, x: BigInteger) -> str:
        return engine.to_decimal_string(x)

    def compare(self, x: BigInteger, y: BigInteger) -> int:
        return engine.compare(x, y)

    def add(self, x: BigInteger, y: BigInteger) -> BigInteger:
        return engine.add(x, y)

    def sub(self, x: BigInteger, y: BigInteger) -> BigInteger:
        return engine.sub(x, y)

    def mul(self, x: BigInteger, y: BigInteger) -> BigInteger:
        return engine.mul(x, y)

    def div(self, x: BigInteger, y: BigInteger) -> BigInteger:
        return engine.div(x, y)

    def mod(self, x: BigInteger, y: BigInteger) -> BigInteger:
        return engine.mod(x, y)

    def quot(self, x: BigInteger, y: BigInteger) -> BigInteger:
        return engine.quot(x, y)

    def rem(self, x: BigInteger, y: BigInteger) -> BigInteger:
        return engine.rem(x, y)

    def bit_and(self, x: BigInteger, y: BigInteger) -> BigInteger:
        return engine.bit_and(x, y)

    def bit_or(self, x: BigInteger, y: BigInteger) -> BigInteger:
        return engine.bit_or(x, y)

    def bit_xor(self, x: BigInteger, y: BigInteger) -> BigInteger:
        return engine.bit_xor(x, y)

    def bit_not(self, x: BigInteger) -> BigInteger:
        return engine.bit_not(x)

    def neg(self, x: BigInteger) -> BigInteger:
        return engine.neg(x)

    def shl(self, x: BigInteger, k: int) -> BigInteger:
        return engine.shl(x, k)

    def shr(self, x: BigInteger, k: int) -> BigInteger:
        return engine.shr(x, k)
