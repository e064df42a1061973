"""
NativeBackend — backend поверх встроенного int Python

Big-значения хранятся в NativeInteger. Floor-конвенция (//, %, >>) совпадает
с конвенцией движка напрямую; truncating-пара вычисляется через модули.
"""

import sys
from typing import Any, Union

from src.backend.contract import BackendKind, IntegerBackend
from src.core.domain.native_integer import NativeInteger
from src.core.math.errors import IntegerDivisionByZero
from src.core.math.literals import integral_value, split_hex_literal


def is_available() -> bool:
    """Runtime сообщает параметры int произвольной точности."""
    return getattr(sys, "int_info", None) is not None


def _require_nonzero(y: NativeInteger) -> None:
    if y.value == 0:
        raise IntegerDivisionByZero("integer division or modulo by zero")


def _require_shift(k: int) -> None:
    if k < 0:
        raise ValueError("negative shift count")


def _box(value: int) -> NativeInteger:
    return NativeInteger(value=value)


class NativeBackend(IntegerBackend):
    """Backend на встроенном int Python."""

    kind = BackendKind.NATIVE

    def is_value(self, x: Any) -> bool:
        return isinstance(x, NativeInteger)

    def from_hex(self, text: str) -> NativeInteger:
        negative, digits = split_hex_literal(text)
        value = int(digits, 16)
        return _box(-value if negative else value)

    def from_number(self, value: Union[int, float]) -> NativeInteger:
        return _box(integral_value(value))

    def to_float(self, x: NativeInteger) -> float:
        try:
            return float(x.value)
        except OverflowError:
            return float("-inf") if x.value < 0 else float("inf")

    def to_decimal_string(self, x: NativeInteger) -> str:
        return str(x.value)

    def compare(self, x: NativeInteger, y: NativeInteger) -> int:
        return (x.value > y.value) - (x.value < y.value)

    def add(self, x: NativeInteger, y: NativeInteger) -> NativeInteger:
        return _box(x.value + y.value)

    def sub(self, x: NativeInteger, y: NativeInteger) -> NativeInteger:
        return _box(x.value - y.value)

    def mul(self, x: NativeInteger, y: NativeInteger) -> NativeInteger:
        return _box(x.value * y.value)

    def div(self, x: NativeInteger, y: NativeInteger) -> NativeInteger:
        _require_nonzero(y)
        return _box(x.value // y.value)

    def mod(self, x: NativeInteger, y: NativeInteger) -> NativeInteger:
        _require_nonzero(y)
        return _box(x.value % y.value)

    def quot(self, x: NativeInteger, y: NativeInteger) -> NativeInteger:
        _require_nonzero(y)
        q = abs(x.value) // abs(y.value)
        return _box(q if (x.value < 0) == (y.value < 0) else -q)

    def rem(self, x: NativeInteger, y: NativeInteger) -> NativeInteger:
        _require_nonzero(y)
        r = abs(x.value) % abs(y.value)
        return _box(-r if x.value < 0 else r)

    def bit_and(self, x: NativeInteger, y: NativeInteger) -> NativeInteger:
        return _box(x.value & y.value)

    def bit_or(self, x: NativeInteger, y: NativeInteger) -> NativeInteger:
        return _box(x.value | y.value)

    def bit_xor(self, x: NativeInteger, y: NativeInteger) -> NativeInteger:
        return _box(x.value ^ y.value)

    def bit_not(self, x: NativeInteger) -> NativeInteger:
        return _box(~x.value)

    def neg(self, x: NativeInteger) -> NativeInteger:
        return _box(-x.value)

    def shl(self, x: NativeInteger, k: int) -> NativeInteger:
        _require_shift(k)
        return _box(x.value << k)

    def shr(self, x: NativeInteger, k: int) -> NativeInteger:
        _require_shift(k)
        return _box(x.value >> k)
