"""
Integers — целочисленный API runtime

Модульные функции, связанные с HybridArithmetic процессного backend.
Backend выбирается при первом вызове (AUTO), если select_backend не был
вызван раньше.

Examples:
    >>> to_decimal_string(integer("-1f4"))
    '-500'
    >>> to_decimal_string(mul(integer(9007199254740991), integer(2)))
    '18014398509481982'
"""

from typing import Any, Union

from src.backend.selection import get_arithmetic


def integer(value: Union[str, int, float, Any]) -> Any:
    return get_arithmetic().integer(value)


def to_float(x: Any) -> float:
    return get_arithmetic().to_float(x)


def to_decimal_string(x: Any) -> str:
    return get_arithmetic().to_decimal_string(x)


def compare(x: Any, y: Any) -> int:
    return get_arithmetic().compare(x, y)


def add(x: Any, y: Any) -> Any:
    return get_arithmetic().add(x, y)


def sub(x: Any, y: Any) -> Any:
    return get_arithmetic().sub(x, y)


def mul(x: Any, y: Any) -> Any:
    return get_arithmetic().mul(x, y)


def div(x: Any, y: Any) -> Any:
    return get_arithmetic().div(x, y)


def mod(x: Any, y: Any) -> Any:
    return get_arithmetic().mod(x, y)


def quot(x: Any, y: Any) -> Any:
    return get_arithmetic().quot(x, y)


def rem(x: Any, y: Any) -> Any:
    return get_arithmetic().rem(x, y)


def bit_and(x: Any, y: Any) -> Any:
    return get_arithmetic().bit_and(x, y)


def bit_or(x: Any, y: Any) -> Any:
    return get_arithmetic().bit_or(x, y)


def bit_xor(x: Any, y: Any) -> Any:
    return get_arithmetic().bit_xor(x, y)


def bit_not(x: Any) -> Any:
    return get_arithmetic().bit_not(x)


def neg(x: Any) -> Any:
    return get_arithmetic().neg(x)


def shl(x: Any, k: int) -> Any:
    return get_arithmetic().shl(x, k)


def shr(x: Any, k: int) -> Any:
    return get_arithmetic().shr(x, k)
