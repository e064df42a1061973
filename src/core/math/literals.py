"""
Literals — валидация входов конструкторов целых

Hex-литерал: необязательный ведущий '-', затем одна или более hex-цифр
(регистр не важен), без префикса '0x', без пробелов и разделителей '_'.

Host-число: int любой величины или конечный целочисленный float.
"""

import math
import re
from typing import Final, Union

from src.core.math.errors import MalformedIntegerError

HEX_LITERAL_PATTERN: Final[re.Pattern[str]] = re.compile(r"-?[0-9a-fA-F]+")


def split_hex_literal(text: str) -> tuple[bool, str]:
    """
    Проверка и разбор hex-литерала.

    Args:
        text: Литерал, например '-1f4'

    Returns:
        (negative, digits) — знак и строка цифр без знака

    Raises:
        MalformedIntegerError: Если литерал не соответствует формату
    """
    if not isinstance(text, str) or HEX_LITERAL_PATTERN.fullmatch(text) is None:
        raise MalformedIntegerError(f"Malformed hexadecimal literal: {text!r}")

    if text[0] == "-":
        return True, text[1:]
    return False, text


def integral_value(value: Union[int, float]) -> int:
    """
    Проверка и конверсия host-числа в int.

    Args:
        value: int (любой величины) или конечный целочисленный float

    Returns:
        Целое значение

    Raises:
        MalformedIntegerError: Если float не конечен или имеет дробную часть
        TypeError: Если value не int/float (bool тоже отвергается)
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"Expected int or float, got {type(value).__name__}")

    if isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            raise MalformedIntegerError(f"Not an integral number: {value!r}")
        return int(value)
    return value
