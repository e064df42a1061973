"""
Runtime integer API — гибридные целые, связанные с выбранным backend.
"""

from .integers import (
    add,
    bit_and,
    bit_not,
    bit_or,
    bit_xor,
    compare,
    div,
    integer,
    mod,
    mul,
    neg,
    quot,
    rem,
    shl,
    shr,
    sub,
    to_decimal_string,
    to_float,
)

__all__ = [
    "integer",
    "to_float",
    "to_decimal_string",
    "compare",
    "add",
    "sub",
    "mul",
    "div",
    "mod",
    "quot",
    "rem",
    "bit_and",
    "bit_or",
    "bit_xor",
    "bit_not",
    "neg",
    "shl",
    "shr",
]
