"""
Core math modules

Движок целых произвольной точности и гибридный слой Small/Big.
"""

# Errors
from src.core.math.errors import (
    BackendAlreadySelectedError,
    BackendUnavailableError,
    IntegerArithmeticError,
    IntegerDivisionByZero,
    MalformedIntegerError,
)

# Hybrid dispatch
from src.core.math.hybrid import (
    SAFE_BITS,
    SAFE_LIMIT,
    HybridArithmetic,
    in_safe_range,
    is_small,
)

# Limb engine
from src.core.math.limb_arithmetic import (
    DECIMAL_CHUNK,
    HEX_CHUNK_DIGITS,
    ONE,
    ZERO,
    parse_hex,
    from_number,
    to_decimal_string,
    to_float,
)

__all__ = [
    # Errors
    "IntegerArithmeticError",
    "MalformedIntegerError",
    "IntegerDivisionByZero",
    "BackendUnavailableError",
    "BackendAlreadySelectedError",
    # Hybrid — Constants
    "SAFE_BITS",
    "SAFE_LIMIT",
    # Hybrid — Types
    "HybridArithmetic",
    # Hybrid — Functions
    "in_safe_range",
    "is_small",
    # Limb engine — Constants
    "DECIMAL_CHUNK",
    "HEX_CHUNK_DIGITS",
    "ONE",
    "ZERO",
    # Limb engine — Functions
    "parse_hex",
    "from_number",
    "to_decimal_string",
    "to_float",
]
