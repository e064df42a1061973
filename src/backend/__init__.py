"""
Integer backends — взаимозаменяемые реализации арифметики произвольной точности.

- limb: 26-битные limbs (src.core.math.limb_arithmetic)
- native: встроенный int Python
"""

from .contract import BackendKind, IntegerBackend
from .limb_backend import LimbBackend
from .native_backend import NativeBackend
from .selection import (
    BackendConfig,
    BackendRegistry,
    get_arithmetic,
    get_backend,
    select_backend,
)

__all__ = [
    "BackendKind",
    "IntegerBackend",
    "LimbBackend",
    "NativeBackend",
    "BackendConfig",
    "BackendRegistry",
    "select_backend",
    "get_backend",
    "get_arithmetic",
]
