"""
Domain models and value objects.

Contains immutable integer value types: BigInteger (limbs), NativeInteger.
"""

from src.core.domain.big_integer import BITS, MASK, SHIFT, BigInteger
from src.core.domain.native_integer import NativeInteger

__all__ = [
    # Limb parameters
    "BITS",
    "SHIFT",
    "MASK",
    # Models
    "BigInteger",
    "NativeInteger",
]
