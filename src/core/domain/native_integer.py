"""
NativeInteger — Big-представление native backend

Immutable обёртка над встроенным int Python. Нужна гибридному слою, чтобы
отличать Small-значения (голый int) от Big-значений независимо от backend.
"""

from pydantic import BaseModel, Field


class NativeInteger(BaseModel):
    """Целое произвольной точности на базе int Python."""

    value: int = Field(..., strict=True, description="Значение (произвольная точность)")

    model_config = {"frozen": True}  # Immutable

    @property
    def is_zero(self) -> bool:
        return self.value == 0

    @property
    def bit_length(self) -> int:
        return self.value.bit_length()

    def __str__(self) -> str:
        return str(self.value)
