"""
IntegerBackend — Контракт взаимозаменяемого backend произвольной точности

Любая реализация обязана соблюдать конвенции знаков и округления движка:
- div/mod: floor (mod равен нулю или имеет знак делителя)
- quot/rem: truncating (rem равен нулю или имеет знак делимого)
- shr: арифметический сдвиг с округлением к -inf
- нулевой делитель → IntegerDivisionByZero
- невалидный hex → MalformedIntegerError
- отрицательный сдвиг → ValueError

Замена backend не должна менять ни одного наблюдаемого результата на
корректных входах.
"""

import abc
from enum import Enum
from typing import Any, Union


class BackendKind(str, Enum):
    """Вид backend."""

    AUTO = "auto"
    LIMB = "limb"
    NATIVE = "native"


class IntegerBackend(abc.ABC):
    """Набор операций над Big-значениями одного backend."""

    kind: BackendKind

    @property
    def name(self) -> str:
        return self.kind.value

    @abc.abstractmethod
    def is_value(self, x: Any) -> bool:
        """True, если x — Big-значение этого backend."""

    # Конструкторы и конверсия

    @abc.abstractmethod
    def from_hex(self, text: str) -> Any:
        ...

    @abc.abstractmethod
    def from_number(self, value: Union[int, float]) -> Any:
        ...

    @abc.abstractmethod
    def to_float(self, x: Any) -> float:
        ...

    @abc.abstractmethod
    def to_decimal_string(self, x: Any) -> str:
        ...

    # Сравнение и арифметика

    @abc.abstractmethod
    def compare(self, x: Any, y: Any) -> int:
        """-1, 0 или 1."""

    @abc.abstractmethod
    def add(self, x: Any, y: Any) -> Any:
        ...

    @abc.abstractmethod
    def sub(self, x: Any, y: Any) -> Any:
        ...

    @abc.abstractmethod
    def mul(self, x: Any, y: Any) -> Any:
        ...

    @abc.abstractmethod
    def div(self, x: Any, y: Any) -> Any:
        """Floor-частное."""

    @abc.abstractmethod
    def mod(self, x: Any, y: Any) -> Any:
        """Floor-остаток."""

    @abc.abstractmethod
    def quot(self, x: Any, y: Any) -> Any:
        """Truncating-частное."""

    @abc.abstractmethod
    def rem(self, x: Any, y: Any) -> Any:
        """Truncating-остаток."""

    # Побитовые операции и сдвиги

    @abc.abstractmethod
    def bit_and(self, x: Any, y: Any) -> Any:
        ...

    @abc.abstractmethod
    def bit_or(self, x: Any, y: Any) -> Any:
        ...

    @abc.abstractmethod
    def bit_xor(self, x: Any, y: Any) -> Any:
        ...

    @abc.abstractmethod
    def bit_not(self, x: Any) -> Any:
        ...

    @abc.abstractmethod
    def neg(self, x: Any) -> Any:
        ...

    @abc.abstractmethod
    def shl(self, x: Any, k: int) -> Any:
        ...

    @abc.abstractmethod
    def shr(self, x: Any, k: int) -> Any:
        ...
