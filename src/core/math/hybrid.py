"""
Hybrid Arithmetic — Small-integer оптимизация поверх backend

Значения с модулем < 2^53 хранятся как обычный int Python (Small), остальные —
как Big-значения выбранного backend. Результаты неотличимы от вычислений
целиком на backend.

ПРАВИЛА ДИСПЕТЧЕРИЗАЦИИ:
1. Fast path только если оба операнда Small
2. add/sub/mul/and/or/xor/not/shl: результат принимается, только если
   |z| < 2^53, иначе пересчитывается на backend
3. div/mod/quot/rem на Small всегда безопасны (|результат| <= |операнда|)
4. Смешанный режим: Small-операнд продвигается через backend.from_number,
   вся операция делегируется backend
5. Голый int вне безопасного диапазона не считается Small и обрабатывается
   как Big (продвигается на backend)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Продвижение монотонно: результат операции с Big-операндом всегда Big,
   даже если численно помещается в Small (обратного пути нет)
2. Конвенции знаков совпадают с движком: mod — знак делителя,
   rem — знак делимого, shr — округление к -inf
"""

from typing import TYPE_CHECKING, Any, Final, Union

from src.core.math.errors import IntegerDivisionByZero
from src.core.math.literals import integral_value

if TYPE_CHECKING:
    from src.backend.contract import IntegerBackend

# =============================================================================
# SAFE-RANGE ПАРАМЕТРЫ
# =============================================================================

# Разрядность безопасного диапазона (точные целые float64)
SAFE_BITS: Final[int] = 53

# Граница Small: допустимы только |x| < SAFE_LIMIT
SAFE_LIMIT: Final[int] = 1 << SAFE_BITS

HybridInteger = Any  # int (Small) | Big-значение backend


def in_safe_range(z: int) -> bool:
    return -SAFE_LIMIT < z < SAFE_LIMIT


def is_small(x: Any) -> bool:
    """Small — голый int (не bool) с |x| < 2^53."""
    return isinstance(x, int) and not isinstance(x, bool) and in_safe_range(x)


class HybridArithmetic:
    """
    Диспетчер операций Small/Big, параметризованный backend.

    Args:
        backend: Реализация IntegerBackend, выполняющая Big-арифметику
    """

    def __init__(self, backend: "IntegerBackend"):
        self._backend = backend

    @property
    def backend(self) -> "IntegerBackend":
        return self._backend

    # -------------------------------------------------------------------------
    # Представление
    # -------------------------------------------------------------------------

    def is_small(self, x: HybridInteger) -> bool:
        return is_small(x)

    def is_big(self, x: HybridInteger) -> bool:
        return self._backend.is_value(x)

    def promote(self, x: HybridInteger) -> Any:
        """
        Операнд → Big-значение backend.

        Big возвращается как есть; int любой величины (в том числе вне
        безопасного диапазона) конвертируется через backend.from_number.

        Raises:
            TypeError: Операнд не int и не Big-значение этого backend
        """
        if self._backend.is_value(x):
            return x
        if isinstance(x, int) and not isinstance(x, bool):
            return self._backend.from_number(x)
        raise TypeError(
            f"Expected int or {self._backend.name} integer, got {type(x).__name__}"
        )

    def integer(self, value: Union[str, int, float, Any]) -> HybridInteger:
        """
        Конструктор гибридного целого.

        - str → Big (hex-парсинг backend)
        - int / целочисленный float в безопасном диапазоне → Small
        - int / float вне диапазона → Big
        - Big-значение backend → без изменений

        Raises:
            MalformedIntegerError: Невалидный hex или нецелый float
            TypeError: Неподдерживаемый тип
        """
        if isinstance(value, str):
            return self._backend.from_hex(value)
        if self._backend.is_value(value):
            return value

        number = integral_value(value)
        if in_safe_range(number):
            return number
        return self._backend.from_number(number)

    # -------------------------------------------------------------------------
    # Конверсия и сравнение
    # -------------------------------------------------------------------------

    def to_float(self, x: HybridInteger) -> float:
        return float(x) if is_small(x) else self._backend.to_float(self.promote(x))

    def to_decimal_string(self, x: HybridInteger) -> str:
        return str(x) if is_small(x) else self._backend.to_decimal_string(self.promote(x))

    def compare(self, x: HybridInteger, y: HybridInteger) -> int:
        if is_small(x) and is_small(y):
            return (x > y) - (x < y)
        return self._backend.compare(self.promote(x), self.promote(y))

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add(self, x: HybridInteger, y: HybridInteger) -> HybridInteger:
        if is_small(x) and is_small(y):
            z = x + y
            if in_safe_range(z):
                return z
        return self._backend.add(self.promote(x), self.promote(y))

    def sub(self, x: HybridInteger, y: HybridInteger) -> HybridInteger:
        if is_small(x) and is_small(y):
            z = x - y
            if in_safe_range(z):
                return z
        return self._backend.sub(self.promote(x), self.promote(y))

    def mul(self, x: HybridInteger, y: HybridInteger) -> HybridInteger:
        if is_small(x) and is_small(y):
            z = x * y
            if in_safe_range(z):
                return z
        return self._backend.mul(self.promote(x), self.promote(y))

    def div(self, x: HybridInteger, y: HybridInteger) -> HybridInteger:
        """Floor-частное: div(-7, 2) == -4."""
        if is_small(x) and is_small(y):
            _require_nonzero(y)
            return x // y
        return self._backend.div(self.promote(x), self.promote(y))

    def mod(self, x: HybridInteger, y: HybridInteger) -> HybridInteger:
        """Floor-остаток (знак делителя): mod(-7, 2) == 1."""
        if is_small(x) and is_small(y):
            _require_nonzero(y)
            return x % y
        return self._backend.mod(self.promote(x), self.promote(y))

    def quot(self, x: HybridInteger, y: HybridInteger) -> HybridInteger:
        """Truncating-частное: quot(-7, 2) == -3."""
        if is_small(x) and is_small(y):
            _require_nonzero(y)
            if x == 0:
                return 0
            q = abs(x) // abs(y)
            return q if (x < 0) == (y < 0) else -q
        return self._backend.quot(self.promote(x), self.promote(y))

    def rem(self, x: HybridInteger, y: HybridInteger) -> HybridInteger:
        """Truncating-остаток (знак делимого): rem(-7, 2) == -1."""
        if is_small(x) and is_small(y):
            _require_nonzero(y)
            r = abs(x) % abs(y)
            return -r if x < 0 else r
        return self._backend.rem(self.promote(x), self.promote(y))

    # -------------------------------------------------------------------------
    # Побитовые операции
    # -------------------------------------------------------------------------

    def bit_and(self, x: HybridInteger, y: HybridInteger) -> HybridInteger:
        if is_small(x) and is_small(y):
            z = x & y
            if in_safe_range(z):
                return z
        return self._backend.bit_and(self.promote(x), self.promote(y))

    def bit_or(self, x: HybridInteger, y: HybridInteger) -> HybridInteger:
        if is_small(x) and is_small(y):
            return x | y
        return self._backend.bit_or(self.promote(x), self.promote(y))

    def bit_xor(self, x: HybridInteger, y: HybridInteger) -> HybridInteger:
        if is_small(x) and is_small(y):
            z = x ^ y
            if in_safe_range(z):
                return z
        return self._backend.bit_xor(self.promote(x), self.promote(y))

    def bit_not(self, x: HybridInteger) -> HybridInteger:
        if is_small(x):
            z = ~x
            if in_safe_range(z):
                return z
        return self._backend.bit_not(self.promote(x))

    def neg(self, x: HybridInteger) -> HybridInteger:
        return -x if is_small(x) else self._backend.neg(self.promote(x))

    # -------------------------------------------------------------------------
    # Сдвиги
    # -------------------------------------------------------------------------

    def shl(self, x: HybridInteger, k: int) -> HybridInteger:
        """
        Сдвиг влево: x * 2^k.

        Raises:
            ValueError: Если k < 0
        """
        if k < 0:
            raise ValueError("negative shift count")
        if is_small(x) and k < SAFE_BITS:
            z = x << k
            if in_safe_range(z):
                return z
        return self._backend.shl(self.promote(x), k)

    def shr(self, x: HybridInteger, k: int) -> HybridInteger:
        """
        Арифметический сдвиг вправо: floor(x / 2^k).

        Raises:
            ValueError: Если k < 0
        """
        if k < 0:
            raise ValueError("negative shift count")
        if is_small(x):
            if k > SAFE_BITS:
                return -1 if x < 0 else 0
            return x >> k
        return self._backend.shr(self.promote(x), k)


def _require_nonzero(y: int) -> None:
    if y == 0:
        raise IntegerDivisionByZero("integer division or modulo by zero")
