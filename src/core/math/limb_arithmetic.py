"""
Limb Arithmetic — Движок целых произвольной точности

Точная арифметика над BigInteger (limbs по основанию 2^26, младший первым):
- Парсинг hex-строк и host-чисел, форматирование в десятичную строку
- Сравнение, сложение, вычитание, умножение
- Деление Кнута (нормализованное) с двумя конвенциями: floor (div/mod)
  и truncating (quot/rem)
- Побитовые AND/OR/XOR/NOT в дополнительном коде
- Сдвиги влево и вправо (арифметический, округление к -inf)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Операнды никогда не изменяются; каждый результат — новый канонический BigInteger
2. mod(x, y) равен нулю или имеет знак y; 0 <= |mod| < |y|
3. rem(x, y) равен нулю или имеет знак x; |rem| < |y|
4. Нулевой делитель → IntegerDivisionByZero до входа в алгоритм деления
5. shr округляет к минус бесконечности: shr(-7, 1) == -4

Рабочие списки limbs внутри функций изменяются локально и никогда не
публикуются до упаковки в BigInteger.
"""

import math
import operator
from itertools import zip_longest
from typing import Any, Callable, Dict, Final, List, Sequence, Tuple, Union

from src.core.domain.big_integer import BITS, MASK, SHIFT, BigInteger
from src.core.math.errors import IntegerDivisionByZero
from src.core.math.literals import integral_value, split_hex_literal

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Hex-цифр в одном чанке парсинга (24 бита: два чанка заполняют limb + 2 бита переноса)
HEX_CHUNK_DIGITS: Final[int] = 6

# Битов в одном hex-чанке
HEX_CHUNK_BITS: Final[int] = HEX_CHUNK_DIGITS * 4

# Делитель группы десятичных цифр при форматировании
DECIMAL_CHUNK: Final[int] = 10**7

# Количество цифр в группе (zero-padding всех групп кроме старшей)
DECIMAL_CHUNK_DIGITS: Final[int] = 7

ZERO: Final[BigInteger] = BigInteger.from_limbs(0, [0])
ONE: Final[BigInteger] = BigInteger.from_limbs(0, [1])


# =============================================================================
# КОНСТРУКТОРЫ
# =============================================================================


def parse_hex(text: str) -> BigInteger:
    """
    Парсинг hex-строки в BigInteger.

    Цифры читаются чанками по 6 (24 бита) от младшего конца и упаковываются
    в 26-битные limbs со смещением off = (24 * k) mod 26.

    Args:
        text: Необязательный '-', затем hex-цифры без префикса

    Returns:
        BigInteger

    Raises:
        MalformedIntegerError: Если строка не является hex-литералом

    Examples:
        >>> str(parse_hex("-1f4"))
        '-500'
    """
    negative, digits = split_hex_literal(text)

    limbs = [0] * (len(digits) * 4 // BITS + 2)
    bit_pos = 0
    end = len(digits)
    while end > 0:
        start = max(0, end - HEX_CHUNK_DIGITS)
        word = int(digits[start:end], 16)
        index, off = divmod(bit_pos, BITS)
        # Чанк занимает не более двух соседних limbs
        limbs[index] |= (word << off) & MASK
        limbs[index + 1] |= word >> (BITS - off)
        bit_pos += HEX_CHUNK_BITS
        end = start

    return BigInteger.from_limbs(1 if negative else 0, limbs)


def from_number(value: Union[int, float]) -> BigInteger:
    """
    Конверсия host-числа в BigInteger.

    Args:
        value: int (любой величины) или конечный целочисленный float

    Returns:
        BigInteger

    Raises:
        MalformedIntegerError: Если float не конечен или имеет дробную часть
        TypeError: Если value не int/float (bool тоже отвергается)
    """
    value = integral_value(value)

    sign = 0
    if value < 0:
        sign = 1
        value = -value

    limbs = [value & MASK]
    value >>= BITS
    while value:
        limbs.append(value & MASK)
        value >>= BITS
    return BigInteger.from_limbs(sign, limbs)


def integer(value: Union[str, int, float]) -> BigInteger:
    """Универсальный конструктор: str → parse_hex, число → from_number."""
    if isinstance(value, str):
        return parse_hex(value)
    return from_number(value)


# =============================================================================
# КОНВЕРСИЯ И ФОРМАТИРОВАНИЕ
# =============================================================================


def to_float(x: BigInteger) -> float:
    """
    Конверсия в float (точна для |x| < 2^53, далее с потерей точности).

    Округление к ближайшему: берутся старшие 4 limbs (>= 79 значащих бит),
    ненулевые младшие limbs сворачиваются в sticky-бит. Для значений за
    пределами диапазона float возвращает ±inf.
    """
    count = min(x.length, 4)
    top = 0
    for limb in reversed(x.limbs[-count:]):
        top = (top << BITS) | limb
    if any(x.limbs[:-count]):
        top |= 1

    try:
        result = math.ldexp(float(top), (x.length - count) * BITS)
    except OverflowError:
        result = math.inf
    return -result if x.sign else result


def to_decimal_string(x: BigInteger) -> str:
    """
    Форматирование в десятичную строку.

    Fast path: значения до 2^53 (не более двух limbs, либо три limbs со
    старшим limb == 1) форматируются через float, который для них точен.
    Иначе модуль многократно делится на 10^7 (divn/modn), группы собираются
    с zero-padding до 7 цифр, кроме старшей.

    Examples:
        >>> to_decimal_string(from_number(-500))
        '-500'
    """
    if x.length < 3 or (x.length == 3 and x.limbs[2] == 1):
        return str(int(to_float(x)))

    groups: List[str] = []
    current = BigInteger.from_limbs(0, x.limbs)
    while not current.is_zero:
        remainder = modn(current, DECIMAL_CHUNK)
        current = divn(current, DECIMAL_CHUNK)
        if current.is_zero:
            groups.append(str(remainder))
        else:
            groups.append(str(remainder).zfill(DECIMAL_CHUNK_DIGITS))

    out = "".join(reversed(groups))
    return "-" + out if x.sign else out


def to_contract(x: BigInteger) -> Dict[str, Any]:
    """
    Interchange-форма {"sign": 0|1, "limbs": [...]}.

    Соответствует src/core/contracts/schema/big_integer.json; всегда канонична.
    """
    return {"sign": x.sign, "limbs": list(x.limbs)}


def from_contract(data: Dict[str, Any], strict: bool = False) -> BigInteger:
    """
    Восстановление BigInteger из interchange-формы.

    Данные проверяются JSON Schema контрактом, затем Pydantic моделью
    (канонизация + диапазон limbs).

    Args:
        data: Payload {"sign": 0|1, "limbs": [...]}
        strict: Отвергать неканоническую форму вместо её нормализации

    Raises:
        MalformedIntegerError: Если payload не соответствует контракту
    """
    from src.core.contracts import validate_big_integer

    validate_big_integer(data, canonical=strict)
    return BigInteger.model_validate(data)


# =============================================================================
# ПРЕДИКАТЫ И СРАВНЕНИЕ
# =============================================================================


def is_zero(x: BigInteger) -> bool:
    return x.is_zero


def bit_length(x: BigInteger) -> int:
    """(length - 1) * 26 + биты старшего limb."""
    return x.bit_length


def _compare_magnitudes(a: Sequence[int], b: Sequence[int]) -> int:
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    for j in range(len(a) - 1, -1, -1):
        if a[j] != b[j]:
            return -1 if a[j] < b[j] else 1
    return 0


def compare(x: BigInteger, y: BigInteger) -> int:
    """
    Сравнение: -1, 0 или 1.

    Разные знаки → отрицательное меньше; иначе сравниваются длины, затем
    limbs от старшего к младшему.
    """
    if x.sign != y.sign:
        return -1 if x.sign else 1
    order = _compare_magnitudes(x.limbs, y.limbs)
    return -order if x.sign else order


# =============================================================================
# СЛОЖЕНИЕ И ВЫЧИТАНИЕ
# =============================================================================


def _add_magnitudes(a: Sequence[int], b: Sequence[int]) -> List[int]:
    if len(a) < len(b):
        a, b = b, a
    z: List[int] = []
    carry = 0
    for j in range(len(a)):
        word = a[j] + (b[j] if j < len(b) else 0) + carry
        z.append(word & MASK)
        carry = word >> BITS
    if carry:
        z.append(carry)
    return z


def _sub_magnitudes(a: Sequence[int], b: Sequence[int]) -> List[int]:
    """a - b для |a| >= |b|."""
    z: List[int] = []
    borrow = 0
    for j in range(len(a)):
        word = a[j] - (b[j] if j < len(b) else 0) + borrow
        z.append(word & MASK)
        borrow = word >> BITS
    return z


def add(x: BigInteger, y: BigInteger) -> BigInteger:
    """Сложение с переносом по limbs; смешанные знаки делегируются в sub."""
    if x.sign and not y.sign:
        return sub(y, neg(x))
    if not x.sign and y.sign:
        return sub(x, neg(y))
    return BigInteger.from_limbs(x.sign, _add_magnitudes(x.limbs, y.limbs))


def sub(x: BigInteger, y: BigInteger) -> BigInteger:
    """
    Вычитание.

    Модульная процедура всегда получает больший модуль первым, поэтому
    промежуточный результат никогда не отрицателен.
    """
    if y.sign:
        return add(x, neg(y))
    if x.sign:
        return neg(add(neg(x), y))

    order = _compare_magnitudes(x.limbs, y.limbs)
    if order == 0:
        return ZERO
    if order < 0:
        return BigInteger.from_limbs(1, _sub_magnitudes(y.limbs, x.limbs))
    return BigInteger.from_limbs(0, _sub_magnitudes(x.limbs, y.limbs))


def add_small(x: BigInteger, n: int) -> BigInteger:
    """x + n для host-целого n."""
    return add(x, from_number(n))


def sub_small(x: BigInteger, n: int) -> BigInteger:
    """x - n для host-целого n."""
    return sub(x, from_number(n))


def neg(x: BigInteger) -> BigInteger:
    """Смена знака; ноль остаётся неотрицательным."""
    if x.is_zero:
        return x
    return BigInteger.from_limbs(x.sign ^ 1, x.limbs)


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def mul(x: BigInteger, y: BigInteger) -> BigInteger:
    """
    Умножение (школьная свёртка по столбцам).

    Для каждого столбца k суммируются произведения x[k-j] * y[j], младшие
    26 бит уходят в результат, остальное — перенос в следующий столбец.
    """
    a, b = x.limbs, y.limbs
    z = [0] * (len(a) + len(b))
    carry = 0
    for k in range(len(z) - 1):
        column = carry
        for j in range(max(0, k - len(a) + 1), min(k, len(b) - 1) + 1):
            column += a[k - j] * b[j]
        z[k] = column & MASK
        carry = column >> BITS
    z[-1] = carry
    return BigInteger.from_limbs(x.sign ^ y.sign, z)


# =============================================================================
# СДВИГИ
# =============================================================================


def _shl_limbs(limbs: Sequence[int], bits: int) -> List[int]:
    """Сдвиг модуля влево на bits < 26 с переносом между limbs."""
    if bits == 0:
        return list(limbs)
    z: List[int] = []
    carry = 0
    for limb in limbs:
        word = (limb << bits) | carry
        z.append(word & MASK)
        carry = word >> BITS
    if carry:
        z.append(carry)
    return z


def _shr_limbs(limbs: Sequence[int], bits: int) -> List[int]:
    """Сдвиг модуля вправо на bits < 26."""
    if bits == 0:
        return list(limbs)
    z: List[int] = []
    for j, limb in enumerate(limbs):
        high = limbs[j + 1] if j + 1 < len(limbs) else 0
        z.append((limb >> bits) | ((high << (BITS - bits)) & MASK))
    return z


def shl(x: BigInteger, k: int) -> BigInteger:
    """
    Сдвиг влево: x * 2^k. Знак сохраняется.

    Raises:
        ValueError: Если k < 0
    """
    if k < 0:
        raise ValueError("negative shift count")
    words, bits = divmod(k, BITS)
    return BigInteger.from_limbs(x.sign, [0] * words + _shl_limbs(x.limbs, bits))


def shr(x: BigInteger, k: int) -> BigInteger:
    """
    Арифметический сдвиг вправо: floor(x / 2^k).

    Для отрицательных x используется тождество
    shr(x, k) = -(shr(-(x + 1), k)) - 1, что даёт округление к -inf.

    Raises:
        ValueError: Если k < 0

    Examples:
        >>> str(shr(from_number(-7), 1))
        '-4'
    """
    if k < 0:
        raise ValueError("negative shift count")
    if x.sign:
        return sub_small(neg(shr(neg(add_small(x, 1)), k)), 1)

    words, bits = divmod(k, BITS)
    if words >= x.length:
        return ZERO
    return BigInteger.from_limbs(0, _shr_limbs(x.limbs[words:], bits))


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def _sub_mul_shifted(r: List[int], b: Sequence[int], mul_by: int, shift: int) -> int:
    """
    r -= (b * mul_by) << (shift limbs), in place.

    Returns:
        Заём из старшего limb r: 0, либо отрицательное число, если результат
        ушёл ниже нуля (тогда r хранит значение по модулю SHIFT^len(r))
    """
    borrow = 0
    for i, limb in enumerate(b):
        word = r[i + shift] - limb * mul_by + borrow
        r[i + shift] = word & MASK
        borrow = word >> BITS
    for i in range(shift + len(b), len(r)):
        if borrow == 0:
            break
        word = r[i] + borrow
        r[i] = word & MASK
        borrow = word >> BITS
    return borrow


def _add_shifted(r: List[int], b: Sequence[int], shift: int) -> int:
    """r += b << (shift limbs), in place. Возвращает перенос из старшего limb."""
    carry = 0
    for i, limb in enumerate(b):
        word = r[i + shift] + limb + carry
        r[i + shift] = word & MASK
        carry = word >> BITS
    for i in range(shift + len(b), len(r)):
        if carry == 0:
            break
        word = r[i] + carry
        r[i] = word & MASK
        carry = word >> BITS
    return carry


def _divmod_magnitudes(a: Sequence[int], b: Sequence[int]) -> Tuple[List[int], List[int]]:
    """
    Нормализованное длинное деление Кнута для |a| >= |b| > 0.

    1. Нормализация: сдвиг обоих операндов влево, чтобы у старшего limb
       делителя был установлен старший бит (оценка цифры завышена не более чем на 2)
    2. Старшая цифра частного (0 или 1) — одно пробное вычитание
    3. Для каждой следующей позиции: оценка по двум старшим limbs остатка,
       ограниченная MASK; вычитание делитель * цифра; пока остаток
       отрицателен — цифра уменьшается, делитель добавляется обратно
    4. Остаток сдвигается вправо на величину нормализации
    """
    shift = BITS - b[-1].bit_length()
    b = _shl_limbs(b, shift)
    r = _shl_limbs(a, shift)

    n = len(b)
    m = len(r) - n
    top = b[-1]
    q = [0] * (m + 1)

    if _sub_mul_shifted(r, b, 1, m) < 0:
        _add_shifted(r, b, m)
    else:
        q[m] = 1

    for j in range(m - 1, -1, -1):
        estimate = (r[n + j] * SHIFT + r[n + j - 1]) // top
        digit = min(estimate, MASK)
        borrow = _sub_mul_shifted(r, b, digit, j)
        while borrow < 0:
            digit -= 1
            borrow += _add_shifted(r, b, j)
        q[j] = digit

    return q, _shr_limbs(r, shift)


def _require_nonzero(y: BigInteger) -> None:
    if y.is_zero:
        raise IntegerDivisionByZero("integer division or modulo by zero")


def divmod_truncating(x: BigInteger, y: BigInteger) -> Tuple[BigInteger, BigInteger]:
    """
    Пара (quot, rem) с округлением частного к нулю.

    Знак частного: отрицательный, если знаки операндов различны.
    Знак остатка: знак делимого.

    Raises:
        IntegerDivisionByZero: Если y == 0
    """
    _require_nonzero(y)
    if x.is_zero:
        return ZERO, ZERO
    if _compare_magnitudes(x.limbs, y.limbs) < 0:
        return ZERO, x

    q, r = _divmod_magnitudes(x.limbs, y.limbs)
    return BigInteger.from_limbs(x.sign ^ y.sign, q), BigInteger.from_limbs(x.sign, r)


def divn(x: BigInteger, n: int) -> BigInteger:
    """Деление модуля на host-целое 0 < n < 2^26 (знак x сохраняется)."""
    if n == 0:
        raise IntegerDivisionByZero("integer division or modulo by zero")
    z = [0] * x.length
    carry = 0
    for j in range(x.length - 1, -1, -1):
        word = x.limbs[j] + carry * SHIFT
        z[j] = word // n
        carry = word % n
    return BigInteger.from_limbs(x.sign, z)


def modn(x: BigInteger, n: int) -> int:
    """Остаток модуля x по host-целому 0 < n < 2^26."""
    if n == 0:
        raise IntegerDivisionByZero("integer division or modulo by zero")
    radix_mod = SHIFT % n
    z = 0
    for limb in reversed(x.limbs):
        z = (radix_mod * z + limb) % n
    return z


def div(x: BigInteger, y: BigInteger) -> BigInteger:
    """
    Floor-деление: частное округляется к -inf.

    Examples:
        >>> str(div(from_number(-7), from_number(2)))
        '-4'
    """
    q, m = divmod_truncating(x, y)
    if m.is_zero or m.sign == y.sign:
        return q
    return sub_small(q, 1)


def mod(x: BigInteger, y: BigInteger) -> BigInteger:
    """
    Floor-остаток: ноль или знак делителя.

    Examples:
        >>> str(mod(from_number(-7), from_number(2)))
        '1'
    """
    _, m = divmod_truncating(x, y)
    if m.is_zero or m.sign == y.sign:
        return m
    return add(m, y)


def quot(x: BigInteger, y: BigInteger) -> BigInteger:
    """Truncating-частное (к нулю): quot(-7, 2) == -3."""
    return divmod_truncating(x, y)[0]


def rem(x: BigInteger, y: BigInteger) -> BigInteger:
    """Truncating-остаток (знак делимого): rem(-7, 2) == -1."""
    return divmod_truncating(x, y)[1]


# =============================================================================
# ПОБИТОВЫЕ ОПЕРАЦИИ
# =============================================================================


def _bitwise(op: Callable[[int, int], int], x: BigInteger, y: BigInteger) -> BigInteger:
    """
    Побитовая операция в дополнительном коде.

    Отрицательные операнды переводятся в (max_bits + 1)-битный дополнительный
    код прибавлением 2^(max_bits + 1). Знак результата — та же операция над
    знаковыми битами; отрицательный результат возвращается вычитанием той же
    степени двойки.
    """
    modulus = None
    if x.sign or y.sign:
        modulus = shl(ONE, max(x.bit_length, y.bit_length) + 1)

    a = add(modulus, x).limbs if x.sign else x.limbs
    b = add(modulus, y).limbs if y.sign else y.limbs
    z = BigInteger.from_limbs(0, [op(p, q) for p, q in zip_longest(a, b, fillvalue=0)])

    if op(x.sign, y.sign):
        return sub(z, modulus)
    return z


def bit_and(x: BigInteger, y: BigInteger) -> BigInteger:
    """AND; результат отрицателен, если отрицательны оба операнда."""
    return _bitwise(operator.and_, x, y)


def bit_or(x: BigInteger, y: BigInteger) -> BigInteger:
    """OR; результат отрицателен, если отрицателен любой операнд."""
    return _bitwise(operator.or_, x, y)


def bit_xor(x: BigInteger, y: BigInteger) -> BigInteger:
    """XOR; результат отрицателен, если знаки различны."""
    return _bitwise(operator.xor, x, y)


def bit_not(x: BigInteger) -> BigInteger:
    """~x = -x - 1."""
    return sub_small(neg(x), 1)
