"""
Тесты для limb-движка целых произвольной точности

Проверяет:
1. Парсинг hex-строк и host-чисел, форматирование в десятичную строку
2. Сравнение, сложение, вычитание, умножение
3. Законы floor- и truncating-деления
4. Побитовые операции в дополнительном коде
5. Сдвиги (включая floor-округление shr для отрицательных)
6. Ошибки: невалидный вход, деление на ноль, отрицательный сдвиг

Эталон — встроенный int Python; случайные операнды генерируются с
фиксированным seed.
"""

import random

import pytest

from src.core.domain.big_integer import BITS, MASK, BigInteger
from src.core.math.errors import IntegerDivisionByZero, MalformedIntegerError
from src.core.math.limb_arithmetic import (
    ONE,
    ZERO,
    add,
    add_small,
    bit_and,
    bit_length,
    bit_not,
    bit_or,
    bit_xor,
    compare,
    div,
    divmod_truncating,
    divn,
    from_number,
    integer,
    is_zero,
    mod,
    modn,
    mul,
    neg,
    parse_hex,
    quot,
    rem,
    shl,
    shr,
    sub,
    sub_small,
    to_decimal_string,
    to_float,
)

SEED = 0xB16
ROUNDS = 300


def as_int(x: BigInteger) -> int:
    """BigInteger → int через limbs (независимо от форматирования)."""
    value = 0
    for limb in reversed(x.limbs):
        value = (value << BITS) | limb
    return -value if x.sign else value


def big(value: int) -> BigInteger:
    return from_number(value)


def random_operand(rng: random.Random) -> int:
    """Операнды разной длины, включая границы limbs и степени двойки."""
    kind = rng.randrange(6)
    if kind == 0:
        value = rng.randrange(0, 1 << 26)
    elif kind == 1:
        value = (1 << rng.randrange(0, 200)) - rng.randrange(0, 2)
    elif kind == 2:
        value = rng.getrandbits(rng.randrange(1, 400))
    elif kind == 3:
        # Все limbs == MASK — худший случай для переносов
        value = (1 << (BITS * rng.randrange(1, 8))) - 1
    else:
        value = rng.getrandbits(rng.randrange(1, 120))
    return -value if rng.random() < 0.5 else value


def random_pairs(count: int = ROUNDS):
    rng = random.Random(SEED)
    return [(random_operand(rng), random_operand(rng)) for _ in range(count)]


# =============================================================================
# ТЕСТЫ КОНСТРУКТОРОВ
# =============================================================================


class TestParseHex:
    """Тесты для parse_hex"""

    def test_negative_literal(self):
        """'-1f4' форматируется в '-500'"""
        assert to_decimal_string(parse_hex("-1f4")) == "-500"

    def test_case_insensitive(self):
        """Регистр hex-цифр не важен"""
        assert parse_hex("DeadBeef") == parse_hex("deadbeef")
        assert as_int(parse_hex("ABCDEF")) == 0xABCDEF

    @pytest.mark.parametrize(
        "text",
        [
            "0",
            "1",
            "ffffff",  # ровно один чанк
            "1000000",  # перенос во второй чанк
            "3ffffff",  # ровно один limb
            "4000000",
            "ffffffffffff",  # два чанка → 48 бит через границу limb
            "123456789abcdef0123456789abcdef",
            "f" * 100,
            "8" + "0" * 77,
        ],
    )
    def test_chunk_and_limb_alignment(self, text):
        """Чанки по 24 бита корректно упаковываются в 26-битные limbs"""
        assert as_int(parse_hex(text)) == int(text, 16)
        assert as_int(parse_hex("-" + text)) == -int(text, 16)

    def test_leading_zeros_canonicalized(self):
        """Ведущие нули не создают лишних limbs"""
        value = parse_hex("000000000000000001")
        assert value.limbs == (1,)

    def test_negative_zero_canonicalized(self):
        """'-0' → канонический ноль"""
        value = parse_hex("-000")
        assert value == ZERO
        assert value.sign == 0

    def test_random_round_trip(self):
        """Hex → BigInteger → десятичная строка совпадает с int(s, 16)"""
        rng = random.Random(SEED)
        for _ in range(ROUNDS):
            text = format(rng.getrandbits(rng.randrange(1, 500)), "x")
            assert to_decimal_string(parse_hex(text)) == str(int(text, 16))

    @pytest.mark.parametrize("text", ["", "-", "0x10", "12g4", " 12", "1_0", "+5", "--1", "1-"])
    def test_malformed_rejected(self, text):
        """Невалидные литералы отвергаются MalformedIntegerError"""
        with pytest.raises(MalformedIntegerError):
            parse_hex(text)

    def test_malformed_is_value_error(self):
        """MalformedIntegerError ловится как ValueError"""
        with pytest.raises(ValueError):
            parse_hex("xyz")


class TestFromNumber:
    """Тесты для from_number"""

    @pytest.mark.parametrize(
        "value",
        [0, 1, -1, MASK, MASK + 1, 2**52, 2**53 - 1, -(2**53 - 1), 2**78 + 5, -(10**40)],
    )
    def test_int_values(self, value):
        assert as_int(from_number(value)) == value

    def test_integral_float(self):
        """Целочисленный float принимается"""
        assert as_int(from_number(12.0)) == 12
        assert as_int(from_number(-(2.0**60))) == -(2**60)

    @pytest.mark.parametrize("value", [0.5, float("nan"), float("inf"), float("-inf")])
    def test_non_integral_float_rejected(self, value):
        with pytest.raises(MalformedIntegerError):
            from_number(value)

    @pytest.mark.parametrize("value", [True, None, "12", [1]])
    def test_wrong_type_rejected(self, value):
        with pytest.raises(TypeError):
            from_number(value)

    def test_integer_dispatch(self):
        """integer(): str → hex, число → from_number"""
        assert integer("ff") == from_number(255)
        assert integer(255) == from_number(255)

    def test_safe_range_round_trip(self):
        """to_float(from_number(n)) == n для |n| < 2^53"""
        rng = random.Random(SEED)
        for _ in range(ROUNDS):
            n = rng.randrange(-(2**53) + 1, 2**53)
            assert to_float(from_number(n)) == n


# =============================================================================
# ТЕСТЫ КОНВЕРСИИ И ФОРМАТИРОВАНИЯ
# =============================================================================


class TestFormatting:
    """Тесты для to_decimal_string и to_float"""

    @pytest.mark.parametrize(
        "value",
        [
            0,
            -1,
            2**52 - 1,
            2**52,  # три limbs, старший == 1 → fast path
            2**53 - 1,
            2**53,  # slow path
            -(2**53),
            10**7,
            10**14 + 1,  # внутренние группы с нулями
            10**21,
            -(10**21 + 7),
            3**200,
        ],
    )
    def test_decimal_matches_int(self, value):
        assert to_decimal_string(big(value)) == str(value)

    def test_fast_and_slow_paths_agree_at_boundary(self):
        """Значения по обе стороны 2^53 форматируются без расхождений"""
        for value in range(2**53 - 50, 2**53 + 50):
            assert to_decimal_string(big(value)) == str(value)
            assert to_decimal_string(big(-value)) == str(-value)

    def test_str_dunder(self):
        assert str(big(-123456789012345678901234567890)) == "-123456789012345678901234567890"

    def test_random_decimal(self):
        for x, _ in random_pairs():
            assert to_decimal_string(big(x)) == str(x)

    def test_to_float_correctly_rounded(self):
        """Конверсия в float совпадает с float(int) и выше 2^53"""
        for x, _ in random_pairs():
            assert to_float(big(x)) == float(x)

    def test_to_float_ties_to_even(self):
        """Середина между соседними float округляется к чётному"""
        value = 2**80 + 2**27  # ровно половина ulp при 53-битной мантиссе
        assert to_float(big(value)) == float(value)
        assert to_float(big(value + 1)) == float(value + 1)

    def test_to_float_overflow_is_inf(self):
        assert to_float(shl(ONE, 2000)) == float("inf")
        assert to_float(neg(shl(ONE, 2000))) == float("-inf")


# =============================================================================
# ТЕСТЫ СРАВНЕНИЯ И ПРЕДИКАТОВ
# =============================================================================


class TestCompare:
    """Тесты для compare, is_zero, bit_length"""

    def test_sign_ordering(self):
        assert compare(big(-1), big(0)) == -1
        assert compare(big(0), big(-1)) == 1
        assert compare(big(-(2**100)), big(1)) == -1

    def test_negative_magnitudes_reversed(self):
        """Для отрицательных больший модуль — меньшее число"""
        assert compare(big(-(2**100)), big(-(2**30))) == -1
        assert compare(big(-5), big(-6)) == 1

    def test_reflexive(self):
        assert compare(ZERO, big(0)) == 0
        assert compare(parse_hex("-0"), ZERO) == 0

    def test_random_against_int(self):
        for x, y in random_pairs():
            assert compare(big(x), big(y)) == (x > y) - (x < y)

    def test_is_zero(self):
        assert is_zero(ZERO)
        assert is_zero(sub(big(2**90), big(2**90)))
        assert not is_zero(ONE)

    @pytest.mark.parametrize("value", [0, 1, 2, MASK, MASK + 1, 2**52, -(2**100) + 1])
    def test_bit_length(self, value):
        assert bit_length(big(value)) == abs(value).bit_length()


# =============================================================================
# ТЕСТЫ АРИФМЕТИКИ
# =============================================================================


class TestAddSubMul:
    """Тесты для add, sub, mul, neg"""

    def test_add_all_sign_combinations(self):
        for x, y in [(7, 5), (-7, 5), (7, -5), (-7, -5), (5, -7), (-5, 7)]:
            assert as_int(add(big(x), big(y))) == x + y
            assert as_int(sub(big(x), big(y))) == x - y

    def test_carry_chain(self):
        """Перенос через все limbs"""
        value = (1 << (BITS * 5)) - 1
        assert as_int(add(big(value), ONE)) == value + 1
        assert as_int(sub(big(value + 1), ONE)) == value

    def test_sub_to_zero_is_canonical(self):
        result = sub(big(-(2**70)), big(-(2**70)))
        assert result == ZERO
        assert result.sign == 0

    def test_add_small_sub_small(self):
        assert as_int(add_small(big(-1), 1)) == 0
        assert as_int(add_small(big(MASK), 1)) == MASK + 1
        assert as_int(sub_small(big(0), 1)) == -1
        assert as_int(sub_small(big(-(2**60)), -3)) == -(2**60) + 3

    def test_mul_promotion_scenario(self):
        """(2^53 - 1) * 2 выходит за безопасный диапазон"""
        result = mul(big(9007199254740991), big(2))
        assert to_decimal_string(result) == "18014398509481982"

    def test_mul_by_zero_is_canonical(self):
        result = mul(big(-(2**100)), ZERO)
        assert result == ZERO

    def test_random_against_int(self):
        for x, y in random_pairs():
            assert as_int(add(big(x), big(y))) == x + y
            assert as_int(sub(big(x), big(y))) == x - y
            assert as_int(mul(big(x), big(y))) == x * y

    def test_neg(self):
        assert as_int(neg(big(5))) == -5
        assert as_int(neg(big(-5))) == 5
        assert neg(ZERO).sign == 0

    def test_operands_not_mutated(self):
        """Операции не изменяют операнды"""
        x = big(2**100 + 12345)
        y = big(-(2**60))
        snapshot = (x.limbs, y.limbs)
        add(x, y)
        mul(x, y)
        div(x, y)
        bit_and(x, y)
        shr(y, 7)
        assert (x.limbs, y.limbs) == snapshot


# =============================================================================
# ТЕСТЫ ДЕЛЕНИЯ
# =============================================================================


class TestDivision:
    """Тесты для div, mod, quot, rem"""

    def test_floor_scenario(self):
        assert as_int(div(big(-7), big(2))) == -4
        assert as_int(mod(big(-7), big(2))) == 1

    def test_truncating_scenario(self):
        assert as_int(quot(big(-7), big(2))) == -3
        assert as_int(rem(big(-7), big(2))) == -1

    @pytest.mark.parametrize("x", [7, -7, 6, -6, 0, 1, -1])
    @pytest.mark.parametrize("y", [2, -2, 7, -7, 1, -1, 9, -9])
    def test_small_sign_grid(self, x, y):
        assert as_int(div(big(x), big(y))) == x // y
        assert as_int(mod(big(x), big(y))) == x % y

    def test_divisor_larger_than_dividend(self):
        q, r = divmod_truncating(big(5), big(2**100))
        assert q == ZERO
        assert as_int(r) == 5
        assert as_int(div(big(-5), big(2**100))) == -1
        assert as_int(mod(big(-5), big(2**100))) == 2**100 - 5

    def test_add_back_path(self):
        """Операнды, на которых оценка цифры частного завышена"""
        y = (1 << (BITS * 3 - 1)) + 1  # нормализован, младшие limbs малы
        x = y * ((1 << BITS) - 1) - 1
        assert as_int(quot(big(x), big(y))) == x // y
        assert as_int(rem(big(x), big(y))) == x % y

        x = (MASK << (BITS * 4)) | MASK
        y = (MASK << BITS) | 1
        assert as_int(quot(big(x), big(y))) == x // y
        assert as_int(rem(big(x), big(y))) == x % y

    def test_floor_law_random(self):
        """x == div(x,y)*y + mod(x,y); mod — ноль или знак y; |mod| < |y|"""
        for x, y in random_pairs():
            if y == 0:
                continue
            q, m = div(big(x), big(y)), mod(big(x), big(y))
            assert as_int(add(mul(q, big(y)), m)) == x
            assert as_int(q) == x // y
            assert m.is_zero or m.sign == big(y).sign
            assert abs(as_int(m)) < abs(y)

    def test_truncating_law_random(self):
        """x == quot(x,y)*y + rem(x,y); rem — ноль или знак x; |rem| < |y|"""
        for x, y in random_pairs():
            if y == 0:
                continue
            q, r = quot(big(x), big(y)), rem(big(x), big(y))
            assert as_int(add(mul(q, big(y)), r)) == x
            assert r.is_zero or r.sign == big(x).sign
            assert abs(as_int(r)) < abs(y)

    @pytest.mark.parametrize("operation", [div, mod, quot, rem, divmod_truncating])
    def test_division_by_zero(self, operation):
        with pytest.raises(IntegerDivisionByZero):
            operation(big(10), ZERO)
        with pytest.raises(ZeroDivisionError):
            operation(ZERO, ZERO)

    def test_divn_modn(self):
        value = 3**150
        assert as_int(divn(big(value), 10**7)) == value // 10**7
        assert modn(big(value), 10**7) == value % 10**7
        with pytest.raises(IntegerDivisionByZero):
            divn(big(value), 0)
        with pytest.raises(IntegerDivisionByZero):
            modn(big(value), 0)


# =============================================================================
# ТЕСТЫ ПОБИТОВЫХ ОПЕРАЦИЙ
# =============================================================================


class TestBitwise:
    """Тесты для bit_and, bit_or, bit_xor, bit_not"""

    def test_scenarios(self):
        assert as_int(bit_and(big(12), big(10))) == 8
        assert as_int(bit_xor(big(5), big(3))) == 6
        assert as_int(bit_or(big(12), big(3))) == 15

    @pytest.mark.parametrize("x", [0, 1, -1, 12, -12, 2**60, -(2**60), MASK, -(MASK + 1)])
    @pytest.mark.parametrize("y", [0, 10, -10, 2**30 + 7, -(2**90) - 3])
    def test_sign_grid(self, x, y):
        assert as_int(bit_and(big(x), big(y))) == x & y
        assert as_int(bit_or(big(x), big(y))) == x | y
        assert as_int(bit_xor(big(x), big(y))) == x ^ y

    def test_random_against_int(self):
        for x, y in random_pairs():
            assert as_int(bit_and(big(x), big(y))) == x & y
            assert as_int(bit_or(big(x), big(y))) == x | y
            assert as_int(bit_xor(big(x), big(y))) == x ^ y

    def test_not_identities(self):
        """x & ~x == 0; x | ~x == -1"""
        for x, _ in random_pairs(100):
            value = big(x)
            assert as_int(bit_not(value)) == ~x
            assert bit_and(value, bit_not(value)) == ZERO
            assert as_int(bit_or(value, bit_not(value))) == -1


# =============================================================================
# ТЕСТЫ СДВИГОВ
# =============================================================================


class TestShifts:
    """Тесты для shl, shr"""

    def test_scenarios(self):
        assert as_int(shl(big(3), 2)) == 12
        assert as_int(shr(big(-7), 1)) == -4

    @pytest.mark.parametrize("k", [0, 1, 25, 26, 27, 52, 53, 78, 200])
    def test_shift_grid(self, k):
        for x in [0, 1, -1, 7, -7, MASK, -(MASK + 1), 2**100 + 3, -(2**100) - 3]:
            assert as_int(shl(big(x), k)) == x << k
            assert as_int(shr(big(x), k)) == x >> k

    def test_shr_all_bits_out(self):
        assert shr(big(2**60), 1000) == ZERO
        assert as_int(shr(big(-(2**60)), 1000)) == -1

    def test_random_against_int(self):
        rng = random.Random(SEED)
        for x, _ in random_pairs():
            k = rng.randrange(0, 130)
            assert as_int(shl(big(x), k)) == x * 2**k
            assert as_int(shr(big(x), k)) == x >> k

    @pytest.mark.parametrize("operation", [shl, shr])
    def test_negative_shift_rejected(self, operation):
        with pytest.raises(ValueError, match="negative shift count"):
            operation(big(5), -1)
