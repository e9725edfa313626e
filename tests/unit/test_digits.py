"""
Тесты для модуля digits — арифметика над magnitude-строками

Проверяет:
1. Валидацию и нормализацию строк цифр
2. Сравнение magnitude (длина, затем цифры)
3. Перенос при сложении, заём при вычитании
4. Умножение schoolbook и короткое замыкание по нулю
"""

import pytest

from src.core.math.digits import (
    DECIMAL_BASE,
    DIGIT_CHARS,
    ZERO_DIGITS,
    add_magnitudes,
    compare_magnitudes,
    is_canonical,
    is_digit_string,
    multiply_magnitudes,
    strip_leading_zeros,
    subtract_magnitudes,
)


# =============================================================================
# ВАЛИДАЦИЯ И НОРМАЛИЗАЦИЯ
# =============================================================================


class TestDigitValidation:
    """Тесты is_digit_string / strip_leading_zeros / is_canonical"""

    def test_constants(self) -> None:
        assert DECIMAL_BASE == 10
        assert ZERO_DIGITS == "0"
        assert DIGIT_CHARS == "0123456789"

    def test_digit_string_accepts_ascii_digits(self) -> None:
        assert is_digit_string("0123456789")
        assert is_digit_string("-123", start=1)

    def test_digit_string_rejects_other_characters(self) -> None:
        """Буквы, знаки и unicode-цифры отклоняются"""
        assert not is_digit_string("12a3")
        assert not is_digit_string("-123")
        assert not is_digit_string("1 2")
        assert not is_digit_string("²")
        assert not is_digit_string("٣")

    def test_empty_range_is_vacuously_digits(self) -> None:
        assert is_digit_string("")
        assert is_digit_string("-", start=1)

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("0000123", "123"),
            ("0", "0"),
            ("0000", "0"),
            ("100", "100"),
            ("007007", "7007"),
        ],
    )
    def test_strip_leading_zeros(self, raw: str, expected: str) -> None:
        assert strip_leading_zeros(raw) == expected

    def test_is_canonical(self) -> None:
        assert is_canonical("0")
        assert is_canonical("10")
        assert not is_canonical("")
        assert not is_canonical("00")
        assert not is_canonical("012")
        assert not is_canonical("-1")


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


class TestCompareMagnitudes:
    """Тесты compare_magnitudes"""

    def test_length_decides_first(self) -> None:
        """Больше цифр → больше, независимо от старшей цифры"""
        assert compare_magnitudes("999", "1000") == -1
        assert compare_magnitudes("1000", "999") == 1

    def test_digits_decide_on_equal_length(self) -> None:
        assert compare_magnitudes("12345", "12346") == -1
        assert compare_magnitudes("67890", "12345") == 1

    def test_equal(self) -> None:
        assert compare_magnitudes("0", "0") == 0
        assert compare_magnitudes("12345", "12345") == 0


# =============================================================================
# СЛОЖЕНИЕ
# =============================================================================


class TestAddMagnitudes:
    """Тесты add_magnitudes"""

    @pytest.mark.parametrize(
        "a, b, expected",
        [
            ("12345", "67890", "80235"),
            ("0", "0", "0"),
            ("0", "42", "42"),
            ("5", "5", "10"),
            ("999", "1", "1000"),
            ("1", "999", "1000"),
        ],
    )
    def test_add(self, a: str, b: str, expected: str) -> None:
        assert add_magnitudes(a, b) == expected

    def test_carry_chain_through_all_digits(self) -> None:
        """9999 + 1: перенос проходит через все разряды"""
        assert add_magnitudes("9999", "1") == "10000"
        assert add_magnitudes("9" * 500, "1") == "1" + "0" * 500

    def test_inputs_unchanged(self) -> None:
        a = "123"
        b = "987"
        add_magnitudes(a, b)
        assert a == "123"
        assert b == "987"


# =============================================================================
# ВЫЧИТАНИЕ
# =============================================================================


class TestSubtractMagnitudes:
    """Тесты subtract_magnitudes"""

    @pytest.mark.parametrize(
        "larger, smaller, expected",
        [
            ("67890", "12345", "55545"),
            ("10000", "1", "9999"),
            ("1000", "999", "1"),
            ("12345", "12345", "0"),
            ("5", "0", "5"),
            ("100", "1", "99"),
        ],
    )
    def test_subtract(self, larger: str, smaller: str, expected: str) -> None:
        assert subtract_magnitudes(larger, smaller) == expected

    def test_result_has_no_leading_zeros(self) -> None:
        assert subtract_magnitudes("100000", "99999") == "1"

    def test_smaller_minuend_raises(self) -> None:
        with pytest.raises(ValueError, match="smaller than subtrahend"):
            subtract_magnitudes("3", "5")


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


class TestMultiplyMagnitudes:
    """Тесты multiply_magnitudes"""

    @pytest.mark.parametrize(
        "a, b, expected",
        [
            ("12345", "67890", "838102050"),
            ("99", "99", "9801"),
            ("123", "456", "56088"),
            ("1", "7", "7"),
            ("10", "10", "100"),
        ],
    )
    def test_multiply(self, a: str, b: str, expected: str) -> None:
        assert multiply_magnitudes(a, b) == expected

    def test_zero_short_circuit(self) -> None:
        assert multiply_magnitudes("0", "67890") == "0"
        assert multiply_magnitudes("67890", "0") == "0"

    def test_result_length_bounded_by_buffer(self) -> None:
        """len(a*b) <= len(a) + len(b)"""
        result = multiply_magnitudes("9" * 50, "9" * 40)
        assert len(result) == 90
        assert result == str(int("9" * 50) * int("9" * 40))

    def test_commutative(self) -> None:
        a = "31415926535897932384626433"
        b = "27182818284590452353602874"
        assert multiply_magnitudes(a, b) == multiply_magnitudes(b, a)
