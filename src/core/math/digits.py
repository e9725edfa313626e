"""
Digits — арифметика над десятичными magnitude-строками

Модуль содержит алгоритмы "в столбик" над абсолютными значениями
(magnitude), представленными строкой десятичных цифр (старшая цифра первая):
- Сравнение magnitude (сначала длина, затем цифры слева направо)
- Сложение с переносом (carry)
- Вычитание с заёмом (borrow)
- Умножение schoolbook с немедленным распространением переноса

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Входы канонические: непустые, только цифры, без ведущих нулей (кроме "0")
2. Результат всегда канонический
3. Все функции чистые: входы не изменяются, результат — новая строка
"""

from typing import Final


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Основание системы счисления
DECIMAL_BASE: Final[int] = 10

# Каноническое представление нуля
ZERO_DIGITS: Final[str] = "0"

# Допустимые символы magnitude
DIGIT_CHARS: Final[str] = "0123456789"


# =============================================================================
# ВАЛИДАЦИЯ И НОРМАЛИЗАЦИЯ
# =============================================================================


def is_digit_string(text: str, start: int = 0) -> bool:
    """
    Проверка, что все символы начиная с start — десятичные цифры.

    str.isdigit() не подходит: принимает unicode-цифры ("²", "٣").

    Args:
        text: Проверяемая строка
        start: Индекс, с которого начинается проверка

    Returns:
        True если text[start:] состоит только из '0'-'9'
    """
    for i in range(start, len(text)):
        if text[i] < "0" or text[i] > "9":
            return False
    return True


def strip_leading_zeros(digits: str) -> str:
    """
    Удаление ведущих нулей с сохранением хотя бы одной цифры.

    Examples:
        >>> strip_leading_zeros("000123")
        '123'
        >>> strip_leading_zeros("0000")
        '0'
    """
    stripped = digits.lstrip("0")
    return stripped if stripped else ZERO_DIGITS


def is_canonical(digits: str) -> bool:
    """Непустая строка цифр без ведущих нулей (кроме "0")."""
    if not digits or not is_digit_string(digits):
        return False
    return digits == ZERO_DIGITS or digits[0] != "0"


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def compare_magnitudes(a: str, b: str) -> int:
    """
    Сравнение двух канонических magnitude.

    Алгоритм:
        1. Больше цифр → больше значение (ведущих нулей нет)
        2. При равной длине — первая различающаяся цифра слева

    Args:
        a: Первая magnitude
        b: Вторая magnitude

    Returns:
        -1 если a < b, 0 если a == b, +1 если a > b

    Examples:
        >>> compare_magnitudes("999", "1000")
        -1
        >>> compare_magnitudes("12345", "12345")
        0
        >>> compare_magnitudes("67890", "12345")
        1
    """
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1

    for digit_a, digit_b in zip(a, b):
        if digit_a != digit_b:
            return -1 if digit_a < digit_b else 1

    return 0


# =============================================================================
# СЛОЖЕНИЕ / ВЫЧИТАНИЕ
# =============================================================================


def add_magnitudes(a: str, b: str) -> str:
    """
    Сложение двух magnitude в столбик.

    Идём от младшей цифры к старшей, перенос (carry) = сумма // 10.
    Цикл продолжается, пока остались цифры или ненулевой перенос.

    Args:
        a: Первое слагаемое (каноническое)
        b: Второе слагаемое (каноническое)

    Returns:
        Каноническая magnitude суммы

    Examples:
        >>> add_magnitudes("12345", "67890")
        '80235'
        >>> add_magnitudes("9999", "1")
        '10000'
    """
    result: list[str] = []
    i = len(a)
    j = len(b)
    carry = 0

    while i > 0 or j > 0 or carry > 0:
        digit_a = 0
        digit_b = 0
        if i > 0:
            i -= 1
            digit_a = ord(a[i]) - ord("0")
        if j > 0:
            j -= 1
            digit_b = ord(b[j]) - ord("0")

        total = digit_a + digit_b + carry
        carry = total // DECIMAL_BASE
        result.append(DIGIT_CHARS[total % DECIMAL_BASE])

    result.reverse()
    return strip_leading_zeros("".join(result))


def subtract_magnitudes(larger: str, smaller: str) -> str:
    """
    Вычитание magnitude в столбик: larger - smaller.

    При отрицательной разности цифр занимаем 10 у следующего разряда
    (borrow = 1).

    Args:
        larger: Уменьшаемое (по модулю не меньше smaller)
        smaller: Вычитаемое

    Returns:
        Каноническая magnitude разности

    Raises:
        ValueError: Если larger < smaller (заём не погашается)

    Examples:
        >>> subtract_magnitudes("67890", "12345")
        '55545'
        >>> subtract_magnitudes("10000", "1")
        '9999'
    """
    if compare_magnitudes(larger, smaller) < 0:
        raise ValueError(f"Minuend {larger} is smaller than subtrahend {smaller}")

    result: list[str] = []
    i = len(larger)
    j = len(smaller)
    borrow = 0

    while i > 0:
        i -= 1
        digit_a = ord(larger[i]) - ord("0")
        digit_b = 0
        if j > 0:
            j -= 1
            digit_b = ord(smaller[j]) - ord("0")

        diff = digit_a - digit_b - borrow
        if diff < 0:
            diff += DECIMAL_BASE
            borrow = 1
        else:
            borrow = 0
        result.append(DIGIT_CHARS[diff])

    result.reverse()
    return strip_leading_zeros("".join(result))


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def multiply_magnitudes(a: str, b: str) -> str:
    """
    Умножение magnitude в столбик (schoolbook, O(len(a) * len(b))).

    Буфер результата длиной len(a) + len(b). Для каждой цифры a (справа
    налево) проходим по цифрам b, накапливая произведение в позиции
    i + j - 1; перенос распространяется сразу внутри строки, поэтому каждая
    ячейка буфера всегда < 10.

    Args:
        a: Первый множитель (канонический)
        b: Второй множитель (канонический)

    Returns:
        Каноническая magnitude произведения

    Examples:
        >>> multiply_magnitudes("12345", "67890")
        '838102050'
        >>> multiply_magnitudes("0", "67890")
        '0'
    """
    if a == ZERO_DIGITS or b == ZERO_DIGITS:
        return ZERO_DIGITS

    buffer = [0] * (len(a) + len(b))

    for i in range(len(a), 0, -1):
        digit_a = ord(a[i - 1]) - ord("0")
        carry = 0
        for j in range(len(b), 0, -1):
            digit_b = ord(b[j - 1]) - ord("0")
            product = digit_a * digit_b + buffer[i + j - 1] + carry
            buffer[i + j - 1] = product % DECIMAL_BASE
            carry = product // DECIMAL_BASE
        # Ячейка i - 1 ещё не тронута этой строкой: carry < 10 помещается
        buffer[i - 1] += carry

    return strip_leading_zeros("".join(DIGIT_CHARS[d] for d in buffer))
