"""
Positional Arithmetic — примитивы позиционной записи числа

Модуль содержит всю арифметику, на которой построен digit view:
- Вычисление делителя (positional weight) для позиции цифры
- Знако-сохраняющее извлечение модуля (magnitude)
- Чтение и замена одной цифры без перевода числа в строку
- Ограничение (clamp) индексов позиций

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Цифра всегда в диапазоне [0, radix), знак числа не влияет на цифру
2. Индекс позиции никогда не выходит за [0, digits] (clamp, не ошибка)
3. Значение цифры при записи приводится по модулю radix (не отвергается)
4. Знак числа сохраняется при записи, пока модуль не стал нулём
"""

from typing import Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Основание по умолчанию (десятичная запись)
DEFAULT_RADIX: Final[int] = 10

# Минимально допустимое основание (radix > 1)
MIN_RADIX: Final[int] = 2


# =============================================================================
# МОДУЛЬ И КОЛИЧЕСТВО ЦИФР
# =============================================================================


def magnitude(value: int) -> int:
    """
    Модуль числа без учёта знака.

    Args:
        value: Исходное целое (может быть отрицательным)

    Returns:
        abs(value)
    """
    return -value if value < 0 else value


def total_digits(value: int, radix: int = DEFAULT_RADIX) -> int:
    """
    Количество цифр в записи модуля числа по основанию radix.

    Ноль всегда имеет ровно одну цифру. Деление повторяется, пока
    частное не станет нулём.

    Args:
        value: Исходное целое
        radix: Основание системы счисления

    Returns:
        Минимальное n >= 1, такое что radix ** n > abs(value)

    Examples:
        >>> total_digits(12345)
        5
        >>> total_digits(0)
        1
        >>> total_digits(-0x12345, 16)
        5
    """
    remaining = magnitude(value)
    digits = 0

    while True:
        digits += 1
        remaining //= radix
        if remaining == 0:
            return digits


# =============================================================================
# ИНДЕКСЫ И ДЕЛИТЕЛИ
# =============================================================================


def clamp(
    value: int,
    min_value: int | None = None,
    max_value: int | None = None,
) -> int:
    """
    Ограничение значения в заданном диапазоне.

    Args:
        value: Исходное значение
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Returns:
        Значение, ограниченное диапазоном [min_value, max_value]

    Examples:
        >>> clamp(5, 0, 10)
        5
        >>> clamp(-1, 0, 10)
        0
        >>> clamp(15, 0, 10)
        10
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result


def clamp_index(index: int, digits: int) -> int:
    """Индекс позиции, ограниченный диапазоном [0, digits]."""
    return clamp(index, 0, digits)


def forward_divisor(index: int, digits: int, radix: int = DEFAULT_RADIX) -> int:
    """
    Делитель для позиции при нумерации слева направо.

    Позиция 0 означает старшую цифру, позиция digits - 1 младшую.
    Позиция digits (end sentinel) даёт делитель 1.

    Args:
        index: Позиция (clamp в [0, digits])
        digits: Количество цифр в view
        radix: Основание

    Returns:
        radix ** (digits - index - 1), но не меньше radix ** 0

    Examples:
        >>> forward_divisor(0, 5)
        10000
        >>> forward_divisor(4, 5)
        1
        >>> forward_divisor(5, 5)
        1
    """
    index = clamp_index(index, digits)
    return radix ** max(digits - index - 1, 0)


def reverse_divisor(index: int, digits: int, radix: int = DEFAULT_RADIX) -> int:
    """
    Делитель для позиции при обратном обходе (0 означает младшую цифру).

    Позиция digits (end sentinel) даёт radix ** digits.

    Examples:
        >>> reverse_divisor(0, 5)
        1
        >>> reverse_divisor(4, 5)
        10000
        >>> reverse_divisor(5, 5)
        100000
    """
    index = clamp_index(index, digits)
    return radix ** index


def compute_divisor(
    index: int,
    digits: int,
    radix: int = DEFAULT_RADIX,
    reverse: bool = False,
) -> int:
    """
    Делитель для позиции с учётом направления обхода.

    Args:
        index: Позиция
        digits: Количество цифр в view
        radix: Основание
        reverse: True для обратной нумерации (от младшей цифры)

    Returns:
        Positional weight для позиции
    """
    if reverse:
        return reverse_divisor(index, digits, radix)
    return forward_divisor(index, digits, radix)


# =============================================================================
# ЧТЕНИЕ И ЗАПИСЬ ЦИФРЫ
# =============================================================================


def extract_digit(value: int, divisor: int, radix: int = DEFAULT_RADIX) -> int:
    """
    Цифра числа в позиции с заданным делителем.

    Алгоритм:
        (abs(value) // divisor) % radix

    Examples:
        >>> extract_digit(12345, 10000)
        1
        >>> extract_digit(-12345, 1)
        5
    """
    return (magnitude(value) // divisor) % radix


def replace_digit(
    value: int,
    divisor: int,
    digit: int,
    radix: int = DEFAULT_RADIX,
) -> int:
    """
    Новое значение числа с заменённой цифрой.

    Алгоритм:
    1. Запоминаем знак
    2. Работаем с модулем
    3. Вычитаем вклад текущей цифры: m -= ((m // d) % radix) * d
    4. Добавляем вклад новой цифры: m += (digit % radix) * d
    5. Восстанавливаем знак

    ВАЖНО: если модуль отрицательного числа стал нулём, результат равен 0
    (отрицательного нуля нет, знак теряется).

    Args:
        value: Исходное целое
        divisor: Делитель позиции
        digit: Новая цифра (используется digit % radix)
        radix: Основание

    Returns:
        Новое значение числа

    Examples:
        >>> replace_digit(12345, 10000, 6)
        62345
        >>> replace_digit(-12345, 10000, 0)
        -2345
        >>> replace_digit(0, 1, 13)
        3
    """
    is_negative = value < 0
    result = magnitude(value)
    result -= ((result // divisor) % radix) * divisor
    result += (digit % radix) * divisor
    return -result if is_negative else result
