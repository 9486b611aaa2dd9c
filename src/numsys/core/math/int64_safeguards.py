"""
Int64 Safeguards — Checked Integer Primitives

Python int не ограничен по разрядности, но кодек работает строго в
диапазоне signed 64-bit. Модуль обеспечивает проверяемую арифметику:
- Сложение / умножение / отрицание с проверкой диапазона
- Абсолютное значение с проверкой (|INT64_MIN| не представим)
- Валидация входных значений (int64, uint32)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат любой операции лежит в [INT64_MIN, INT64_MAX]
2. Выход за диапазон всегда NumberOverflowError, никогда wraparound
3. bool не считается целым числом
"""

from typing import Final

from numsys.core.errors import InvalidArgumentError, NumberOverflowError

# =============================================================================
# ГРАНИЦЫ ДИАПАЗОНОВ
# =============================================================================

# Signed 64-bit
INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1

# Unsigned 32-bit: предел счётчика цифр для unary (base = 1)
UINT32_MAX: Final[int] = 2**32 - 1


# =============================================================================
# ПРОВЕРКИ
# =============================================================================


def is_int64(value: int) -> bool:
    """
    Проверка, что значение лежит в диапазоне signed 64-bit.

    Examples:
        >>> is_int64(2**63 - 1)
        True
        >>> is_int64(2**63)
        False
    """
    return INT64_MIN <= value <= INT64_MAX


def _require_int(value: object, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            f"{name} must be an int, got {type(value).__name__}"
        )


def validate_int64(value: int, name: str) -> None:
    """
    Валидация, что значение является int в диапазоне signed 64-bit.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        InvalidArgumentError: Если value не int (или bool)
        NumberOverflowError: Если value вне [INT64_MIN, INT64_MAX]
    """
    _require_int(value, name)

    if not is_int64(value):
        raise NumberOverflowError(
            f"{name} must be in [{INT64_MIN}, {INT64_MAX}], got {value}"
        )


def validate_uint32(value: int, name: str) -> None:
    """
    Валидация, что значение помещается в unsigned 32-bit счётчик.

    Raises:
        NumberOverflowError: Если value < 0 или value > UINT32_MAX
    """
    _require_int(value, name)

    if not 0 <= value <= UINT32_MAX:
        raise NumberOverflowError(
            f"{name} must be in [0, {UINT32_MAX}], got {value}"
        )


# =============================================================================
# CHECKED АРИФМЕТИКА
# =============================================================================


def checked_add(a: int, b: int) -> int:
    """
    Сложение с проверкой диапазона signed 64-bit.

    Raises:
        NumberOverflowError: Если a + b вне диапазона

    Examples:
        >>> checked_add(1, 2)
        3
        >>> checked_add(2**63 - 1, 1)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        NumberOverflowError: ...
    """
    result = a + b
    if not is_int64(result):
        raise NumberOverflowError(f"integer overflow: {a} + {b}")
    return result


def checked_mul(a: int, b: int) -> int:
    """
    Умножение с проверкой диапазона signed 64-bit.

    Raises:
        NumberOverflowError: Если a * b вне диапазона
    """
    result = a * b
    if not is_int64(result):
        raise NumberOverflowError(f"integer overflow: {a} * {b}")
    return result


def checked_negate(value: int) -> int:
    """
    Отрицание с проверкой: -INT64_MIN не представимо.

    Raises:
        NumberOverflowError: Если -value вне диапазона
    """
    result = -value
    if not is_int64(result):
        raise NumberOverflowError(f"integer overflow: cannot negate {value}")
    return result


def checked_abs(value: int) -> int:
    """
    Абсолютное значение с проверкой диапазона.

    Examples:
        >>> checked_abs(-5)
        5
        >>> checked_abs(-(2**63))  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        NumberOverflowError: ...
    """
    if value < 0:
        return checked_negate(value)
    return value
