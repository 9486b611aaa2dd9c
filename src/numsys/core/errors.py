"""
Errors — виды ошибок и иерархия исключений numsys

Каждая операция (parse / format / convert) либо возвращает значение,
либо поднимает исключение одного из трёх видов. Глобального статуса
ошибки нет: вид ошибки переносится самим исключением (атрибут kind).

ВИДЫ ОШИБОК:
1. INVALID_ARGUMENT: невалидная система счисления, отсутствующий вход,
   недопустимый символ, неуместный '-'
2. OVERFLOW: выход за пределы signed 64-bit (или unsigned 32-bit для
   счётчика цифр unary)
3. OUT_OF_MEMORY: не удалось выделить память под набор символов или
   под выходную строку
"""

from enum import Enum


# =============================================================================
# ENUMS
# =============================================================================


class ErrorKind(str, Enum):
    """Вид ошибки кодека."""

    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    OVERFLOW = "OVERFLOW"
    OUT_OF_MEMORY = "OUT_OF_MEMORY"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class NumsysError(Exception):
    """Базовое исключение numsys. Подклассы задают kind."""

    kind: ErrorKind


class InvalidArgumentError(NumsysError, ValueError):
    """
    Невалидный аргумент.

    Поднимается при base вне [1, 36], неизвестной схеме знака,
    отсутствующем тексте или некорректном тексте числа.
    """

    kind = ErrorKind.INVALID_ARGUMENT


class NumberOverflowError(NumsysError, OverflowError):
    """
    Переполнение фиксированного целочисленного диапазона.

    Значение никогда не усекается и не переводится в больший тип:
    выход за signed 64-bit всегда сообщается этой ошибкой.
    """

    kind = ErrorKind.OVERFLOW


class OutOfMemoryError(NumsysError, MemoryError):
    """Не удалось выделить память под промежуточный или выходной буфер."""

    kind = ErrorKind.OUT_OF_MEMORY
