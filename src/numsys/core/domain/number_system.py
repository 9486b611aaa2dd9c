"""
NumberSystem — Модель системы счисления

Immutable Pydantic модель: пара (base, scheme), определяющая текстовое
кодирование целого числа.

- base: основание позиционной системы, 1-36 (1 = unary / tally)
- scheme: одна из четырёх схем кодирования знака (закрытый enum)

Каждая точка входа повторно валидирует полученную систему через
ensure_number_system: невалидная пара никогда не доходит до алгоритмов.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any, Final

from pydantic import BaseModel, Field, ValidationError

from numsys.core.errors import InvalidArgumentError

# =============================================================================
# CONSTANTS
# =============================================================================

# Допустимый диапазон оснований
MIN_BASE: Final[int] = 1
MAX_BASE: Final[int] = 36


# =============================================================================
# ENUMS
# =============================================================================


class SignScheme(str, Enum):
    """
    Схема кодирования знака.

    - SIGNED_MARKER: ведущий '-' у отрицательных чисел
    - SIGN_DIGIT: ведущая цифра-знак ('0' или максимальная цифра)
    - ONES_COMPLEMENT: цифра-знак + поразрядное дополнение модуля
    - TWOS_COMPLEMENT: как ONES_COMPLEMENT, но с +1 к модулю
    """

    SIGNED_MARKER = "SIGNED_MARKER"
    SIGN_DIGIT = "SIGN_DIGIT"
    ONES_COMPLEMENT = "ONES_COMPLEMENT"
    TWOS_COMPLEMENT = "TWOS_COMPLEMENT"


# Схемы с поразрядным дополнением модуля
COMPLEMENT_SCHEMES: Final[frozenset[SignScheme]] = frozenset(
    {SignScheme.ONES_COMPLEMENT, SignScheme.TWOS_COMPLEMENT}
)


# =============================================================================
# MODEL
# =============================================================================


class NumberSystem(BaseModel):
    """
    Система счисления: основание + схема знака.

    Value object без identity: создаётся на месте вызова и не изменяется.
    """

    base: int = Field(
        ..., ge=MIN_BASE, le=MAX_BASE, strict=True, description="Основание (1-36)"
    )
    scheme: SignScheme = Field(
        SignScheme.SIGNED_MARKER, description="Схема кодирования знака"
    )

    model_config = {"frozen": True}

    @property
    def is_unary(self) -> bool:
        """True для base = 1."""
        return self.base == 1

    @property
    def reserves_sign_position(self) -> bool:
        """
        Резервирует ли схема ведущую позицию под цифру-знак.

        Для SIGNED_MARKER позиция знака появляется только у отрицательных
        чисел ('-'), поэтому здесь False. Unary никогда не резервирует.
        """
        return self.scheme is not SignScheme.SIGNED_MARKER and not self.is_unary

    def __str__(self) -> str:
        return f"base {self.base} ({self.scheme.value})"


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def _describe_errors(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    )


def ensure_number_system(system: Any) -> NumberSystem:
    """
    Повторная валидация системы счисления на точке входа.

    Принимает NumberSystem (в том числе собранный через model_construct
    без валидации) или Mapping вида {"base": ..., "scheme": ...}.

    Args:
        system: Проверяемая система счисления

    Returns:
        Валидный NumberSystem

    Raises:
        InvalidArgumentError: Если base вне [1, 36], схема неизвестна
            или system не является системой счисления
    """
    if isinstance(system, NumberSystem):
        data = {
            "base": getattr(system, "base", None),
            "scheme": getattr(system, "scheme", None),
        }
    elif isinstance(system, Mapping):
        data = dict(system)
    else:
        raise InvalidArgumentError(
            f"system must be a NumberSystem, got {type(system).__name__}"
        )

    try:
        return NumberSystem.model_validate(data)
    except ValidationError as exc:
        raise InvalidArgumentError(
            f"invalid number system: {_describe_errors(exc)}"
        ) from exc


def validate_base(base: int) -> None:
    """
    Валидация основания без построения NumberSystem.

    Raises:
        InvalidArgumentError: Если base не int или вне [MIN_BASE, MAX_BASE]
    """
    if isinstance(base, bool) or not isinstance(base, int):
        raise InvalidArgumentError(f"base must be an int, got {type(base).__name__}")

    if not MIN_BASE <= base <= MAX_BASE:
        raise InvalidArgumentError(
            f"base must be in [{MIN_BASE}, {MAX_BASE}], got {base}"
        )
