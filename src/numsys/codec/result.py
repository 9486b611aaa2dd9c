"""Result wrappers — явный результат вместо исключений.

try_parse / try_format / try_convert вызывают операции кодека и
возвращают CodecResult: либо значение, либо вид ошибки с сообщением.
Перехватываются только ошибки NumsysError, остальные пробрасываются.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from numsys.codec.conversion import convert
from numsys.codec.formatter import format_number
from numsys.codec.parser import parse
from numsys.core.domain.number_system import NumberSystem
from numsys.core.errors import ErrorKind, NumsysError


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class CodecResult:
    """Результат операции кодека."""

    value: int | str | None
    error: ErrorKind | None

    # Детали
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None


def _capture(operation: Callable[..., Any], *args: Any) -> CodecResult:
    try:
        value = operation(*args)
    except NumsysError as exc:
        return CodecResult(value=None, error=exc.kind, message=str(exc))
    return CodecResult(value=value, error=None)


# =============================================================================
# OPERATIONS
# =============================================================================


def try_parse(text: str, system: NumberSystem) -> CodecResult:
    """parse() с результатом вместо исключения."""
    return _capture(parse, text, system)


def try_format(value: int, system: NumberSystem) -> CodecResult:
    """format_number() с результатом вместо исключения."""
    return _capture(format_number, value, system)


def try_convert(
    text: str, source: NumberSystem, destination: NumberSystem
) -> CodecResult:
    """convert() с результатом вместо исключения."""
    return _capture(convert, text, source, destination)
