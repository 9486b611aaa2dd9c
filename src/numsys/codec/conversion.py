"""Conversion — перевод текста числа из одной системы счисления в другую."""

import logging

from numsys.codec.formatter import format_number
from numsys.codec.parser import parse
from numsys.core.domain.number_system import NumberSystem

_logger = logging.getLogger(__name__)


def convert(text: str, source: NumberSystem, destination: NumberSystem) -> str:
    """
    Перевод: format_number(parse(text, source), destination).

    Первая ошибка (разбора или записи) пробрасывается без изменений.

    Examples:
        >>> convert("FF", NumberSystem(base=16), NumberSystem(base=2))
        '11111111'
    """
    value = parse(text, source)
    _logger.debug("convert %r: parsed %d", text, value)
    return format_number(value, destination)
