"""
Codec — разбор, запись и перевод чисел между системами счисления.

Поток данных однонаправленный: text → parse → int → format_number → text.
"""

from numsys.codec.conversion import convert
from numsys.codec.formatter import digit_count, format_number
from numsys.codec.parser import locate_sign, parse
from numsys.codec.result import CodecResult, try_convert, try_format, try_parse

__all__ = [
    # Operations
    "convert",
    "digit_count",
    "format_number",
    "locate_sign",
    "parse",
    # Result wrappers
    "CodecResult",
    "try_convert",
    "try_format",
    "try_parse",
]
