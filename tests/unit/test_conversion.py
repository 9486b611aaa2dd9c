"""
Тесты для Conversion и result wrappers

Проверяет:
1. Перевод между системами счисления
2. Round trip parse(format(v)) == v для всех схем и оснований 2-36
3. Проброс первой ошибки без изменений
4. try_parse / try_format / try_convert: явный результат вместо исключения
5. Публичный API пакета
"""

import pytest

import numsys
from numsys import (
    INT64_MAX,
    CodecResult,
    ErrorKind,
    InvalidArgumentError,
    NumberOverflowError,
    NumberSystem,
    SignScheme,
    convert,
    format_number,
    parse,
    try_convert,
    try_format,
    try_parse,
)
from numsys.core.domain import alphabet

# Представительный набор значений, включая границы signed 64-bit
ROUND_TRIP_VALUES = [
    0,
    1,
    -1,
    2,
    -2,
    35,
    -36,
    1000,
    -123456789,
    2**32,
    -(2**32) - 1,
    2**62,
    -(2**62),
    INT64_MAX - 1,
    -(INT64_MAX - 1),
    INT64_MAX,
    -INT64_MAX,
]


# =============================================================================
# CONVERSION TESTS
# =============================================================================


class TestConvert:
    """Тесты convert"""

    def test_hex_to_binary(self) -> None:
        assert convert("FF", NumberSystem(base=16), NumberSystem(base=2)) == "11111111"

    def test_twos_complement_to_decimal(self) -> None:
        source = NumberSystem(base=2, scheme=SignScheme.TWOS_COMPLEMENT)
        assert convert("1111", source, NumberSystem(base=10)) == "-1"

    def test_decimal_to_sign_digit_hex(self) -> None:
        destination = NumberSystem(base=16, scheme=SignScheme.SIGN_DIGIT)
        assert convert("-255", NumberSystem(base=10), destination) == "FFF"

    def test_unary_roundabout(self) -> None:
        assert convert("1_0_1", NumberSystem(base=2), NumberSystem(base=1)) == "00000"
        assert convert("00000", NumberSystem(base=1), NumberSystem(base=2)) == "101"

    def test_parse_error_propagates(self) -> None:
        with pytest.raises(InvalidArgumentError, match="invalid character"):
            convert("FG", NumberSystem(base=16), NumberSystem(base=2))

    def test_format_error_propagates(self) -> None:
        """Переполнение unary счётчика при записи"""
        with pytest.raises(NumberOverflowError):
            convert("100000000", NumberSystem(base=16), NumberSystem(base=1))

    @pytest.mark.parametrize(
        "source, destination",
        [
            pytest.param(NumberSystem.model_construct(base=0, scheme=SignScheme.SIGNED_MARKER), NumberSystem(base=10), id="bad-source"),
            pytest.param(NumberSystem(base=10), NumberSystem.model_construct(base=37, scheme=SignScheme.SIGNED_MARKER), id="bad-destination"),
            pytest.param(NumberSystem(base=10), NumberSystem.model_construct(base=10, scheme="BOGUS"), id="bogus-scheme"),
        ],
    )
    def test_invalid_system(self, source, destination) -> None:
        with pytest.raises(InvalidArgumentError):
            convert("1", source, destination)


class TestRoundTrip:
    """parse(format(v, sys), sys) == v"""

    @pytest.mark.parametrize("scheme", list(SignScheme))
    @pytest.mark.parametrize("value", ROUND_TRIP_VALUES)
    def test_all_bases(self, scheme: SignScheme, value: int) -> None:
        for base in range(2, 37):
            system = NumberSystem(base=base, scheme=scheme)
            text = format_number(value, system)
            assert parse(text, system) == value, (base, text)

    def test_lowercase_and_separators_survive(self) -> None:
        """Нижний регистр и разделители не меняют значение"""
        system = NumberSystem(base=36, scheme=SignScheme.TWOS_COMPLEMENT)
        text = format_number(-INT64_MAX, system)
        noisy = "_".join(text.lower()) + "\n"
        assert parse(noisy, system) == -INT64_MAX

    def test_unary_non_negative(self) -> None:
        for scheme in SignScheme:
            system = NumberSystem(base=1, scheme=scheme)
            for value in (0, 1, 17):
                assert parse(format_number(value, system), system) == value


# =============================================================================
# RESULT WRAPPERS
# =============================================================================


class TestResultWrappers:
    """try_* возвращают CodecResult вместо исключения"""

    def test_success(self) -> None:
        result = try_parse("ff", NumberSystem(base=16))
        assert result == CodecResult(value=255, error=None)
        assert result.ok
        assert result.message == ""

    def test_format_success(self) -> None:
        result = try_format(-5, NumberSystem(base=10, scheme=SignScheme.SIGN_DIGIT))
        assert result.ok
        assert result.value == "95"

    def test_invalid_argument(self) -> None:
        result = try_parse("G", NumberSystem(base=16))
        assert not result.ok
        assert result.value is None
        assert result.error is ErrorKind.INVALID_ARGUMENT
        assert "invalid character" in result.message

    def test_overflow(self) -> None:
        result = try_format(INT64_MAX + 1, NumberSystem(base=10))
        assert result.error is ErrorKind.OVERFLOW

    def test_invalid_system(self) -> None:
        result = try_convert("1", {"base": 0}, NumberSystem(base=10))
        assert result.error is ErrorKind.INVALID_ARGUMENT

    def test_convert_success(self) -> None:
        result = try_convert("FF", NumberSystem(base=16), NumberSystem(base=2))
        assert result.value == "11111111"

    def test_out_of_memory(self, monkeypatch: pytest.MonkeyPatch) -> None:
        class _Exhausted:
            def __iter__(self):
                raise MemoryError

        monkeypatch.setattr(alphabet, "SEPARATORS", _Exhausted())
        result = try_parse("1", NumberSystem(base=10))
        assert result.error is ErrorKind.OUT_OF_MEMORY

    def test_result_is_frozen(self) -> None:
        result = try_parse("1", NumberSystem(base=10))
        with pytest.raises(AttributeError):
            result.value = 2


class TestPublicApi:
    """Все имена __all__ доступны из пакета"""

    def test_exports(self) -> None:
        for name in numsys.__all__:
            assert hasattr(numsys, name), name
