import pytest
from pydantic import ValidationError

from envelope.exceptions import InvalidInput
from envelope.models import Currency
from envelope.services.money import format_money, parse_money

USD = Currency(code="USD", precision=2)
EUR = Currency(code="EUR", precision=2)
JPY = Currency(code="JPY", precision=0)
BTC = Currency(code="BTC", precision=8)


def test_format_zero():
    assert format_money(0, USD) == "$0.00"
    assert format_money(0, JPY) == "¥0"


def test_format_negative():
    assert format_money(-5000, USD) == "-$50.00"
    assert format_money(-50, EUR) == "-€0.50"


def test_format_groups_digits():
    assert format_money(123456789, USD) == "$1,234,567.89"
    assert format_money(1234567, JPY) == "¥1,234,567"


def test_format_non_iso_currency_appends_code():
    assert format_money(150000000, BTC) == "1.50000000 BTC"
    assert format_money(-1, BTC) == "-0.00000001 BTC"


def test_parse_plain_and_symbols():
    assert parse_money("12.34", USD) == 1234
    assert parse_money("$1,234.56", USD) == 123456
    assert parse_money("-$1,234.56", USD) == -123456
    assert parse_money("  €7 ", EUR) == 700


def test_parse_pads_short_fraction():
    assert parse_money("1.5", USD) == 150
    assert parse_money("3", USD) == 300


def test_parse_truncates_long_fraction():
    assert parse_money("1.239", USD) == 123
    assert parse_money("-1.999", USD) == -199
    assert parse_money("12.9", JPY) == 12


def test_parse_bare_fraction():
    assert parse_money("-.50", USD) == -50
    assert parse_money(".05", USD) == 5


def test_parse_accounting_parentheses():
    assert parse_money("($12.34)", USD) == -1234


@pytest.mark.parametrize("text", ["", ".", "-", "$", "  ", "abc", "-$."])
def test_parse_rejects_text_without_digits(text):
    with pytest.raises(InvalidInput):
        parse_money(text, USD)


def test_invalid_input_is_a_value_error():
    with pytest.raises(ValueError, match="Invalid money input"):
        parse_money("€", EUR)


@pytest.mark.parametrize("currency", [USD, EUR, JPY, BTC, Currency(code="CHF", precision=2)])
@pytest.mark.parametrize("amount", [0, 1, -1, 99, -100, 123456, -987654321, 10**15])
def test_format_then_parse_returns_amount(amount, currency):
    assert parse_money(format_money(amount, currency), currency) == amount


@pytest.mark.parametrize("code", ["BTC2", "US D", "$", ""])
def test_currency_code_is_letters_only(code):
    with pytest.raises(ValidationError):
        Currency(code=code, precision=0)
