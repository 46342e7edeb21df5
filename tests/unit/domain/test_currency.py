# nosec B101


import pytest

from domain.exceptions.currency import (
    DecodingError,
    InvalidAmountError,
    InvalidURLError,
    NetworkError,
    RequestCancelledError,
    UnsupportedCurrencyError,
)
from domain.models.currency import Currency


def test_available_currencies_in_declaration_order():
    codes = [c.code for c in Currency.available_currencies()]

    assert codes == ['EUR', 'USD', 'GBP', 'JPY', 'CAD', 'AUD', 'CHF', 'CNY']


@pytest.mark.parametrize('currency,symbol,name', [
    (Currency.EUR, '€', 'Euro'),
    (Currency.USD, '$', 'US Dollar'),
    (Currency.CAD, 'C$', 'Canadian Dollar'),
    (Currency.CHF, 'Fr', 'Swiss Franc'),
    (Currency.CNY, '¥', 'Chinese Yuan'),
])
def test_symbol_and_display_name(currency, symbol, name):
    assert currency.symbol == symbol
    assert currency.display_name == name


def test_from_code_is_case_insensitive():
    assert Currency.from_code(' gbp ') is Currency.GBP


def test_from_code_unknown_raises():
    with pytest.raises(UnsupportedCurrencyError) as exc_info:
        Currency.from_code('XYZ')

    assert 'XYZ' in str(exc_info.value)


def test_currency_equality_by_code():
    assert Currency('USD') == Currency.USD
    assert str(Currency.USD) == 'USD'


def test_network_error_messages():
    assert NetworkError(status_code=503).user_message == 'Network error: HTTP 503'
    assert NetworkError(underlying=TimeoutError()).user_message == 'Network error: TimeoutError'
    assert NetworkError().user_message == 'Network error'


def test_decoding_error_keeps_detail():
    error = DecodingError('missing field amount')

    assert error.detail == 'missing field amount'
    assert 'missing field amount' in error.user_message


def test_invalid_url_user_message_hides_url():
    error = InvalidURLError('http://bad host/')

    assert error.url == 'http://bad host/'
    assert error.user_message == 'Invalid request URL'


def test_cancelled_has_no_user_message():
    assert RequestCancelledError().user_message == ''


def test_invalid_amount_message():
    error = InvalidAmountError('abc')

    assert str(error) == 'Please enter a valid number'
    assert error.raw_value == 'abc'
