# nosec B101


from decimal import Decimal

import pytest

from application.services.history import ConversionHistory
from domain.models.currency import ConversionHistoryEntry, Currency


def entry(amount, from_currency=Currency.EUR, to_currency=Currency.USD, rate='1.0850'):
    amount = Decimal(str(amount))
    return ConversionHistoryEntry(
        from_amount=amount,
        from_currency=from_currency,
        to_amount=amount * Decimal(rate),
        to_currency=to_currency,
        rate=Decimal(rate),
    )


def test_newest_first():
    history = ConversionHistory()

    assert history.record(entry(100))
    assert history.record(entry(200))

    assert [e.from_amount for e in history.entries] == [Decimal('200'), Decimal('100')]


def test_repeat_of_latest_is_skipped():
    history = ConversionHistory()
    history.record(entry(100))

    assert history.record(entry('100.0005')) is False
    assert len(history) == 1


def test_delta_of_exactly_threshold_is_recorded():
    history = ConversionHistory()
    history.record(entry('100'))

    assert history.record(entry('100.001')) is True
    assert len(history) == 2


def test_same_amount_different_pair_is_recorded():
    history = ConversionHistory()
    history.record(entry(100))

    assert history.record(entry(100, to_currency=Currency.GBP))
    assert history.record(entry(100, from_currency=Currency.USD, to_currency=Currency.GBP))
    assert len(history) == 3


def test_only_latest_entry_is_compared():
    history = ConversionHistory()
    history.record(entry(100))
    history.record(entry(200))

    assert history.record(entry(100))
    assert len(history) == 3


def test_sixth_entry_evicts_oldest():
    history = ConversionHistory()
    for amount in (1, 2, 3, 4, 5):
        history.record(entry(amount))

    history.record(entry(6))

    assert [e.from_amount for e in history] == [Decimal(n) for n in (6, 5, 4, 3, 2)]


def test_invalid_limit():
    with pytest.raises(ValueError):
        ConversionHistory(limit=0)
