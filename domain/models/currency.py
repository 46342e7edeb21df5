from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

from domain.exceptions.currency import UnsupportedCurrencyError


class Currency(str, Enum):
	EUR = 'EUR'
	USD = 'USD'
	GBP = 'GBP'
	JPY = 'JPY'
	CAD = 'CAD'
	AUD = 'AUD'
	CHF = 'CHF'
	CNY = 'CNY'

	@property
	def code(self) -> str:
		return self.value

	@property
	def symbol(self) -> str:
		return _SYMBOLS[self]

	@property
	def display_name(self) -> str:
		return _NAMES[self]

	@classmethod
	def from_code(cls, code: str) -> 'Currency':
		try:
			return cls(code.strip().upper())
		except ValueError as e:
			raise UnsupportedCurrencyError(f'Currency {code} is not supported') from e

	@classmethod
	def available_currencies(cls) -> list['Currency']:
		return list(cls)

	def __str__(self) -> str:
		return self.value


_SYMBOLS = {
	Currency.EUR: '€',
	Currency.USD: '$',
	Currency.GBP: '£',
	Currency.JPY: '¥',
	Currency.CAD: 'C$',
	Currency.AUD: 'A$',
	Currency.CHF: 'Fr',
	Currency.CNY: '¥',
}

_NAMES = {
	Currency.EUR: 'Euro',
	Currency.USD: 'US Dollar',
	Currency.GBP: 'British Pound',
	Currency.JPY: 'Japanese Yen',
	Currency.CAD: 'Canadian Dollar',
	Currency.AUD: 'Australian Dollar',
	Currency.CHF: 'Swiss Franc',
	Currency.CNY: 'Chinese Yuan',
}


@dataclass(frozen=True)
class ConversionHistoryEntry:
	from_amount: Decimal
	from_currency: Currency
	to_amount: Decimal
	to_currency: Currency
	rate: Decimal


@dataclass(frozen=True)
class ConversionState:
	from_currency: Currency
	to_currency: Currency
	input_amount: str
	converted_amount: str
	exchange_rate: str
	error_message: str | None
	is_loading: bool
	conversion_history: tuple[ConversionHistoryEntry, ...] = field(default_factory=tuple)
