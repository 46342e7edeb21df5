from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from domain.models.currency import ConversionHistoryEntry, ConversionState, Currency


class CurrencyResponse(BaseModel):
	code: str = Field(..., description='ISO currency code')
	symbol: str = Field(..., description='Display symbol')
	name: str = Field(..., description='Human readable name')

	@classmethod
	def from_currency(cls, currency: Currency) -> 'CurrencyResponse':
		return cls(code=currency.code, symbol=currency.symbol, name=currency.display_name)


class SupportedCurrenciesResponse(BaseModel):
	currencies: list[CurrencyResponse] = Field(description='Currencies available for conversion')


class HistoryEntryResponse(BaseModel):
	from_amount: Decimal
	from_currency: Currency
	to_amount: Decimal
	to_currency: Currency
	rate: Decimal

	@classmethod
	def from_entry(cls, entry: ConversionHistoryEntry) -> 'HistoryEntryResponse':
		return cls(
			from_amount=entry.from_amount,
			from_currency=entry.from_currency,
			to_amount=entry.to_amount,
			to_currency=entry.to_currency,
			rate=entry.rate,
		)


class HistoryResponse(BaseModel):
	entries: list[HistoryEntryResponse] = Field(description='Completed conversions, newest first')


class ConverterStateResponse(BaseModel):
	from_currency: Currency
	to_currency: Currency
	input_amount: str
	converted_amount: str
	exchange_rate: str
	error_message: str | None
	is_loading: bool
	conversion_history: list[HistoryEntryResponse]

	@classmethod
	def from_state(cls, state: ConversionState) -> 'ConverterStateResponse':
		return cls(
			from_currency=state.from_currency,
			to_currency=state.to_currency,
			input_amount=state.input_amount,
			converted_amount=state.converted_amount,
			exchange_rate=state.exchange_rate,
			error_message=state.error_message,
			is_loading=state.is_loading,
			conversion_history=[HistoryEntryResponse.from_entry(e) for e in state.conversion_history],
		)

	model_config = ConfigDict(
		json_schema_extra={
			'example': {
				'from_currency': 'EUR',
				'to_currency': 'USD',
				'input_amount': '100',
				'converted_amount': '108.50',
				'exchange_rate': '1.0850',
				'error_message': None,
				'is_loading': False,
				'conversion_history': [],
			}
		}
	)


class LoggingStatusResponse(BaseModel):
	enabled: bool
