from .requests import AmountUpdateRequest, CurrencySelectionRequest, LoggingToggleRequest
from .responses import (
	ConverterStateResponse,
	CurrencyResponse,
	HistoryEntryResponse,
	HistoryResponse,
	LoggingStatusResponse,
	SupportedCurrenciesResponse,
)

__all__ = [
	'AmountUpdateRequest',
	'ConverterStateResponse',
	'CurrencyResponse',
	'CurrencySelectionRequest',
	'HistoryEntryResponse',
	'HistoryResponse',
	'LoggingStatusResponse',
	'LoggingToggleRequest',
	'SupportedCurrenciesResponse',
]
