from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from domain.models.currency import Currency


class AmountUpdateRequest(BaseModel):
	amount: str = Field(..., max_length=64, description='Raw amount text as typed by the user')

	model_config = ConfigDict(json_schema_extra={'example': {'amount': '100,50'}})


class CurrencySelectionRequest(BaseModel):
	from_currency: Currency | None = None
	to_currency: Currency | None = None

	@field_validator('from_currency', 'to_currency', mode='before')
	@classmethod
	def uppercase_currency(cls, v):
		if isinstance(v, str):
			return v.strip().upper()
		return v

	@model_validator(mode='after')
	def at_least_one_currency(self):
		if self.from_currency is None and self.to_currency is None:
			raise ValueError('from_currency or to_currency is required')
		return self

	model_config = ConfigDict(json_schema_extra={'example': {'from_currency': 'EUR', 'to_currency': 'USD'}})


class LoggingToggleRequest(BaseModel):
	enabled: bool
