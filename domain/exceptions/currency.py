class CurrencyException(Exception):
	pass


class UnsupportedCurrencyError(CurrencyException):
	pass


class InvalidAmountError(CurrencyException):
	def __init__(self, raw_value: str):
		self.raw_value = raw_value
		super().__init__('Please enter a valid number')


class ExchangeRateError(CurrencyException):
	"""Base of the errors a rate fetch can end with."""

	@property
	def user_message(self) -> str:
		return str(self)


class InvalidURLError(ExchangeRateError):
	def __init__(self, url: str):
		self.url = url
		super().__init__(f'Invalid request URL: {url}')

	@property
	def user_message(self) -> str:
		return 'Invalid request URL'


class DecodingError(ExchangeRateError):
	def __init__(self, detail: str):
		self.detail = detail
		super().__init__(f'Unable to read exchange rate data: {detail}')


class NetworkError(ExchangeRateError):
	def __init__(self, status_code: int | None = None, underlying: Exception | None = None):
		self.status_code = status_code
		self.underlying = underlying
		if status_code is not None:
			message = f'Network error: HTTP {status_code}'
		elif underlying is not None:
			message = f'Network error: {underlying.__class__.__name__}'
		else:
			message = 'Network error'
		super().__init__(message)


class RequestCancelledError(ExchangeRateError):
	def __init__(self):
		super().__init__('Request was superseded by a newer one')

	@property
	def user_message(self) -> str:
		return ''
