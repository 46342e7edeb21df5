import asyncio
import logging
from decimal import Decimal, InvalidOperation

import httpx
from pydantic import BaseModel

from domain.exceptions.currency import (
	DecodingError,
	ExchangeRateError,
	InvalidURLError,
	NetworkError,
	RequestCancelledError,
)
from domain.models.currency import Currency

logger = logging.getLogger(__name__)


class ExchangeRateResponse(BaseModel):
	amount: str
	currency: Currency


class ExchangeRateClient:
	"""Fetches rates from the commercial exchange endpoint.

	At most one request is in flight per client. Starting a fetch cancels the
	previous one, and a superseded fetch always ends with RequestCancelledError,
	even when its response already arrived.
	"""

	BASE_URL = 'http://api.evp.lt/currency/commercial'
	ENDPOINT = 'exchange'

	def __init__(
		self,
		base_url: str = BASE_URL,
		endpoint: str = ENDPOINT,
		client: httpx.AsyncClient | None = None,
		timeout: int = 10,
		logging_enabled: bool = False,
	):
		self.base_url = base_url.rstrip('/')
		self.endpoint = endpoint.strip('/')
		self.logging_enabled = logging_enabled
		self._client = client or httpx.AsyncClient(timeout=timeout)
		self._current_task: asyncio.Task[Decimal] | None = None

	@property
	def has_pending_request(self) -> bool:
		return self._current_task is not None and not self._current_task.done()

	def enable_logging(self, enabled: bool) -> None:
		self.logging_enabled = enabled

	def _log(self, message: str) -> None:
		if self.logging_enabled:
			logger.info(message)

	def cancel_ongoing_requests(self) -> None:
		task, self._current_task = self._current_task, None
		if task is not None and not task.done():
			task.cancel()
			self._log('Cancelled ongoing exchange rate request')

	def _build_request_url(self, amount: Decimal, from_currency: Currency, to_currency: Currency) -> httpx.URL:
		raw_url = f'{self.base_url}/{self.endpoint}/{amount}-{from_currency.code}/{to_currency.code}/latest'
		try:
			url = httpx.URL(raw_url)
		except httpx.InvalidURL as e:
			raise InvalidURLError(raw_url) from e

		if url.scheme not in ('http', 'https') or not url.host:
			raise InvalidURLError(raw_url)
		return url

	async def _request(self, url: httpx.URL) -> Decimal:
		try:
			response = await self._client.get(url)
			self._log(f'HTTP response: {response.status_code}')
			response.raise_for_status()
		except httpx.HTTPStatusError as e:
			raise NetworkError(status_code=e.response.status_code, underlying=e) from e
		except httpx.RequestError as e:
			raise NetworkError(underlying=e) from e

		self._log(f'Raw API response: {response.text}')

		try:
			payload = ExchangeRateResponse.model_validate(response.json())
		except ValueError as e:
			raise DecodingError(str(e)) from e

		return self._parse_amount(payload.amount)

	def _parse_amount(self, raw_amount: str) -> Decimal:
		try:
			amount = Decimal(raw_amount)
		except InvalidOperation as e:
			raise DecodingError(f"Failed to convert amount '{raw_amount}' to a number") from e

		if not amount.is_finite():
			raise DecodingError(f"Failed to convert amount '{raw_amount}' to a number")
		return amount

	async def fetch_rate(self, amount: Decimal, from_currency: Currency, to_currency: Currency) -> Decimal:
		self.cancel_ongoing_requests()

		url = self._build_request_url(amount, from_currency, to_currency)
		self._log(f'Fetching exchange rate from: {url}')

		task = asyncio.create_task(self._request(url))
		self._current_task = task

		try:
			rate = await task
		except asyncio.CancelledError:
			if self._current_task is task:
				# The caller was cancelled, not superseded.
				self._current_task = None
				raise
			self._log('Request was cancelled')
			raise RequestCancelledError() from None
		except ExchangeRateError as e:
			if self._current_task is not task:
				raise RequestCancelledError() from e
			self._current_task = None
			self._log(f'Exchange rate request failed: {e}')
			raise

		if self._current_task is not task:
			self._log('Discarding result of a superseded request')
			raise RequestCancelledError()

		self._current_task = None
		self._log(f'Exchange rate: {rate} {to_currency.code}')
		return rate

	async def close(self) -> None:
		self.cancel_ongoing_requests()
		await self._client.aclose()
