import asyncio
import logging
from collections.abc import Callable, Coroutine, Iterable
from decimal import Decimal
from enum import Enum
from typing import Any

from application.services.amounts import (
	IDENTITY_RATE,
	ZERO_AMOUNT,
	format_amount,
	format_rate,
	parse_amount,
	parse_rate,
)
from application.services.history import ConversionHistory
from application.services.state_store import StateObserver, StateStore
from domain.exceptions.currency import ExchangeRateError, InvalidAmountError, RequestCancelledError
from domain.models.currency import ConversionHistoryEntry, ConversionState, Currency
from infrastructure.cache.rate_cache import RateCache
from infrastructure.providers.exchange_rate_client import ExchangeRateClient

logger = logging.getLogger(__name__)

UNIT_AMOUNT = Decimal('1.0')
MISSING_RATE_MESSAGE = 'Unable to get a valid exchange rate'


class RateLoadOutcome(Enum):
	READY = 'ready'
	FAILED = 'failed'
	SUPERSEDED = 'superseded'


class ConversionController:
	"""
	Single owner of the converter state.

	Input changes are debounced, currency changes refetch the rate right away,
	and a background loop forces a fresh rate every `refresh_interval` seconds.
	All public methods must be called from the event loop the controller runs on.
	"""

	def __init__(
		self,
		client: ExchangeRateClient,
		cache: RateCache | None = None,
		*,
		from_currency: Currency = Currency.EUR,
		to_currency: Currency = Currency.USD,
		input_amount: str = '1.0',
		debounce_interval: float = 0.5,
		refresh_interval: float = 10.0,
		history_limit: int = 5,
	):
		self.client = client
		self.cache = cache if cache is not None else RateCache()
		self.debounce_interval = debounce_interval
		self.refresh_interval = refresh_interval
		self.history = ConversionHistory(limit=history_limit)

		self._state = StateStore(
			from_currency=from_currency,
			to_currency=to_currency,
			input_amount=input_amount,
			converted_amount='',
			exchange_rate='',
			error_message=None,
			is_loading=False,
			conversion_history=(),
		)
		self._rate_pair: tuple[Currency, Currency] | None = None
		self._last_processed_input = ''
		self._load_generation = 0

		self._debounce_task: asyncio.Task | None = None
		self._refresh_task: asyncio.Task | None = None
		self._tasks: set[asyncio.Task] = set()
		self._started = False

	# Published fields

	@property
	def from_currency(self) -> Currency:
		return self._state['from_currency']

	@property
	def to_currency(self) -> Currency:
		return self._state['to_currency']

	@property
	def input_amount(self) -> str:
		return self._state['input_amount']

	@property
	def converted_amount(self) -> str:
		return self._state['converted_amount']

	@property
	def exchange_rate(self) -> str:
		return self._state['exchange_rate']

	@property
	def error_message(self) -> str | None:
		return self._state['error_message']

	@property
	def is_loading(self) -> bool:
		return self._state['is_loading']

	@property
	def conversion_history(self) -> tuple[ConversionHistoryEntry, ...]:
		return self._state['conversion_history']

	@property
	def available_currencies(self) -> list[Currency]:
		return Currency.available_currencies()

	def subscribe(self, observer: StateObserver, fields: Iterable[str] | None = None) -> Callable[[], None]:
		return self._state.subscribe(observer, fields)

	def snapshot(self) -> ConversionState:
		return ConversionState(**self._state.values())

	# Lifecycle

	def start(self) -> None:
		"""Fetch the initial rate and start the periodic refresh."""
		if self._started:
			return
		self._started = True

		logger.info(
			f'Starting converter {self.from_currency}->{self.to_currency}, '
			f'refreshing every {self.refresh_interval}s'
		)
		self._spawn(self.fetch_exchange_rate())
		self._refresh_task = asyncio.create_task(self._refresh_loop())

	async def close(self) -> None:
		tasks = [task for task in (self._debounce_task, self._refresh_task, *self._tasks) if task is not None]
		for task in tasks:
			task.cancel()
		await asyncio.gather(*tasks, return_exceptions=True)

		self._debounce_task = None
		self._refresh_task = None
		self._started = False

		await self.client.close()
		logger.info('Converter stopped')

	async def _refresh_loop(self) -> None:
		while True:
			await asyncio.sleep(self.refresh_interval)
			logger.debug('Periodic rate refresh')
			self._spawn(self.fetch_exchange_rate(force_refresh=True))

	def _spawn(self, coro: Coroutine[Any, Any, None]) -> asyncio.Task:
		task = asyncio.create_task(coro)
		self._tasks.add(task)
		task.add_done_callback(self._on_task_done)
		return task

	def _on_task_done(self, task: asyncio.Task) -> None:
		self._tasks.discard(task)
		if task.cancelled():
			return
		exc = task.exception()
		if exc is not None:
			logger.error(f'Converter task failed: {exc}', exc_info=exc)

	# Inputs

	def set_input_amount(self, text: str) -> None:
		self._state.set('input_amount', text)

		if self._debounce_task is not None:
			self._debounce_task.cancel()
		self._debounce_task = asyncio.create_task(self._debounced_convert(text))

	async def _debounced_convert(self, text: str) -> None:
		await asyncio.sleep(self.debounce_interval)
		self._debounce_task = None

		if text == self._last_processed_input:
			return
		self._last_processed_input = text
		self._spawn(self.convert())

	def set_from_currency(self, currency: Currency) -> None:
		if self._state.set('from_currency', currency):
			self._spawn(self.fetch_exchange_rate())

	def set_to_currency(self, currency: Currency) -> None:
		if self._state.set('to_currency', currency):
			self._spawn(self.fetch_exchange_rate())

	def swap_currencies(self) -> None:
		self._state.update(from_currency=self.to_currency, to_currency=self.from_currency)
		self._spawn(self.fetch_exchange_rate())

	def set_client_logging(self, enabled: bool) -> None:
		self.client.enable_logging(enabled)

	# Rate and conversion

	async def fetch_exchange_rate(self, force_refresh: bool = False) -> None:
		if self.from_currency == self.to_currency:
			self._supersede_pending_load()
			self._publish_rate(IDENTITY_RATE)
			await self.convert()
			return

		if await self._load_rate(force_refresh) is RateLoadOutcome.READY:
			await self.convert()

	def _supersede_pending_load(self) -> None:
		self._load_generation += 1
		self.client.cancel_ongoing_requests()
		self._state.set('is_loading', False)

	def _publish_rate(self, rate_text: str) -> None:
		self._rate_pair = (self.from_currency, self.to_currency)
		self._state.set('exchange_rate', rate_text)

	def _current_rate(self) -> Decimal | None:
		if self._rate_pair != (self.from_currency, self.to_currency):
			return None
		return parse_rate(self.exchange_rate)

	async def _load_rate(self, force_refresh: bool = False) -> RateLoadOutcome:
		from_currency, to_currency = self.from_currency, self.to_currency
		if force_refresh:
			self.cache.clear()

		self._load_generation += 1
		generation = self._load_generation
		self._state.update(is_loading=True, error_message=None)

		try:
			rate = self.cache.get(from_currency, to_currency, UNIT_AMOUNT)
			if rate is None:
				rate = await self.client.fetch_rate(UNIT_AMOUNT, from_currency, to_currency)
				self.cache.put(from_currency, to_currency, UNIT_AMOUNT, rate)
			else:
				logger.debug(f'Using cached rate for {from_currency}->{to_currency}')
		except RequestCancelledError:
			logger.debug(f'Rate request for {from_currency}->{to_currency} was superseded')
			return RateLoadOutcome.SUPERSEDED
		except ExchangeRateError as e:
			if generation != self._load_generation:
				return RateLoadOutcome.SUPERSEDED
			logger.warning(f'Failed to fetch rate for {from_currency}->{to_currency}: {e}')
			self._state.set('error_message', e.user_message)
			return RateLoadOutcome.FAILED
		finally:
			if generation == self._load_generation:
				self._state.set('is_loading', False)

		if generation != self._load_generation:
			return RateLoadOutcome.SUPERSEDED

		self._publish_rate(format_rate(rate / UNIT_AMOUNT))
		logger.info(f'Exchange rate {from_currency}->{to_currency}: {self.exchange_rate}')
		return RateLoadOutcome.READY

	async def convert(self) -> None:
		self._state.set('error_message', None)

		try:
			amount = parse_amount(self.input_amount)
		except InvalidAmountError as e:
			self._state.update(error_message=str(e), converted_amount='')
			return

		if amount == 0:
			self._state.set('converted_amount', ZERO_AMOUNT)
			return

		if self.from_currency == self.to_currency:
			self._state.set('converted_amount', format_amount(amount))
			return

		rate = self._current_rate()
		if rate is None:
			if await self._load_rate() is RateLoadOutcome.SUPERSEDED:
				return
			rate = self._current_rate()
			if rate is None:
				if self.error_message is None:
					self._state.set('error_message', MISSING_RATE_MESSAGE)
				return

		self._apply_conversion(amount, rate)

	def _apply_conversion(self, amount: Decimal, rate: Decimal) -> None:
		converted = amount * rate
		self._state.set('converted_amount', format_amount(converted))

		entry = ConversionHistoryEntry(
			from_amount=amount,
			from_currency=self.from_currency,
			to_amount=converted,
			to_currency=self.to_currency,
			rate=rate,
		)
		if self.history.record(entry):
			self._state.set('conversion_history', self.history.entries)
