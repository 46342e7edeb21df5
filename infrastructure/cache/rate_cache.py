import time
from collections.abc import Callable
from dataclasses import dataclass
from datetime import timedelta
from decimal import Decimal

from domain.models.currency import Currency

RateKey = tuple[Currency, Currency, Decimal]


@dataclass(frozen=True)
class CacheEntry:
	rate: Decimal
	fetched_at: float


class RateCache:
	"""In-process rate memo keyed by (from, to, amount).

	Staleness is checked lazily on read and stale entries stay in place until
	overwritten or cleared. The key space is unbounded; in practice it holds one
	pair at a time.
	"""

	def __init__(
		self,
		rate_ttl: timedelta = timedelta(seconds=30),
		clock: Callable[[], float] = time.monotonic,
	):
		self.rate_ttl = rate_ttl
		self._clock = clock
		self._entries: dict[RateKey, CacheEntry] = {}

	def _make_rate_key(self, from_currency: Currency, to_currency: Currency, amount: Decimal) -> RateKey:
		return (from_currency, to_currency, amount)

	def get(self, from_currency: Currency, to_currency: Currency, amount: Decimal) -> Decimal | None:
		entry = self._entries.get(self._make_rate_key(from_currency, to_currency, amount))
		if entry is None:
			return None

		if self._clock() - entry.fetched_at >= self.rate_ttl.total_seconds():
			return None

		return entry.rate

	def put(self, from_currency: Currency, to_currency: Currency, amount: Decimal, rate: Decimal) -> None:
		key = self._make_rate_key(from_currency, to_currency, amount)
		self._entries[key] = CacheEntry(rate=rate, fetched_at=self._clock())

	def clear(self) -> None:
		self._entries.clear()

	def __len__(self) -> int:
		return len(self._entries)
