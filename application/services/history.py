from collections import deque
from collections.abc import Iterator
from decimal import Decimal

from domain.models.currency import ConversionHistoryEntry

MIN_AMOUNT_DELTA = Decimal('0.001')


class ConversionHistory:
	"""Newest-first list of completed conversions, capped at `limit` entries."""

	def __init__(self, limit: int = 5):
		if limit < 1:
			raise ValueError('History limit must be at least 1')
		self.limit = limit
		self._entries: deque[ConversionHistoryEntry] = deque(maxlen=limit)

	@property
	def entries(self) -> tuple[ConversionHistoryEntry, ...]:
		return tuple(self._entries)

	def _is_repeat(self, latest: ConversionHistoryEntry, entry: ConversionHistoryEntry) -> bool:
		return (
			latest.from_currency == entry.from_currency
			and latest.to_currency == entry.to_currency
			and abs(latest.from_amount - entry.from_amount) < MIN_AMOUNT_DELTA
		)

	def record(self, entry: ConversionHistoryEntry) -> bool:
		"""Add `entry` unless it repeats the most recent one. Returns True if added."""
		if self._entries and self._is_repeat(self._entries[0], entry):
			return False

		self._entries.appendleft(entry)
		return True

	def __len__(self) -> int:
		return len(self._entries)

	def __iter__(self) -> Iterator[ConversionHistoryEntry]:
		return iter(self._entries)
