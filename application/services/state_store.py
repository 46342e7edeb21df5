import logging
from collections.abc import Callable, Iterable
from typing import Any

logger = logging.getLogger(__name__)

StateObserver = Callable[[str, Any], None]


class StateStore:
	"""Named fields with change notification.

	Observers run synchronously, in subscription order, after a field changes
	value. Assigning an equal value does not notify.
	"""

	def __init__(self, **initial_values: Any):
		self._values: dict[str, Any] = dict(initial_values)
		self._observers: list[tuple[StateObserver, frozenset[str] | None]] = []

	def __getitem__(self, field: str) -> Any:
		return self._values[field]

	def values(self) -> dict[str, Any]:
		return dict(self._values)

	def set(self, field: str, value: Any) -> bool:
		return bool(self.update(**{field: value}))

	def update(self, **changes: Any) -> list[str]:
		"""Apply all changes first, then notify once per changed field."""
		unknown = set(changes) - set(self._values)
		if unknown:
			raise KeyError(f'Unknown state fields: {sorted(unknown)}')

		changed = []
		for field, value in changes.items():
			if self._values[field] != value:
				self._values[field] = value
				changed.append(field)

		for field in changed:
			self._notify(field, self._values[field])
		return changed

	def subscribe(self, observer: StateObserver, fields: Iterable[str] | None = None) -> Callable[[], None]:
		watched = frozenset(fields) if fields is not None else None
		if watched is not None and not watched <= set(self._values):
			raise KeyError(f'Unknown state fields: {sorted(watched - set(self._values))}')

		subscription = (observer, watched)
		self._observers.append(subscription)

		def unsubscribe() -> None:
			if subscription in self._observers:
				self._observers.remove(subscription)

		return unsubscribe

	def _notify(self, field: str, value: Any) -> None:
		for observer, watched in list(self._observers):
			if watched is not None and field not in watched:
				continue
			try:
				observer(field, value)
			except Exception:
				logger.exception(f'State observer failed while handling {field} change')
