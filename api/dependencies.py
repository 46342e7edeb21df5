import logging
from datetime import timedelta

from application.services import ConversionController
from config.settings import Settings, get_settings
from infrastructure.cache.rate_cache import RateCache
from infrastructure.providers import ExchangeRateClient

logger = logging.getLogger(__name__)


class AppDependencies:
	"""Container for application-wide singleton dependencies."""

	controller: ConversionController | None = None


deps = AppDependencies()


def build_controller(settings: Settings) -> ConversionController:
	client = ExchangeRateClient(
		base_url=settings.EXCHANGE_API_BASE_URL,
		endpoint=settings.EXCHANGE_API_ENDPOINT,
		timeout=settings.EXCHANGE_API_TIMEOUT,
		logging_enabled=settings.CLIENT_LOGGING_ENABLED,
	)
	cache = RateCache(rate_ttl=timedelta(seconds=settings.RATE_CACHE_TTL_SECONDS))

	return ConversionController(
		client,
		cache,
		from_currency=settings.DEFAULT_FROM_CURRENCY,
		to_currency=settings.DEFAULT_TO_CURRENCY,
		input_amount=settings.DEFAULT_INPUT_AMOUNT,
		debounce_interval=settings.INPUT_DEBOUNCE_SECONDS,
		refresh_interval=settings.RATE_REFRESH_INTERVAL_SECONDS,
		history_limit=settings.HISTORY_LIMIT,
	)


def init_dependencies() -> None:
	"""Build and start the converter. Called at app startup, inside the event loop."""
	logger.info('Initializing dependencies...')

	deps.controller = build_controller(get_settings())
	deps.controller.start()

	logger.info('Dependencies initialized')


async def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')

	if deps.controller:
		await deps.controller.close()
		deps.controller = None

	logger.info('Cleanup complete')


def get_controller() -> ConversionController:
	if deps.controller is None:
		raise RuntimeError('Converter is not initialized')
	return deps.controller
