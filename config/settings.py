from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from domain.models.currency import Currency


class Settings(BaseSettings):
	# Application
	APP_NAME: str = 'Currency Converter'
	DEBUG: bool = False
	HOST: str = '0.0.0.0'
	PORT: int = 8000

	# Logging
	LOG_LEVEL: str = 'INFO'
	LOG_JSON: bool = False

	# Exchange rate endpoint
	EXCHANGE_API_BASE_URL: str = 'http://api.evp.lt/currency/commercial'
	EXCHANGE_API_ENDPOINT: str = 'exchange'
	EXCHANGE_API_TIMEOUT: int = 10
	CLIENT_LOGGING_ENABLED: bool = True

	# Converter behaviour
	RATE_CACHE_TTL_SECONDS: float = 30
	INPUT_DEBOUNCE_SECONDS: float = 0.5
	RATE_REFRESH_INTERVAL_SECONDS: float = 10
	HISTORY_LIMIT: int = 5

	DEFAULT_FROM_CURRENCY: Currency = Currency.EUR
	DEFAULT_TO_CURRENCY: Currency = Currency.USD
	DEFAULT_INPUT_AMOUNT: str = '1.0'

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')


@lru_cache
def get_settings() -> Settings:
	return Settings()
