from .exchange_rate_client import ExchangeRateClient, ExchangeRateResponse

__all__ = ['ExchangeRateClient', 'ExchangeRateResponse']
