import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

from domain.exceptions.currency import InvalidAmountError

IDENTITY_RATE = '1.0000'
ZERO_AMOUNT = '0.00'

# Plain positional notation only. Exponents and digit separators are rejected.
AMOUNT_PATTERN = re.compile(r'[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)')


def parse_amount(raw_value: str) -> Decimal:
	"""Parse user input, accepting either '.' or ',' as the decimal separator."""
	normalized = raw_value.strip().replace(',', '.')
	if not AMOUNT_PATTERN.fullmatch(normalized):
		raise InvalidAmountError(raw_value)
	return Decimal(normalized)


def parse_rate(text: str) -> Decimal | None:
	"""Return the rate held in `text` when it is a positive number."""
	try:
		rate = Decimal(text)
	except InvalidOperation:
		return None

	if not rate.is_finite() or rate <= 0:
		return None
	return rate


def _format(value: Decimal, places: int) -> str:
	with localcontext() as ctx:
		ctx.rounding = ROUND_HALF_UP
		return f'{value:.{places}f}'


def format_amount(amount: Decimal) -> str:
	return _format(amount, 2)


def format_rate(rate: Decimal) -> str:
	return _format(rate, 4)
