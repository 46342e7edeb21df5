from typing import Annotated

from fastapi import APIRouter, Path, status

from api.schemas import CurrencyResponse, SupportedCurrenciesResponse
from domain.models.currency import Currency

router = APIRouter(prefix='/api', tags=['currency'])


@router.get(
	'/currencies',
	response_model=SupportedCurrenciesResponse,
	status_code=status.HTTP_200_OK,
	summary='List supported currencies',
)
async def get_supported_currencies() -> SupportedCurrenciesResponse:
	return SupportedCurrenciesResponse(
		currencies=[CurrencyResponse.from_currency(c) for c in Currency.available_currencies()]
	)


@router.get(
	'/currencies/{code}',
	response_model=CurrencyResponse,
	status_code=status.HTTP_200_OK,
	summary='Get a supported currency',
)
async def get_currency(
	code: Annotated[
		str,
		Path(
			min_length=3,
			max_length=3,
		),
	],
) -> CurrencyResponse:
	return CurrencyResponse.from_currency(Currency.from_code(code))
