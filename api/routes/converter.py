from typing import Annotated

from fastapi import APIRouter, Depends, status

from api.dependencies import get_controller
from api.schemas import (
	AmountUpdateRequest,
	ConverterStateResponse,
	CurrencySelectionRequest,
	HistoryEntryResponse,
	HistoryResponse,
	LoggingStatusResponse,
	LoggingToggleRequest,
)
from application.services import ConversionController

router = APIRouter(prefix='/api/converter', tags=['converter'])

Controller = Annotated[ConversionController, Depends(get_controller)]


@router.get(
	'',
	response_model=ConverterStateResponse,
	status_code=status.HTTP_200_OK,
	summary='Current converter state',
)
async def get_state(controller: Controller) -> ConverterStateResponse:
	return ConverterStateResponse.from_state(controller.snapshot())


@router.put(
	'/amount',
	response_model=ConverterStateResponse,
	status_code=status.HTTP_202_ACCEPTED,
	summary='Update the amount to convert',
)
async def update_amount(request: AmountUpdateRequest, controller: Controller) -> ConverterStateResponse:
	controller.set_input_amount(request.amount)
	return ConverterStateResponse.from_state(controller.snapshot())


@router.put(
	'/currencies',
	response_model=ConverterStateResponse,
	status_code=status.HTTP_202_ACCEPTED,
	summary='Select source and/or target currency',
)
async def select_currencies(request: CurrencySelectionRequest, controller: Controller) -> ConverterStateResponse:
	if request.from_currency is not None:
		controller.set_from_currency(request.from_currency)
	if request.to_currency is not None:
		controller.set_to_currency(request.to_currency)
	return ConverterStateResponse.from_state(controller.snapshot())


@router.post(
	'/swap',
	response_model=ConverterStateResponse,
	status_code=status.HTTP_202_ACCEPTED,
	summary='Swap source and target currency',
)
async def swap_currencies(controller: Controller) -> ConverterStateResponse:
	controller.swap_currencies()
	return ConverterStateResponse.from_state(controller.snapshot())


@router.post(
	'/convert',
	response_model=ConverterStateResponse,
	status_code=status.HTTP_200_OK,
	summary='Convert the current amount now',
)
async def convert(controller: Controller) -> ConverterStateResponse:
	await controller.convert()
	return ConverterStateResponse.from_state(controller.snapshot())


@router.post(
	'/refresh',
	response_model=ConverterStateResponse,
	status_code=status.HTTP_200_OK,
	summary='Fetch a fresh rate, bypassing the cache',
)
async def refresh_rate(controller: Controller) -> ConverterStateResponse:
	await controller.fetch_exchange_rate(force_refresh=True)
	return ConverterStateResponse.from_state(controller.snapshot())


@router.get(
	'/history',
	response_model=HistoryResponse,
	status_code=status.HTTP_200_OK,
	summary='Recent conversions, newest first',
)
async def get_history(controller: Controller) -> HistoryResponse:
	return HistoryResponse(entries=[HistoryEntryResponse.from_entry(e) for e in controller.conversion_history])


@router.put(
	'/logging',
	response_model=LoggingStatusResponse,
	status_code=status.HTTP_200_OK,
	summary='Toggle diagnostic logging of rate requests',
)
async def toggle_logging(request: LoggingToggleRequest, controller: Controller) -> LoggingStatusResponse:
	controller.set_client_logging(request.enabled)
	return LoggingStatusResponse(enabled=request.enabled)
