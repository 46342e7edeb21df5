import asyncio
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect

from api.dependencies import get_controller
from api.schemas import ConverterStateResponse
from application.services import ConversionController

logger = logging.getLogger(__name__)

router = APIRouter(prefix='/api', tags=['websockets'])


@router.websocket('/ws/converter')
async def converter_updates(
	websocket: WebSocket,
	controller: Annotated[ConversionController, Depends(get_controller)],
):
	"""
	Stream converter state to a UI client.

	The current state is sent on connect and again after every published change.
	Changes that land while a send is in progress are coalesced into one message.
	"""
	await websocket.accept()
	changed = asyncio.Event()
	unsubscribe = controller.subscribe(lambda field, value: changed.set())

	async def send_state() -> None:
		state = ConverterStateResponse.from_state(controller.snapshot())
		await websocket.send_json(state.model_dump(mode='json'))

	async def forward_changes() -> None:
		while True:
			await changed.wait()
			changed.clear()
			await send_state()

	await send_state()
	logger.info('Converter client connected')

	forwarder = asyncio.create_task(forward_changes())
	try:
		while True:
			# Client messages are ignored; reading detects the disconnect.
			await websocket.receive_text()
	except WebSocketDisconnect:
		logger.info('Converter client disconnected')
	finally:
		forwarder.cancel()
		await asyncio.gather(forwarder, return_exceptions=True)
		unsubscribe()
