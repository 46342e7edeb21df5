from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_controller
from api.main import app
from application.services import ConversionController
from domain.models.currency import ConversionHistoryEntry, ConversionState, Currency


@pytest.fixture
def history_entry():
    return ConversionHistoryEntry(
        from_amount=Decimal('100'),
        from_currency=Currency.EUR,
        to_amount=Decimal('108.5000'),
        to_currency=Currency.USD,
        rate=Decimal('1.0850'),
    )


@pytest.fixture
def converter_state(history_entry):
    return ConversionState(
        from_currency=Currency.EUR,
        to_currency=Currency.USD,
        input_amount='100',
        converted_amount='108.50',
        exchange_rate='1.0850',
        error_message=None,
        is_loading=False,
        conversion_history=(history_entry,),
    )


@pytest.fixture
def mock_controller(converter_state, history_entry):
    controller = MagicMock(spec=ConversionController)
    controller.snapshot.return_value = converter_state
    controller.conversion_history = (history_entry,)
    return controller


@pytest.fixture
def client(mock_controller):
    app.dependency_overrides[get_controller] = lambda: mock_controller
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()
