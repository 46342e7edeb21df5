from unittest.mock import MagicMock


def notify_on_subscribe(mock_controller):
    unsubscribe = MagicMock()

    def subscribe(observer, fields=None):
        observer('converted_amount', '108.50')
        return unsubscribe

    mock_controller.subscribe.side_effect = subscribe
    return unsubscribe


def test_state_sent_on_connect(client, mock_controller):
    with client.websocket_connect('/api/ws/converter') as websocket:
        data = websocket.receive_json()

    assert data['from_currency'] == 'EUR'
    assert data['converted_amount'] == '108.50'
    mock_controller.subscribe.assert_called_once()


def test_state_change_is_forwarded(client, mock_controller):
    unsubscribe = notify_on_subscribe(mock_controller)

    with client.websocket_connect('/api/ws/converter') as websocket:
        websocket.receive_json()
        update = websocket.receive_json()

    assert update['converted_amount'] == '108.50'
    assert mock_controller.snapshot.call_count == 2
    unsubscribe.assert_called_once_with()


def test_failed_forward_still_unsubscribes(client, mock_controller, converter_state):
    unsubscribe = notify_on_subscribe(mock_controller)
    mock_controller.snapshot.side_effect = [converter_state, RuntimeError('state unavailable')]

    with client.websocket_connect('/api/ws/converter') as websocket:
        data = websocket.receive_json()

    assert data['from_currency'] == 'EUR'
    unsubscribe.assert_called_once_with()
