def test_get_state(client):
    response = client.get('/api/converter')

    assert response.status_code == 200
    data = response.json()
    assert data['from_currency'] == 'EUR'
    assert data['to_currency'] == 'USD'
    assert data['converted_amount'] == '108.50'
    assert data['exchange_rate'] == '1.0850'
    assert data['error_message'] is None
    assert data['is_loading'] is False
    assert len(data['conversion_history']) == 1


def test_update_amount(client, mock_controller):
    response = client.put('/api/converter/amount', json={'amount': '12,5'})

    assert response.status_code == 202
    mock_controller.set_input_amount.assert_called_once_with('12,5')


def test_update_amount_requires_text(client):
    response = client.put('/api/converter/amount', json={})

    assert response.status_code == 422


def test_select_both_currencies(client, mock_controller):
    response = client.put('/api/converter/currencies', json={'from_currency': 'gbp', 'to_currency': 'JPY'})

    assert response.status_code == 202
    mock_controller.set_from_currency.assert_called_once_with('GBP')
    mock_controller.set_to_currency.assert_called_once_with('JPY')


def test_select_only_target_currency(client, mock_controller):
    response = client.put('/api/converter/currencies', json={'to_currency': 'CHF'})

    assert response.status_code == 202
    mock_controller.set_from_currency.assert_not_called()
    mock_controller.set_to_currency.assert_called_once_with('CHF')


def test_select_currencies_rejects_unknown_code(client, mock_controller):
    response = client.put('/api/converter/currencies', json={'from_currency': 'XYZ'})

    assert response.status_code == 422
    mock_controller.set_from_currency.assert_not_called()


def test_select_currencies_requires_one(client):
    response = client.put('/api/converter/currencies', json={})

    assert response.status_code == 422


def test_swap(client, mock_controller):
    response = client.post('/api/converter/swap')

    assert response.status_code == 202
    mock_controller.swap_currencies.assert_called_once_with()


def test_convert_awaits_controller(client, mock_controller):
    response = client.post('/api/converter/convert')

    assert response.status_code == 200
    mock_controller.convert.assert_awaited_once()


def test_refresh_forces_fetch(client, mock_controller):
    response = client.post('/api/converter/refresh')

    assert response.status_code == 200
    mock_controller.fetch_exchange_rate.assert_awaited_once_with(force_refresh=True)


def test_history(client):
    response = client.get('/api/converter/history')

    assert response.status_code == 200
    entries = response.json()['entries']
    assert len(entries) == 1
    assert entries[0]['from_currency'] == 'EUR'
    assert entries[0]['to_currency'] == 'USD'
    assert entries[0]['from_amount'] == '100'
    assert entries[0]['rate'] == '1.0850'


def test_toggle_logging(client, mock_controller):
    response = client.put('/api/converter/logging', json={'enabled': False})

    assert response.status_code == 200
    assert response.json() == {'enabled': False}
    mock_controller.set_client_logging.assert_called_once_with(False)
