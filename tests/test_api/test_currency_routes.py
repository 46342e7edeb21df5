def test_list_currencies(client):
    response = client.get('/api/currencies')

    assert response.status_code == 200
    currencies = response.json()['currencies']
    assert [c['code'] for c in currencies] == ['EUR', 'USD', 'GBP', 'JPY', 'CAD', 'AUD', 'CHF', 'CNY']
    assert currencies[0] == {'code': 'EUR', 'symbol': '€', 'name': 'Euro'}


def test_get_currency_case_insensitive(client):
    response = client.get('/api/currencies/aud')

    assert response.status_code == 200
    assert response.json() == {'code': 'AUD', 'symbol': 'A$', 'name': 'Australian Dollar'}


def test_get_unknown_currency_returns_404(client):
    response = client.get('/api/currencies/XYZ')

    assert response.status_code == 404
    assert 'XYZ' in response.json()['detail']
