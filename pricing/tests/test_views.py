"""Tests for the quote and tax endpoints."""

import pytest
from rest_framework.test import APIClient

pytestmark = pytest.mark.django_db

QUOTE_URL = '/api/v1/pricing/quote/'
TAX_URL = '/api/v1/pricing/tax/'


@pytest.fixture
def client(settings):
    settings.NS_TAX_RATE = '0.15'
    settings.TAX_PROVINCES = 'NS'
    return APIClient()


def quote_body(**overrides):
    body = {
        'hourly_rate': '10.00',
        'service_fee_percentage': '10',
        'province': 'NS',
        'start_time': '2025-01-01T10:00:00Z',
        'end_time': '2025-01-01T12:00:00Z',
    }
    body.update(overrides)
    return body


def test_quote_returns_breakdown(client):
    response = client.post(QUOTE_URL, quote_body(), format='json')

    assert response.status_code == 200
    assert response.data['base_amount'] == '20.00'
    assert response.data['booker_service_fee'] == '1.00'
    assert response.data['host_service_fee'] == '1.00'
    assert response.data['tax_amount'] == '3.00'
    assert response.data['total_amount'] == '24.00'
    assert response.data['total_hours'] == 2.0


def test_quote_renders_amounts_past_ten_integer_digits(client):
    body = quote_body(
        daily_rate='99999999.99',
        start_time='2025-01-01T00:00:00Z',
        end_time='2030-01-01T00:00:00Z',
    )
    response = client.post(QUOTE_URL, body, format='json')

    assert response.status_code == 200
    assert response.data['base_amount'] == '182599999981.74'
    assert response.data['booker_service_fee'] == '9130000000.09'
    assert response.data['tax_amount'] == '27389999997.26'
    assert response.data['total_amount'] == '219119999979.09'


def test_quote_outside_taxable_province(client):
    response = client.post(QUOTE_URL, quote_body(province='on'), format='json')

    assert response.status_code == 200
    assert response.data['tax_amount'] == '0.00'
    assert response.data['total_amount'] == '21.00'


def test_quote_uses_configured_provinces(client, settings):
    settings.TAX_PROVINCES = 'ON,BC'
    response = client.post(QUOTE_URL, quote_body(province='on'), format='json')
    assert response.data['tax_amount'] == '3.00'


def test_quote_without_rates_is_rejected(client):
    body = quote_body()
    del body['hourly_rate']
    response = client.post(QUOTE_URL, body, format='json')

    assert response.status_code == 400
    assert response.data['detail'].code == 'pricing_not_configured'


def test_quote_with_reversed_window_is_rejected(client):
    body = quote_body(start_time='2025-01-01T12:00:00Z', end_time='2025-01-01T10:00:00Z')
    response = client.post(QUOTE_URL, body, format='json')

    assert response.status_code == 400
    assert response.data['detail'].code == 'invalid_booking_window'


def test_quote_validates_input(client):
    response = client.post(QUOTE_URL, quote_body(hourly_rate='-1', end_time='soon'), format='json')

    assert response.status_code == 400
    assert 'hourly_rate' in response.data
    assert 'end_time' in response.data


def test_tax_lookup(client):
    response = client.post(TAX_URL, {'base_amount': '10.50', 'province': ' ns '}, format='json')

    assert response.status_code == 200
    assert response.data == {'tax_amount': '1.58', 'taxable': True}


def test_tax_lookup_for_untaxed_province(client):
    response = client.post(TAX_URL, {'base_amount': '100.00', 'province': 'ON'}, format='json')
    assert response.data == {'tax_amount': '0.00', 'taxable': False}


def test_tax_lookup_requires_base_amount(client):
    response = client.post(TAX_URL, {'province': 'NS'}, format='json')
    assert response.status_code == 400
    assert 'base_amount' in response.data
