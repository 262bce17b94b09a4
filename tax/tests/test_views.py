"""Tests for the admin tax endpoints."""

import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from tax.services import TaxLedgerService

pytestmark = pytest.mark.django_db

CONFIG_URL = '/api/v1/tax/config/'
EVENTS_URL = '/api/v1/tax/revenue-events/'


@pytest.fixture
def admin_client(settings):
    settings.SMALL_SUPPLIER_THRESHOLD_CAD = '30000'
    settings.NS_TAX_RATE = '0.15'
    settings.TAX_PROVINCES = 'NS'
    admin = get_user_model().objects.create_user(
        username='admin', email='admin@example.com', password='secret', is_staff=True
    )
    client = APIClient()
    client.force_authenticate(user=admin)
    return client


def test_config_status(admin_client):
    TaxLedgerService.process_charge_succeeded('evt_1', 'ch_1', 12345, 'cad')

    response = admin_client.get(CONFIG_URL)

    assert response.status_code == 200
    assert response.data['tax_mode'] == 'off'
    assert response.data['tax_enabled'] is False
    assert response.data['revenue_cad_cents'] == 12345
    assert response.data['revenue_cad'] == 123.45
    assert response.data['threshold_cad'] == 30000.0
    assert response.data['threshold_cad_cents'] == 3_000_000
    assert response.data['tax_rate'] == '0.15'
    assert response.data['taxable_jurisdictions'] == ['NS']


def test_config_requires_staff():
    user = get_user_model().objects.create_user(username='driver', password='secret')
    client = APIClient()
    client.force_authenticate(user=user)
    assert client.get(CONFIG_URL).status_code == 403


def test_config_requires_authentication():
    assert APIClient().get(CONFIG_URL).status_code == 401


def test_revenue_events_filter_by_type(admin_client):
    TaxLedgerService.process_charge_succeeded('evt_c', 'ch_1', 10000, 'cad')
    TaxLedgerService.process_charge_refunded('evt_r', 'ch_1', 3000, 'cad')

    response = admin_client.get(EVENTS_URL, {'event_type': 'refund'})

    assert response.status_code == 200
    assert response.data['count'] == 1
    assert response.data['results'][0]['event_id'] == 'evt_r'
    assert response.data['results'][0]['amount_cents'] == -3000
