"""
Tests for special event finance routes (class-based).
"""

from unittest.mock import patch
import pytest

SERVICE = 'src.app.api.v1.routes.special_events.event_finance_routes.EventFinanceService'


class TestVarianceRoute:
    def test_variance_success(self, client):
        """POST /events/variance returns amount and percentage."""
        resp = client.post('/api/v1/events/variance', json={'actual': 120, 'forecast': 100})

        assert resp.status_code == 200
        data = resp.get_json()
        assert data['success'] is True
        assert data['message'] == 'Variance calculated successfully'
        assert data['data']['amount'] == 20
        assert data['data']['percentage'] == 20.0

    def test_variance_zero_forecast(self, client):
        resp = client.post('/api/v1/events/variance', json={'actual': 50, 'forecast': 0})
        assert resp.get_json()['data']['percentage'] == 0

    def test_variance_validation_error(self, client):
        """Missing forecast is a 400 with marshmallow messages."""
        resp = client.post('/api/v1/events/variance', json={'actual': 'abc'})

        assert resp.status_code == 400
        data = resp.get_json()
        assert data['success'] is False
        assert data['message'] == 'Validation failed'
        assert 'forecast' in data['data']['validation_errors']
        assert 'actual' in data['data']['validation_errors']

    def test_variance_validation_error_italian(self, client):
        resp = client.post('/api/v1/events/variance', json={}, headers={'Accept-Language': 'it'})
        assert resp.get_json()['message'] == 'Validazione non riuscita'

    def test_variance_non_json_body(self, client):
        """A body that is not JSON is a validation error, not a crash."""
        resp = client.post('/api/v1/events/variance', data='not json', content_type='text/plain')
        assert resp.status_code == 400


class TestCogsRoute:
    def test_cogs_percentage(self, client):
        resp = client.post('/api/v1/events/cogs', json={'revenue': 105, 'use_forecast_pct': True, 'forecast_pct': 30})

        assert resp.status_code == 200
        assert resp.get_json()['data']['cogs'] == 32

    def test_cogs_merch_default(self, client):
        resp = client.post('/api/v1/events/cogs', json={'revenue': 3000, 'use_forecast_pct': True, 'product': 'merch'})
        assert resp.get_json()['data']['cogs'] == 1500

    def test_cogs_invalid_product(self, client):
        resp = client.post('/api/v1/events/cogs', json={'revenue': 3000, 'product': 'tickets'})
        assert resp.status_code == 400


class TestSummaryRoute:
    def test_summary_with_actual(self, client, forecast_record, actual_record):
        resp = client.post('/api/v1/events/summary', json={'forecast': forecast_record, 'actual': actual_record})

        assert resp.status_code == 200
        data = resp.get_json()['data']
        assert data['has_actuals'] is True
        assert data['forecast']['net_profit'] == 16100
        assert data['actual']['net_profit'] == 18400
        assert data['roi']['roi_percent'] == 181.48

    def test_summary_with_actuals_list(self, client, forecast_record, actual_record):
        resp = client.post('/api/v1/events/summary', json={'forecast': forecast_record, 'actuals': [actual_record]})
        assert resp.get_json()['data']['actual']['total_revenue'] == 49000

    def test_summary_forecast_only(self, client, forecast_record):
        resp = client.post('/api/v1/events/summary', json={'forecast': forecast_record})
        data = resp.get_json()['data']
        assert data['has_actuals'] is False
        assert 'actual' not in data

    def test_summary_missing_forecast(self, client):
        resp = client.post('/api/v1/events/summary', json={'actual': {}})
        assert resp.status_code == 400
        assert 'forecast' in resp.get_json()['data']['validation_errors']

    def test_summary_service_exception(self, client, forecast_record):
        """Unexpected errors become a 500 envelope."""
        with patch(SERVICE) as mock_service:
            mock_service.summarize_event.side_effect = Exception('boom')
            resp = client.post('/api/v1/events/summary', json={'forecast': forecast_record})

        assert resp.status_code == 500
        data = resp.get_json()
        assert data['success'] is False
        assert data['message'] == 'Internal server error'
        assert data['data']['error_details'] == 'boom'


class TestRoiRoute:
    def test_roi(self, client, forecast_record, actual_record):
        resp = client.post('/api/v1/events/roi', json={'forecast': forecast_record, 'actual': actual_record})

        assert resp.status_code == 200
        data = resp.get_json()
        assert data['message'] == 'Event ROI calculated successfully'
        assert data['data']['revenue_variance'] == 3000
        assert data['data']['cost_variance'] == 1000

    def test_roi_without_actuals(self, client, forecast_record):
        resp = client.post('/api/v1/events/roi', json={'forecast': forecast_record})
        assert resp.get_json()['data']['roi_percent'] == 0


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
