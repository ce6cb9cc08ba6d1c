"""
Tests for risk routes (class-based).
"""

from unittest.mock import patch
import pytest

SERVICE = 'src.app.api.v1.routes.special_events.risk_routes.RiskService'


class TestRiskRoutes:
    def test_score_success(self, client, risk_payload):
        resp = client.post('/api/v1/risks/score', json=risk_payload)

        assert resp.status_code == 200
        data = resp.get_json()
        assert data['message'] == 'Risk score calculated successfully'
        assert data['data']['risk_score'] == 48
        assert data['data']['weighted_score'] == 24

    def test_score_missing_title(self, client):
        resp = client.post('/api/v1/risks/score', json={'probability': 10})

        assert resp.status_code == 400
        assert 'title' in resp.get_json()['data']['validation_errors']

    def test_score_invalid_priority(self, client, risk_payload):
        risk_payload['priority'] = 'urgent'
        resp = client.post('/api/v1/risks/score', json=risk_payload)
        assert resp.status_code == 400

    def test_summary_success(self, client, risk_payload):
        resolved = dict(risk_payload, title='Venue', priority='critical', status='resolved')
        resp = client.post('/api/v1/risks/summary', json={'risks': [risk_payload, resolved]})

        assert resp.status_code == 200
        data = resp.get_json()['data']
        assert data['total_risks'] == 2
        assert data['open_risks'] == 1
        assert data['overall_risk_level'] == 'critical'
        assert len(data['urgent_actions']) == 1

    def test_summary_requires_list(self, client):
        resp = client.post('/api/v1/risks/summary', json={})
        assert resp.status_code == 400

    def test_transition_success(self, client, risk_payload):
        resp = client.post('/api/v1/risks/transition', json={'risk': risk_payload, 'status': 'mitigating'})

        assert resp.status_code == 200
        data = resp.get_json()
        assert data['message'] == 'Risk status updated to mitigating'
        assert data['data']['risk']['status'] == 'mitigating'
        assert data['data']['previous_status'] == 'identified'

    def test_transition_unknown_status(self, client, risk_payload):
        resp = client.post('/api/v1/risks/transition', json={'risk': risk_payload, 'status': 'archived'})

        assert resp.status_code == 400
        data = resp.get_json()
        assert data['message'] == 'Cannot move risk to status archived'
        assert data['data']['error_code'] == 'RISK_VALIDATION_ERROR'

    def test_transition_unknown_status_italian(self, client, risk_payload):
        resp = client.post('/api/v1/risks/transition', json={'risk': risk_payload, 'status': 'archived'},
                           headers={'Accept-Language': 'it'})
        assert resp.get_json()['message'] == 'Impossibile portare il rischio allo stato archived'

    def test_score_service_exception(self, client, risk_payload):
        with patch(SERVICE) as mock_service:
            mock_service.score_risk.side_effect = Exception('boom')
            resp = client.post('/api/v1/risks/score', json=risk_payload)

        assert resp.status_code == 500
        assert resp.get_json()['success'] is False


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
