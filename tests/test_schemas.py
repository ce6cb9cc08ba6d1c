"""
Tests for the marshmallow request schemas
"""
import pytest
from marshmallow import ValidationError

from src.app.api.schemas import (
    break_even_request_schema,
    cogs_request_schema,
    event_records_schema,
    financial_model_request_schema,
    risk_schema,
    risk_transition_request_schema,
    variance_request_schema,
)


class TestEventFinanceSchemas:
    """Forecast, actual and calculation requests"""

    def test_event_records_valid(self, forecast_record, actual_record):
        data = event_records_schema.load({'forecast': forecast_record, 'actual': actual_record})
        assert data['forecast']['forecast_ticket_sales'] == 25000
        assert data['actual']['use_forecast_fnb_cogs_pct'] is True
        assert data['actuals'] is None

    def test_cogs_flags_default_on(self):
        data = event_records_schema.load({'forecast': {}, 'actual': {'actual_fnb_revenue': 1000}})
        assert data['actual']['use_forecast_fnb_cogs_pct'] is True
        assert data['actual']['use_forecast_merch_cogs_pct'] is True

    def test_forecast_required(self):
        with pytest.raises(ValidationError) as exc_info:
            event_records_schema.load({})
        assert exc_info.value.messages['forecast'] == ['Forecast record is required']

    def test_unknown_record_keys_are_ignored(self, forecast_record):
        """Stored records carry ids and timestamps."""
        forecast_record.update({'id': 'f-1', 'created_at': '2026-01-01'})
        data = event_records_schema.load({'forecast': forecast_record})
        assert 'id' not in data['forecast']

    def test_null_amounts_allowed(self):
        data = event_records_schema.load({'forecast': {'forecast_ticket_sales': None}})
        assert data['forecast']['forecast_ticket_sales'] is None

    def test_non_numeric_amount_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            event_records_schema.load({'forecast': {'forecast_ticket_sales': 'lots'}})
        assert 'forecast_ticket_sales' in exc_info.value.messages['forecast']

    def test_negative_attendance_rejected(self):
        with pytest.raises(ValidationError):
            event_records_schema.load({'forecast': {'estimated_attendance': -5}})

    @pytest.mark.parametrize('rating', [0, 11])
    def test_success_rating_range(self, rating):
        with pytest.raises(ValidationError):
            event_records_schema.load({'forecast': {}, 'actual': {'success_rating': rating}})

    def test_variance_requires_both_values(self):
        with pytest.raises(ValidationError) as exc_info:
            variance_request_schema.load({'actual': 10})
        assert 'forecast' in exc_info.value.messages

    def test_cogs_defaults(self):
        data = cogs_request_schema.load({'revenue': 1000})
        assert data == {
            'revenue': 1000.0,
            'use_forecast_pct': False,
            'forecast_pct': None,
            'manual_override': 0.0,
            'product': 'fnb',
        }

    def test_cogs_unknown_product(self):
        with pytest.raises(ValidationError) as exc_info:
            cogs_request_schema.load({'revenue': 1000, 'product': 'drinks'})
        assert 'product' in exc_info.value.messages


class TestFinancialModelSchemas:
    """Financial model and break-even requests"""

    def test_valid_model(self, app, financial_model_payload):
        data = financial_model_request_schema.load(financial_model_payload)
        assert data['periods'] == 12
        assert data['scenario'] == 'base'
        assert data['revenue_streams'][0]['frequency'] == 'monthly'

    def test_periods_capped(self, app, financial_model_payload):
        financial_model_payload['periods'] = 121
        with pytest.raises(ValidationError) as exc_info:
            financial_model_request_schema.load(financial_model_payload)
        assert exc_info.value.messages['periods'] == ['Periods cannot exceed 120']

    def test_periods_minimum(self, app, financial_model_payload):
        financial_model_payload['periods'] = 0
        with pytest.raises(ValidationError):
            financial_model_request_schema.load(financial_model_payload)

    @pytest.mark.parametrize('rate', [-1, -2])
    def test_discount_rate_above_minus_one(self, app, financial_model_payload, rate):
        financial_model_payload['discount_rate'] = rate
        with pytest.raises(ValidationError) as exc_info:
            financial_model_request_schema.load(financial_model_payload)
        assert 'discount_rate' in exc_info.value.messages

    def test_custom_scenario_needs_modifiers(self, app, financial_model_payload):
        financial_model_payload['scenario'] = 'custom'
        with pytest.raises(ValidationError) as exc_info:
            financial_model_request_schema.load(financial_model_payload)
        assert 'modifiers' in exc_info.value.messages

    def test_custom_scenario_with_modifiers(self, app, financial_model_payload):
        financial_model_payload.update({'scenario': 'custom', 'modifiers': {'revenue_multiplier': 1.5}})
        data = financial_model_request_schema.load(financial_model_payload)
        assert data['modifiers']['revenue_multiplier'] == 1.5
        assert data['modifiers']['cost_multiplier'] == 1.0

    def test_invalid_seasonality_length(self, app, financial_model_payload):
        financial_model_payload['growth_model'] = {'type': 'linear', 'rate': 0.05, 'seasonality': [1, 1, 1]}
        with pytest.raises(ValidationError) as exc_info:
            financial_model_request_schema.load(financial_model_payload)
        assert 'growth_model' in exc_info.value.messages

    def test_unknown_frequency(self, app, financial_model_payload):
        financial_model_payload['revenue_streams'][0]['frequency'] = 'daily'
        with pytest.raises(ValidationError):
            financial_model_request_schema.load(financial_model_payload)

    def test_break_even_negative_price(self):
        with pytest.raises(ValidationError) as exc_info:
            break_even_request_schema.load({'fixed_costs': 100, 'variable_cost_per_unit': 1, 'price_per_unit': -1})
        assert 'price_per_unit' in exc_info.value.messages


class TestRiskSchemas:
    """Risk requests"""

    def test_risk_defaults(self):
        data = risk_schema.load({'title': 'Weather'})
        assert data['category'] == 'market'
        assert data['priority'] == 'medium'
        assert data['probability'] == 50.0

    def test_title_required(self):
        with pytest.raises(ValidationError) as exc_info:
            risk_schema.load({})
        assert exc_info.value.messages['title'] == ['Risk title is required']

    def test_probability_range(self):
        with pytest.raises(ValidationError):
            risk_schema.load({'title': 'Weather', 'probability': 120})

    def test_transition_status_is_free_text(self, risk_payload):
        """Unknown statuses reach the risk model, which rejects them."""
        data = risk_transition_request_schema.load({'risk': risk_payload, 'status': 'archived'})
        assert data['status'] == 'archived'


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
