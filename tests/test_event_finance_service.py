"""
Test Suite for EventFinanceService
"""
import pytest

from src.app.services.special_events.event_finance_service import EventFinanceService


class TestVarianceAndCogs:
    """Single-value calculations"""

    def test_calculate_variance(self, app):
        result = EventFinanceService.calculate_variance(27500, 25000)
        assert result == {'actual': 27500, 'forecast': 25000, 'amount': 2500, 'percentage': 10.0}

    def test_calculate_variance_zero_forecast(self, app):
        assert EventFinanceService.calculate_variance(500, 0)['percentage'] == 0

    def test_cogs_default_fnb_percentage(self, app):
        result = EventFinanceService.calculate_cogs(8000, True)
        assert result['cogs'] == 2400
        assert result['pct_applied'] == 30.0
        assert result['gross_profit'] == 5600
        assert result['gross_margin'] == 70.0

    def test_cogs_default_merch_percentage(self, app):
        result = EventFinanceService.calculate_cogs(3000, True, product='merch')
        assert result['cogs'] == 1500
        assert result['pct_applied'] == 50.0

    def test_cogs_manual(self, app):
        result = EventFinanceService.calculate_cogs(3000, False, forecast_pct=40, manual_override=900)
        assert result['cogs'] == 900
        assert result['pct_applied'] is None
        assert result['gross_margin'] == 70.0

    def test_cogs_uses_configured_default(self, app):
        original = app.config['DEFAULT_FNB_COGS_PCT']
        app.config['DEFAULT_FNB_COGS_PCT'] = 25.0
        try:
            assert EventFinanceService.calculate_cogs(1000, True)['cogs'] == 250
        finally:
            app.config['DEFAULT_FNB_COGS_PCT'] = original


class TestSummarizeEvent:
    """summarize_event"""

    def test_forecast_only(self, app, forecast_record):
        result = EventFinanceService.summarize_event(forecast_record)
        assert result['has_actuals'] is False
        assert result['forecast']['total_revenue'] == 46000
        assert result['forecast']['total_costs'] == 29900
        assert result['forecast']['profit_margin'] == 35.0
        assert result['forecast_marketing']['total_marketing_budget'] == 4000
        assert result['forecast_marketing']['expected_budget_roi'] == 1150.0
        assert 'comparison' not in result

    def test_with_actuals(self, app, forecast_record, actual_record):
        result = EventFinanceService.summarize_event(forecast_record, actual_record)
        assert result['has_actuals'] is True
        assert result['actual']['total_revenue'] == 49000
        assert result['actual']['total_costs'] == 30600
        assert result['actual']['net_profit'] == 18400
        assert result['comparison']['variances']['revenue']['amount'] == 3000
        assert result['comparison']['variances']['attendance']['percentage'] == 10.0
        assert result['marketing']['marketing_roi'] == 1300.0
        assert result['marketing']['budget_variance'] == {'amount': -500, 'percentage': -12.5}
        assert result['roi']['roi_percent'] == 181.48
        assert result['success_rating'] == 8

    def test_list_of_actuals_first_wins(self, app, forecast_record, actual_record):
        other = dict(actual_record, actual_ticket_sales=0)
        result = EventFinanceService.summarize_event(forecast_record, [actual_record, other])
        assert result['actual']['total_revenue'] == 49000

    def test_empty_forecast(self, app):
        """Blank records give zeros, not errors."""
        result = EventFinanceService.summarize_event({})
        assert result['forecast']['total_revenue'] == 0
        assert result['forecast']['revenue_per_attendee'] == 0


class TestEventROI:
    """calculate_event_roi"""

    def test_event_roi(self, app, forecast_record, actual_record):
        result = EventFinanceService.calculate_event_roi(forecast_record, actual_record)
        assert result['forecast_profit'] == 20000
        assert result['actual_profit'] == 22000
        assert result['profit_variance'] == 2000
        assert result['roi_percent'] == 181.48

    def test_event_roi_without_actuals(self, app, forecast_record):
        result = EventFinanceService.calculate_event_roi(forecast_record, None)
        assert result['actual_revenue'] == 0
        assert result['roi_percent'] == 0


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
