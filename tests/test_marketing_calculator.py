"""
Tests for MarketingEfficiencyCalculator
"""
import pytest

from src.app.services.special_events.core.marketing_calculator import MarketingEfficiencyCalculator
from src.app.services.special_events.models.records import ActualRecord, ForecastRecord


class TestMarketingKPIs:
    """Individual KPIs"""

    def test_marketing_roi(self):
        """(revenue - cost) / cost * 100"""
        assert MarketingEfficiencyCalculator.marketing_roi(49000, 3500) == pytest.approx(1300.0)

    @pytest.mark.parametrize('cost', [0, None, -10])
    def test_marketing_roi_without_spend(self, cost):
        assert MarketingEfficiencyCalculator.marketing_roi(49000, cost) == 0.0

    def test_customer_acquisition_cost(self):
        assert MarketingEfficiencyCalculator.customer_acquisition_cost(3500, 1100) == pytest.approx(3.1818, rel=1e-3)

    def test_customer_acquisition_cost_without_attendance(self):
        assert MarketingEfficiencyCalculator.customer_acquisition_cost(3500, 0) == 0.0

    def test_total_budget(self, forecast_record):
        """Five channel budgets"""
        forecast = ForecastRecord.from_dict(forecast_record)
        assert MarketingEfficiencyCalculator.total_marketing_budget(forecast) == 4000

    def test_budget_roi(self):
        assert MarketingEfficiencyCalculator.budget_roi(46000, 4000) == pytest.approx(1150.0)
        assert MarketingEfficiencyCalculator.budget_roi(46000, 0) == 0.0


class TestEvaluate:
    """evaluate"""

    def test_evaluate_with_forecast(self, forecast_record, actual_record):
        """Spend of 3500 against a 4000 budget"""
        result = MarketingEfficiencyCalculator().evaluate(
            ActualRecord.from_dict(actual_record),
            49000,
            forecast=ForecastRecord.from_dict(forecast_record),
            forecast_revenue=46000,
        )
        assert result.marketing_cost == 3500
        assert result.total_marketing_budget == 4000
        assert result.budget_variance.amount == -500
        assert result.budget_variance.percentage == pytest.approx(-12.5)
        assert result.budget_roi == pytest.approx(1150.0)
        assert result.channel_budgets['marketing_social_budget'] == 1500

    def test_evaluate_without_forecast(self, actual_record):
        """Budget figures stay at zero."""
        result = MarketingEfficiencyCalculator().evaluate(ActualRecord.from_dict(actual_record), 49000)
        assert result.total_marketing_budget == 0
        assert result.budget_roi == 0
        assert result.channel_budgets == {}
        assert result.to_dict()['customer_acquisition_cost'] == 3.18
