"""
Marketing Efficiency Calculator

Calculates marketing KPIs for a special event:
- Marketing ROI
- Customer Acquisition Cost (CAC)
- Total marketing budget and expected budget ROI
"""

from typing import Any, Optional

from .formula_library import calculate_variance, safe_number, sum_values
from ..models.records import ActualRecord, ForecastRecord
from ..models.results import MarketingEfficiency, ZERO_VARIANCE


class MarketingEfficiencyCalculator:
    """Calculator for marketing KPIs. Zero spend or attendance yields 0."""

    @staticmethod
    def marketing_roi(total_revenue: Any, marketing_cost: Any) -> float:
        """
        Marketing ROI.

        Formula:
            ROI = (total_revenue - marketing_cost) / marketing_cost * 100
        """
        total_revenue = safe_number(total_revenue)
        marketing_cost = safe_number(marketing_cost)
        if marketing_cost > 0:
            return (total_revenue - marketing_cost) / marketing_cost * 100
        return 0.0

    @staticmethod
    def customer_acquisition_cost(marketing_cost: Any, attendance: Any) -> float:
        """
        Customer Acquisition Cost.

        Formula:
            CAC = marketing_cost / attendance
        """
        marketing_cost = safe_number(marketing_cost)
        attendance = safe_number(attendance)
        if marketing_cost > 0 and attendance > 0:
            return marketing_cost / attendance
        return 0.0

    @staticmethod
    def total_marketing_budget(forecast: ForecastRecord) -> float:
        """Sum of the channel budgets (email, social, influencer, paid ads, content)"""
        return sum_values(forecast.marketing_budgets().values())

    @staticmethod
    def budget_roi(total_revenue: Any, total_budget: Any) -> float:
        """Expected revenue as a percentage of the marketing budget"""
        total_revenue = safe_number(total_revenue)
        total_budget = safe_number(total_budget)
        if total_budget > 0:
            return total_revenue / total_budget * 100
        return 0.0

    def evaluate(
        self,
        actual: ActualRecord,
        total_revenue: float,
        forecast: Optional[ForecastRecord] = None,
        forecast_revenue: float = 0.0
    ) -> MarketingEfficiency:
        """
        Marketing efficiency of an event.

        Args:
            actual: Actual record (marketing costs and attendance)
            total_revenue: Actual total revenue
            forecast: Optional forecast record (channel budgets)
            forecast_revenue: Forecast total revenue, for the budget ROI

        Returns:
            MarketingEfficiency
        """
        marketing_cost = actual.actual_marketing_costs
        total_budget = 0.0
        budget_variance = ZERO_VARIANCE
        channels = {}

        if forecast is not None:
            total_budget = self.total_marketing_budget(forecast)
            channels = forecast.marketing_budgets()
            budget_variance = calculate_variance(marketing_cost, total_budget)

        return MarketingEfficiency(
            marketing_cost=marketing_cost,
            marketing_roi=self.marketing_roi(total_revenue, marketing_cost),
            customer_acquisition_cost=self.customer_acquisition_cost(
                marketing_cost, actual.actual_attendance
            ),
            total_marketing_budget=total_budget,
            budget_roi=self.budget_roi(forecast_revenue, total_budget),
            budget_variance=budget_variance,
            channel_budgets=channels,
        )
