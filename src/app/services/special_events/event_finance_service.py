"""
Special Events Finance Service
Orchestrates the event financial calculators within the Flask application context.
"""

import logging
from typing import Any, Dict, Optional

from flask import current_app, has_app_context

from src.common.logger import log_computation
from src.config import get_finance_defaults
from .core.event_aggregator import EventFinancialsAggregator
from .core.formula_library import (
    calculate_cogs,
    calculate_gross_margin,
    calculate_variance,
)
from .core.marketing_calculator import MarketingEfficiencyCalculator
from .models.records import ActualRecord, ForecastRecord, canonical_actual

logger = logging.getLogger(__name__)


def _finance_defaults() -> Dict[str, Any]:
    return get_finance_defaults(current_app.config if has_app_context() else None)


class EventFinanceService:
    """
    Service to compute forecast and actual financials of special events.
    Records arrive with the request and are never stored.
    """

    @staticmethod
    def _aggregator() -> EventFinancialsAggregator:
        defaults = _finance_defaults()
        return EventFinancialsAggregator(
            fnb_default_pct=defaults["fnb_cogs_pct"],
            merch_default_pct=defaults["merch_cogs_pct"],
        )

    @staticmethod
    @log_computation("event_variance")
    def calculate_variance(actual: Any, forecast: Any) -> Dict[str, Any]:
        """
        Variance between an actual and a forecast value.

        Returns:
            {"actual", "forecast", "amount", "percentage"}
        """
        variance = calculate_variance(actual, forecast)
        return {
            "actual": actual,
            "forecast": forecast,
            **variance.to_dict(),
        }

    @staticmethod
    @log_computation("event_cogs")
    def calculate_cogs(
        revenue: float,
        use_forecast_pct: bool,
        forecast_pct: Optional[float] = None,
        manual_override: float = 0.0,
        product: str = "fnb"
    ) -> Dict[str, Any]:
        """
        COGS and gross margin for F&B or merchandise revenue.

        Args:
            revenue: Revenue of the product line
            use_forecast_pct: Derive COGS from a percentage instead of the manual amount
            forecast_pct: Percentage to apply (product default when unset or 0)
            manual_override: Manual COGS amount
            product: "fnb" (default 30%) or "merch" (default 50%)
        """
        defaults = _finance_defaults()
        default_pct = defaults["merch_cogs_pct"] if product == "merch" else defaults["fnb_cogs_pct"]

        cogs = calculate_cogs(
            revenue,
            use_forecast_pct,
            forecast_pct=forecast_pct,
            manual_override=manual_override,
            default_pct=default_pct,
        )
        pct_applied = None
        if use_forecast_pct:
            pct_applied = forecast_pct or default_pct

        return {
            "product": product,
            "revenue": revenue,
            "cogs": round(cogs, 2),
            "pct_applied": pct_applied,
            "gross_profit": round(revenue - cogs, 2),
            "gross_margin": round(calculate_gross_margin(revenue, cogs), 2),
        }

    @staticmethod
    @log_computation("event_summary")
    def summarize_event(
        forecast_data: Optional[Dict[str, Any]],
        actual_data: Any = None
    ) -> Dict[str, Any]:
        """
        Full financial picture of an event.

        Args:
            forecast_data: Forecast record payload
            actual_data: Actual record payload, or a list whose first entry is canonical

        Returns:
            Dictionary with the forecast summary and, when actuals are present,
            the actual summary, the forecast-vs-actual comparison, the
            marketing efficiency and the event ROI.
        """
        aggregator = EventFinanceService._aggregator()
        forecast = ForecastRecord.from_dict(forecast_data)
        actual = canonical_actual(actual_data)

        forecast_summary = aggregator.summarize_forecast(forecast)
        marketing_calc = MarketingEfficiencyCalculator()

        result: Dict[str, Any] = {
            "forecast": forecast_summary.to_dict(),
            "forecast_marketing": {
                "total_marketing_budget": round(marketing_calc.total_marketing_budget(forecast), 2),
                "expected_budget_roi": round(
                    marketing_calc.budget_roi(
                        forecast_summary.total_revenue,
                        marketing_calc.total_marketing_budget(forecast),
                    ),
                    2,
                ),
                "channel_budgets": forecast.marketing_budgets(),
            },
            "has_actuals": actual is not None,
        }

        if actual is None:
            logger.info("Event summary computed without actuals")
            return result

        comparison = aggregator.compare(forecast, actual)
        marketing = marketing_calc.evaluate(
            actual,
            comparison.actual.total_revenue,
            forecast=forecast,
            forecast_revenue=forecast_summary.total_revenue,
        )

        result.update({
            "actual": comparison.actual.to_dict(),
            "comparison": comparison.to_dict(),
            "marketing": marketing.to_dict(),
            "roi": aggregator.event_roi(forecast, actual).to_dict(),
            "success_rating": actual.success_rating,
        })

        logger.info(
            "Event summary computed",
            extra={
                "forecast_revenue": round(forecast_summary.total_revenue, 2),
                "actual_revenue": round(comparison.actual.total_revenue, 2),
            },
        )
        return result

    @staticmethod
    @log_computation("event_roi")
    def calculate_event_roi(
        forecast_data: Optional[Dict[str, Any]],
        actual_data: Any = None
    ) -> Dict[str, Any]:
        """
        Event ROI summary: forecast and actual revenue, costs and profit,
        their variances and the revenue-to-cost ROI percentage.
        """
        forecast = ForecastRecord.from_dict(forecast_data)
        actual = canonical_actual(actual_data) or ActualRecord()
        return EventFinancialsAggregator.event_roi(forecast, actual).to_dict()
