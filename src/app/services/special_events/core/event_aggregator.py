"""
Event Financials Aggregator

Sums revenue streams and cost line items of a special event into totals,
margins and per-attendee metrics, and compares actuals to the forecast.
"""

import logging
from typing import Any, Iterable, Optional, Tuple

from .formula_library import (
    DEFAULT_FNB_COGS_PCT,
    DEFAULT_MERCH_COGS_PCT,
    calculate_cogs,
    calculate_gross_margin,
    calculate_margin,
    calculate_variance,
    per_unit,
    safe_number,
    sum_values,
)
from ..models.records import ActualRecord, ForecastRecord
from ..models.results import (
    EventComparison,
    EventFinancials,
    EventROI,
    ZERO_VARIANCE,
)

logger = logging.getLogger(__name__)


class EventFinancialsAggregator:
    """
    Aggregator for forecast and actual event records.
    All calculations are deterministic; missing amounts count as 0.
    """

    def __init__(
        self,
        fnb_default_pct: float = DEFAULT_FNB_COGS_PCT,
        merch_default_pct: float = DEFAULT_MERCH_COGS_PCT
    ):
        self.fnb_default_pct = fnb_default_pct
        self.merch_default_pct = merch_default_pct

    # ========================================================================
    # GENERIC AGGREGATION
    # ========================================================================

    @staticmethod
    def summarize(
        revenue_fields: Iterable[Any],
        cost_fields: Iterable[Any],
        fnb_cogs: Any = 0,
        merch_cogs: Any = 0,
        attendance: Any = 0,
        fnb_revenue: Any = 0,
        merch_revenue: Any = 0
    ) -> EventFinancials:
        """
        Aggregate revenue and cost line items.

        Formula:
            total_revenue = sum(revenue fields)
            total_costs = sum(cost fields) + fnb_cogs + merch_cogs
            net_profit = total_revenue - total_costs
            profit_margin = net_profit / total_revenue * 100   (0 when no revenue)

        Per-attendee metrics are 0 when attendance is 0.
        """
        fnb_cogs = safe_number(fnb_cogs)
        merch_cogs = safe_number(merch_cogs)
        attendance = safe_number(attendance)

        total_revenue = sum_values(list(revenue_fields))
        total_costs = sum_values(list(cost_fields)) + fnb_cogs + merch_cogs
        net_profit = total_revenue - total_costs

        revenue_per_attendee = per_unit(total_revenue, attendance)
        cost_per_attendee = per_unit(total_costs, attendance)

        return EventFinancials(
            total_revenue=total_revenue,
            total_costs=total_costs,
            net_profit=net_profit,
            profit_margin=calculate_margin(net_profit, total_revenue),
            fnb_cogs=fnb_cogs,
            merch_cogs=merch_cogs,
            fnb_gross_margin=calculate_gross_margin(fnb_revenue, fnb_cogs),
            merch_gross_margin=calculate_gross_margin(merch_revenue, merch_cogs),
            attendance=attendance,
            revenue_per_attendee=revenue_per_attendee,
            cost_per_attendee=cost_per_attendee,
            profit_per_attendee=revenue_per_attendee - cost_per_attendee,
        )

    # ========================================================================
    # COGS
    # ========================================================================

    def forecast_cogs(self, forecast: ForecastRecord) -> Tuple[float, float]:
        """F&B and merchandise COGS implied by the forecast percentages."""
        fnb = calculate_cogs(
            forecast.forecast_fnb_revenue,
            use_forecast_pct=True,
            forecast_pct=forecast.forecast_fnb_cogs_pct,
            default_pct=self.fnb_default_pct,
        )
        merch = calculate_cogs(
            forecast.forecast_merch_revenue,
            use_forecast_pct=True,
            forecast_pct=forecast.forecast_merch_cogs_pct,
            default_pct=self.merch_default_pct,
        )
        return fnb, merch

    def actual_cogs(
        self,
        actual: ActualRecord,
        forecast: Optional[ForecastRecord] = None
    ) -> Tuple[float, float]:
        """
        F&B and merchandise COGS of the actuals.

        The forecast percentage applies only when the record asks for it and a
        forecast exists; otherwise the manually entered amount is used.
        """
        use_fnb_pct = actual.use_forecast_fnb_cogs_pct and forecast is not None
        use_merch_pct = actual.use_forecast_merch_cogs_pct and forecast is not None

        fnb = calculate_cogs(
            actual.actual_fnb_revenue,
            use_forecast_pct=use_fnb_pct,
            forecast_pct=forecast.forecast_fnb_cogs_pct if forecast else None,
            manual_override=actual.manual_fnb_cogs,
            default_pct=self.fnb_default_pct,
        )
        merch = calculate_cogs(
            actual.actual_merch_revenue,
            use_forecast_pct=use_merch_pct,
            forecast_pct=forecast.forecast_merch_cogs_pct if forecast else None,
            manual_override=actual.manual_merch_cogs,
            default_pct=self.merch_default_pct,
        )
        return fnb, merch

    # ========================================================================
    # RECORD SUMMARIES
    # ========================================================================

    def summarize_forecast(self, forecast: ForecastRecord) -> EventFinancials:
        fnb_cogs, merch_cogs = self.forecast_cogs(forecast)
        return self.summarize(
            forecast.revenue_values(),
            forecast.cost_values(),
            fnb_cogs=fnb_cogs,
            merch_cogs=merch_cogs,
            attendance=forecast.estimated_attendance,
            fnb_revenue=forecast.forecast_fnb_revenue,
            merch_revenue=forecast.forecast_merch_revenue,
        )

    def summarize_actual(
        self,
        actual: ActualRecord,
        forecast: Optional[ForecastRecord] = None
    ) -> EventFinancials:
        fnb_cogs, merch_cogs = self.actual_cogs(actual, forecast)
        return self.summarize(
            actual.revenue_values(),
            actual.cost_values(),
            fnb_cogs=fnb_cogs,
            merch_cogs=merch_cogs,
            attendance=actual.actual_attendance,
            fnb_revenue=actual.actual_fnb_revenue,
            merch_revenue=actual.actual_merch_revenue,
        )

    # ========================================================================
    # FORECAST VS ACTUAL
    # ========================================================================

    def compare(self, forecast: ForecastRecord, actual: ActualRecord) -> EventComparison:
        """
        Compare actual results to the forecast.

        Attendance variance requires a forecast attendance; COGS variances
        require a non-zero forecast COGS. Missing comparisons are {0, 0}.
        """
        forecast_summary = self.summarize_forecast(forecast)
        actual_summary = self.summarize_actual(actual, forecast)

        attendance_variance = ZERO_VARIANCE
        if forecast.estimated_attendance:
            attendance_variance = calculate_variance(
                actual.actual_attendance, forecast.estimated_attendance
            )

        fnb_cogs_variance = ZERO_VARIANCE
        if forecast_summary.fnb_cogs:
            fnb_cogs_variance = calculate_variance(actual_summary.fnb_cogs, forecast_summary.fnb_cogs)

        merch_cogs_variance = ZERO_VARIANCE
        if forecast_summary.merch_cogs:
            merch_cogs_variance = calculate_variance(actual_summary.merch_cogs, forecast_summary.merch_cogs)

        logger.debug(
            "Compared event: forecast revenue %.2f, actual revenue %.2f",
            forecast_summary.total_revenue, actual_summary.total_revenue
        )

        return EventComparison(
            forecast=forecast_summary,
            actual=actual_summary,
            revenue_variance=calculate_variance(actual_summary.total_revenue, forecast_summary.total_revenue),
            cost_variance=calculate_variance(actual_summary.total_costs, forecast_summary.total_costs),
            profit_variance=calculate_variance(actual_summary.net_profit, forecast_summary.net_profit),
            attendance_variance=attendance_variance,
            fnb_cogs_variance=fnb_cogs_variance,
            merch_cogs_variance=merch_cogs_variance,
        )

    @staticmethod
    def event_roi(
        forecast: Optional[ForecastRecord],
        actual: Optional[ActualRecord]
    ) -> EventROI:
        """
        Event ROI summary.

        Revenue sums the five revenue streams, costs the six cost categories
        (COGS excluded). Variances are actual minus forecast.

        Formula:
            roi_percent = actual_revenue / actual_costs * 100   (0 when no costs)
        """
        forecast = forecast or ForecastRecord()
        actual = actual or ActualRecord()

        forecast_revenue = sum_values(forecast.revenue_values())
        forecast_costs = sum_values(forecast.cost_values())
        actual_revenue = sum_values(actual.revenue_values())
        actual_costs = sum_values(actual.cost_values())
        forecast_profit = forecast_revenue - forecast_costs
        actual_profit = actual_revenue - actual_costs

        return EventROI(
            forecast_revenue=forecast_revenue,
            forecast_costs=forecast_costs,
            forecast_profit=forecast_profit,
            actual_revenue=actual_revenue,
            actual_costs=actual_costs,
            actual_profit=actual_profit,
            revenue_variance=calculate_variance(actual_revenue, forecast_revenue).amount,
            cost_variance=calculate_variance(actual_costs, forecast_costs).amount,
            profit_variance=calculate_variance(actual_profit, forecast_profit).amount,
            roi_percent=actual_revenue / actual_costs * 100 if actual_costs > 0 else 0.0,
        )
