"""
Cash Flow Projector

Generates a period-by-period cash flow series from a financial model's
revenue streams, cost items and growth model. The projection is a pure
function of its inputs: calling it twice with the same arguments yields the
same series.
"""

import logging
import math
from typing import List, Optional

from ..models.financial_model import FinancialModel, Frequency, GrowthModel, GrowthType
from ..models.results import CashFlowPeriod

logger = logging.getLogger(__name__)

WEEKS_PER_MONTH = 4.33
MONTHS_PER_WEEK = 0.23
QUARTERS_PER_WEEK = 0.077
QUARTERS_PER_MONTH = 0.33

# Costs grow at 70% of the revenue growth rate
COST_GROWTH_DAMPENING = 0.7
MIN_GROWTH_FACTOR = 0.1

OPERATING_CASH_RATIO = 0.9
INITIAL_INVESTMENT_RATIO = 0.2
INITIAL_FINANCING_RATIO = 0.3


class CashFlowProjector:
    """Projects revenue, costs and cash flows over weekly or monthly periods."""

    @staticmethod
    def periods_per_year(is_weekly: bool) -> int:
        return 52 if is_weekly else 12

    @classmethod
    def frequency_multiplier(
        cls,
        frequency: Optional[Frequency],
        is_weekly: bool,
        period: int
    ) -> float:
        """
        Convert a stream's nominal period into the reporting period.

        One-time streams contribute their full value in period 1 only;
        streams without a frequency contribute their value every period.
        """
        if frequency is None:
            return 1.0
        if frequency == Frequency.WEEKLY:
            return 1.0 if is_weekly else WEEKS_PER_MONTH
        if frequency == Frequency.MONTHLY:
            return MONTHS_PER_WEEK if is_weekly else 1.0
        if frequency == Frequency.QUARTERLY:
            return QUARTERS_PER_WEEK if is_weekly else QUARTERS_PER_MONTH
        if frequency == Frequency.ANNUALLY:
            return 1.0 / cls.periods_per_year(is_weekly)
        if frequency == Frequency.ONE_TIME:
            return 1.0 if period == 1 else 0.0
        return 1.0

    @staticmethod
    def season_index(period: int, is_weekly: bool) -> int:
        """Quarter of the year (13-week blocks) when weekly, month otherwise"""
        if is_weekly:
            return ((period - 1) // 13) % 4
        return (period - 1) % 12

    @classmethod
    def growth_factor(
        cls,
        growth_model: Optional[GrowthModel],
        period: int,
        is_weekly: bool = False,
        is_cost: bool = False
    ) -> float:
        """
        Growth multiplier for a period.

        Formula:
            linear:      1 + rate * p
            exponential: (1 + rate) ** p
            logarithmic: 1 + rate * ln(p + 1)

        Seasonality multiplies the factor (a missing or zero entry counts as 1).
        Cost factors above 1 are dampened, and the result never drops below 0.1.
        """
        if growth_model is None:
            return 1.0

        rate = growth_model.rate or 0.0

        if growth_model.type == GrowthType.LINEAR:
            factor = 1 + rate * period
        elif growth_model.type == GrowthType.EXPONENTIAL:
            try:
                factor = (1 + rate) ** period
            except OverflowError:
                factor = math.copysign(math.inf, 1 + rate) if period % 2 else math.inf
        elif growth_model.type == GrowthType.LOGARITHMIC:
            factor = 1 + rate * math.log(period + 1)
        else:
            factor = 1.0

        if growth_model.seasonality:
            index = cls.season_index(period, is_weekly)
            multiplier = 0.0
            if index < len(growth_model.seasonality):
                multiplier = growth_model.seasonality[index]
            factor *= multiplier or 1.0

        if is_cost and factor > 1:
            factor = 1 + (factor - 1) * COST_GROWTH_DAMPENING

        return max(factor, MIN_GROWTH_FACTOR)

    def period_revenue(self, model: FinancialModel, period: int, is_weekly: bool) -> float:
        growth = self.growth_factor(model.growth_model, period, is_weekly)
        return sum(
            stream.value * growth * self.frequency_multiplier(stream.frequency, is_weekly, period)
            for stream in model.revenue_streams
        )

    def period_costs(self, model: FinancialModel, period: int, is_weekly: bool) -> float:
        growth = self.growth_factor(model.growth_model, period, is_weekly, is_cost=True)
        return sum(item.value * growth for item in model.cost_items)

    def project(
        self,
        model: FinancialModel,
        periods: int = 36,
        is_weekly: bool = False
    ) -> List[CashFlowPeriod]:
        """
        Project the model over ``periods`` periods.

        Cash flow split per period:
            operating = 0.9 * net_income
            investing = -0.2 * costs   (period 1 only)
            financing = 0.3 * costs    (period 1 only)

        Args:
            model: Financial model assumptions
            periods: Number of periods to project
            is_weekly: Weekly periods instead of monthly

        Returns:
            List of CashFlowPeriod, one per period (1-indexed)
        """
        label = "Week" if is_weekly else "Month"
        series: List[CashFlowPeriod] = []
        cumulative = 0.0

        for period in range(1, periods + 1):
            revenue = self.period_revenue(model, period, is_weekly)
            costs = self.period_costs(model, period, is_weekly)
            net_income = revenue - costs

            operating = OPERATING_CASH_RATIO * net_income
            investing = -INITIAL_INVESTMENT_RATIO * costs if period == 1 else 0.0
            financing = INITIAL_FINANCING_RATIO * costs if period == 1 else 0.0
            net_cash_flow = operating + investing + financing
            cumulative += net_cash_flow

            series.append(CashFlowPeriod(
                period=period,
                period_name=f"{label} {period}",
                revenue=revenue,
                costs=costs,
                net_income=net_income,
                operating_cash_flow=operating,
                investing_cash_flow=investing,
                financing_cash_flow=financing,
                net_cash_flow=net_cash_flow,
                cumulative_cash_flow=cumulative,
            ))

        logger.debug("Projected %d %s periods for '%s'", periods, label.lower(), model.name)
        return series
