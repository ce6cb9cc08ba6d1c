"""
Time Value Analyzer

Computes NPV, IRR, payback period and break-even over a projected cash flow
series, together with the profitability totals of the projection.
"""

import logging
from typing import List, Optional

from .cash_flow_projector import CashFlowProjector
from .formula_library import (
    calculate_break_even,
    calculate_margin,
    calculate_npv,
    calculate_payback_period,
    solve_irr,
)
from ..models.financial_model import FinancialModel
from ..models.results import CashFlowPeriod, FinancialMetrics, finite_or_none

logger = logging.getLogger(__name__)

# Break-even heuristic: share of the average period cost treated as fixed
# (the remainder is variable) and the stand-in units sold per period.
FIXED_COST_SHARE = 0.4
VARIABLE_COST_SHARE = 0.6
UNITS_PER_PERIOD = 100


class TimeValueAnalyzer:
    """
    Analyzer for projected financial models.
    Reuses a CashFlowProjector so that callers can share one instance.
    """

    def __init__(self, projector: Optional[CashFlowProjector] = None):
        self.projector = projector or CashFlowProjector()

    @staticmethod
    def initial_investment(cash_flows: List[CashFlowPeriod]) -> float:
        """Initial outlay: the negated magnitude of period 1's investing cash flow"""
        if not cash_flows:
            return 0.0
        return -abs(cash_flows[0].investing_cash_flow or 0.0)

    def analyze_cash_flows(
        self,
        cash_flows: List[CashFlowPeriod],
        periods: int,
        discount_rate: float = 0.1
    ) -> FinancialMetrics:
        """
        Metrics of an already projected series.

        The initial outlay is prepended to the period net cash flows before
        NPV, IRR and payback are computed. ``irr``, ``roi`` and
        ``profit_margin`` are returned as percentages.
        """
        initial = self.initial_investment(cash_flows)
        series = [initial] + [cf.net_cash_flow for cf in cash_flows]

        npv = calculate_npv(series, discount_rate)
        irr_result = solve_irr(series)
        if not irr_result.converged:
            message = f"IRR did not converge after {irr_result.iterations} iterations"
            logger.warning(message, extra={"irr_estimate": irr_result.rate})
        payback = calculate_payback_period(series)

        total_revenue = sum(cf.revenue for cf in cash_flows)
        total_costs = sum(cf.costs for cf in cash_flows)
        total_profit = total_revenue - total_costs

        roi = total_profit / abs(initial) if initial != 0 else 0.0

        # Simplified break-even: average period figures over a nominal unit count
        average_revenue = total_revenue / periods if periods > 0 else 0.0
        average_cost = total_costs / periods if periods > 0 else 0.0
        break_even = calculate_break_even(
            fixed_costs=average_cost * FIXED_COST_SHARE,
            variable_cost_per_unit=average_cost * VARIABLE_COST_SHARE / UNITS_PER_PERIOD,
            price_per_unit=average_revenue / UNITS_PER_PERIOD,
        )

        return FinancialMetrics(
            npv=npv,
            irr=irr_result.rate * 100,
            irr_converged=irr_result.converged,
            payback_period=payback,
            roi=roi * 100,
            total_revenue=total_revenue,
            total_costs=total_costs,
            total_profit=total_profit,
            profit_margin=calculate_margin(total_profit, total_revenue),
            break_even_units=finite_or_none(break_even.units),
            break_even_revenue=finite_or_none(break_even.revenue),
        )

    def analyze(
        self,
        model: FinancialModel,
        periods: int = 36,
        discount_rate: float = 0.1,
        is_weekly: bool = False
    ) -> FinancialMetrics:
        """
        Project the model and compute its time value metrics.

        Args:
            model: Financial model assumptions
            periods: Number of periods to project
            discount_rate: Per-period discount rate (fraction)
            is_weekly: Weekly periods instead of monthly

        Returns:
            FinancialMetrics
        """
        cash_flows = self.projector.project(model, periods, is_weekly)
        return self.analyze_cash_flows(cash_flows, periods, discount_rate)
