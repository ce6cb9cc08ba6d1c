"""
Computation Result Models

Pure result containers returned by the core calculators. They are derived on
every call and never persisted.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


def finite_or_none(value: Optional[float]) -> Optional[float]:
    """Map infinities (and NaN) to None for JSON output."""
    if value is None or math.isinf(value) or math.isnan(value):
        return None
    return value


def round_money(value: Optional[float], digits: int = 2) -> Optional[float]:
    """Round for output; infinities and NaN become None."""
    value = finite_or_none(value)
    return round(value, digits) if value is not None else None


# ============================================================================
# PRIMITIVE RESULTS
# ============================================================================

@dataclass(frozen=True)
class VarianceResult:
    """Actual minus forecast, absolute and as a percentage of forecast"""
    amount: float
    percentage: float

    def to_dict(self) -> Dict[str, float]:
        return {
            "amount": round(self.amount, 2),
            "percentage": round(self.percentage, 2),
        }


ZERO_VARIANCE = VarianceResult(amount=0.0, percentage=0.0)


@dataclass(frozen=True)
class IRRResult:
    """Newton-Raphson outcome"""
    rate: float
    converged: bool
    iterations: int


@dataclass(frozen=True)
class BreakEvenResult:
    """Break-even units and revenue; infinite when the contribution margin is not positive"""
    units: float
    revenue: float

    @property
    def is_reachable(self) -> bool:
        return not math.isinf(self.units)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "units": finite_or_none(self.units),
            "revenue": round_money(finite_or_none(self.revenue)),
            "reachable": self.is_reachable,
        }


# ============================================================================
# EVENT FINANCIALS
# ============================================================================

@dataclass(frozen=True)
class EventFinancials:
    """Totals and per-attendee metrics of a forecast or actual record"""
    total_revenue: float
    total_costs: float
    net_profit: float
    profit_margin: float
    fnb_cogs: float = 0.0
    merch_cogs: float = 0.0
    fnb_gross_margin: float = 0.0
    merch_gross_margin: float = 0.0
    attendance: float = 0.0
    revenue_per_attendee: float = 0.0
    cost_per_attendee: float = 0.0
    profit_per_attendee: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_revenue": round_money(self.total_revenue),
            "total_costs": round_money(self.total_costs),
            "net_profit": round_money(self.net_profit),
            "profit_margin": round_money(self.profit_margin),
            "fnb_cogs": round_money(self.fnb_cogs),
            "merch_cogs": round_money(self.merch_cogs),
            "fnb_gross_margin": round_money(self.fnb_gross_margin),
            "merch_gross_margin": round_money(self.merch_gross_margin),
            "attendance": self.attendance,
            "revenue_per_attendee": round_money(self.revenue_per_attendee),
            "cost_per_attendee": round_money(self.cost_per_attendee),
            "profit_per_attendee": round_money(self.profit_per_attendee),
        }


@dataclass(frozen=True)
class EventComparison:
    """Forecast versus actual for one event"""
    forecast: EventFinancials
    actual: EventFinancials
    revenue_variance: VarianceResult = ZERO_VARIANCE
    cost_variance: VarianceResult = ZERO_VARIANCE
    profit_variance: VarianceResult = ZERO_VARIANCE
    attendance_variance: VarianceResult = ZERO_VARIANCE
    fnb_cogs_variance: VarianceResult = ZERO_VARIANCE
    merch_cogs_variance: VarianceResult = ZERO_VARIANCE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "forecast": self.forecast.to_dict(),
            "actual": self.actual.to_dict(),
            "variances": {
                "revenue": self.revenue_variance.to_dict(),
                "costs": self.cost_variance.to_dict(),
                "profit": self.profit_variance.to_dict(),
                "attendance": self.attendance_variance.to_dict(),
                "fnb_cogs": self.fnb_cogs_variance.to_dict(),
                "merch_cogs": self.merch_cogs_variance.to_dict(),
            },
        }


@dataclass(frozen=True)
class EventROI:
    """Event ROI summary (forecast vs actual, COGS excluded from costs)"""
    forecast_revenue: float
    forecast_costs: float
    forecast_profit: float
    actual_revenue: float
    actual_costs: float
    actual_profit: float
    revenue_variance: float
    cost_variance: float
    profit_variance: float
    roi_percent: float

    def to_dict(self) -> Dict[str, float]:
        return {
            "forecast_revenue": round_money(self.forecast_revenue),
            "forecast_costs": round_money(self.forecast_costs),
            "forecast_profit": round_money(self.forecast_profit),
            "actual_revenue": round_money(self.actual_revenue),
            "actual_costs": round_money(self.actual_costs),
            "actual_profit": round_money(self.actual_profit),
            "revenue_variance": round_money(self.revenue_variance),
            "cost_variance": round_money(self.cost_variance),
            "profit_variance": round_money(self.profit_variance),
            "roi_percent": round_money(self.roi_percent),
        }


@dataclass(frozen=True)
class MarketingEfficiency:
    """Marketing spend effectiveness for an event"""
    marketing_cost: float
    marketing_roi: float
    customer_acquisition_cost: float
    total_marketing_budget: float = 0.0
    budget_roi: float = 0.0
    budget_variance: VarianceResult = ZERO_VARIANCE
    channel_budgets: Dict[str, float] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "marketing_cost": round_money(self.marketing_cost),
            "marketing_roi": round_money(self.marketing_roi),
            "customer_acquisition_cost": round_money(self.customer_acquisition_cost),
            "total_marketing_budget": round_money(self.total_marketing_budget),
            "budget_roi": round_money(self.budget_roi),
            "budget_variance": self.budget_variance.to_dict(),
            "channel_budgets": dict(self.channel_budgets),
        }


# ============================================================================
# CASH FLOW AND TIME VALUE
# ============================================================================

@dataclass(frozen=True)
class CashFlowPeriod:
    """One projected period"""
    period: int
    period_name: str
    revenue: float
    costs: float
    net_income: float
    operating_cash_flow: float
    investing_cash_flow: float
    financing_cash_flow: float
    net_cash_flow: float
    cumulative_cash_flow: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "period": self.period,
            "period_name": self.period_name,
            "revenue": round_money(self.revenue),
            "costs": round_money(self.costs),
            "net_income": round_money(self.net_income),
            "operating_cash_flow": round_money(self.operating_cash_flow),
            "investing_cash_flow": round_money(self.investing_cash_flow),
            "financing_cash_flow": round_money(self.financing_cash_flow),
            "net_cash_flow": round_money(self.net_cash_flow),
            "cumulative_cash_flow": round_money(self.cumulative_cash_flow),
        }


@dataclass(frozen=True)
class FinancialMetrics:
    """
    Time value metrics of a projected model.

    ``irr``, ``roi`` and ``profit_margin`` are percentages. Break-even values
    are None when the contribution margin is not positive.
    """
    npv: float
    irr: float
    payback_period: float
    roi: float
    total_revenue: float
    total_costs: float
    total_profit: float
    profit_margin: float
    break_even_units: Optional[float] = None
    break_even_revenue: Optional[float] = None
    irr_converged: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "npv": round_money(self.npv),
            "irr": round_money(self.irr),
            "irr_converged": self.irr_converged,
            "payback_period": round_money(self.payback_period),
            "roi": round_money(self.roi),
            "total_revenue": round_money(self.total_revenue),
            "total_costs": round_money(self.total_costs),
            "total_profit": round_money(self.total_profit),
            "profit_margin": round_money(self.profit_margin),
            "break_even_units": finite_or_none(self.break_even_units),
            "break_even_revenue": round_money(finite_or_none(self.break_even_revenue)),
        }


# ============================================================================
# SCENARIOS
# ============================================================================

@dataclass(frozen=True)
class SensitivityPoint:
    """NPV response to a single input change (both in percent)"""
    change: float
    npv_change: float
    irr_converged: bool = True

    def to_dict(self) -> Dict[str, float]:
        return {"change": self.change, "npv_change": round_money(self.npv_change)}


@dataclass(frozen=True)
class ScenarioAnalysis:
    """Base, best and worst case metrics plus the sensitivity sweep"""
    base_case: FinancialMetrics
    best_case: FinancialMetrics
    worst_case: FinancialMetrics
    revenue_sensitivity: List[SensitivityPoint] = field(default_factory=list)
    cost_sensitivity: List[SensitivityPoint] = field(default_factory=list)

    @property
    def irr_converged(self) -> bool:
        """True when the IRR converged in every case and sensitivity run"""
        cases = (self.base_case, self.best_case, self.worst_case)
        points = self.revenue_sensitivity + self.cost_sensitivity
        return all(c.irr_converged for c in cases) and all(p.irr_converged for p in points)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "base_case": self.base_case.to_dict(),
            "best_case": self.best_case.to_dict(),
            "worst_case": self.worst_case.to_dict(),
            "sensitivity_analysis": {
                "revenue_impact": [p.to_dict() for p in self.revenue_sensitivity],
                "cost_impact": [p.to_dict() for p in self.cost_sensitivity],
            },
        }
