"""
Formula Library - Deterministic Event Finance Formulas

All formulas are deterministic and traceable. Division by zero never raises:
each formula resolves it to a documented sentinel (0 for percentages,
infinity for break-even) so callers can render results without guarding.
"""

import logging
import math
from typing import Any, Optional, Sequence

from ..models.results import BreakEvenResult, IRRResult, VarianceResult

logger = logging.getLogger(__name__)

DEFAULT_FNB_COGS_PCT = 30.0
DEFAULT_MERCH_COGS_PCT = 50.0

IRR_MAX_ITERATIONS = 100
IRR_TOLERANCE = 1e-6


# ============================================================================
# UTILITY FUNCTIONS
# ============================================================================

def safe_number(value: Any, default: float = 0.0) -> float:
    """
    Coerce a loosely-typed input to float.

    None, empty strings, non-numeric values, NaN and booleans all resolve
    to ``default`` so that NaN never reaches a calculation.
    """
    if value is None or isinstance(value, bool):
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if math.isnan(number):
        return default
    return number


def round_half_up(value: float) -> float:
    """Round to the nearest whole unit, halves away from negative infinity."""
    return float(math.floor(value + 0.5))


def sum_values(values: Sequence[Any]) -> float:
    """Sum a sequence of optional numbers, treating missing entries as 0."""
    return sum(safe_number(v) for v in values)


# ============================================================================
# VARIANCE
# ============================================================================

def calculate_variance(actual: Any, forecast: Any) -> VarianceResult:
    """
    Variance between an actual and a forecast value.

    Formula:
        amount = actual - forecast
        percentage = amount / forecast * 100   (0 when forecast == 0)

    Args:
        actual: Actual value
        forecast: Forecast value

    Returns:
        VarianceResult
    """
    actual = safe_number(actual)
    forecast = safe_number(forecast)
    amount = actual - forecast
    percentage = (amount / forecast) * 100 if forecast != 0 else 0.0
    return VarianceResult(amount=amount, percentage=percentage)


# ============================================================================
# COGS AND MARGINS
# ============================================================================

def calculate_cogs(
    revenue: Any,
    use_forecast_pct: bool,
    forecast_pct: Optional[Any] = None,
    manual_override: Any = 0,
    default_pct: float = DEFAULT_FNB_COGS_PCT
) -> float:
    """
    Cost of goods sold for a revenue stream.

    Formula (percentage):
        cogs = round(revenue * pct / 100)

    Formula (manual):
        cogs = manual_override

    Args:
        revenue: Revenue of the stream
        use_forecast_pct: Derive COGS from the percentage instead of the manual value
        forecast_pct: Stored percentage (0-100), ``default_pct`` when unset or 0
        manual_override: Manually entered COGS amount
        default_pct: Fallback percentage (30 for F&B, 50 for merchandise)

    Returns:
        COGS amount
    """
    if use_forecast_pct:
        pct = safe_number(forecast_pct) or default_pct
        return round_half_up(safe_number(revenue) * (pct / 100))
    return safe_number(manual_override)


def calculate_gross_margin(revenue: Any, cogs: Any) -> float:
    """
    Gross margin percentage.

    Formula:
        (revenue - cogs) / revenue * 100   (0 when revenue <= 0)
    """
    revenue = safe_number(revenue)
    cogs = safe_number(cogs)
    if revenue > 0:
        return (revenue - cogs) / revenue * 100
    return 0.0


def calculate_margin(profit: float, revenue: float) -> float:
    """Profit as a percentage of revenue, 0 when revenue <= 0"""
    return profit / revenue * 100 if revenue > 0 else 0.0


def per_unit(amount: float, units: float) -> float:
    """Amount per unit (attendee), 0 when there are no units"""
    return amount / units if units > 0 else 0.0


# ============================================================================
# TIME VALUE OF MONEY
# ============================================================================

def calculate_npv(cash_flows: Sequence[float], rate: float) -> float:
    """
    Net Present Value.

    Formula:
        NPV = sum(cf_t / (1 + rate) ** t),  t = 0 .. n-1

    The first element is the initial outlay (undiscounted). A discount
    factor too large for a float contributes 0; a zero discount base
    contributes an infinite (or NaN for a zero flow) term.
    """
    return sum(_discounted(cf, rate, t) for t, cf in enumerate(cash_flows))


def _discounted(cash_flow: float, rate: float, period: int) -> float:
    try:
        return cash_flow / (1 + rate) ** period
    except OverflowError:
        return 0.0
    except ZeroDivisionError:
        return math.copysign(math.inf, cash_flow) if cash_flow else math.nan


def solve_irr(cash_flows: Sequence[float], guess: float = 0.1) -> IRRResult:
    """
    Internal Rate of Return by Newton-Raphson.

    Iterates at most IRR_MAX_ITERATIONS times and stops when two successive
    guesses differ by less than IRR_TOLERANCE. A derivative closer to zero
    than the tolerance, an overflow or a zero discount base stops the
    iteration and returns the current guess with ``converged=False``.

    Args:
        cash_flows: Series starting with the initial outlay
        guess: Starting rate

    Returns:
        IRRResult with the best estimate
    """
    rate = guess

    for iteration in range(1, IRR_MAX_ITERATIONS + 1):
        try:
            npv = 0.0
            derivative = 0.0
            for period, cf in enumerate(cash_flows):
                npv += cf / (1 + rate) ** period
                derivative -= (period * cf) / (1 + rate) ** (period + 1)
        except (ZeroDivisionError, OverflowError):
            logger.debug("IRR iteration aborted at rate %s", rate)
            return IRRResult(rate=rate, converged=False, iterations=iteration)

        if abs(derivative) < IRR_TOLERANCE:
            return IRRResult(rate=rate, converged=False, iterations=iteration)

        new_rate = rate - npv / derivative
        if math.isnan(new_rate) or math.isinf(new_rate):
            return IRRResult(rate=rate, converged=False, iterations=iteration)

        if abs(new_rate - rate) < IRR_TOLERANCE:
            return IRRResult(rate=new_rate, converged=True, iterations=iteration)

        rate = new_rate

    return IRRResult(rate=rate, converged=False, iterations=IRR_MAX_ITERATIONS)


def calculate_irr(cash_flows: Sequence[float], guess: float = 0.1) -> float:
    """IRR as a fraction; the best guess is returned even without convergence."""
    return solve_irr(cash_flows, guess).rate


def calculate_payback_period(cash_flows: Sequence[float]) -> float:
    """
    Payback period with linear interpolation inside the crossing period.

    ``cash_flows[0]`` is the initial outlay and ``cash_flows[p]`` the flow
    of period p, so a crossing in period p lands between p - 1 and p.

    Formula:
        first p where cumulative >= 0:
            payback = (p - 1) + |cumulative_(p-1)| / cf_p

    Returns len(cash_flows) when the cumulative sum never turns non-negative.
    """
    cumulative = 0.0

    for period, cf in enumerate(cash_flows):
        cumulative += cf
        if cumulative >= 0:
            if period == 0:
                return 0.0
            previous = cumulative - cf
            return (period - 1) + abs(previous) / cf

    return float(len(cash_flows))


# ============================================================================
# BREAK-EVEN
# ============================================================================

def calculate_break_even(
    fixed_costs: float,
    variable_cost_per_unit: float,
    price_per_unit: float
) -> BreakEvenResult:
    """
    Break-even point.

    Formula:
        margin = price - variable_cost
        units = ceil(fixed_costs / margin)
        revenue = units * price

    Args:
        fixed_costs: Fixed costs to cover
        variable_cost_per_unit: Variable cost per unit sold
        price_per_unit: Selling price per unit

    Returns:
        BreakEvenResult (infinite units and revenue when margin <= 0 or
        the inputs are not finite)
    """
    contribution_margin = price_per_unit - variable_cost_per_unit
    if not contribution_margin > 0:
        return BreakEvenResult(units=math.inf, revenue=math.inf)

    ratio = fixed_costs / contribution_margin
    if not math.isfinite(ratio):
        return BreakEvenResult(units=math.inf, revenue=math.inf)

    units = math.ceil(ratio)
    return BreakEvenResult(units=float(units), revenue=units * price_per_unit)

