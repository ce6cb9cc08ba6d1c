"""
Core package for the special events financial engine.

Contains:
- formula_library: Deterministic formulas (variance, COGS, margins, NPV, IRR, payback, break-even)
- event_aggregator: Forecast/actual totals, comparison and event ROI
- marketing_calculator: Marketing ROI and customer acquisition cost
- cash_flow_projector: Period-by-period cash flow projection
- time_value_analyzer: NPV/IRR/payback/break-even over a projection
- scenario_analyzer: Best/worst case and sensitivity sweep
- risk_calculator: Risk scores and portfolio summary
"""

from .formula_library import (
    safe_number,
    round_half_up,
    calculate_variance,
    calculate_cogs,
    calculate_gross_margin,
    calculate_npv,
    calculate_irr,
    solve_irr,
    calculate_payback_period,
    calculate_break_even,
    DEFAULT_FNB_COGS_PCT,
    DEFAULT_MERCH_COGS_PCT,
)
from .event_aggregator import EventFinancialsAggregator
from .marketing_calculator import MarketingEfficiencyCalculator
from .cash_flow_projector import CashFlowProjector
from .time_value_analyzer import TimeValueAnalyzer
from .scenario_analyzer import ScenarioAnalyzer
from .risk_calculator import RiskCalculator

__all__ = [
    # Formula library
    "safe_number",
    "round_half_up",
    "calculate_variance",
    "calculate_cogs",
    "calculate_gross_margin",
    "calculate_npv",
    "calculate_irr",
    "solve_irr",
    "calculate_payback_period",
    "calculate_break_even",
    "DEFAULT_FNB_COGS_PCT",
    "DEFAULT_MERCH_COGS_PCT",
    # Classes
    "EventFinancialsAggregator",
    "MarketingEfficiencyCalculator",
    "CashFlowProjector",
    "TimeValueAnalyzer",
    "ScenarioAnalyzer",
    "RiskCalculator",
]
