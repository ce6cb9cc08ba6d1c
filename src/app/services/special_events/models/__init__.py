"""
Models package for the special events financial engine.

Contains dataclasses for:
- FinancialModel: Revenue streams, cost items and growth assumptions
- Records: Forecast and actual records of an event
- Results: Computation results (financials, cash flow, metrics, scenarios)
- Scenario: Scenario presets (Base, Best Case, Worst Case)
- Risk: Risk entries and their enums
"""

from .financial_model import (
    Frequency,
    GrowthType,
    RevenueStream,
    CostItem,
    GrowthModel,
    FinancialModel,
    build_model,
)
from .records import (
    ForecastRecord,
    ActualRecord,
    canonical_actual,
    REVENUE_FIELDS,
    COST_FIELDS,
    MARKETING_BUDGET_FIELDS,
)
from .results import (
    VarianceResult,
    ZERO_VARIANCE,
    IRRResult,
    BreakEvenResult,
    EventFinancials,
    EventComparison,
    EventROI,
    MarketingEfficiency,
    CashFlowPeriod,
    FinancialMetrics,
    SensitivityPoint,
    ScenarioAnalysis,
    finite_or_none,
)
from .scenario import (
    ScenarioType,
    ScenarioModifiers,
    SCENARIO_PRESETS,
    REVENUE_SENSITIVITY_CHANGES,
    COST_SENSITIVITY_CHANGES,
    get_scenario_modifiers,
)
from .risk import (
    Risk,
    RiskCategory,
    RiskPriority,
    RiskStatus,
)

__all__ = [
    # Financial model
    "Frequency",
    "GrowthType",
    "RevenueStream",
    "CostItem",
    "GrowthModel",
    "FinancialModel",
    "build_model",
    # Records
    "ForecastRecord",
    "ActualRecord",
    "canonical_actual",
    "REVENUE_FIELDS",
    "COST_FIELDS",
    "MARKETING_BUDGET_FIELDS",
    # Results
    "VarianceResult",
    "ZERO_VARIANCE",
    "IRRResult",
    "BreakEvenResult",
    "EventFinancials",
    "EventComparison",
    "EventROI",
    "MarketingEfficiency",
    "CashFlowPeriod",
    "FinancialMetrics",
    "SensitivityPoint",
    "ScenarioAnalysis",
    "finite_or_none",
    # Scenario
    "ScenarioType",
    "ScenarioModifiers",
    "SCENARIO_PRESETS",
    "REVENUE_SENSITIVITY_CHANGES",
    "COST_SENSITIVITY_CHANGES",
    "get_scenario_modifiers",
    # Risk
    "Risk",
    "RiskCategory",
    "RiskPriority",
    "RiskStatus",
]
