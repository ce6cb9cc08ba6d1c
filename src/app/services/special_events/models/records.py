"""
Special Event Forecast and Actual Records

Explicit record types for the loosely-typed payloads captured by the event
planning forms. ``from_dict`` is the single normalization step: every missing,
null or non-numeric amount becomes 0 before any calculation sees it.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, List, Optional, Union

# Revenue and cost field suffixes shared by forecast ("forecast_") and
# actual ("actual_") records.
REVENUE_FIELDS = (
    "ticket_sales",
    "fnb_revenue",
    "merch_revenue",
    "sponsorship_income",
    "other_income",
)

COST_FIELDS = (
    "staffing_costs",
    "venue_costs",
    "vendor_costs",
    "marketing_costs",
    "production_costs",
    "other_costs",
)

MARKETING_BUDGET_FIELDS = (
    "marketing_email_budget",
    "marketing_social_budget",
    "marketing_influencer_budget",
    "marketing_paid_ads_budget",
    "marketing_content_budget",
)


def _numeric_kwargs(cls, data: Dict[str, Any]) -> Dict[str, Any]:
    """Normalize every float field of ``cls`` found in ``data``."""
    from ..core.formula_library import safe_number

    kwargs = {}
    for f in fields(cls):
        if f.type in (float, "float"):
            kwargs[f.name] = safe_number(data.get(f.name))
    return kwargs


def _flag(value: Any) -> bool:
    """COGS percentage flags: unset (None) means on."""
    return True if value is None else bool(value)


def _text_kwargs(cls, data: Dict[str, Any]) -> Dict[str, Any]:
    kwargs = {}
    for f in fields(cls):
        if f.type in (Optional[str], "Optional[str]"):
            value = data.get(f.name)
            kwargs[f.name] = str(value) if value not in (None, "") else None
    return kwargs


@dataclass(frozen=True)
class ForecastRecord:
    """Forecast of a special event"""
    forecast_ticket_sales: float = 0.0
    forecast_fnb_revenue: float = 0.0
    forecast_merch_revenue: float = 0.0
    forecast_sponsorship_income: float = 0.0
    forecast_other_income: float = 0.0

    forecast_staffing_costs: float = 0.0
    forecast_venue_costs: float = 0.0
    forecast_vendor_costs: float = 0.0
    forecast_marketing_costs: float = 0.0
    forecast_production_costs: float = 0.0
    forecast_other_costs: float = 0.0

    # None means "unset": the default percentage applies
    forecast_fnb_cogs_pct: Optional[float] = None
    forecast_merch_cogs_pct: Optional[float] = None

    estimated_attendance: float = 0.0
    ticket_price: float = 0.0

    marketing_email_budget: float = 0.0
    marketing_social_budget: float = 0.0
    marketing_influencer_budget: float = 0.0
    marketing_paid_ads_budget: float = 0.0
    marketing_content_budget: float = 0.0

    marketing_strategy: Optional[str] = None
    notes: Optional[str] = None

    def revenue_values(self) -> List[float]:
        return [getattr(self, f"forecast_{name}") for name in REVENUE_FIELDS]

    def cost_values(self) -> List[float]:
        return [getattr(self, f"forecast_{name}") for name in COST_FIELDS]

    def marketing_budgets(self) -> Dict[str, float]:
        return {name: getattr(self, name) for name in MARKETING_BUDGET_FIELDS}

    @property
    def expected_ticket_revenue(self) -> float:
        """Attendance times ticket price"""
        return self.estimated_attendance * self.ticket_price

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "ForecastRecord":
        from ..core.formula_library import safe_number

        data = data or {}
        kwargs = _numeric_kwargs(cls, data)
        kwargs.update(_text_kwargs(cls, data))
        for pct_field in ("forecast_fnb_cogs_pct", "forecast_merch_cogs_pct"):
            raw = data.get(pct_field)
            kwargs[pct_field] = None if raw is None else safe_number(raw)
        return cls(**kwargs)


@dataclass(frozen=True)
class ActualRecord:
    """Actual results of a special event, recorded after it took place"""
    actual_ticket_sales: float = 0.0
    actual_fnb_revenue: float = 0.0
    actual_merch_revenue: float = 0.0
    actual_sponsorship_income: float = 0.0
    actual_other_income: float = 0.0

    actual_staffing_costs: float = 0.0
    actual_venue_costs: float = 0.0
    actual_vendor_costs: float = 0.0
    actual_marketing_costs: float = 0.0
    actual_production_costs: float = 0.0
    actual_other_costs: float = 0.0

    use_forecast_fnb_cogs_pct: bool = True
    use_forecast_merch_cogs_pct: bool = True
    manual_fnb_cogs: float = 0.0
    manual_merch_cogs: float = 0.0

    actual_attendance: float = 0.0
    average_ticket_price: float = 0.0

    success_rating: Optional[int] = None

    key_success_factors: Optional[str] = None
    challenges_faced: Optional[str] = None
    lessons_learned: Optional[str] = None
    recommendations_future: Optional[str] = None
    customer_feedback_summary: Optional[str] = None
    team_feedback: Optional[str] = None
    vendor_feedback: Optional[str] = None
    marketing_roi_notes: Optional[str] = None
    revenue_variance_notes: Optional[str] = None
    cost_variance_notes: Optional[str] = None
    general_notes: Optional[str] = None

    def revenue_values(self) -> List[float]:
        return [getattr(self, f"actual_{name}") for name in REVENUE_FIELDS]

    def cost_values(self) -> List[float]:
        return [getattr(self, f"actual_{name}") for name in COST_FIELDS]

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "ActualRecord":
        data = data or {}
        kwargs = _numeric_kwargs(cls, data)
        kwargs.update(_text_kwargs(cls, data))
        kwargs["use_forecast_fnb_cogs_pct"] = _flag(data.get("use_forecast_fnb_cogs_pct"))
        kwargs["use_forecast_merch_cogs_pct"] = _flag(data.get("use_forecast_merch_cogs_pct"))
        rating = data.get("success_rating")
        kwargs["success_rating"] = int(rating) if isinstance(rating, (int, float)) and not isinstance(rating, bool) else None
        return cls(**kwargs)


def canonical_actual(
    actuals: Union[None, Dict[str, Any], List[Dict[str, Any]]]
) -> Optional[ActualRecord]:
    """
    Resolve the actuals payload to a single record.

    Some flows submit a list of actuals; the first entry is canonical.
    """
    if not actuals:
        return None
    if isinstance(actuals, list):
        return ActualRecord.from_dict(actuals[0])
    return ActualRecord.from_dict(actuals)
