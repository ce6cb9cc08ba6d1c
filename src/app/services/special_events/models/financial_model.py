"""
Financial Model Data Models

Revenue streams, cost items and growth assumptions that feed the cash flow
projector. Instances are frozen: a projection run never mutates its inputs,
scenario perturbations build new models through ``FinancialModel.scaled``.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Tuple
from enum import Enum


class Frequency(Enum):
    """Nominal period of a revenue stream"""
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    ANNUALLY = "annually"
    ONE_TIME = "one-time"

    @classmethod
    def parse(cls, value: Any) -> Optional["Frequency"]:
        """Lenient lookup; unknown or empty values yield None."""
        if isinstance(value, cls):
            return value
        if not value:
            return None
        try:
            return cls(str(value).lower())
        except ValueError:
            return None


class GrowthType(Enum):
    """Shape of the growth curve applied per period"""
    LINEAR = "linear"
    EXPONENTIAL = "exponential"
    LOGARITHMIC = "logarithmic"

    @classmethod
    def parse(cls, value: Any) -> Optional["GrowthType"]:
        if isinstance(value, cls):
            return value
        if not value:
            return None
        try:
            return cls(str(value).lower())
        except ValueError:
            return None


@dataclass(frozen=True)
class RevenueStream:
    """A revenue line of the model"""
    name: str
    value: float = 0.0
    type: str = ""
    frequency: Optional[Frequency] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "value": self.value,
            "type": self.type,
            "frequency": self.frequency.value if self.frequency else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RevenueStream":
        from ..core.formula_library import safe_number

        return cls(
            name=data.get("name") or "",
            value=safe_number(data.get("value")),
            type=data.get("type") or "",
            frequency=Frequency.parse(data.get("frequency")),
        )


@dataclass(frozen=True)
class CostItem:
    """A cost line of the model"""
    name: str
    value: float = 0.0
    type: str = ""
    category: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "value": self.value,
            "type": self.type,
            "category": self.category,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CostItem":
        from ..core.formula_library import safe_number

        return cls(
            name=data.get("name") or "",
            value=safe_number(data.get("value")),
            type=data.get("type") or "",
            category=data.get("category") or "",
        )


@dataclass(frozen=True)
class GrowthModel:
    """
    Growth assumption.

    ``rate`` is a fraction (0.05 = 5% per period). ``seasonality`` holds
    multipliers indexed by month (12 entries) or by quarter when the model is
    projected weekly (4 entries, 13 weeks each).
    """
    type: Optional[GrowthType] = None
    rate: float = 0.0
    seasonality: Tuple[float, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type.value if self.type else None,
            "rate": self.rate,
            "seasonality": list(self.seasonality),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GrowthModel":
        from ..core.formula_library import safe_number

        seasonality = data.get("seasonality") or []
        return cls(
            type=GrowthType.parse(data.get("type")),
            rate=safe_number(data.get("rate")),
            seasonality=tuple(safe_number(m) for m in seasonality),
        )


@dataclass(frozen=True)
class FinancialModel:
    """Assumptions of a financial model: revenue streams, costs and growth"""
    name: str = "Financial Model"
    revenue_streams: Tuple[RevenueStream, ...] = field(default_factory=tuple)
    cost_items: Tuple[CostItem, ...] = field(default_factory=tuple)
    growth_model: Optional[GrowthModel] = None

    @property
    def total_revenue(self) -> float:
        """Sum of the base revenue values"""
        return sum(stream.value for stream in self.revenue_streams)

    @property
    def total_costs(self) -> float:
        """Sum of the base cost values"""
        return sum(item.value for item in self.cost_items)

    def scaled(self, revenue_multiplier: float = 1.0, cost_multiplier: float = 1.0) -> "FinancialModel":
        """Return a copy with every revenue and cost value multiplied."""
        return replace(
            self,
            revenue_streams=tuple(
                replace(stream, value=stream.value * revenue_multiplier)
                for stream in self.revenue_streams
            ),
            cost_items=tuple(
                replace(item, value=item.value * cost_multiplier)
                for item in self.cost_items
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "revenue_streams": [s.to_dict() for s in self.revenue_streams],
            "cost_items": [c.to_dict() for c in self.cost_items],
            "growth_model": self.growth_model.to_dict() if self.growth_model else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FinancialModel":
        """
        Build a model from a request payload.

        Accepts the nested ``assumptions`` shape stored by the planning UI
        (``{"assumptions": {"revenue": [...], "costs": [...], "growthModel": {...}}}``)
        as well as the flat ``revenue_streams``/``cost_items``/``growth_model`` shape.
        """
        assumptions = data.get("assumptions") or {}
        revenue = data.get("revenue_streams")
        if revenue is None:
            revenue = assumptions.get("revenue") or []
        costs = data.get("cost_items")
        if costs is None:
            costs = assumptions.get("costs") or []
        growth = data.get("growth_model")
        if growth is None:
            growth = assumptions.get("growthModel") or assumptions.get("growth_model")

        return cls(
            name=data.get("name") or "Financial Model",
            revenue_streams=tuple(RevenueStream.from_dict(r) for r in revenue),
            cost_items=tuple(CostItem.from_dict(c) for c in costs),
            growth_model=GrowthModel.from_dict(growth) if growth else None,
        )


def build_model(
    revenue_streams: List[Dict[str, Any]],
    cost_items: List[Dict[str, Any]],
    growth_model: Optional[Dict[str, Any]] = None,
    name: str = "Financial Model"
) -> FinancialModel:
    """Convenience constructor from plain dict lists."""
    return FinancialModel.from_dict({
        "name": name,
        "revenue_streams": revenue_streams,
        "cost_items": cost_items,
        "growth_model": growth_model,
    })
