"""
Risk Data Models

Risks are created by a user action and move through soft status states;
they are never deleted.
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional
from enum import Enum


class RiskCategory(Enum):
    CUSTOMER = "customer"
    REVENUE = "revenue"
    TIMELINE = "timeline"
    RESOURCES = "resources"
    MARKET = "market"


class RiskPriority(Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class RiskStatus(Enum):
    IDENTIFIED = "identified"
    MONITORING = "monitoring"
    MITIGATING = "mitigating"
    RESOLVED = "resolved"


RISK_CATEGORY_LABELS = {
    RiskCategory.CUSTOMER: "Customer & Market",
    RiskCategory.REVENUE: "Revenue & Financial",
    RiskCategory.TIMELINE: "Timeline & Delivery",
    RiskCategory.RESOURCES: "Resources & Team",
    RiskCategory.MARKET: "External Factors",
}


@dataclass(frozen=True)
class Risk:
    """
    A tracked risk.

    ``probability`` and ``impact_score`` are percentages (0-100);
    ``risk_score`` is derived from them.
    """
    title: str
    category: RiskCategory = RiskCategory.MARKET
    priority: RiskPriority = RiskPriority.MEDIUM
    status: RiskStatus = RiskStatus.IDENTIFIED
    probability: float = 50.0
    impact_score: float = 50.0
    description: Optional[str] = None
    mitigation_plan: Optional[str] = None
    owner: Optional[str] = None

    @property
    def risk_score(self) -> int:
        from ..core.risk_calculator import RiskCalculator

        return RiskCalculator.calculate_risk_score(self.probability, self.impact_score)

    @property
    def is_open(self) -> bool:
        return self.status != RiskStatus.RESOLVED

    def transition_to(self, status: Any) -> "Risk":
        """
        Return a copy of the risk in the new status.

        Raises:
            RiskValidationError: if ``status`` is not a known risk status
        """
        from src.common.exceptions import RiskValidationError

        try:
            new_status = status if isinstance(status, RiskStatus) else RiskStatus(status)
        except ValueError:
            raise RiskValidationError(
                f"Unknown risk status: {status}",
                details={"allowed": [s.value for s in RiskStatus]},
            )
        return replace(self, status=new_status)

    def to_dict(self) -> Dict[str, Any]:
        from ..core.risk_calculator import RiskCalculator

        score = self.risk_score
        return {
            "title": self.title,
            "description": self.description,
            "category": self.category.value,
            "category_label": RISK_CATEGORY_LABELS[self.category],
            "priority": self.priority.value,
            "status": self.status.value,
            "probability": self.probability,
            "impact_score": self.impact_score,
            "risk_score": score,
            "risk_level": RiskCalculator.risk_score_label(score),
            "mitigation_plan": self.mitigation_plan,
            "owner": self.owner,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Risk":
        """
        Build a risk from a payload.

        Raises:
            RiskValidationError: on unknown category, priority or status values
        """
        from src.common.exceptions import RiskValidationError
        from ..core.formula_library import safe_number

        try:
            category = RiskCategory(data.get("category") or RiskCategory.MARKET.value)
            priority = RiskPriority(data.get("priority") or RiskPriority.MEDIUM.value)
            status = RiskStatus(data.get("status") or RiskStatus.IDENTIFIED.value)
        except ValueError as e:
            raise RiskValidationError(str(e))

        return cls(
            title=data.get("title") or "",
            description=data.get("description"),
            category=category,
            priority=priority,
            status=status,
            probability=safe_number(data.get("probability"), 50.0),
            impact_score=safe_number(data.get("impact_score"), 50.0),
            mitigation_plan=data.get("mitigation_plan"),
            owner=data.get("owner"),
        )
