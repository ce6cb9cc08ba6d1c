"""
Scenario Templates and Modifiers

Defines scenario types (Base, Best Case, Worst Case) and the multipliers
applied to a financial model's revenue and cost values.
"""

from dataclasses import dataclass
from typing import Any, Dict, Tuple
from enum import Enum


class ScenarioType(Enum):
    """Predefined scenario types"""
    BASE = "base"
    BEST_CASE = "best_case"
    WORST_CASE = "worst_case"
    CUSTOM = "custom"


@dataclass(frozen=True)
class ScenarioModifiers:
    """
    Multipliers for a scenario.
    Values are applied to every revenue stream and every cost item.
    """
    name: str = "Base"
    description: str = "Unmodified assumptions"
    revenue_multiplier: float = 1.0
    cost_multiplier: float = 1.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "revenue_multiplier": self.revenue_multiplier,
            "cost_multiplier": self.cost_multiplier,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScenarioModifiers":
        return cls(
            name=data.get("name", "Custom"),
            description=data.get("description", ""),
            revenue_multiplier=data.get("revenue_multiplier", 1.0),
            cost_multiplier=data.get("cost_multiplier", 1.0),
        )


# ============================================================================
# SCENARIO PRESETS
# ============================================================================

SCENARIO_BASE = ScenarioModifiers(
    name="Base",
    description="Unmodified assumptions",
    revenue_multiplier=1.0,
    cost_multiplier=1.0,
)

SCENARIO_BEST_CASE = ScenarioModifiers(
    name="Best Case",
    description="Revenue +20%, costs -10%",
    revenue_multiplier=1.2,
    cost_multiplier=0.9,
)

SCENARIO_WORST_CASE = ScenarioModifiers(
    name="Worst Case",
    description="Revenue -20%, costs +15%",
    revenue_multiplier=0.8,
    cost_multiplier=1.15,
)

SCENARIO_PRESETS: Dict[ScenarioType, ScenarioModifiers] = {
    ScenarioType.BASE: SCENARIO_BASE,
    ScenarioType.BEST_CASE: SCENARIO_BEST_CASE,
    ScenarioType.WORST_CASE: SCENARIO_WORST_CASE,
}

# Sensitivity sweep deltas (fractions)
REVENUE_SENSITIVITY_CHANGES: Tuple[float, ...] = (-0.3, -0.2, -0.1, 0.0, 0.1, 0.2, 0.3)
COST_SENSITIVITY_CHANGES: Tuple[float, ...] = (-0.2, -0.1, 0.0, 0.1, 0.2, 0.3)


def get_scenario_modifiers(scenario_type: ScenarioType) -> ScenarioModifiers:
    """Get the preset modifiers for a scenario type (base for unknown types)."""
    return SCENARIO_PRESETS.get(scenario_type, SCENARIO_BASE)
