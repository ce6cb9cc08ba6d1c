"""
Scenario Analyzer

Runs the time value analysis under the best/worst case presets and a
one-at-a-time sensitivity sweep over revenue and cost changes.
"""

import logging
from typing import List, Optional, Sequence

from .time_value_analyzer import TimeValueAnalyzer
from ..models.financial_model import FinancialModel
from ..models.results import FinancialMetrics, ScenarioAnalysis, SensitivityPoint
from ..models.scenario import (
    COST_SENSITIVITY_CHANGES,
    REVENUE_SENSITIVITY_CHANGES,
    ScenarioModifiers,
    ScenarioType,
    get_scenario_modifiers,
)

logger = logging.getLogger(__name__)


class ScenarioAnalyzer:
    """
    Orchestrates CashFlowProjector and TimeValueAnalyzer under parameter deltas.
    Models are never mutated; every scenario runs on a scaled copy.
    """

    def __init__(self, analyzer: Optional[TimeValueAnalyzer] = None):
        self.analyzer = analyzer or TimeValueAnalyzer()

    @staticmethod
    def npv_change(scenario_npv: float, base_npv: float) -> float:
        """
        Percentage change of NPV against the base case.

        Formula:
            (scenario_npv - base_npv) / |base_npv| * 100   (0 when base_npv == 0)
        """
        if base_npv == 0:
            return 0.0
        return (scenario_npv - base_npv) / abs(base_npv) * 100

    def run_scenario(
        self,
        model: FinancialModel,
        scenario: ScenarioType = ScenarioType.BASE,
        periods: int = 36,
        discount_rate: float = 0.1,
        is_weekly: bool = False,
        modifiers: Optional[ScenarioModifiers] = None
    ) -> FinancialMetrics:
        """
        Analyze one scenario.

        Custom scenarios use ``modifiers``; presets ignore it.
        """
        if scenario != ScenarioType.CUSTOM or modifiers is None:
            modifiers = get_scenario_modifiers(scenario)

        scenario_model = model.scaled(modifiers.revenue_multiplier, modifiers.cost_multiplier)
        return self.analyzer.analyze(scenario_model, periods, discount_rate, is_weekly)

    def sensitivity(
        self,
        model: FinancialModel,
        base_npv: float,
        changes: Sequence[float],
        vary: str,
        periods: int = 36,
        discount_rate: float = 0.1,
        is_weekly: bool = False
    ) -> List[SensitivityPoint]:
        """
        Vary one input ("revenue" or "costs") by each change and report the
        NPV response. Both ``change`` and ``npv_change`` are percentages.
        """
        points = []
        for change in changes:
            if vary == "revenue":
                varied = model.scaled(revenue_multiplier=1 + change)
            else:
                varied = model.scaled(cost_multiplier=1 + change)
            metrics = self.analyzer.analyze(varied, periods, discount_rate, is_weekly)
            points.append(SensitivityPoint(
                change=round(change * 100, 6),
                npv_change=self.npv_change(metrics.npv, base_npv),
                irr_converged=metrics.irr_converged,
            ))
        return points

    def analyze(
        self,
        model: FinancialModel,
        periods: int = 36,
        discount_rate: float = 0.1,
        is_weekly: bool = False
    ) -> ScenarioAnalysis:
        """
        Base, best and worst case plus the sensitivity sweep.

        Args:
            model: Financial model assumptions
            periods: Number of periods to project
            discount_rate: Per-period discount rate (fraction)
            is_weekly: Weekly periods instead of monthly

        Returns:
            ScenarioAnalysis
        """
        base_case = self.run_scenario(model, ScenarioType.BASE, periods, discount_rate, is_weekly)
        best_case = self.run_scenario(model, ScenarioType.BEST_CASE, periods, discount_rate, is_weekly)
        worst_case = self.run_scenario(model, ScenarioType.WORST_CASE, periods, discount_rate, is_weekly)

        revenue_sensitivity = self.sensitivity(
            model, base_case.npv, REVENUE_SENSITIVITY_CHANGES, "revenue",
            periods, discount_rate, is_weekly
        )
        cost_sensitivity = self.sensitivity(
            model, base_case.npv, COST_SENSITIVITY_CHANGES, "costs",
            periods, discount_rate, is_weekly
        )

        logger.debug(
            "Scenario NPVs for '%s': best %.2f, base %.2f, worst %.2f",
            model.name, best_case.npv, base_case.npv, worst_case.npv
        )

        return ScenarioAnalysis(
            base_case=base_case,
            best_case=best_case,
            worst_case=worst_case,
            revenue_sensitivity=revenue_sensitivity,
            cost_sensitivity=cost_sensitivity,
        )
