"""
Financial Model Service
Runs cash flow projections, time value analysis and scenario sweeps for
financial models submitted with the request.
"""

import hashlib
import json
import logging
from typing import Any, Dict, Optional

from flask import current_app, has_app_context

from src.common.exceptions import FinancialModelError
from src.common.localization import get_message
from src.common.logger import log_computation
from src.config import get_finance_defaults
from src.extensions import cache
from .core.cash_flow_projector import CashFlowProjector
from .core.formula_library import calculate_break_even
from .core.scenario_analyzer import ScenarioAnalyzer
from .core.time_value_analyzer import TimeValueAnalyzer
from .models.financial_model import FinancialModel
from .models.results import round_money
from .models.scenario import ScenarioModifiers, ScenarioType, get_scenario_modifiers

logger = logging.getLogger(__name__)

SCENARIO_CACHE_NAMESPACE = "scenarios"


def make_cache_key(namespace: str, payload: Dict[str, Any]) -> str:
    """
    Deterministic cache key for a request payload.

    Example:
        make_cache_key("scenarios", {...}) -> "scenarios:3f2a..."
    """
    digest = hashlib.sha256(
        json.dumps(payload, sort_keys=True, default=str).encode("utf-8")
    ).hexdigest()
    return f"{namespace}:{digest}"


class FinancialModelService:
    """
    Service to project and evaluate financial models.
    Every call works on its own model instance; nothing is retained between calls.
    """

    @staticmethod
    def build_model(payload: Dict[str, Any], locale: str = None) -> FinancialModel:
        """
        Build a FinancialModel from a validated payload.

        Raises:
            FinancialModelError: when the model has neither revenue streams nor cost items
        """
        model = FinancialModel.from_dict(payload)
        if not model.revenue_streams and not model.cost_items:
            raise FinancialModelError(get_message("financial_model_empty", locale))
        return model

    @staticmethod
    def _run_options(payload: Dict[str, Any]) -> Dict[str, Any]:
        defaults = get_finance_defaults(current_app.config if has_app_context() else None)
        periods = payload.get("periods")
        discount_rate = payload.get("discount_rate")
        return {
            "periods": defaults["periods"] if periods is None else periods,
            "discount_rate": defaults["discount_rate"] if discount_rate is None else discount_rate,
            "is_weekly": bool(payload.get("is_weekly", False)),
        }

    @staticmethod
    @log_computation("cash_flow_projection")
    def project_cash_flow(payload: Dict[str, Any], locale: str = None) -> Dict[str, Any]:
        """
        Project the model period by period.

        Returns:
            {"model", "periods", "is_weekly", "cash_flows", "totals"}
        """
        model = FinancialModelService.build_model(payload, locale)
        options = FinancialModelService._run_options(payload)

        cash_flows = CashFlowProjector().project(model, options["periods"], options["is_weekly"])
        total_revenue = sum(cf.revenue for cf in cash_flows)
        total_costs = sum(cf.costs for cf in cash_flows)

        return {
            "model": model.name,
            "periods": options["periods"],
            "is_weekly": options["is_weekly"],
            "cash_flows": [cf.to_dict() for cf in cash_flows],
            "totals": {
                "revenue": round_money(total_revenue),
                "costs": round_money(total_costs),
                "net_income": round_money(total_revenue - total_costs),
                "ending_cash": round_money(cash_flows[-1].cumulative_cash_flow) if cash_flows else 0.0,
            },
        }

    @staticmethod
    @log_computation("financial_analysis")
    def analyze(payload: Dict[str, Any], locale: str = None) -> Dict[str, Any]:
        """
        Time value metrics of the model, optionally under a scenario.

        ``scenario`` selects a preset (base, best_case, worst_case) or
        ``custom`` together with ``modifiers``.

        Returns:
            {"model", "scenario", "modifiers", "metrics", "warnings"}
        """
        model = FinancialModelService.build_model(payload, locale)
        options = FinancialModelService._run_options(payload)

        scenario_type = ScenarioType(payload.get("scenario") or ScenarioType.BASE.value)
        modifiers: Optional[ScenarioModifiers] = None
        if scenario_type == ScenarioType.CUSTOM:
            modifiers = ScenarioModifiers.from_dict(payload.get("modifiers") or {})

        analyzer = ScenarioAnalyzer(TimeValueAnalyzer())
        metrics = analyzer.run_scenario(
            model,
            scenario_type,
            options["periods"],
            options["discount_rate"],
            options["is_weekly"],
            modifiers=modifiers,
        )

        applied = modifiers or get_scenario_modifiers(scenario_type)

        return {
            "model": model.name,
            "scenario": scenario_type.value,
            "modifiers": applied.to_dict(),
            "metrics": metrics.to_dict(),
            "warnings": FinancialModelService._localized_warnings(metrics.irr_converged, locale),
        }

    @staticmethod
    @log_computation("scenario_analysis")
    def analyze_scenarios(payload: Dict[str, Any], locale: str = None) -> Dict[str, Any]:
        """
        Base, best and worst case plus the sensitivity sweep.

        The IRR warning covers every run, sensitivity runs included.
        Results are memoized in the configured cache, keyed by the payload.

        Returns:
            {"model", "scenarios", "warnings", "cached"}
        """
        cache_key = make_cache_key(SCENARIO_CACHE_NAMESPACE, {"payload": payload, "locale": locale})
        cached = cache.get(cache_key)
        if cached is not None:
            logger.debug("Scenario analysis served from cache")
            return {**cached, "cached": True}

        model = FinancialModelService.build_model(payload, locale)
        options = FinancialModelService._run_options(payload)

        analysis = ScenarioAnalyzer().analyze(
            model,
            options["periods"],
            options["discount_rate"],
            options["is_weekly"],
        )

        result = {
            "model": model.name,
            "scenarios": analysis.to_dict(),
            "warnings": FinancialModelService._localized_warnings(analysis.irr_converged, locale),
        }

        timeout = current_app.config.get("SCENARIO_CACHE_TIMEOUT") if has_app_context() else None
        cache.set(cache_key, result, timeout=timeout)
        return {**result, "cached": False}

    @staticmethod
    @log_computation("break_even")
    def calculate_break_even(
        fixed_costs: float,
        variable_cost_per_unit: float,
        price_per_unit: float
    ) -> Dict[str, Any]:
        """Break-even units and revenue; null values when the margin is not positive"""
        result = calculate_break_even(fixed_costs, variable_cost_per_unit, price_per_unit)
        return {
            "fixed_costs": fixed_costs,
            "variable_cost_per_unit": variable_cost_per_unit,
            "price_per_unit": price_per_unit,
            "contribution_margin": round(price_per_unit - variable_cost_per_unit, 2),
            **result.to_dict(),
        }

    @staticmethod
    def _localized_warnings(irr_converged: bool, locale: str = None):
        if irr_converged:
            return []
        return [get_message("irr_not_converged", locale)]
