"""
Risk Service
Scores risk entries, summarizes a risk register and validates status changes.
"""

import logging
from typing import Any, Dict, List

from src.common.logger import log_computation
from .core.risk_calculator import RiskCalculator
from .models.risk import Risk

logger = logging.getLogger(__name__)


class RiskService:
    """Service for risk scoring. Risks arrive with the request and are never stored."""

    @staticmethod
    @log_computation("risk_score")
    def score_risk(risk_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Score a single risk.

        Raises:
            RiskValidationError: on unknown category, priority or status values
        """
        risk = Risk.from_dict(risk_data)
        return {
            "risk": risk.to_dict(),
            **RiskCalculator.score(risk),
        }

    @staticmethod
    @log_computation("risk_summary")
    def summarize_risks(risks_data: List[Dict[str, Any]]) -> Dict[str, Any]:
        """
        Summary of a risk register: counts, overall level and urgent actions.

        Raises:
            RiskValidationError: when any entry is invalid
        """
        risks = [Risk.from_dict(item) for item in risks_data]
        summary = RiskCalculator.summarize(risks)
        if summary["overall_risk_level"] in ("high", "critical"):
            logger.warning(
                f"Risk register at {summary['overall_risk_level']} level",
                extra={"total_risks": summary["total_risks"], "critical_risks": summary["critical_risks"]},
            )
        return summary

    @staticmethod
    @log_computation("risk_transition")
    def transition_risk(risk_data: Dict[str, Any], status: Any) -> Dict[str, Any]:
        """
        Move a risk to a new status.

        Raises:
            RiskValidationError: when the target status is unknown
        """
        risk = Risk.from_dict(risk_data)
        updated = risk.transition_to(status)
        logger.info(f"Risk '{risk.title}' moved from {risk.status.value} to {updated.status.value}")
        return {
            "previous_status": risk.status.value,
            "risk": updated.to_dict(),
        }
