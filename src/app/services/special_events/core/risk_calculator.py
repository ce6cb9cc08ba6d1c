"""
Risk Calculator

Risk scoring and portfolio summary:
- Risk score (probability x impact on a 0-100 scale)
- Score label (low / medium / high / critical)
- Priority-weighted score on the 1-25 scale
- Summary of a list of risks
"""

from typing import Any, Dict, Iterable, List

from .formula_library import round_half_up, safe_number
from ..models.risk import Risk, RiskPriority, RiskStatus

PRIORITY_MULTIPLIERS = {
    RiskPriority.LOW: 1.0,
    RiskPriority.MEDIUM: 1.5,
    RiskPriority.HIGH: 2.0,
    RiskPriority.CRITICAL: 3.0,
}

SCORE_THRESHOLDS = (
    (75, "critical"),
    (50, "high"),
    (25, "medium"),
)


class RiskCalculator:
    """Calculator for risk scores. All methods are pure."""

    @staticmethod
    def calculate_risk_score(probability: Any, impact_score: Any) -> int:
        """
        Risk score on a 0-100 scale.

        Formula:
            score = round(probability * impact_score / 100)
        """
        probability = safe_number(probability)
        impact_score = safe_number(impact_score)
        return int(round_half_up(probability * impact_score / 100))

    @staticmethod
    def risk_score_label(score: float) -> str:
        for threshold, label in SCORE_THRESHOLDS:
            if score >= threshold:
                return label
        return "low"

    @staticmethod
    def to_five_point_scale(percentage: Any) -> int:
        """Map a 0-100 percentage onto the 1-5 scale used by weighted scores"""
        percentage = safe_number(percentage)
        if percentage <= 20:
            return 1
        if percentage <= 40:
            return 2
        if percentage <= 60:
            return 3
        if percentage <= 80:
            return 4
        return 5

    @classmethod
    def calculate_weighted_score(
        cls,
        probability: Any,
        impact_score: Any,
        priority: RiskPriority
    ) -> int:
        """
        Priority-weighted score on the 1-25 scale.

        Formula:
            score = clamp(round(p5 * i5 * multiplier), 1, 25)

        where p5 and i5 are the 1-5 scale values and the multiplier depends
        on the priority (low 1.0, medium 1.5, high 2.0, critical 3.0).
        """
        base = cls.to_five_point_scale(probability) * cls.to_five_point_scale(impact_score)
        weighted = round_half_up(base * PRIORITY_MULTIPLIERS[priority])
        return int(min(25, max(1, weighted)))

    @classmethod
    def score(cls, risk: Risk) -> Dict[str, Any]:
        """Score details of a single risk"""
        score = cls.calculate_risk_score(risk.probability, risk.impact_score)
        return {
            "risk_score": score,
            "risk_level": cls.risk_score_label(score),
            "weighted_score": cls.calculate_weighted_score(
                risk.probability, risk.impact_score, risk.priority
            ),
        }

    @staticmethod
    def overall_level(total: int, critical: int, high: int) -> str:
        """
        Portfolio risk level.

        critical when any risk is critical, high with more than two high
        risks, medium with more than five risks in total, low otherwise.
        """
        if critical > 0:
            return "critical"
        if high > 2:
            return "high"
        if total > 5:
            return "medium"
        return "low"

    @classmethod
    def summarize(cls, risks: Iterable[Risk]) -> Dict[str, Any]:
        """
        Summary of a list of risks: counts by priority and status, overall
        level, urgent actions (open high/critical risks) and score statistics.
        """
        risks = list(risks)
        by_priority = {p.value: 0 for p in RiskPriority}
        by_status = {s.value: 0 for s in RiskStatus}
        for risk in risks:
            by_priority[risk.priority.value] += 1
            by_status[risk.status.value] += 1

        scores: List[int] = [risk.risk_score for risk in risks]
        urgent = [
            risk for risk in risks
            if risk.priority in (RiskPriority.HIGH, RiskPriority.CRITICAL) and risk.is_open
        ]
        urgent.sort(key=lambda r: r.risk_score, reverse=True)

        critical = by_priority[RiskPriority.CRITICAL.value]
        high = by_priority[RiskPriority.HIGH.value]

        return {
            "total_risks": len(risks),
            "critical_risks": critical,
            "high_risks": high,
            "open_risks": sum(1 for risk in risks if risk.is_open),
            "by_priority": by_priority,
            "by_status": by_status,
            "overall_risk_level": cls.overall_level(len(risks), critical, high),
            "average_risk_score": round(sum(scores) / len(scores), 2) if scores else 0.0,
            "max_risk_score": max(scores) if scores else 0,
            "urgent_actions": [risk.to_dict() for risk in urgent],
        }
