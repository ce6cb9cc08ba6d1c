"""
Tests for ScenarioAnalyzer and scenario presets
"""
import pytest

from src.app.services.special_events.core.scenario_analyzer import ScenarioAnalyzer
from src.app.services.special_events.models.financial_model import FinancialModel
from src.app.services.special_events.models.scenario import (
    COST_SENSITIVITY_CHANGES,
    REVENUE_SENSITIVITY_CHANGES,
    ScenarioModifiers,
    ScenarioType,
    get_scenario_modifiers,
)


@pytest.fixture
def flat_model(financial_model_payload):
    return FinancialModel.from_dict(financial_model_payload)


class TestPresets:
    """Scenario presets"""

    def test_best_case(self):
        modifiers = get_scenario_modifiers(ScenarioType.BEST_CASE)
        assert modifiers.revenue_multiplier == 1.2
        assert modifiers.cost_multiplier == 0.9

    def test_worst_case(self):
        modifiers = get_scenario_modifiers(ScenarioType.WORST_CASE)
        assert modifiers.revenue_multiplier == 0.8
        assert modifiers.cost_multiplier == 1.15

    def test_custom_falls_back_to_base(self):
        assert get_scenario_modifiers(ScenarioType.CUSTOM).name == 'Base'


class TestNpvChange:
    """npv_change"""

    def test_percentage_change(self):
        assert ScenarioAnalyzer.npv_change(150, 100) == pytest.approx(50.0)

    def test_negative_base(self):
        """Relative to the magnitude of the base NPV"""
        assert ScenarioAnalyzer.npv_change(-50, -100) == pytest.approx(50.0)

    def test_zero_base(self):
        assert ScenarioAnalyzer.npv_change(150, 0) == 0.0


class TestAnalyze:
    """analyze"""

    def test_case_ordering(self, flat_model):
        result = ScenarioAnalyzer().analyze(flat_model, 12, 0.1)
        assert result.best_case.npv > result.base_case.npv > result.worst_case.npv

    def test_sensitivity_grid(self, flat_model):
        result = ScenarioAnalyzer().analyze(flat_model, 12, 0.1)
        assert [p.change for p in result.revenue_sensitivity] == pytest.approx(
            [c * 100 for c in REVENUE_SENSITIVITY_CHANGES]
        )
        assert len(result.cost_sensitivity) == len(COST_SENSITIVITY_CHANGES)

    def test_unchanged_input_has_no_npv_change(self, flat_model):
        result = ScenarioAnalyzer().analyze(flat_model, 12, 0.1)
        zero_point = [p for p in result.revenue_sensitivity if p.change == 0][0]
        assert zero_point.npv_change == pytest.approx(0.0, abs=1e-9)

    def test_sensitivity_direction(self, flat_model):
        """More revenue raises NPV, more cost lowers it."""
        result = ScenarioAnalyzer().analyze(flat_model, 12, 0.1)
        assert result.revenue_sensitivity[-1].npv_change > 0
        assert result.revenue_sensitivity[0].npv_change < 0
        assert result.cost_sensitivity[-1].npv_change < 0

    def test_model_is_not_mutated(self, flat_model):
        ScenarioAnalyzer().analyze(flat_model, 12, 0.1)
        assert flat_model.revenue_streams[0].value == 1000
        assert flat_model.cost_items[0].value == 400

    def test_to_dict_shape(self, flat_model):
        data = ScenarioAnalyzer().analyze(flat_model, 6, 0.1).to_dict()
        assert set(data) == {'base_case', 'best_case', 'worst_case', 'sensitivity_analysis'}
        assert len(data['sensitivity_analysis']['revenue_impact']) == 7
        assert len(data['sensitivity_analysis']['cost_impact']) == 6


class TestRunScenario:
    """run_scenario"""

    def test_custom_modifiers(self, flat_model):
        """Doubling revenue doubles the revenue total."""
        modifiers = ScenarioModifiers(name='Double', revenue_multiplier=2.0)
        metrics = ScenarioAnalyzer().run_scenario(
            flat_model, ScenarioType.CUSTOM, 12, 0.1, modifiers=modifiers
        )
        assert metrics.total_revenue == pytest.approx(24000)
        assert metrics.total_costs == pytest.approx(4800)

    def test_preset_ignores_modifiers(self, flat_model):
        modifiers = ScenarioModifiers(revenue_multiplier=5.0)
        metrics = ScenarioAnalyzer().run_scenario(
            flat_model, ScenarioType.BASE, 12, 0.1, modifiers=modifiers
        )
        assert metrics.total_revenue == pytest.approx(12000)
