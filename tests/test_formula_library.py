"""
Tests for the formula library: variance, COGS, margins, NPV, IRR, payback
and break-even.
"""
import math
import pytest

from src.app.services.special_events.core.formula_library import (
    calculate_break_even,
    calculate_cogs,
    calculate_gross_margin,
    calculate_irr,
    calculate_margin,
    calculate_npv,
    calculate_payback_period,
    calculate_variance,
    per_unit,
    round_half_up,
    safe_number,
    solve_irr,
    sum_values,
)


class TestSafeNumber:
    """Input normalization"""

    @pytest.mark.parametrize('value,expected', [
        (None, 0.0),
        ('', 0.0),
        ('abc', 0.0),
        ('12.5', 12.5),
        (7, 7.0),
        (float('nan'), 0.0),
        (True, 0.0),
    ])
    def test_safe_number(self, value, expected):
        """Missing and non-numeric inputs resolve to 0."""
        assert safe_number(value) == expected

    def test_safe_number_custom_default(self):
        """The default is returned for unusable inputs."""
        assert safe_number(None, 50.0) == 50.0

    def test_sum_values_treats_missing_as_zero(self):
        """Undefined entries do not break a sum."""
        assert sum_values([100, None, '50', 'x']) == 150.0

    def test_round_half_up(self):
        """Halves round up."""
        assert round_half_up(2.5) == 3.0
        assert round_half_up(30.3) == 30.0
        assert round_half_up(31.5) == 32.0


class TestVariance:
    """calculate_variance"""

    def test_variance_amount_and_percentage(self):
        """Actual above forecast gives a positive variance."""
        result = calculate_variance(120, 100)
        assert result.amount == 20
        assert result.percentage == pytest.approx(20.0)

    @pytest.mark.parametrize('actual', [0, 50, -10, 1e9])
    def test_variance_zero_forecast(self, actual):
        """Percentage is 0 whenever the forecast is 0."""
        result = calculate_variance(actual, 0)
        assert result.percentage == 0
        assert result.amount == actual

    def test_variance_missing_values(self):
        """Missing actual counts as 0."""
        result = calculate_variance(None, '100')
        assert result.amount == -100
        assert result.percentage == pytest.approx(-100.0)

    def test_variance_to_dict_rounds(self):
        """Serialized values are rounded to cents."""
        assert calculate_variance(1, 3).to_dict() == {'amount': -2, 'percentage': -66.67}


class TestCogs:
    """calculate_cogs and margins"""

    def test_cogs_percentage(self):
        """30% of 100 is 30."""
        assert calculate_cogs(100, True, 30) == 30

    def test_cogs_percentage_rounds_to_whole_units(self):
        """30% of 101 is 30.3, rounded to 30."""
        assert calculate_cogs(101, True, 30) == 30

    def test_cogs_rounds_half_up(self):
        """30% of 105 is 31.5, rounded to 32."""
        assert calculate_cogs(105, True, 30) == 32

    def test_cogs_default_percentage(self):
        """An unset percentage falls back to the default."""
        assert calculate_cogs(100, True, None) == 30
        assert calculate_cogs(100, True, None, default_pct=50) == 50

    def test_cogs_zero_percentage_falls_back_to_default(self):
        """A stored percentage of 0 counts as unset."""
        assert calculate_cogs(100, True, 0) == 30
        assert calculate_cogs(100, True, 0, default_pct=50) == 50

    @pytest.mark.parametrize('revenue', [0, 1, 99, 101, 1235, 50000])
    @pytest.mark.parametrize('pct', [1, 30, 50, 99.5, 100])
    def test_cogs_from_percentage_never_exceeds_revenue(self, revenue, pct):
        """A percentage up to 100 keeps COGS within its revenue."""
        assert calculate_cogs(revenue, True, pct) <= revenue

    def test_cogs_manual_override(self):
        """Without the percentage flag the manual amount is used."""
        assert calculate_cogs(100, False, 30, manual_override=12) == 12
        assert calculate_cogs(100, False, 30) == 0

    def test_gross_margin(self):
        """revenue=200, cogs=60 gives 70%."""
        assert calculate_gross_margin(200, 60) == pytest.approx(70.0)

    def test_gross_margin_without_revenue(self):
        """No revenue gives a 0 margin."""
        assert calculate_gross_margin(0, 60) == 0.0
        assert calculate_gross_margin(-10, 60) == 0.0

    def test_margin_and_per_unit_guards(self):
        """Zero denominators give 0."""
        assert calculate_margin(50, 0) == 0.0
        assert calculate_margin(50, 200) == pytest.approx(25.0)
        assert per_unit(100, 0) == 0.0
        assert per_unit(100, 4) == 25.0


class TestTimeValue:
    """NPV, IRR and payback"""

    def test_npv_discounts_from_period_zero(self):
        """The first flow is not discounted."""
        assert calculate_npv([100], 0.5) == 100
        assert calculate_npv([-100, 110], 0.1) == pytest.approx(0.0, abs=1e-9)

    def test_npv_overflowing_discount_factor(self):
        """Terms whose discount factor overflows contribute 0."""
        assert calculate_npv([-100] + [50] * 200, 1e10) == pytest.approx(-100 + 50 / (1 + 1e10))

    def test_npv_zero_discount_base(self):
        """A rate of -1 gives an infinite NPV instead of raising."""
        assert calculate_npv([-100, 50], -1) == math.inf

    def test_irr_converges(self):
        """IRR of [-100, 110] is 10%."""
        result = solve_irr([-100, 110])
        assert result.converged is True
        assert result.rate == pytest.approx(0.1, abs=1e-6)
        assert calculate_irr([-100, 110]) == pytest.approx(0.1, abs=1e-6)

    def test_irr_two_periods(self):
        """IRR of [-100, 60, 60] is about 13.07%."""
        result = solve_irr([-100, 60, 60])
        assert result.converged is True
        assert calculate_npv([-100, 60, 60], result.rate) == pytest.approx(0.0, abs=1e-4)

    def test_irr_without_sign_change_does_not_converge(self):
        """All-positive flows have no IRR; the estimate is flagged."""
        result = solve_irr([100, 100])
        assert result.converged is False
        assert math.isfinite(result.rate)

    def test_irr_flat_series_does_not_converge(self):
        """A zero derivative stops the iteration."""
        result = solve_irr([0, 0, 0])
        assert result.converged is False
        assert result.rate == 0.1

    def test_payback_interpolation(self):
        """[-100, 60, 60] pays back between period 1 and 2."""
        payback = calculate_payback_period([-100, 60, 60])
        assert 1 < payback < 2
        assert payback == pytest.approx(1 + 40 / 60)

    def test_payback_exact_period(self):
        """Cumulative reaching exactly 0 lands on the period boundary."""
        assert calculate_payback_period([-100, 50, 50]) == pytest.approx(2.0)

    def test_payback_no_outlay(self):
        """A non-negative first flow pays back immediately."""
        assert calculate_payback_period([10, 5]) == 0.0

    def test_payback_never_reached(self):
        """The series length is returned when the outlay is never recovered."""
        assert calculate_payback_period([-100, 10, 10]) == 3.0


class TestBreakEven:
    """calculate_break_even"""

    def test_break_even(self):
        """1000 fixed at a 10 margin needs 100 units."""
        result = calculate_break_even(1000, 5, 15)
        assert result.units == 100
        assert result.revenue == 1500
        assert result.is_reachable is True

    def test_break_even_rounds_units_up(self):
        """Partial units are rounded up."""
        result = calculate_break_even(1000, 7, 10)
        assert result.units == 334
        assert result.revenue == pytest.approx(3340)

    def test_break_even_zero_margin(self):
        """Zero contribution margin never breaks even."""
        result = calculate_break_even(1000, 50, 50)
        assert result.units == math.inf
        assert result.revenue == math.inf
        assert result.is_reachable is False

    def test_break_even_infinite_serializes_to_null(self):
        """Infinite values are emitted as None."""
        assert calculate_break_even(1000, 60, 50).to_dict() == {
            'units': None,
            'revenue': None,
            'reachable': False,
        }

    @pytest.mark.parametrize('fixed,variable,price', [
        (math.inf, 1, 10),
        (math.nan, 1, 10),
        (1000, math.nan, 10),
        (math.inf, math.inf, math.inf),
    ])
    def test_break_even_non_finite_inputs(self, fixed, variable, price):
        """Non-finite inputs never break even and never raise."""
        result = calculate_break_even(fixed, variable, price)
        assert result.is_reachable is False


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
