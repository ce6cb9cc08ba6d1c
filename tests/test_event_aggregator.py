"""
Tests for EventFinancialsAggregator: record totals, COGS resolution,
forecast vs actual comparison and event ROI.
"""
import pytest

from src.app.services.special_events.core.event_aggregator import EventFinancialsAggregator
from src.app.services.special_events.models.records import (
    ActualRecord,
    ForecastRecord,
    canonical_actual,
)


@pytest.fixture
def aggregator():
    return EventFinancialsAggregator()


@pytest.fixture
def forecast(forecast_record):
    return ForecastRecord.from_dict(forecast_record)


@pytest.fixture
def actual(actual_record):
    return ActualRecord.from_dict(actual_record)


class TestSummarize:
    """Generic aggregation"""

    def test_summarize_totals(self):
        """Revenue and costs are summed; COGS is added to costs."""
        result = EventFinancialsAggregator.summarize(
            [1000, 500, None], [300, 200], fnb_cogs=100, merch_cogs=50, attendance=10
        )
        assert result.total_revenue == 1500
        assert result.total_costs == 650
        assert result.net_profit == 850
        assert result.profit_margin == pytest.approx(850 / 1500 * 100)
        assert result.revenue_per_attendee == 150
        assert result.cost_per_attendee == 65
        assert result.profit_per_attendee == 85

    def test_summarize_without_revenue_or_attendance(self):
        """Margin and per-attendee metrics fall back to 0."""
        result = EventFinancialsAggregator.summarize([], [100])
        assert result.net_profit == -100
        assert result.profit_margin == 0.0
        assert result.revenue_per_attendee == 0.0
        assert result.cost_per_attendee == 0.0

    def test_summarize_empty_record(self, aggregator):
        """A blank forecast is all zeros, never NaN."""
        result = aggregator.summarize_forecast(ForecastRecord.from_dict({}))
        assert result.to_dict()['total_revenue'] == 0
        assert result.to_dict()['profit_margin'] == 0


class TestForecastSummary:
    """summarize_forecast"""

    def test_forecast_totals(self, aggregator, forecast):
        """46000 revenue against 26000 base costs plus default COGS."""
        result = aggregator.summarize_forecast(forecast)
        assert result.total_revenue == 46000
        assert result.fnb_cogs == 2400
        assert result.merch_cogs == 1500
        assert result.total_costs == 29900
        assert result.net_profit == 16100
        assert result.profit_margin == pytest.approx(35.0)

    def test_forecast_per_attendee(self, aggregator, forecast):
        """1000 expected attendees"""
        result = aggregator.summarize_forecast(forecast)
        assert result.revenue_per_attendee == pytest.approx(46.0)
        assert result.cost_per_attendee == pytest.approx(29.9)
        assert result.profit_per_attendee == pytest.approx(16.1)

    def test_forecast_gross_margins(self, aggregator, forecast):
        """Default percentages give 70% F&B and 50% merchandise margins."""
        result = aggregator.summarize_forecast(forecast)
        assert result.fnb_gross_margin == pytest.approx(70.0)
        assert result.merch_gross_margin == pytest.approx(50.0)

    def test_forecast_stored_percentage(self, aggregator, forecast_record):
        """A stored percentage overrides the default."""
        forecast_record['forecast_fnb_cogs_pct'] = 25
        result = aggregator.summarize_forecast(ForecastRecord.from_dict(forecast_record))
        assert result.fnb_cogs == 2000

    def test_custom_defaults(self, forecast):
        """Aggregator defaults are configurable."""
        result = EventFinancialsAggregator(fnb_default_pct=40, merch_default_pct=60).summarize_forecast(forecast)
        assert result.fnb_cogs == 3200
        assert result.merch_cogs == 1800


class TestActualSummary:
    """summarize_actual"""

    def test_actual_totals(self, aggregator, forecast, actual):
        """F&B COGS from the percentage, merchandise COGS entered manually."""
        result = aggregator.summarize_actual(actual, forecast)
        assert result.total_revenue == 49000
        assert result.fnb_cogs == 2700
        assert result.merch_cogs == 900
        assert result.total_costs == 30600
        assert result.net_profit == 18400

    def test_actual_without_forecast_uses_manual_cogs(self, aggregator, actual_record):
        """Without a forecast the percentage flag cannot apply."""
        actual_record['manual_fnb_cogs'] = 1234
        result = aggregator.summarize_actual(ActualRecord.from_dict(actual_record))
        assert result.fnb_cogs == 1234

    def test_percentage_flags_default_on(self, aggregator):
        """Omitted flags derive COGS from the forecast percentages."""
        actual = ActualRecord.from_dict({'actual_fnb_revenue': 1000, 'actual_merch_revenue': 400})
        forecast = ForecastRecord.from_dict({'forecast_fnb_revenue': 1000})
        assert actual.use_forecast_fnb_cogs_pct is True
        assert aggregator.actual_cogs(actual, forecast) == (300, 200)

    def test_null_flag_counts_as_on(self):
        actual = ActualRecord.from_dict({'use_forecast_fnb_cogs_pct': None, 'use_forecast_merch_cogs_pct': False})
        assert actual.use_forecast_fnb_cogs_pct is True
        assert actual.use_forecast_merch_cogs_pct is False

    def test_zero_forecast_percentage_uses_default(self, aggregator):
        """A stored 0% is treated as unset."""
        actual = ActualRecord.from_dict({'actual_fnb_revenue': 1000})
        forecast = ForecastRecord.from_dict({'forecast_fnb_cogs_pct': 0})
        assert aggregator.actual_cogs(actual, forecast)[0] == 300


class TestComparison:
    """compare"""

    def test_revenue_variance(self, aggregator, forecast, actual):
        """49000 against 46000"""
        result = aggregator.compare(forecast, actual)
        assert result.revenue_variance.amount == 3000
        assert result.revenue_variance.percentage == pytest.approx(3000 / 46000 * 100)

    def test_attendance_and_cogs_variances(self, aggregator, forecast, actual):
        """Attendance +10%, F&B COGS +12.5%, merchandise COGS -40%."""
        result = aggregator.compare(forecast, actual)
        assert result.attendance_variance.percentage == pytest.approx(10.0)
        assert result.fnb_cogs_variance.percentage == pytest.approx(12.5)
        assert result.merch_cogs_variance.percentage == pytest.approx(-40.0)

    def test_missing_forecast_attendance(self, aggregator, forecast_record, actual):
        """No forecast attendance gives a zero attendance variance."""
        forecast_record['estimated_attendance'] = 0
        result = aggregator.compare(ForecastRecord.from_dict(forecast_record), actual)
        assert result.attendance_variance.amount == 0
        assert result.attendance_variance.percentage == 0

    def test_comparison_to_dict(self, aggregator, forecast, actual):
        """Serialized comparison carries all variance groups."""
        data = aggregator.compare(forecast, actual).to_dict()
        assert set(data['variances']) == {
            'revenue', 'costs', 'profit', 'attendance', 'fnb_cogs', 'merch_cogs'
        }
        assert data['variances']['revenue'] == {'amount': 3000, 'percentage': 6.52}


class TestEventROI:
    """event_roi"""

    def test_event_roi(self, forecast, actual):
        """COGS is excluded from ROI costs."""
        result = EventFinancialsAggregator.event_roi(forecast, actual)
        assert result.forecast_revenue == 46000
        assert result.forecast_costs == 26000
        assert result.forecast_profit == 20000
        assert result.actual_revenue == 49000
        assert result.actual_costs == 27000
        assert result.actual_profit == 22000
        assert result.revenue_variance == 3000
        assert result.cost_variance == 1000
        assert result.profit_variance == 2000
        assert result.to_dict()['roi_percent'] == 181.48

    def test_event_roi_without_actuals(self, forecast):
        """Missing actuals count as zero."""
        result = EventFinancialsAggregator.event_roi(forecast, None)
        assert result.actual_revenue == 0
        assert result.roi_percent == 0
        assert result.revenue_variance == -46000


class TestRecords:
    """Record normalization"""

    def test_from_dict_normalizes_values(self):
        """Strings, None and garbage are coerced to numbers."""
        record = ForecastRecord.from_dict({
            'forecast_ticket_sales': '1500.5',
            'forecast_fnb_revenue': None,
            'forecast_merch_revenue': 'n/a',
        })
        assert record.forecast_ticket_sales == 1500.5
        assert record.forecast_fnb_revenue == 0.0
        assert record.forecast_merch_revenue == 0.0
        assert record.forecast_fnb_cogs_pct is None

    def test_expected_ticket_revenue(self, forecast):
        assert forecast.expected_ticket_revenue == 25000

    def test_canonical_actual_uses_first_entry(self, actual_record):
        """The first entry of a list of actuals is canonical."""
        second = dict(actual_record, actual_ticket_sales=1)
        result = canonical_actual([actual_record, second])
        assert result.actual_ticket_sales == 27500

    @pytest.mark.parametrize('payload', [None, [], {}])
    def test_canonical_actual_empty(self, payload):
        assert canonical_actual(payload) is None

    def test_success_rating(self, actual):
        assert actual.success_rating == 8
        assert ActualRecord.from_dict({'success_rating': 'great'}).success_rating is None
