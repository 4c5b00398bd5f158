"""Tests for period bucket skeletons."""

from datetime import date

import pytest

from kindergrow.services.period_bucket_generator import PeriodBucketGenerator


def test_leap_february_has_29_buckets():
    buckets = PeriodBucketGenerator.generate('month', anchor_year=2024, anchor_month=2)

    assert len(buckets) == 29
    assert buckets[0].date_key == '2024-02-01'
    assert buckets[-1].date_key == '2024-02-29'
    assert [b.label for b in buckets] == [str(day) for day in range(1, 30)]


def test_non_leap_february_has_28_buckets():
    buckets = PeriodBucketGenerator.generate('month', anchor_year=2023, anchor_month=2)
    assert len(buckets) == 28


def test_month_defaults_to_reference_month(reference_date):
    buckets = PeriodBucketGenerator.generate('month', reference_date=reference_date)
    assert len(buckets) == 31
    assert buckets[0].date_key == '2024-03-01'


def test_month_without_anchor_or_reference_raises():
    with pytest.raises(ValueError):
        PeriodBucketGenerator.generate('month')


@pytest.mark.parametrize("month", [0, 13])
def test_month_out_of_range_raises(month):
    with pytest.raises(ValueError):
        PeriodBucketGenerator.generate('month', anchor_year=2024, anchor_month=month)


def test_week_is_trailing_seven_days(reference_date):
    buckets = PeriodBucketGenerator.generate('week', reference_date=reference_date)

    assert len(buckets) == 7
    assert buckets[0].date_key == '2024-03-07'
    assert buckets[-1].date_key == '2024-03-13'
    assert [b.label for b in buckets] == ['Thu', 'Fri', 'Sat', 'Sun', 'Mon', 'Tue', 'Wed']


def test_week_spans_month_boundary():
    buckets = PeriodBucketGenerator.generate('week', reference_date=date(2024, 3, 2))
    assert [b.date_key for b in buckets][:3] == ['2024-02-25', '2024-02-26', '2024-02-27']


def test_week_ignores_anchor(reference_date):
    buckets = PeriodBucketGenerator.generate(
        'week', anchor_year=2020, anchor_month=1, reference_date=reference_date
    )
    assert buckets[-1].date_key == '2024-03-13'


def test_year_is_trailing_twelve_months(reference_date):
    buckets = PeriodBucketGenerator.generate('year', reference_date=reference_date)

    assert len(buckets) == 12
    assert buckets[0].date_key == '2023-04-01'
    assert buckets[-1].date_key == '2024-03-01'
    assert buckets[0].label == 'Apr'
    assert buckets[-1].label == 'Mar'


def test_year_in_december_stays_in_one_calendar_year():
    buckets = PeriodBucketGenerator.generate('year', reference_date=date(2024, 12, 31))
    assert [b.label for b in buckets][0] == 'Jan'
    assert buckets[0].date_key == '2024-01-01'


def test_metrics_are_zero_filled():
    buckets = PeriodBucketGenerator.generate(
        'month', anchor_year=2024, anchor_month=4, metric_names=['wet', 'dirty']
    )
    assert all(b.metrics == {'wet': 0, 'dirty': 0} for b in buckets)
    assert all(b.record_count == 0 for b in buckets)


def test_date_keys_are_unique(reference_date):
    for period in ('week', 'month', 'year'):
        buckets = PeriodBucketGenerator.generate(period, reference_date=reference_date)
        keys = [b.date_key for b in buckets]
        assert len(keys) == len(set(keys))


def test_unknown_period_raises(reference_date):
    with pytest.raises(ValueError, match='Invalid period'):
        PeriodBucketGenerator.generate('fortnight', reference_date=reference_date)
