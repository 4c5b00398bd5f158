"""Tests for totals, populated averages, distributions and descriptive stats."""

import pytest

from kindergrow.models.bucket import Bucket
from kindergrow.services.summary_composer import SummaryComposer


def _bucket(day, **metrics):
    return Bucket(label=str(day), date_key=f'2024-03-{day:02d}', metrics=metrics, record_count=1)


def _diaper_bucket(day, wet=0, dirty=0, both=0):
    return _bucket(day, wet=wet, dirty=dirty, both=both, changes=wet + dirty + both)


def test_distribution_rounds_half_up(diaper_schema):
    buckets = [_diaper_bucket(1, wet=1), _diaper_bucket(2, wet=1), _diaper_bucket(3, dirty=1)]

    summary = SummaryComposer.summarize(buckets, diaper_schema)

    assert summary['distribution'] == {'wet': 67, 'dirty': 33, 'both': 0}


def test_distribution_is_not_reconciled_to_100(diaper_schema):
    buckets = [_diaper_bucket(1, wet=1, dirty=1, both=1)]

    distribution = SummaryComposer.summarize(buckets, diaper_schema)['distribution']

    assert distribution == {'wet': 33, 'dirty': 33, 'both': 33}
    assert sum(distribution.values()) == 99


def test_populated_average_skips_empty_buckets(sleep_schema):
    buckets = [
        _bucket(1, napHours=2, nightHours=8, totalHours=10, sleepProgress=0),
        _bucket(2, napHours=0, nightHours=0, totalHours=0, sleepProgress=0),
        _bucket(3, napHours=4, nightHours=0, totalHours=4, sleepProgress=0),
    ]

    summary = SummaryComposer.summarize(buckets, sleep_schema)

    assert summary['totals']['napHours'] == 6
    assert summary['populated_average']['napHours'] == 3
    assert summary['populated_average']['nightHours'] == 8
    assert summary['populated_average']['sleepProgress'] == 0
    assert summary['distribution'] == {'nap': 43, 'night': 57}


def test_empty_buckets_summarize_to_zero(feeding_schema):
    buckets = [Bucket(label=str(d), date_key=f'2024-03-{d:02d}',
                      metrics=feeding_schema.empty_metrics()) for d in range(1, 8)]

    summary = SummaryComposer.summarize(buckets, feeding_schema)

    assert all(v == 0 for v in summary['totals'].values())
    assert all(v == 0 for v in summary['populated_average'].values())
    assert summary['distribution'] == {'breast': 0, 'bottle': 0, 'solid': 0}


def test_missing_metric_counts_as_zero(diaper_schema):
    buckets = [Bucket(label='1', date_key='2024-03-01', metrics={'wet': 2})]
    summary = SummaryComposer.summarize(buckets, diaper_schema)
    assert summary['totals'] == {'wet': 2, 'dirty': 0, 'both': 0, 'changes': 0}


def test_describe_numeric_values():
    stats = SummaryComposer.describe([1, 2, 3, 4])

    assert stats['count'] == 4
    assert stats['mean'] == 2.5
    assert stats['median'] == 2.5
    assert stats['min'] == 1
    assert stats['max'] == 4
    assert stats['std_dev'] == pytest.approx(1.12)


@pytest.mark.parametrize("values", [[], [None], ['a', None]])
def test_describe_without_numeric_values(values):
    assert SummaryComposer.describe(values) == {}
