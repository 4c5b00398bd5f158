"""Tests for half-window trend detection."""

import pytest

from kindergrow.services.trend_analyzer import TrendAnalyzer


def test_all_zeros_is_stable():
    result = TrendAnalyzer.trend([0] * 7)
    assert result.percentage == 0
    assert result.label == 'Stable'


def test_empty_series_is_stable():
    assert TrendAnalyzer.trend([]).label == 'Stable'


def test_increase():
    result = TrendAnalyzer.trend([10, 10, 15, 15])
    assert result.percentage == 50
    assert result.label == '+50%'
    assert result.direction == 'increasing'


def test_decrease():
    result = TrendAnalyzer.trend([20, 20, 15, 15])
    assert result.percentage == -25
    assert result.label == '-25%'


def test_zeros_are_dropped_from_each_window():
    # early [10, 10, 0] -> 10, late [0, 12, 0, 18] -> 15
    result = TrendAnalyzer.trend([10, 10, 0, 0, 12, 0, 18])
    assert result.percentage == 50


def test_empty_early_window_is_stable():
    assert TrendAnalyzer.trend([0, 0, 0, 5, 6, 7]).label == 'Stable'


def test_empty_late_window_is_stable():
    assert TrendAnalyzer.trend([5, 6, 7, 0, 0, 0]).label == 'Stable'


def test_odd_length_puts_middle_value_in_late_window():
    # mid = 2: early [10, 10], late [10, 15, 20] -> 15
    assert TrendAnalyzer.trend([10, 10, 10, 15, 20]).percentage == 50


def test_equal_windows_are_stable():
    result = TrendAnalyzer.trend([4, 4, 4, 4])
    assert result.percentage == 0
    assert result.label == 'Stable'


def test_percentage_rounds_half_up():
    # +0.5% rounds up to 1, -0.5% rounds up to 0
    assert TrendAnalyzer.trend([200, 200, 201, 201]).percentage == 1
    assert TrendAnalyzer.trend([200, 200, 199, 199]).label == 'Stable'


@pytest.mark.parametrize("min_populated, expected", [(1, 50), (2, 50), (3, 0)])
def test_min_populated_per_window(min_populated, expected):
    values = [10, 10, 0, 15, 15, 0]
    assert TrendAnalyzer.trend(values, min_populated=min_populated).percentage == expected


def test_single_value_per_window_is_stable_by_default():
    result = TrendAnalyzer.trend([10, 15])
    assert result.percentage == 0
    assert result.label == 'Stable'


def test_single_value_per_window_when_one_is_enough():
    assert TrendAnalyzer.trend([10, 15], min_populated=1).label == '+50%'
