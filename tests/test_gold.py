"""Tests for the gold price ticker."""

import pytest

from storefront.gold import Period, chart_bounds, gold_ticker


def test_day_ticker_summary():
    ticker = gold_ticker()
    assert ticker.period is Period.DAY
    assert ticker.period_label == "Jour"
    assert ticker.current_price == 59.3
    assert ticker.change == 0.5
    assert ticker.change_percent == 0.85
    assert ticker.is_positive
    assert [p.time for p in ticker.points][0] == "00:00"
    assert len(ticker.points) == 6


@pytest.mark.parametrize("period, count, bounds", [("week", 7, (56, 61)), ("month", 4, (55, 61)), ("day", 6, (57, 61))])
def test_period_series(period, count, bounds):
    ticker = gold_ticker(period)
    assert len(ticker.points) == count
    assert (ticker.chart_min, ticker.chart_max) == bounds


def test_chart_bounds_pad_by_one():
    assert chart_bounds([10.2, 12.5]) == (9, 14)


def test_unknown_period():
    with pytest.raises(ValueError):
        gold_ticker("year")
