# tests/test_previous.py

import pytest
from dataclasses import replace
from itertools import islice

from calperiods import PeriodNotFound
from calperiods.periods.generate import generate_fixed_periods
from calperiods.periods.locate import locate_fixed_period
from calperiods.periods.previous import iter_previous_fixed_periods, previous_fixed_periods


def ids(periods):
    return [p.id for p in periods]


def test_weekly_crosses_year(iso):
    period = generate_fixed_periods(2024, "WEEKLY", iso)[0]
    assert ids(previous_fixed_periods(period, 3, iso)) == ["2023W50", "2023W51", "2023W52"]


def test_daily_crosses_year(iso):
    period = locate_fixed_period("2024-01-02", "DAILY", iso)
    assert ids(previous_fixed_periods(period, 3, iso)) == ["20231230", "20231231", "20240101"]


def test_financial_years(iso):
    period = locate_fixed_period("2025-02-15", "FYAPR", iso)
    assert period.id == "2024April"
    assert ids(previous_fixed_periods(period, 3, iso)) == ["2021April", "2022April", "2023April"]


def test_many_years_back(iso):
    period = generate_fixed_periods(2024, "QUARTERLY", iso)[1]
    result = previous_fixed_periods(period, 9, iso)
    assert ids(result) == [
        "2022Q1", "2022Q2", "2022Q3", "2022Q4",
        "2023Q1", "2023Q2", "2023Q3", "2023Q4",
        "2024Q1",
    ]


@pytest.mark.parametrize("period_type", [
    "DAILY", "WEEKLY", "WEEKLYTHU", "MONTHLY", "BIMONTHLY", "QUARTERLY",
    "SIXMONTHLY", "SIXMONTHLYAPR", "SIXMONTHLYNOV", "YEARLY", "FYOCT",
])
@pytest.mark.parametrize("count", [1, 2, 7, 30])
def test_matches_forward_generation(iso, period_type, count):
    per_year = len(generate_fixed_periods(2024, period_type, iso))
    forward = []
    for year in range(2024 - count // per_year - 2, 2025):
        forward.extend(generate_fixed_periods(year, period_type, iso))
    target = [p for p in forward if p.year == 2024][-1]
    index = forward.index(target)
    assert index >= count
    assert previous_fixed_periods(target, count, iso) == forward[index - count:index]


def test_nepali_matches_forward_generation(nepali):
    forward = generate_fixed_periods(2079, "MONTHLY", nepali) + generate_fixed_periods(2080, "MONTHLY", nepali)
    target = forward[14]
    assert target.id == "208003"
    assert previous_fixed_periods(target, 5, nepali) == forward[9:14]


def test_zero_and_negative_count(iso):
    period = generate_fixed_periods(2024, "MONTHLY", iso)[0]
    assert previous_fixed_periods(period, 0, iso) == []
    with pytest.raises(ValueError):
        previous_fixed_periods(period, -1, iso)


def test_sunday_weeks_keep_their_start_day(iso):
    period = locate_fixed_period("2024-01-10", "WEEKLY", iso, starting_day=7)
    assert period.id == "2024W02"
    assert period.start_date.isoformat() == "2024-01-07"
    result = previous_fixed_periods(period, 2, iso)
    assert ids(result) == ["2023W52", "2024W01"]
    assert [p.start_date.isoformat() for p in result] == ["2023-12-24", "2023-12-31"]
    assert all(iso.calendar.weekday(p.start_date) == 7 for p in result)


def test_iter_previous(iso):
    period = generate_fixed_periods(2024, "QUARTERLY", iso)[0]
    assert ids(islice(iter_previous_fixed_periods(period, iso), 5)) == [
        "2023Q4", "2023Q3", "2023Q2", "2023Q1", "2022Q4",
    ]


def test_unknown_period_id(iso):
    period = generate_fixed_periods(2024, "QUARTERLY", iso)[0]
    with pytest.raises(PeriodNotFound):
        previous_fixed_periods(replace(period, id="2024Q9"), 2, iso)
    with pytest.raises(PeriodNotFound):
        next(iter_previous_fixed_periods(replace(period, id="2024Q9"), iso))
