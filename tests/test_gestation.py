from datetime import date, datetime, timedelta

import pytest

from bumptrack.services.gestation import (
    AnchorKind, GestationAnchor, Trimester, add_days, current_week, days_between, days_pregnant,
    due_date_from_lmp, lmp_from_due_date, progress, timeline, trimester_for_week,
)

LMP = date(2024, 1, 1)


def test_days_between_ignores_time_of_day():
    a = datetime(2024, 3, 10, 23, 59)
    b = datetime(2024, 3, 11, 0, 1)
    assert days_between(a, b) == 1
    assert days_between(b, a) == -1
    assert days_between(date(2024, 3, 11), datetime(2024, 3, 11, 18, 0)) == 0


def test_add_days_crosses_leap_day():
    assert add_days(date(2024, 2, 28), 1) == date(2024, 2, 29)
    assert add_days(date(2024, 3, 1), -1) == date(2024, 2, 29)
    assert add_days(datetime(2024, 1, 1, 12, 30), 0) == date(2024, 1, 1)


def test_due_date_is_280_days_after_lmp():
    assert due_date_from_lmp(LMP) == date(2024, 10, 7)
    assert lmp_from_due_date(date(2024, 10, 7)) == LMP


def test_conversion_round_trips():
    start = date(2019, 11, 3)
    for offset in range(0, 3 * 365, 13):
        x = start + timedelta(days=offset)
        assert lmp_from_due_date(due_date_from_lmp(x)) == x
        assert due_date_from_lmp(lmp_from_due_date(x)) == x


def test_anchor_derives_the_other_date():
    by_lmp = GestationAnchor.from_lmp(LMP)
    by_due = GestationAnchor.from_due_date(date(2024, 10, 7))

    assert by_lmp.kind is AnchorKind.LMP
    assert by_due.kind is AnchorKind.DUE_DATE
    assert by_lmp.due_date == by_due.due_date == date(2024, 10, 7)
    assert by_lmp.lmp == by_due.lmp == LMP


def test_week_ten_is_first_trimester():
    anchor = GestationAnchor.from_lmp(LMP)
    week = current_week(anchor, date(2024, 3, 11))
    assert week == 10
    assert trimester_for_week(week) is Trimester.FIRST


def test_week_thirty_four_progress():
    anchor = GestationAnchor.from_lmp(LMP)
    week = current_week(anchor, date(2024, 9, 1))
    assert week == 34
    assert trimester_for_week(week) is Trimester.THIRD

    projected = progress(week)
    assert projected.percentage == pytest.approx(85.0)
    assert projected.weeks_remaining == 6
    assert not projected.term_reached


def test_due_date_anchor_gives_same_week():
    today = date(2024, 9, 1)
    assert current_week(GestationAnchor.from_due_date(date(2024, 10, 7)), today) == \
        current_week(GestationAnchor.from_lmp(LMP), today)


def test_week_is_zero_before_lmp():
    anchor = GestationAnchor.from_lmp(date(2024, 5, 1))
    assert current_week(anchor, date(2024, 4, 1)) == 0
    assert current_week(anchor, date(2024, 4, 30)) == 0
    assert days_pregnant(anchor, date(2024, 4, 1)) == 0


def test_week_never_decreases_as_days_pass():
    anchor = GestationAnchor.from_due_date(date(2024, 10, 7))
    previous = -1
    day = date(2023, 12, 1)
    while day <= date(2024, 11, 30):
        week = current_week(anchor, day)
        assert week >= previous
        previous = week
        day += timedelta(days=1)


def test_week_rolls_over_on_seventh_day():
    anchor = GestationAnchor.from_lmp(LMP)
    assert current_week(anchor, date(2024, 1, 7)) == 0
    assert current_week(anchor, date(2024, 1, 8)) == 1


@pytest.mark.parametrize("week, expected", [
    (0, Trimester.FIRST),
    (12, Trimester.FIRST),
    (13, Trimester.SECOND),
    (28, Trimester.SECOND),
    (29, Trimester.THIRD),
    (45, Trimester.THIRD),
])
def test_trimester_boundaries(week, expected):
    assert trimester_for_week(week) is expected


def test_progress_stays_in_bounds():
    for week in range(0, 60):
        projected = progress(week)
        assert 0 <= projected.percentage <= 100
        assert projected.weeks_remaining >= 0
        if week >= 40:
            assert projected.percentage == 100
            assert projected.weeks_remaining == 0
            assert projected.term_reached


def test_timeline_to_dict():
    data = timeline(GestationAnchor.from_lmp(LMP), date(2024, 9, 1)).to_dict()
    assert data == {
        "lastMenstrualPeriod": "2024-01-01",
        "dueDate": "2024-10-07",
        "daysPregnant": 244,
        "week": 34,
        "trimester": "third",
        "percentage": 85.0,
        "weeksRemaining": 6,
        "termReached": False,
    }


def test_timeline_after_term():
    current = timeline(GestationAnchor.from_lmp(LMP), date(2024, 10, 21))
    assert current.week == 42
    assert current.percentage == 100
    assert current.term_reached
