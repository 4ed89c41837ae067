# bumptrack/services/gestation.py
"""
Gestational timeline engine.

Converts between last menstrual period (LMP) and due date, derives the
current gestational week / trimester and projects progress towards term.
Every function is pure: "today" is always passed in by the caller.
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum

GESTATION_DAYS = 280
TERM_WEEKS = 40

FIRST_TRIMESTER_LAST_WEEK = 12
SECOND_TRIMESTER_LAST_WEEK = 28


def _as_date(value) -> date:
    # datetime is a subclass of date, check it first
    if isinstance(value, datetime):
        return value.date()
    return value


def days_between(a, b) -> int:
    """Whole calendar days from ``a`` to ``b`` (negative if ``b`` is earlier)."""
    return (_as_date(b) - _as_date(a)).days


def add_days(d, n: int) -> date:
    return _as_date(d) + timedelta(days=n)


def due_date_from_lmp(lmp) -> date:
    return add_days(lmp, GESTATION_DAYS)


def lmp_from_due_date(due) -> date:
    return add_days(due, -GESTATION_DAYS)


class AnchorKind(str, Enum):
    LMP = "lmp"
    DUE_DATE = "due"


class Trimester(str, Enum):
    FIRST = "first"
    SECOND = "second"
    THIRD = "third"


@dataclass(frozen=True)
class GestationAnchor:
    """The one date the user supplied; the other date is always derived."""
    kind: AnchorKind
    date: date

    @classmethod
    def from_lmp(cls, lmp):
        return cls(AnchorKind.LMP, _as_date(lmp))

    @classmethod
    def from_due_date(cls, due):
        return cls(AnchorKind.DUE_DATE, _as_date(due))

    @property
    def lmp(self) -> date:
        if self.kind is AnchorKind.LMP:
            return self.date
        return lmp_from_due_date(self.date)

    @property
    def due_date(self) -> date:
        if self.kind is AnchorKind.DUE_DATE:
            return self.date
        return due_date_from_lmp(self.date)


def days_pregnant(anchor: GestationAnchor, today) -> int:
    return max(days_between(anchor.lmp, today), 0)


def current_week(anchor: GestationAnchor, today) -> int:
    """
    Completed gestational weeks at ``today``.

    A ``today`` before the LMP (future LMP typed by mistake, or a due date set
    up before conception) yields week 0, never a negative week.
    """
    diff = days_between(anchor.lmp, today)
    if diff < 0:
        return 0
    return diff // 7


def trimester_for_week(week: int) -> Trimester:
    if week <= FIRST_TRIMESTER_LAST_WEEK:
        return Trimester.FIRST
    if week <= SECOND_TRIMESTER_LAST_WEEK:
        return Trimester.SECOND
    return Trimester.THIRD


@dataclass(frozen=True)
class Progress:
    percentage: float
    weeks_remaining: int

    @property
    def term_reached(self) -> bool:
        return self.weeks_remaining == 0


def progress(week: int) -> Progress:
    percentage = min(week / TERM_WEEKS * 100, 100.0)
    weeks_remaining = max(TERM_WEEKS - week, 0)
    return Progress(percentage=percentage, weeks_remaining=weeks_remaining)


@dataclass(frozen=True)
class Timeline:
    lmp: date
    due_date: date
    days_pregnant: int
    week: int
    trimester: Trimester
    percentage: float
    weeks_remaining: int

    @property
    def term_reached(self) -> bool:
        return self.weeks_remaining == 0

    def to_dict(self):
        return {
            "lastMenstrualPeriod": self.lmp.isoformat(),
            "dueDate": self.due_date.isoformat(),
            "daysPregnant": self.days_pregnant,
            "week": self.week,
            "trimester": self.trimester.value,
            "percentage": round(self.percentage, 1),
            "weeksRemaining": self.weeks_remaining,
            "termReached": self.term_reached,
        }


def timeline(anchor: GestationAnchor, today) -> Timeline:
    """Everything the dashboard needs for one anchor on one day."""
    week = current_week(anchor, today)
    projected = progress(week)
    return Timeline(
        lmp=anchor.lmp,
        due_date=anchor.due_date,
        days_pregnant=days_pregnant(anchor, today),
        week=week,
        trimester=trimester_for_week(week),
        percentage=projected.percentage,
        weeks_remaining=projected.weeks_remaining,
    )
