from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, FrozenSet, Literal, Union

from ..core.errors import UnrecognizedPeriodType
from ..core.types import CalendarDate

Family = Literal["daily", "weekly", "monthly", "yearly"]


class PeriodType(str, Enum):
    DAILY = "DAILY"

    WEEKLY = "WEEKLY"
    WEEKLYWED = "WEEKLYWED"
    WEEKLYTHU = "WEEKLYTHU"
    WEEKLYSAT = "WEEKLYSAT"
    WEEKLYSUN = "WEEKLYSUN"

    MONTHLY = "MONTHLY"
    BIMONTHLY = "BIMONTHLY"
    QUARTERLY = "QUARTERLY"
    SIXMONTHLY = "SIXMONTHLY"
    SIXMONTHLYAPR = "SIXMONTHLYAPR"
    SIXMONTHLYNOV = "SIXMONTHLYNOV"

    YEARLY = "YEARLY"
    FYAPR = "FYAPR"
    FYJUL = "FYJUL"
    FYOCT = "FYOCT"
    FYNOV = "FYNOV"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: Union[str, "PeriodType"]) -> "PeriodType":
        if isinstance(value, PeriodType):
            return value
        if isinstance(value, str):
            key = value.strip().upper()
            key = PERIOD_TYPE_ALIASES.get(key, key)
            if key in cls.__members__:
                return cls[key]
        raise UnrecognizedPeriodType(f'can not generate period for unrecognised period type "{value}"')

    @property
    def family(self) -> Family:
        if self is PeriodType.DAILY:
            return "daily"
        if self in WEEKLY_TYPES:
            return "weekly"
        if self in MONTHLY_TYPES:
            return "monthly"
        return "yearly"


PERIOD_TYPE_ALIASES: Dict[str, str] = {
    "FINANCIAL_APR": "FYAPR",
    "FINANCIAL_JUL": "FYJUL",
    "FINANCIAL_OCT": "FYOCT",
    "FINANCIAL_NOV": "FYNOV",
}

WEEKLY_TYPES: FrozenSet[PeriodType] = frozenset({
    PeriodType.WEEKLY, PeriodType.WEEKLYWED, PeriodType.WEEKLYTHU, PeriodType.WEEKLYSAT, PeriodType.WEEKLYSUN,
})
MONTHLY_TYPES: FrozenSet[PeriodType] = frozenset({
    PeriodType.MONTHLY, PeriodType.BIMONTHLY, PeriodType.QUARTERLY,
    PeriodType.SIXMONTHLY, PeriodType.SIXMONTHLYAPR, PeriodType.SIXMONTHLYNOV,
})
YEARLY_TYPES: FrozenSet[PeriodType] = frozenset({
    PeriodType.YEARLY, PeriodType.FYAPR, PeriodType.FYJUL, PeriodType.FYOCT, PeriodType.FYNOV,
})


@dataclass(frozen=True)
class FixedPeriod:
    """A named, bounded date range. ``end_date`` is inclusive.

    ``year`` is the calendar year whose batch produced the period; the
    backward walker regenerates from it.
    """
    period_type: PeriodType
    id: str
    start_date: CalendarDate
    end_date: CalendarDate
    display_name: str
    year: int

    def as_dict(self) -> Dict[str, Any]:
        return {
            "periodType": self.period_type.value,
            "id": self.id,
            "displayName": self.display_name,
            "startDate": self.start_date.isoformat(),
            "endDate": self.end_date.isoformat(),
            "calendar": self.start_date.calendar,
            "year": self.year,
        }
