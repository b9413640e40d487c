from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from onlychurch.stats.birthdays import birthdays_in_month, previous_month


@dataclass
class Person:
    name: str
    birth_date: Optional[date]


def test_march_birthdays_sorted_by_day(fixed_now):
    people = [
        Person("a", date(1990, 3, 5)),
        Person("b", date(1985, 3, 20)),
        Person("c", date(1992, 4, 1)),
    ]
    out = birthdays_in_month(people, fixed_now)

    assert [(e.record.birth_date, e.day, e.age) for e in out] == [
        (date(1990, 3, 5), 5, 34),
        (date(1985, 3, 20), 20, 39),
    ]


def test_filter_and_sort_is_idempotent(fixed_now):
    people = [
        Person("late", date(2000, 3, 28)),
        Person("none", None),
        Person("first", date(1970, 3, 1)),
        Person("tie-1", date(1980, 3, 10)),
        Person("tie-2", date(1990, 3, 10)),
    ]
    once = birthdays_in_month(people, fixed_now)
    twice = birthdays_in_month([e.record for e in once], fixed_now)

    assert [e.record.name for e in once] == ["first", "tie-1", "tie-2", "late"]
    assert once == twice


def test_explicit_month(fixed_now):
    people = [Person("feb", date(1990, 2, 14)), Person("mar", date(1990, 3, 14))]
    out = birthdays_in_month(people, fixed_now, month=previous_month(fixed_now))
    assert [e.record.name for e in out] == ["feb"]


def test_previous_month_wraps_in_january():
    assert previous_month(datetime(2024, 1, 5)) == 12
    assert previous_month(date(2024, 7, 5)) == 6
