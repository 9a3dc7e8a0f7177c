from datetime import date, datetime
from types import SimpleNamespace

from app.utils.vaccination_schedule import (
    STANDARD_SCHEDULE,
    generate_standard_schedule,
    is_overdue,
    partition_vaccinations,
)


def _record(id, scheduled, administered=None):
    return SimpleNamespace(id=id, scheduled_date=scheduled, administered_date=administered)


def test_schedule_has_twelve_candidates_in_table_order():
    schedule = generate_standard_schedule(date(2024, 1, 15))

    assert len(schedule) == 12
    assert [(c["name"], c["schedule_offset_months"], c["notes"]) for c in schedule] == list(STANDARD_SCHEDULE)
    assert all(c["administered_date"] is None for c in schedule)


def test_schedule_dates_follow_calendar_months():
    schedule = generate_standard_schedule(date(2024, 1, 15))

    assert schedule[0]["scheduled_date"] == date(2024, 1, 15)
    assert schedule[1]["name"] == "Hepatitis B (HepB)"
    assert schedule[1]["scheduled_date"] == date(2024, 2, 15)
    assert schedule[2]["name"] == "DTaP"
    assert schedule[2]["scheduled_date"] == date(2024, 3, 15)
    assert {c["scheduled_date"] for c in schedule[7:]} == {date(2024, 5, 15)}


def test_schedule_clamps_month_end_births():
    schedule = generate_standard_schedule(date(2024, 1, 31))
    assert schedule[1]["scheduled_date"] == date(2024, 2, 29)
    assert schedule[2]["scheduled_date"] == date(2024, 3, 31)
    assert schedule[7]["scheduled_date"] == date(2024, 5, 31)


def test_schedule_is_deterministic():
    assert generate_standard_schedule(date(2023, 7, 4)) == generate_standard_schedule(date(2023, 7, 4))
    assert generate_standard_schedule(datetime(2023, 7, 4, 9, 30)) == generate_standard_schedule(date(2023, 7, 4))


def test_partition_is_a_disjoint_cover_that_keeps_order():
    records = [
        _record(1, date(2024, 1, 15), date(2024, 1, 15)),
        _record(2, date(2024, 2, 15)),
        _record(3, date(2024, 3, 15), date(2024, 3, 20)),
        _record(4, date(2024, 3, 15)),
        _record(5, date(2024, 5, 15)),
    ]

    upcoming, completed = partition_vaccinations(records)

    assert [r.id for r in upcoming] == [2, 4, 5]
    assert [r.id for r in completed] == [1, 3]
    assert {r.id for r in upcoming} | {r.id for r in completed} == {r.id for r in records}
    assert not {r.id for r in upcoming} & {r.id for r in completed}


def test_partition_of_empty_list():
    assert partition_vaccinations([]) == ([], [])


def test_overdue_is_strictly_before_today():
    today = date(2024, 3, 15)

    assert is_overdue(_record(1, date(2024, 3, 14)), today)
    assert not is_overdue(_record(2, date(2024, 3, 15)), today)
    assert not is_overdue(_record(3, date(2024, 3, 16)), today)


def test_completed_records_are_never_overdue():
    assert not is_overdue(_record(1, date(2024, 1, 1), date(2024, 2, 1)), date(2024, 3, 15))


def test_overdue_ignores_time_of_day():
    assert not is_overdue(_record(1, date(2024, 3, 15)), datetime(2024, 3, 15, 23, 59))
