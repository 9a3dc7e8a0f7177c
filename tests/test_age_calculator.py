from datetime import date, datetime, timedelta

import pytest

from app.utils.age_calculator import add_months, compute_age, format_age

UNIT_RANK = {"days": 0, "weeks": 1, "months": 2, "years_months": 3}


def test_same_day_is_zero_days():
    birth = date(2024, 1, 15)
    assert compute_age(birth, birth) == {"unit": "days", "value": 0}


def test_days_bucket():
    assert compute_age(date(2024, 1, 15), date(2024, 1, 20)) == {"unit": "days", "value": 5}


def test_weeks_bucket():
    assert compute_age(date(2024, 1, 15), date(2024, 1, 22)) == {"unit": "weeks", "value": 1}
    assert compute_age(date(2024, 1, 15), date(2024, 2, 14)) == {"unit": "weeks", "value": 4}


def test_months_bucket():
    assert compute_age(date(2024, 1, 15), date(2024, 3, 20)) == {"unit": "months", "value": 2}
    assert compute_age(date(2024, 1, 15), date(2024, 2, 15)) == {"unit": "months", "value": 1}


def test_month_only_counts_on_its_anniversary():
    # calendar month difference is 2, but the 15th hasn't come round yet
    assert compute_age(date(2024, 1, 15), date(2024, 3, 10)) == {"unit": "months", "value": 1}


def test_years_and_months_bucket():
    assert compute_age(date(2022, 1, 15), date(2024, 1, 15)) == {
        "unit": "years_months", "years": 2, "months": 0,
    }
    assert compute_age(date(2021, 6, 1), date(2024, 9, 3)) == {
        "unit": "years_months", "years": 3, "months": 3,
    }


def test_23_months_stays_in_months():
    assert compute_age(date(2022, 1, 15), date(2023, 12, 20)) == {"unit": "months", "value": 23}


def test_accepts_datetimes():
    assert compute_age(datetime(2024, 1, 15, 23, 0), datetime(2024, 1, 20, 1, 0)) == {
        "unit": "days", "value": 5,
    }


def test_future_birth_date_raises():
    with pytest.raises(ValueError):
        compute_age(date(2024, 2, 1), date(2024, 1, 1))


def test_unit_never_regresses_as_time_advances():
    birth = date(2023, 1, 31)
    previous_rank = 0
    for offset in range(0, 900):
        age = compute_age(birth, birth + timedelta(days=offset))
        rank = UNIT_RANK[age["unit"]]
        assert rank >= previous_rank
        previous_rank = rank


def test_add_months_clamps_to_month_end():
    assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)
    assert add_months(date(2023, 1, 31), 1) == date(2023, 2, 28)
    assert add_months(date(2024, 11, 30), 3) == date(2025, 2, 28)
    assert add_months(date(2024, 3, 15), -3) == date(2023, 12, 15)


@pytest.mark.parametrize(
    "age, expected",
    [
        ({"unit": "days", "value": 0}, "0 days"),
        ({"unit": "days", "value": 1}, "1 day"),
        ({"unit": "weeks", "value": 3}, "3 weeks"),
        ({"unit": "months", "value": 1}, "1 month"),
        ({"unit": "years_months", "years": 2, "months": 0}, "2 years"),
        ({"unit": "years_months", "years": 2, "months": 1}, "2 years and 1 month"),
        ({"unit": "years_months", "years": 3, "months": 5}, "3 years and 5 months"),
    ],
)
def test_format_age(age, expected):
    assert format_age(age) == expected
