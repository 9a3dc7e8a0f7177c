# app/utils/age_calculator.py
import calendar
from datetime import date, datetime


def _as_date(value) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def add_months(start: date, months: int) -> date:
    """
    Adds calendar months to a date. When the target month is shorter than the
    start day, the day is clamped to the last day of that month
    (2024-01-31 + 1 month -> 2024-02-29).
    """
    month_index = start.year * 12 + (start.month - 1) + months
    year, month = divmod(month_index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(start.day, last_day))


def full_months_between(birth_date: date, now: date) -> int:
    months = (now.year - birth_date.year) * 12 + (now.month - birth_date.month)
    # the month only counts once its anniversary day is reached
    if months > 0 and add_months(birth_date, months) > now:
        months -= 1
    return months


def compute_age(birth_date, now) -> dict:
    """
    Buckets the time elapsed since birth into days, weeks, months or
    years + months:
    - {"unit": "days", "value": n}             less than a week
    - {"unit": "weeks", "value": n}            less than a full month
    - {"unit": "months", "value": n}           1 to 23 months
    - {"unit": "years_months", "years": y, "months": m}   24 months or more
    """
    birth_date = _as_date(birth_date)
    now = _as_date(now)
    if birth_date > now:
        raise ValueError("birth_date cannot be after now")

    months = full_months_between(birth_date, now)

    if months == 0:
        days = (now - birth_date).days
        weeks = days // 7
        if weeks == 0:
            return {"unit": "days", "value": days}
        return {"unit": "weeks", "value": weeks}

    if months < 24:
        return {"unit": "months", "value": months}

    return {"unit": "years_months", "years": months // 12, "months": months % 12}


def _pluralize(value: int, label: str) -> str:
    return f"{value} {label}{'s' if value != 1 else ''}"


def format_age(age: dict) -> str:
    if age["unit"] == "years_months":
        years_text = _pluralize(age["years"], "year")
        if age["months"]:
            return f"{years_text} and {_pluralize(age['months'], 'month')}"
        return years_text

    labels = {"days": "day", "weeks": "week", "months": "month"}
    return _pluralize(age["value"], labels[age["unit"]])
