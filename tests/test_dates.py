from datetime import date

from spendlite.core.dates import (
    friendly_month,
    month_key,
    month_key_for,
    month_label,
    parse_date,
    parse_numeric,
    parse_written,
)


def test_parse_date_day_month_disambiguation():
    assert parse_date("15/03/2024") == date(2024, 3, 15)
    assert parse_date("03/15/2024") == date(2024, 3, 15)
    # both parts <= 12: day first
    assert parse_date("05/03/2024") == date(2024, 3, 5)
    assert parse_date("5-3-2024") == date(2024, 3, 5)


def test_parse_date_written_and_iso():
    assert parse_date("5 March, 2024") == date(2024, 3, 5)
    assert parse_date("2024-03-05") == date(2024, 3, 5)
    assert parse_date("  2024-03-05  ") == date(2024, 3, 5)


def test_parse_written_strips_time_and_weekday():
    assert parse_written("10:30 am Tue 5 March, 2024") == date(2024, 3, 5)
    assert parse_written("9:05PM 28 february 2023") == date(2023, 2, 28)
    assert parse_written("March 5 2024") is None


def test_parse_numeric_rejects_impossible_dates():
    assert parse_numeric("31/02/2024") is None
    assert parse_numeric("2024-03-05") is None
    assert parse_date("31/02/2024") is None


def test_parse_date_unparseable():
    assert parse_date("garbage") is None
    assert parse_date("") is None
    assert parse_date(None) is None


def test_month_helpers():
    assert month_key(date(2024, 3, 5)) == "2024-03"
    assert month_key_for("15/11/2023") == "2023-11"
    assert month_key_for("garbage") is None
    assert month_label("2024-03") == "March 2024"
    assert month_label("") == "All months"
    assert friendly_month(None) == "All months"
    assert friendly_month("2024-12") == "December 2024"
    assert friendly_month("Groceries") == "Groceries"


def test_parse_date_needs_day_and_year():
    assert parse_date("March") is None
    assert parse_date("2024") is None
    assert parse_date("March 2024") is None
    assert parse_date("Tue 5 March 2024") == date(2024, 3, 5)


def test_month_label_passes_through_bad_keys():
    assert month_label("2024-13") == "2024-13"
    assert friendly_month("2024-13") == "2024-13"
