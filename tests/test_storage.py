from datetime import date

import pytest

from habit_logger import crud
from habit_logger.errors import StorageError
from habit_logger.query_builder import build_report_query, build_update_query
from habit_logger.schemas import ReportRequest, ReportType


def _run_report(storage, habit_id, report_type, **fields):
    query = build_report_query(ReportRequest(report_type=report_type, habit_id=habit_id, **fields))
    return storage.execute_query(query.sql, query.params)


def _quantities(rows):
    return [row["quantity"] for row in rows]


def test_date_to_date_returns_rows_inside_range(storage, session_factory, habit):
    with session_factory() as db:
        crud.add_record(db, habit.id, date(2024, 1, 15), 10)
    with session_factory() as db:
        crud.add_record(db, habit.id, date(2024, 2, 1), 5)

    rows = _run_report(
        storage, habit.id, ReportType.DATE_TO_DATE, start_date=date(2024, 1, 1), end_date=date(2024, 1, 31)
    )

    assert len(rows) == 1
    assert rows[0]["quantity"] == 10


def test_date_to_date_includes_both_ends(storage, habit, records):
    rows = _run_report(
        storage, habit.id, ReportType.DATE_TO_DATE, start_date=date(2024, 1, 15), end_date=date(2024, 2, 1)
    )

    assert _quantities(rows) == [10, 5]


def test_total_for_month_matches_only_that_month(storage, habit, records):
    rows = _run_report(storage, habit.id, ReportType.TOTAL_FOR_MONTH, month=3, year=2024)

    assert _quantities(rows) == [7]
    assert rows[0]["date"].startswith("2024-03-")


def test_total_returns_all_rows_for_habit_ascending(storage, habit, records):
    rows = _run_report(storage, habit.id, ReportType.TOTAL)

    assert _quantities(rows) == [3, 10, 5, 7]
    assert [row["date"] for row in rows] == sorted(row["date"] for row in rows)
    assert {row["habit_name"] for row in rows} == {"Walking"}
    assert {row["unit"] for row in rows} == {"Steps"}


def test_date_to_today_starts_at_date(storage, habit, records):
    rows = _run_report(storage, habit.id, ReportType.DATE_TO_TODAY, date=date(2024, 1, 15))

    assert _quantities(rows) == [10, 5, 7]


def test_year_to_date_stops_at_end_date(storage, habit, records):
    rows = _run_report(storage, habit.id, ReportType.YEAR_TO_DATE, year=2024, date=date(2024, 2, 29))

    assert _quantities(rows) == [10, 5]


def test_total_for_year(storage, habit, records):
    assert _quantities(_run_report(storage, habit.id, ReportType.TOTAL_FOR_YEAR, year=2023)) == [3]


def test_report_without_matches_returns_empty_list(storage, habit, records):
    assert _run_report(storage, habit.id, ReportType.TOTAL_FOR_YEAR, year=2019) == []


def test_partial_update_changes_only_requested_fields(storage, session_factory, habit, records):
    record = records[0]
    query = build_update_query("records", {"id": record.id, "quantity": 42})

    assert storage.execute_update(query.sql, query.params) == 1

    with session_factory() as db:
        updated = crud.get_record(db, record.id)
        assert updated.quantity == 42
        assert updated.date == date(2024, 3, 10)


def test_partial_update_of_date_keeps_iso_storage(storage, session_factory, habit, records):
    record = records[0]
    query = build_update_query("records", {"id": record.id, "date": date(2024, 4, 2)})
    storage.execute_update(query.sql, query.params)

    rows = _run_report(storage, habit.id, ReportType.TOTAL_FOR_MONTH, month=4, year=2024)
    assert _quantities(rows) == [7]


def test_partial_update_of_missing_row_affects_nothing(storage, habit):
    query = build_update_query("habits", {"id": 999, "name": "Ghost"})

    assert storage.execute_update(query.sql, query.params) == 0


def test_deleting_habit_cascades_to_records(storage, habit, other_habit, records):
    count_sql = "SELECT COUNT(*) AS n FROM records WHERE HabitId = :id"
    assert storage.execute_query(count_sql, {"id": habit.id}) == [{"n": 4}]

    assert storage.execute_update("DELETE FROM habits WHERE id = :id", {"id": habit.id}) == 1

    assert storage.execute_query(count_sql, {"id": habit.id}) == [{"n": 0}]
    assert storage.execute_query(count_sql, {"id": other_habit.id}) == [{"n": 1}]


def test_record_for_missing_habit_is_rejected(storage):
    with pytest.raises(StorageError):
        storage.execute_update(
            "INSERT INTO records (Date, Quantity, HabitId) VALUES (:date, :quantity, :habitId)",
            {"date": date(2024, 1, 1), "quantity": 1, "habitId": 12345},
        )


def test_malformed_sql_raises_storage_error(storage):
    with pytest.raises(StorageError):
        storage.execute_query("SELECT * FROM nowhere")
