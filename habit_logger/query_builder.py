"""
Parameterized SQL for habit reports and partial updates.

Nothing in this module touches the database. Each builder returns a
``SqlQuery`` whose ``params`` keys are exactly the ``:name`` placeholders
used in ``sql``. Report queries also list them in the order they appear.
"""

import datetime
import re
from dataclasses import dataclass, field
from typing import Callable, Union

from habit_logger.errors import NoChangesRequestedError, UnknownFieldError, UnknownReportTypeError, ValidationError
from habit_logger.schemas.report import REQUIRED_FIELDS, ReportRequest, ReportType

ParamValue = Union[int, str, datetime.date]

PLACEHOLDER_RE = re.compile(r"(?<!:):([A-Za-z_][A-Za-z0-9_]*)")

REPORT_SELECT = (
    "SELECT r.Id AS id, r.Date AS date, r.Quantity AS quantity, "
    "h.Name AS habit_name, h.MeasurementUnit AS unit "
    "FROM records AS r JOIN habits AS h ON h.Id = r.HabitId"
)

UPDATABLE_COLUMNS: dict[str, dict[str, str]] = {
    "habits": {"name": "Name", "unit": "MeasurementUnit"},
    "records": {"date": "Date", "quantity": "Quantity"},
}


@dataclass(frozen=True)
class SqlQuery:
    sql: str
    params: dict[str, ParamValue] = field(default_factory=dict)

    def placeholders(self) -> list[str]:
        return PLACEHOLDER_RE.findall(self.sql)


Predicate = tuple[list[str], dict[str, ParamValue]]


def _month_text(month: int) -> str:
    return f"{month:02d}"


def _year_text(year: int) -> str:
    return f"{year:04d}"


def _date_to_today(request: ReportRequest) -> Predicate:
    return ["r.Date >= :date"], {"date": request.date}


def _date_to_date(request: ReportRequest) -> Predicate:
    return (
        ["r.Date BETWEEN :startDate AND :endDate"],
        {"startDate": request.start_date, "endDate": request.end_date},
    )


def _total_for_month(request: ReportRequest) -> Predicate:
    return (
        ["strftime('%m', r.Date) = :month", "strftime('%Y', r.Date) = :year"],
        {"month": _month_text(request.month), "year": _year_text(request.year)},
    )


def _year_to_date(request: ReportRequest) -> Predicate:
    return (
        ["strftime('%Y', r.Date) = :year", "r.Date <= :date"],
        {"year": _year_text(request.year), "date": request.date},
    )


def _total_for_year(request: ReportRequest) -> Predicate:
    return ["strftime('%Y', r.Date) = :year"], {"year": _year_text(request.year)}


def _total(request: ReportRequest) -> Predicate:
    return [], {}


_REPORT_PREDICATES: dict[ReportType, Callable[[ReportRequest], Predicate]] = {
    ReportType.DATE_TO_TODAY: _date_to_today,
    ReportType.DATE_TO_DATE: _date_to_date,
    ReportType.TOTAL_FOR_MONTH: _total_for_month,
    ReportType.YEAR_TO_DATE: _year_to_date,
    ReportType.TOTAL_FOR_YEAR: _total_for_year,
    ReportType.TOTAL: _total,
}


def build_report_query(request: ReportRequest) -> SqlQuery:
    """
    Build the SELECT for one habit report.

    Rows come back joined with the habit's name and unit, filtered by the
    report's date predicate and ordered by ascending date.
    """
    try:
        report_type = ReportType(request.report_type)
        predicate_for = _REPORT_PREDICATES[report_type]
    except (KeyError, ValueError, TypeError):
        raise UnknownReportTypeError(request.report_type) from None

    missing = [name for name in REQUIRED_FIELDS[report_type] if getattr(request, name, None) is None]
    if missing:
        raise ValidationError(f"Report request is missing: {', '.join(missing)}")

    clauses, params = predicate_for(request)
    clauses.append("r.HabitId = :id")
    params["id"] = request.habit_id

    sql = f"{REPORT_SELECT} WHERE {' AND '.join(clauses)} ORDER BY r.Date ASC"
    return SqlQuery(sql=sql, params=params)


def build_update_query(table: str, changes: dict[str, ParamValue]) -> SqlQuery:
    """
    Build ``UPDATE <table> SET ... WHERE id = :id`` from the fields the user changed.

    ``changes`` must hold ``id`` plus only the fields to change; the SET clause
    keeps their insertion order.
    """
    try:
        columns = UPDATABLE_COLUMNS[table]
    except KeyError:
        raise ValueError(f"Unknown table: {table!r}") from None

    if "id" not in changes:
        raise ValueError("A partial update needs the id of the row to change")

    fields = [name for name in changes if name != "id"]
    if not fields:
        raise NoChangesRequestedError(table)

    assignments = []
    for name in fields:
        if name not in columns:
            raise UnknownFieldError(table, name)
        assignments.append(f"{columns[name]} = :{name}")

    sql = f"UPDATE {table} SET {', '.join(assignments)} WHERE id = :id"
    return SqlQuery(sql=sql, params=dict(changes))
