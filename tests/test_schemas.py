from datetime import date

import pytest
from pydantic import ValidationError

from habit_logger.schemas import HabitIn, HabitUpdate, RecordIn, RecordUpdate, ReportRequest, ReportType


def test_report_request_requires_type_specific_fields():
    with pytest.raises(ValidationError):
        ReportRequest(report_type=ReportType.DATE_TO_DATE, habit_id=1, start_date=date(2024, 1, 1))
    with pytest.raises(ValidationError):
        ReportRequest(report_type=ReportType.YEAR_TO_DATE, habit_id=1, year=2024)


def test_report_request_month_range():
    with pytest.raises(ValidationError):
        ReportRequest(report_type=ReportType.TOTAL_FOR_MONTH, habit_id=1, month=13, year=2024)


def test_report_request_rejects_reversed_range():
    with pytest.raises(ValidationError):
        ReportRequest(
            report_type=ReportType.DATE_TO_DATE, habit_id=1, start_date=date(2024, 2, 1), end_date=date(2024, 1, 1)
        )


def test_report_request_accepts_type_value():
    request = ReportRequest(report_type="TotalForYear", habit_id=3, year=2024)

    assert request.report_type is ReportType.TOTAL_FOR_YEAR


def test_total_request_needs_only_habit():
    assert ReportRequest(report_type=ReportType.TOTAL, habit_id=1).habit_id == 1


def test_habit_and_record_input_validation():
    with pytest.raises(ValidationError):
        HabitIn(name="", unit="Steps")
    with pytest.raises(ValidationError):
        RecordIn(habit_id=1, date=date(2024, 1, 1), quantity=-5)


def test_update_models_check_only_the_given_fields():
    assert HabitUpdate(unit="Km").name is None
    assert RecordUpdate(date=date(2024, 1, 1)).quantity is None
    with pytest.raises(ValidationError):
        HabitUpdate(name="x" * 256)
    with pytest.raises(ValidationError):
        HabitUpdate(unit="")
    with pytest.raises(ValidationError):
        RecordUpdate(quantity=-1)
