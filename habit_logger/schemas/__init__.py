from habit_logger.schemas.habit import HabitIn, HabitOut, HabitUpdate
from habit_logger.schemas.record import RecordIn, RecordOut, RecordUpdate
from habit_logger.schemas.report import REQUIRED_FIELDS, ReportRequest, ReportRow, ReportSummary, ReportType

__all__ = [
    "HabitIn",
    "HabitOut",
    "HabitUpdate",
    "RecordIn",
    "RecordOut",
    "RecordUpdate",
    "REQUIRED_FIELDS",
    "ReportRequest",
    "ReportRow",
    "ReportSummary",
    "ReportType",
]
