import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, model_validator


class ReportType(str, Enum):
    DATE_TO_TODAY = "DateToToday"
    DATE_TO_DATE = "DateToDate"
    TOTAL_FOR_MONTH = "TotalForMonth"
    YEAR_TO_DATE = "YearToDate"
    TOTAL_FOR_YEAR = "TotalForYear"
    TOTAL = "Total"


# Request fields each report type needs; everything else on the request is ignored.
REQUIRED_FIELDS: dict[ReportType, tuple[str, ...]] = {
    ReportType.DATE_TO_TODAY: ("date",),
    ReportType.DATE_TO_DATE: ("start_date", "end_date"),
    ReportType.TOTAL_FOR_MONTH: ("month", "year"),
    ReportType.YEAR_TO_DATE: ("year", "date"),
    ReportType.TOTAL_FOR_YEAR: ("year",),
    ReportType.TOTAL: (),
}


class ReportRequest(BaseModel):
    report_type: ReportType
    habit_id: int
    date: Optional[datetime.date] = None
    start_date: Optional[datetime.date] = None
    end_date: Optional[datetime.date] = None
    month: Optional[int] = Field(default=None, ge=1, le=12)
    year: Optional[int] = Field(default=None, ge=1, le=9999)

    @model_validator(mode="after")
    def check_required_fields(self) -> "ReportRequest":
        missing = [name for name in REQUIRED_FIELDS[self.report_type] if getattr(self, name) is None]
        if missing:
            raise ValueError(f"{self.report_type.value} report requires: {', '.join(missing)}")
        if self.start_date and self.end_date and self.report_type == ReportType.DATE_TO_DATE:
            if self.start_date > self.end_date:
                raise ValueError("start_date must not be after end_date")
        return self


class ReportRow(BaseModel):
    id: int
    date: datetime.date
    quantity: int
    habit_name: str
    unit: str
    running_total: int


class ReportSummary(BaseModel):
    count: int
    total: int
    unit: str
    habit_name: str
