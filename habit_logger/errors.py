class HabitLoggerError(Exception):
    """Base class for errors raised by the habit logger."""


class ValidationError(HabitLoggerError):
    """User input is malformed or out of range."""


class UnknownReportTypeError(HabitLoggerError):
    def __init__(self, report_type) -> None:
        super().__init__(f"Unknown report type: {report_type!r}")
        self.report_type = report_type


class NoChangesRequestedError(HabitLoggerError):
    def __init__(self, table: str) -> None:
        super().__init__(f"No fields to update in {table}")
        self.table = table


class UnknownFieldError(HabitLoggerError):
    def __init__(self, table: str, field: str) -> None:
        super().__init__(f"{table} has no updatable field {field!r}")
        self.table = table
        self.field = field


class StorageError(HabitLoggerError):
    """The database rejected a statement or could not be reached."""


class EarlyExit:
    """Marker returned by prompts when the user abandons the current flow."""

    def __repr__(self) -> str:
        return "EARLY_EXIT"


EARLY_EXIT = EarlyExit()
