from typing import Callable, Sequence

from habit_logger.schemas import HabitOut, RecordOut, ReportRow, ReportSummary


def format_table(headers: Sequence[str], rows: Sequence[Sequence[object]]) -> str:
    cells = [[str(value) for value in row] for row in rows]
    widths = [len(header) for header in headers]
    for row in cells:
        for idx, value in enumerate(row):
            widths[idx] = max(widths[idx], len(value))

    def line(values: Sequence[str]) -> str:
        return " | ".join(value.ljust(widths[idx]) for idx, value in enumerate(values)).rstrip()

    separator = "-+-".join("-" * width for width in widths)
    return "\n".join([line(headers), separator] + [line(row) for row in cells])


class ConsoleRenderer:
    def __init__(self, output_func: Callable[[str], None] = print, date_format: str = "%d-%m-%Y") -> None:
        self.output_func = output_func
        self.date_format = date_format

    def message(self, text: str) -> None:
        self.output_func(text)

    def render_habits(self, habits: Sequence[HabitOut]) -> None:
        if not habits:
            self.output_func("No habits yet.")
            return
        self.output_func(format_table(["ID", "Habit", "Unit"], [[h.id, h.name, h.unit] for h in habits]))

    def render_records(self, rows: Sequence[RecordOut]) -> None:
        if not rows:
            self.output_func("No records found.")
            return
        self.output_func(
            format_table(
                ["ID", "Date", "Quantity", "Habit", "Unit"],
                [[r.id, r.date.strftime(self.date_format), r.quantity, r.habit_name, r.unit] for r in rows],
            )
        )

    def render_report(self, rows: Sequence[ReportRow], summary: ReportSummary) -> None:
        self.output_func(f"Report for {summary.habit_name} ({summary.unit})")
        self.output_func(
            format_table(
                ["ID", "Date", "Quantity", "Running total"],
                [[r.id, r.date.strftime(self.date_format), r.quantity, r.running_total] for r in rows],
            )
        )
        self.output_func(f"Records: {summary.count}  Total: {summary.total} {summary.unit}")
