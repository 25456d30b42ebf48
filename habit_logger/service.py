"""
HabitLogger sequences every user-facing operation: it collects input through
the prompter, talks to storage, and hands shaped rows to the renderer.

Reports and partial updates go through ``query_builder`` and ``Storage``;
adds, lookups and deletes use the ORM helpers in ``habit_logger.crud``.
"""

import logging
from enum import Enum
from typing import Any, Optional, Union

from pydantic import ValidationError as RequestValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from habit_logger import crud
from habit_logger.errors import EARLY_EXIT, EarlyExit, NoChangesRequestedError, StorageError, UnknownReportTypeError
from habit_logger.query_builder import build_report_query, build_update_query
from habit_logger.schemas import (
    REQUIRED_FIELDS,
    HabitIn,
    HabitOut,
    HabitUpdate,
    RecordIn,
    RecordOut,
    RecordUpdate,
    ReportRequest,
    ReportRow,
    ReportSummary,
    ReportType,
)
from habit_logger.storage import Storage

logger = logging.getLogger(__name__)

NO_RECORDS = "No records found."
NO_CHANGES = "No changes made."


class Outcome(str, Enum):
    DONE = "done"
    CANCELLED = "cancelled"
    NOT_FOUND = "not_found"
    NO_CHANGES = "no_changes"
    FAILED = "failed"


def summarize(rows: list[dict[str, Any]]) -> tuple[list[ReportRow], ReportSummary]:
    report_rows: list[ReportRow] = []
    running_total = 0
    for row in rows:
        running_total += int(row["quantity"])
        report_rows.append(ReportRow(**row, running_total=running_total))

    first = report_rows[0] if report_rows else None
    summary = ReportSummary(
        count=len(report_rows),
        total=running_total,
        unit=first.unit if first else "",
        habit_name=first.habit_name if first else "",
    )
    return report_rows, summary


class HabitLogger:
    def __init__(self, storage: Storage, session_factory: sessionmaker, prompter, renderer) -> None:
        self.storage = storage
        self.session_factory = session_factory
        self.prompter = prompter
        self.renderer = renderer

    # Habits

    def show_habits(self) -> list[HabitOut]:
        with self.session_factory() as db:
            habits = [HabitOut.model_validate(h) for h in crud.get_habits(db)]
        self.renderer.render_habits(habits)
        return habits

    def add_habit(self) -> Outcome:
        name = self.prompter.ask_text("Enter the name of the habit")
        if name is EARLY_EXIT:
            return Outcome.CANCELLED
        unit = self.prompter.ask_text("Enter the unit of measurement")
        if unit is EARLY_EXIT:
            return Outcome.CANCELLED

        try:
            habit_in = HabitIn(name=name, unit=unit)
        except RequestValidationError as exc:
            self.renderer.message(f"Invalid habit: {exc.errors()[0]['msg']}")
            return Outcome.FAILED

        try:
            with self.session_factory() as db:
                habit = crud.add_habit(db, habit_in.name, habit_in.unit)
        except SQLAlchemyError:
            logger.exception("Failed to add habit %r", name)
            self.renderer.message("Failed to add habit.")
            return Outcome.FAILED

        logger.info("Added habit %s (%s)", habit.id, name)
        self.renderer.message("Habit added successfully!")
        return Outcome.DONE

    def delete_habit(self) -> Outcome:
        habit_id = self.ask_habit_id()
        if isinstance(habit_id, EarlyExit):
            return Outcome.CANCELLED
        if habit_id is None:
            return Outcome.NOT_FOUND

        confirmed = self.prompter.confirm("Delete this habit and all of its records?")
        if confirmed is EARLY_EXIT or not confirmed:
            return Outcome.CANCELLED

        try:
            with self.session_factory() as db:
                deleted = crud.delete_habit(db, habit_id)
        except SQLAlchemyError:
            logger.exception("Failed to delete habit %s", habit_id)
            self.renderer.message("Failed to delete habit.")
            return Outcome.FAILED

        if not deleted:
            self.renderer.message(f"No habit with ID {habit_id}.")
            return Outcome.NOT_FOUND
        logger.info("Deleted habit %s", habit_id)
        self.renderer.message("Habit deleted successfully!")
        return Outcome.DONE

    def update_habit(self) -> Outcome:
        habit_id = self.ask_habit_id()
        if isinstance(habit_id, EarlyExit):
            return Outcome.CANCELLED
        if habit_id is None:
            return Outcome.NOT_FOUND

        changes = self._collect_changes(
            habit_id,
            [
                ("name", "Change the name?", self.prompter.ask_text, "Enter the new name"),
                ("unit", "Change the unit of measurement?", self.prompter.ask_text, "Enter the new unit"),
            ],
        )
        if changes is EARLY_EXIT:
            return Outcome.CANCELLED
        return self._apply_update("habits", changes, HabitUpdate, "habit")

    def ask_habit_id(self) -> Union[int, EarlyExit, None]:
        """List habits and ask for one of their IDs; None when the habit does not exist."""
        habits = self.show_habits()
        if not habits:
            return None

        habit_id = self.prompter.ask_int("Enter the ID of the habit")
        if habit_id is EARLY_EXIT:
            return EARLY_EXIT
        if habit_id not in {h.id for h in habits}:
            self.renderer.message(f"No habit with ID {habit_id}.")
            return None
        return habit_id

    # Records

    def view_records(self, habit_id: Optional[int] = None) -> list[RecordOut]:
        with self.session_factory() as db:
            rows = [RecordOut(**row) for row in crud.get_records_with_habits(db, habit_id)]
        self.renderer.render_records(rows)
        return rows

    def add_record(self) -> Outcome:
        habit_id = self.ask_habit_id()
        if isinstance(habit_id, EarlyExit):
            return Outcome.CANCELLED
        if habit_id is None:
            return Outcome.NOT_FOUND

        record_date = self.prompter.ask_date("Enter the date of the record")
        if record_date is EARLY_EXIT:
            return Outcome.CANCELLED
        quantity = self.prompter.ask_int("Enter the quantity of the record")
        if quantity is EARLY_EXIT:
            return Outcome.CANCELLED

        try:
            record_in = RecordIn(habit_id=habit_id, date=record_date, quantity=quantity)
        except RequestValidationError as exc:
            self.renderer.message(f"Invalid record: {exc.errors()[0]['msg']}")
            return Outcome.FAILED

        try:
            with self.session_factory() as db:
                if crud.get_habit(db, record_in.habit_id) is None:
                    self.renderer.message(f"No habit with ID {habit_id}.")
                    return Outcome.NOT_FOUND
                record = crud.add_record(db, record_in.habit_id, record_in.date, record_in.quantity)
        except SQLAlchemyError:
            logger.exception("Failed to add record for habit %s", habit_id)
            self.renderer.message("Failed to add record.")
            return Outcome.FAILED

        logger.info("Added record %s for habit %s", record.id, habit_id)
        self.renderer.message("Record added successfully!")
        return Outcome.DONE

    def delete_record(self) -> Outcome:
        record_id = self._ask_record_id()
        if isinstance(record_id, EarlyExit):
            return Outcome.CANCELLED
        if record_id is None:
            return Outcome.NOT_FOUND

        try:
            with self.session_factory() as db:
                deleted = crud.delete_record(db, record_id)
        except SQLAlchemyError:
            logger.exception("Failed to delete record %s", record_id)
            self.renderer.message("Failed to delete record.")
            return Outcome.FAILED

        if not deleted:
            self.renderer.message(f"No record with ID {record_id}.")
            return Outcome.NOT_FOUND
        logger.info("Deleted record %s", record_id)
        self.renderer.message("Record deleted successfully!")
        return Outcome.DONE

    def update_record(self) -> Outcome:
        record_id = self._ask_record_id()
        if isinstance(record_id, EarlyExit):
            return Outcome.CANCELLED
        if record_id is None:
            return Outcome.NOT_FOUND

        changes = self._collect_changes(
            record_id,
            [
                ("date", "Change the date?", self.prompter.ask_date, "Enter the new date"),
                ("quantity", "Change the quantity?", self.prompter.ask_int, "Enter the new quantity"),
            ],
        )
        if changes is EARLY_EXIT:
            return Outcome.CANCELLED
        return self._apply_update("records", changes, RecordUpdate, "record")

    def _ask_record_id(self) -> Union[int, EarlyExit, None]:
        rows = self.view_records()
        if not rows:
            return None

        record_id = self.prompter.ask_int("Enter the ID of the record")
        if record_id is EARLY_EXIT:
            return EARLY_EXIT
        with self.session_factory() as db:
            found = crud.get_record(db, record_id) is not None
        if not found:
            self.renderer.message(f"No record with ID {record_id}.")
            return None
        return record_id

    # Partial updates

    def _collect_changes(self, row_id: int, fields) -> Union[dict[str, Any], EarlyExit]:
        changes: dict[str, Any] = {"id": row_id}
        for name, question, ask, message in fields:
            wanted = self.prompter.confirm(question)
            if wanted is EARLY_EXIT:
                return EARLY_EXIT
            if not wanted:
                continue
            value = ask(message)
            if value is EARLY_EXIT:
                return EARLY_EXIT
            changes[name] = value
        return changes

    def _apply_update(self, table: str, changes: dict[str, Any], schema, label: str) -> Outcome:
        try:
            schema(**{name: value for name, value in changes.items() if name != "id"})
        except RequestValidationError as exc:
            self.renderer.message(f"Invalid {label}: {exc.errors()[0]['msg']}")
            return Outcome.FAILED

        try:
            query = build_update_query(table, changes)
        except NoChangesRequestedError:
            self.renderer.message(NO_CHANGES)
            return Outcome.NO_CHANGES

        try:
            affected = self.storage.execute_update(query.sql, query.params)
        except StorageError:
            self.renderer.message(f"Failed to update {table}.")
            return Outcome.FAILED

        if affected < 1:
            self.renderer.message(NO_CHANGES)
            return Outcome.NOT_FOUND
        logger.info("Updated %s %s: %s", table, changes["id"], ", ".join(k for k in changes if k != "id"))
        self.renderer.message("Updated successfully!")
        return Outcome.DONE

    # Reports

    def generate_report(self, report_type: ReportType, habit_id: Optional[int] = None) -> Outcome:
        try:
            report_type = ReportType(report_type)
        except ValueError:
            logger.warning("Unknown report type requested: %r", report_type)
            self.renderer.message(NO_RECORDS)
            return Outcome.NOT_FOUND
        required = REQUIRED_FIELDS[report_type]

        if habit_id is None:
            answer = self.ask_habit_id()
            if isinstance(answer, EarlyExit):
                return Outcome.CANCELLED
            if answer is None:
                return Outcome.NOT_FOUND
            habit_id = answer

        inputs = self._collect_report_inputs(report_type, required)
        if inputs is EARLY_EXIT:
            return Outcome.CANCELLED

        try:
            request = ReportRequest(report_type=report_type, habit_id=habit_id, **inputs)
            query = build_report_query(request)
        except (RequestValidationError, UnknownReportTypeError) as exc:
            logger.warning("Could not build %s report: %s", report_type, exc)
            self.renderer.message(NO_RECORDS)
            return Outcome.NOT_FOUND

        try:
            rows = self.storage.execute_query(query.sql, query.params)
        except StorageError:
            self.renderer.message("Failed to generate the report.")
            return Outcome.FAILED

        if not rows:
            self.renderer.message(NO_RECORDS)
            return Outcome.NOT_FOUND

        report_rows, summary = summarize(rows)
        logger.info("Generated %s report for habit %s: %s rows", request.report_type.value, habit_id, summary.count)
        self.renderer.render_report(report_rows, summary)
        return Outcome.DONE

    def _collect_report_inputs(self, report_type: ReportType, required: tuple[str, ...]) -> Union[dict[str, Any], EarlyExit]:
        inputs: dict[str, Any] = {}
        for name in required:
            if name == "date":
                label = "end" if report_type == ReportType.YEAR_TO_DATE else "start"
                value = self.prompter.ask_date(f"Enter the {label} date")
            elif name == "start_date":
                value = self.prompter.ask_date("Enter the start date")
            elif name == "end_date":
                value = self._ask_end_date(inputs["start_date"])
            elif name == "month":
                value = self.prompter.ask_month()
            else:
                value = self.prompter.ask_year()

            if value is EARLY_EXIT:
                return EARLY_EXIT
            inputs[name] = value
        return inputs

    def _ask_end_date(self, start_date):
        while True:
            end_date = self.prompter.ask_date("Enter the end date")
            if end_date is EARLY_EXIT or end_date >= start_date:
                return end_date
            self.renderer.message("Invalid input. The end date cannot be before the start date.")
