from datetime import date
from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from habit_logger.models import Habit, Record


def add_record(db: Session, habit_id: int, record_date: date, quantity: int) -> Record:
    record = Record(habit_id=habit_id, date=record_date, quantity=quantity)
    db.add(record)
    db.commit()
    db.refresh(record)
    return record


def get_record(db: Session, record_id: int) -> Optional[Record]:
    return db.get(Record, record_id)


def get_records_with_habits(db: Session, habit_id: Optional[int] = None) -> list[dict]:
    stmt = (
        select(Record.id, Record.date, Record.quantity, Habit.name.label("habit_name"), Habit.unit)
        .join(Habit, Habit.id == Record.habit_id)
        .order_by(Record.date, Record.id)
    )
    if habit_id is not None:
        stmt = stmt.where(Record.habit_id == habit_id)
    return [dict(row) for row in db.execute(stmt).mappings()]


def delete_record(db: Session, record_id: int) -> bool:
    result = db.execute(delete(Record).where(Record.id == record_id))
    db.commit()
    return result.rowcount > 0
