from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from habit_logger.models import Habit


def add_habit(db: Session, name: str, unit: str) -> Habit:
    habit = Habit(name=name, unit=unit)
    db.add(habit)
    db.commit()
    db.refresh(habit)
    return habit


def get_habits(db: Session) -> list[Habit]:
    return list(db.scalars(select(Habit).order_by(Habit.id)))


def get_habit(db: Session, habit_id: int) -> Optional[Habit]:
    return db.get(Habit, habit_id)


def delete_habit(db: Session, habit_id: int) -> bool:
    result = db.execute(delete(Habit).where(Habit.id == habit_id))
    db.commit()
    return result.rowcount > 0
