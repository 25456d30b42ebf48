import random
from datetime import date, timedelta
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from habit_logger.models import Habit, Record

SAMPLE_HABITS = [
    {"name": "Walking", "unit": "Steps"},
    {"name": "Running", "unit": "Meters"},
    {"name": "Reading", "unit": "Pages"},
    {"name": "Meditating", "unit": "Minutes"},
    {"name": "Coding", "unit": "Hours"},
    {"name": "Chocolate", "unit": "Grams"},
    {"name": "Drinking Water", "unit": "Milliliters"},
    {"name": "Glasses of Wine", "unit": "Milliliters"},
]

SAMPLE_START_DATE = date(2023, 7, 1)
SAMPLE_END_DATE = date(2024, 2, 1)
SAMPLE_MIN_QUANTITY = 1
SAMPLE_MAX_QUANTITY = 2000


def is_empty(db: Session) -> bool:
    habit_count = db.scalar(select(func.count()).select_from(Habit)) or 0
    record_count = db.scalar(select(func.count()).select_from(Record)) or 0
    return habit_count == 0 and record_count == 0


def seed_sample_data_if_empty(db: Session, record_count: int = 100, rng: Optional[random.Random] = None) -> bool:
    if not is_empty(db):
        return False

    rng = rng or random.Random()
    habits = [Habit(**item) for item in SAMPLE_HABITS]
    db.add_all(habits)
    db.flush()

    span_days = (SAMPLE_END_DATE - SAMPLE_START_DATE).days
    for _ in range(record_count):
        db.add(
            Record(
                habit_id=rng.choice(habits).id,
                date=SAMPLE_START_DATE + timedelta(days=rng.randrange(span_days)),
                quantity=rng.randint(SAMPLE_MIN_QUANTITY, SAMPLE_MAX_QUANTITY),
            )
        )
    db.commit()
    return True
