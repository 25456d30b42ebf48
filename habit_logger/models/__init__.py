from habit_logger.models.base import Base
from habit_logger.models.habit import Habit
from habit_logger.models.record import Record

__all__ = [
    "Base",
    "Habit",
    "Record",
]
