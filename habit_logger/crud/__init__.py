from habit_logger.crud.habits import add_habit, delete_habit, get_habit, get_habits
from habit_logger.crud.records import add_record, delete_record, get_record, get_records_with_habits
from habit_logger.crud.seed import seed_sample_data_if_empty

__all__ = [
    "add_habit",
    "get_habits",
    "get_habit",
    "delete_habit",
    "add_record",
    "get_record",
    "get_records_with_habits",
    "delete_record",
    "seed_sample_data_if_empty",
]
