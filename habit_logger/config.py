import os
from pathlib import Path

from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parents[1]
load_dotenv(ROOT_DIR / ".env")


class Settings:
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./habit-tracker.db")
    LOG_FILE: str = os.getenv("LOG_FILE", "logs/habit_logger.log")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").strip().upper()
    SEED_SAMPLE_DATA: bool = os.getenv("SEED_SAMPLE_DATA", "1") == "1"
    SAMPLE_RECORD_COUNT: int = int(os.getenv("SAMPLE_RECORD_COUNT", "100"))
    EXIT_KEYWORD: str = os.getenv("EXIT_KEYWORD", "q").strip().lower() or "q"
    DATE_INPUT_FORMAT: str = os.getenv("DATE_INPUT_FORMAT", "%d-%m-%Y")


settings = Settings()
