import argparse
import logging
from typing import Optional

from habit_logger import crud
from habit_logger.cli.menus import main_menu
from habit_logger.cli.prompts import ConsolePrompter
from habit_logger.cli.views import ConsoleRenderer
from habit_logger.config import settings
from habit_logger.db import init_db, make_engine, make_session_factory
from habit_logger.logger import setup_logger
from habit_logger.service import HabitLogger
from habit_logger.storage import Storage

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="habit-logger", description="Track habits and report on them from the console.")
    parser.add_argument("--database-url", default=settings.DATABASE_URL, help="SQLite URL (default: %(default)s)")
    parser.add_argument("--no-seed", action="store_true", help="Do not seed sample data into an empty database")
    parser.add_argument("--log-level", default=settings.LOG_LEVEL, help="Logging level (default: %(default)s)")
    parser.add_argument("--log-file", default=settings.LOG_FILE, help="Log file path (default: %(default)s)")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logger(args.log_file, args.log_level)

    engine = make_engine(args.database_url)
    init_db(engine)
    session_factory = make_session_factory(engine)
    logger.info("Using database %s", args.database_url)

    if settings.SEED_SAMPLE_DATA and not args.no_seed:
        with session_factory() as db:
            if crud.seed_sample_data_if_empty(db, settings.SAMPLE_RECORD_COUNT):
                logger.info("Seeded sample data")

    service = HabitLogger(
        storage=Storage(engine),
        session_factory=session_factory,
        prompter=ConsolePrompter(settings.EXIT_KEYWORD, settings.DATE_INPUT_FORMAT),
        renderer=ConsoleRenderer(date_format=settings.DATE_INPUT_FORMAT),
    )
    try:
        main_menu(service)
    except (KeyboardInterrupt, EOFError):
        logger.info("Interrupted by user")
    finally:
        engine.dispose()
    return 0
