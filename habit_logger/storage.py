import datetime
import logging
from typing import Any, Mapping, Optional

from sqlalchemy import Date, Integer, String, bindparam, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.sql.elements import TextClause

from habit_logger.errors import StorageError

logger = logging.getLogger(__name__)


def _bind_type(value: Any):
    if isinstance(value, datetime.date):
        return Date()
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return Integer()
    if isinstance(value, str):
        return String()
    return None


def _statement(sql: str, params: Mapping[str, Any]) -> TextClause:
    stmt = text(sql)
    if not params:
        return stmt
    return stmt.bindparams(*[bindparam(name, value, type_=_bind_type(value)) for name, value in params.items()])


class Storage:
    """Runs raw parameterized SQL against the habit database."""

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    def execute_query(self, sql: str, params: Optional[Mapping[str, Any]] = None) -> list[dict[str, Any]]:
        params = params or {}
        logger.debug("Executing query: %s params=%s", sql, params)
        try:
            with self.engine.connect() as conn:
                result = conn.execute(_statement(sql, params))
                return [dict(row) for row in result.mappings()]
        except SQLAlchemyError as exc:
            logger.exception("Query failed: %s", sql)
            raise StorageError(f"Failed to execute query: {exc}") from exc

    def execute_update(self, sql: str, params: Optional[Mapping[str, Any]] = None) -> int:
        params = params or {}
        logger.debug("Executing update: %s params=%s", sql, params)
        try:
            with self.engine.begin() as conn:
                result = conn.execute(_statement(sql, params))
                return result.rowcount
        except SQLAlchemyError as exc:
            logger.exception("Update failed: %s", sql)
            raise StorageError(f"Failed to execute update: {exc}") from exc
