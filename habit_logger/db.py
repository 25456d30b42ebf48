from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker


def _enable_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys = ON")
    cursor.close()


def make_engine(url: str, **kwargs) -> Engine:
    url = (url or "").strip()
    if not url.startswith("sqlite"):
        raise ValueError(f"Only SQLite database URLs are supported, got {url!r}")

    connect_args = {**kwargs.pop("connect_args", {})}
    connect_args.setdefault("check_same_thread", False)
    new_engine = create_engine(url, future=True, connect_args=connect_args, **kwargs)
    event.listen(new_engine, "connect", _enable_foreign_keys)
    return new_engine


def make_session_factory(bind: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=bind, future=True)


def init_db(bind: Engine) -> None:
    from habit_logger.models import Base

    Base.metadata.create_all(bind=bind)


