from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base

Base = declarative_base()


def _unicode_lower(value):
    return value.lower() if isinstance(value, str) else value


def _register_sqlite_functions(dbapi_conn, connection_record):
    # SQLite's built-in lower() only folds ASCII letters
    dbapi_conn.create_function("lower", 1, _unicode_lower, deterministic=True)


def build_engine(db_url: str, **kwargs) -> Engine:
    """Create an engine for the given URL; SQLite connections may cross threads."""
    is_sqlite = db_url.startswith("sqlite")
    if is_sqlite:
        kwargs.setdefault("connect_args", {"check_same_thread": False})

    engine = create_engine(db_url, future=True, pool_pre_ping=True, **kwargs)
    if is_sqlite:
        event.listen(engine, "connect", _register_sqlite_functions)
    return engine


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False, future=True)


def init_db(engine: Engine):
    # Import models so they are registered with Base.metadata
    from zeittracker.fastapi.models import TimeEntry, Admin  # noqa: F401

    Base.metadata.create_all(bind=engine)
