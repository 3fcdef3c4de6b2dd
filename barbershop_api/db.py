# barbershop_api/db.py

from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, create_engine, Session

from barbershop_api import config


def build_engine(url: str = config.DATABASE_URL) -> Engine:
    connect_args = {}
    if url.startswith("sqlite"):
        connect_args["check_same_thread"] = False  # required for SQLite + FastAPI

    engine = create_engine(url, echo=config.SQL_ECHO, connect_args=connect_args)

    if url.startswith("sqlite"):
        # SQLite ignores REFERENCES clauses unless this is on for the connection
        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys = ON")
            cursor.close()

    return engine


engine = build_engine()


def init_db(bind: Engine = engine) -> None:
    # importing models registers the tables on SQLModel.metadata
    from barbershop_api import models  # noqa: F401

    SQLModel.metadata.create_all(bind)


# Dependency: one session per request
def get_session():
    with Session(engine) as session:
        yield session
