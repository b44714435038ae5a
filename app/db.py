# app/db.py

from functools import lru_cache

from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine

from app.config import get_settings


@lru_cache
def get_engine(database_url: str = ""):
    settings = get_settings()
    url = database_url or settings.database_url
    connect_args = {}
    kwargs = {}
    if url.startswith("sqlite"):
        connect_args["check_same_thread"] = False  # required for SQLite + FastAPI
        if url in ("sqlite://", "sqlite:///:memory:"):
            # one shared connection, otherwise every session sees an empty database
            kwargs["poolclass"] = StaticPool

    return create_engine(
        url,
        echo=settings.sql_echo,
        connect_args=connect_args,
        **kwargs,
    )


def create_db_and_tables(engine) -> None:
    # import for side effect: registers the tables on SQLModel.metadata
    from app import models  # noqa: F401

    SQLModel.metadata.create_all(engine)

