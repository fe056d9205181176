from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase, Session
from sqlalchemy.pool import StaticPool

from elearning.core.config import Settings


class Base(DeclarativeBase):
    pass


def make_engine(settings: Settings) -> Engine:
    kwargs = {"echo": settings.SQLALCHEMY_ECHO}
    if settings.DB_IS_SQLITE:
        # requests are served from a thread pool
        kwargs["connect_args"] = {"check_same_thread": False}
    if settings.DB_IS_MEMORY:
        # every session must see the same in-memory database
        kwargs["poolclass"] = StaticPool
    return create_engine(settings.DATABASE_URL, **kwargs)


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db(request: Request) -> Iterator[Session]:
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
