from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import sqlalchemy as sa
from sqlalchemy.orm import Session, sessionmaker


def create_engine(database_url: str) -> sa.Engine:
    return sa.create_engine(database_url, future=True, pool_pre_ping=True)


@contextmanager
def session_scope(database_url: str) -> Iterator[Session]:
    engine = create_engine(database_url)
    factory = sessionmaker(engine, expire_on_commit=False)
    try:
        with factory() as session:
            yield session
    finally:
        engine.dispose()
