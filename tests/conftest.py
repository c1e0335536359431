from __future__ import annotations

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from testcontainers.postgres import PostgresContainer


# Ensure the repo root is importable (so `import games_db` works without an install).
REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))

# structlog's sink binds sys.stderr on import; do it here, outside any per-test capture.
import games_db.logging  # noqa: E402,F401

ALEMBIC_INI = REPO_ROOT / "games_db" / "migrations" / "alembic.ini"


def _upgrade(database_url: str, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", database_url)
    command.upgrade(Config(str(ALEMBIC_INI)), "head")


@pytest.fixture()
def database_url(tmp_path: Path) -> str:
    return f"sqlite:///{tmp_path / 'games.db'}"


@pytest.fixture()
def migrated_db(database_url: str, monkeypatch: pytest.MonkeyPatch) -> str:
    _upgrade(database_url, monkeypatch)
    return database_url


@pytest.fixture(scope="session")
def postgres_url() -> Iterator[str]:
    try:
        pg = PostgresContainer("postgres:16", driver="psycopg")
        pg.start()
    except Exception as exc:  # no reachable Docker daemon
        pytest.skip(f"PostgreSQL container unavailable: {exc}")
    try:
        yield pg.get_connection_url()
    finally:
        pg.stop()


@pytest.fixture(scope="session")
def migrated_pg_db(postgres_url: str) -> str:
    with pytest.MonkeyPatch.context() as mp:
        _upgrade(postgres_url, mp)
    return postgres_url
