from __future__ import annotations

import argparse

import sqlalchemy as sa

from games_db.logging import configure_logging, logger
from games_db.models import Game
from games_db.session import create_engine
from games_db.settings import SETTINGS


def reset(database_url: str) -> int:
    """Remove every game. Returns the number of rows that were present."""
    engine = create_engine(database_url)
    try:
        with engine.begin() as conn:
            deleted = conn.execute(sa.select(sa.func.count()).select_from(Game)).scalar_one()
            if conn.dialect.name == "postgresql":
                conn.execute(sa.text(f"TRUNCATE TABLE {Game.__tablename__} RESTART IDENTITY"))
            else:
                conn.execute(sa.delete(Game))
            logger.info("games_reset", deleted=deleted, dialect=conn.dialect.name)
    finally:
        engine.dispose()
    return deleted


def main() -> None:
    parser = argparse.ArgumentParser(description="Delete all games.")
    parser.add_argument("--database-url", default=SETTINGS.database_url)
    parser.add_argument("--log-level", default=SETTINGS.log_level)
    args = parser.parse_args()
    configure_logging(args.log_level)
    reset(args.database_url)


if __name__ == "__main__":
    main()
