from __future__ import annotations

import sqlalchemy as sa
from sqlalchemy.orm import Session

from games_db.models import Game


def create_game(session: Session, *, title: str, genre: str, platform: str, price: int) -> Game:
    """
    Insert one game and commit it.

    Identity and timestamps are assigned on write. Database errors (e.g. the price
    CHECK constraint) propagate unchanged after the session is rolled back.
    """
    game = Game(title=title, genre=genre, platform=platform, price=price)
    session.add(game)
    try:
        session.commit()
    except Exception:
        session.rollback()
        raise
    session.refresh(game)
    return game


def count_games(session: Session) -> int:
    return session.execute(sa.select(sa.func.count()).select_from(Game)).scalar_one()


def list_games(session: Session) -> list[Game]:
    return list(session.execute(sa.select(Game).order_by(Game.id)).scalars())
