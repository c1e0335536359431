from __future__ import annotations

from datetime import UTC, datetime

import sqlalchemy as sa
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


PRICE_MIN = 0
PRICE_MAX = 60


def _now() -> datetime:
    return datetime.now(tz=UTC)


class Base(DeclarativeBase):
    pass


class TimestampMixin:
    created_at: Mapped[datetime] = mapped_column(sa.DateTime(timezone=True), nullable=False, default=_now)
    updated_at: Mapped[datetime] = mapped_column(
        sa.DateTime(timezone=True), nullable=False, default=_now, onupdate=_now
    )


class Game(TimestampMixin, Base):
    __tablename__ = "games"
    __table_args__ = (
        sa.CheckConstraint(f"price BETWEEN {PRICE_MIN} AND {PRICE_MAX}", name="ck_games_price_range"),
    )

    id: Mapped[int] = mapped_column(sa.Integer(), primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(sa.Text(), nullable=False)
    genre: Mapped[str] = mapped_column(sa.Text(), nullable=False)
    platform: Mapped[str] = mapped_column(sa.Text(), nullable=False)
    price: Mapped[int] = mapped_column(sa.Integer(), nullable=False)

    def __repr__(self) -> str:
        return f"Game(id={self.id!r}, title={self.title!r}, platform={self.platform!r}, price={self.price!r})"
