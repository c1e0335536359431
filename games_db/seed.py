from __future__ import annotations

import argparse

from games_db.fake_games import build_faker
from games_db.games import create_game
from games_db.logging import configure_logging, logger
from games_db.models import PRICE_MAX, PRICE_MIN
from games_db.reset import reset
from games_db.session import session_scope
from games_db.settings import SETTINGS


SEED_COUNT = 50


def seed(
    database_url: str,
    count: int = SEED_COUNT,
    *,
    seed_value: int | None = None,
    replant: bool = False,
) -> int:
    """
    Insert `count` games with random title/genre/platform/price.

    Each game is committed on its own. The first database error aborts the run and
    propagates; games committed before it are kept.
    """
    print("Seeding games...")
    logger.info("seed_started", count=count, replant=replant)

    if replant:
        reset(database_url)

    fake = build_faker(seed_value)
    with session_scope(database_url) as session:
        for _ in range(count):
            game = create_game(
                session,
                title=fake.game_title(),
                genre=fake.game_genre(),
                platform=fake.game_platform(),
                price=fake.random_int(min=PRICE_MIN, max=PRICE_MAX),
            )
            logger.debug("game_created", id=game.id, title=game.title, price=game.price)

    logger.info("seed_finished", count=count)
    print("Done seeding!")
    return count


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the games table with random sample data.")
    parser.add_argument("--database-url", default=SETTINGS.database_url)
    parser.add_argument("--count", type=int, default=SEED_COUNT)
    parser.add_argument("--seed", type=int, default=None, help="Seed the random generator for reproducible data.")
    parser.add_argument("--replant", action="store_true", help="Delete all games before seeding.")
    parser.add_argument("--log-level", default=SETTINGS.log_level)
    args = parser.parse_args()
    configure_logging(args.log_level)
    seed(args.database_url, args.count, seed_value=args.seed, replant=args.replant)


if __name__ == "__main__":
    main()
