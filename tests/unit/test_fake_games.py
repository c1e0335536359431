from __future__ import annotations

from games_db.fake_games import GENRES, PLATFORMS, TITLES, build_faker


def test_provider_values_come_from_lists() -> None:
    fake = build_faker(1)
    for _ in range(200):
        assert fake.game_title() in TITLES
        assert fake.game_genre() in GENRES
        assert fake.game_platform() in PLATFORMS


def test_lists_have_no_empty_values() -> None:
    for values in (TITLES, GENRES, PLATFORMS):
        assert values
        assert all(v.strip() for v in values)


def test_seeded_faker_is_reproducible() -> None:
    a = build_faker(1337)
    b = build_faker(1337)
    draws_a = [(a.game_title(), a.game_genre(), a.game_platform(), a.random_int(0, 60)) for _ in range(20)]
    draws_b = [(b.game_title(), b.game_genre(), b.game_platform(), b.random_int(0, 60)) for _ in range(20)]
    assert draws_a == draws_b


def test_price_draws_cover_inclusive_bounds() -> None:
    fake = build_faker(42)
    prices = {fake.random_int(min=0, max=60) for _ in range(5000)}
    assert prices <= set(range(0, 61))
    assert 0 in prices
    assert 60 in prices
