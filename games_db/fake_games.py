"""Faker provider for video game sample data."""

from __future__ import annotations

from faker import Faker
from faker.providers import BaseProvider


TITLES = (
    "Super Mario Bros.",
    "The Legend of Zelda: Breath of the Wild",
    "Metroid Prime",
    "Halo: Combat Evolved",
    "Half-Life 2",
    "Portal",
    "Minecraft",
    "Tetris",
    "Pac-Man",
    "Street Fighter II",
    "Final Fantasy VII",
    "Chrono Trigger",
    "The Elder Scrolls V: Skyrim",
    "Mass Effect 2",
    "BioShock",
    "Dark Souls",
    "Bloodborne",
    "Red Dead Redemption",
    "Grand Theft Auto V",
    "The Witcher 3: Wild Hunt",
    "Stardew Valley",
    "Hollow Knight",
    "Celeste",
    "Overwatch",
    "StarCraft",
    "Diablo II",
    "World of Warcraft",
    "Civilization V",
    "Rocket League",
    "Mario Kart 8",
    "Animal Crossing: New Horizons",
    "Pokémon Red and Blue",
    "Sonic the Hedgehog",
    "Metal Gear Solid",
    "Resident Evil 4",
    "God of War",
    "Uncharted 2: Among Thieves",
    "The Last of Us",
    "Doom",
    "Fallout: New Vegas",
)

GENRES = (
    "Action",
    "Action-adventure",
    "Adventure",
    "Battle royale",
    "Fighting",
    "First-person shooter",
    "MMORPG",
    "Platform",
    "Puzzle",
    "Racing",
    "Real-time strategy",
    "Role-playing",
    "Roguelike",
    "Sandbox",
    "Simulation",
    "Sports",
    "Stealth",
    "Survival horror",
    "Turn-based strategy",
    "Visual novel",
)

PLATFORMS = (
    "Nintendo Switch",
    "Nintendo 64",
    "Nintendo DS",
    "Game Boy Advance",
    "Wii U",
    "PlayStation",
    "PlayStation 2",
    "PlayStation 4",
    "PlayStation 5",
    "PlayStation Vita",
    "Xbox",
    "Xbox 360",
    "Xbox One",
    "Xbox Series X",
    "Sega Genesis",
    "Dreamcast",
    "PC",
    "Mac",
    "Linux",
    "iOS",
    "Android",
)


class GameProvider(BaseProvider):
    titles = TITLES
    genres = GENRES
    platforms = PLATFORMS

    def game_title(self) -> str:
        return self.random_element(self.titles)

    def game_genre(self) -> str:
        return self.random_element(self.genres)

    def game_platform(self) -> str:
        return self.random_element(self.platforms)


def build_faker(seed_value: int | None = None) -> Faker:
    fake = Faker()
    fake.add_provider(GameProvider)
    if seed_value is not None:
        fake.seed_instance(seed_value)
    return fake
