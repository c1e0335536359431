"""
Game store database: schema, migrations, and sample-data seeding.

- SQLAlchemy ORM mapping for the `games` table
- Alembic migrations config
- Faker-backed seed runner and bulk reset
"""
