# marketplace/core/db.py
"""
Database configuration and initialization module.
Handles Tortoise ORM setup and the configuration shared with Aerich migrations.
"""
from tortoise import Tortoise

from marketplace.config import settings

# Database connection URL (sqlite by default, postgres via asyncpg)
DB_URL = settings.database_url

MODELS = [
    "marketplace.models.user",      # User model
    "marketplace.models.template",  # Template catalog model
    "marketplace.models.favorite",  # Favorite ledger model
    "aerich.models",                # Required: Let Aerich manage migration tables
]


def build_config(db_url: str) -> dict:
    """
    Build a Tortoise ORM configuration dictionary for the given connection URL.

    The module-level ``TORTOISE_ORM`` is the one Aerich reads; tests and
    ``create_app`` build their own so they can point at a different database.
    """
    return {
        "connections": {"default": db_url},
        "apps": {
            "models": {
                "models": list(MODELS),
                "default_connection": "default",
            },
        },
    }


TORTOISE_ORM = build_config(DB_URL)


async def init_db(db_url: str | None = None, generate_schemas: bool = False):
    """
    Initialize the Tortoise ORM connection and register all models.

    Args:
        db_url: Connection URL, defaults to the configured ``DATABASE_URL``
        generate_schemas: Create missing tables. Convenient for sqlite and
            development; production deployments should use Aerich migrations.
    """
    await Tortoise.init(config=build_config(db_url or DB_URL))
    if generate_schemas:
        await Tortoise.generate_schemas(safe=True)


async def close_db():
    """Close all database connections."""
    await Tortoise.close_connections()
