# marketplace/models/__init__.py
"""
Database models module initialization.
Exports all Tortoise ORM models for convenient imports.

Models exported:
- User: Registered account (username + password)
- Template: Seeded page template in the catalog
- Favorite: (user, template) pair recorded by the favorite action
"""
from .user import User
from .template import Template
from .favorite import Favorite
