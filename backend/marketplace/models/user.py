# marketplace/models/user.py
"""
Database model for users.
Accounts are created on registration and never mutated or deleted.
"""
import uuid
from tortoise import fields, models

class User(models.Model):
    """
    User database model.

    Relationships:
    - Has many Favorites (one-to-many, via related_name="favorites")

    Security:
    - The password is stored verbatim. This is a demo-grade credential scheme,
      not a hardened one.
    - Username is unique and stored trimmed
    """
    id = fields.UUIDField(pk=True, default=uuid.uuid4)  # Primary key: unique user identifier
    username = fields.CharField(
        max_length=256,
        unique=True,
        index=True
    )  # Login name (unique, indexed for fast lookups)
    password = fields.TextField()  # Stored as given (any length), compared with plain equality
    created_at = fields.DatetimeField(auto_now_add=True)  # Timestamp when account was created

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "users"  # Database table name
