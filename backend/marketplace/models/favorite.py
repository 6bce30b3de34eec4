# marketplace/models/favorite.py
"""
Database model for favorites.
"""
from tortoise import fields, models

class Favorite(models.Model):
    """
    One (user, template) favorite.

    ``template_id`` is a plain string reference rather than a foreign key: the
    ledger joins against the catalog when reading and drops entries whose
    template no longer resolves.
    """
    id = fields.IntField(pk=True)
    user = fields.ForeignKeyField(
        "models.User",
        related_name="favorites",
        on_delete=fields.CASCADE
    )
    template_id = fields.CharField(max_length=32, index=True)
    created_at = fields.DatetimeField(auto_now_add=True)  # When the favorite was recorded

    class Meta:
        table = "favorites"
        unique_together = (("user", "template_id"),)
