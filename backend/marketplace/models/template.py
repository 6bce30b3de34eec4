# marketplace/models/template.py
"""
Database model for catalog templates.
Rows are inserted once by the startup seed and are read-only afterwards.
"""
from tortoise import fields, models

class Template(models.Model):
    """
    Template database model.

    The primary key is the client-facing string id (e.g. "t1"), used as-is in
    URLs and JSON. ``position`` keeps the catalog in seeding order.
    """
    id = fields.CharField(pk=True, max_length=32)
    name = fields.CharField(max_length=128)
    description = fields.TextField(default="")
    thumbnail_url = fields.TextField(null=True)  # Blank/NULL falls back to a placeholder on output
    category = fields.CharField(max_length=64)
    position = fields.IntField(default=0)

    class Meta:
        table = "templates"
        ordering = ["position"]
