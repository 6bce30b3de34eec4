# marketplace/schemas/template.py
"""
Pydantic schema for catalog templates.
"""
from pydantic import BaseModel

__all__ = ["TemplateOut"]

class TemplateOut(BaseModel):
    id: str
    name: str
    description: str
    thumbnail_url: str
    category: str

    @classmethod
    def from_model(cls, template, placeholder_url: str) -> "TemplateOut":
        """Serialize a Template row, substituting the placeholder for a blank thumbnail."""
        thumb = (template.thumbnail_url or "").strip()
        return cls(
            id=template.id,
            name=template.name,
            description=template.description,
            thumbnail_url=thumb or placeholder_url,
            category=template.category,
        )
