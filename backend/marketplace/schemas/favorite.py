# marketplace/schemas/favorite.py
"""
Pydantic schemas for the favorites endpoints.
"""
from pydantic import BaseModel
from .template import TemplateOut

__all__ = ["FavoriteOut", "FavoriteCreatedOut"]

class FavoriteOut(BaseModel):
    """One entry of GET /api/favorites: the joined template and when it was favorited."""
    template: TemplateOut
    favoritedAt: str  # ISO-8601 UTC

class FavoriteCreatedOut(BaseModel):
    """Response for POST /api/favorites/{templateId}."""
    message: str = "favorited"
    templateId: str
    favoritedAt: str
