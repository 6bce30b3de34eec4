# marketplace/api/routers/favorites.py
from fastapi import APIRouter, Depends, status

from marketplace.api.deps import get_current_user, get_favorites, get_settings
from marketplace.config import Settings
from marketplace.models.user import User
from marketplace.schemas import FavoriteCreatedOut, FavoriteOut, TemplateOut, iso_utc
from marketplace.services import FavoriteLedger

router = APIRouter(prefix="/favorites", tags=["favorites"])

@router.post("/{template_id}", response_model=FavoriteCreatedOut, status_code=status.HTTP_201_CREATED)
async def add_favorite(
    template_id: str,
    user: User = Depends(get_current_user),
    ledger: FavoriteLedger = Depends(get_favorites),
):
    """
    Favorite a template for the authenticated user.

    Errors:
        - 401: not authenticated (see the auth gate for the exact reasons)
        - 404: template not found
        - 409: already favorited; there is no unfavorite operation
    """
    fav = await ledger.add(user, template_id)
    return FavoriteCreatedOut(templateId=fav.template_id, favoritedAt=iso_utc(fav.created_at))

@router.get("", response_model=list[FavoriteOut])
async def list_favorites(
    user: User = Depends(get_current_user),
    ledger: FavoriteLedger = Depends(get_favorites),
    settings: Settings = Depends(get_settings),
):
    """
    The authenticated user's favorites, oldest first.

    Scoped by the identity behind the token; the request carries no user id.
    """
    entries = await ledger.list_for(user)
    return [
        FavoriteOut(
            template=TemplateOut.from_model(t, settings.placeholder_thumbnail_url),
            favoritedAt=iso_utc(ts),
        )
        for t, ts in entries
    ]
