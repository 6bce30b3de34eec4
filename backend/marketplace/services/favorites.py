# marketplace/services/favorites.py
"""
Favorite ledger: per-user (template, timestamp) records.
"""
import logging
from tortoise.exceptions import IntegrityError

from marketplace.core.errors import AlreadyFavorited
from marketplace.models.favorite import Favorite
from marketplace.models.user import User
from marketplace.services.catalog import TemplateCatalog

logger = logging.getLogger("uvicorn.error")


class FavoriteLedger:
    """
    Records favorites and lists them for their owner.

    Reads are always keyed by the authenticated user passed in by the route,
    never by an id taken from the request.
    """

    def __init__(self, catalog: TemplateCatalog):
        self.catalog = catalog

    async def add(self, user: User, template_id: str) -> Favorite:
        """
        Favorite a template for ``user``.

        The template check and the insert are two separate statements; the
        unique (user, template_id) constraint still guards the pair.

        Raises:
            NotFound: template_id does not resolve in the catalog
            AlreadyFavorited: the pair already exists (repeat calls are errors)
        """
        await self.catalog.get(template_id)
        if await self._is_favorited(user, template_id):
            raise AlreadyFavorited()
        try:
            fav = await Favorite.create(user=user, template_id=template_id)
        except IntegrityError:
            raise AlreadyFavorited()
        logger.info("[favorites] user=%s favorited template=%s", user.id, template_id)
        return fav

    async def _is_favorited(self, user: User, template_id: str) -> bool:
        return await Favorite.filter(user_id=user.id, template_id=template_id).exists()

    async def list_for(self, user: User) -> list[tuple]:
        """
        Return ``(Template, favorited_at)`` pairs for ``user`` in the order they
        were added. Entries whose template no longer exists are skipped.
        """
        favs = await Favorite.filter(user_id=user.id).order_by("id")
        templates = await self.catalog.get_many(f.template_id for f in favs)
        out: list[tuple] = []
        for f in favs:
            template = templates.get(f.template_id)
            if template is None:
                continue
            out.append((template, f.created_at))
        return out
