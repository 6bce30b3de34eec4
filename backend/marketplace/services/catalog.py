# marketplace/services/catalog.py
"""
Template catalog: a fixed, seeded list of page templates.
"""
from typing import Iterable, Mapping

from marketplace.core.errors import NotFound
from marketplace.models.template import Template


class TemplateCatalog:
    """Read access to the seeded templates, in seeding order."""

    async def seed_if_empty(self, records: Iterable[Mapping]) -> int:
        """
        Insert ``records`` only when the catalog holds no templates.

        Safe to call on every start. Returns the number of rows inserted
        (0 when the catalog was already populated).
        """
        if await Template.all().exists():
            return 0
        rows = [Template(position=i, **dict(rec)) for i, rec in enumerate(records)]
        await Template.bulk_create(rows)
        return len(rows)

    async def list(self) -> list[Template]:
        return await Template.all().order_by("position")

    async def get(self, template_id: str) -> Template:
        template = await Template.get_or_none(id=template_id)
        if template is None:
            raise NotFound("template not found")
        return template

    async def get_many(self, template_ids: Iterable[str]) -> dict[str, Template]:
        """Resolve several ids at once; ids that do not exist are simply absent."""
        ids = list(set(template_ids))
        if not ids:
            return {}
        return {t.id: t for t in await Template.filter(id__in=ids)}
