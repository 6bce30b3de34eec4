# marketplace/api/routers/templates.py
from fastapi import APIRouter, Depends

from marketplace.api.deps import get_catalog, get_settings
from marketplace.config import Settings
from marketplace.schemas import TemplateOut
from marketplace.services import TemplateCatalog

router = APIRouter(prefix="/templates", tags=["templates"])

@router.get("", response_model=list[TemplateOut])
async def list_templates(
    catalog: TemplateCatalog = Depends(get_catalog),
    settings: Settings = Depends(get_settings),
):
    """All templates in catalog order. Not paginated."""
    rows = await catalog.list()
    return [TemplateOut.from_model(t, settings.placeholder_thumbnail_url) for t in rows]

@router.get("/{template_id}", response_model=TemplateOut)
async def get_template(
    template_id: str,
    catalog: TemplateCatalog = Depends(get_catalog),
    settings: Settings = Depends(get_settings),
):
    """A single template, or 404 "template not found"."""
    template = await catalog.get(template_id)
    return TemplateOut.from_model(template, settings.placeholder_thumbnail_url)
