# marketplace/core/bootstrap.py
"""
Bootstrap module for application initialization.
Seeds the template catalog on first startup.
"""
import logging
from marketplace.services.catalog import TemplateCatalog

logger = logging.getLogger("uvicorn.error")

DEFAULT_TEMPLATES = [
    {
        "id": "t1",
        "name": "Landing Page",
        "description": "Simple marketing landing",
        "thumbnail_url": "https://cdn.prod.website-files.com/65bb7884c67879aa0d84f24e/65c0eb721ea864f342f436f8_What-are-landing-pages-and-why-do-you-need-to-use-them.jpeg",
        "category": "Marketing",
    },
    {
        "id": "t2",
        "name": "Admin Dashboard",
        "description": "Data tables and charts",
        "thumbnail_url": "https://github.com/mahendran516/images/blob/main/Screenshot%202024-10-30%20124739.png?raw=true",
        "category": "Admin",
    },
    {
        "id": "t3",
        "name": "Blog",
        "description": "Blog with posts and tags",
        "thumbnail_url": "https://github.com/mahendran516/images/blob/main/Screenshot%202024-10-29%20114154.png?raw=true",
        "category": "Content",
    },
    {
        "id": "t4",
        "name": "E-commerce",
        "description": "Product catalog and cart",
        "thumbnail_url": "https://github.com/mahendran516/images/blob/main/Screenshot%202024-12-19%20162010.png?raw=true",
        "category": "Ecommerce",
    },
    {
        "id": "t5",
        "name": "Portfolio",
        "description": "Personal portfolio template",
        "thumbnail_url": "https://tint.creativemarket.com/lqU1IZwUw4HHPPwvET5xd6aCqNrJ8n4zYIqGhcuq8BY/width:1200/height:800/gravity:nowe/rt:fill-down/el:1/czM6Ly9maWxlcy5jcmVhdGl2ZW1hcmtldC5jb20vaW1hZ2VzL3NjcmVlbnNob3RzL3Byb2R1Y3RzLzU0MDUvNTQwNTkvNTQwNTk2NzgvdjJfZGVzaWducG9ydGZvbGlvLXRlbXBsYXRlLXR5cGVmb29sLXByb21vdGlvbmFsLW8uanBnIzE3NTQzOTI3MDc?1754392707",
        "category": "Portfolio",
    },
]

async def ensure_template_catalog(catalog: TemplateCatalog, records=None) -> int:
    """
    Populate the catalog with the default templates if it is empty.
    Runs on every startup; a populated catalog is left untouched.
    """
    inserted = await catalog.seed_if_empty(records if records is not None else DEFAULT_TEMPLATES)
    if inserted:
        logger.info("[bootstrap] Seeded template catalog with %d templates", inserted)
    else:
        logger.info("[bootstrap] Template catalog already populated -> skip seeding")
    return inserted
