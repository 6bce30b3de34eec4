# marketplace/services/__init__.py
"""
Store objects behind the HTTP routes.

Each store is constructed once by ``create_app`` and handed to routes through
dependencies; none of them keeps module-level state.
"""
from .credentials import CredentialStore
from .catalog import TemplateCatalog
from .favorites import FavoriteLedger

__all__ = ["CredentialStore", "TemplateCatalog", "FavoriteLedger"]
