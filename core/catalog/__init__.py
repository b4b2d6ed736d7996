"""Catalog adapters that list movie names and persist renames."""

from core.catalog.adapter import CatalogItem, CatalogProvider
from core.catalog.files import FileCatalog
from core.catalog.jellyfin import JellyfinCatalog, build_session

__all__ = ["CatalogItem", "CatalogProvider", "FileCatalog", "JellyfinCatalog", "build_session"]
