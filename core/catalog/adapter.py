"""Catalog adapter interfaces for batch cleanup."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Protocol


@dataclass
class CatalogItem:
    """A movie entry whose display name may be cleaned."""

    key: str
    name: str
    payload: Dict[str, Any] = field(default_factory=dict)


class CatalogProvider(Protocol):
    """Source of movie names and sink for renames."""

    name: str

    def list_movies(self) -> List[CatalogItem]:
        """Return every movie item the batch should consider."""

    def rename(self, item: CatalogItem, new_name: str) -> None:
        """Persist a new display name for an item."""
