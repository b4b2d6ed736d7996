"""Local directory catalog: movie files named by their stems."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, List

from core.catalog.adapter import CatalogItem, CatalogProvider


def normalize_extensions(exts: Iterable[str]) -> List[str]:
    """Return sorted, lowercase, dot-prefixed extensions with blanks dropped."""
    cleaned = {ext.strip().lower() for ext in exts}
    return sorted(ext if ext.startswith(".") else f".{ext}" for ext in cleaned if ext)


class FileCatalog(CatalogProvider):
    """Treat each movie file under a root as an item named by its stem.

    Files are visited in sorted path order so repeated runs see items in the
    same sequence; `max_files` (0 for no limit) caps how many are listed.
    """

    name = "files"

    def __init__(
        self,
        root: Path,
        extensions: Iterable[str],
        ignore_substrings: List[str] | None = None,
        max_files: int = 0,
    ) -> None:
        self.root = root
        self.extensions = normalize_extensions(extensions)
        self.ignore_substrings = [s.lower() for s in ignore_substrings or []]
        self.max_files = max_files

    def is_movie_file(self, path: Path) -> bool:
        if not path.is_file() or path.suffix.lower() not in self.extensions:
            return False
        lowered = path.name.lower()
        return not any(marker in lowered for marker in self.ignore_substrings)

    def _movie_files(self) -> Iterator[Path]:
        found = 0
        for path in sorted(self.root.rglob("*")):
            if not self.is_movie_file(path):
                continue
            yield path
            found += 1
            if self.max_files and found >= self.max_files:
                return

    def list_movies(self) -> List[CatalogItem]:
        return [CatalogItem(key=str(path), name=path.stem) for path in self._movie_files()]

    def rename(self, item: CatalogItem, new_name: str) -> None:
        source = Path(item.key)
        target = source.with_name(f"{new_name}{source.suffix}")
        if target.exists():
            raise FileExistsError(f"Target already exists: {target}")
        source.rename(target)
        item.key = str(target)
        item.name = new_name
