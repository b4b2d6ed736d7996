"""Batch cleanup of movie names across a catalog."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Callable, Dict, List

from config.models import CleanerConfig
from core.catalog.adapter import CatalogProvider
from core.cleaner import clean_title
from logger import get_logger

log = get_logger()


@dataclass
class TitleChange:
    """Before/after pair for one renamed (or rename-attempted) item."""

    key: str
    before: str
    after: str
    status: str
    error: str | None = None

    def to_record(self) -> Dict[str, object]:
        return {
            "key": self.key,
            "before": self.before,
            "after": self.after,
            "status": self.status,
            "error": self.error,
        }


@dataclass
class CleanupResult:
    """Aggregate results for a cleanup run."""

    processed: int
    cleaned: int
    failed: int
    success: bool
    message: str
    cancelled: bool = False
    changes: List[TitleChange] = field(default_factory=list)

    def to_dict(self) -> Dict[str, object]:
        return {
            "processed": self.processed,
            "cleaned": self.cleaned,
            "success": self.success,
            "message": self.message,
        }


def run_cleanup(
    catalog: CatalogProvider,
    config: CleanerConfig,
    *,
    dry_run: bool = False,
    progress: Callable[[float], None] | None = None,
    cancel: threading.Event | None = None,
) -> CleanupResult:
    """Clean every movie name in a catalog and persist the changed ones.

    Args:
        catalog: Catalog to read names from and write renames to.
        config: Cleaner rules.
        dry_run: Compute and report changes without calling the catalog.
        progress: Optional callback receiving percent complete after each item.
        cancel: Optional event checked between items.

    Returns:
        CleanupResult with counts and per-item changes.
    """
    log.info(f"Starting Movie Name Cleaner ({catalog.name})")
    try:
        items = catalog.list_movies()
    except Exception as exc:
        log.error(f"Error during cleanup: {exc}")
        return CleanupResult(
            processed=0,
            cleaned=0,
            failed=0,
            success=False,
            message=f"Error during cleanup: {exc}",
        )

    total = len(items)
    processed = 0
    cleaned = 0
    failed = 0
    cancelled = False
    changes: List[TitleChange] = []

    for item in items:
        if cancel is not None and cancel.is_set():
            cancelled = True
            break

        original = item.name
        new_name = clean_title(original, config)
        if new_name != original:
            log.info(f"Cleaning: '{original}' -> '{new_name}'")
            if dry_run:
                changes.append(TitleChange(item.key, original, new_name, "dry_run"))
                cleaned += 1
            else:
                try:
                    catalog.rename(item, new_name)
                except Exception as exc:
                    log.error(f"Failed to rename '{original}': {exc}")
                    changes.append(TitleChange(item.key, original, new_name, "failed", str(exc)))
                    failed += 1
                else:
                    changes.append(TitleChange(item.key, original, new_name, "renamed"))
                    cleaned += 1

        processed += 1
        if progress is not None and total:
            progress(processed / total * 100)

    message = f"Movie Name Cleaner completed. Processed: {processed}, Cleaned: {cleaned}"
    if failed:
        message += f", Failed: {failed}"
    if cancelled:
        message += " (cancelled)"
    log.info(message)
    return CleanupResult(
        processed=processed,
        cleaned=cleaned,
        failed=failed,
        success=failed == 0,
        message=message,
        cancelled=cancelled,
        changes=changes,
    )
