"""Configuration loading and normalization."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

from config.defaults import DEFAULT_EXTENSIONS, DEFAULT_REMOVAL_PATTERNS
from config.merge import merge_dicts
from config.models import (
    CleanerConfig,
    Config,
    JellyfinConfig,
    LoggingConfig,
    RunConfig,
    ScanConfig,
)


BASE_DIR = Path(__file__).resolve().parent.parent
MODULE_CONFIG_PATHS = {
    "scan": BASE_DIR / "core" / "catalog" / "config.json",
}
LOG_LEVELS = ("DEBUG", "INFO", "WARN", "ERROR")


def _as_list(value: Any) -> List[str]:
    if not value:
        return []
    if isinstance(value, list):
        return [str(v) for v in value]
    return [str(value)]


def _as_bool(value: Any, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    return default


def _as_int(value: Any, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _as_float(value: Any, default: float) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def _load_json(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def _load_default_sections() -> Dict[str, Any]:
    raw: Dict[str, Any] = {}
    for section, file_path in MODULE_CONFIG_PATHS.items():
        if file_path.exists():
            raw[section] = _load_json(file_path)
    return raw


def _removal_patterns(value: Any) -> tuple[Any, ...]:
    # An explicit empty list disables removal; a missing key keeps the defaults.
    # Entries pass through as-is so the cleaner skips non-string ones.
    if value is None:
        return DEFAULT_REMOVAL_PATTERNS
    if isinstance(value, list):
        return tuple(value)
    return (value,)


def config_from_dict(raw: Dict[str, Any]) -> Config:
    """Build a Config instance from a raw dictionary."""
    cleaner_raw = raw.get("cleaner", {}) or {}
    scan_raw = raw.get("scan", {}) or {}
    jellyfin_raw = raw.get("jellyfin", {}) or {}
    run_raw = raw.get("run", {}) or {}
    logging_raw = raw.get("logging", {}) or {}

    cleaner = CleanerConfig(
        removal_patterns=_removal_patterns(cleaner_raw.get("removal_patterns")),
        remove_year=_as_bool(cleaner_raw.get("remove_year"), True),
    )
    extensions = _as_list(scan_raw.get("extensions")) or list(DEFAULT_EXTENSIONS)
    scan = ScanConfig(
        extensions=extensions,
        ignore_substrings=_as_list(scan_raw.get("ignore_substrings")),
        max_files=_as_int(scan_raw.get("max_files", 0), 0),
    )
    jellyfin = JellyfinConfig(
        url=str(jellyfin_raw.get("url", "") or "").rstrip("/"),
        api_key_env=str(jellyfin_raw.get("api_key_env", "JELLYFIN_API_KEY")),
        api_key=str(jellyfin_raw.get("api_key", "") or ""),
        request_timeout=_as_float(jellyfin_raw.get("request_timeout", 20.0), 20.0),
    )
    run = RunConfig(
        dry_run=_as_bool(run_raw.get("dry_run"), False),
        log_dir=str(run_raw.get("log_dir", "runs")),
        max_logs=_as_int(run_raw.get("max_logs", 10), 10),
    )

    level = str(logging_raw.get("level", "INFO")).upper()
    if level == "WARNING":
        level = "WARN"
    if level not in LOG_LEVELS:
        level = "INFO"
    return Config(
        cleaner=cleaner,
        scan=scan,
        jellyfin=jellyfin,
        run=run,
        logging=LoggingConfig(level=level),
    )


def load_config(path: Path | None) -> Config:
    """Load config data into a Config instance."""
    raw = _load_default_sections()
    if path is not None:
        raw = merge_dicts(raw, _load_json(path))
    return config_from_dict(raw)
