"""Configuration dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from config.defaults import DEFAULT_EXTENSIONS, DEFAULT_REMOVAL_PATTERNS


@dataclass(frozen=True)
class CleanerConfig:
    """Ordered removal rules and year handling for the title cleaner."""

    removal_patterns: Tuple[str, ...] = DEFAULT_REMOVAL_PATTERNS
    remove_year: bool = True


@dataclass
class ScanConfig:
    """File scanning configuration settings."""

    extensions: List[str] = field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    ignore_substrings: List[str] = field(default_factory=list)
    max_files: int = 0


@dataclass
class JellyfinConfig:
    """Jellyfin server connection settings."""

    url: str = ""
    api_key_env: str = "JELLYFIN_API_KEY"
    api_key: str = ""
    request_timeout: float = 20.0


@dataclass
class RunConfig:
    """Batch run settings."""

    dry_run: bool = False
    log_dir: str = "runs"
    max_logs: int = 10


@dataclass
class LoggingConfig:
    """Logger settings."""

    level: str = "INFO"


@dataclass
class Config:
    """Top-level configuration container."""

    cleaner: CleanerConfig = field(default_factory=CleanerConfig)
    scan: ScanConfig = field(default_factory=ScanConfig)
    jellyfin: JellyfinConfig = field(default_factory=JellyfinConfig)
    run: RunConfig = field(default_factory=RunConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
