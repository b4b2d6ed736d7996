"""Batch run pipeline: build the catalog, clean names, record artifacts."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path

from cli import RunOptions
from config import CleanerConfig, Config
from core.catalog import CatalogProvider, FileCatalog, JellyfinCatalog, build_session
from core.catalog.files import normalize_extensions
from core.cleanup import CleanupResult, run_cleanup
from core.services.run_artifacts import RunDirs, setup_run_dirs, write_log_summary, write_manifest_record
from logger import get_logger

log = get_logger()


@dataclass
class RunContext:
    """Resolved configuration and collaborators for a run."""

    cfg: Config
    cleaner: CleanerConfig
    catalog: CatalogProvider
    source: str
    dry_run: bool
    log_dir: Path


def resolve_api_key(cfg: Config) -> str:
    """Return the Jellyfin API key from config or its environment variable."""
    if cfg.jellyfin.api_key:
        return cfg.jellyfin.api_key
    return os.getenv(cfg.jellyfin.api_key_env, "")


def build_catalog(options: RunOptions, cfg: Config) -> tuple[CatalogProvider | None, str]:
    """Build the catalog for the requested source.

    Returns:
        Tuple of (catalog, source description); catalog is None on a usage error.
    """
    if options.root:
        exts = normalize_extensions(cfg.scan.extensions)
        if options.only_exts:
            exts = [ext for ext in exts if ext in options.only_exts]
        if not exts:
            log.info("No file extensions configured. Add scan.extensions in config.")
            return None, ""
        catalog = FileCatalog(
            root=options.root,
            extensions=exts,
            ignore_substrings=cfg.scan.ignore_substrings,
            max_files=int(cfg.scan.max_files or 0),
        )
        return catalog, str(options.root)

    url = (options.jellyfin_url or cfg.jellyfin.url).rstrip("/")
    if not url:
        log.info("No source configured. Pass --root or --jellyfin-url.")
        return None, ""
    api_key = resolve_api_key(cfg)
    if not api_key:
        log.info(f"Missing Jellyfin API key. Set {cfg.jellyfin.api_key_env} or jellyfin.api_key.")
        return None, ""
    catalog = JellyfinCatalog(build_session(api_key), url, timeout=cfg.jellyfin.request_timeout)
    return catalog, url


def prepare_run_context(options: RunOptions, cfg: Config) -> RunContext | None:
    """Resolve configuration and collaborators for a run."""
    catalog, source = build_catalog(options, cfg)
    if catalog is None:
        return None
    dry_run = bool(options.dry_run or cfg.run.dry_run)
    if dry_run:
        log.info("DRY RUN enabled: nothing will be renamed.\n")
    return RunContext(
        cfg=cfg,
        cleaner=cfg.cleaner,
        catalog=catalog,
        source=source,
        dry_run=dry_run,
        log_dir=Path(cfg.run.log_dir).expanduser(),
    )


def record_result(result: CleanupResult, run_dirs: RunDirs) -> None:
    """Write per-item changes and the summary to the run artifacts."""
    if run_dirs.run_manifest_path:
        for change in result.changes:
            write_manifest_record(run_dirs.run_manifest_path, change.to_record())
    notes = [f"{change.before} -> {change.after}: {change.error}" for change in result.changes if change.error]
    if result.cancelled:
        notes.append("Run cancelled before all items were processed")
    write_log_summary(run_dirs.run_log_path, result.processed, result.cleaned, result.failed, notes)


def finalize_run(result: CleanupResult, ctx: RunContext, json_output: bool) -> int:
    """Log final summary and return exit code."""
    if json_output:
        print(json.dumps(result.to_dict()))
    else:
        log.info("\nDone.")
        log.info(f"  Processed: {result.processed}")
        log.info(f"  Cleaned:   {result.cleaned}")
        log.info(f"  Failed:    {result.failed}")
        if ctx.dry_run:
            log.info("  (dry_run=true: nothing was renamed)")
    return 0 if result.success else 1


def run(options: RunOptions, cfg: Config) -> int:
    """Execute the cleanup run based on options and config.

    Args:
        options: Parsed run options.
        cfg: Loaded configuration.

    Returns:
        Process exit code.
    """
    ctx = prepare_run_context(options, cfg)
    if ctx is None:
        return 2

    run_dirs = setup_run_dirs(ctx.log_dir, ctx.source, ctx.dry_run, cfg.run.max_logs)

    def report_progress(percent: float) -> None:
        log.debug(f"  Progress: {percent:.0f}%")

    result = run_cleanup(ctx.catalog, ctx.cleaner, dry_run=ctx.dry_run, progress=report_progress)
    record_result(result, run_dirs)
    return finalize_run(result, ctx, options.json_output)
