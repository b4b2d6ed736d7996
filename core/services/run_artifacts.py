"""Run artifact helpers (run directories, logs, manifests)."""

from __future__ import annotations

import json
import shutil
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Dict


@dataclass
class RunDirs:
    """Paths for run artifacts."""

    run_dir: Path | None
    run_manifest_path: Path | None
    run_log_path: Path | None


def create_run_dir(base_dir: Path, now: datetime | None = None) -> Path:
    """Create a timestamped run directory.

    Args:
        base_dir: Base directory for run artifacts.
        now: Optional datetime override for deterministic tests.

    Returns:
        Path to the created run directory.
    """
    timestamp = (now or datetime.now()).strftime("%Y%m%d-%H%M%S")
    run_dir = base_dir / timestamp
    run_dir.mkdir(parents=True, exist_ok=True)
    return run_dir


def cleanup_run_dirs(base_dir: Path, max_logs: int) -> None:
    """Delete the oldest run directories beyond the retention limit."""
    if max_logs <= 0 or not base_dir.exists():
        return
    dirs = [entry for entry in base_dir.iterdir() if entry.is_dir()]
    dirs.sort(key=lambda entry: entry.name)
    excess = len(dirs) - max_logs
    if excess <= 0:
        return
    for entry in dirs[:excess]:
        shutil.rmtree(entry, ignore_errors=True)


def write_manifest_record(path: Path, record: Dict[str, object]) -> None:
    """Append a record to the run manifest."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("a", encoding="utf-8") as f:
        f.write(json.dumps(record) + "\n")


def write_log_header(log_path: Path, run_dir: Path, source: str) -> None:
    """Write a header for a new log file."""
    started = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    log_path.parent.mkdir(parents=True, exist_ok=True)
    with log_path.open("w", encoding="utf-8") as f:
        f.write("Movie Name Cleaner Log\n")
        f.write(f"Started: {started}\n")
        f.write(f"Source: {source}\n")
        f.write(f"Run Directory: {run_dir}\n")


def write_log_summary(log_path: Path | None, processed: int, cleaned: int, failed: int, notes: list[str]) -> None:
    """Append a summary section to the log."""
    if not log_path:
        return
    log_path.parent.mkdir(parents=True, exist_ok=True)
    with log_path.open("a", encoding="utf-8") as f:
        f.write("\nSummary\n")
        f.write(f"Processed: {processed}\n")
        f.write(f"Cleaned:   {cleaned}\n")
        f.write(f"Failed:    {failed}\n")
        if notes:
            f.write("\nNotes\n")
            for note in notes:
                f.write(f"- {note}\n")


def setup_run_dirs(log_dir: Path, source: str, dry_run: bool, max_logs: int) -> RunDirs:
    """Initialize the run directory, log and manifest for a non-dry run."""
    if dry_run:
        return RunDirs(None, None, None)

    run_dir = create_run_dir(log_dir)
    log_path = run_dir / f"{run_dir.name}.log"
    write_log_header(log_path, run_dir, source)
    cleanup_run_dirs(log_dir, max_logs)
    return RunDirs(run_dir, run_dir / "manifest.jsonl", log_path)
