"""Command-line parsing helpers."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable


def _add_common_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", help="Path to a config.json file")
    parser.add_argument(
        "--keep-year",
        action="store_true",
        help="Keep the release year as a trailing '(YYYY)' instead of removing it",
    )


@dataclass
class CleanOptions:
    """Parsed CLI options for cleaning individual titles."""

    titles: list[str]
    config_path: Path | None
    keep_year: bool


@dataclass
class RunOptions:
    """Parsed CLI options used by the batch run."""

    root: Path | None
    jellyfin_url: str | None
    config_path: Path | None
    only_exts: list[str]
    keep_year: bool
    dry_run: bool
    json_output: bool


def _parse_clean_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Clean release-style movie titles.")
    _add_common_args(parser)
    parser.add_argument("titles", nargs="*", help="Titles to clean (reads stdin when omitted)")
    return parser.parse_args(argv)


def _parse_run_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments for the run command.

    Args:
        argv: Optional argument list.

    Returns:
        Parsed argparse namespace.
    """
    parser = argparse.ArgumentParser(description="Clean movie names in a directory or Jellyfin library.")
    _add_common_args(parser)
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--root", help="Directory of movie files to rename")
    source.add_argument("--jellyfin-url", help="Jellyfin server URL, e.g. http://localhost:8096")
    parser.add_argument(
        "--only-ext",
        action="append",
        help="Limit file renames to specific extension(s), e.g. --only-ext mkv",
    )
    parser.add_argument("--dry-run", action="store_true", help="Report changes without renaming anything")
    parser.add_argument("--json", action="store_true", help="Print the run result as JSON")
    return parser.parse_args(argv)


def _normalize_only_exts(raw_values: Iterable[str] | None) -> list[str]:
    only_exts: list[str] = []
    if raw_values:
        for item in raw_values:
            for raw in str(item).split(","):
                value = raw.strip().lower()
                if not value:
                    continue
                if not value.startswith("."):
                    value = "." + value
                only_exts.append(value)
    return only_exts


def resolve_config_path(args: argparse.Namespace) -> Path | None:
    """Resolve the config path from CLI arguments.

    Falls back to ./config.json when it exists.
    """
    if args.config:
        return Path(args.config).expanduser().resolve()
    default_file = Path.cwd() / "config.json"
    if default_file.exists():
        return default_file.resolve()
    return None


def get_clean_options(argv: list[str] | None = None) -> CleanOptions:
    args = _parse_clean_args(argv)
    return CleanOptions(
        titles=list(args.titles),
        config_path=resolve_config_path(args),
        keep_year=bool(args.keep_year),
    )


def get_run_options(argv: list[str] | None = None) -> RunOptions:
    """Build a RunOptions instance from CLI arguments.

    Args:
        argv: Optional argument list.

    Returns:
        RunOptions with normalized paths and flags.
    """
    args = _parse_run_args(argv)
    root = Path(args.root).expanduser().resolve() if args.root else None
    return RunOptions(
        root=root,
        jellyfin_url=args.jellyfin_url,
        config_path=resolve_config_path(args),
        only_exts=_normalize_only_exts(args.only_ext),
        keep_year=bool(args.keep_year),
        dry_run=bool(args.dry_run),
        json_output=bool(args.json),
    )


def parse_cli(argv: list[str] | None = None) -> tuple[str, CleanOptions | RunOptions]:
    """Parse command-line arguments and return the command name and options."""
    if argv is None:
        import sys

        args = sys.argv[1:]
    else:
        args = argv
    if args and args[0] == "clean":
        return "clean", get_clean_options(args[1:])
    if args and args[0] == "run":
        return "run", get_run_options(args[1:])
    return "run", get_run_options(args)
