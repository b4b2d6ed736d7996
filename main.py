#!/usr/bin/env python3
"""CLI entrypoint for the movie name cleaner."""

from __future__ import annotations

import dataclasses
import sys

from cli import CleanOptions, parse_cli
from config import Config, load_config
from core.cleaner import clean_title
from core.run import run
from logger import get_logger

log = get_logger()


def clean_titles(options: CleanOptions, cfg: Config) -> int:
    """Print the cleaned form of each title, one per line."""
    titles = options.titles
    if not titles:
        titles = [line.rstrip("\n") for line in sys.stdin if line.strip()]
    for title in titles:
        print(clean_title(title, cfg.cleaner))
    return 0


def main() -> int:
    """Run the CLI entrypoint.

    Returns:
        Process exit code.
    """
    command, options = parse_cli()
    log.set_stream(None)
    if command == "run":
        if options.json_output:
            # Keep stdout parseable.
            log.set_stream(sys.stderr)
        if options.root and (not options.root.exists() or not options.root.is_dir()):
            print(f"Not a directory: {options.root}")
            return 2

    if options.config_path:
        if not options.config_path.exists():
            print(f"Config path not found: {options.config_path}")
            return 2
        if options.config_path.is_dir():
            print(f"Config path must be a file: {options.config_path}")
            return 2

    cfg = load_config(options.config_path)
    log.set_level(cfg.logging.level)
    if options.keep_year:
        cfg.cleaner = dataclasses.replace(cfg.cleaner, remove_year=False)

    if command == "clean":
        return clean_titles(options, cfg)
    log.info("\nMovie Name Cleaner\n")
    return run(options, cfg)


if __name__ == "__main__":
    raise SystemExit(main())
