"""Release-name cleanup for movie titles.

Titles are only touched when they carry a strong release signal (a website tag,
a resolution marker, a bracketed span or a known release/codec token). Those
titles then run through the configured removal patterns in order, lose any
trailing release-group suffix and get their separators normalized. The year is
captured from the untouched title first so it can be dropped or re-attached as
a trailing "(YYYY)" regardless of where it sat in the filename.
"""

from __future__ import annotations

import re
from typing import List

from config.models import CleanerConfig
from logger import get_logger

log = get_logger()

# Fixed gate, intentionally narrower than the configurable removal list.
DETECTOR_PATTERNS: List[re.Pattern[str]] = [
    re.compile(r"\bwww\.[^\s]+\b", re.IGNORECASE),
    re.compile(r"\b\d{3,4}p\b", re.IGNORECASE),
    re.compile(r"\[.*?\]", re.IGNORECASE),
    re.compile(
        r"\b(BluRay|WEB-DL|WEB|BRRip|HDRip|BDRip|DVDRip|x264|x265|h264|h265|HEVC|YIFY|YTS|RARBG)\b",
        re.IGNORECASE,
    ),
]

YEAR_PATTERN = re.compile(r"\b(19\d{2}|20\d{2})\b")
RELEASE_GROUP_PATTERN = re.compile(r"-\s*[A-Za-z0-9]+$", re.IGNORECASE)
SEPARATOR_PATTERN = re.compile(r"[._-]+")
WHITESPACE_PATTERN = re.compile(r"\s+")


def has_messy_patterns(title: str) -> bool:
    """Return True if the title carries any release/encoding noise."""
    return any(pattern.search(title) for pattern in DETECTOR_PATTERNS)


def extract_year(title: str) -> str:
    """Return the first 19xx/20xx year token in the title, or an empty string."""
    match = YEAR_PATTERN.search(title)
    return match.group(0) if match else ""


def _apply_pattern(working: str, pattern: str) -> str:
    try:
        return re.sub(pattern, "", working, flags=re.IGNORECASE)
    except Exception as exc:
        log.warn(f"Skipping removal pattern {pattern!r}: {exc}")
        return working


def clean_title(title: str, config: CleanerConfig) -> str:
    """Clean a release-style movie title.

    Args:
        title: Raw title, usually a filename stem or a catalog item name.
        config: Removal patterns (applied in order) and year handling.

    Returns:
        The cleaned title. Titles without release noise are returned unchanged,
        and a cleanup that erases everything falls back to the trimmed input.
    """
    if not has_messy_patterns(title):
        return title

    year = extract_year(title)

    cleaned = title
    for pattern in config.removal_patterns:
        cleaned = _apply_pattern(cleaned, pattern)

    cleaned = RELEASE_GROUP_PATTERN.sub("", cleaned)

    if config.remove_year and year:
        cleaned = cleaned.replace(year, "", 1)

    cleaned = SEPARATOR_PATTERN.sub(" ", cleaned)
    cleaned = WHITESPACE_PATTERN.sub(" ", cleaned).strip()

    if not config.remove_year and year and year not in cleaned:
        cleaned = f"{cleaned} ({year})".strip()

    if not cleaned.strip():
        cleaned = title.strip()

    return cleaned
