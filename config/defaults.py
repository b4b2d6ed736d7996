"""Built-in cleaner defaults."""

from __future__ import annotations

from typing import Tuple


DEFAULT_REMOVAL_PATTERNS: Tuple[str, ...] = (
    r"\bwww\.[^\s]+\b\s*-\s*",  # www.site.org -
    r"\b\d{4}\s*\d{3,4}p\b",  # 2015 1080p
    r"\b\d{3,4}p\b",
    r"\b(AMZN|WEB-DL|WEB|BluRay|BRRip|HDRip|BDRip|DVDRip|x264|x265|h264|h265|HEVC|10bit|HDR|YIFY|YTS|RARBG|GPRS|FGT)\b",
    r"\bDTS(?:-HD)?\s+MA\b",
    r"\bDTS(?:-HD)?\b",
    r"\bAAC\b",
    r"\bDD\d\b",
    r"\b\d\.\d\b",  # audio channels: 5.1, 7.1
    r"\[.*?\]",
    r"\(.*?\)",  # year is extracted before this runs
)

DEFAULT_EXTENSIONS: Tuple[str, ...] = (".mkv", ".mp4", ".m4v", ".avi", ".mov")
