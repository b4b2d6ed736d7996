import json
from pathlib import Path

from config import DEFAULT_REMOVAL_PATTERNS, config_from_dict, load_config
from config.merge import merge_dicts
from core.cleaner import clean_title


def test_config_from_dict_defaults() -> None:
    cfg = config_from_dict({})
    assert cfg.cleaner.removal_patterns == DEFAULT_REMOVAL_PATTERNS
    assert cfg.cleaner.remove_year is True
    assert ".mkv" in cfg.scan.extensions
    assert cfg.jellyfin.api_key_env == "JELLYFIN_API_KEY"
    assert cfg.run.dry_run is False
    assert cfg.logging.level == "INFO"


def test_empty_pattern_list_disables_removal() -> None:
    cfg = config_from_dict({"cleaner": {"removal_patterns": [], "remove_year": False}})
    assert cfg.cleaner.removal_patterns == ()
    assert cfg.cleaner.remove_year is False


def test_invalid_patterns_are_kept_for_the_cleaner() -> None:
    cfg = config_from_dict({"cleaner": {"removal_patterns": ["(broken", r"\bHDR\b"]}})
    assert cfg.cleaner.removal_patterns == ("(broken", r"\bHDR\b")


def test_config_from_dict_normalizes_values() -> None:
    cfg = config_from_dict(
        {
            "cleaner": {"remove_year": "no"},
            "scan": {"extensions": ".mkv", "max_files": "5"},
            "jellyfin": {"url": "http://media:8096/", "request_timeout": "bad"},
            "run": {"max_logs": "3"},
            "logging": {"level": "warning"},
        }
    )
    assert cfg.cleaner.remove_year is True
    assert cfg.scan.extensions == [".mkv"]
    assert cfg.scan.max_files == 5
    assert cfg.jellyfin.url == "http://media:8096"
    assert cfg.jellyfin.request_timeout == 20.0
    assert cfg.run.max_logs == 3
    assert cfg.logging.level == "WARN"


def test_load_config_merges_user_file(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps({"cleaner": {"remove_year": False}, "scan": {"max_files": 2}}),
        encoding="utf-8",
    )
    cfg = load_config(path)
    assert cfg.cleaner.remove_year is False
    assert cfg.cleaner.removal_patterns == DEFAULT_REMOVAL_PATTERNS
    assert cfg.scan.max_files == 2
    # Shipped scan defaults survive the merge.
    assert "sample" in cfg.scan.ignore_substrings


def test_merge_dicts_replaces_lists() -> None:
    base = {"cleaner": {"removal_patterns": ["a", "b"], "remove_year": True}}
    merged = merge_dicts(base, {"cleaner": {"removal_patterns": ["c"]}})
    assert merged == {"cleaner": {"removal_patterns": ["c"], "remove_year": True}}
    assert base["cleaner"]["removal_patterns"] == ["a", "b"]


def test_non_string_patterns_are_skipped_not_stringified(capsys) -> None:
    cfg = config_from_dict({"cleaner": {"removal_patterns": [None, 5] + list(DEFAULT_REMOVAL_PATTERNS)}})

    assert cfg.cleaner.removal_patterns[:2] == (None, 5)
    assert clean_title("And Then There Were None 1945 1080p", cfg.cleaner) == "And Then There Were None"
    assert "Skipping removal pattern None" in capsys.readouterr().out
