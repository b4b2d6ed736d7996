from config import CleanerConfig, DEFAULT_REMOVAL_PATTERNS
from core.cleaner import clean_title, extract_year, has_messy_patterns


DEFAULT = CleanerConfig()
KEEP_YEAR = CleanerConfig(remove_year=False)
MATRIX = "The Matrix 1999 2160p BluRay x265 10bit HDR DTS-HD MA 5.1-SWTYBLZ"


def test_clean_title_release_examples() -> None:
    cases = [
        (MATRIX, DEFAULT, "The Matrix"),
        (MATRIX, KEEP_YEAR, "The Matrix (1999)"),
        ("[YTS.MX] Inception (2010) [1080p] [BluRay] [5.1] [YTS] [YIFY]", KEEP_YEAR, "Inception (2010)"),
        ("[YTS.MX] Inception (2010) [1080p] [BluRay] [5.1] [YTS] [YIFY]", DEFAULT, "Inception"),
        ("www.Torrenting.com - Interstellar.2014.1080p.BluRay.x264.DTS-WiKi", DEFAULT, "Interstellar"),
        ("Fight Club (1999) BRRip 720p x264 AAC [Team Nanban]", KEEP_YEAR, "Fight Club (1999)"),
        ("The.Shawshank.Redemption.1994.1080p.BluRay.x264.YIFY", DEFAULT, "The Shawshank Redemption"),
        ("Parasite (2019) (1080p BluRay x265 HEVC 10bit AAC 5.1 Korean)", DEFAULT, "Parasite"),
    ]
    for title, cfg, expected in cases:
        assert clean_title(title, cfg) == expected


def test_clean_titles_are_untouched() -> None:
    for title in ["Pulp Fiction", "Schindler's List", "The Godfather", "  Forrest  Gump. ", "Alien (1979)", ""]:
        assert clean_title(title, DEFAULT) == title
        assert clean_title(title, KEEP_YEAR) == title
        assert clean_title(title, CleanerConfig(removal_patterns=(r".",))) == title


def test_clean_title_falls_back_to_original_when_everything_is_removed() -> None:
    assert clean_title("[1080p][x264]", DEFAULT) == "[1080p][x264]"
    assert clean_title("  [1080p][x264]  ", DEFAULT) == "[1080p][x264]"


def test_clean_title_skips_malformed_patterns(capsys) -> None:
    broken = CleanerConfig(removal_patterns=("(unclosed",) + DEFAULT_REMOVAL_PATTERNS[:5] + ("[z-a]",) + DEFAULT_REMOVAL_PATTERNS[5:])

    assert clean_title(MATRIX, broken) == clean_title(MATRIX, DEFAULT)

    out = capsys.readouterr().out
    assert "Skipping removal pattern '(unclosed'" in out
    assert "[WARN]" in out


def test_clean_title_skips_patterns_the_regex_engine_cannot_handle(capsys) -> None:
    deeply_nested = "(" * 5000 + "a" + ")" * 5000
    for bad in ("a{4294967296}", deeply_nested, "(?L)a", None, 5):
        cfg = CleanerConfig(removal_patterns=(bad,) + DEFAULT_REMOVAL_PATTERNS)
        assert clean_title(MATRIX, cfg) == "The Matrix"

    assert "Skipping removal pattern 'a{4294967296}'" in capsys.readouterr().out


def test_removal_patterns_run_in_order() -> None:
    title = "Heat [1080p]"
    resolution_first = CleanerConfig(removal_patterns=(r"\b\d{3,4}p\b", r"\[\]"))
    brackets_first = CleanerConfig(removal_patterns=(r"\[\]", r"\b\d{3,4}p\b"))

    assert clean_title(title, resolution_first) == "Heat"
    assert clean_title(title, brackets_first) == "Heat []"


def test_clean_title_with_no_removal_patterns_still_normalizes() -> None:
    cfg = CleanerConfig(removal_patterns=(), remove_year=False)
    assert clean_title("Heat.1995.1080p-GRP", cfg) == "Heat 1995 1080p"


def test_year_reinserted_once_at_end() -> None:
    cleaned = clean_title("Heat (1995) [1080p] [BluRay]", KEEP_YEAR)
    assert cleaned == "Heat (1995)"
    assert cleaned.count("1995") == 1


def test_year_left_in_place_is_not_appended_again() -> None:
    assert clean_title("Heat 1995 [1080p] [BluRay]", KEEP_YEAR) == "Heat 1995"


def test_year_suppressed_when_remove_year_is_set() -> None:
    cleaned = clean_title("Heat (1995) [1080p] [BluRay]", DEFAULT)
    assert cleaned == "Heat"
    assert "(" not in cleaned


def test_year_removal_only_drops_first_occurrence() -> None:
    cfg = CleanerConfig(removal_patterns=(r"\b\d{3,4}p\b",))
    assert clean_title("2012 2012 720p", cfg) == "2012"


def test_cleaning_is_stable_after_one_pass() -> None:
    for title in [MATRIX, "Fight Club (1999) BRRip 720p x264 AAC [Team Nanban]"]:
        for cfg in (DEFAULT, KEEP_YEAR):
            once = clean_title(title, cfg)
            assert not has_messy_patterns(once)
            assert clean_title(once, cfg) == once


def test_has_messy_patterns_detectors() -> None:
    assert has_messy_patterns("www.example.org - Movie")
    assert has_messy_patterns("Movie 720P")
    assert has_messy_patterns("Movie [extended]")
    assert has_messy_patterns("movie web-dl")
    assert not has_messy_patterns("Movie (Director's Cut)")
    assert not has_messy_patterns("Website Story")
    assert not has_messy_patterns("Movie 10bit HDR AAC")


def test_extract_year_uses_first_word_bounded_year() -> None:
    assert extract_year("Blade.Runner.2049.2017.1080p") == "2049"
    assert extract_year("Movie.20150.1080p") == ""
    assert extract_year("Movie (1899)") == ""
    assert extract_year("2001 A Space Odyssey 1968") == "2001"
