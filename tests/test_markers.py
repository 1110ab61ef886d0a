from __future__ import annotations

from issueparser.markers import (
    STATUS_MARKERS,
    TYPE_MARKERS,
    build_marker_table,
    marker_key,
    match_marker,
)


def test_builtin_tables_cover_expected_categories() -> None:
    assert sorted(TYPE_MARKERS.values()) == ["bug", "change", "epic", "risk", "user_story"]
    assert len(STATUS_MARKERS) == 7
    assert STATUS_MARKERS["More Information Required"] == "more_information_required"


def test_match_marker_returns_category_key() -> None:
    assert match_marker("🚧 Risk - vendor delay", TYPE_MARKERS) == "risk"
    assert match_marker("Status: Escalated", STATUS_MARKERS) == "escalated"
    assert match_marker("nothing here", STATUS_MARKERS) is None
    assert match_marker("", TYPE_MARKERS) is None


def test_marker_key_drops_emoji_and_punctuation() -> None:
    assert marker_key("🔵 User Story") == "user_story"
    assert marker_key("Won't Fix") == "won_t_fix"


def test_build_marker_table_from_list_and_mapping() -> None:
    assert build_marker_table(["⭐ Feature", "Blocked"]) == {
        "⭐ Feature": "feature",
        "Blocked": "blocked",
    }
    assert build_marker_table({"On Hold": "paused"}) == {"On Hold": "paused"}
