"""Tests for the pure provider-payload normalizers and the not-found builder."""

from resolution.models import FactsNotFound, Preferences
from resolution.normalizers import (
    build_not_found,
    build_not_found_reason,
    build_not_found_response,
    dedupe_preserving_order,
    normalize_curseforge_mod,
    normalize_modrinth_hit,
    normalize_steam_details,
)


# === Steam ===


def test_steam_details_without_developers_defaults_to_unknown():
    fact = normalize_steam_details({"name": "Stardew Valley", "short_description": "Farm life."})

    assert fact.source == "Steam"
    assert fact.developers == ["Unknown"]
    assert fact.genres == []


def test_steam_details_with_empty_developers_keeps_them_empty():
    fact = normalize_steam_details({"name": "Mystery Game", "developers": []})

    assert fact.developers == []


def test_steam_details_maps_genre_descriptions():
    fact = normalize_steam_details(
        {
            "name": "Elden Ring",
            "short_description": "Rise, Tarnished.",
            "genres": [{"id": "1", "description": "Action"}, {"id": "3", "description": "RPG"}, {"id": "9"}],
            "developers": ["FromSoftware Inc."],
        }
    )

    assert fact.name == "Elden Ring"
    assert fact.description == "Rise, Tarnished."
    assert fact.genres == ["Action", "RPG"]
    assert fact.developers == ["FromSoftware Inc."]


def test_steam_details_without_name_is_no_result():
    assert normalize_steam_details({"short_description": "orphan"}) is None


# === Modrinth ===


def test_modrinth_hit_is_renamed_only():
    fact = normalize_modrinth_hit(
        {
            "title": "Better MC",
            "description": "Vanilla+ modpack",
            "categories": ["adventure", "magic"],
            "versions": ["1.20.1", "1.19.2"],
            "downloads": 4200,
        }
    )

    assert fact.source == "Modrinth"
    assert fact.title == "Better MC"
    assert fact.description == "Vanilla+ modpack"
    assert fact.categories == ["adventure", "magic"]
    assert fact.versions == ["1.20.1", "1.19.2"]
    assert fact.downloads == 4200


def test_modrinth_hit_passes_list_entries_through():
    fact = normalize_modrinth_hit({"title": "Odd Pack", "categories": ["tech", ""], "versions": ["1.20.1", None]})

    assert fact.categories == ["tech", ""]
    assert fact.versions == ["1.20.1"]


def test_modrinth_hit_missing_fields_get_defaults():
    fact = normalize_modrinth_hit({"title": "Bare"})

    assert fact.description == ""
    assert fact.categories == []
    assert fact.versions == []
    assert fact.downloads == 0


# === CurseForge ===


def test_curseforge_versions_are_deduplicated_in_first_seen_order():
    fact = normalize_curseforge_mod(
        {
            "name": "All the Mods 9",
            "summary": "Kitchen sink pack",
            "categories": [{"name": "Tech"}, {"name": "Magic"}],
            "latestFiles": [
                {"gameVersion": "1.20.1"},
                {"gameVersion": "1.20.1"},
                {"gameVersion": "1.19.2"},
            ],
            "downloadCount": 987654,
        }
    )

    assert fact.source == "CurseForge"
    assert fact.title == "All the Mods 9"
    assert fact.description == "Kitchen sink pack"
    assert fact.categories == ["Tech", "Magic"]
    assert fact.versions == ["1.20.1", "1.19.2"]
    assert fact.downloads == 987654


def test_curseforge_accepts_game_versions_lists():
    fact = normalize_curseforge_mod(
        {
            "name": "RLCraft",
            "latestFiles": [
                {"gameVersions": ["1.12.2", "Forge"]},
                {"gameVersions": ["1.12.2"]},
            ],
        }
    )

    assert fact.versions == ["1.12.2", "Forge"]


def test_dedupe_preserving_order_skips_blanks():
    assert dedupe_preserving_order(["b", "", None, "a", "b", " a "]) == ["b", "a"]


# === Not found ===


def test_not_found_reason_names_every_source():
    reason = build_not_found_reason("Mystery Pack", ["Steam", "Modrinth", "CurseForge"])

    assert reason == 'Not found in Steam, Modrinth, or CurseForge. (Searched for: "Mystery Pack")'


def test_not_found_keeps_preferences_object(preferences):
    outcome = build_not_found("Expanded", "exp", preferences, ["Steam", "Modrinth"])

    assert isinstance(outcome, FactsNotFound)
    assert outcome.preferences is preferences
    assert outcome.original_query == "exp"
    assert outcome.searched_name == "Expanded"
    assert "Steam or Modrinth" in outcome.reason


def test_not_found_response_echoes_query_and_preferences(preferences):
    outcome = build_not_found("Expanded Name", "exp name", preferences, ["Steam", "Modrinth", "CurseForge"])

    body = build_not_found_response(outcome)

    assert body["game"] == "Invalid Input"
    assert body["originalQuery"] == "exp name"
    assert body["searchedName"] == "Expanded Name"
    assert body["reason"] == outcome.reason
    assert "exp name" in body["platformDescription"]
    assert body["preferences"] == {
        "platform": "Twitch",
        "language": "German",
        "descriptionLength": "Long",
        "profileId": "profile-7",
        "originalQuery": "exp name",
    }


def test_not_found_response_keeps_unknown_preference_keys():
    prefs = Preferences(platform="YouTube", theme="dark")
    body = build_not_found_response(build_not_found("x", "x", prefs, ["Steam"]))

    assert body["preferences"]["theme"] == "dark"
    assert "profileId" not in body["preferences"]
