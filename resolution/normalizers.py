"""Pure data-shaping helpers: raw provider payloads -> Fact, and the not-found payload.

Nothing in here performs I/O. Each normalizer returns None when the raw
record has no usable name, which callers treat the same as "no hit".
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Sequence

from resolution.models import (
    FactSource,
    FactsNotFound,
    ModpackFact,
    Preferences,
    ProviderStatusSnapshot,
    StorefrontFact,
)

UNKNOWN_DEVELOPER = "Unknown"


def dedupe_preserving_order(values: Iterable[Any]) -> List[str]:
    """Drop empty and repeated values, keeping the first occurrence of each."""
    seen = set()
    out: List[str] = []
    for value in values:
        if value is None:
            continue
        text = str(value).strip()
        if not text or text in seen:
            continue
        seen.add(text)
        out.append(text)
    return out


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _as_list(values: Any) -> List[str]:
    if not isinstance(values, list):
        return []
    return [v if isinstance(v, str) else str(v) for v in values if v is not None]


def _count(value: Any) -> int:
    try:
        return max(int(value), 0)
    except (TypeError, ValueError):
        return 0


def normalize_steam_details(details: Dict[str, Any]) -> Optional[StorefrontFact]:
    """Map a Steam appdetails ``data`` object to a StorefrontFact."""
    name = _text(details.get("name"))
    if not name:
        return None

    genres = []
    for genre in details.get("genres") or []:
        if isinstance(genre, dict) and genre.get("description"):
            genres.append(str(genre["description"]))

    developers = details.get("developers")
    # Only an absent field means unknown; an explicit empty list is kept.
    developers = [UNKNOWN_DEVELOPER] if developers is None else _as_list(developers)

    return StorefrontFact(
        name=name,
        description=_text(details.get("short_description")),
        genres=genres,
        developers=developers,
    )


def normalize_modrinth_hit(hit: Dict[str, Any]) -> Optional[ModpackFact]:
    """Map a Modrinth search hit to a ModpackFact. Field renames only."""
    title = _text(hit.get("title"))
    if not title:
        return None

    return ModpackFact(
        source=FactSource.MODRINTH.value,
        title=title,
        description=_text(hit.get("description")),
        categories=_as_list(hit.get("categories")),
        versions=_as_list(hit.get("versions")),
        downloads=_count(hit.get("downloads")),
    )


def _curseforge_file_versions(files: Any) -> List[str]:
    # One entry per file; a file may report a single gameVersion or a list.
    versions: List[str] = []
    if not isinstance(files, list):
        return versions
    for entry in files:
        if not isinstance(entry, dict):
            continue
        if entry.get("gameVersion"):
            versions.append(str(entry["gameVersion"]))
        elif isinstance(entry.get("gameVersions"), list):
            versions.extend(str(v) for v in entry["gameVersions"] if v)
    return versions


def normalize_curseforge_mod(mod: Dict[str, Any]) -> Optional[ModpackFact]:
    """Map a CurseForge mod record to a ModpackFact with deduplicated versions."""
    title = _text(mod.get("name"))
    if not title:
        return None

    categories = []
    for category in mod.get("categories") or []:
        if isinstance(category, dict) and category.get("name"):
            categories.append(str(category["name"]))

    return ModpackFact(
        source=FactSource.CURSEFORGE.value,
        title=title,
        description=_text(mod.get("summary")),
        categories=categories,
        versions=dedupe_preserving_order(_curseforge_file_versions(mod.get("latestFiles"))),
        downloads=_count(mod.get("downloadCount")),
    )


def _join_labels(labels: Sequence[str]) -> str:
    if not labels:
        return "any source"
    if len(labels) == 1:
        return labels[0]
    if len(labels) == 2:
        return f"{labels[0]} or {labels[1]}"
    return f"{', '.join(labels[:-1])}, or {labels[-1]}"


def build_not_found_reason(searched_name: str, source_labels: Sequence[str]) -> str:
    return f'Not found in {_join_labels(source_labels)}. (Searched for: "{searched_name}")'


def build_not_found(
    searched_name: str,
    original_query: str,
    preferences: Preferences,
    source_labels: Sequence[str],
    provider_statuses: Optional[List[ProviderStatusSnapshot]] = None,
) -> FactsNotFound:
    return FactsNotFound(
        reason=build_not_found_reason(searched_name, source_labels),
        searched_name=searched_name,
        original_query=original_query,
        preferences=preferences,
        provider_statuses=provider_statuses or [],
    )


def build_not_found_response(outcome: FactsNotFound) -> Dict[str, Any]:
    """Client-facing 404 body.

    Keeps the content-package shape the frontend renders, and always carries
    the original query, the searched name, the reason and every preference
    so the client can restore its form and retry.
    """
    original_query = outcome.original_query
    preferences = {**outcome.preferences.to_payload(), "originalQuery": original_query}
    return {
        "game": "Invalid Input",
        "platformTitle": "🎮 Error: Content Not Found",
        "platformDescription": (
            f"The input '{original_query}' could not be found as a game or modpack.\n\n"
            f"Details: {outcome.reason}\n\n"
            "Please check the spelling or try a different name."
        ),
        "platformTags": ["error", "invalid input", "not found"],
        "discordAnnouncement": f"❌ **Error:** The game or modpack '{original_query}' was not found.",
        "thumbnail": {
            "description": "Error generating thumbnail.",
            "text_overlay": "ERROR",
            "layers": [
                {"layer": 1, "type": "error", "content": "Please check your input game name."},
            ],
        },
        "reason": outcome.reason,
        "searchedName": outcome.searched_name,
        "originalQuery": original_query,
        "preferences": preferences,
    }
