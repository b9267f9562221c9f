"""
Tests for POST /api/v1/generate.

Verifies:
- A blank game name is rejected before any provider runs
- A miss anywhere returns 404 with the original query and preferences
- A hit runs generation and echoes the preferences back
- Generation failures become a safe 500
"""

import json

import pytest
from fastapi.testclient import TestClient

from dependencies import get_content_generator, get_resolution_service
from exceptions import LLMError
from main import app
from resolution import FactResolutionService, NameResolver
from resolution.models import FactSource
from services import ContentGenerator

client = TestClient(app)

REQUEST = {
    "gameName": "Nonexistent Game XYZ",
    "platform": "Twitch",
    "language": "German",
    "descriptionLength": "Long",
    "profileId": "profile-7",
}


@pytest.fixture
def wire(stub_provider, fake_llm):
    def _wire(*, fact=None, resolver_reply="", generator_reply="{}", generator_error=None):
        providers = [
            stub_provider("steam", FactSource.STEAM, fact=fact),
            stub_provider("modrinth", FactSource.MODRINTH),
            stub_provider("curseforge", FactSource.CURSEFORGE, enabled=False),
        ]
        resolver = FactResolutionService(NameResolver(fake_llm(reply=resolver_reply)), providers)
        generator_llm = fake_llm(reply=generator_reply, error=generator_error)
        app.dependency_overrides[get_resolution_service] = lambda: resolver
        app.dependency_overrides[get_content_generator] = lambda: ContentGenerator(generator_llm)
        return providers, generator_llm

    yield _wire
    app.dependency_overrides.clear()


def test_blank_game_name_is_rejected(wire):
    providers, _ = wire()

    response = client.post("/api/v1/generate", json={**REQUEST, "gameName": "   "})

    assert response.status_code == 400
    assert response.json()["error"] == "Game name is required"
    assert providers[0].calls == []


def test_not_found_echoes_query_and_preferences(wire):
    _, generator_llm = wire()

    response = client.post("/api/v1/generate", json=REQUEST)

    assert response.status_code == 404
    data = response.json()
    assert data["game"] == "Invalid Input"
    assert data["originalQuery"] == "Nonexistent Game XYZ"
    assert data["searchedName"] == "Nonexistent Game XYZ"
    assert "Steam, Modrinth, or CurseForge" in data["reason"]
    assert data["preferences"] == {
        "platform": "Twitch",
        "language": "German",
        "descriptionLength": "Long",
        "profileId": "profile-7",
        "originalQuery": "Nonexistent Game XYZ",
    }
    assert generator_llm.calls == []


def test_found_generates_package(wire, steam_fact):
    providers, generator_llm = wire(
        fact=steam_fact,
        resolver_reply="Baldur's Gate 3",
        generator_reply='```json\n{"platformTitle": "Act 3 Is Wild"}\n```',
    )

    response = client.post("/api/v1/generate", json={**REQUEST, "gameName": "bg3"})

    assert response.status_code == 200
    data = response.json()
    assert data["platformTitle"] == "Act 3 Is Wild"
    assert data["preferences"]["originalQuery"] == "bg3"
    assert data["preferences"]["platform"] == "Twitch"
    assert providers[0].calls == ["Baldur's Gate 3"]
    assert providers[1].calls == []
    sent = json.loads(generator_llm.calls[0]["prompt"])
    assert sent["facts"]["name"] == "Baldur's Gate 3"


def test_generation_failure_is_500(wire, steam_fact):
    wire(fact=steam_fact, generator_error=LLMError("quota exceeded"))

    response = client.post("/api/v1/generate", json={**REQUEST, "gameName": "Baldur's Gate 3"})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to generate content. Please check the server logs."}
