"""Error Handlers — field naming and envelope shape for validation failures."""

import pytest

from app.api.error_handlers import UnexpectedError, field_name


@pytest.mark.parametrize("loc, expected", [
    (("body", "powerLevel"), "powerLevel"),
    (("query", "limit"), "limit"),
    (("path", "hero_id"), "id"),
    (("body", "powers", 1), "powers.1"),
    (("body",), "body"),
])
def test_field_name(loc, expected):
    assert field_name(loc) == expected


def test_unexpected_error_hides_cause():
    body = UnexpectedError().to_response()["error"]
    assert body["code"] == "INTERNAL_ERROR"
    assert body["message"] == "An unexpected error occurred"
    assert body["category"] == "internal"


async def test_validation_envelope_matches_domain_errors(client):
    invalid = await client.post("/superheroes", json={})
    missing = await client.get("/superheroes/999")
    assert set(invalid.json()["error"]) - {"details"} == set(missing.json()["error"])
    assert len(invalid.json()["error"]["details"]) == 5
