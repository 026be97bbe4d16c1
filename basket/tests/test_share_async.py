import json

import httpx
import pytest

from basket.api.api_run import app
from basket.api.dependencies import get_repository
from basket.infra.List_Repository import ListRepository


@pytest.mark.asyncio
async def test_import_then_share_round_trip(tmp_path):
    """Import a full-object payload, then export the new list and decode it again."""
    repo = ListRepository(tmp_path / "basket.json")
    app.dependency_overrides[get_repository] = lambda: repo
    payload = {
        "version": 1,
        "listName": "Camping",
        "items": [
            {"name": "Matches", "quantity": 2, "unit": "box", "category": "Household",
             "comment": "waterproof", "scope": "", "purchased": False},
            {"name": "Water", "quantity": 6, "unit": "l", "category": "Drinks",
             "comment": "", "scope": "Day 1", "purchased": True},
        ],
    }
    try:
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
            resp = await ac.post("/api/share/import", json={"payload": json.dumps(payload)})
            assert resp.status_code == 200, resp.text
            list_id = resp.json()["list_id"]

            share = await ac.get(f"/api/lists/{list_id}/share")
            assert share.status_code == 200

            decoded = await ac.post("/api/share/decode", json={"payload": share.json()["payload"]})
            assert decoded.status_code == 200
    finally:
        app.dependency_overrides.clear()

    assert decoded.json() == payload
