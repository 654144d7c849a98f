"""
End-to-end: create a deck, edit its slides, and check the deck timestamp
moves with every slide write.
"""

from datetime import datetime


def parse(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


async def test_demo_deck_scenario(async_client):
    created = await async_client.post("/api/v1/decks", json={"name": "Demo"})
    deck = created.json()
    deck_url = f"/api/v1/decks/{deck['id']}"
    timestamps = [parse(deck["updated_at"])]

    slides = (await async_client.get(f"{deck_url}/slides")).json()
    assert [(s["title"], s["slide_order"]) for s in slides] == [("First Slide", 1)]

    second = await async_client.post(
        "/api/v1/slides",
        json={"deck_id": deck["id"], "title": "Second", "slide_order": 2},
    )
    assert second.status_code == 201
    timestamps.append(parse((await async_client.get(deck_url)).json()["updated_at"]))

    slides = (await async_client.get(f"{deck_url}/slides")).json()
    assert [(s["title"], s["slide_order"]) for s in slides] == [
        ("First Slide", 1),
        ("Second", 2),
    ]

    deleted = await async_client.delete(f"/api/v1/slides/{slides[0]['id']}")
    assert deleted.json() == {"success": True}
    timestamps.append(parse((await async_client.get(deck_url)).json()["updated_at"]))

    slides = (await async_client.get(f"{deck_url}/slides")).json()
    assert [(s["title"], s["slide_order"]) for s in slides] == [("Second", 2)]

    # advanced once per slide write
    assert timestamps[0] < timestamps[1] < timestamps[2]


async def test_deleting_deck_removes_everything(async_client):
    deck = (await async_client.post("/api/v1/decks", json={"name": "Temp"})).json()
    for order in range(5):
        await async_client.post(
            "/api/v1/slides",
            json={"deck_id": deck["id"], "title": f"S{order}", "slide_order": order},
        )

    await async_client.delete(f"/api/v1/decks/{deck['id']}")

    assert (await async_client.get(f"/api/v1/decks/{deck['id']}")).json() is None
    assert (await async_client.get(f"/api/v1/decks/{deck['id']}/slides")).json() == []
    assert (await async_client.get("/api/v1/decks")).json() == []
