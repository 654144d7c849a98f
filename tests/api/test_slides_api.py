"""
Tests for slide endpoints under /api/v1/slides.
"""

from datetime import datetime

import pytest


def ts(record: dict) -> datetime:
    return datetime.fromisoformat(record["updated_at"].replace("Z", "+00:00"))


async def get_deck(async_client, deck_id: int) -> dict:
    return (await async_client.get(f"/api/v1/decks/{deck_id}")).json()


class TestSlideCreation:
    async def test_create_slide(self, async_client, create_deck):
        deck = await create_deck()

        response = await async_client.post(
            "/api/v1/slides",
            json={
                "deck_id": deck["id"],
                "title": "Second",
                "body_text": "Some words",
                "image_url": "https://example.com/a.png",
                "slide_order": 2,
            },
        )

        assert response.status_code == 201
        data = response.json()
        assert data["deck_id"] == deck["id"]
        assert data["title"] == "Second"
        assert data["body_text"] == "Some words"
        assert data["image_url"] == "https://example.com/a.png"
        assert data["slide_order"] == 2

    async def test_create_slide_advances_deck_timestamp(self, async_client, create_deck, create_slide):
        deck = await create_deck()

        await create_slide(deck["id"], "Second", 2)

        assert ts(await get_deck(async_client, deck["id"])) > ts(deck)

    async def test_create_slide_for_missing_deck(self, async_client):
        response = await async_client.post(
            "/api/v1/slides", json={"deck_id": 999, "title": "Orphan", "slide_order": 1}
        )

        assert response.status_code == 404
        body = response.json()
        assert body["error"] == "DECK_NOT_FOUND"
        assert body["detail"] == "Slide deck with id 999 not found"

    @pytest.mark.parametrize(
        "payload",
        [
            {"title": "", "slide_order": 1},
            {"title": "T", "slide_order": -1},
            {"title": "T"},
            {"slide_order": 1},
        ],
    )
    async def test_create_slide_validation(self, async_client, create_deck, payload):
        deck = await create_deck()

        response = await async_client.post(
            "/api/v1/slides", json={"deck_id": deck["id"], **payload}
        )

        assert response.status_code == 422
        assert response.json()["error"] == "VALIDATION_ERROR"


class TestSlideUpdate:
    @pytest.fixture
    async def slide(self, create_deck, create_slide):
        deck = await create_deck()
        return await create_slide(
            deck["id"], "Title", 3, body_text="Body", image_url="https://img/x.png"
        )

    async def test_title_only(self, async_client, slide):
        response = await async_client.patch(
            f"/api/v1/slides/{slide['id']}", json={"title": "T"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["title"] == "T"
        assert data["body_text"] == "Body"
        assert data["image_url"] == "https://img/x.png"
        assert data["slide_order"] == 3
        assert ts(data) > ts(slide)
        assert data["created_at"] == slide["created_at"]

    async def test_null_clears_only_that_field(self, async_client, slide):
        response = await async_client.patch(
            f"/api/v1/slides/{slide['id']}", json={"body_text": None}
        )

        data = response.json()
        assert data["body_text"] is None
        assert data["image_url"] == "https://img/x.png"
        assert data["title"] == "Title"

    async def test_empty_body_still_refreshes_timestamps(self, async_client, slide):
        deck_before = await get_deck(async_client, slide["deck_id"])

        response = await async_client.patch(f"/api/v1/slides/{slide['id']}", json={})

        assert response.status_code == 200
        assert ts(response.json()) > ts(slide)
        deck_after = await get_deck(async_client, slide["deck_id"])
        assert ts(deck_after) > ts(deck_before)

    @pytest.mark.parametrize("payload", [{"title": None}, {"slide_order": None}])
    async def test_required_fields_cannot_be_cleared(self, async_client, slide, payload):
        response = await async_client.patch(f"/api/v1/slides/{slide['id']}", json=payload)

        assert response.status_code == 422
        assert response.json()["error"] == "VALIDATION_ERROR"

    async def test_update_missing_slide(self, async_client):
        response = await async_client.patch("/api/v1/slides/5000", json={"title": "x"})

        assert response.status_code == 404
        assert response.json()["error"] == "SLIDE_NOT_FOUND"


class TestSlideDeletion:
    async def test_delete_slide(self, async_client, create_deck):
        deck = await create_deck()
        first = (await async_client.get(f"/api/v1/decks/{deck['id']}/slides")).json()[0]

        response = await async_client.delete(f"/api/v1/slides/{first['id']}")

        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert ts(await get_deck(async_client, deck["id"])) > ts(deck)

    async def test_delete_missing_slide_fails(self, async_client):
        response = await async_client.delete("/api/v1/slides/5000")

        assert response.status_code == 404
        body = response.json()
        assert body["error"] == "SLIDE_NOT_FOUND"
        assert body["detail"] == "Slide with id 5000 not found"


class TestOutOfRangeValues:
    HUGE = 2**63

    async def test_huge_slide_order_on_create(self, async_client, create_deck):
        deck = await create_deck()

        response = await async_client.post(
            "/api/v1/slides",
            json={"deck_id": deck["id"], "title": "T", "slide_order": self.HUGE},
        )

        assert response.status_code == 422
        assert response.json()["error"] == "VALIDATION_ERROR"
        slides = (await async_client.get(f"/api/v1/decks/{deck['id']}/slides")).json()
        assert len(slides) == 1

    async def test_largest_slide_order_is_accepted(self, async_client, create_deck):
        deck = await create_deck()

        response = await async_client.post(
            "/api/v1/slides",
            json={"deck_id": deck["id"], "title": "Last", "slide_order": self.HUGE - 1},
        )

        assert response.status_code == 201
        assert response.json()["slide_order"] == self.HUGE - 1

    async def test_huge_slide_order_on_patch(self, async_client, create_deck):
        deck = await create_deck()
        first = (await async_client.get(f"/api/v1/decks/{deck['id']}/slides")).json()[0]

        response = await async_client.patch(
            f"/api/v1/slides/{first['id']}", json={"slide_order": self.HUGE}
        )

        assert response.status_code == 422

    async def test_huge_deck_id_on_create(self, async_client):
        response = await async_client.post(
            "/api/v1/slides",
            json={"deck_id": self.HUGE, "title": "T", "slide_order": 1},
        )

        assert response.status_code == 404
        assert response.json()["error"] == "DECK_NOT_FOUND"

    async def test_huge_slide_id(self, async_client):
        patched = await async_client.patch(
            f"/api/v1/slides/{self.HUGE}", json={"title": "x"}
        )
        deleted = await async_client.delete(f"/api/v1/slides/{self.HUGE}")

        assert patched.status_code == 404
        assert deleted.status_code == 404
        assert deleted.json()["error"] == "SLIDE_NOT_FOUND"
