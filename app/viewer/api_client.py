"""
Async HTTP client for the deck API, used by the viewer state machine.
"""

from __future__ import annotations

from typing import Any, List, Optional

import httpx

from app.api.schemas import DeckOut, DeckWithSlidesOut, SlideOut
from app.domain_core.entities.slide import SlideChanges
from app.domain_core.value_objects.field_update import CLEAR, UNSET
from app.infra.config.logging_config import get_logger
from app.infra.config.settings import get_settings


class ApiError(Exception):
    """A request to the deck API failed."""

    def __init__(self, status_code: int, code: str, detail: str):
        self.status_code = status_code
        self.code = code
        self.detail = detail
        super().__init__(f"{status_code} {code}: {detail}")

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404


def changes_to_payload(changes: SlideChanges) -> dict[str, Any]:
    """Serialize a partial update: UNSET fields are omitted, CLEAR becomes null."""
    payload: dict[str, Any] = {}
    for name in ("title", "body_text", "image_url", "slide_order"):
        update = getattr(changes, name)
        if update is UNSET:
            continue
        payload[name] = None if update is CLEAR else update.value
    return payload


class DeckApiClient:
    """Thin typed wrapper over the /api/v1 endpoints."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        settings = get_settings()
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=base_url or settings.api_base_url,
            timeout=settings.api_timeout_seconds,
        )
        self._log = get_logger("viewer.api")

    async def __aenter__(self) -> "DeckApiClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def _request(self, method: str, path: str, **kwargs) -> Any:
        response = await self._client.request(method, f"/api/v1{path}", **kwargs)
        if response.is_error:
            try:
                body = response.json()
                code, detail = body.get("error", "ERROR"), body.get("detail", "")
            except ValueError:
                code, detail = "ERROR", response.text
            self._log.warning(
                "api.request_failed",
                method=method,
                path=path,
                status_code=response.status_code,
                code=code,
            )
            raise ApiError(response.status_code, code, detail)
        return response.json()

    # Decks

    async def list_decks(self) -> List[DeckOut]:
        data = await self._request("GET", "/decks")
        return [DeckOut.model_validate(item) for item in data]

    async def get_deck(self, deck_id: int) -> Optional[DeckOut]:
        data = await self._request("GET", f"/decks/{deck_id}")
        return DeckOut.model_validate(data) if data is not None else None

    async def create_deck(self, name: str) -> DeckOut:
        data = await self._request("POST", "/decks", json={"name": name})
        return DeckOut.model_validate(data)

    async def update_deck(self, deck_id: int, name: str) -> DeckOut:
        data = await self._request("PUT", f"/decks/{deck_id}", json={"name": name})
        return DeckOut.model_validate(data)

    async def delete_deck(self, deck_id: int) -> bool:
        data = await self._request("DELETE", f"/decks/{deck_id}")
        return bool(data["success"])

    async def get_deck_with_slides(self, deck_id: int) -> Optional[DeckWithSlidesOut]:
        data = await self._request("GET", f"/decks/{deck_id}/presentation")
        return DeckWithSlidesOut.model_validate(data) if data is not None else None

    # Slides

    async def list_slides(self, deck_id: int) -> List[SlideOut]:
        data = await self._request("GET", f"/decks/{deck_id}/slides")
        return [SlideOut.model_validate(item) for item in data]

    async def create_slide(
        self,
        deck_id: int,
        title: str,
        slide_order: int,
        body_text: Optional[str] = None,
        image_url: Optional[str] = None,
    ) -> SlideOut:
        payload = {
            "deck_id": deck_id,
            "title": title,
            "slide_order": slide_order,
            "body_text": body_text,
            "image_url": image_url,
        }
        data = await self._request("POST", "/slides", json=payload)
        return SlideOut.model_validate(data)

    async def update_slide(self, slide_id: int, changes: SlideChanges) -> SlideOut:
        data = await self._request(
            "PATCH", f"/slides/{slide_id}", json=changes_to_payload(changes)
        )
        return SlideOut.model_validate(data)

    async def delete_slide(self, slide_id: int) -> bool:
        data = await self._request("DELETE", f"/slides/{slide_id}")
        return bool(data["success"])
