"""
Slide CRUD operations.
"""

from fastapi import APIRouter, Depends, status

from app.api.dependencies import get_slide_use_cases
from app.api.schemas import (
    CreateSlideRequest,
    PatchSlideRequest,
    SlideOut,
    SuccessResponse,
)
from app.application.use_cases.manage_slides import SlideUseCases
from app.infra.config.logging_config import get_logger

router = APIRouter(prefix="/slides", tags=["slides"])
log = get_logger("api.slides")


@router.post("", response_model=SlideOut, status_code=status.HTTP_201_CREATED)
async def create_slide(
    request: CreateSlideRequest,
    slides: SlideUseCases = Depends(get_slide_use_cases),
):
    """
    Add a slide to a deck.

    Responds 404 when deck_id does not reference an existing deck.
    """
    return await slides.create_slide(
        deck_id=request.deck_id,
        title=request.title,
        slide_order=request.slide_order,
        body_text=request.body_text,
        image_url=request.image_url,
    )


@router.patch("/{slide_id}", response_model=SlideOut)
async def update_slide(
    slide_id: int,
    request: PatchSlideRequest,
    slides: SlideUseCases = Depends(get_slide_use_cases),
):
    """
    Partially update a slide.

    Omitted fields stay as they are; body_text or image_url sent as null are
    cleared.
    """
    changes = request.to_changes()
    log.info("slide.patch.request", slide_id=slide_id, fields=changes.changed_fields())
    return await slides.update_slide(slide_id, changes)


@router.delete("/{slide_id}", response_model=SuccessResponse)
async def delete_slide(
    slide_id: int, slides: SlideUseCases = Depends(get_slide_use_cases)
) -> SuccessResponse:
    """Delete a slide; responds 404 when it does not exist."""
    await slides.delete_slide(slide_id)
    return SuccessResponse()
