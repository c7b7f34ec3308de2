"""Design API routes: render generation and saved designs."""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, UploadFile

from vatika.api.deps import get_user_id
from vatika.config import ALLOWED_IMAGE_TYPES, MAX_BUDGET, MAX_FILE_SIZE, MIN_BUDGET
from vatika.models.catalog import SpaceType
from vatika.models.design import DesignEntry, GenerateResponse, RenderedImage
from vatika.models.recommendation import RecommendationOut
from vatika.services.generator import GenerationError, generate_render
from vatika.services.recommender import recommend
from vatika.storage.r2_client import delete_image, key_from_url
from vatika.storage.supabase_client import delete_design, load_designs, save_design

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["design"])


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

async def _read_and_validate_image(photo: UploadFile) -> tuple[bytes, str]:
    """Read an uploaded photo, validate type and size.

    Returns:
        A tuple of (image_bytes, mime_type).

    Raises:
        HTTPException 400 if the file is not an allowed image type, is empty,
        or exceeds the maximum size.
    """
    mime_type = photo.content_type or ""
    if mime_type not in ALLOWED_IMAGE_TYPES:
        raise HTTPException(
            status_code=400,
            detail="Unsupported image format. Please upload a JPEG, PNG or WebP photo.",
        )

    image_bytes = await photo.read()

    if not image_bytes:
        raise HTTPException(status_code=400, detail="The uploaded photo is empty.")

    if len(image_bytes) > MAX_FILE_SIZE:
        raise HTTPException(
            status_code=400,
            detail="The photo is too large. Maximum size: 10MB.",
        )

    return image_bytes, mime_type


def _validate_budget(budget: int) -> None:
    if budget < MIN_BUDGET or budget > MAX_BUDGET:
        raise HTTPException(
            status_code=400,
            detail=f"Budget must be between {MIN_BUDGET} and {MAX_BUDGET}.",
        )


# ---------------------------------------------------------------------------
# POST /api/generate
# ---------------------------------------------------------------------------

@router.post("/generate", response_model=GenerateResponse)
async def generate_design(
    photo: UploadFile = File(...),
    budget: int = Form(...),
    space_type: SpaceType = Form("balcony"),
    feedback: str | None = Form(None),
    user_id: str = Depends(get_user_id),
) -> GenerateResponse:
    """Full pipeline: recommend planters, render them into the photo, save the design."""
    _validate_budget(budget)
    image_bytes, mime_type = await _read_and_validate_image(photo)

    recommendation = recommend(budget, space_type)

    try:
        result = await asyncio.to_thread(
            generate_render,
            user_id,
            image_bytes,
            mime_type,
            recommendation,
            feedback,
        )
    except GenerationError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    except Exception as exc:
        raise HTTPException(
            status_code=500,
            detail=f"Design generation failed: {exc}",
        ) from exc

    render = RenderedImage(
        url=result.render_url,
        prompt=result.prompt,
        timestamp=datetime.now(timezone.utc),
    )

    saved = True
    try:
        await asyncio.to_thread(save_design, user_id, budget, space_type, render)
    except Exception as exc:
        # The render is still returned; only persistence failed.
        logger.error("Design not saved for user %s: %s", user_id, exc)
        saved = False

    return GenerateResponse(
        render_url=result.render_url,
        prompt=result.prompt,
        model=result.model,
        saved=saved,
        recommendation=RecommendationOut.from_recommendation(recommendation),
    )


# ---------------------------------------------------------------------------
# Saved designs
# ---------------------------------------------------------------------------

@router.get("/designs", response_model=list[DesignEntry])
async def list_designs(user_id: str = Depends(get_user_id)) -> list[DesignEntry]:
    """All saved designs for the caller, newest first."""
    return await asyncio.to_thread(load_designs, user_id)


@router.delete("/designs")
async def remove_design(
    budget: int = Query(...),
    space_type: SpaceType = Query(...),
    user_id: str = Depends(get_user_id),
) -> dict:
    """Delete the caller's design for a budget and space type, render included."""
    rows = await asyncio.to_thread(delete_design, user_id, budget, space_type)
    if not rows:
        raise HTTPException(status_code=404, detail="Design not found.")

    for row in rows:
        key = key_from_url(row.get("render_url") or "")
        if key is None:
            continue
        try:
            await asyncio.to_thread(delete_image, key)
        except Exception as exc:
            logger.warning("Render %s left in R2: %s", key, exc)

    return {"deleted": True}
