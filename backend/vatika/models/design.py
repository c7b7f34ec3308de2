"""Pydantic v2 models for generated renders and saved designs."""

from datetime import datetime

from pydantic import BaseModel

from vatika.models.catalog import SpaceType
from vatika.models.recommendation import RecommendationOut


class RenderedImage(BaseModel):
    """A generated image plus the prompt that produced it."""

    url: str
    prompt: str = ""
    timestamp: datetime


class DesignEntry(BaseModel):
    """A saved design, unique per (user, budget, space type)."""

    budget: int
    space_type: SpaceType
    render: RenderedImage


class RenderResult(BaseModel):
    """Output of the image-generation step."""

    render_url: str
    prompt: str
    model: str


class GenerateResponse(BaseModel):
    """Response body of ``POST /api/generate``."""

    render_url: str
    prompt: str
    model: str
    saved: bool
    recommendation: RecommendationOut
