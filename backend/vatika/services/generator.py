"""
Render generator service.

Sends the customer's photo, one reference photo per recommended planter and
the scene prompt to Gemini's image model, then stores the generated render
in R2. Without a Gemini key, or when no planter reference photo could be
loaded, the photo and prompt go to a depth-conditioned Flux model on
Replicate instead; that render follows the room layout but cannot copy the
exact planter designs.
"""

from __future__ import annotations

import base64
import logging
import time
from functools import lru_cache

import httpx
from google import genai
from google.genai import types as genai_types

from vatika.config import (
    GEMINI_API_KEY,
    GEMINI_IMAGE_MODEL,
    REPLICATE_API_TOKEN,
    REPLICATE_DEPTH_MODEL,
    REPLICATE_POLL_INTERVAL,
    REPLICATE_TIMEOUT,
)
from vatika.models.design import RenderResult
from vatika.models.recommendation import Recommendation
from vatika.services.prompt_builder import build_iteration_prompt, build_scene_prompt
from vatika.storage.r2_client import (
    convert_to_webp,
    get_r2_image_bytes,
    render_key,
    resize_for_prompt,
    upload_image,
)

logger = logging.getLogger(__name__)

# Maximum number of planter reference images sent with one request.
_MAX_REFERENCE_IMAGES = 10


class GenerationError(RuntimeError):
    """The image model returned no usable image."""


@lru_cache(maxsize=1)
def get_gemini_client() -> genai.Client:
    return genai.Client(api_key=GEMINI_API_KEY)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _inline_part(data: bytes, mime_type: str) -> genai_types.Part:
    return genai_types.Part(inline_data=genai_types.Blob(mime_type=mime_type, data=data))


def build_request_parts(
    prompt: str,
    photo_bytes: bytes,
    photo_mime: str,
    recommendation: Recommendation,
) -> list[genai_types.Part]:
    """Prompt text, then the scene photo (Image 1), then references (Image 2+)."""
    parts: list[genai_types.Part] = [
        genai_types.Part(text=prompt),
        _inline_part(photo_bytes, photo_mime),
    ]

    for item in recommendation.items[:_MAX_REFERENCE_IMAGES]:
        try:
            raw = get_r2_image_bytes(item.planter.image)
            resized, mime_type = resize_for_prompt(raw, max_size=512)
        except Exception as exc:
            # Keep numbering aligned with the prompt: a text stand-in holds the slot.
            logger.warning(
                "No reference image for %s (%s): %s", item.planter.id, item.planter.image, exc
            )
            parts.append(genai_types.Part(text=f"(Reference: {item.planter.prompt_desc})"))
            continue
        parts.append(_inline_part(resized, mime_type))

    return parts


def extract_image(response) -> tuple[bytes, str]:
    """Return ``(bytes, mime_type)`` of the first inline image in *response*."""
    for candidate in response.candidates or []:
        content = candidate.content
        if content is None:
            continue
        for part in content.parts or []:
            if part.inline_data is None:
                continue
            raw_data = part.inline_data.data
            if not isinstance(raw_data, bytes):
                raw_data = base64.b64decode(raw_data)
            return raw_data, part.inline_data.mime_type or "image/png"

    raise GenerationError(
        "No image in Gemini response. The model may have refused generation."
    )


def _reference_count(parts: list[genai_types.Part]) -> int:
    """Planter reference images actually attached (text stand-ins excluded)."""
    return sum(1 for part in parts[2:] if part.inline_data is not None)


def _generate_with_gemini(parts: list[genai_types.Part]) -> bytes:
    response = get_gemini_client().models.generate_content(
        model=GEMINI_IMAGE_MODEL,
        contents=genai_types.Content(role="user", parts=parts),
        config=genai_types.GenerateContentConfig(
            response_modalities=["TEXT", "IMAGE"],
        ),
    )
    image_bytes, _ = extract_image(response)
    return image_bytes


# ---------------------------------------------------------------------------
# Replicate fallback
# ---------------------------------------------------------------------------

def _replicate_client() -> httpx.Client:
    return httpx.Client(
        timeout=60,
        follow_redirects=True,
        headers={"Authorization": f"Token {REPLICATE_API_TOKEN}"},
    )


def generate_with_flux_depth(prompt: str, photo_bytes: bytes, photo_mime: str) -> bytes:
    """Render *prompt* over the depth map of the photo and return the image bytes.

    Raises
    ------
    GenerationError
        When the prediction fails, is cancelled, times out or has no output.
    """
    control_image = f"data:{photo_mime};base64,{base64.b64encode(photo_bytes).decode('ascii')}"

    with _replicate_client() as client:
        response = client.post(
            f"https://api.replicate.com/v1/models/{REPLICATE_DEPTH_MODEL}/predictions",
            json={
                "input": {
                    "prompt": prompt,
                    "control_image": control_image,
                    "num_outputs": 1,
                    "guidance_scale": 15,
                    "num_inference_steps": 28,
                    "strength": 0.80,
                },
            },
        )
        if response.is_error:
            raise GenerationError(f"Replicate error {response.status_code}: {response.text}")
        poll_url = response.json()["urls"]["get"]

        deadline = time.monotonic() + REPLICATE_TIMEOUT
        while time.monotonic() < deadline:
            time.sleep(REPLICATE_POLL_INTERVAL)
            prediction = client.get(poll_url).json()
            status = prediction.get("status")

            if status == "succeeded":
                output = prediction.get("output")
                output_url = output[0] if isinstance(output, list) and output else output
                if not output_url:
                    raise GenerationError("Replicate prediction succeeded without an output image.")
                image = client.get(output_url)
                image.raise_for_status()
                return image.content

            if status in ("failed", "canceled"):
                raise GenerationError(
                    f"Replicate prediction {status}: {prediction.get('error') or 'unknown'}"
                )

    raise GenerationError("Replicate prediction timed out.")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def generate_render(
    user_id: str,
    photo_bytes: bytes,
    photo_mime: str,
    recommendation: Recommendation,
    feedback: str | None = None,
) -> RenderResult:
    """Render *recommendation* into the customer's photo and upload the result.

    Gemini is used when a key is configured and at least one planter
    reference photo loaded; otherwise the Replicate depth model renders from
    the prompt alone.

    Raises
    ------
    GenerationError
        When the chosen model answers without an image, or neither model is
        configured.
    """
    if feedback and feedback.strip():
        prompt = build_iteration_prompt(recommendation.items, feedback, recommendation.space_type)
    else:
        prompt = build_scene_prompt(recommendation.items, recommendation.space_type)

    parts = build_request_parts(prompt, photo_bytes, photo_mime, recommendation) if GEMINI_API_KEY else []

    if parts and _reference_count(parts):
        logger.info(
            "Generating render for %s @ %d with %d parts",
            recommendation.space_type, recommendation.budget, len(parts),
        )
        image_bytes = _generate_with_gemini(parts)
        model = GEMINI_IMAGE_MODEL
    elif REPLICATE_API_TOKEN:
        logger.warning(
            "Falling back to %s for %s @ %d (gemini key set: %s)",
            REPLICATE_DEPTH_MODEL, recommendation.space_type, recommendation.budget,
            bool(GEMINI_API_KEY),
        )
        image_bytes = generate_with_flux_depth(prompt, photo_bytes, photo_mime)
        model = REPLICATE_DEPTH_MODEL
    else:
        raise GenerationError(
            "No image model available. Set GEMINI_API_KEY or REPLICATE_API_TOKEN."
        )

    key = render_key(
        user_id,
        recommendation.space_type,
        recommendation.budget,
        int(time.time() * 1000),
    )
    render_url = upload_image(convert_to_webp(image_bytes), key, content_type="image/webp")
    logger.info("Render uploaded to R2: %s", key)

    return RenderResult(render_url=render_url, prompt=prompt, model=model)
