"""
Cloudflare R2 storage client for Vatika.AI.

Holds the planter reference photos (``planters/...``) and the generated
renders (``renders/...``). Handles WebP conversion and prompt-size resizing
through the R2-compatible S3 API.
"""

import io
from functools import lru_cache

import boto3
from botocore.config import Config
from PIL import Image

from vatika.config import (
    CF_ACCOUNT_ID,
    R2_ACCESS_KEY,
    R2_SECRET_KEY,
    R2_BUCKET,
    R2_PUBLIC_URL,
)


# ---------------------------------------------------------------------------
# Boto3 S3 client configured for Cloudflare R2
# ---------------------------------------------------------------------------
@lru_cache(maxsize=1)
def get_s3():
    return boto3.client(
        "s3",
        endpoint_url=f"https://{CF_ACCOUNT_ID}.r2.cloudflarestorage.com",
        aws_access_key_id=R2_ACCESS_KEY,
        aws_secret_access_key=R2_SECRET_KEY,
        config=Config(signature_version="s3v4"),
        region_name="auto",
    )


# ---------------------------------------------------------------------------
# Image helpers
# ---------------------------------------------------------------------------

def _fit(img: Image.Image, max_size: int) -> Image.Image:
    w, h = img.size
    if max(w, h) <= max_size:
        return img
    scale = max_size / max(w, h)
    return img.resize((int(w * scale), int(h * scale)), Image.LANCZOS)


def convert_to_webp(image_bytes: bytes, max_size: int = 1536) -> bytes:
    """Return *image_bytes* as RGB WebP, longest side at most *max_size*."""
    try:
        img = _fit(Image.open(io.BytesIO(image_bytes)).convert("RGB"), max_size)
        buf = io.BytesIO()
        img.save(buf, format="WEBP", quality=85)
        return buf.getvalue()
    except Exception as e:
        print(f"[r2_client] convert_to_webp error: {e}")
        raise


def resize_for_prompt(image_bytes: bytes, max_size: int = 512) -> tuple[bytes, str]:
    """Shrink a reference image for the render prompt.

    Keeps the original format. Returns ``(bytes, mime_type)``.
    """
    try:
        img = Image.open(io.BytesIO(image_bytes))
        original_format = img.format or "PNG"
        img = _fit(img, max_size)

        buf = io.BytesIO()
        img.save(buf, format=original_format)
        return buf.getvalue(), Image.MIME.get(original_format, "image/png")
    except Exception as e:
        print(f"[r2_client] resize_for_prompt error: {e}")
        raise


# ---------------------------------------------------------------------------
# R2 CRUD operations
# ---------------------------------------------------------------------------

def upload_image(image_bytes: bytes, r2_key: str, content_type: str = "image/webp") -> str:
    """Upload *image_bytes* to R2 under *r2_key* and return the public URL."""
    try:
        get_s3().put_object(
            Bucket=R2_BUCKET,
            Key=r2_key,
            Body=image_bytes,
            ContentType=content_type,
        )
        return get_image_url(r2_key)
    except Exception as e:
        print(f"[r2_client] upload_image error for key '{r2_key}': {e}")
        raise


def get_image_url(r2_key: str) -> str:
    """Return the public URL for an R2 object."""
    return f"{R2_PUBLIC_URL}/{r2_key}"


def get_r2_image_bytes(r2_key: str) -> bytes:
    """Download an object from R2 and return its raw bytes."""
    try:
        response = get_s3().get_object(Bucket=R2_BUCKET, Key=r2_key)
        return response["Body"].read()
    except Exception as e:
        print(f"[r2_client] get_r2_image_bytes error for key '{r2_key}': {e}")
        raise


def delete_image(r2_key: str) -> None:
    """Delete an object from R2."""
    try:
        get_s3().delete_object(Bucket=R2_BUCKET, Key=r2_key)
    except Exception as e:
        print(f"[r2_client] delete_image error for key '{r2_key}': {e}")
        raise


def render_key(user_id: str, space_type: str, budget: int, timestamp_ms: int) -> str:
    """R2 key for a generated render."""
    return f"renders/{user_id}/{space_type}-{budget}-{timestamp_ms}.webp"


def key_from_url(url: str) -> str | None:
    """Inverse of ``get_image_url``; None for URLs outside the bucket."""
    prefix = f"{R2_PUBLIC_URL}/"
    if R2_PUBLIC_URL and url.startswith(prefix):
        return url[len(prefix):]
    return None
