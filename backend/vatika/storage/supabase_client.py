"""
Supabase client for Vatika.AI: saved designs, one row per
(user, budget, space type).
"""

import logging
from datetime import datetime
from functools import lru_cache

from supabase import create_client, Client

from vatika.config import DESIGNS_TABLE, SUPABASE_URL, SUPABASE_SERVICE_KEY
from vatika.models.design import DesignEntry, RenderedImage

logger = logging.getLogger(__name__)

DESIGN_CONFLICT_KEY = "user_id,budget,space_type"


@lru_cache(maxsize=1)
def get_supabase() -> Client:
    return create_client(SUPABASE_URL, SUPABASE_SERVICE_KEY)


# ---------------------------------------------------------------------------
# Row mapping
# ---------------------------------------------------------------------------

def design_to_row(user_id: str, budget: int, space_type: str, render: RenderedImage) -> dict:
    """Build the ``vatika_designs`` row for a render."""
    return {
        "user_id": user_id,
        "budget": budget,
        "space_type": space_type,
        "render_url": render.url,
        "prompt": render.prompt,
        "created_at": render.timestamp.isoformat(),
    }


def row_to_design(row: dict) -> DesignEntry:
    return DesignEntry(
        budget=row["budget"],
        space_type=row.get("space_type") or "balcony",
        render=RenderedImage(
            url=row["render_url"],
            prompt=row.get("prompt") or "",
            timestamp=datetime.fromisoformat(row["created_at"]),
        ),
    )


# ---------------------------------------------------------------------------
# Designs
# ---------------------------------------------------------------------------

def save_design(user_id: str, budget: int, space_type: str, render: RenderedImage) -> None:
    """Upsert a design; an existing row for the same budget and space is replaced."""
    row = design_to_row(user_id, budget, space_type, render)
    try:
        (
            get_supabase()
            .table(DESIGNS_TABLE)
            .upsert(row, on_conflict=DESIGN_CONFLICT_KEY)
            .execute()
        )
    except Exception as exc:
        logger.error("Failed to save design for user %s: %s", user_id, exc, exc_info=True)
        raise
    logger.info("Saved design %s/%s for user %s", space_type, budget, user_id)


def load_designs(user_id: str) -> list[DesignEntry]:
    """All designs for *user_id*, newest first. Empty list on query failure."""
    try:
        result = (
            get_supabase()
            .table(DESIGNS_TABLE)
            .select("budget, space_type, render_url, prompt, created_at")
            .eq("user_id", user_id)
            .order("created_at", desc=True)
            .execute()
        )
    except Exception as exc:
        logger.error("Failed to load designs for user %s: %s", user_id, exc)
        return []

    return [row_to_design(row) for row in result.data or []]


def delete_design(user_id: str, budget: int, space_type: str) -> list[dict]:
    """Delete one design and return the deleted rows."""
    try:
        result = (
            get_supabase()
            .table(DESIGNS_TABLE)
            .delete()
            .eq("user_id", user_id)
            .eq("budget", budget)
            .eq("space_type", space_type)
            .execute()
        )
    except Exception as exc:
        logger.error("Failed to delete design for user %s: %s", user_id, exc)
        raise
    return result.data or []
