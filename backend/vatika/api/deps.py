"""Request dependencies shared by the API routers."""

from fastapi import Header, HTTPException


def get_user_id(x_user_id: str | None = Header(default=None)) -> str:
    """Identify the caller from the ``X-User-Id`` header set by the auth gateway."""
    if x_user_id is None or not x_user_id.strip():
        raise HTTPException(status_code=401, detail="Please sign in to continue.")
    return x_user_id.strip()
