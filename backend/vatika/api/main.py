"""
Vatika.AI API - Main FastAPI Application Entry Point

AI garden design for balconies, living rooms and terraces.
Combines all routers and middleware into a single FastAPI application.

Run with:
    uvicorn vatika.api.main:app --host 0.0.0.0 --port 8000
"""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from vatika.api.routes_catalog import router as catalog_router
from vatika.api.routes_design import router as design_router
from vatika.config import LOG_LEVEL

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Vatika.AI API",
    description="AI garden design with real catalog planters",
    version="0.1.0",
)

# ---------------------------------------------------------------------------
# CORS middleware (allow all origins for MVP -- restrict in production)
# ---------------------------------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------------------------------------------------------
# Global exception handler
# ---------------------------------------------------------------------------
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Catch unhandled exceptions and return structured JSON error responses."""
    error_type = type(exc).__name__

    status_code = 500
    message = "Something went wrong. Please try again."
    if isinstance(exc, ValueError):
        status_code = 400
        message = "Invalid request. Please check your input."
    elif isinstance(exc, (KeyError, FileNotFoundError)):
        status_code = 404
        message = "Not found."
    elif isinstance(exc, (ConnectionError, TimeoutError)):
        status_code = 503
        message = "An upstream service is unavailable."

    logger.error("%s: %s | Path: %s", error_type, exc, request.url.path, exc_info=exc)

    return JSONResponse(
        status_code=status_code,
        content={
            "error": error_type,
            "message": message,
            "detail": str(exc) if status_code < 500 else None,
        },
    )


# ---------------------------------------------------------------------------
# Include routers
# ---------------------------------------------------------------------------
app.include_router(catalog_router)
app.include_router(design_router)


# ---------------------------------------------------------------------------
# Root & health-check endpoints
# ---------------------------------------------------------------------------
@app.get("/")
async def root():
    """Root endpoint returning basic API information."""
    return {
        "name": "Vatika.AI API",
        "version": "0.1.0",
        "status": "running",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring and load balancers."""
    return {"status": "healthy"}


# ---------------------------------------------------------------------------
# Convenience: run directly with `python -m vatika.api.main`
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    import uvicorn

    uvicorn.run("vatika.api.main:app", host="0.0.0.0", port=8000, reload=True)
