"""
FastAPI main application.
"""

from pathlib import Path

from fastapi import FastAPI

from .config import settings
from .routes import builder, units
from .static import CachedStaticFiles, SelectiveGZipMiddleware, register_mime_types

register_mime_types()

app = FastAPI(
    title="TFT Team Builder",
    description="Teamfight Tactics Set 16 team builder",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(SelectiveGZipMiddleware, minimum_size=settings.GZIP_MINIMUM_SIZE)

# Register routers
app.include_router(builder.router, tags=["Builder"])
app.include_router(units.router, prefix="/api/units", tags=["Units"])

# Static files
static_dir = Path(settings.STATIC_DIR)
if static_dir.is_dir():
    app.mount(
        settings.STATIC_BASE_URL,
        CachedStaticFiles(directory=str(static_dir), cache_seconds=settings.STATIC_CACHE_SECONDS),
        name="static",
    )


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
