"""
Hybrid Layouts Server
=====================

FastAPI server for hybrid seating layouts.

Features:
- Read and replace the hybrid layout of a seat layout
- Default canvas for newly created layouts
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import (
    CORS_ORIGINS, LOG_LEVEL, SERVICE_NAME, SERVICE_VERSION
)

# Configure logging
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

from .canvas.layout_store import LayoutStore
from .models.hybrid_models import DEFAULT_CANVAS
from .api import layout_routes


# Shared service instances
layout_store: LayoutStore = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    global layout_store

    logger.info("[HYBRID-LAYOUTS] Starting up...")

    layout_store = LayoutStore()

    # Inject into route modules
    layout_routes.layout_store = layout_store

    logger.info("[HYBRID-LAYOUTS] Services initialized")

    yield

    logger.info("[HYBRID-LAYOUTS] Shutting down...")


app = FastAPI(
    title=SERVICE_NAME,
    description="Hybrid seating layouts: canvas, sections, elements and seats",
    version=SERVICE_VERSION,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(layout_routes.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "hybrid-layouts"
    }


@app.get("/api/info")
async def api_info():
    """Get API information. Shapes and element types are hints, not a closed set."""
    return {
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "section_shapes": ["rectangle", "circle", "polygon"],
        "element_types": ["stage", "screen", "walkway", "entry-door", "exit-door", "custom"],
        "default_canvas": {
            "width": DEFAULT_CANVAS["width"],
            "height": DEFAULT_CANVAS["height"],
            "gridSize": DEFAULT_CANVAS["grid_size"],
            "zoom": DEFAULT_CANVAS["zoom"]
        },
        "endpoints": {
            "create": "/api/seat-layouts/",
            "hybrid": "/api/seat-layouts/{layout_id}/hybrid",
            "summary": "/api/seat-layouts/{layout_id}"
        }
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "hybrid_layouts.server:app",
        host="0.0.0.0",
        port=8080,
        reload=True
    )
