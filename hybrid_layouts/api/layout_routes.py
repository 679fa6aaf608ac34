"""
Layout Routes
=============

API routes for reading and replacing hybrid seat layouts.
"""

import logging
from typing import Optional, Dict, Any
from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from ..canvas.layout_store import LayoutStore
from ..models.hybrid_models import HybridLayoutDTO

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/seat-layouts", tags=["seat-layouts"])

# Injected by server
layout_store: Optional[LayoutStore] = None


class CreateLayoutResponse(BaseModel):
    """Response for layout creation."""
    layout_id: str
    layout: Dict[str, Any]


def get_layout_store() -> LayoutStore:
    """Return the injected store or fail with 500."""
    if layout_store is None:
        raise HTTPException(status_code=500, detail="Layout store not initialized")
    return layout_store


@router.post("/")
async def create_layout() -> CreateLayoutResponse:
    """Create a seat layout holding the default hybrid layout."""
    store = get_layout_store()
    layout_id = store.create_layout()
    return CreateLayoutResponse(
        layout_id=layout_id,
        layout=store.get_layout(layout_id).to_payload()
    )


@router.get("/{layout_id}/hybrid")
async def get_hybrid_layout(layout_id: str) -> Dict[str, Any]:
    """Get the hybrid layout of a seat layout."""
    store = get_layout_store()
    layout = store.get_layout(layout_id)
    if layout is None:
        raise HTTPException(status_code=404, detail="Layout not found")
    return layout.to_payload()


@router.put("/{layout_id}/hybrid")
async def save_hybrid_layout(layout_id: str, layout: HybridLayoutDTO) -> Dict[str, Any]:
    """Replace the hybrid layout of a seat layout."""
    store = get_layout_store()
    saved = store.save_layout(layout_id, layout)
    logger.info(f"[LAYOUT-ROUTES] PUT {layout_id} seats={len(saved.seats)}")
    return saved.to_payload()


@router.delete("/{layout_id}/hybrid")
async def delete_hybrid_layout(layout_id: str):
    """Delete a seat layout's hybrid layout."""
    store = get_layout_store()
    if not store.delete_layout(layout_id):
        raise HTTPException(status_code=404, detail="Layout not found")
    return {"message": "Layout deleted", "layout_id": layout_id}


@router.get("/{layout_id}")
async def get_layout_summary(layout_id: str) -> Dict[str, Any]:
    """Get timestamps and counts for a seat layout."""
    store = get_layout_store()
    metadata = store.get_metadata(layout_id)
    if metadata is None:
        raise HTTPException(status_code=404, detail="Layout not found")
    return metadata
