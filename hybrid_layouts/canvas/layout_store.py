"""
Layout Store
============

Keeps the hybrid layout of each seat layout in memory.
"""

import logging
import uuid
from datetime import datetime
from typing import Optional, Dict, Any, List

from ..models.hybrid_models import HybridLayoutDTO, create_default_layout

logger = logging.getLogger(__name__)


class LayoutStore:
    """Holds hybrid layouts keyed by seat layout id."""

    def __init__(self):
        self._cache: Dict[str, Dict[str, Any]] = {}
        logger.info("[LAYOUT-STORE] Initialized")

    def create_layout(self, layout_id: Optional[str] = None) -> str:
        """Register a seat layout with the default hybrid layout."""
        if layout_id is None:
            layout_id = str(uuid.uuid4())

        if layout_id not in self._cache:
            self._cache[layout_id] = {
                "id": layout_id,
                "created_at": datetime.now().isoformat(),
                "layout": create_default_layout(),
            }
            logger.info(f"[LAYOUT-STORE] Created layout {layout_id}")
        return layout_id

    def get_layout(self, layout_id: str) -> Optional[HybridLayoutDTO]:
        """Get a copy of the stored layout, or None if unknown."""
        entry = self._cache.get(layout_id)
        if not entry:
            return None
        return entry["layout"].model_copy(deep=True)

    def save_layout(self, layout_id: str, layout: HybridLayoutDTO) -> HybridLayoutDTO:
        """Replace the layout for layout_id, creating the entry if needed."""
        entry = self._cache.get(layout_id)
        if entry is None:
            entry = {
                "id": layout_id,
                "created_at": datetime.now().isoformat(),
            }
            self._cache[layout_id] = entry

        entry["layout"] = layout.model_copy(deep=True)
        entry["updated_at"] = datetime.now().isoformat()
        logger.info(
            f"[LAYOUT-STORE] Saved layout {layout_id}: "
            f"sections={len(layout.sections)}, elements={len(layout.elements)}, seats={len(layout.seats)}"
        )
        return entry["layout"].model_copy(deep=True)

    def delete_layout(self, layout_id: str) -> bool:
        """Drop a layout. Returns False if it was not stored."""
        if self._cache.pop(layout_id, None) is None:
            return False
        logger.info(f"[LAYOUT-STORE] Deleted layout {layout_id}")
        return True

    def list_layout_ids(self) -> List[str]:
        return list(self._cache.keys())

    def get_metadata(self, layout_id: str) -> Optional[Dict[str, Any]]:
        """Timestamps and counts for a stored layout."""
        entry = self._cache.get(layout_id)
        if not entry:
            return None
        layout: HybridLayoutDTO = entry["layout"]
        return {
            "layout_id": layout_id,
            "created_at": entry.get("created_at"),
            "updated_at": entry.get("updated_at"),
            "section_count": len(layout.sections),
            "element_count": len(layout.elements),
            "seat_count": len(layout.seats),
        }
