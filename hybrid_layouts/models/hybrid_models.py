"""
Hybrid Layout Models
====================

Models for the hybrid seating layout: canvas, sections, elements and seats.

Optional fields use None as the "not set" marker, so a consumer can tell an
unspecified value from a real zero. Field names go over the wire in camelCase
(gridSize, sectionId, rowLabel, tierCode).
"""

import uuid
from typing import Any, Dict, List, Optional, TYPE_CHECKING
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

if TYPE_CHECKING:
    from .builders import ModelBuilder


class LayoutModel(BaseModel):
    """Base for all hybrid layout records."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    @classmethod
    def builder(cls) -> "ModelBuilder":
        """Start an incremental builder for this record type."""
        from .builders import ModelBuilder
        return ModelBuilder(cls)

    @classmethod
    def resolve_field_name(cls, name: str) -> Optional[str]:
        """Map a snake_case or camelCase name to the attribute name."""
        if name in cls.model_fields:
            return name
        for field_name, info in cls.model_fields.items():
            if info.alias == name:
                return field_name
        return None

    def with_changes(self, **changes: Any) -> "LayoutModel":
        """
        Return a fully-populated copy with the given fields overridden.

        Nested records and lists are copied too, and ids are kept unless
        overridden.

        Raises:
            ValueError: if a name is not a field of this record
        """
        unknown = [name for name in changes if self.resolve_field_name(name) is None]
        if unknown:
            raise ValueError(
                f"Unknown field(s) for {type(self).__name__}: {', '.join(sorted(unknown))}"
            )

        data = self.model_dump()
        for name, value in changes.items():
            data[self.resolve_field_name(name)] = value
        return type(self).model_validate(data)

    def to_payload(self, exclude_none: bool = False) -> Dict[str, Any]:
        """Serialize to a JSON-compatible dict with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=exclude_none)

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "LayoutModel":
        """Build a record from a decoded JSON payload."""
        return cls.model_validate(data)


class CanvasSpec(LayoutModel):
    """Drawing surface of a layout."""
    width: Optional[float] = None
    height: Optional[float] = None
    grid_size: Optional[float] = None
    zoom: Optional[float] = None


class SectionDefinition(LayoutModel):
    """A labeled region on the canvas. Which geometry fields apply depends on shape."""
    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    label: Optional[str] = None
    shape: Optional[str] = None  # "rectangle", "circle", "polygon", ...
    x: Optional[float] = None
    y: Optional[float] = None
    width: Optional[float] = None
    height: Optional[float] = None
    radius: Optional[float] = None
    rotation: Optional[float] = None
    color: Optional[str] = None


class ElementDefinition(LayoutModel):
    """A non-seat item on the canvas (stage, screen, door...)."""
    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    type: Optional[str] = None
    label: Optional[str] = None
    x: Optional[float] = None
    y: Optional[float] = None
    width: Optional[float] = None
    height: Optional[float] = None
    radius: Optional[float] = None
    rotation: Optional[float] = None
    color: Optional[str] = None


class SeatDefinition(LayoutModel):
    """A single seat, optionally tied to a section through section_id."""
    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    section_id: Optional[uuid.UUID] = None
    label: Optional[str] = None
    row_label: Optional[str] = None
    number: Optional[int] = None
    tier_code: Optional[str] = None
    type: Optional[str] = None
    x: Optional[float] = None
    y: Optional[float] = None
    rotation: Optional[float] = None
    radius: Optional[float] = None


class HybridLayoutDTO(LayoutModel):
    """A complete hybrid layout. List order is presentation order."""
    canvas: Optional[CanvasSpec] = None
    sections: List[SectionDefinition] = Field(default_factory=list)
    elements: List[ElementDefinition] = Field(default_factory=list)
    seats: List[SeatDefinition] = Field(default_factory=list)

    @field_validator("sections", "elements", "seats", mode="before")
    @classmethod
    def _null_list_to_empty(cls, value: Any) -> Any:
        """A null list on input means empty."""
        return [] if value is None else value

    @classmethod
    def builder(cls) -> "ModelBuilder":
        from .builders import HybridLayoutBuilder
        return HybridLayoutBuilder()

    def seats_for_section(self, section_id: uuid.UUID) -> List[SeatDefinition]:
        """Seats whose section_id matches, in presentation order."""
        return [s for s in self.seats if s.section_id == section_id]


# Canvas a new hybrid designer opens with
DEFAULT_CANVAS = {
    "width": 1200.0,
    "height": 700.0,
    "grid_size": 20.0,
    "zoom": 1.0,
}


def create_default_layout() -> HybridLayoutDTO:
    """Starting layout for a new seat layout: default canvas, nothing placed."""
    return HybridLayoutDTO(canvas=CanvasSpec(**DEFAULT_CANVAS))
