"""
Layout Builders
===============

Incremental builders for hybrid layout records.

A builder collects fields one call at a time and produces the record on
build(). Ids that were never set are generated at build time, so every
build() of an id-less builder yields a distinct record.
"""

from typing import Any, Dict, Generic, Optional, Type, TypeVar

from .hybrid_models import (
    CanvasSpec,
    ElementDefinition,
    HybridLayoutDTO,
    LayoutModel,
    SeatDefinition,
    SectionDefinition,
)

M = TypeVar("M", bound=LayoutModel)


class ModelBuilder(Generic[M]):
    """Field-by-field builder for any layout record."""

    def __init__(self, model_cls: Type[M]):
        self.model_cls = model_cls
        self._fields: Dict[str, Any] = {}

    def set(self, **fields: Any) -> "ModelBuilder[M]":
        """Set one or more fields (snake_case or camelCase names)."""
        for name, value in fields.items():
            field_name = self.model_cls.resolve_field_name(name)
            if field_name is None:
                raise ValueError(f"Unknown field for {self.model_cls.__name__}: {name}")
            self._fields[field_name] = value
        return self

    def unset(self, name: str) -> "ModelBuilder[M]":
        """Forget a previously set field so it falls back to its default."""
        field_name = self.model_cls.resolve_field_name(name)
        if field_name is None:
            raise ValueError(f"Unknown field for {self.model_cls.__name__}: {name}")
        self._fields.pop(field_name, None)
        return self

    def build(self) -> M:
        """Produce the record. Nested values are copied, so built records never share them."""
        return self.model_cls(**self._fields).model_copy(deep=True)


class HybridLayoutBuilder(ModelBuilder[HybridLayoutDTO]):
    """Builder for a whole layout; sections, elements and seats keep call order."""

    def __init__(self):
        super().__init__(HybridLayoutDTO)
        self._fields["sections"] = []
        self._fields["elements"] = []
        self._fields["seats"] = []

    def canvas(self, canvas: Optional[CanvasSpec] = None, **fields: Any) -> "HybridLayoutBuilder":
        """
        Set the canvas, either as a CanvasSpec or as its fields.

        A bare canvas() call leaves the canvas unset; use canvas(CanvasSpec())
        for a canvas whose fields are all unset.
        """
        if canvas is not None:
            self._fields["canvas"] = canvas
        elif fields:
            self._fields["canvas"] = CanvasSpec(**fields)
        else:
            self._fields.pop("canvas", None)
        return self

    def add_section(self, section: Optional[SectionDefinition] = None, **fields: Any) -> "HybridLayoutBuilder":
        item = section if section is not None else SectionDefinition(**fields)
        self._fields.setdefault("sections", []).append(item)
        return self

    def add_element(self, element: Optional[ElementDefinition] = None, **fields: Any) -> "HybridLayoutBuilder":
        item = element if element is not None else ElementDefinition(**fields)
        self._fields.setdefault("elements", []).append(item)
        return self

    def add_seat(self, seat: Optional[SeatDefinition] = None, **fields: Any) -> "HybridLayoutBuilder":
        item = seat if seat is not None else SeatDefinition(**fields)
        self._fields.setdefault("seats", []).append(item)
        return self

    def unset(self, name: str) -> "HybridLayoutBuilder":
        super().unset(name)
        for key in ("sections", "elements", "seats"):
            self._fields.setdefault(key, [])
        return self

    def set(self, **fields: Any) -> "HybridLayoutBuilder":
        super().set(**fields)
        for key in ("sections", "elements", "seats"):
            if self._fields.get(key) is None:
                self._fields[key] = []
            else:
                self._fields[key] = list(self._fields[key])
        return self

    def build(self) -> HybridLayoutDTO:
        data = dict(self._fields)
        for key in ("sections", "elements", "seats"):
            data[key] = list(data.get(key) or [])
        return HybridLayoutDTO(**data).model_copy(deep=True)
