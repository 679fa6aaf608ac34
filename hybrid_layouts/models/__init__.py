from .hybrid_models import (
    CanvasSpec,
    ElementDefinition,
    HybridLayoutDTO,
    LayoutModel,
    SeatDefinition,
    SectionDefinition,
    create_default_layout,
)
from .builders import HybridLayoutBuilder, ModelBuilder

__all__ = [
    "CanvasSpec",
    "ElementDefinition",
    "HybridLayoutBuilder",
    "HybridLayoutDTO",
    "LayoutModel",
    "ModelBuilder",
    "SeatDefinition",
    "SectionDefinition",
    "create_default_layout",
]
