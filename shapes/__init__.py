# Re-export core primitive API for convenience
from .primitives import (
    Primitive,
    Circle,
    Rectangle,
    Triangle,
    PrimitiveError,
    CyclicStructureError,
    scale_length,
)
from .group import Group
