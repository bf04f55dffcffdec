from __future__ import annotations

from typing import Iterator, List, Optional, TextIO, Tuple

from shapes import Primitive


class GraphicsEditor:
    """
    Holds the top-level primitives of a scene and applies bulk operations to
    them in insertion order.

    The same primitive may also sit inside a Group that is itself added here;
    in that case scale_all() reaches it once per occurrence.
    """

    def __init__(self):
        self._primitives: List[Primitive] = []

    @property
    def primitives(self) -> Tuple[Primitive, ...]:
        return tuple(self._primitives)

    def add_primitive(self, primitive: Primitive) -> None:
        if not isinstance(primitive, Primitive):
            raise TypeError(f"expected a primitive, got {type(primitive).__name__}")
        self._primitives.append(primitive)

    def draw_all(self, out: Optional[TextIO] = None) -> None:
        for primitive in self._primitives:
            primitive.draw(out)

    def scale_all(self, factor: float) -> None:
        for primitive in self._primitives:
            primitive.scale(factor)

    def __len__(self) -> int:
        return len(self._primitives)

    def __iter__(self) -> Iterator[Primitive]:
        return iter(self._primitives)
