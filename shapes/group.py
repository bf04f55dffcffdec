from __future__ import annotations

from typing import Iterator, List, Optional, TextIO, Tuple

from .primitives import Primitive, CyclicStructureError


class Group(Primitive):
    """
    Composite primitive: an ordered list of members, each of which may itself
    be a Group.

    draw() and scale() recurse into the members in insertion order. move() is
    the inherited one and only shifts the group's own anchor point; the
    members keep their positions.
    """
    kind = "Group"

    def __init__(self, x: int, y: int):
        super().__init__(x, y)
        self._members: List[Primitive] = []

    @property
    def members(self) -> Tuple[Primitive, ...]:
        return tuple(self._members)

    def add_member(self, member: Primitive) -> None:
        if not isinstance(member, Primitive):
            raise TypeError(f"Group members must be primitives, got {type(member).__name__}")
        if member is self or (isinstance(member, Group) and member.contains(self)):
            raise CyclicStructureError("adding this member would make the group contain itself")
        self._members.append(member)

    def contains(self, primitive: Primitive) -> bool:
        """
        True if `primitive` (by identity) is a member or a member of a nested group.
        """
        return any(node is primitive for node in self.walk() if node is not self)

    def walk(self) -> Iterator[Primitive]:
        """
        Depth-first, pre-order traversal of the group and everything below it.
        A primitive shared by several groups is yielded once per occurrence.
        """
        yield self
        for member in self._members:
            if isinstance(member, Group):
                yield from member.walk()
            else:
                yield member

    def describe(self) -> str:
        return f"Drawing Group at {self._position()}"

    def draw(self, out: Optional[TextIO] = None) -> None:
        print(self.describe(), file=out)
        for member in self._members:
            member.draw(out)

    def scale(self, factor: float) -> None:
        for member in self._members:
            member.scale(factor)

    def __len__(self) -> int:
        return len(self._members)

    def __bool__(self) -> bool:
        # an empty group is still a primitive in the scene
        return True

    def __iter__(self) -> Iterator[Primitive]:
        return iter(self._members)
