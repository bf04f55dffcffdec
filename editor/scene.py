from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, TextIO, Tuple

from shapes import Primitive, Circle, Rectangle, Triangle, Group

from .editor import GraphicsEditor


@dataclass(frozen=True)
class SceneConfig:
    scale_factor: float = 2.0


def build_demo_scene() -> Tuple[GraphicsEditor, Dict[str, Primitive]]:
    circle = Circle(10, 20, 5)
    rectangle = Rectangle(30, 40, 8, 12)
    triangle = Triangle(50, 60, 10)

    # circle and rectangle are shared between the group and the editor
    group = Group(0, 0)
    group.add_member(circle)
    group.add_member(rectangle)

    editor = GraphicsEditor()
    editor.add_primitive(circle)
    editor.add_primitive(rectangle)
    editor.add_primitive(triangle)
    editor.add_primitive(group)
    named = {"circle": circle, "rectangle": rectangle, "triangle": triangle, "group": group}
    return editor, named


def _format_factor(factor: float) -> str:
    return f"{factor:g}"


def run_demo(cfg: SceneConfig, out: Optional[TextIO] = None) -> GraphicsEditor:
    editor, _ = build_demo_scene()
    print("Original Drawings:", file=out)
    editor.draw_all(out)
    print(f"\nScaling by factor of {_format_factor(cfg.scale_factor)}:", file=out)
    editor.scale_all(cfg.scale_factor)
    editor.draw_all(out)
    return editor
