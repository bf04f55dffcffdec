from __future__ import annotations

import argparse
import os
from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import matplotlib.pyplot as plt

from shapes import Primitive, Group
from editor import GraphicsEditor, build_demo_scene
from run_editor_demo import finite_float


ROW_HEIGHT = 1.4

KIND_COLORS: Dict[str, Tuple[float, float, float]] = {
    "Circle": (0.2, 0.8, 0.5),
    "Rectangle": (0.9, 0.4, 0.35),
    "Triangle": (0.35, 0.55, 0.95),
    "Group": (0.88, 0.88, 0.88),
}
SHARED_EDGE = "crimson"


@dataclass
class PlacedPrimitive:
    primitive: Primitive
    depth: int
    parent: Optional[int]  # index into the placement list; None under the editor
    x: float = 0.0
    occurrences: int = 1

    @property
    def y(self) -> float:
        return -(self.depth + 1) * ROW_HEIGHT

    @property
    def shared(self) -> bool:
        return self.occurrences > 1


def count_occurrences(editor: GraphicsEditor) -> Counter:
    """
    How many times each primitive (keyed by id) is reached when the editor
    applies an operation to the whole scene.
    """
    counts: Counter = Counter()
    for top in editor:
        reached = top.walk() if isinstance(top, Group) else (top,)
        counts.update(id(p) for p in reached)
    return counts


def layout_scene(editor: GraphicsEditor) -> List[PlacedPrimitive]:
    """
    Place every occurrence of every primitive, in the same pre-order that
    draw_all() follows. Childless nodes take consecutive x slots; a group sits
    midway between its first and last member.
    """
    placed: List[PlacedPrimitive] = []
    next_slot = 0.0

    def place(primitive: Primitive, depth: int, parent: Optional[int]) -> float:
        nonlocal next_slot
        node = PlacedPrimitive(primitive=primitive, depth=depth, parent=parent)
        index = len(placed)
        placed.append(node)
        member_xs = []
        if isinstance(primitive, Group):
            member_xs = [place(m, depth + 1, index) for m in primitive]
        if member_xs:
            node.x = (member_xs[0] + member_xs[-1]) / 2.0
        else:
            node.x = next_slot
            next_slot += 1.0
        return node.x

    for top in editor:
        place(top, 0, None)
    counts = count_occurrences(editor)
    for node in placed:
        node.occurrences = counts[id(node.primitive)]
    return placed


def node_label(primitive: Primitive) -> str:
    _, _, sizes = primitive.describe().partition(" with ")
    head = f"{primitive.kind} ({primitive.x}, {primitive.y})"
    return f"{head}\n{sizes}" if sizes else head


def plot_scene(editor: GraphicsEditor, font_size: int = 7) -> plt.Figure:
    placed = layout_scene(editor)
    top_xs = [n.x for n in placed if n.parent is None]
    editor_x = (top_xs[0] + top_xs[-1]) / 2.0 if top_xs else 0.0
    slots = max((n.x for n in placed), default=0.0) + 1.0
    rows = max((n.depth for n in placed), default=-1) + 2

    fig, ax = plt.subplots(figsize=(max(4.0, 1.9 * slots), max(2.5, 1.3 * rows)))
    ax.text(editor_x, 0.0, "Editor", ha="center", va="center", fontsize=font_size + 2,
            fontweight="bold", bbox=dict(boxstyle="square,pad=0.4", facecolor="white", edgecolor="0.2"))

    for node in placed:
        if node.parent is None:
            start = (editor_x, 0.0)
        else:
            start = (placed[node.parent].x, placed[node.parent].y)
        ax.annotate(
            "", xy=(node.x, node.y), xytext=start,
            arrowprops=dict(arrowstyle="-|>", color="0.45", shrinkA=12, shrinkB=14,
                            linestyle="--" if node.shared else "-"),
        )
        ax.text(
            node.x, node.y, node_label(node.primitive),
            ha="center", va="center", fontsize=font_size,
            bbox=dict(boxstyle="round,pad=0.3",
                      facecolor=KIND_COLORS.get(node.primitive.kind, (0.7, 0.7, 0.7)),
                      edgecolor=SHARED_EDGE if node.shared else "0.2",
                      linewidth=2.0 if node.shared else 1.0),
        )
        if node.shared:
            ax.text(node.x, node.y - 0.45, f"shared, reached {node.occurrences}x",
                    ha="center", va="top", fontsize=font_size - 1, color=SHARED_EDGE)

    ax.set_xlim(-0.8, slots - 0.2)
    ax.set_ylim(-rows * ROW_HEIGHT, 0.6)
    ax.axis("off")
    fig.tight_layout()
    return fig


def save_scene_tree(editor: GraphicsEditor, out_path: str, dpi: int = 200, show: bool = False) -> str:
    fig = plot_scene(editor)
    out_dir = os.path.dirname(out_path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    fig.savefig(out_path, dpi=dpi)
    if show:
        plt.show()
    plt.close(fig)
    return out_path


def main():
    parser = argparse.ArgumentParser(description="Plot which container holds which primitive in the demo scene.")
    parser.add_argument("--factor", type=finite_float, default=2.0, help="scale factor used with --scaled (default: 2)")
    parser.add_argument("--scaled", action="store_true", help="apply scale_all before plotting")
    parser.add_argument("--out", type=str, default="plots/scene_tree.png", help="output PNG path")
    parser.add_argument("--dpi", type=int, default=200, help="output image DPI (default: 200)")
    parser.add_argument("--show", action="store_true", help="also display the figure window")
    args = parser.parse_args()

    editor, _ = build_demo_scene()
    if args.scaled:
        editor.scale_all(args.factor)
    out_path = save_scene_tree(editor, args.out, dpi=args.dpi, show=args.show)
    print(f"Wrote: {out_path}")


if __name__ == "__main__":
    main()
