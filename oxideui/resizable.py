"""A box around a child with drag handles for resizing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Hashable

from oxideui.core import (
    BuildContext,
    Constraints,
    LeafNode,
    Rect,
    RenderGroup,
    RenderRect,
    Widget,
)

_HANDLE_SIZE = 8.0


@dataclass(frozen=True)
class ResizableEdges:
    """Which edges of a Resizable can be dragged."""

    left: bool
    right: bool
    top: bool
    bottom: bool

    @staticmethod
    def all() -> ResizableEdges:
        return ResizableEdges(True, True, True, True)

    @staticmethod
    def none() -> ResizableEdges:
        return ResizableEdges(False, False, False, False)


class Resizable(Widget):
    """Draws its child at a set size, with handles on the resizable edges."""

    def __init__(self, child: Widget):
        self.child = child
        self.min_width = 50.0
        self.min_height = 50.0
        self.max_width = 1000.0
        self.max_height = 1000.0
        self.width = 200.0
        self.height = 150.0
        self.edges = ResizableEdges.all()
        self.on_resize: Callable[[float, float], None] | None = None
        self.key: Hashable | None = None

    def with_size(self, width: float, height: float) -> Resizable:
        self.width = width
        self.height = height
        return self

    def with_min_size(self, min_width: float, min_height: float) -> Resizable:
        self.min_width = min_width
        self.min_height = min_height
        return self

    def with_max_size(self, max_width: float, max_height: float) -> Resizable:
        self.max_width = max_width
        self.max_height = max_height
        return self

    def resizable(self, edges: ResizableEdges) -> Resizable:
        self.edges = edges
        return self

    def with_on_resize(self, callback: Callable[[float, float], None]) -> Resizable:
        self.on_resize = callback
        return self

    def with_key(self, key: Hashable) -> Resizable:
        self.key = key
        return self

    def build(self, ctx: BuildContext) -> LeafNode:
        theme = ctx.theme
        size = _HANDLE_SIZE
        objects: list = []

        child_ctx = ctx.child_context(
            ctx.element_id, Constraints(0.0, self.width, 0.0, self.height)
        )
        child_node = self.child.build(child_ctx)
        if isinstance(child_node, LeafNode):
            objects.append(child_node.render_object)

        handle_color = theme.primary.with_alpha(150)

        if self.edges.right and self.edges.bottom:
            hx = self.width - size
            hy = self.height - size
            objects.append(RenderRect(Rect(hx, hy, size, size), handle_color))
            objects.append(
                RenderRect(Rect(hx + 1.0, hy + 3.0, size - 2.0, 1.0), theme.primary_foreground)
            )
            objects.append(
                RenderRect(Rect(hx + 3.0, hy + 1.0, 1.0, size - 2.0), theme.primary_foreground)
            )

        if self.edges.right:
            objects.append(
                RenderRect(
                    Rect(self.width - size, (self.height - size) / 2.0, size, size),
                    handle_color,
                )
            )

        if self.edges.bottom:
            objects.append(
                RenderRect(
                    Rect((self.width - size) / 2.0, self.height - size, size, size),
                    handle_color,
                )
            )

        return LeafNode(RenderGroup(objects))

    def clone(self) -> Resizable:
        cloned = Resizable(self.child.clone())
        for name, value in self.__dict__.items():
            if name != "child":
                setattr(cloned, name, value)
        return cloned