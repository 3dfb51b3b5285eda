"""A collapsible sidebar panel."""

from __future__ import annotations

from enum import Enum, auto
from typing import Callable, Hashable

from oxideui.core import (
    BuildContext,
    Constraints,
    LeafNode,
    Matrix,
    Point,
    Rect,
    RenderGroup,
    RenderRect,
    RenderText,
    RenderTransform,
    TextStyle,
    Widget,
)

_COLLAPSED_WIDTH = 60.0
_TOGGLE_SIZE = 32.0
_CHILD_TOP = 20.0
_TOGGLE_RESERVE = 80.0
_CHILD_PADDING = 20.0


class SidebarPosition(Enum):
    LEFT = auto()
    RIGHT = auto()


class Sidebar(Widget):
    """A side panel with a toggle button that hides its children when collapsed."""

    def __init__(self):
        self.sidebar_width = 240.0
        self.side = SidebarPosition.LEFT
        self.is_collapsed = False
        self.is_collapsible = True
        self.children: list[Widget] = []
        self.on_toggle: Callable[[bool], None] | None = None
        self.key: Hashable | None = None

    def width(self, width: float) -> Sidebar:
        self.sidebar_width = width
        return self

    def position(self, position: SidebarPosition) -> Sidebar:
        self.side = position
        return self

    def collapsed(self, collapsed: bool) -> Sidebar:
        self.is_collapsed = collapsed
        return self

    def collapsible(self, collapsible: bool) -> Sidebar:
        self.is_collapsible = collapsible
        return self

    def with_children(self, children: list[Widget]) -> Sidebar:
        self.children = list(children)
        return self

    def add_child(self, child: Widget) -> Sidebar:
        self.children.append(child)
        return self

    def with_on_toggle(self, callback: Callable[[bool], None]) -> Sidebar:
        self.on_toggle = callback
        return self

    def with_key(self, key: Hashable) -> Sidebar:
        self.key = key
        return self

    def _arrow(self) -> str:
        points_left = (self.side is SidebarPosition.LEFT) != self.is_collapsed
        return "◀" if points_left else "▶"

    def build(self, ctx: BuildContext) -> LeafNode:
        theme = ctx.theme
        max_height = ctx.constraints.max_height
        width = _COLLAPSED_WIDTH if self.is_collapsed else self.sidebar_width

        objects: list = [RenderRect(Rect(0.0, 0.0, width, max_height), theme.sidebar)]
        if self.side is SidebarPosition.LEFT:
            border = Rect(width - 1.0, 0.0, 1.0, max_height)
        else:
            border = Rect(0.0, 0.0, 1.0, max_height)
        objects.append(RenderRect(border, theme.sidebar_border))

        if self.is_collapsible:
            tx = (width - _TOGGLE_SIZE) / 2.0
            ty = max_height - _TOGGLE_SIZE - 16.0
            objects.append(
                RenderRect(Rect(tx, ty, _TOGGLE_SIZE, _TOGGLE_SIZE), theme.sidebar_accent)
            )
            style = TextStyle(
                theme.font_sans, 16.0, theme.sidebar_accent_foreground, True, False
            )
            objects.append(RenderText(self._arrow(), style, Point(tx + 8.0, ty + 8.0)))

        if not self.is_collapsed:
            child_height = max_height - _CHILD_TOP - _TOGGLE_RESERVE
            constraints = Constraints(0.0, width - _CHILD_PADDING, 0.0, child_height)
            for child in self.children:
                node = child.build(ctx.child_context(ctx.element_id, constraints))
                if isinstance(node, LeafNode):
                    objects.append(
                        RenderTransform(
                            Matrix.translate(_CHILD_PADDING / 2.0, _CHILD_TOP),
                            node.render_object,
                        )
                    )

        return LeafNode(RenderGroup(objects))

    def clone(self) -> Sidebar:
        cloned = Sidebar()
        cloned.__dict__.update(self.__dict__)
        cloned.children = [child.clone() for child in self.children]
        return cloned