"""A checkbox with an optional label."""

from __future__ import annotations

from typing import Callable, Hashable

from oxideui.core import (
    BuildContext,
    Color,
    LeafNode,
    Point,
    Rect,
    RenderGroup,
    RenderRect,
    RenderText,
    TextStyle,
    Widget,
)

_BOX_SIZE = 20.0
_CHECKED_COLOR = Color.from_hex(0xD87943)
_UNCHECKED_BORDER = Color.from_hex(0xE5E7EB)
_LABEL_COLOR = Color.from_hex(0x111827)


class Checkbox(Widget):
    """A square box that shows a check mark when checked."""

    def __init__(self):
        self.is_checked = False
        self.label: str | None = None
        self.is_disabled = False
        self.on_change: Callable[[bool], None] | None = None
        self.tooltip: str | None = None
        self.key: Hashable | None = None

    def checked(self, checked: bool) -> Checkbox:
        self.is_checked = checked
        return self

    def with_label(self, label: str) -> Checkbox:
        self.label = label
        return self

    def with_on_change(self, callback: Callable[[bool], None]) -> Checkbox:
        self.on_change = callback
        return self

    def disabled(self, disabled: bool) -> Checkbox:
        self.is_disabled = disabled
        return self

    def with_tooltip(self, text: str) -> Checkbox:
        self.tooltip = text
        return self

    def build(self, ctx: BuildContext) -> LeafNode:
        size = _BOX_SIZE
        bg_color = _CHECKED_COLOR if self.is_checked else Color.WHITE
        border_color = _CHECKED_COLOR if self.is_checked else _UNCHECKED_BORDER

        objects: list = [RenderRect(Rect(0.0, 0.0, size, size), bg_color)]
        edges = (
            Rect(0.0, 0.0, size, 1.0),
            Rect(size - 1.0, 0.0, 1.0, size),
            Rect(0.0, size - 1.0, size, 1.0),
            Rect(0.0, 0.0, 1.0, size),
        )
        objects.extend(RenderRect(edge, border_color) for edge in edges)

        if self.is_checked:
            objects.append(RenderRect(Rect(6.0, 9.0, 8.0, 2.0), Color.WHITE))
            objects.append(RenderRect(Rect(6.0, 9.0, 2.0, 6.0), Color.WHITE))

        if self.label is not None:
            style = TextStyle("Inter", 14.0, _LABEL_COLOR, False, False)
            objects.append(
                RenderText(self.label, style, Point(size + 8.0, size / 2.0 + 5.0))
            )

        return LeafNode(RenderGroup(objects))