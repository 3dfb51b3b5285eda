"""A single-line text input."""

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

_DISABLED_BG = Color.from_hex(0xF3F4F6)
_BORDER_COLOR = Color.from_hex(0xE5E7EB)
_PLACEHOLDER_COLOR = Color.from_hex(0x9CA3AF)
_VALUE_COLOR = Color.from_hex(0x111827)


class TextInput(Widget):
    """A text field that shows its placeholder while empty."""

    def __init__(self, placeholder: str):
        self.placeholder = placeholder
        self.value = ""
        self.width: float | None = None
        self.height: float | None = 40.0
        self.is_disabled = False
        self.on_change: Callable[[str], None] | None = None
        self.tooltip: str | None = None
        self.key: Hashable | None = None

    def with_value(self, value: str) -> TextInput:
        self.value = value
        return self

    def with_size(self, width: float, height: float) -> TextInput:
        self.width = width
        self.height = height
        return self

    def with_on_change(self, callback: Callable[[str], None]) -> TextInput:
        self.on_change = callback
        return self

    def disabled(self, disabled: bool) -> TextInput:
        self.is_disabled = disabled
        return self

    def with_tooltip(self, text: str) -> TextInput:
        self.tooltip = text
        return self

    def build(self, ctx: BuildContext) -> LeafNode:
        width = 200.0 if self.width is None else self.width
        height = 40.0 if self.height is None else self.height
        bg_color = _DISABLED_BG if self.is_disabled else Color.WHITE

        text = self.value or self.placeholder
        text_color = _VALUE_COLOR if self.value else _PLACEHOLDER_COLOR

        objects = [
            RenderRect(Rect(0.0, 0.0, width, height), bg_color),
            RenderRect(Rect(0.0, 0.0, width, 1.0), _BORDER_COLOR),
            RenderRect(Rect(0.0, height - 1.0, width, 1.0), _BORDER_COLOR),
            RenderText(
                text,
                TextStyle("Inter", 14.0, text_color, False, False),
                Point(12.0, height / 2.0 + 5.0),
            ),
        ]
        return LeafNode(RenderGroup(objects))