"""A single-line text label."""

from __future__ import annotations

from typing import Hashable

from oxideui.core import BuildContext, Color, LeafNode, Point, RenderText, TextStyle, Widget


class Label(Widget):
    """Themed text with optional bold, size and colour."""

    def __init__(self, text: str):
        self.text = text
        self.is_bold = False
        self.size: float | None = None
        self.color: Color | None = None
        self.tooltip: str | None = None
        self.key: Hashable | None = None

    def bold(self) -> Label:
        self.is_bold = True
        return self

    def with_size(self, size: float) -> Label:
        self.size = size
        return self

    def with_color(self, color: Color) -> Label:
        self.color = color
        return self

    def with_tooltip(self, tooltip: str) -> Label:
        self.tooltip = tooltip
        return self

    def with_key(self, key: Hashable) -> Label:
        self.key = key
        return self

    def build(self, ctx: BuildContext) -> LeafNode:
        theme = ctx.theme
        color = self.color or Color.from_hex(0xEEEEEE if theme.is_dark else 0x111111)
        font_size = 14.0 if self.size is None else self.size
        style = TextStyle(theme.font_sans, font_size, color, self.is_bold, False)
        return LeafNode(RenderText(self.text, style, Point.ZERO))