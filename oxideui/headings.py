"""Headings of levels 1 to 6."""

from __future__ import annotations

from typing import Hashable

from oxideui.core import (
    Alignment,
    BuildContext,
    Color,
    LeafNode,
    Point,
    RenderText,
    TextStyle,
    Widget,
)

_FONT_SIZES = (48.0, 36.0, 30.0, 24.0, 20.0, 18.0)
_BOLD = (True, True, True, False, False, False)


class Heading(Widget):
    """A heading whose size and weight follow its level."""

    def __init__(self, text: str):
        self.text = text
        self.heading_level = 1
        self.color: Color | None = None
        self.alignment = Alignment.TOP_LEFT
        self.tooltip: str | None = None
        self.key: Hashable | None = None

    def level(self, level: int) -> Heading:
        """Set the level, clamped to 1..6."""
        self.heading_level = min(max(level, 1), 6)
        return self

    def with_color(self, color: Color) -> Heading:
        self.color = color
        return self

    def align(self, align: Alignment) -> Heading:
        self.alignment = align
        return self

    def with_tooltip(self, tooltip: str) -> Heading:
        self.tooltip = tooltip
        return self

    def with_key(self, key: Hashable) -> Heading:
        self.key = key
        return self

    def build(self, ctx: BuildContext) -> LeafNode:
        theme = ctx.theme
        idx = self.heading_level - 1
        font_size = _FONT_SIZES[idx] if 0 <= idx < len(_FONT_SIZES) else 16.0
        bold = _BOLD[idx] if 0 <= idx < len(_BOLD) else False
        color = self.color or Color.from_hex(0xFFFFFF if theme.is_dark else 0x000000)
        style = TextStyle(theme.font_sans, font_size, color, bold, False)
        return LeafNode(RenderText(self.text, style, Point.ZERO))


def h1(text: str) -> Heading:
    return Heading(text).level(1)


def h2(text: str) -> Heading:
    return Heading(text).level(2)


def h3(text: str) -> Heading:
    return Heading(text).level(3)


def h4(text: str) -> Heading:
    return Heading(text).level(4)


def h5(text: str) -> Heading:
    return Heading(text).level(5)


def h6(text: str) -> Heading:
    return Heading(text).level(6)