"""A multi-line text area."""

from __future__ import annotations

from typing import Callable, Hashable

from oxideui.core import (
    BuildContext,
    LeafNode,
    Point,
    Rect,
    RenderGroup,
    RenderRect,
    RenderText,
    TextStyle,
    Widget,
)

_LINE_HEIGHT = 24.0


def _lines(text: str) -> list[str]:
    """Split on newlines, dropping one trailing empty line and stray CRs."""
    parts = text.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


class Textarea(Widget):
    """A text box showing up to a fixed number of lines."""

    def __init__(self, placeholder: str):
        self.placeholder = placeholder
        self.value = ""
        self.row_count = 3
        self.width: float | None = None
        self.is_disabled = False
        self.on_change: Callable[[str], None] | None = None
        self.tooltip: str | None = None
        self.key: Hashable | None = None

    def with_value(self, value: str) -> Textarea:
        self.value = value
        return self

    def rows(self, rows: int) -> Textarea:
        """Set the visible line count, at least one."""
        self.row_count = max(rows, 1)
        return self

    def with_width(self, width: float) -> Textarea:
        self.width = width
        return self

    def disabled(self, disabled: bool) -> Textarea:
        self.is_disabled = disabled
        return self

    def with_on_change(self, callback: Callable[[str], None]) -> Textarea:
        self.on_change = callback
        return self

    def with_tooltip(self, tooltip: str) -> Textarea:
        self.tooltip = tooltip
        return self

    def with_key(self, key: Hashable) -> Textarea:
        self.key = key
        return self

    def build(self, ctx: BuildContext) -> LeafNode:
        theme = ctx.theme
        width = 400.0 if self.width is None else self.width
        height = self.row_count * _LINE_HEIGHT + 16.0

        if self.is_disabled:
            bg_color = theme.muted
            border_color = theme.border.with_alpha(128)
            text_color = theme.muted_foreground
        else:
            bg_color = theme.input
            border_color = theme.border
            text_color = theme.foreground

        objects: list = [RenderRect(Rect(0.0, 0.0, width, height), bg_color)]
        edges = (
            Rect(0.0, 0.0, width, 1.0),
            Rect(width - 1.0, 0.0, 1.0, height),
            Rect(0.0, height - 1.0, width, 1.0),
            Rect(0.0, 0.0, 1.0, height),
        )
        objects.extend(RenderRect(edge, border_color) for edge in edges)

        text = self.value or self.placeholder
        display_color = (
            theme.muted_foreground if not self.value and not self.is_disabled else text_color
        )
        style = TextStyle(theme.font_sans, 14.0, display_color, False, False)
        for i, line in enumerate(_lines(text)[: self.row_count]):
            objects.append(RenderText(line, style, Point(8.0, 12.0 + i * _LINE_HEIGHT)))

        return LeafNode(RenderGroup(objects))