"""Tooltips: a wrapper widget and the render object drawn when one shows."""

from __future__ import annotations

import copy
from enum import Enum, auto
from typing import Hashable

from oxideui.core import (
    BuildContext,
    Point,
    Rect,
    RenderGroup,
    RenderRect,
    RenderText,
    TextStyle,
    Theme,
    Widget,
)


class TooltipPlacement(Enum):
    TOP = auto()
    BOTTOM = auto()
    LEFT = auto()
    RIGHT = auto()


class Tooltip(Widget):
    """Wraps a child with hover text; builds as the child itself."""

    def __init__(self, text: str, child: Widget):
        self.text = text
        self.child = child
        self.placement = TooltipPlacement.TOP
        self.delay = 500
        self.max_width: float | None = 200.0
        self.key: Hashable | None = None

    def with_placement(self, placement: TooltipPlacement) -> Tooltip:
        self.placement = placement
        return self

    def with_delay(self, delay: int) -> Tooltip:
        self.delay = delay
        return self

    def with_max_width(self, max_width: float) -> Tooltip:
        self.max_width = max_width
        return self

    def with_key(self, key: Hashable) -> Tooltip:
        self.key = key
        return self

    def build(self, ctx: BuildContext):
        return self.child.build(ctx)

    def clone(self) -> Tooltip:
        cloned = copy.copy(self)
        cloned.child = self.child.clone()
        return cloned


_PADDING = 8.0
_FONT_SIZE = 12.0
_TEXT_HEIGHT = 20.0
_GAP = 8.0


def render_tooltip(
    text: str,
    position: Point,
    placement: TooltipPlacement,
    theme: Theme,
    max_width: float,
) -> RenderGroup:
    """Draw a tooltip box next to position on the given side."""
    text_width = min(len(text.encode("utf-8")) * 7.5, max_width - _PADDING * 2.0)
    width = text_width + _PADDING * 2.0
    height = _TEXT_HEIGHT + _PADDING * 2.0

    if placement is TooltipPlacement.TOP:
        x, y = position.x - width / 2.0, position.y - height - _GAP
    elif placement is TooltipPlacement.BOTTOM:
        x, y = position.x - width / 2.0, position.y + _GAP
    elif placement is TooltipPlacement.LEFT:
        x, y = position.x - width - _GAP, position.y - height / 2.0
    else:
        x, y = position.x + _GAP, position.y - height / 2.0

    edges = (
        Rect(x, y, width, 1.0),
        Rect(x + width - 1.0, y, 1.0, height),
        Rect(x, y + height - 1.0, width, 1.0),
        Rect(x, y, 1.0, height),
    )
    objects: list = [RenderRect(Rect(x, y, width, height), theme.popover)]
    objects.extend(RenderRect(edge, theme.border) for edge in edges)
    style = TextStyle(theme.font_sans, _FONT_SIZE, theme.popover_foreground, False, False)
    objects.append(RenderText(text, style, Point(x + _PADDING, y + _PADDING + 5.0)))
    return RenderGroup(objects)