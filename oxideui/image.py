"""An image widget, drawn as a placeholder frame."""

from __future__ import annotations

from enum import Enum, auto
from typing import Callable, Hashable

from oxideui.core import (
    BuildContext,
    Color,
    EventContext,
    EventResult,
    LeafNode,
    MouseButton,
    Point,
    PointerUp,
    Rect,
    RenderGroup,
    RenderRect,
    RenderText,
    TextStyle,
    Widget,
)


class ImageFit(Enum):
    FILL = auto()
    CONTAIN = auto()
    COVER = auto()
    SCALE_DOWN = auto()


_PLACEHOLDER_COLOR = Color.from_hex(0xE5E7EB)
_BORDER_COLOR = Color.from_hex(0xD1D5DB)
_CAPTION_COLOR = Color.from_hex(0x6B7280)


class Image(Widget):
    """An image at a path; fills the available space unless sized."""

    def __init__(self, path: str):
        self.path = path
        self.width: float | None = None
        self.height: float | None = None
        self.fit = ImageFit.CONTAIN
        self.alt_text = ""
        self.tooltip: str | None = None
        self.on_click: Callable[[], None] | None = None
        self.key: Hashable | None = None

    def with_size(self, width: float, height: float) -> Image:
        self.width = width
        self.height = height
        return self

    def with_fit(self, fit: ImageFit) -> Image:
        self.fit = fit
        return self

    def with_alt_text(self, alt_text: str) -> Image:
        self.alt_text = alt_text
        return self

    def with_tooltip(self, tooltip: str) -> Image:
        self.tooltip = tooltip
        return self

    def with_on_click(self, callback: Callable[[], None]) -> Image:
        self.on_click = callback
        return self

    def with_key(self, key: Hashable) -> Image:
        self.key = key
        return self

    def build(self, ctx: BuildContext) -> LeafNode:
        width = ctx.constraints.max_width if self.width is None else self.width
        height = ctx.constraints.max_height if self.height is None else self.height

        objects: list = [RenderRect(Rect(0.0, 0.0, width, height), _PLACEHOLDER_COLOR)]
        edges = (
            Rect(0.0, 0.0, width, 1.0),
            Rect(width - 1.0, 0.0, 1.0, height),
            Rect(0.0, height - 1.0, width, 1.0),
            Rect(0.0, 0.0, 1.0, height),
        )
        objects.extend(RenderRect(edge, _BORDER_COLOR) for edge in edges)

        style = TextStyle(ctx.theme.font_sans, 14.0, _CAPTION_COLOR, False, True)
        objects.append(
            RenderText("📷 Image", style, Point(width / 2.0 - 30.0, height / 2.0 + 5.0))
        )
        return LeafNode(RenderGroup(objects))

    def handle_event(self, event, context: EventContext) -> EventResult:
        match event:
            case PointerUp(button=MouseButton.LEFT) if context.is_at_target():
                if self.on_click is None:
                    return EventResult.UNHANDLED
                self.on_click()
                return EventResult.STOPPED
        return EventResult.UNHANDLED