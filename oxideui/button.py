"""A clickable button."""

from __future__ import annotations

from typing import Callable, Hashable

from oxideui.core import (
    BuildContext,
    Color,
    EventContext,
    EventPhase,
    EventResult,
    LeafNode,
    MouseButton,
    Point,
    PointerDown,
    PointerUp,
    Rect,
    RenderGroup,
    RenderRect,
    RenderText,
    Size,
    TextStyle,
    Widget,
)


class Button(Widget):
    """A button that calls on_click when released over itself."""

    def __init__(self, label: str):
        self.label = label
        self.on_click: Callable[[], None] | None = None
        self.color = Color.from_hex(0x2196F3)
        self.text_color = Color.WHITE
        self.width: float | None = None
        self.height: float | None = None
        self.key: Hashable | None = None

    def with_on_click(self, callback: Callable[[], None]) -> Button:
        self.on_click = callback
        return self

    def with_color(self, color: Color) -> Button:
        self.color = color
        return self

    def with_text_color(self, color: Color) -> Button:
        self.text_color = color
        return self

    def with_size(self, width: float, height: float) -> Button:
        self.width = width
        self.height = height
        return self

    def with_key(self, key: Hashable) -> Button:
        self.key = key
        return self

    def build(self, ctx: BuildContext) -> LeafNode:
        width = 120.0 if self.width is None else self.width
        height = 40.0 if self.height is None else self.height
        rect = Rect.from_size(Size(width, height))
        background = RenderRect(rect, self.color)
        style = TextStyle("sans-serif", 14.0, self.text_color, False, False)
        # Rough centring: about 8px per byte of label.
        text_x = rect.width / 2.0 - len(self.label.encode("utf-8")) * 4.0
        text_y = rect.height / 2.0 + 5.0
        text = RenderText(self.label, style, Point(text_x, text_y))
        return LeafNode(RenderGroup([background, text]))

    def handle_event(self, event, context: EventContext) -> EventResult:
        match event:
            case PointerDown(button=MouseButton.LEFT):
                print(f"Button '{self.label}' pressed")
                return EventResult.HANDLED
            case PointerUp(button=MouseButton.LEFT) if context.phase is EventPhase.AT_TARGET:
                print(f"Button '{self.label}' clicked!")
                if self.on_click is not None:
                    self.on_click()
                return EventResult.STOPPED
        return EventResult.UNHANDLED