"""A video widget, drawn as a placeholder with a play icon."""

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


class Video(Widget):
    """A video source with playback options."""

    def __init__(self, source: str):
        self.source = source
        self.width: float | None = None
        self.height: float | None = None
        self.autoplay_enabled = False
        self.show_controls = True
        self.loops = False
        self.is_muted = False
        self.on_play: Callable[[], None] | None = None
        self.on_pause: Callable[[], None] | None = None
        self.on_ended: Callable[[], None] | None = None
        self.key: Hashable | None = None

    def with_size(self, width: float, height: float) -> Video:
        self.width = width
        self.height = height
        return self

    def autoplay(self, autoplay: bool) -> Video:
        self.autoplay_enabled = autoplay
        return self

    def controls(self, controls: bool) -> Video:
        self.show_controls = controls
        return self

    def loop_playback(self, loop_playback: bool) -> Video:
        self.loops = loop_playback
        return self

    def muted(self, muted: bool) -> Video:
        self.is_muted = muted
        return self

    def with_on_play(self, callback: Callable[[], None]) -> Video:
        self.on_play = callback
        return self

    def with_key(self, key: Hashable) -> Video:
        self.key = key
        return self

    def build(self, ctx: BuildContext) -> LeafNode:
        width = 640.0 if self.width is None else self.width
        height = 360.0 if self.height is None else self.height
        style = TextStyle(ctx.theme.font_sans, 48.0, Color.WHITE, False, False)
        objects = [
            RenderRect(Rect(0.0, 0.0, width, height), Color.from_hex(0x000000)),
            RenderText("▶", style, Point(width / 2.0 - 24.0, height / 2.0 + 16.0)),
        ]
        return LeafNode(RenderGroup(objects))