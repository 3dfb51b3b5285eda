"""A scrollable region around a single child."""

from __future__ import annotations

from typing import Hashable

from oxideui.core import BuildContext, Constraints, Widget


class ScrollArea(Widget):
    """Gives its child a bounded viewport; scrolls vertically by default."""

    def __init__(self, child: Widget):
        self.child = child
        self.width: float | None = None
        self.height: float | None = None
        self.scrolls_x = False
        self.scrolls_y = True
        self.scrollbar_width = 8.0
        self.key: Hashable | None = None

    def with_size(self, width: float, height: float) -> ScrollArea:
        self.width = width
        self.height = height
        return self

    def scroll_x(self, scroll_x: bool) -> ScrollArea:
        self.scrolls_x = scroll_x
        return self

    def scroll_y(self, scroll_y: bool) -> ScrollArea:
        self.scrolls_y = scroll_y
        return self

    def scrollbar_size(self, size: float) -> ScrollArea:
        self.scrollbar_width = size
        return self

    def with_key(self, key: Hashable) -> ScrollArea:
        self.key = key
        return self

    def build(self, ctx: BuildContext):
        width = ctx.constraints.max_width if self.width is None else self.width
        height = ctx.constraints.max_height if self.height is None else self.height
        child_ctx = ctx.child_context(ctx.element_id, Constraints(0.0, width, 0.0, height))
        return self.child.build(child_ctx)

    def clone(self) -> ScrollArea:
        cloned = ScrollArea(self.child.clone())
        cloned.width = self.width
        cloned.height = self.height
        cloned.scrolls_x = self.scrolls_x
        cloned.scrolls_y = self.scrolls_y
        cloned.scrollbar_width = self.scrollbar_width
        cloned.key = self.key
        return cloned