"""A page scaffold: app bar, sidebar, content, footer and drawer."""

from __future__ import annotations

from typing import Hashable

from oxideui.core import BuildContext, ContainerNode, Widget


class Scaffolding(Widget):
    """Holds the main regions of a page; builds to them in drawing order."""

    def __init__(self, content: Widget):
        self.app_bar: Widget | None = None
        self.sidebar: Widget | None = None
        self.content = content
        self.footer: Widget | None = None
        self.drawer: Widget | None = None
        self.key: Hashable | None = None

    def with_app_bar(self, app_bar: Widget) -> Scaffolding:
        self.app_bar = app_bar
        return self

    def with_sidebar(self, sidebar: Widget) -> Scaffolding:
        self.sidebar = sidebar
        return self

    def with_footer(self, footer: Widget) -> Scaffolding:
        self.footer = footer
        return self

    def with_drawer(self, drawer: Widget) -> Scaffolding:
        self.drawer = drawer
        return self

    def with_key(self, key: Hashable) -> Scaffolding:
        self.key = key
        return self

    def _regions(self) -> list[Widget]:
        regions = (self.app_bar, self.sidebar, self.content, self.footer, self.drawer)
        return [region for region in regions if region is not None]

    def build(self, ctx: BuildContext) -> ContainerNode:
        # The drawer comes last so that it is drawn on top.
        return ContainerNode([region.clone() for region in self._regions()])

    def clone(self) -> Scaffolding:
        cloned = Scaffolding(self.content.clone())
        cloned.app_bar = self.app_bar.clone() if self.app_bar else None
        cloned.sidebar = self.sidebar.clone() if self.sidebar else None
        cloned.footer = self.footer.clone() if self.footer else None
        cloned.drawer = self.drawer.clone() if self.drawer else None
        cloned.key = self.key
        return cloned