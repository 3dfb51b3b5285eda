"""A grid container widget."""

from __future__ import annotations

from typing import Hashable

from oxideui.core import BuildContext, ContainerNode, Widget


class Grid(Widget):
    """Arranges children in columns and rows; builds to its children."""

    def __init__(self):
        self.column_count = 1
        self.row_count = 1
        self.column_spacing = 0.0
        self.row_spacing = 0.0
        self.children: list[Widget] = []
        self.key: Hashable | None = None

    def columns(self, columns: int) -> Grid:
        """Set the column count, at least one."""
        self.column_count = max(columns, 1)
        return self

    def rows(self, rows: int) -> Grid:
        """Set the row count, at least one."""
        self.row_count = max(rows, 1)
        return self

    def gap(self, gap: float) -> Grid:
        self.column_spacing = gap
        self.row_spacing = gap
        return self

    def column_gap(self, gap: float) -> Grid:
        self.column_spacing = gap
        return self

    def row_gap(self, gap: float) -> Grid:
        self.row_spacing = gap
        return self

    def with_children(self, children: list[Widget]) -> Grid:
        self.children = list(children)
        return self

    def add_child(self, child: Widget) -> Grid:
        self.children.append(child)
        return self

    def with_key(self, key: Hashable) -> Grid:
        self.key = key
        return self

    def build(self, ctx: BuildContext) -> ContainerNode:
        return ContainerNode([child.clone() for child in self.children])

    def clone(self) -> Grid:
        cloned = Grid()
        cloned.__dict__.update(self.__dict__)
        cloned.children = [child.clone() for child in self.children]
        return cloned