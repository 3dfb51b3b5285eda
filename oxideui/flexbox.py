"""A flexbox container widget and its layout options."""

from __future__ import annotations

from enum import Enum, auto
from typing import Hashable

from oxideui.core import BuildContext, ContainerNode, Widget


class FlexDirection(Enum):
    ROW = auto()
    ROW_REVERSE = auto()
    COLUMN = auto()
    COLUMN_REVERSE = auto()


class JustifyContent(Enum):
    FLEX_START = auto()
    FLEX_END = auto()
    CENTER = auto()
    SPACE_BETWEEN = auto()
    SPACE_AROUND = auto()
    SPACE_EVENLY = auto()


class AlignItems(Enum):
    FLEX_START = auto()
    FLEX_END = auto()
    CENTER = auto()
    STRETCH = auto()
    BASELINE = auto()


class FlexWrap(Enum):
    NO_WRAP = auto()
    WRAP = auto()
    WRAP_REVERSE = auto()


class Flexbox(Widget):
    """Lays its children out along a main axis; builds to its children."""

    def __init__(self):
        self.flex_direction = FlexDirection.ROW
        self.justify_content = JustifyContent.FLEX_START
        self.align_items = AlignItems.STRETCH
        self.flex_wrap = FlexWrap.NO_WRAP
        self.spacing = 0.0
        self.children: list[Widget] = []
        self.key: Hashable | None = None

    def direction(self, direction: FlexDirection) -> Flexbox:
        self.flex_direction = direction
        return self

    def justify(self, justify: JustifyContent) -> Flexbox:
        self.justify_content = justify
        return self

    def align(self, align: AlignItems) -> Flexbox:
        self.align_items = align
        return self

    def wrap(self, wrap: FlexWrap) -> Flexbox:
        self.flex_wrap = wrap
        return self

    def gap(self, gap: float) -> Flexbox:
        self.spacing = gap
        return self

    def with_children(self, children: list[Widget]) -> Flexbox:
        self.children = list(children)
        return self

    def add_child(self, child: Widget) -> Flexbox:
        self.children.append(child)
        return self

    def with_key(self, key: Hashable) -> Flexbox:
        self.key = key
        return self

    def build(self, ctx: BuildContext) -> ContainerNode:
        return ContainerNode([child.clone() for child in self.children])

    def clone(self) -> Flexbox:
        cloned = Flexbox()
        cloned.__dict__.update(self.__dict__)
        cloned.children = [child.clone() for child in self.children]
        return cloned