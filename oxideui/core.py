"""Geometry, render primitives, build context, events and the widget base class."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from enum import Enum, auto
from typing import Hashable, Union


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    @classmethod
    def from_hex(cls, hex_value: int) -> Color:
        """Build an opaque colour from a 0xRRGGBB value."""
        return cls((hex_value >> 16) & 0xFF, (hex_value >> 8) & 0xFF, hex_value & 0xFF, 255)

    def with_alpha(self, alpha: int) -> Color:
        """Return the same colour with another alpha channel."""
        if not 0 <= alpha <= 255:
            raise ValueError(f"alpha out of range: {alpha}")
        return replace(self, a=alpha)


Color.WHITE = Color(255, 255, 255, 255)
Color.BLACK = Color(0, 0, 0, 255)
Color.TRANSPARENT = Color(0, 0, 0, 0)


@dataclass(frozen=True)
class Point:
    x: float
    y: float


Point.ZERO = Point(0.0, 0.0)


@dataclass(frozen=True)
class Vector2:
    x: float
    y: float


Vector2.ZERO = Vector2(0.0, 0.0)


@dataclass(frozen=True)
class Size:
    width: float
    height: float


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float

    @staticmethod
    def from_size(size: Size) -> Rect:
        """A rectangle at the origin with the given size."""
        return Rect(0.0, 0.0, size.width, size.height)

    def contains(self, x: float, y: float) -> bool:
        return self.x <= x <= self.x + self.width and self.y <= y <= self.y + self.height


@dataclass(frozen=True)
class Matrix:
    """A 2D affine transform (a, b, c, d, tx, ty)."""

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    tx: float = 0.0
    ty: float = 0.0

    @staticmethod
    def translate(x: float, y: float) -> Matrix:
        return Matrix(tx=x, ty=y)


@dataclass(frozen=True)
class TextStyle:
    font_family: str
    font_size: float
    color: Color
    bold: bool = False
    italic: bool = False


@dataclass
class RenderRect:
    rect: Rect
    color: Color


@dataclass
class RenderText:
    text: str
    style: TextStyle
    position: Point


@dataclass
class RenderGroup:
    children: list = field(default_factory=list)


@dataclass
class RenderTransform:
    matrix: Matrix
    child: object


RenderObject = Union[RenderRect, RenderText, RenderGroup, RenderTransform]


@dataclass
class LeafNode:
    """A built widget that resolved to a single render object."""

    render_object: object


@dataclass
class ContainerNode:
    """A built widget that resolved to further widgets."""

    children: list = field(default_factory=list)


class Alignment(Enum):
    TOP_LEFT = auto()
    TOP_CENTER = auto()
    TOP_RIGHT = auto()
    CENTER_LEFT = auto()
    CENTER = auto()
    CENTER_RIGHT = auto()
    BOTTOM_LEFT = auto()
    BOTTOM_CENTER = auto()
    BOTTOM_RIGHT = auto()


@dataclass(frozen=True)
class Theme:
    """Colour palette and typography shared by widgets."""

    background: Color = Color.from_hex(0xFFFFFF)
    foreground: Color = Color.from_hex(0x111827)
    primary: Color = Color.from_hex(0xD87943)
    primary_foreground: Color = Color.from_hex(0xFFFFFF)
    secondary: Color = Color.from_hex(0xF3F4F6)
    secondary_foreground: Color = Color.from_hex(0x111827)
    accent: Color = Color.from_hex(0x527575)
    accent_foreground: Color = Color.from_hex(0xFFFFFF)
    muted: Color = Color.from_hex(0xF3F4F6)
    muted_foreground: Color = Color.from_hex(0x6B7280)
    border: Color = Color.from_hex(0xE5E7EB)
    input: Color = Color.from_hex(0xFFFFFF)
    card: Color = Color.from_hex(0xFFFFFF)
    popover: Color = Color.from_hex(0xFFFFFF)
    popover_foreground: Color = Color.from_hex(0x111827)
    sidebar: Color = Color.from_hex(0xF9FAFB)
    sidebar_border: Color = Color.from_hex(0xE5E7EB)
    sidebar_accent: Color = Color.from_hex(0xF3F4F6)
    sidebar_accent_foreground: Color = Color.from_hex(0x111827)
    chart_1: Color = Color.from_hex(0xD87943)
    chart_2: Color = Color.from_hex(0x527575)
    chart_3: Color = Color.from_hex(0x879A77)
    chart_4: Color = Color.from_hex(0xC9A66B)
    chart_5: Color = Color.from_hex(0x6E7FA3)
    is_dark: bool = False
    font_sans: str = "Inter"


@dataclass(frozen=True)
class Constraints:
    min_width: float
    max_width: float
    min_height: float
    max_height: float


@dataclass(frozen=True)
class BuildContext:
    """What a widget sees while it builds: theme, constraints and identity."""

    theme: Theme = field(default_factory=Theme)
    constraints: Constraints = Constraints(0.0, 800.0, 0.0, 600.0)
    element_id: int = 0

    def child_context(self, element_id: int, constraints: Constraints) -> BuildContext:
        return BuildContext(theme=self.theme, constraints=constraints, element_id=element_id)


class MouseButton(Enum):
    LEFT = auto()
    RIGHT = auto()
    MIDDLE = auto()


class EventPhase(Enum):
    CAPTURING = auto()
    AT_TARGET = auto()
    BUBBLING = auto()


class EventResult(Enum):
    HANDLED = auto()
    UNHANDLED = auto()
    STOPPED = auto()


@dataclass(frozen=True)
class PointerDown:
    position: Point
    button: MouseButton = MouseButton.LEFT


@dataclass(frozen=True)
class PointerUp:
    position: Point
    button: MouseButton = MouseButton.LEFT


@dataclass
class EventContext:
    phase: EventPhase = EventPhase.AT_TARGET

    def is_at_target(self) -> bool:
        return self.phase is EventPhase.AT_TARGET


class Widget(ABC):
    """Base class of everything that can be built into a node tree."""

    key: Hashable | None = None

    @abstractmethod
    def build(self, ctx: BuildContext):
        """Build this widget into a LeafNode or ContainerNode."""

    def handle_event(self, event, context: EventContext) -> EventResult:
        return EventResult.UNHANDLED

    def clone(self) -> Widget:
        return copy.copy(self)