"""Scrolling with momentum and snap points, clipping and virtual lists."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable

from oxideui.core import Point, Rect, Vector2


class ScrollPhysics(Enum):
    BOUNCING = auto()
    CLAMPING = auto()
    NEVER = auto()


_FRICTION = 0.95
_OVERSCROLL_RESISTANCE = 0.3
_MIN_VELOCITY = 0.1


class ScrollController:
    """Tracks a scroll offset, its limits and momentum."""

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self.offset = Vector2.ZERO
        self.max_offset = Vector2.ZERO
        self.physics = ScrollPhysics.BOUNCING
        self._velocity = Vector2.ZERO
        self._last_update = clock()
        self._is_scrolling = False
        self._momentum_enabled = True

    @property
    def is_scrolling(self) -> bool:
        return self._is_scrolling

    def scroll(self, delta: Vector2) -> None:
        """Move the offset by delta and record the resulting velocity."""
        self.offset = self._apply_physics(
            Vector2(self.offset.x + delta.x, self.offset.y + delta.y)
        )
        self._is_scrolling = True
        now = self._clock()
        dt = now - self._last_update
        if dt > 0 and self._momentum_enabled:
            self._velocity = Vector2(delta.x / dt, delta.y / dt)
        self._last_update = now

    def update_momentum(self, dt: float) -> None:
        """Advance momentum scrolling by dt seconds."""
        v = self._velocity
        if not self._momentum_enabled or (
            abs(v.x) < _MIN_VELOCITY and abs(v.y) < _MIN_VELOCITY
        ):
            self._velocity = Vector2.ZERO
            self._is_scrolling = False
            return
        self._velocity = Vector2(v.x * _FRICTION, v.y * _FRICTION)
        self.offset = self._apply_physics(
            Vector2(
                self.offset.x + self._velocity.x * dt,
                self.offset.y + self._velocity.y * dt,
            )
        )

    def _apply_physics(self, offset: Vector2) -> Vector2:
        if self.physics is ScrollPhysics.CLAMPING:
            return Vector2(
                min(max(offset.x, 0.0), self.max_offset.x),
                min(max(offset.y, 0.0), self.max_offset.y),
            )
        if self.physics is ScrollPhysics.BOUNCING:
            return Vector2(
                self._resist(offset.x, self.max_offset.x),
                self._resist(offset.y, self.max_offset.y),
            )
        return offset

    @staticmethod
    def _resist(value: float, limit: float) -> float:
        if value < 0.0:
            return value * _OVERSCROLL_RESISTANCE
        if value > limit:
            return limit + (value - limit) * _OVERSCROLL_RESISTANCE
        return value

    def animate_to(self, target: Vector2, duration: float) -> None:
        """Move to target; the duration is currently not animated."""
        self.offset = target

    def jump_to(self, position: Vector2) -> None:
        self.offset = self._apply_physics(position)
        self._velocity = Vector2.ZERO

    def set_content_size(self, content_size: Vector2, viewport_size: Vector2) -> None:
        self.max_offset = Vector2(
            max(content_size.x - viewport_size.x, 0.0),
            max(content_size.y - viewport_size.y, 0.0),
        )

    def stop(self) -> None:
        self._velocity = Vector2.ZERO
        self._is_scrolling = False


@dataclass(frozen=True)
class SnapPoint:
    offset: float
    strength: float = 1.0


class SnapAxis(Enum):
    HORIZONTAL = auto()
    VERTICAL = auto()
    BOTH = auto()


@dataclass
class ScrollSnapController:
    axis: SnapAxis
    snap_points: list = field(default_factory=list)
    snap_threshold: float = 50.0

    def find_snap_point(self, current_offset: Vector2) -> Vector2 | None:
        """Nearest snap point within the threshold, as a full offset."""
        if not self.snap_points:
            return None
        offset = current_offset.y if self.axis is SnapAxis.VERTICAL else current_offset.x
        nearest = None
        min_distance = math.inf
        for snap in self.snap_points:
            distance = abs(snap.offset - offset)
            if distance < min_distance and distance < self.snap_threshold:
                min_distance = distance
                nearest = snap
        if nearest is None:
            return None
        if self.axis is SnapAxis.HORIZONTAL:
            return Vector2(nearest.offset, current_offset.y)
        if self.axis is SnapAxis.VERTICAL:
            return Vector2(current_offset.x, nearest.offset)
        return Vector2(nearest.offset, nearest.offset)

    def add_snap_point(self, point: SnapPoint) -> None:
        if math.isnan(point.offset):
            raise ValueError("snap point offset is NaN")
        self.snap_points.append(point)
        self.snap_points.sort(key=lambda p: p.offset)


class ClipManager:
    """A stack of clip rectangles, each intersected with the one below."""

    def __init__(self):
        self._clip_stack: list[Rect] = []

    def push_clip(self, rect: Rect) -> None:
        if self._clip_stack:
            rect = self._intersect(self._clip_stack[-1], rect)
        self._clip_stack.append(rect)

    def pop_clip(self) -> None:
        if self._clip_stack:
            self._clip_stack.pop()

    def current_clip(self) -> Rect | None:
        return self._clip_stack[-1] if self._clip_stack else None

    def is_clipped(self, point: Point) -> bool:
        clip = self.current_clip()
        return clip is not None and not clip.contains(point.x, point.y)

    def is_rect_clipped(self, rect: Rect) -> bool:
        """True when rect lies completely outside the current clip."""
        clip = self.current_clip()
        if clip is None:
            return False
        return (
            rect.x + rect.width < clip.x
            or rect.x > clip.x + clip.width
            or rect.y + rect.height < clip.y
            or rect.y > clip.y + clip.height
        )

    @staticmethod
    def _intersect(a: Rect, b: Rect) -> Rect:
        x = max(a.x, b.x)
        y = max(a.y, b.y)
        width = min(a.x + a.width, b.x + b.width) - x
        height = min(a.y + a.height, b.y + b.height) - y
        return Rect(x, y, max(width, 0.0), max(height, 0.0))

    def clear(self) -> None:
        self._clip_stack.clear()


class VirtualScroller:
    """Works out which rows of a fixed-height list need rendering."""

    def __init__(self, item_height: float, viewport_height: float):
        self.item_height = item_height
        self.viewport_height = viewport_height
        self.total_items = 0
        self.buffer_size = 3

    def visible_range(self, scroll_offset: float) -> tuple[int, int]:
        start_index = max(0, math.floor(scroll_offset / self.item_height))
        visible_count = max(0, math.ceil(self.viewport_height / self.item_height))
        start = max(0, start_index - self.buffer_size)
        end = min(start_index + visible_count + self.buffer_size, self.total_items)
        return start, end

    def content_height(self) -> float:
        return self.item_height * self.total_items

    def item_position(self, index: int) -> float:
        return index * self.item_height

    def set_total_items(self, count: int) -> None:
        self.total_items = count