"""A data table with fixed, flexible and automatic column widths."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Hashable

from oxideui.core import (
    BuildContext,
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

_CHAR_WIDTH = 7.0
_CELL_PADDING = 8.0
_DEFAULT_EVENT_WIDTH = 800.0


class _WidthKind(Enum):
    FIXED = auto()
    FLEX = auto()
    AUTO = auto()


@dataclass(frozen=True)
class ColumnWidth:
    """How a column claims horizontal space."""

    kind: _WidthKind
    value: float = 0.0

    @classmethod
    def fixed(cls, width: float) -> ColumnWidth:
        return cls(_WidthKind.FIXED, width)

    @classmethod
    def flex(cls, factor: float) -> ColumnWidth:
        return cls(_WidthKind.FLEX, factor)

    @classmethod
    def auto(cls) -> ColumnWidth:
        return cls(_WidthKind.AUTO, 1.0)

    @property
    def is_fixed(self) -> bool:
        return self.kind is _WidthKind.FIXED

    @property
    def flex_factor(self) -> float:
        """Share of the flexible space; zero for fixed columns."""
        return 0.0 if self.is_fixed else self.value


class TableAlign(Enum):
    LEFT = auto()
    CENTER = auto()
    RIGHT = auto()


class SortDirection(Enum):
    ASCENDING = auto()
    DESCENDING = auto()
    NONE = auto()


def _text_width(text: str) -> float:
    return len(text.encode("utf-8")) * _CHAR_WIDTH


def _aligned_x(align: TableAlign, x: float, col_width: float, text: str) -> float:
    if align is TableAlign.CENTER:
        return x + (col_width - _text_width(text)) / 2.0
    if align is TableAlign.RIGHT:
        return x + col_width - _text_width(text) - _CELL_PADDING
    return x


class TableColumn:
    """A column header with its width rule and alignment."""

    def __init__(self, label: str):
        self.label = label
        self.width = ColumnWidth.auto()
        self.alignment = TableAlign.LEFT
        self.is_sortable = False

    def with_width(self, width: ColumnWidth) -> TableColumn:
        self.width = width
        return self

    def align(self, align: TableAlign) -> TableColumn:
        self.alignment = align
        return self

    def sortable(self, sortable: bool) -> TableColumn:
        self.is_sortable = sortable
        return self


class TableRow:
    """A row of cell texts."""

    def __init__(self, cells: list[str]):
        self.cells = list(cells)
        self.is_selectable = True

    def selectable(self, selectable: bool) -> TableRow:
        self.is_selectable = selectable
        return self


class Table(Widget):
    """Columns and rows drawn as a grid, with row clicks and header sorting."""

    def __init__(self, columns: list[TableColumn]):
        self.columns = list(columns)
        self.rows: list[TableRow] = []
        self.width: float | None = None
        self.is_striped = False
        self.is_hoverable = True
        self.is_bordered = True
        self.is_compact = False
        self.is_sortable = False
        self.on_row_click: Callable[[int], None] | None = None
        self.on_sort: Callable[[int, SortDirection], None] | None = None
        self.key: Hashable | None = None

    def with_rows(self, rows: list[TableRow]) -> Table:
        self.rows = list(rows)
        return self

    def add_row(self, row: TableRow) -> Table:
        self.rows.append(row)
        return self

    def striped(self, striped: bool) -> Table:
        self.is_striped = striped
        return self

    def hoverable(self, hoverable: bool) -> Table:
        self.is_hoverable = hoverable
        return self

    def bordered(self, bordered: bool) -> Table:
        self.is_bordered = bordered
        return self

    def compact(self, compact: bool) -> Table:
        self.is_compact = compact
        return self

    def sortable(self, sortable: bool) -> Table:
        self.is_sortable = sortable
        return self

    def with_width(self, width: float) -> Table:
        self.width = width
        return self

    def with_on_row_click(self, callback: Callable[[int], None]) -> Table:
        self.on_row_click = callback
        return self

    def with_on_sort(self, callback: Callable[[int, SortDirection], None]) -> Table:
        self.on_sort = callback
        return self

    def with_key(self, key: Hashable) -> Table:
        self.key = key
        return self

    @property
    def row_height(self) -> float:
        return 32.0 if self.is_compact else 48.0

    @property
    def header_height(self) -> float:
        return 40.0 if self.is_compact else 56.0

    def column_widths(self, total_width: float) -> list[float]:
        """Width of each column when the table is total_width wide."""
        fixed_total = sum(c.width.value for c in self.columns if c.width.is_fixed)
        flex_sum = sum(c.width.flex_factor for c in self.columns)
        available = max(total_width - fixed_total, 0.0)

        def width_of(column: TableColumn) -> float:
            if column.width.is_fixed:
                return column.width.value
            if flex_sum > 0.0:
                return column.width.flex_factor / flex_sum * available
            return available / len(self.columns)

        return [width_of(column) for column in self.columns]

    def build(self, ctx: BuildContext) -> LeafNode:
        theme = ctx.theme
        width = ctx.constraints.max_width if self.width is None else self.width
        row_height = self.row_height
        header_height = self.header_height
        widths = self.column_widths(width)
        total_height = header_height + len(self.rows) * row_height

        objects: list = [RenderRect(Rect(0.0, 0.0, width, total_height), theme.card)]
        if self.is_bordered:
            edges = (
                Rect(0.0, 0.0, width, 1.0),
                Rect(width - 1.0, 0.0, 1.0, total_height),
                Rect(0.0, total_height - 1.0, width, 1.0),
                Rect(0.0, 0.0, 1.0, total_height),
            )
            objects.extend(RenderRect(edge, theme.border) for edge in edges)

        objects.append(RenderRect(Rect(0.0, 0.0, width, header_height), theme.muted))
        objects.append(
            RenderRect(Rect(0.0, header_height - 1.0, width, 1.0), theme.border)
        )

        header_style = TextStyle(theme.font_sans, 14.0, theme.foreground, True, False)
        sort_style = TextStyle(theme.font_sans, 12.0, theme.muted_foreground, False, False)
        header_text_y = header_height / 2.0 + 5.0
        x = _CELL_PADDING
        last = len(self.columns) - 1
        for i, (column, col_width) in enumerate(zip(self.columns, widths)):
            text_x = _aligned_x(column.alignment, x, col_width, column.label)
            objects.append(
                RenderText(column.label, header_style, Point(max(text_x, x), header_text_y))
            )
            if self.is_sortable and column.is_sortable:
                objects.append(
                    RenderText("⇅", sort_style, Point(x + col_width - 20.0, header_text_y))
                )
            if self.is_bordered and i < last:
                objects.append(
                    RenderRect(Rect(x + col_width, 0.0, 1.0, total_height), theme.border)
                )
            x += col_width

        cell_style = TextStyle(theme.font_sans, 13.0, theme.foreground, False, False)
        stripe_color = theme.muted.with_alpha(50)
        y = header_height
        for row_idx, row in enumerate(self.rows):
            if self.is_striped and row_idx % 2 == 1:
                objects.append(RenderRect(Rect(0.0, y, width, row_height), stripe_color))
            if self.is_bordered:
                objects.append(
                    RenderRect(Rect(0.0, y + row_height - 1.0, width, 1.0), theme.border)
                )
            x = _CELL_PADDING
            for cell, column, col_width in zip(row.cells, self.columns, widths):
                text_x = _aligned_x(column.alignment, x, col_width, cell)
                objects.append(
                    RenderText(
                        cell,
                        cell_style,
                        Point(max(text_x, x), y + row_height / 2.0 + 5.0),
                    )
                )
                x += col_width
            y += row_height

        return LeafNode(RenderGroup(objects))

    def handle_event(self, event, context: EventContext) -> EventResult:
        match event:
            case PointerUp(position=position, button=MouseButton.LEFT) if context.is_at_target():
                return self._handle_click(position)
        return EventResult.UNHANDLED

    def _handle_click(self, position: Point) -> EventResult:
        header_height = self.header_height
        if position.y <= header_height and self.is_sortable:
            width = _DEFAULT_EVENT_WIDTH if self.width is None else self.width
            x = 0.0
            for i, col_width in enumerate(self.column_widths(width)):
                if x <= position.x < x + col_width and self.columns[i].is_sortable:
                    if self.on_sort is not None:
                        self.on_sort(i, SortDirection.ASCENDING)
                    return EventResult.STOPPED
                x += col_width
        elif position.y > header_height:
            row_index = int((position.y - header_height) / self.row_height)
            if (
                row_index < len(self.rows)
                and self.rows[row_index].is_selectable
                and self.on_row_click is not None
            ):
                self.on_row_click(row_index)
                return EventResult.STOPPED
        return EventResult.UNHANDLED