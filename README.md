# oxideui

A small declarative widget toolkit. Each widget is a plain Python object that
you configure with chained builder methods. Calling `build(ctx)` on a widget
returns one of two node types:

- a `LeafNode` holding a render object (`RenderRect`, `RenderText`,
  `RenderGroup` or `RenderTransform`);
- a `ContainerNode` holding further widgets.

You can inspect these trees directly, and a drawing backend can paint them.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from oxideui.core import BuildContext, Color
from oxideui.button import Button
from oxideui.headings import h1
from oxideui.label import Label

clicks = []

button = (
    Button("Click Me!")
    .with_color(Color.from_hex(0x2196F3))
    .with_text_color(Color.WHITE)
    .with_size(120.0, 40.0)
    .with_on_click(lambda: clicks.append(1))
)

title = h1("Widget Showcase")
caption = Label("Options:").bold()

ctx = BuildContext()      # default Theme, constraints 800 x 600
node = button.build(ctx)  # LeafNode(RenderGroup([RenderRect, RenderText]))
```

## Core types (`oxideui.core`)

- Geometry: `Color` (`from_hex`, `with_alpha`), `Point`, `Vector2`, `Size`,
  `Rect` (`from_size`, `contains`) and `Matrix` (`translate`).
- Styling: `TextStyle`, `Alignment`, and `Theme`, a frozen set of palette
  colours together with `is_dark` and `font_sans`.
- Building: `Constraints`, and `BuildContext`, which carries the theme,
  constraints and element id and provides `child_context`.
- Events: `PointerDown`, `PointerUp`, `MouseButton`, `EventPhase`,
  `EventContext` (`is_at_target`) and `EventResult`.
- `Widget`: the abstract base class. Subclasses implement `build`. The
  `handle_event` method returns `EventResult.UNHANDLED` unless a widget
  overrides it, and `clone` makes a shallow copy.

## Widgets

Element widgets:

- `oxideui.button.Button`
- `oxideui.label.Label`
- `oxideui.headings.Heading`, with `h1` to `h6`. The level is clamped to 1–6.
- `oxideui.checkbox.Checkbox`
- `oxideui.image.Image` and `ImageFit`
- `oxideui.text_input.TextInput`
- `oxideui.textarea.Textarea`
- `oxideui.video.Video`
- `oxideui.table.Table`, with `TableColumn`, `TableRow`, `ColumnWidth`
  (`fixed`, `flex`, `auto`), `TableAlign` and `SortDirection`.
  `Table.column_widths(total_width)` returns the width of each column.
- `oxideui.tooltip.Tooltip`, with `TooltipPlacement` and
  `render_tooltip(text, position, placement, theme, max_width)`.

Layout widgets:

- `oxideui.flexbox.Flexbox`, with `FlexDirection`, `JustifyContent`,
  `AlignItems` and `FlexWrap`.
- `oxideui.grid.Grid`
- `oxideui.scaffolding.Scaffolding`. It builds its regions in this order:
  app bar, sidebar, content, footer, drawer.
- `oxideui.scroll_area.ScrollArea`. It builds its child with constraints set
  to its own size.
- `oxideui.resizable.Resizable`, with `ResizableEdges` (`all`, `none`). It
  draws its child and the handles on the right and bottom edges.
- `oxideui.sidebar.Sidebar`, with `SidebarPosition`. It draws a background,
  a border and a toggle button, and shows its children only while it is not
  collapsed.

## Events

Call `handle_event(event, context)` with a `PointerDown` or `PointerUp` and an
`EventContext`:

- `Button` prints a message on a left `PointerDown` and returns `HANDLED`. On
  a left `PointerUp` at the target it calls `on_click` and returns `STOPPED`.
- `Image` calls `on_click` on a left `PointerUp` at the target, if it has one.
- `Table` calls `on_sort(index, SortDirection.ASCENDING)` when a sortable
  header is clicked on a sortable table. It calls `on_row_click(index)` when a
  selectable row is clicked.

## Scrolling helpers (`oxideui.scrolling`)

- `ScrollController` tracks a scroll offset with momentum and friction. It
  supports bouncing, clamping or unconstrained physics (`ScrollPhysics`).
- `ScrollSnapController` finds the nearest `SnapPoint` within a threshold
  along a `SnapAxis`.
- `ClipManager` keeps a stack of clip rectangles. Each pushed rectangle is
  intersected with the one below it.
- `VirtualScroller` returns the range of visible items in a fixed-height list,
  including a buffer of extra items.

## What it does not do

- There is no window, event loop or drawing backend. Widgets produce
  render-object trees, and painting them on screen is left to you.
- `Flexbox` and `Grid` store their layout options but do not position their
  children. `build` returns the children in a `ContainerNode`.
- `ScrollArea` draws no scrollbars.
- `ScrollController.animate_to` jumps straight to the target.
- `Image` and `Video` draw placeholders and load no media.
- `Tooltip.build` builds only the wrapped child. Use `render_tooltip` to draw
  the tooltip box itself.