from oxideui.button import Button
from oxideui.core import (
    BuildContext,
    Color,
    EventContext,
    EventPhase,
    EventResult,
    MouseButton,
    Point,
    PointerDown,
    PointerUp,
    Rect,
)


def test_button_creation():
    button = Button("Click me")
    assert button.label == "Click me"
    assert button.on_click is None


def test_button_with_callback():
    clicked = []
    button = Button("Test").with_on_click(lambda: clicked.append(True))
    button.on_click()
    assert clicked == [True]


def test_default_build_size_and_colors():
    node = Button("Go").build(BuildContext())
    bg, text = node.render_object.children
    assert bg.rect == Rect(0, 0, 120.0, 40.0)
    assert bg.color == Color.from_hex(0x2196F3)
    assert text.text == "Go"
    assert text.style.color == Color.WHITE
    assert text.style.font_family == "sans-serif"


def test_custom_size_and_colors():
    b = Button("X").with_size(200, 50).with_color(Color.BLACK).with_text_color(Color.WHITE)
    bg, text = b.build(BuildContext()).render_object.children
    assert bg.rect == Rect(0, 0, 200, 50)
    assert bg.color == Color.BLACK
    assert text.position.y > 0


def test_release_at_target_clicks():
    calls = []
    b = Button("A").with_on_click(lambda: calls.append(1))
    result = b.handle_event(PointerUp(Point(1, 1), MouseButton.LEFT), EventContext(EventPhase.AT_TARGET))
    assert result is EventResult.STOPPED
    assert calls == [1]


def test_release_while_bubbling_ignored():
    calls = []
    b = Button("A").with_on_click(lambda: calls.append(1))
    result = b.handle_event(PointerUp(Point(1, 1)), EventContext(EventPhase.BUBBLING))
    assert result is EventResult.UNHANDLED
    assert calls == []


def test_press_is_handled():
    b = Button("A")
    assert b.handle_event(PointerDown(Point(0, 0)), EventContext()) is EventResult.HANDLED
    assert b.handle_event(PointerDown(Point(0, 0), MouseButton.RIGHT), EventContext()) is EventResult.UNHANDLED


def test_key_and_clone():
    b = Button("A").with_key("k")
    c = b.clone()
    assert c.key == "k"
    assert c.label == "A"