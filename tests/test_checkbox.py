from oxideui.checkbox import Checkbox
from oxideui.core import BuildContext, Color, Rect, RenderRect, RenderText


def _children(widget):
    return widget.build(BuildContext()).render_object.children


def test_defaults():
    box = Checkbox()
    assert box.is_checked is False
    assert box.label is None
    assert box.is_disabled is False
    assert box.on_change is None


def test_builders_chain_and_set_fields():
    box = Checkbox().checked(True).with_label("Option 1").disabled(True).with_tooltip("tip")
    assert box.is_checked is True
    assert box.label == "Option 1"
    assert box.is_disabled is True
    assert box.tooltip == "tip"


def test_unchecked_background_is_white():
    children = _children(Checkbox())
    assert isinstance(children[0], RenderRect)
    assert children[0].color == Color.WHITE
    assert all(isinstance(c, RenderRect) for c in children)
    assert children[1].color == Color.from_hex(0xE5E7EB)


def test_checked_uses_accent_and_adds_checkmark():
    unchecked = _children(Checkbox())
    checked = _children(Checkbox().checked(True))
    assert checked[0].color == Color.from_hex(0xD87943)
    assert all(c.color == Color.from_hex(0xD87943) for c in checked[1:len(unchecked)])
    extra = checked[len(unchecked):]
    assert extra
    assert all(c.color == Color.WHITE for c in extra)


def test_label_is_rendered_last():
    children = _children(Checkbox().with_label("Option 2"))
    last = children[-1]
    assert isinstance(last, RenderText)
    assert last.text == "Option 2"
    assert last.style.font_family == "Inter"
    assert last.style.color == Color.from_hex(0x111827)


def test_no_text_without_label():
    children = _children(Checkbox().checked(True))
    assert len(children) == 7
    assert [isinstance(c, RenderText) for c in children] == [False] * 7
    assert children[-1].rect == Rect(6.0, 9.0, 2.0, 6.0)


def test_on_change_callback_is_kept():
    seen = []
    box = Checkbox().with_on_change(seen.append)
    box.on_change(True)
    assert seen == [True]