from oxideui.core import (
    BuildContext,
    Color,
    ContainerNode,
    LeafNode,
    Matrix,
    Rect,
    RenderGroup,
    RenderRect,
    RenderText,
    RenderTransform,
    Widget,
)
from oxideui.sidebar import Sidebar, SidebarPosition


class _Probe(Widget):
    def __init__(self):
        self.seen = []

    def build(self, ctx):
        self.seen.append(ctx)
        return LeafNode(RenderRect(Rect(0.0, 0.0, 1.0, 1.0), Color.BLACK))


class _Branch(Widget):
    def build(self, ctx):
        return ContainerNode([])


def _objects(sidebar, ctx=None):
    node = sidebar.build(ctx or BuildContext())
    assert isinstance(node, LeafNode)
    assert isinstance(node.render_object, RenderGroup)
    return node.render_object.children


def test_defaults():
    s = Sidebar()
    assert s.sidebar_width == 240.0
    assert s.side is SidebarPosition.LEFT
    assert s.is_collapsed is False
    assert s.is_collapsible is True
    assert s.children == []
    assert s.on_toggle is None


def test_background_and_left_border():
    ctx = BuildContext()
    objs = _objects(Sidebar(), ctx)
    assert len(objs) == 4
    bg, border = objs[0], objs[1]
    assert bg == RenderRect(Rect(0.0, 0.0, 240.0, ctx.constraints.max_height), ctx.theme.sidebar)
    assert border.rect.x + border.rect.width == 240.0
    assert border.color == ctx.theme.sidebar_border


def test_right_border_at_origin():
    objs = _objects(Sidebar().position(SidebarPosition.RIGHT))
    assert objs[1].rect.x == 0.0


def test_collapsed_width():
    objs = _objects(Sidebar().collapsed(True))
    assert objs[0].rect.width == 60.0


def test_arrow_icons():
    def arrow(position, collapsed):
        objs = _objects(Sidebar().position(position).collapsed(collapsed))
        texts = [o for o in objs if isinstance(o, RenderText)]
        return texts[0].text

    assert arrow(SidebarPosition.LEFT, False) == "◀"
    assert arrow(SidebarPosition.LEFT, True) == "▶"
    assert arrow(SidebarPosition.RIGHT, False) == "▶"
    assert arrow(SidebarPosition.RIGHT, True) == "◀"


def test_not_collapsible_has_no_toggle():
    objs = _objects(Sidebar().collapsible(False))
    assert len(objs) == 2
    assert not any(isinstance(o, RenderText) for o in objs)


def test_toggle_centered_horizontally():
    ctx = BuildContext()
    toggle = _objects(Sidebar().width(300.0), ctx)[2]
    assert toggle.rect.x * 2 + toggle.rect.width == 300.0
    assert toggle.color == ctx.theme.sidebar_accent


def test_children_are_translated():
    probe = _Probe()
    objs = _objects(Sidebar().add_child(probe))
    transform = objs[-1]
    assert isinstance(transform, RenderTransform)
    assert transform.matrix == Matrix.translate(10.0, 20.0)
    assert transform.child == RenderRect(Rect(0.0, 0.0, 1.0, 1.0), Color.BLACK)


def test_child_constraints_leave_padding():
    probe = _Probe()
    _objects(Sidebar().width(300.0).with_children([probe]), BuildContext(element_id=3))
    seen = probe.seen[0]
    assert seen.constraints.max_width == 280.0
    assert seen.element_id == 3


def test_collapsed_hides_children():
    probe = _Probe()
    objs = _objects(Sidebar().add_child(probe).collapsed(True))
    assert probe.seen == []
    assert not any(isinstance(o, RenderTransform) for o in objs)


def test_container_children_are_skipped():
    objs = _objects(Sidebar().add_child(_Branch()))
    assert len(objs) == 4


def test_on_toggle_and_clone():
    toggled = []
    s = Sidebar().with_on_toggle(toggled.append).add_child(_Probe()).with_key("side")
    copy_ = s.clone()
    copy_.on_toggle(True)
    assert toggled == [True]
    assert copy_.key == "side"
    assert copy_.children[0] is not s.children[0]
    copy_.add_child(_Probe())
    assert len(s.children) == 1