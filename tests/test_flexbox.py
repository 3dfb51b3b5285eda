from oxideui.core import BuildContext, ContainerNode, LeafNode, Widget
from oxideui.flexbox import AlignItems, FlexDirection, Flexbox, FlexWrap, JustifyContent


class _Probe(Widget):
    def __init__(self, name):
        self.name = name

    def build(self, ctx):
        return LeafNode(self.name)


def test_defaults():
    box = Flexbox()
    assert box.flex_direction is FlexDirection.ROW
    assert box.justify_content is JustifyContent.FLEX_START
    assert box.align_items is AlignItems.STRETCH
    assert box.flex_wrap is FlexWrap.NO_WRAP
    assert box.spacing == 0.0
    assert box.children == []
    assert box.key is None


def test_builders_set_fields():
    box = (
        Flexbox()
        .direction(FlexDirection.COLUMN)
        .justify(JustifyContent.SPACE_BETWEEN)
        .align(AlignItems.CENTER)
        .wrap(FlexWrap.WRAP)
        .gap(12.0)
        .with_key("k")
    )
    assert box.flex_direction is FlexDirection.COLUMN
    assert box.justify_content is JustifyContent.SPACE_BETWEEN
    assert box.align_items is AlignItems.CENTER
    assert box.flex_wrap is FlexWrap.WRAP
    assert box.spacing == 12.0
    assert box.key == "k"


def test_add_child_appends_in_order():
    a, b = _Probe("a"), _Probe("b")
    box = Flexbox().with_children([a]).add_child(b)
    assert [c.name for c in box.children] == ["a", "b"]


def test_build_returns_container_of_children_copies():
    a, b = _Probe("a"), _Probe("b")
    box = Flexbox().with_children([a, b])
    node = box.build(BuildContext())
    assert isinstance(node, ContainerNode)
    assert [c.name for c in node.children] == ["a", "b"]
    assert all(built is not orig for built, orig in zip(node.children, box.children))


def test_clone_copies_children():
    box = Flexbox().gap(4.0).with_children([_Probe("x")])
    cloned = box.clone()
    assert cloned.spacing == box.spacing
    assert cloned.children[0] is not box.children[0]
    cloned.add_child(_Probe("y"))
    assert len(box.children) == 1