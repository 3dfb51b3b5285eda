from oxideui.core import BuildContext, ContainerNode, LeafNode, Widget
from oxideui.scaffolding import Scaffolding


class _Probe(Widget):
    def __init__(self, name):
        self.name = name

    def build(self, ctx):
        return LeafNode(self.name)


def _names(node):
    return [c.name for c in node.children]


def test_content_only():
    node = Scaffolding(_Probe("content")).build(BuildContext())
    assert isinstance(node, ContainerNode)
    assert _names(node) == ["content"]


def test_full_order():
    scaffold = (
        Scaffolding(_Probe("content"))
        .with_drawer(_Probe("drawer"))
        .with_footer(_Probe("footer"))
        .with_sidebar(_Probe("sidebar"))
        .with_app_bar(_Probe("app_bar"))
    )
    node = scaffold.build(BuildContext())
    assert _names(node) == ["app_bar", "sidebar", "content", "footer", "drawer"]


def test_partial_regions_skip_missing():
    scaffold = Scaffolding(_Probe("content")).with_footer(_Probe("footer"))
    assert _names(scaffold.build(BuildContext())) == ["content", "footer"]


def test_built_children_are_copies():
    content = _Probe("content")
    node = Scaffolding(content).build(BuildContext())
    assert node.children[0] is not content


def test_clone_copies_regions_and_key():
    scaffold = Scaffolding(_Probe("content")).with_app_bar(_Probe("bar")).with_key("s")
    cloned = scaffold.clone()
    assert cloned.key == "s"
    assert cloned.content is not scaffold.content
    assert cloned.app_bar.name == "bar"
    assert cloned.sidebar is None