import pytest

from oxideui.core import BuildContext, ContainerNode, LeafNode, Widget
from oxideui.grid import Grid


class _Probe(Widget):
    def __init__(self, name):
        self.name = name

    def build(self, ctx):
        return LeafNode(self.name)


def test_defaults():
    grid = Grid()
    assert grid.column_count == 1
    assert grid.row_count == 1
    assert grid.column_spacing == 0.0
    assert grid.row_spacing == 0.0
    assert grid.children == []


@pytest.mark.parametrize("value", [0, -5])
def test_counts_clamped_to_one(value):
    grid = Grid().columns(value).rows(value)
    assert grid.column_count == 1
    assert grid.row_count == 1


def test_counts_set():
    grid = Grid().columns(3).rows(2)
    assert (grid.column_count, grid.row_count) == (3, 2)


def test_gap_sets_both_then_individual_override():
    grid = Grid().gap(12.0)
    assert grid.column_spacing == grid.row_spacing == 12.0
    grid.column_gap(3.0).row_gap(7.0)
    assert (grid.column_spacing, grid.row_spacing) == (3.0, 7.0)


def test_build_lists_children_in_order():
    grid = Grid().with_children([_Probe("1"), _Probe("2")]).add_child(_Probe("3"))
    node = grid.build(BuildContext())
    assert isinstance(node, ContainerNode)
    assert [c.name for c in node.children] == ["1", "2", "3"]
    assert node.children[0] is not grid.children[0]


def test_clone_is_independent():
    grid = Grid().columns(3).with_children([_Probe("a")]).with_key("g")
    cloned = grid.clone()
    assert cloned.column_count == 3
    assert cloned.key == "g"
    cloned.add_child(_Probe("b"))
    assert len(grid.children) == 1