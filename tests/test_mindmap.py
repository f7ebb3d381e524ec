# tests/test_mindmap.py
from xml.etree import ElementTree

from mindcolumns.column_stack import ColumnStack
from mindcolumns.mindmap import MindmapNode

SAMPLE_MAP = """
<map version="1.0.1">
    <node TEXT="Projects">
        <icon BUILTIN="idea"/>
        <node TEXT="Garden">
            <attribute NAME="season" VALUE="spring"/>
            <node TEXT="Tomatoes"/>
            <node TEXT="Basil"/>
        </node>
        <edge STYLE="bezier"/>
        <node TEXT="House"/>
        <node/>
    </node>
</map>
"""


def _root() -> MindmapNode:
    return MindmapNode.root_of(ElementTree.fromstring(SAMPLE_MAP))


def test_root_of_map_element_returns_first_node():
    root = _root()

    assert root.get_title() == "Projects"
    assert root.parent is None


def test_root_of_accepts_element_tree_and_node():
    tree = ElementTree.ElementTree(ElementTree.fromstring(SAMPLE_MAP))
    assert MindmapNode.root_of(tree).get_title() == "Projects"

    node = ElementTree.fromstring('<node TEXT="Alone"/>')
    assert MindmapNode.root_of(node).get_title() == "Alone"


def test_root_of_returns_none_without_nodes():
    assert MindmapNode.root_of(ElementTree.fromstring("<map/>")) is None
    assert MindmapNode.root_of(ElementTree.fromstring("<html/>")) is None


def test_children_skip_decoration_elements():
    children = _root().children()

    assert [child.get_title() for child in children] == ["Garden", "House", ""]
    assert all(child.parent.get_title() == "Projects" for child in children)


def test_missing_text_gives_empty_title():
    untitled = _root().children()[-1]

    assert untitled.is_displayable_node()
    assert untitled.get_title() == ""
    assert not untitled.has_children()


def test_non_node_elements_are_not_displayable():
    icon = MindmapNode(ElementTree.fromstring('<icon BUILTIN="idea"/>'))

    assert not icon.is_displayable_node()


def test_breadcrumb_title_from_mindmap_nodes(make_column):
    root = _root()
    garden = root.children()[0]
    stack = ColumnStack()

    stack.append(make_column("root", parent=None))
    stack.append(make_column("projects", parent=root))
    stack.append(make_column("garden", parent=garden))
    assert stack.get_title_of_rightmost_parent() == "Garden"

    stack.remove_rightmost_column()
    assert stack.get_title_of_rightmost_parent() == "Projects"

    stack.append(make_column("map", parent=MindmapNode(ElementTree.fromstring("<map/>"))))
    assert stack.get_title_of_rightmost_parent() == ""
