"""Tests for angle_brackets.traverse module."""

import pytest

from angle_brackets import builders as b
from angle_brackets.nodes import Node
from angle_brackets.syntax import ElementNode, Program, TextNode
from angle_brackets.traverse import KEEP, REMOVE, Action, Replace, Visitor, traverse


class Recorder(Visitor):
    """Records enter/exit calls."""

    def __init__(self) -> None:
        self.events: list[tuple[str, str]] = []

    def enter(self, node: Node) -> Action:
        self.events.append(("enter", node.node_type))
        return KEEP

    def exit(self, node: Node) -> None:
        self.events.append(("exit", node.node_type))


class Shout(Visitor):
    """Uppercases text nodes."""

    def enter(self, node: Node) -> Action:
        match node:
            case TextNode(chars=chars) if chars != chars.upper():
                return Replace(b.text(chars.upper()))
            case _:
                return KEEP


class DropText(Visitor):
    """Removes every text node."""

    def enter(self, node: Node) -> Action:
        return REMOVE if isinstance(node, TextNode) else KEEP


class TestTraversalOrder:
    """Test the order nodes are visited in."""

    def test_depth_first(self) -> None:
        """Test that children are visited between a node's enter and exit."""
        tree = b.program([b.element("div", children=[b.text("hi")])])
        recorder = Recorder()
        traverse(tree, recorder)
        assert recorder.events == [
            ("enter", "Program"),
            ("enter", "ElementNode"),
            ("enter", "TextNode"),
            ("exit", "TextNode"),
            ("exit", "ElementNode"),
            ("exit", "Program"),
        ]

    def test_fields_visited_in_declaration_order(self) -> None:
        """Test that attributes are visited before children."""
        tree = b.element(
            "div",
            attributes=[b.attr("id", b.text("x"))],
            children=[b.text("y")],
        )
        recorder = Recorder()
        traverse(tree, recorder)
        entered = [t for kind, t in recorder.events if kind == "enter"]
        assert entered == ["ElementNode", "AttrNode", "TextNode", "TextNode"]


class TestKeep:
    """Test unchanged traversals."""

    def test_unchanged_tree_is_same_object(self) -> None:
        """Test that a traversal with no changes returns the original root."""
        tree = b.program([b.element("div", children=[b.text("HI")])])
        assert traverse(tree, Shout()) is tree


class TestReplace:
    """Test node replacement."""

    def test_replace_rebuilds_ancestors(self) -> None:
        """Test that a replaced child produces new parents and leaves the old tree."""
        tree = b.program([b.element("p", children=[b.text("hi")])])
        result = traverse(tree, Shout())

        assert result == b.program([b.element("p", children=[b.text("HI")])])
        assert tree.body[0].children[0] == b.text("hi")  # type: ignore[union-attr]

    def test_replacement_is_visited(self) -> None:
        """Test that the replacement node itself is visited."""

        class Wrap(Visitor):
            def __init__(self) -> None:
                self.seen: list[str] = []

            def enter(self, node: Node) -> Action:
                self.seen.append(node.node_type)
                if isinstance(node, TextNode):
                    return Replace(b.element("span", children=[b.mustache("x")]))
                return KEEP

        visitor = Wrap()
        result = traverse(b.program([b.text("hi")]), visitor)

        assert isinstance(result, Program)
        assert isinstance(result.body[0], ElementNode)
        assert "MustacheStatement" in visitor.seen

    def test_replace_with_equal_node_is_keep(self) -> None:
        """Test that replacing a node with an equal copy does not loop."""

        class Copy(Visitor):
            def enter(self, node: Node) -> Action:
                if isinstance(node, TextNode):
                    return Replace(b.text(node.chars))
                return KEEP

        tree = b.program([b.text("hi")])
        assert traverse(tree, Copy()) is tree


class TestRemove:
    """Test node removal."""

    def test_remove_from_sequence(self) -> None:
        """Test that removed nodes disappear from their sequence."""
        tree = b.program([b.text("a"), b.mustache("x"), b.text("b")])
        assert traverse(tree, DropText()) == b.program([b.mustache("x")])

    def test_remove_from_single_field_raises(self) -> None:
        """Test that a node held in a single-valued field cannot be removed."""
        tree = b.program([b.element("div", attributes=[b.attr("id", b.text("x"))])])
        with pytest.raises(ValueError, match="Cannot remove TextNode from AttrNode"):
            traverse(tree, DropText())

    def test_remove_root_raises(self) -> None:
        """Test that the traversal root cannot be removed."""
        with pytest.raises(ValueError, match="traversal root"):
            traverse(b.text("a"), DropText())
