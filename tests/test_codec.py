"""
Tests for the text codec.

Checks the exact token streams for each shape-complete order, decoding of
those streams (including malformed ones), custom value formats, and the
rejection of the sorted orders.
"""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from orderedtreelib import (
    BinarySearchTree,
    CodecConfig,
    InvalidTreeOperation,
    SerializationError,
    TraversalOrder,
    TreeConfig,
    TreeException,
    ValueFormat,
)
from orderedtreelib.codec import deserialize_nodes, resolve_codec_order, serialize_nodes
from orderedtreelib.testing import TreeTestHelper


SAMPLE_STREAMS = {
    TraversalOrder.PRE: "10 5 3 null null 7 null null 15 null null ",
    TraversalOrder.REVERSE_PRE: "10 15 null null 5 7 null null 3 null null ",
    TraversalOrder.POST: "null null 3 null null 7 5 null null 15 10 ",
    TraversalOrder.REVERSE_POST: "null null 15 null null 7 null null 3 5 10 ",
}

SAMPLE_SHAPE = (10, (5, (3, None, None), (7, None, None)), (15, None, None))


class TestSerialize:
    """Encoding writes every node and every absent child."""

    @pytest.mark.parametrize("order,expected", list(SAMPLE_STREAMS.items()))
    def test_sample_streams(self, sample_tree, order, expected):
        assert sample_tree.serialize(order) == expected

    def test_default_order_is_pre(self, sample_tree):
        assert sample_tree.serialize() == SAMPLE_STREAMS[TraversalOrder.PRE]

    def test_configured_default_order(self):
        config = TreeConfig(default_order=TraversalOrder.POST)
        tree = BinarySearchTree.from_values([2, 1], config=config)
        assert tree.serialize() == "null null 1 null 2 "

    def test_empty_tree(self):
        for order in SAMPLE_STREAMS:
            assert BinarySearchTree().serialize(order) == "null "

    def test_single_node(self):
        assert BinarySearchTree(7).serialize("pre") == "7 null null "
        assert BinarySearchTree(7).serialize("post") == "null null 7 "

    def test_order_names(self, sample_tree):
        assert sample_tree.serialize("reverse-post-order") == SAMPLE_STREAMS[TraversalOrder.REVERSE_POST]

    @pytest.mark.parametrize("order", [TraversalOrder.IN, TraversalOrder.REVERSE_IN, "in_order"])
    def test_sorted_orders_are_rejected(self, sample_tree, order):
        with pytest.raises(InvalidTreeOperation):
            sample_tree.serialize(order)

    def test_unknown_order(self, sample_tree):
        with pytest.raises(InvalidTreeOperation):
            sample_tree.serialize("level")

    def test_serialize_does_not_mutate(self, sample_tree):
        sample_tree.serialize()
        assert TreeTestHelper(sample_tree).shape() == SAMPLE_SHAPE


class TestDeserialize:
    """Decoding rebuilds the exact shape that was written."""

    @pytest.mark.parametrize("order,stream", list(SAMPLE_STREAMS.items()))
    def test_sample_streams(self, order, stream):
        tree = BinarySearchTree()
        tree.deserialize(stream, order)
        assert TreeTestHelper(tree).shape() == SAMPLE_SHAPE

    @pytest.mark.parametrize("order", list(SAMPLE_STREAMS))
    def test_round_trip_wide_tree(self, wide_tree, order):
        restored = BinarySearchTree()
        restored.deserialize(wide_tree.serialize(order), order)
        assert restored == wide_tree

    def test_round_trip_keeps_unbalanced_shape(self):
        tree = BinarySearchTree.from_values([1, 4, 2, 3, 9, 8])
        restored = BinarySearchTree()
        restored.deserialize(tree.serialize("reverse_pre"), "reverse_pre")
        assert TreeTestHelper(restored).shape() == TreeTestHelper(tree).shape()

    def test_null_stream_is_empty_tree(self):
        for order in SAMPLE_STREAMS:
            tree = BinarySearchTree(1)
            tree.deserialize("null ", order)
            assert tree.is_empty()

    def test_blank_stream_is_empty_tree(self):
        for order in SAMPLE_STREAMS:
            tree = BinarySearchTree(1)
            tree.deserialize("   \n", order)
            assert tree.is_empty()

    def test_whitespace_is_flexible(self):
        tree = BinarySearchTree()
        tree.deserialize("10\t5 null\nnull   15 null null", "pre")
        assert list(tree.values("pre")) == [10, 5, 15]

    def test_token_sequence_input(self):
        tree = BinarySearchTree()
        tree.deserialize(["2", "1", "null", "null", "null"], "pre")
        assert TreeTestHelper(tree).shape() == (2, (1, None, None), None)

    def test_replaces_existing_contents(self, sample_tree):
        sample_tree.deserialize("1 null 2 null null ", "pre")
        assert list(sample_tree) == [1, 2]

    def test_decoded_tree_is_searchable(self):
        tree = BinarySearchTree()
        tree.deserialize(SAMPLE_STREAMS[TraversalOrder.POST], "post")
        assert tree.contains(7)
        tree.insert(6)
        assert list(tree) == [3, 5, 6, 7, 10, 15]

    @pytest.mark.parametrize("order", [TraversalOrder.IN, TraversalOrder.REVERSE_IN])
    def test_sorted_orders_are_rejected(self, order):
        tree = BinarySearchTree.from_values([1, 2])
        with pytest.raises(InvalidTreeOperation):
            tree.deserialize("1 2 ", order)
        # The tree is cleared before the order is checked
        assert tree.is_empty()


class TestMalformedStreams:
    """Malformed input raises SerializationError and leaves the tree empty."""

    @pytest.mark.parametrize("order,stream", [
        ("pre", "10 5 null"),                       # truncated
        ("pre", "10"),                              # root without children
        ("pre", "null null"),                       # leftover after empty tree
        ("pre", "1 null null 2 null null"),         # two trees
        ("reverse_pre", "10 null"),
        ("post", "3"),                              # value before its subtrees
        ("post", "null 3"),
        ("post", "null null 3 null null 7"),        # two trees left on the stack
        ("post", "null null"),
        ("reverse_post", "null null 1 null"),
        ("pre", "10 abc null null null"),           # unparsable value
        ("post", "null null 1.5"),
    ])
    def test_malformed(self, order, stream):
        tree = BinarySearchTree.from_values([42])
        with pytest.raises(SerializationError):
            tree.deserialize(stream, order)
        assert tree.is_empty()

    def test_serialization_error_is_tree_exception(self):
        with pytest.raises(TreeException):
            BinarySearchTree().deserialize("x", "pre")

    def test_parse_error_keeps_cause(self):
        with pytest.raises(SerializationError) as excinfo:
            BinarySearchTree().deserialize("abc null null", "pre")
        assert isinstance(excinfo.value.__cause__, ValueError)
        assert "abc" in str(excinfo.value)


class TestValueFormats:
    """Element types other than int round-trip through their own format."""

    def test_strings(self):
        config = TreeConfig.for_type(str)
        tree = BinarySearchTree.from_values(["m", "c", "x"], config=config)
        encoded = tree.serialize()
        assert encoded == "m c null null x null null "

        restored = BinarySearchTree(config=config)
        restored.deserialize(encoded)
        assert restored == tree

    def test_floats(self):
        config = TreeConfig.for_type(float)
        tree = BinarySearchTree.from_values([2.5, -1.25, 3.0], config=config)
        encoded = tree.serialize("post")
        assert encoded == "null null -1.25 null null 3.0 2.5 "

        restored = BinarySearchTree(config=config)
        restored.deserialize(encoded, "post")
        assert list(restored) == [-1.25, 2.5, 3.0]

    def test_complex(self):
        config = TreeConfig.for_type(complex)
        tree = BinarySearchTree.from_values([2 + 1j, 1 + 5j, 2 - 3j], config=config)
        assert list(tree) == [1 + 5j, 2 - 3j, 2 + 1j]

        encoded = tree.serialize()
        assert encoded == "2+1j 1+5j null 2-3j null null null "

        restored = BinarySearchTree(config=config)
        restored.deserialize(encoded)
        assert restored == tree

    def test_custom_null_token(self):
        config = TreeConfig(codec=CodecConfig(null_token="#", separator="\n"))
        tree = BinarySearchTree.from_values([2, 1], config=config)
        encoded = tree.serialize()
        assert encoded == "2\n1\n#\n#\n#\n"

        restored = BinarySearchTree(config=config)
        restored.deserialize(encoded)
        assert restored == tree

    def test_value_formatting_to_null_token(self):
        tree = BinarySearchTree.from_values(["a", "null"], config=TreeConfig.for_type(str))
        with pytest.raises(SerializationError):
            tree.serialize()

    def test_value_containing_whitespace(self):
        tree = BinarySearchTree.from_values(["two words"], config=TreeConfig.for_type(str))
        with pytest.raises(SerializationError):
            tree.serialize()

    def test_empty_string_value(self):
        tree = BinarySearchTree.from_values([""], config=TreeConfig.for_type(str))
        with pytest.raises(SerializationError):
            tree.serialize()

    def test_custom_value_format(self):
        fmt = ValueFormat(parse=lambda token: int(token, 16), format=lambda value: format(value, "x"))
        config = TreeConfig(codec=CodecConfig(value_format=fmt))
        tree = BinarySearchTree.from_values([255, 16], config=config)
        assert tree.serialize() == "ff 10 null null null "

    def test_lookup_parse_failure(self):
        names = {"a": 1, "b": 2}
        fmt = ValueFormat(parse=lambda token: names[token], format=str)
        tree = BinarySearchTree(config=TreeConfig(codec=CodecConfig(value_format=fmt)))

        tree.deserialize("a null null")
        assert list(tree) == [1]

        with pytest.raises(SerializationError) as excinfo:
            tree.deserialize("c null null")
        assert isinstance(excinfo.value.__cause__, KeyError)
        assert tree.is_empty()


class TestCodecFunctions:
    """Module-level codec helpers."""

    def test_resolve_codec_order(self):
        assert resolve_codec_order("post_order") is TraversalOrder.POST
        with pytest.raises(InvalidTreeOperation):
            resolve_codec_order("in")

    def test_serialize_nodes_on_none(self):
        assert serialize_nodes(None, "pre", CodecConfig()) == "null "

    def test_deserialize_nodes_returns_root(self):
        root = deserialize_nodes("5 null 6 null null", "pre", CodecConfig())
        assert root.value == 5
        assert root.left is None
        assert root.right.value == 6
