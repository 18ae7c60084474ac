"""Text codec for OrderedTreeLib.

A tree is written as a flat stream of tokens: every present node contributes
its formatted value and every absent child contributes the null token, in the
order of the chosen traversal. Because absent children are recorded, the
stream fixes the tree's shape exactly, for the four orders where the node's
position relative to its subtrees is unambiguous:

    pre, reverse-pre    tree := null | value tree tree
    post, reverse-post  tree := null | tree tree value

In-order streams cannot be decoded (every tree with the same values yields
the same sorted sequence), so both sorted orders are rejected for encoding
and decoding alike.
"""

from typing import Any, Iterable, Iterator, List, Optional, Tuple, Union

from .config import CodecConfig, TraversalOrder
from .core.node import BinaryNode
from .core.search import new_node
from .core.traverser import create_traverser
from .exceptions import InvalidTreeOperation, SerializationError

# Slot visiting order for value-first encodings
_VALUE_FIRST_SLOTS = {
    TraversalOrder.PRE: ('left', 'right'),
    TraversalOrder.REVERSE_PRE: ('right', 'left'),
}

_END = object()


def resolve_codec_order(order: Union[TraversalOrder, str]) -> TraversalOrder:
    """Resolve an order and check that it can encode shape.

    Raises:
        InvalidTreeOperation: If the order is unknown or is a sorted order
    """
    try:
        order = TraversalOrder.parse(order)
    except ValueError as exc:
        raise InvalidTreeOperation(str(exc)) from exc

    if not order.is_shape_complete:
        raise InvalidTreeOperation(
            f"{order.label} cannot be used for serialization, "
            f"the tree shape is not recoverable from sorted values"
        )
    return order


def serialize_nodes(root: Optional[BinaryNode],
                    order: Union[TraversalOrder, str],
                    config: CodecConfig) -> str:
    """Encode a node graph as a token stream.

    Args:
        root: Root of the graph to encode (None for an empty tree)
        order: One of PRE, REVERSE_PRE, POST, REVERSE_POST
        config: Codec settings (null token, separator, value format)

    Returns:
        The encoded text; every token is followed by the separator

    Raises:
        InvalidTreeOperation: For an unknown or sorted order
        SerializationError: If a value's text form is not a usable token
    """
    order = resolve_codec_order(order)
    traverser = create_traverser(order, include_empty=True)

    parts: List[str] = []
    for node, _ in traverser.traverse(root):
        if node is None:
            parts.append(config.null_token)
        else:
            parts.append(_format_value(node.value, config))
        parts.append(config.separator)

    return "".join(parts)


def deserialize_nodes(data: Union[str, Iterable[str]],
                      order: Union[TraversalOrder, str],
                      config: CodecConfig) -> Optional[BinaryNode]:
    """Decode a token stream into a fresh node graph.

    Args:
        data: Encoded text, or an already split sequence of tokens
        order: The order the stream was written in
        config: Codec settings (null token, value format)

    Returns:
        Root of the rebuilt graph, or None for an empty tree (a lone null
        token or a blank stream)

    Raises:
        InvalidTreeOperation: For an unknown or sorted order
        SerializationError: For truncated streams, unparsable values,
            missing subtrees, or tokens left over after the tree is complete
    """
    order = resolve_codec_order(order)
    tokens = data.split() if isinstance(data, str) else [str(token) for token in data]

    if not tokens:
        return None

    if order in _VALUE_FIRST_SLOTS:
        first, second = _VALUE_FIRST_SLOTS[order]
        return _decode_value_first(tokens, first, second, config)
    return _decode_value_last(tokens, order, config)


def _decode_value_first(tokens: List[str],
                        first: str,
                        second: str,
                        config: CodecConfig) -> Optional[BinaryNode]:
    """Rebuild a pre-order (or mirrored pre-order) stream."""
    stream: Iterator[str] = iter(tokens)

    root_token = next(stream)
    if root_token == config.null_token:
        root = None
        pending: List[Tuple[BinaryNode, str]] = []
    else:
        root = _build_node(root_token, config)
        pending = [(root, second), (root, first)]

    # Each pending entry is a child slot still waiting for its token
    while pending:
        parent, side = pending.pop()
        token = next(stream, _END)
        if token is _END:
            raise SerializationError(
                f"token stream ended with {len(pending) + 1} subtree(s) still open"
            )
        if token == config.null_token:
            continue

        child = _build_node(token, config)
        setattr(parent, side, child)
        pending.append((child, second))
        pending.append((child, first))

    leftover = sum(1 for _ in stream)
    if leftover:
        raise SerializationError(f"{leftover} unconsumed token(s) after the tree")

    return root


def _decode_value_last(tokens: List[str],
                       order: TraversalOrder,
                       config: CodecConfig) -> Optional[BinaryNode]:
    """Rebuild a post-order (or mirrored post-order) stream with a stack."""
    stack: List[Optional[BinaryNode]] = []

    for token in tokens:
        if token == config.null_token:
            stack.append(None)
            continue

        if len(stack) < 2:
            raise SerializationError(
                f"value {token!r} is not preceded by two subtrees"
            )

        node = _build_node(token, config)
        if order is TraversalOrder.POST:
            node.right = stack.pop()
            node.left = stack.pop()
        else:
            node.left = stack.pop()
            node.right = stack.pop()
        stack.append(node)

    if len(stack) != 1:
        raise SerializationError(
            f"invalid {order.label} data, expected one tree but found {len(stack)}"
        )
    return stack[0]


def _build_node(token: str, config: CodecConfig) -> BinaryNode:
    try:
        value = config.value_format.parse(token)
    except Exception as exc:
        raise SerializationError(f"invalid node data {token!r}") from exc
    return new_node(value)


def _format_value(value: Any, config: CodecConfig) -> str:
    try:
        token = config.value_format.format(value)
    except Exception as exc:
        raise SerializationError(f"cannot format value {value!r}") from exc

    if not isinstance(token, str) or not token:
        raise SerializationError(f"value {value!r} formats to an empty token")
    if any(ch.isspace() for ch in token):
        raise SerializationError(f"value {value!r} formats to {token!r}, which contains whitespace")
    if token == config.null_token:
        raise SerializationError(f"value {value!r} formats to the null token {token!r}")
    return token
