#!/usr/bin/env python3
"""
Basic tour of OrderedTreeLib.

This example demonstrates:
- Building a tree and walking it in several orders
- map / where / merge
- Subtree extraction and containment
- Serialization round-trip
- Path lookups
- A tree of complex numbers ordered by (real, imag)
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from orderedtreelib import (
    BinarySearchTree,
    TreeConfig,
    TraversalOrder,
    TreeException,
    CollectErrorsPolicy,
)


def show(title: str, tree: BinarySearchTree, order: TraversalOrder = TraversalOrder.IN) -> None:
    print(f"{title}: {' '.join(str(v) for v in tree.values(order))}")


def main() -> int:
    tree = BinarySearchTree.from_values([10, 5, 15, 3, 7])

    print("== Traversal ==")
    show("In-order", tree)
    show("Pre-order", tree, TraversalOrder.PRE)
    show("Post-order", tree, TraversalOrder.POST)

    print("\n== Functional operations ==")
    show("Map (x2)", tree.map(lambda v: v * 2))
    show("Where (>5)", tree.where(lambda v: v > 5))
    another = BinarySearchTree.from_values([8, 12, 5])
    policy = CollectErrorsPolicy()
    show("Merge", tree.merge(another, policy=policy))
    print(f"Skipped during merge: {policy.skipped_values}")

    print("\n== Subtrees ==")
    subtree = tree.extract_subtree(5)
    show("Subtree at 5", subtree)
    print(f"Tree contains subtree: {'Yes' if tree.contains_subtree(subtree) else 'No'}")

    print("\n== Serialization ==")
    encoded = tree.serialize(TraversalOrder.PRE)
    print(f"Serialized (pre-order): {encoded}")
    restored = BinarySearchTree()
    restored.deserialize(encoded, TraversalOrder.PRE)
    show("Restored", restored)
    print(f"Identical shape: {restored == tree}")

    print("\n== Paths ==")
    try:
        print(f"get_by_path(['left']): {tree.get_by_path(['left'])}")
        print(f"get_by_relative_path(5, ['right']): {tree.get_by_relative_path(5, ['right'])}")
        tree.get_by_path(['left', 'left', 'left'])
    except TreeException as e:
        print(f"Path lookup failed: {e}")

    print("\n== Complex numbers ==")
    complex_tree = BinarySearchTree.from_values(
        [2 + 1j, 1 + 5j, 2 - 3j, 0 + 0j],
        config=TreeConfig.for_type(complex),
    )
    show("Sorted by (real, imag)", complex_tree)
    print(f"Serialized: {complex_tree.serialize()}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
