import heapq
import itertools
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TypeAlias

from huffcodec.abc import FrequencyTable, Symbol
from huffcodec.errors import EmptyInput


@dataclass(frozen=True)
class Leaf:
    symbol: Symbol
    weight: int


@dataclass(frozen=True)
class Internal:
    left: "Node"
    right: "Node"
    weight: int

    @classmethod
    def join(cls, left: "Node", right: "Node") -> "Internal":
        return cls(left, right, left.weight + right.weight)


Node: TypeAlias = Leaf | Internal


def build_tree(frequencies: FrequencyTable) -> Node:
    """Merge the two lightest nodes until a single root remains.

    Heap entries are keyed by ``(weight, seq)``. ``seq`` counts insertions:
    leaves in frequency-table order, then merged nodes as they are created.
    Equal weights are therefore combined first-inserted-first, and the first
    node popped becomes the left child.

    A single distinct symbol yields a bare Leaf as the root.
    """
    if not frequencies:
        raise EmptyInput("Cannot build a tree from an empty frequency table")

    seq = itertools.count()
    heap: list[tuple[int, int, Node]] = [
        (weight, next(seq), Leaf(symbol, weight))
        for symbol, weight in frequencies.items()
    ]
    heapq.heapify(heap)

    while len(heap) > 1:
        _, _, left = heapq.heappop(heap)
        _, _, right = heapq.heappop(heap)
        merged = Internal.join(left, right)
        heapq.heappush(heap, (merged.weight, next(seq), merged))

    return heap[0][2]


def iter_internal(root: Node) -> Iterator[Internal]:
    """Yield every Internal node of the tree, parents before children."""
    stack = [root]
    while stack:
        node = stack.pop()
        if isinstance(node, Internal):
            yield node
            stack.append(node.right)
            stack.append(node.left)
