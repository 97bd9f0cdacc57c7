from huffcodec.abc import CodeTable
from huffcodec.tree import Internal, Leaf, Node


def derive_code_table(root: Node) -> CodeTable:
    """Assign every leaf the path leading to it (0 = left, 1 = right).

    Leaves are visited left to right, so the table's order is stable for a
    given tree. A root that is itself a Leaf gets the code "0".
    """
    codes: CodeTable = {}
    stack: list[tuple[Node, str]] = [(root, "")]
    while stack:
        node, path = stack.pop()
        if isinstance(node, Leaf):
            codes[node.symbol] = path or "0"
            continue
        assert isinstance(node, Internal), f"Unexpected node: {node!r}"
        # right is pushed first so that left is expanded first
        stack.append((node.right, path + "1"))
        stack.append((node.left, path + "0"))
    return codes


def is_prefix_free(codes: CodeTable) -> bool:
    ordered = sorted(codes.values())
    # in sorted order a prefix sorts directly before some code it prefixes
    return all(not b.startswith(a) for a, b in zip(ordered, ordered[1:]))
