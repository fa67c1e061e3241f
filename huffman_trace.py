# filename: huffman_trace.py
"""Read-only views over a built Huffman tree.

Renderers and step-by-step animators consume these. Nothing here mutates a
node; layout data belongs in the consumer's own mapping keyed by node_id.
"""

from dataclasses import dataclass
from typing import Any, List

from huffman_core import SINGLE_SYMBOL_CODE, HuffmanNode, InvalidCode, UnknownSymbol


@dataclass(frozen=True)
class EncodingStep:
    symbol: Any
    code: str
    path: List[HuffmanNode]


def iter_nodes(root):
    """Pre-order walk, left subtree before right."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        if not node.is_leaf:
            stack.append(node.right)
            stack.append(node.left)


def node_index(root):
    return {node.node_id: node for node in iter_nodes(root)}


def tree_depth(root):
    if root.is_leaf:
        return 0
    return 1 + max(tree_depth(root.left), tree_depth(root.right))


def code_path(root, code):
    """Nodes visited while following `code` from the root, root included."""
    if root.is_leaf:
        if code != SINGLE_SYMBOL_CODE:
            raise InvalidCode(code, f"single-symbol tree only accepts {SINGLE_SYMBOL_CODE!r}")
        return [root]

    node = root
    path = [node]
    for bit in code:
        if node.is_leaf:
            raise InvalidCode(code, "walk continues past a leaf")
        if bit == "0":
            node = node.left
        elif bit == "1":
            node = node.right
        else:
            raise InvalidCode(code, f"unexpected bit {bit!r}")
        path.append(node)
    if not node.is_leaf:
        raise InvalidCode(code, "walk ends on an internal node")
    return path


def encoding_steps(data, codes, root):
    for symbol in data:
        if symbol not in codes:
            raise UnknownSymbol(symbol)
        code = codes[symbol]
        yield EncodingStep(symbol=symbol, code=code, path=code_path(root, code))
