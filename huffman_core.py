# filename: huffman_core.py

import heapq
import logging
from collections import Counter
from dataclasses import dataclass
from typing import Any, Optional

logger = logging.getLogger(__name__)

# A lone root leaf has an empty path, so it gets a one-bit placeholder.
SINGLE_SYMBOL_CODE = "0"


class HuffmanError(Exception):
    pass


class EmptyInput(HuffmanError, ValueError):
    def __init__(self, message="cannot build a Huffman tree from empty input"):
        super().__init__(message)


class UnknownSymbol(HuffmanError, KeyError):
    def __init__(self, symbol):
        super().__init__(symbol)
        self.symbol = symbol

    def __str__(self):
        return f"symbol {self.symbol!r} has no entry in the code table"


class InvalidCode(HuffmanError, ValueError):
    def __init__(self, code, reason):
        super().__init__(f"invalid code {code!r}: {reason}")
        self.code = code


@dataclass(frozen=True)
class HuffmanNode:
    freq: int
    node_id: int
    symbol: Any = None
    left: Optional["HuffmanNode"] = None
    right: Optional["HuffmanNode"] = None

    @property
    def is_leaf(self):
        return self.left is None and self.right is None


def merge_order_key(node):
    """Order in which the builder takes nodes off the working collection.

    Lower frequency first; among equal frequencies the node inserted earlier
    (lower node_id) wins. Leaves are numbered in first-occurrence order and
    merged nodes are numbered as they are created, so this matches a stable
    sort of a list where merged nodes are pushed to the end.
    """
    return (node.freq, node.node_id)


def count_frequencies(data):
    # Counter keeps keys in first-occurrence order
    return Counter(data)


def merge_frequencies(*tables):
    """Combine per-shard frequency tables, in shard order."""
    merged = Counter()
    for table in tables:
        merged.update(table)
    return merged


def encode(data, codes):
    try:
        return "".join([codes[symbol] for symbol in data])
    except KeyError as e:
        raise UnknownSymbol(e.args[0]) from None


class HuffmanLogic:
    def build_tree(self, freqs):
        if not freqs:
            raise EmptyInput()

        # Leaf nodes take ids 0..n-1 in first-occurrence order
        priority_queue = []
        for node_id, (symbol, freq) in enumerate(freqs.items()):
            node = HuffmanNode(freq=freq, node_id=node_id, symbol=symbol)
            priority_queue.append((merge_order_key(node), node))
        heapq.heapify(priority_queue)
        next_id = len(priority_queue)

        # Iteratively merge nodes to form the binary tree
        while len(priority_queue) > 1:
            _, left = heapq.heappop(priority_queue)
            _, right = heapq.heappop(priority_queue)
            merged = HuffmanNode(
                freq=left.freq + right.freq,
                node_id=next_id,
                left=left,
                right=right,
            )
            next_id += 1
            heapq.heappush(priority_queue, (merge_order_key(merged), merged))

        root = priority_queue[0][1]
        logger.debug("built tree: %d symbols, %d nodes, root freq %d",
                     len(freqs), next_id, root.freq)
        return root

    def generate_codes(self, node):
        if node.is_leaf:
            return {node.symbol: SINGLE_SYMBOL_CODE}

        codes = {}

        def walk(current, current_code):
            if current.is_leaf:
                codes[current.symbol] = current_code
                return
            walk(current.left, current_code + "0")
            walk(current.right, current_code + "1")

        walk(node, "")
        return codes
