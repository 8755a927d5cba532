"""
Huffman coding algorithm -
tree construction and codeword assignment
"""

from collections import deque

from textcompress.errors import InvalidInputError
from textcompress.symbol_table import UNIVERSAL_RANGES, WeightedSymbol, analyze


class Node:
    """
    Class object for Node in Huffman's Tree.

    Leaf nodes hold a symbol, internal nodes hold two children
    and the sum of their weights.
    """

    def __init__(self, weight: int, value=None, left=None, right=None):
        """
        Function initializes the structure of a node.

        :param weight: int, the frequency of the value, or the summed
            frequency of both children for an internal node
        :param value: symbol held by a leaf node
        """
        self.weight = weight
        self.value = value
        self.left = left
        self.right = right

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __repr__(self):
        if self.is_leaf:
            return f"Node({self.weight}, {self.value!r})"
        return f"Node({self.weight}, left={self.left!r}, right={self.right!r})"


def _next_node(leaf_queue: deque, internal_queue: deque) -> Node:
    """
    Pops the node with the smallest weight out of both queues.
    On equal weights the leaf queue wins.
    """
    if leaf_queue and internal_queue:
        if leaf_queue[0].weight > internal_queue[0].weight:
            return internal_queue.popleft()
        return leaf_queue.popleft()
    if leaf_queue:
        return leaf_queue.popleft()
    return internal_queue.popleft()


def build_tree(weighted_symbols: list[WeightedSymbol]) -> Node:
    """
    Function builds Huffman Tree.

    Leaves are taken in the given order, which must be ascending
    by weight. Merged nodes are created in non-decreasing weight order,
    so a plain FIFO queue keeps them sorted too.

    :param weighted_symbols: list of WeightedSymbol, ascending by weight
    :return: root Node, a lone leaf when there is a single symbol
    """
    if not weighted_symbols:
        raise InvalidInputError("Cannot build a Huffman tree without symbols")

    leaf_queue = deque(Node(ws.weight, ws.symbol) for ws in weighted_symbols)
    internal_queue = deque()

    if len(leaf_queue) == 1:
        return leaf_queue.popleft()

    while len(leaf_queue) + len(internal_queue) > 1:
        left = _next_node(leaf_queue, internal_queue)
        right = _next_node(leaf_queue, internal_queue)
        internal_queue.append(Node(left.weight + right.weight, left=left, right=right))

    return internal_queue.popleft()


def assign_codes(root: Node) -> dict[str, str]:
    """
    Function generates the codeword of each symbol with a preorder
    traversal of Huffman's tree: moving left appends 0, moving right
    appends 1. Uses an explicit stack, as skewed weights give deep trees.

    :param root: root of the Huffman tree
    :return: dict, symbol -> codeword
    """
    # a single symbol has no branches to follow
    if root.is_leaf:
        return {root.value: "1"}

    codes = {}
    stack = [(root, "")]
    while stack:
        node, code = stack.pop()
        if node.is_leaf:
            codes[node.value] = code
            continue
        # right first so the left branch is visited first
        stack.append((node.right, code + "1"))
        stack.append((node.left, code + "0"))

    return codes


def huffman_encoding(text: str, force_universal: bool = False,
                     ranges=UNIVERSAL_RANGES) -> dict[str, str]:
    """
    Generates the Huffman encoding of the text.

    :param text: str, text to take symbol frequencies from
    :param force_universal: bool, true if the encoding will be used for
        another text, so the universal character set is always included
    :param ranges: code point ranges of the universal set
    :return: dict, symbol -> codeword
    """
    return assign_codes(build_tree(analyze(text, force_universal, ranges)))
