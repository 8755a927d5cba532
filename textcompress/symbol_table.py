"""
Symbol frequency analysis -
first step of building a Huffman encoding
"""

from collections import Counter
from dataclasses import dataclass

# Inclusive code point ranges forced into an encoding that will be used
# to compress a different text than the one it was built from
UNIVERSAL_RANGES = ((32, 126), (160, 250))


@dataclass(frozen=True)
class WeightedSymbol:
    """
    A distinct symbol of the text and the number of times it occurs.
    """
    symbol: str
    weight: int


def universal_symbols(ranges=UNIVERSAL_RANGES):
    """
    Yields every character of the universal set.

    :param ranges: inclusive (first, last) code point pairs
    """
    for first, last in ranges:
        for code_point in range(first, last + 1):
            yield chr(code_point)


def analyze(text: str, force_universal: bool = False,
            ranges=UNIVERSAL_RANGES) -> list[WeightedSymbol]:
    """
    Function counts the frequency of every symbol in the text.

    Symbols with equal counts keep the order in which they were
    first seen, since the sort by weight is stable.

    :param text: str, text to analyze
    :param force_universal: bool, add every universal character with
        weight 1 when it does not occur in the text
    :param ranges: code point ranges of the universal set
    :return: list of WeightedSymbol, ascending by weight
    """
    frequencies = Counter(text)

    if force_universal:
        for symbol in universal_symbols(ranges):
            frequencies.setdefault(symbol, 1)

    weighted = [WeightedSymbol(symbol, weight) for symbol, weight in frequencies.items()]
    weighted.sort(key=lambda ws: ws.weight)
    return weighted
