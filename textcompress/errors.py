"""
Exceptions raised by the Huffman text compressor.
"""


class TextCompressError(Exception):
    """Base class for every failure reported by the compressor."""


class CompressionIOError(TextCompressError, OSError):
    """Reading or writing the data stream failed."""


class InvalidInputError(TextCompressError, ValueError):
    """The input text cannot be compressed (e.g. it holds no symbols)."""


class SymbolNotInCodeError(TextCompressError, LookupError):
    """
    A symbol of the text has no codeword in the encoding being used.

    Only possible when the encoding was built from a different source text.
    """

    def __init__(self, symbol: str, position: int):
        self.symbol = symbol
        self.position = position
        super().__init__(
            f"Character {symbol!r} (U+{ord(symbol):04X}) at position {position} "
            "is not represented by the Huffman encoding"
        )


class MalformedCodebookError(TextCompressError, ValueError):
    """The embedded codebook is corrupt or not in our format."""


class TruncatedStreamError(TextCompressError, ValueError):
    """The packed bitstream ends in the middle of a codeword."""


class ValidationError(TextCompressError, ValueError):
    """File arguments were rejected before compression started."""
