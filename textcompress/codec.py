"""
Packing of text into a Huffman bitstream and back
"""

from dataclasses import dataclass

from bitarray import bitarray

from textcompress.bit_reader import BitReader
from textcompress.bit_writer import BitWriter
from textcompress.errors import (
    MalformedCodebookError,
    SymbolNotInCodeError,
    TruncatedStreamError,
)


@dataclass
class EncodedPayload:
    """
    Container for the packed bitstream.

    - data: codewords packed 8 bits per byte, most significant bit first
    - padding: number of zero bits appended to reach a byte boundary
    """
    data: bytes
    padding: int

    @property
    def bit_length(self) -> int:
        return len(self.data) * 8 - self.padding


def reverse_code(code: dict[str, str]) -> dict[str, str]:
    """Flips symbol -> codeword into codeword -> symbol."""
    return {codeword: symbol for symbol, codeword in code.items()}


def encode(text: str, code: dict[str, str]) -> EncodedPayload:
    """
    Replaces every symbol of the text with its codeword.

    :param text: str, text to encode
    :param code: dict, symbol -> codeword
    :return: EncodedPayload with the zero-padded bitstream
    """
    writer = BitWriter()
    for position, symbol in enumerate(text):
        codeword = code.get(symbol)
        if codeword is None:
            raise SymbolNotInCodeError(symbol, position)
        writer.write_code(codeword)

    data, padding = writer.to_bytes()
    return EncodedPayload(data, padding)


def decode(data: bytes, reverse_map: dict[str, str], padding=None) -> str:
    """
    Decodes a packed bitstream with the given codewords.

    Bytes are added to a buffer one at a time. Prefixes of the buffer are
    checked with growing length until one matches a codeword, then the
    symbol is emitted and the prefix removed. `checked` remembers how many
    prefix lengths are already known not to match.

    :param data: bytes, packed bitstream
    :param reverse_map: dict, codeword -> symbol
    :param padding: int, number of padding bits in the last byte, or None
        when it is unknown. Without it every bit is decoded, so trailing
        zero padding can come out as extra symbols when a codeword is made
        of zeros only.
    :return: str, decoded text
    """
    if not reverse_map:
        raise MalformedCodebookError("Codebook holds no codewords")
    max_length = max(len(codeword) for codeword in reverse_map)

    reader = BitReader(data, padding or 0)
    buffer = bitarray(endian="big")
    checked = 0
    symbols = []

    while not reader.at_end():
        # no codeword is longer than max_length, so more bits cannot help
        if checked >= max_length:
            raise TruncatedStreamError(
                f"Bits after symbol {len(symbols)} match no codeword"
            )
        buffer.extend(reader.read_byte())

        length = checked + 1
        while length <= min(len(buffer), max_length):
            symbol = reverse_map.get(buffer[:length].to01())
            if symbol is not None:
                symbols.append(symbol)
                del buffer[:length]
                checked = 0
                length = 1
            else:
                length += 1
        checked = min(len(buffer), max_length)

    if buffer:
        # with unknown padding, fewer than 8 zero bits are the padding itself
        if padding is not None or len(buffer) >= 8 or buffer.any():
            raise TruncatedStreamError(
                f"Bitstream ends in the middle of a codeword ({len(buffer)} bits left)"
            )

    return "".join(symbols)
