"""
Binary format of the codebook stored at the head of a compressed file.

Layout (big-endian):

    magic    4 bytes  b"HFCB"
    version  u8
    padding  u8       zero bits appended after the last codeword
    count    u32      number of entries
    entries  count x (bit length u16, code point u32,
                      codeword bits packed MSB first, zero padded to whole bytes)
"""

import struct
from dataclasses import dataclass

from bitarray import bitarray

from textcompress.errors import MalformedCodebookError

MAGIC = b"HFCB"
VERSION = 1
HEADER = struct.Struct(">4sBBI")
ENTRY = struct.Struct(">HI")
HEADER_SIZE = HEADER.size
MAX_CODEWORD_BITS = 0xFFFF
MAX_CODE_POINT = 0x10FFFF


@dataclass
class Codebook:
    """
    Decoded codebook.

    - reverse_map: codeword -> symbol
    - padding: number of zero bits appended to the bitstream
    """
    reverse_map: dict[str, str]
    padding: int = 0


def serialize(reverse_map: dict[str, str], padding: int = 0) -> tuple[int, bytes]:
    """
    Serializes the codeword -> symbol map.

    :param reverse_map: dict, codeword -> symbol
    :param padding: int, padding bits of the bitstream (0-7)
    :return: tuple (length of the blob, blob)
    """
    if not reverse_map:
        raise ValueError("Cannot serialize an empty codebook")
    if not 0 <= padding <= 7:
        raise ValueError(f"Padding must be between 0 and 7 bits, got {padding}")

    blob = bytearray(HEADER.pack(MAGIC, VERSION, padding, len(reverse_map)))
    for codeword, symbol in reverse_map.items():
        if not codeword or len(codeword) > MAX_CODEWORD_BITS:
            raise ValueError(f"Invalid codeword length {len(codeword)} for {symbol!r}")
        bits = bitarray(codeword, endian="big")
        blob.extend(ENTRY.pack(len(bits), ord(symbol)))
        blob.extend(bits.tobytes())

    return len(blob), bytes(blob)


def _check_prefix_free(codewords):
    # in sorted order, a codeword that prefixes others prefixes its successor
    ordered = sorted(codewords)
    for current, following in zip(ordered, ordered[1:]):
        if following.startswith(current):
            raise MalformedCodebookError(
                f"Codeword {current} is a prefix of codeword {following}"
            )


def deserialize(blob: bytes) -> Codebook:
    """
    Rebuilds the codebook written by serialize.

    Raises MalformedCodebookError for anything that is not a well formed,
    prefix-free codebook of this format.
    """
    if len(blob) < HEADER_SIZE:
        raise MalformedCodebookError(
            f"Codebook is {len(blob)} bytes, shorter than its {HEADER_SIZE} byte header"
        )

    magic, version, padding, count = HEADER.unpack_from(blob, 0)
    if magic != MAGIC:
        raise MalformedCodebookError("Data does not start with a Huffman codebook")
    if version != VERSION:
        raise MalformedCodebookError(f"Unsupported codebook version {version}")
    if padding > 7:
        raise MalformedCodebookError(f"Invalid padding of {padding} bits")
    if count == 0:
        raise MalformedCodebookError("Codebook holds no codewords")

    reverse_map = {}
    pos = HEADER_SIZE
    for index in range(count):
        if pos + ENTRY.size > len(blob):
            raise MalformedCodebookError(f"Codebook ends inside entry {index}")
        bit_length, code_point = ENTRY.unpack_from(blob, pos)
        pos += ENTRY.size

        if bit_length == 0:
            raise MalformedCodebookError(f"Entry {index} has an empty codeword")
        if code_point > MAX_CODE_POINT:
            raise MalformedCodebookError(f"Entry {index} has invalid code point {code_point}")

        byte_length = (bit_length + 7) // 8
        if pos + byte_length > len(blob):
            raise MalformedCodebookError(f"Codebook ends inside entry {index}")
        bits = bitarray(endian="big")
        bits.frombytes(blob[pos:pos + byte_length])
        pos += byte_length

        if bits[bit_length:].any():
            raise MalformedCodebookError(f"Entry {index} has non-zero padding bits")
        codeword = bits[:bit_length].to01()
        if codeword in reverse_map:
            raise MalformedCodebookError(f"Codeword {codeword} appears twice")
        reverse_map[codeword] = chr(code_point)

    if pos != len(blob):
        raise MalformedCodebookError(
            f"{len(blob) - pos} unexpected bytes after the last codebook entry"
        )
    _check_prefix_free(reverse_map)

    return Codebook(reverse_map, padding)
