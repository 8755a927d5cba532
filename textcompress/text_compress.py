"""
Huffman compression of text files.

A compressed file is laid out as

    [4 bytes]       codebook length (unsigned, big-endian)
    [length bytes]  codebook, see codebook_format
    [rest]          packed bitstream, zero padded to a whole byte
"""

import struct
from typing import BinaryIO

from textcompress import codebook_format
from textcompress.codec import decode, encode, reverse_code
from textcompress.compressor_ABC import Compressor
from textcompress.config import CompressorConfig
from textcompress.errors import (
    CompressionIOError,
    InvalidInputError,
    MalformedCodebookError,
    TruncatedStreamError,
)
from textcompress.huffman_coding import huffman_encoding
from textcompress.symbol_table import UNIVERSAL_RANGES

LENGTH_PREFIX = struct.Struct(">I")


def _pack(text: str, code: dict[str, str]) -> bytes:
    payload = encode(text, code)
    length, blob = codebook_format.serialize(reverse_code(code), payload.padding)
    return LENGTH_PREFIX.pack(length) + blob + payload.data


def compress(text: str) -> bytes:
    """
    Compresses the text with a Huffman encoding built from its own symbols.

    :param text: str, text to compress
    :return: bytes, codebook followed by the packed bitstream
    """
    if not text:
        raise InvalidInputError("Text to be compressed holds no characters")
    return _pack(text, huffman_encoding(text))


def compress_with_external_encoding(text: str, encoding_source: str,
                                    ranges=UNIVERSAL_RANGES) -> bytes:
    """
    Compresses the text with a Huffman encoding built from another text.

    The universal character set is always part of that encoding, so
    characters missing from encoding_source can still be represented.
    Any other character raises SymbolNotInCodeError.

    :param text: str, text to compress
    :param encoding_source: str, text to take symbol frequencies from
    :param ranges: code point ranges of the universal set
    """
    if not text:
        raise InvalidInputError("Text to be compressed holds no characters")
    return _pack(text, huffman_encoding(encoding_source, force_universal=True, ranges=ranges))


def read_codebook(data: bytes) -> tuple[codebook_format.Codebook, int]:
    """
    Reads the length-prefixed codebook at the head of compressed data.

    :return: tuple (codebook, offset of the packed bitstream)
    """
    if len(data) < LENGTH_PREFIX.size:
        raise MalformedCodebookError(
            f"Compressed data is {len(data)} bytes, too short for a codebook length"
        )
    (length,) = LENGTH_PREFIX.unpack_from(data, 0)
    end = LENGTH_PREFIX.size + length
    if end > len(data):
        raise MalformedCodebookError(
            f"Codebook length {length} exceeds the {len(data)} bytes of compressed data"
        )
    return codebook_format.deserialize(data[LENGTH_PREFIX.size:end]), end


def decompress(data: bytes) -> str:
    """
    Restores the text from compressed data.

    :param data: bytes, output of compress
    :return: str, original text
    """
    codebook, offset = read_codebook(data)
    payload = data[offset:]
    if not payload and codebook.padding:
        raise TruncatedStreamError("Compressed data holds no bitstream")
    return decode(payload, codebook.reverse_map, codebook.padding)


class HuffmanTextCompressor(Compressor):
    """
    Huffman compressor for text streams.

    When encoding_source is given, the encoding is built from that text
    (modified compression) instead of from the text being compressed.
    """

    def __init__(self, config: CompressorConfig | None = None,
                 encoding_source: str | None = None):
        self.config = config or CompressorConfig()
        self.encoding_source = encoding_source

    def _read(self, input_stream: BinaryIO) -> bytes:
        try:
            return input_stream.read()
        except OSError as e:
            raise CompressionIOError(
                f"An IO error occurred when reading the input stream: {e}"
            ) from e

    def _write(self, output_stream: BinaryIO, data: bytes):
        try:
            output_stream.write(data)
            output_stream.flush()
        except OSError as e:
            raise CompressionIOError(
                f"An IO error occurred when writing the output stream: {e}"
            ) from e

    def compress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        raw = self._read(input_stream)
        try:
            text = raw.decode(self.config.text_encoding)
        except UnicodeDecodeError as e:
            raise InvalidInputError(
                f"Input is not valid {self.config.text_encoding} text: {e.reason}"
            ) from e

        if self.encoding_source is None:
            compressed = compress(text)
            mode = "own"
        else:
            compressed = compress_with_external_encoding(
                text, self.encoding_source, self.config.universal_ranges
            )
            mode = "external"

        self._write(output_stream, compressed)
        return (
            f"Compressed {len(text)} characters ({len(set(text))} distinct) "
            f"from {len(raw)} to {len(compressed)} bytes using the {mode} encoding"
        )

    def decompress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        compressed = self._read(input_stream)
        text = decompress(compressed)
        try:
            raw = text.encode(self.config.text_encoding)
        except UnicodeEncodeError as e:
            raise MalformedCodebookError(
                f"Decoded text cannot be written as {self.config.text_encoding}: {e.reason}"
            ) from e

        self._write(output_stream, raw)
        return f"Decompressed {len(compressed)} bytes into {len(text)} characters"
