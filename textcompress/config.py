from dataclasses import dataclass

from textcompress.codebook_format import HEADER_SIZE
from textcompress.symbol_table import UNIVERSAL_RANGES


# Length prefix of the container plus the fixed codebook header
MIN_CONTAINER_SIZE = 4 + HEADER_SIZE


@dataclass
class CompressorConfig:
    """
    Configuration for the Huffman text compressor and its command line.
    """
    text_encoding: str = "utf-8"
    # Inclusive code point ranges always present in an encoding built for
    # another text (modified compression)
    universal_ranges: tuple = UNIVERSAL_RANGES
    input_extension: str = ".txt"
    compressed_extension: str = ".bin"
    compressed_suffix: str = "_COMPRESSED"
    decompressed_suffix: str = "_DECOMPRESSED"
    min_input_size: int = 4
    min_compressed_size: int = MIN_CONTAINER_SIZE
    verbose: bool = False
