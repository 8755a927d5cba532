"""
Command line interface of the Huffman text compressor.

    textcompress -C input.txt output
    textcompress -M input.txt output encoding_source.txt
    textcompress -D input.bin output
"""

import argparse
import sys

from textcompress.config import CompressorConfig
from textcompress.errors import TextCompressError, ValidationError
from textcompress.file_utils import (
    read_text_file,
    require_absent,
    require_existing,
    require_extension,
    suffix_filename,
)
from textcompress.text_compress import HuffmanTextCompressor


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="textcompress",
        description="Compress text files with Huffman coding.",
    )
    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument("-C", "--compress", dest="mode", action="store_const", const="compress",
                      help="compress FILE1 into FILE2_COMPRESSED.bin")
    mode.add_argument("-M", "--modified", dest="mode", action="store_const", const="modified",
                      help="compress FILE1 into FILE2_COMPRESSED.bin with the encoding of FILE3")
    mode.add_argument("-D", "--decompress", dest="mode", action="store_const", const="decompress",
                      help="decompress FILE1 into FILE2_DECOMPRESSED.txt")
    parser.add_argument("file1", metavar="FILE1", help="file to read")
    parser.add_argument("file2", metavar="FILE2", help="name of the file to create")
    parser.add_argument("file3", metavar="FILE3", nargs="?",
                        help="text file to build the encoding from (modified compression)")
    parser.add_argument("-v", "--verbose", action="store_true", help="print compression details")
    return parser


def compress(input_file: str, output_file: str, config: CompressorConfig,
             encoding_source_file: str | None = None) -> str:
    """
    Validates the file names, then compresses input_file.

    :return: str, name of the file written
    """
    require_extension(input_file, config.input_extension, "File to be compressed")
    if encoding_source_file is not None:
        require_extension(encoding_source_file, config.input_extension,
                          "Text to generate Huffman encoding from")

    output_file = suffix_filename(output_file, config.compressed_suffix,
                                  config.compressed_extension)

    require_existing(input_file, "File to be compressed", config.min_input_size)
    encoding_source = None
    if encoding_source_file is not None:
        require_existing(encoding_source_file, "File to generate Huffman encoding from",
                         config.min_input_size)
        encoding_source = read_text_file(encoding_source_file, config.text_encoding)
    require_absent(output_file)

    log_info = HuffmanTextCompressor.compress_file(
        input_file, output_file, config=config, encoding_source=encoding_source
    )
    if config.verbose:
        print(log_info)
    return output_file


def decompress(input_file: str, output_file: str, config: CompressorConfig) -> str:
    """
    Validates the file names, then decompresses input_file.

    :return: str, name of the file written
    """
    require_extension(input_file, config.compressed_extension, "File to be decompressed")
    output_file = suffix_filename(output_file, config.decompressed_suffix,
                                  config.input_extension)
    require_existing(input_file, "File to be decompressed", config.min_compressed_size)
    require_absent(output_file)

    log_info = HuffmanTextCompressor.decompress_file(input_file, output_file, config=config)
    if config.verbose:
        print(log_info)
    return output_file


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    config = CompressorConfig(verbose=args.verbose)
    try:
        if args.mode == "compress":
            written = compress(args.file1, args.file2, config)
        elif args.mode == "modified":
            if args.file3 is None:
                raise ValidationError(
                    "Not enough arguments for modified compression. Please provide"
                    " a file to generate the Huffman encoding from."
                )
            written = compress(args.file1, args.file2, config, args.file3)
        else:
            written = decompress(args.file1, args.file2, config)
    except TextCompressError as e:
        print(e)
        return 1

    if config.verbose:
        print(f"Written {written}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
