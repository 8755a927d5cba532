from abc import ABC, abstractmethod
import io
import os
from typing import BinaryIO, Tuple

from textcompress.errors import CompressionIOError


class Compressor(ABC):
    """
    Interface describing compression and decompression of files
    with different algorithms.
    """

    @abstractmethod
    def compress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        """
        Reads the bytes of the input stream, compresses them and writes
        the compressed data to the output stream.

        Args:
            input_stream: Input data stream
            output_stream: Stream for the compressed data

        Returns:
            Line of information for logging
        """
        pass

    @abstractmethod
    def decompress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        """
        Reads the bytes of the compressed stream, decompresses them and
        writes the result to the output stream.

        Args:
            input_stream: Compressed data stream
            output_stream: Stream for the decompressed data

        Returns:
            Line of information for logging
        """
        pass

    @staticmethod
    def _run_to_file(operation, input_file: str, output_file: str) -> str:
        """
        Runs operation(in_stream, out_buffer) and writes the buffer to
        output_file only once it has fully succeeded. A partially written
        output file is removed.
        """
        out_buffer = io.BytesIO()
        try:
            with open(input_file, "rb") as in_file:
                log_info = operation(in_file, out_buffer)
        except CompressionIOError:
            raise
        except OSError as e:
            raise CompressionIOError(
                f"An IO error occurred when reading '{input_file}': {e.strerror or e}"
            ) from e

        try:
            with open(output_file, "wb") as out_file:
                out_file.write(out_buffer.getvalue())
        except OSError as e:
            if os.path.exists(output_file):
                os.remove(output_file)
            raise CompressionIOError(
                f"An IO error occurred when writing '{output_file}': {e.strerror or e}"
            ) from e
        return log_info

    @classmethod
    def compress_file(cls, input_file: str, output_file: str, **kwargs) -> str:
        """
        Helper method for compressing a file.

        Args:
            input_file: Path to the input file
            output_file: Path to the output file

        Returns:
            Compression information
        """
        compressor = cls(**kwargs)
        return cls._run_to_file(compressor.compress, input_file, output_file)

    @classmethod
    def decompress_file(cls, input_file: str, output_file: str, **kwargs) -> str:
        """
        Helper method for decompressing a file.

        Args:
            input_file: Path to the compressed file
            output_file: Path to the output file

        Returns:
            Decompression information
        """
        compressor = cls(**kwargs)
        return cls._run_to_file(compressor.decompress, input_file, output_file)

    @classmethod
    def compress_bytes(cls, data: bytes, **kwargs) -> Tuple[bytes, str]:
        """
        Helper method for compressing bytes.

        Args:
            data: Input data to compress

        Returns:
            Tuple (compressed data, compression information)
        """
        compressor = cls(**kwargs)
        in_buffer = io.BytesIO(data)
        out_buffer = io.BytesIO()
        log_info = compressor.compress(in_buffer, out_buffer)
        return out_buffer.getvalue(), log_info

    @classmethod
    def decompress_bytes(cls, data: bytes, **kwargs) -> Tuple[bytes, str]:
        """
        Helper method for decompressing bytes.

        Args:
            data: Compressed data to decompress

        Returns:
            Tuple (decompressed data, decompression information)
        """
        compressor = cls(**kwargs)
        in_buffer = io.BytesIO(data)
        out_buffer = io.BytesIO()
        log_info = compressor.decompress(in_buffer, out_buffer)
        return out_buffer.getvalue(), log_info
