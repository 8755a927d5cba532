"""
File name formatting and checks done before the compressor runs.
"""

import os

from textcompress.errors import CompressionIOError, InvalidInputError, ValidationError


def suffix_filename(filename: str, suffix: str, extension: str) -> str:
    """
    Adds a suffix before the expected extension, appending the extension
    when the name lacks it.

    Example:
        out.bin + '_COMPRESSED' -> out_COMPRESSED.bin
        out     + '_COMPRESSED' -> out_COMPRESSED.bin
    """
    if filename.endswith(extension):
        return filename[:-len(extension)] + suffix + extension
    return filename + suffix + extension


def require_extension(filename: str, extension: str, description: str):
    if not filename.endswith(extension):
        raise ValidationError(f"{description} must end in '{extension}'.")


def require_existing(filename: str, description: str, min_size: int = 0):
    if not os.path.isfile(filename):
        raise ValidationError(f"{description} was not found in the specified location.")
    if os.path.getsize(filename) < min_size:
        raise ValidationError(
            f"{description} must not be less than {min_size} bytes in length."
        )


def require_absent(filename: str):
    if os.path.exists(filename):
        raise ValidationError(
            f"A file already exists in the given location with the name '{filename}'!"
        )


def read_text_file(filename: str, encoding: str = "utf-8") -> str:
    """
    Reads a whole text file, keeping its line endings untouched.
    """
    try:
        with open(filename, "r", encoding=encoding, newline="") as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise InvalidInputError(f"'{filename}' is not valid {encoding} text: {e.reason}") from e
    except OSError as e:
        raise CompressionIOError(
            f"An IO error occurred when reading '{filename}': {e.strerror or e}"
        ) from e
