import os

import pytest

from textcompress.errors import (
    CompressionIOError,
    InvalidInputError,
    MalformedCodebookError,
    SymbolNotInCodeError,
    TextCompressError,
    TruncatedStreamError,
)
from textcompress.text_compress import (
    HuffmanTextCompressor,
    compress,
    compress_with_external_encoding,
    decompress,
    read_codebook,
)

SAMPLE = "It was the best of times, it was the worst of times.\r\nÜber café 🙂\n"


@pytest.mark.parametrize("text", ["aaab", "zzzz", "ab", SAMPLE, SAMPLE * 50])
def test_round_trip(text):
    assert decompress(compress(text)) == text


def test_container_layout():
    data = compress("zzzz")
    length = int.from_bytes(data[:4], "big")
    codebook, offset = read_codebook(data)

    assert offset == 4 + length
    assert codebook.reverse_map == {"1": "z"}
    assert codebook.padding == 4
    assert data[offset:] == b"\xf0"


def test_empty_text_rejected():
    with pytest.raises(InvalidInputError):
        compress("")
    with pytest.raises(InvalidInputError):
        compress_with_external_encoding("", "source text")


def test_external_encoding_round_trip():
    data = compress_with_external_encoding("Quick zebras, vexing jugs!", "the encoding source")
    assert decompress(data) == "Quick zebras, vexing jugs!"


def test_external_encoding_codebook_covers_universal_set():
    codebook, _ = read_codebook(compress_with_external_encoding("abc", "abc"))
    assert len(codebook.reverse_map) == (126 - 32 + 1) + (250 - 160 + 1)


def test_external_encoding_missing_symbol():
    with pytest.raises(SymbolNotInCodeError) as excinfo:
        compress_with_external_encoding("price: 5€", "some source")
    assert excinfo.value.symbol == "€"
    assert excinfo.value.position == 8


def test_external_encoding_uses_source_characters():
    # line feed is outside the universal set but present in the source
    data = compress_with_external_encoding("a\nb", "line one\nline two")
    assert decompress(data) == "a\nb"


@pytest.mark.parametrize("data", [
    b"",
    b"\x00\x00",
    b"\x00\x00\x00\x40" + b"HFCB",
    b"\x00\x00\x00\x02ab" + b"payload",
])
def test_malformed_data(data):
    with pytest.raises(MalformedCodebookError):
        decompress(data)


def test_missing_bitstream():
    data = compress("zzzz")
    with pytest.raises(TruncatedStreamError):
        decompress(data[:-1])


def test_malformed_is_not_an_io_error():
    with pytest.raises(MalformedCodebookError) as excinfo:
        decompress(b"not a compressed file")
    assert not isinstance(excinfo.value, OSError)
    assert isinstance(excinfo.value, TextCompressError)


def test_compressor_bytes_round_trip():
    raw = SAMPLE.encode("utf-8")
    compressed, log_info = HuffmanTextCompressor.compress_bytes(raw)
    restored, _ = HuffmanTextCompressor.decompress_bytes(compressed)

    assert restored == raw
    assert f"Compressed {len(SAMPLE)} characters" in log_info
    assert "own encoding" in log_info


def test_compressor_with_encoding_source():
    compressed, log_info = HuffmanTextCompressor.compress_bytes(
        b"Some text", encoding_source="reference"
    )
    assert "external encoding" in log_info
    assert decompress(compressed) == "Some text"


def test_compressor_rejects_undecodable_input():
    with pytest.raises(InvalidInputError):
        HuffmanTextCompressor.compress_bytes(b"\xff\xfe\x00bad")


def test_compress_file_round_trip(tmp_path):
    source = tmp_path / "in.txt"
    compressed = tmp_path / "out.bin"
    restored = tmp_path / "out.txt"
    source.write_bytes(SAMPLE.encode("utf-8"))

    HuffmanTextCompressor.compress_file(str(source), str(compressed))
    HuffmanTextCompressor.decompress_file(str(compressed), str(restored))

    assert restored.read_bytes() == source.read_bytes()


def test_missing_input_file_leaves_no_output(tmp_path):
    output = tmp_path / "out.bin"
    with pytest.raises(CompressionIOError) as excinfo:
        HuffmanTextCompressor.compress_file(str(tmp_path / "missing.txt"), str(output))
    assert "missing.txt" in str(excinfo.value)
    assert not output.exists()


def test_failed_decompression_leaves_no_output(tmp_path):
    broken = tmp_path / "broken.bin"
    broken.write_bytes(b"\x00\x00\x00\x01garbage")
    output = tmp_path / "out.txt"

    with pytest.raises(MalformedCodebookError):
        HuffmanTextCompressor.decompress_file(str(broken), str(output))
    assert not os.path.exists(output)
