import pytest

from textcompress.codebook_format import (
    ENTRY,
    HEADER,
    HEADER_SIZE,
    MAGIC,
    VERSION,
    Codebook,
    deserialize,
    serialize,
)
from textcompress.codec import reverse_code
from textcompress.errors import MalformedCodebookError
from textcompress.huffman_coding import huffman_encoding


def _blob(entries, padding=0, count=None, magic=MAGIC, version=VERSION):
    """Builds a codebook by hand from (bit length, symbol, codeword bytes) entries."""
    data = HEADER.pack(magic, version, padding, len(entries) if count is None else count)
    for bit_length, symbol, bits in entries:
        data += ENTRY.pack(bit_length, ord(symbol)) + bits
    return data


def test_round_trip():
    reverse_map = reverse_code(huffman_encoding("abracadabra, ünïcödé 🙂", force_universal=True))
    length, blob = serialize(reverse_map, padding=3)
    assert length == len(blob)
    assert deserialize(blob) == Codebook(reverse_map, 3)


def test_single_entry_layout():
    length, blob = serialize({"1": "z"}, padding=4)
    assert blob == MAGIC + bytes([VERSION, 4]) + b"\x00\x00\x00\x01" \
        + b"\x00\x01" + b"\x00\x00\x00z" + b"\x80"
    assert length == HEADER_SIZE + 7


def test_long_codeword_spans_bytes():
    reverse_map = {"0" * 11 + "1": "a", "1": "b", "01": "c"}
    _, blob = serialize(reverse_map)
    assert deserialize(blob).reverse_map == reverse_map


def test_serialize_rejects_bad_input():
    with pytest.raises(ValueError):
        serialize({})
    with pytest.raises(ValueError):
        serialize({"1": "a"}, padding=8)
    with pytest.raises(ValueError):
        serialize({"": "a"})


@pytest.mark.parametrize("blob", [
    b"",
    b"HFCB",
    _blob([(1, "a", b"\x00")], magic=b"JAVA"),
    _blob([(1, "a", b"\x00")], version=VERSION + 1),
    _blob([(1, "a", b"\x00")], padding=8),
    _blob([]),
    _blob([(1, "a", b"\x00")], count=2),
    _blob([(9, "a", b"\x00")]),
    _blob([(1, "a", b"\x00")]) + b"\x00",
    _blob([(0, "a", b"")]),
    _blob([(1, "a", b"\x40")]),
    _blob([(1, "a", b"\x00"), (1, "b", b"\x00")]),
    _blob([(1, "a", b"\x00"), (2, "b", b"\x00")]),
    HEADER.pack(MAGIC, VERSION, 0, 1) + ENTRY.pack(1, 0x110000) + b"\x00",
])
def test_malformed_codebooks(blob):
    with pytest.raises(MalformedCodebookError):
        deserialize(blob)
