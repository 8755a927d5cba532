from bitarray import bitarray


class BitWriter:
    """
    Simple writer of codewords into a big-endian bitarray, aligned to whole bytes.
    """

    def __init__(self):
        self.bits = bitarray(endian="big")

    def write_code(self, code: str):
        """
        Appends a codeword given as a string of '0' and '1' characters.
        """
        self.bits.extend(code)

    def byte_align(self) -> int:
        """
        Appends zero bits up to the next byte boundary.

        :return: number of padding bits added (0-7)
        """
        return self.bits.fill()

    def to_bytes(self) -> tuple[bytes, int]:
        """
        Aligns the bits to a byte boundary and packs them, 8 bits per byte.

        :return: tuple (packed bytes, number of padding bits)
        """
        padding = self.byte_align()
        return self.bits.tobytes(), padding
