from bitarray import bitarray


class BitReader:
    """
    Reads a packed bitstream one byte at a time.

    The trailing padding bits of the final byte are never returned.
    """

    def __init__(self, data: bytes, padding: int = 0):
        """
        :param data: packed bytes, most significant bit first
        :param padding: number of zero bits appended after the last
            meaningful bit
        """
        if not 0 <= padding <= 7:
            raise ValueError(f"Padding must be between 0 and 7 bits, got {padding}")
        if padding and not data:
            raise ValueError("Padding declared for an empty bitstream")
        self.data = data
        self.padding = padding
        self.pos = 0  # index of the next byte

    def at_end(self) -> bool:
        return self.pos >= len(self.data)

    def read_byte(self) -> bitarray:
        """
        Returns the bits of the next byte.
        """
        if self.at_end():
            raise EOFError("Bitstream length exceeded")
        bits = bitarray(endian="big")
        bits.frombytes(self.data[self.pos:self.pos + 1])
        self.pos += 1
        if self.at_end() and self.padding:
            del bits[8 - self.padding:]
        return bits
