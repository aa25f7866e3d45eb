from bitbyte.bit import Bit

BITS_PER_BYTE = 8


class BitIter:
    """Yields the 8 bits of a byte, index 0 (LSB) first, index 7 (MSB) last.

    The raw value is copied when the iterator is created, so changing the
    source byte afterwards has no effect. Once exhausted it stays exhausted;
    build a new iterator to go round again.
    """

    def __init__(self, byte):
        self.raw = byte.as_raw()
        self.bit_position = 0

    def __iter__(self) -> "BitIter":
        return self

    def __next__(self) -> Bit:
        if self.bit_position >= BITS_PER_BYTE:
            raise StopIteration
        r = Bit(((self.raw >> self.bit_position) & 1) == 1)
        self.bit_position += 1
        return r

    def remain(self) -> int:
        return BITS_PER_BYTE - self.bit_position

    def __len__(self) -> int:
        return self.remain()

    def __length_hint__(self) -> int:
        return self.remain()

    def __repr__(self) -> str:
        return f"BitIter(bitpos={self.bit_position},remain={self.remain()},raw=0x{self.raw:02x})"
