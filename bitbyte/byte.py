"""Single byte with per-bit access.

Bit-index 0 is the least-significant bit and index 7 the most-significant,
so index ``i`` always tests or sets the mask ``1 << i``. Multi-byte values
built on top of this are assumed to be big-endian.

The byte ``1100_1101`` is indexed as::

    | Index | Value | Boolean |
    |-------|-------|---------|
    | 0     | 1     | True    |
    | 1     | 0     | False   |
    | 2     | 1     | True    |
    | 3     | 1     | True    |
    | 4     | 0     | False   |
    | 5     | 0     | False   |
    | 6     | 1     | True    |
    | 7     | 1     | True    |

Only ``Byte.from_bits`` reads its input the other way round: the first
element is the most-significant bit, as the byte is written out.
"""
from functools import partialmethod
from typing import Sequence, Tuple, Union

import numpy

from bitbyte.bit import Bit, as_bool, as_int
from bitbyte.bititer import BITS_PER_BYTE, BitIter

BitLike = Union[bool, Bit]


class BitIndexError(IndexError):
    """Bit index outside 0..7."""


def check_index(index) -> int:
    try:
        index = as_int(index)
    except TypeError:
        raise BitIndexError(f"bit index must be an int, got {type(index).__name__}") from None
    if not 0 <= index < BITS_PER_BYTE:
        raise BitIndexError(f"bit index {index} out of range 0..{BITS_PER_BYTE - 1}")
    return index


def _check_raw(value) -> int:
    try:
        value = as_int(value)
    except TypeError:
        raise TypeError(f"raw byte must be an int, got {type(value).__name__}") from None
    if not 0 <= value <= 0xFF:
        raise ValueError(f"raw byte {value} out of range 0..255")
    return value


class Byte:
    def __init__(self, raw: int = 0):
        self._raw = _check_raw(raw)

    @classmethod
    def from_raw(cls, value: int) -> "Byte":
        return cls(value)

    @classmethod
    def from_bits(cls, bits: Sequence[BitLike]) -> "Byte":
        """Build a byte from 8 bools or Bits, most-significant first.

        bits[0] sets index 7 and bits[7] sets index 0, so
        ``[True, False, True, False, False, False, False, True]`` is 0b1010_0001.
        Strings and other non-bool elements raise TypeError.
        """
        if isinstance(bits, (str, bytes, bytearray)):
            raise TypeError(f"expected a sequence of bools or Bits, got {type(bits).__name__}")
        if len(bits) != BITS_PER_BYTE:
            raise ValueError(f"expected {BITS_PER_BYTE} bits, got {len(bits)}")
        byte = cls()
        for pos, b in enumerate(bits):
            byte.set(BITS_PER_BYTE - 1 - pos, as_bool(b))
        return byte

    def get(self, index: int) -> Bit:
        return Bit((self._raw & (1 << check_index(index))) != 0)

    def set(self, index: int, value: BitLike) -> None:
        mask = 1 << check_index(index)
        if as_bool(value):
            self._raw |= mask
        else:
            self._raw &= ~mask & 0xFF

    # get_0 is the right-most bit, get_7 the left-most
    get_0 = partialmethod(get, 0)
    get_1 = partialmethod(get, 1)
    get_2 = partialmethod(get, 2)
    get_3 = partialmethod(get, 3)
    get_4 = partialmethod(get, 4)
    get_5 = partialmethod(get, 5)
    get_6 = partialmethod(get, 6)
    get_7 = partialmethod(get, 7)

    set_0 = partialmethod(set, 0)
    set_1 = partialmethod(set, 1)
    set_2 = partialmethod(set, 2)
    set_3 = partialmethod(set, 3)
    set_4 = partialmethod(set, 4)
    set_5 = partialmethod(set, 5)
    set_6 = partialmethod(set, 6)
    set_7 = partialmethod(set, 7)

    def as_raw(self) -> int:
        return self._raw

    def to_bits(self) -> Tuple[Bit, ...]:
        """Inverse of from_bits: 8 Bits, most-significant first."""
        return tuple(self.get(i) for i in reversed(range(BITS_PER_BYTE)))

    def to_array(self) -> numpy.ndarray:
        # same order as numpy.unpackbits
        return numpy.array([b.value() for b in self.to_bits()], dtype=bool)

    def copy(self) -> "Byte":
        return Byte(self._raw)

    def __iter__(self) -> BitIter:
        return BitIter(self)

    def __len__(self) -> int:
        return BITS_PER_BYTE

    def __getitem__(self, index: int) -> Bit:
        return self.get(index)

    def __setitem__(self, index: int, value: BitLike) -> None:
        self.set(index, value)

    def __int__(self) -> int:
        return self._raw

    __index__ = __int__

    def __eq__(self, other):
        if not isinstance(other, Byte):
            return NotImplemented
        return self._raw == other._raw

    __hash__ = None

    def __str__(self) -> str:
        return f"{self._raw:08b}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(0b{self._raw:08b})"


def format_table(byte: Byte) -> str:
    """Render the index table from the module docstring for one byte."""
    lines = [
        "| Index | Value | Boolean |",
        "|-------|-------|---------|",
    ]
    for i, bit in enumerate(byte):
        lines.append(f"| {i:<5} | {int(bit):<5} | {str(bit.value()):<7} |")
    return "\n".join(lines)
