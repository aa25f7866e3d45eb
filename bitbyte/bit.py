import operator

import numpy

BOOL_TYPES = (bool, numpy.bool_)


def as_bool(value) -> bool:
    """Accept only real truth values: bool, numpy.bool_ or Bit."""
    if isinstance(value, Bit):
        return value.value()
    if not isinstance(value, BOOL_TYPES):
        raise TypeError(f"expected a bool or Bit, got {type(value).__name__}")
    return bool(value)


def as_int(value) -> int:
    # numpy integer scalars go through __index__; bools are not integers here
    if isinstance(value, BOOL_TYPES):
        raise TypeError(f"expected an int, got {type(value).__name__}")
    return operator.index(value)


class Bit:
    """A single bit. 0 is False, 1 is True.

    Immutable; there is no unset state.
    """

    __slots__ = ("_value",)

    def __init__(self, value: bool = False):
        object.__setattr__(self, "_value", as_bool(value))

    @classmethod
    def from_bool(cls, value: bool) -> "Bit":
        return cls(value)

    @classmethod
    def from_integer(cls, n: int) -> "Bit":
        """Any nonzero unsigned integer maps to a 1 bit, zero to a 0 bit.

        This is lossy: 1, 2 and 100 all give the same bit.
        """
        n = as_int(n)
        if n < 0:
            raise ValueError(f"expected an unsigned int, got {n}")
        return cls(n != 0)

    @classmethod
    def zero_bit(cls) -> "Bit":
        return cls(False)

    @classmethod
    def one_bit(cls) -> "Bit":
        return cls(True)

    def value(self) -> bool:
        return self._value

    def is_one(self) -> bool:
        return self._value

    def is_zero(self) -> bool:
        return not self.is_one()

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __reduce__(self):
        return (self.__class__, (self._value,))

    def __bool__(self) -> bool:
        return self._value

    def __int__(self) -> int:
        return 1 if self._value else 0

    def __eq__(self, other):
        if not isinstance(other, Bit):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((Bit, self._value))

    def __repr__(self) -> str:
        return f"Bit({int(self)})"
