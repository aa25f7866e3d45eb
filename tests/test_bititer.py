from bitbyte.bit import Bit
from bitbyte.bititer import BitIter
from bitbyte.byte import Byte


def test_iter_zero():
    for bit in Byte.from_raw(0):
        assert bit.is_zero()
    assert list(Byte.from_raw(255)) == [Bit.one_bit()] * 8


def test_iter_order():
    b = Byte.from_raw(0)
    for i in (1, 2, 3, 4, 6):
        b.set(i, True)
    it = iter(b)
    expect = [False, True, True, True, True, False, True, False]
    for e in expect:
        assert next(it) == Bit(e)
    assert next(it, None) is None
    assert next(it, None) is None
    assert list(it) == []


def test_iter_remain():
    it = BitIter(Byte.from_raw(0xA5))
    assert it.remain() == 8
    assert len(it) == 8
    for n in range(7, -1, -1):
        next(it)
        assert it.remain() == n
        assert len(it) == n
        assert it.__length_hint__() == n
    assert next(it, None) is None
    assert it.remain() == 0


def test_iter_snapshot():
    b = Byte.from_raw(0)
    it = iter(b)
    b.set(0, True)
    b.set(7, True)
    assert not any(it)
    assert list(b)[0].is_one()


def test_iter_not_restartable():
    it = iter(Byte.from_raw(0xFF))
    assert len(list(it)) == 8
    assert len(list(it)) == 0
    assert iter(it) is it
    assert repr(it) == "BitIter(bitpos=8,remain=0,raw=0xff)"
