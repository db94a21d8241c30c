import pytest

from bitnum import strategies, unsigned, signed
from bitnum.unsigned import Unsigned, UnsignedBits, ZERO, ONE, Pos, Bit0, Bit1
from bitnum.signed import Signed, SignedBits, S_ZERO, S_MINUS_ONE
from bitnum.error_types import MissingStrategyError, NotANaturalError

def listify(t, d):
    return list(strategies.values(d, t))

def test_ints():
    assert listify(int, 2) == [0, 1, -1, 2, -2, 3, -3, -4]

def test_ints_depth_zero():
    assert listify(int, 0) == [0, -1]

def test_naturals():
    assert list(strategies.naturals(3)) == list(range(8))

def test_unsigned():
    assert listify(Unsigned, 2) == [ZERO, Pos(ONE), Pos(Bit0(ONE)), Pos(Bit1(ONE))]

def test_unsigned_bits_in_order():
    assert [unsigned.to_natural(p) for p in listify(UnsignedBits, 4)] == list(range(1, 16))

def test_signed_bits():
    assert [signed.to_integer(p) for p in listify(SignedBits, 2)] == [1, -2, 2, 3, -4, -3]

def test_signed():
    assert listify(Signed, 0) == [S_ZERO, S_MINUS_ONE]
    assert [signed.to_integer(z) for z in listify(Signed, 2)] == [0, -1, 1, -2, 2, -4, 3, -3]

def test_signed_covers_integers():
    for d in range(6):
        ns = [signed.to_integer(z) for z in listify(Signed, d)]
        assert len(ns) == len(set(ns))
        assert set(ns) == set(strategies.integers(d))

def test_value_args():
    assert list(strategies.value_args(1, int, Unsigned)) == [
        (0, ZERO), (0, Pos(ONE)),
        (1, ZERO), (1, Pos(ONE)),
        (-1, ZERO), (-1, Pos(ONE)),
        (-2, ZERO), (-2, Pos(ONE)),
    ]

def test_register(monkeypatch):
    class Marker:
        pass

    # register into a copy so Marker does not outlive this test
    monkeypatch.setattr(strategies, '_STRATEGIES', dict(strategies._STRATEGIES))

    @strategies.register(Marker)
    def markers(depth):
        yield from range(depth)

    assert listify(Marker, 3) == [0, 1, 2]
    assert Marker in strategies._STRATEGIES

def test_register_does_not_leak():
    assert set(strategies._STRATEGIES) == {int, UnsignedBits, Unsigned, SignedBits, Signed}

def test_missing_strategy():
    with pytest.raises(MissingStrategyError):
        listify(str, 1)

def test_negative_depth():
    with pytest.raises(NotANaturalError):
        listify(int, -1)
