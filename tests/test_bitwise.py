import pytest

from bitnum import bitwise, unsigned, strategies
from bitnum.bit import Bit
from bitnum.unsigned import ZERO, ONE, Pos, Bit1
from bitnum.error_types import NotANaturalError, MalformedValueError

N = unsigned.from_natural
V = unsigned.to_natural

DEPTH = 4

def pairs(depth=DEPTH):
    return strategies.value_args(depth, unsigned.Unsigned, unsigned.Unsigned)

def test_or_example():
    assert V(bitwise.lor(N(5), N(3))) == 7

def test_and_example():
    assert V(bitwise.land(N(12), N(10))) == 8

def test_xor_example():
    assert V(bitwise.lxor(N(6), N(3))) == 5

def test_and_not_example():
    assert V(bitwise.and_not(N(12), N(10))) == 4

def test_or_one():
    assert bitwise.lor_bits(ONE, ONE) == ONE
    assert bitwise.lor(N(1), N(2)) == Pos(Bit1(ONE))
    assert bitwise.lor(N(1), N(3)) == N(3)

def test_oracle():
    for a, b in pairs():
        x, y = V(a), V(b)
        assert V(bitwise.lor(a, b)) == x | y
        assert V(bitwise.land(a, b)) == x & y
        assert V(bitwise.lxor(a, b)) == x ^ y
        assert V(bitwise.and_not(a, b)) == x & ~y

def test_results_are_canonical():
    for a, b in pairs():
        for op in (bitwise.lor, bitwise.land, bitwise.lxor, bitwise.and_not):
            r = op(a, b)
            assert N(V(r)) == r

def test_commutative():
    for a, b in pairs():
        assert bitwise.lor(a, b) == bitwise.lor(b, a)
        assert bitwise.land(a, b) == bitwise.land(b, a)
        assert bitwise.lxor(a, b) == bitwise.lxor(b, a)

def test_self_laws():
    for a in strategies.unsigned(5):
        assert bitwise.land(a, a) == a
        assert bitwise.lor(a, a) == a
        assert bitwise.lxor(a, a) == ZERO
        assert bitwise.and_not(a, a) == ZERO

def test_absorption():
    for a, b in pairs():
        assert bitwise.lor(a, bitwise.land(a, b)) == a

def test_bits_agree():
    for a, b in pairs():
        for i in range(DEPTH + 2):
            ta, tb = bitwise.test_bit(a, i), bitwise.test_bit(b, i)
            assert bitwise.test_bit(bitwise.lor(a, b), i) == (ta | tb)
            assert bitwise.test_bit(bitwise.land(a, b), i) == (ta & tb)
            assert bitwise.test_bit(bitwise.lxor(a, b), i) == (ta ^ tb)
            assert bitwise.test_bit(bitwise.and_not(a, b), i) == (ta & ~tb)

def test_test_bit():
    assert bitwise.test_bit(ZERO, 0) is Bit.ZERO
    assert bitwise.test_bit(N(4), 2) is Bit.ONE
    assert bitwise.test_bit(N(4), 100) is Bit.ZERO
    for a in strategies.unsigned(5):
        for i in range(7):
            assert bitwise.test_bit(a, i) == (V(a) >> i) & 1

def test_set_bit_indices_example():
    assert list(bitwise.set_bit_indices(N(11))) == [0, 1, 3]

def test_set_bit_indices_zero():
    assert list(bitwise.set_bit_indices(ZERO)) == []

def test_set_bit_indices_restartable():
    indices = bitwise.set_bit_indices(N(0b100101))
    assert list(indices) == [0, 2, 5]
    assert list(indices) == [0, 2, 5]

def test_set_bit_indices_oracle():
    for a in strategies.unsigned(6):
        idxs = list(bitwise.set_bit_indices(a))
        assert idxs == sorted(set(idxs))
        assert sum(2 ** i for i in idxs) == V(a)

def test_shift_example():
    assert V(bitwise.shift_left(N(5), 3)) == 40

def test_shifts():
    for a in strategies.unsigned(5):
        for k in range(8):
            assert V(bitwise.shift_left(a, k)) == V(a) * 2 ** k
            assert V(bitwise.shift_right(a, k)) == V(a) >> k
            assert bitwise.shift_right(bitwise.shift_left(a, k), k) == a

def test_shift_right_to_zero():
    assert bitwise.shift_right(N(7), 3) is ZERO

def test_negative_shift():
    with pytest.raises(NotANaturalError):
        bitwise.shift_left(N(1), -1)

def test_negative_index():
    with pytest.raises(NotANaturalError):
        bitwise.test_bit(N(1), -1)

def test_not_unsigned():
    with pytest.raises(MalformedValueError):
        bitwise.lor(5, N(3))

def test_lor_bits_not_unsigned_bits():
    with pytest.raises(MalformedValueError):
        bitwise.lor_bits(ONE, 3)
    with pytest.raises(MalformedValueError):
        bitwise.lor_bits(N(3), ONE)

def test_set_bit_indices_not_unsigned():
    with pytest.raises(MalformedValueError):
        bitwise.set_bit_indices(5)

WIDE_A = 2 ** 1500 + 1
WIDE_B = 3 ** 1000

def test_wide_self_laws():
    a = N(WIDE_A)
    assert bitwise.lor(a, a) == a
    assert bitwise.land(a, a) == a
    assert bitwise.lxor(a, a) == ZERO
    assert bitwise.and_not(a, a) == ZERO

def test_wide_oracle():
    for x, y in [(WIDE_A, WIDE_B), (WIDE_B, WIDE_A), (WIDE_A, 6), (1, WIDE_B)]:
        a, b = N(x), N(y)
        assert V(bitwise.lor(a, b)) == x | y
        assert V(bitwise.land(a, b)) == x & y
        assert V(bitwise.lxor(a, b)) == x ^ y
        assert V(bitwise.and_not(a, b)) == x & ~y
        assert V(Pos(bitwise.lor_bits(a.bits, b.bits))) == x | y
