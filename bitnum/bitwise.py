# bitwise.py - Boolean operations and shifts over Unsigned
import attr

from .bit import Bit
from .unsigned import (
    Unsigned, UnsignedBits, One, Bit0, Bit1, Zero, Pos, ONE, ZERO, bit0, bit1,
)
from .error_types import MalformedValueError, check_natural

__all__ = [
    'lor',
    'lor_bits',
    'land',
    'and_not',
    'lxor',
    'test_bit',
    'set_bit_indices',
    'BitIndices',
    'shift_left',
    'shift_right',
]

def _check_unsigned(*us):
    for u in us:
        if not isinstance(u, Unsigned):
            raise MalformedValueError('Unsigned', u)

def _zip_bits(p, q):
    '''Walk p and q together from the LSB until either reaches its leading One

    Returns the node pairs passed on the way, LSB first, and the two nodes
    stopped at
    '''
    pairs = []
    while not isinstance(p, One) and not isinstance(q, One):
        pairs.append((p, q))
        p, q = p.rest, q.rest

    return pairs, p, q

def _lor_bits(p, q):
    pairs, p, q = _zip_bits(p, q)
    if isinstance(p, One):
        r = ONE if isinstance(q, One) else Bit1(q.rest)
    else:
        r = Bit1(p.rest)

    for p, q in reversed(pairs):
        if isinstance(p, Bit0) and isinstance(q, Bit0):
            r = Bit0(r)
        else:
            r = Bit1(r)

    return r

def lor_bits(p, q):
    '''p | q, which is never zero
    '''
    for u in (p, q):
        if not isinstance(u, UnsignedBits):
            raise MalformedValueError('UnsignedBits', u)

    return _lor_bits(p, q)

def lor(a, b):
    _check_unsigned(a, b)
    if isinstance(a, Zero):
        return b
    elif isinstance(b, Zero):
        return a

    return Pos(_lor_bits(a.bits, b.bits))

def _land_bits(p, q):
    pairs, p, q = _zip_bits(p, q)
    if isinstance(p, One):
        r = Pos(ONE) if isinstance(q, (One, Bit1)) else ZERO
    else:
        r = Pos(ONE) if isinstance(p, Bit1) else ZERO

    for p, q in reversed(pairs):
        if isinstance(p, Bit1) and isinstance(q, Bit1):
            r = bit1(r)
        else:
            r = bit0(r)

    return r

def land(a, b):
    _check_unsigned(a, b)
    if isinstance(a, Zero) or isinstance(b, Zero):
        return ZERO

    return _land_bits(a.bits, b.bits)

def _and_not_bits(p, q):
    pairs, p, q = _zip_bits(p, q)
    if isinstance(p, One):
        r = ZERO if isinstance(q, (One, Bit1)) else Pos(ONE)
    else:
        # clear the LSB
        r = Pos(Bit0(p.rest))

    for p, q in reversed(pairs):
        if isinstance(p, Bit1) and isinstance(q, Bit0):
            r = bit1(r)
        else:
            r = bit0(r)

    return r

def and_not(a, b):
    '''a & ~b
    '''
    _check_unsigned(a, b)
    if isinstance(a, Zero):
        return ZERO
    elif isinstance(b, Zero):
        return a

    return _and_not_bits(a.bits, b.bits)

def _lxor_bits(p, q):
    pairs, p, q = _zip_bits(p, q)
    if isinstance(p, One):
        p, q = q, p

    if isinstance(p, One):
        r = ZERO
    elif isinstance(p, Bit0):
        # q is One, flip the LSB of p
        r = Pos(Bit1(p.rest))
    else:
        r = Pos(Bit0(p.rest))

    for p, q in reversed(pairs):
        if type(p) is type(q):
            r = bit0(r)
        else:
            r = bit1(r)

    return r

def lxor(a, b):
    _check_unsigned(a, b)
    if isinstance(a, Zero):
        return b
    elif isinstance(b, Zero):
        return a

    return _lxor_bits(a.bits, b.bits)

def test_bit(a, i):
    '''Bit `i' of a, the LSB being bit 0
    '''
    _check_unsigned(a)
    check_natural('bit index', i)
    if isinstance(a, Zero):
        return Bit.ZERO

    p = a.bits
    while i > 0:
        if isinstance(p, One):
            return Bit.ZERO
        p = p.rest
        i -= 1

    return Bit.ZERO if isinstance(p, Bit0) else Bit.ONE

@attr.s(frozen=True, slots=True)
class BitIndices:
    '''The indices of the set bits of some Unsigned, in increasing order

    Iterating again starts again from the LSB
    '''
    value = attr.ib(validator=attr.validators.instance_of(Unsigned))

    def __iter__(self):
        if isinstance(self.value, Zero):
            return

        p = self.value.bits
        i = 0
        while not isinstance(p, One):
            if isinstance(p, Bit1):
                yield i
            p = p.rest
            i += 1

        yield i

def set_bit_indices(a):
    _check_unsigned(a)
    return BitIndices(a)

def shift_left(a, k):
    '''a * 2**k
    '''
    _check_unsigned(a)
    check_natural('shift', k)
    if isinstance(a, Zero):
        return ZERO

    p = a.bits
    for _ in range(k):
        p = Bit0(p)

    return Pos(p)

def shift_right(a, k):
    '''a // 2**k
    '''
    _check_unsigned(a)
    check_natural('shift', k)
    if isinstance(a, Zero):
        return ZERO

    p = a.bits
    for _ in range(k):
        if isinstance(p, One):
            return ZERO
        p = p.rest

    return Pos(p)
