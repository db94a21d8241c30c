# arith.py - Carry propagating arithmetic over Signed
'''Two's complement arithmetic over the bit streams

Every operation peels bits off with `head`/`tail`, collecting the result
bits LSB first, until an operand reaches one of the two constant streams.
The result is then built back up from that base with `cons`.  None of them
go through the host int.
'''
from .bit import Bit
from .signed import (
    Signed, Constant, S_ZERO, S_MINUS_ONE, bit_not, cons, head, tail,
)
from .error_types import MalformedValueError

__all__ = [
    'succ',
    'pred',
    'neg',
    'czadd',
    'cadd',
    'add',
    'sub',
    'double',
    'mul',
]

def _check_signed(*zs):
    for z in zs:
        if not isinstance(z, Signed):
            raise MalformedValueError('Signed', z)

def _rebuild(lsbs, z):
    '''cons each of `lsbs' (LSB first) onto z
    '''
    for b in reversed(lsbs):
        z = cons(b, z)
    return z

def succ(z):
    '''z + 1
    '''
    _check_signed(z)

    # the carry runs through the trailing ones
    lsbs = []
    while not isinstance(z, Constant):
        t = tail(z)
        if head(z) is Bit.ZERO:
            return _rebuild(lsbs, cons(Bit.ONE, t))
        lsbs.append(Bit.ZERO)
        z = t

    # 0 + 1 = 1, -1 + 1 = 0
    base = cons(Bit.ONE, S_ZERO) if z.sign is Bit.ZERO else S_ZERO
    return _rebuild(lsbs, base)

def pred(z):
    '''z - 1
    '''
    _check_signed(z)

    # the borrow runs through the trailing zeros
    lsbs = []
    while not isinstance(z, Constant):
        t = tail(z)
        if head(z) is Bit.ONE:
            return _rebuild(lsbs, cons(Bit.ZERO, t))
        lsbs.append(Bit.ONE)
        z = t

    # 0 - 1 = -1, -1 - 1 = -2
    base = S_MINUS_ONE if z.sign is Bit.ZERO else cons(Bit.ZERO, S_MINUS_ONE)
    return _rebuild(lsbs, base)

def neg(z):
    return succ(bit_not(z))

def czadd(carry_low, carry_high, z):
    '''z + carry_low - carry_high
    '''
    carry_low, carry_high = Bit.of(carry_low), Bit.of(carry_high)
    if carry_low is carry_high:
        _check_signed(z)
        return z
    elif carry_low is Bit.ONE:
        return succ(z)
    return pred(z)

def cadd(a, b, carry):
    '''a + b + carry, one full adder per bit
    '''
    _check_signed(a, b)
    carry = Bit.of(carry)

    lsbs = []
    while not isinstance(a, Constant) and not isinstance(b, Constant):
        ha, hb = head(a), head(b)
        lsbs.append(Bit(ha ^ hb ^ carry))
        carry = Bit((ha & hb) | (carry & (ha ^ hb)))
        a, b = tail(a), tail(b)

    # a constant operand is 0 or -1, so only the carries are left to add
    if isinstance(a, Constant):
        base = czadd(carry, a.sign, b)
    else:
        base = czadd(carry, b.sign, a)

    return _rebuild(lsbs, base)

def add(a, b):
    return cadd(a, b, Bit.ZERO)

def sub(a, b):
    return add(a, neg(b))

def double(z):
    return cons(Bit.ZERO, z)

def mul(a, b):
    '''a * b, shifting and adding a once per bit of b
    '''
    _check_signed(a, b)

    heads = []
    while not isinstance(b, Constant):
        heads.append(head(b))
        b = tail(b)

    r = S_ZERO if b.sign is Bit.ZERO else neg(a)
    for h in reversed(heads):
        r = double(r)
        if h is Bit.ONE:
            r = add(r, a)

    return r
