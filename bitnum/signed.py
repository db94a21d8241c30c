# signed.py - Two's complement integers as eventually-constant bit streams
import attr

from .bit import Bit
from .error_types import MalformedValueError, check_natural

__all__ = [
    'SignedBits',
    'Edge',
    'Cons',
    'Signed',
    'Constant',
    'NonConstant',
    'S_ZERO',
    'S_MINUS_ONE',
    'sign',
    'bit_not',
    'cons',
    'head',
    'tail',
    'test_bit',
    'bits',
    'from_integer',
    'to_integer',
]

# Streams are as long as the value, so equality, hashing and repr walk
# them in a loop rather than using the nested attrs versions

class SignedBits:
    '''A bit stream that is not constant, i.e. any integer but 0 and -1

    ``Edge(b)`` is bit b followed by ~b forever (1 or -2)
    and ``Cons(lsb, rest)`` prepends an LSB to rest (2*rest + lsb)
    '''
    __slots__ = ()

    def __int__(self):
        return to_integer(self)

    def __str__(self):
        return str(to_integer(self))

    def __eq__(self, other):
        if not isinstance(other, SignedBits):
            return NotImplemented

        p, q = self, other
        while type(p) is type(q) and p.lsb is q.lsb:
            if isinstance(p, Edge):
                return True
            p, q = p.rest, q.rest

        return False

    def __hash__(self):
        return hash((SignedBits, to_integer(self)))

    def __repr__(self):
        lsbs = []
        p = self
        while isinstance(p, Cons):
            lsbs.append(p.lsb)
            p = p.rest

        return (''.join('Cons(lsb={!r}, rest='.format(b) for b in lsbs)
                + 'Edge(lsb={!r})'.format(p.lsb) + ')' * len(lsbs))

@attr.s(frozen=True, slots=True, eq=False, repr=False)
class Edge(SignedBits):
    lsb = attr.ib(validator=attr.validators.instance_of(Bit))

@attr.s(frozen=True, slots=True, eq=False, repr=False)
class Cons(SignedBits):
    lsb = attr.ib(validator=attr.validators.instance_of(Bit))
    rest = attr.ib(validator=attr.validators.instance_of(SignedBits))

class Signed:
    '''Any integer: a constant stream (0 or -1) or some SignedBits
    '''
    __slots__ = ()

    def __int__(self):
        return to_integer(self)

    def __str__(self):
        return str(to_integer(self))

    def __eq__(self, other):
        if not isinstance(other, Signed):
            return NotImplemented
        elif type(self) is not type(other):
            return False
        elif isinstance(self, Constant):
            return self.sign is other.sign

        return self.bits == other.bits

    def __hash__(self):
        return hash((Signed, to_integer(self)))

    def __repr__(self):
        if isinstance(self, Constant):
            return 'Constant(sign={!r})'.format(self.sign)
        return 'NonConstant(bits={!r})'.format(self.bits)

@attr.s(frozen=True, slots=True, eq=False, repr=False)
class Constant(Signed):
    sign = attr.ib(validator=attr.validators.instance_of(Bit))

@attr.s(frozen=True, slots=True, eq=False, repr=False)
class NonConstant(Signed):
    bits = attr.ib(validator=attr.validators.instance_of(SignedBits))

S_ZERO = Constant(Bit.ZERO)
S_MINUS_ONE = Constant(Bit.ONE)

def _constant(b):
    return S_MINUS_ONE if b else S_ZERO

def _unwrap(z):
    if isinstance(z, NonConstant):
        return z.bits
    elif isinstance(z, (Constant, SignedBits)):
        return z

    raise MalformedValueError('Signed', z)

def sign(z):
    '''The bit the stream is eventually constant at
    '''
    z = _unwrap(z)
    while isinstance(z, Cons):
        z = z.rest

    if isinstance(z, Constant):
        return z.sign
    return ~z.lsb

def _bit_not_bits(p):
    lsbs = []
    while isinstance(p, Cons):
        lsbs.append(~p.lsb)
        p = p.rest

    r = Edge(~p.lsb)
    for b in reversed(lsbs):
        r = Cons(b, r)

    return r

def bit_not(z):
    '''-z - 1, every bit flipped
    '''
    z = _unwrap(z)
    if isinstance(z, Constant):
        return _constant(~z.sign)

    return NonConstant(_bit_not_bits(z))

def cons(lsb, rest):
    '''2*rest + lsb

    Prepending the extension bit to a constant stream gives the same
    constant back, so those two cases collapse to Constant
    '''
    if not isinstance(rest, Signed):
        raise MalformedValueError('Signed', rest)

    lsb = Bit.of(lsb)
    if isinstance(rest, Constant):
        if lsb is rest.sign:
            return rest
        return NonConstant(Edge(lsb))

    return NonConstant(Cons(lsb, rest.bits))

def head(z):
    z = _unwrap(z)
    if isinstance(z, Constant):
        return z.sign
    return z.lsb

def tail(z):
    '''z >> 1, keeping the sign
    '''
    z = _unwrap(z)
    if isinstance(z, Constant):
        return z
    elif isinstance(z, Edge):
        return _constant(~z.lsb)

    return NonConstant(z.rest)

def test_bit(z, i):
    check_natural('bit index', i)
    for _ in range(i):
        z = tail(z)
        if isinstance(z, Constant):
            return z.sign

    return head(z)

def bits(z, n):
    '''The first `n' bits of z, LSB first
    '''
    check_natural('bit count', n)
    out = []
    for _ in range(n):
        out.append(head(z))
        z = tail(z)

    return out

def from_integer(n):
    '''Canonical Signed of the int `n'
    '''
    if not isinstance(n, int):
        raise MalformedValueError('int', n)

    lsbs = []
    while n not in (0, -1):
        lsbs.append(Bit(n & 1))
        n >>= 1

    z = _constant(n == -1)
    for b in reversed(lsbs):
        z = cons(b, z)

    return z

def to_integer(z):
    '''int value of some Signed or SignedBits
    '''
    z = _unwrap(z)
    lsbs = []
    while isinstance(z, Cons):
        lsbs.append(z.lsb)
        z = z.rest

    if isinstance(z, Constant):
        n = -z.sign
    elif isinstance(z, Edge):
        n = 1 if z.lsb else -2
    else:
        raise MalformedValueError('Signed', z)

    for b in reversed(lsbs):
        n = 2 * n + b

    return n
