# unsigned.py - Binary tree encoding of the natural numbers
import attr

from .error_types import MalformedValueError, check_natural

__all__ = [
    'UnsignedBits',
    'One',
    'Bit0',
    'Bit1',
    'Unsigned',
    'Zero',
    'Pos',
    'ONE',
    'ZERO',
    'from_natural',
    'to_natural',
    'succ',
    'pred',
    'bit0',
    'bit1',
    'bit_length',
    'compare',
]

# Trees are as deep as the value is long, so equality, hashing and repr
# walk the spine in a loop rather than using the nested attrs versions

class UnsignedBits:
    '''A strictly positive integer, MSB at the root ``One``
    and each ``Bit0``/``Bit1`` node appending a lower bit
    '''
    __slots__ = ()

    def __int__(self):
        return to_natural(self)

    def __str__(self):
        return str(to_natural(self))

    def __eq__(self, other):
        if not isinstance(other, UnsignedBits):
            return NotImplemented

        p, q = self, other
        while type(p) is type(q):
            if isinstance(p, One):
                return True
            p, q = p.rest, q.rest

        return False

    def __hash__(self):
        return hash((UnsignedBits, to_natural(self)))

    def __repr__(self):
        names = []
        p = self
        while not isinstance(p, One):
            names.append(type(p).__name__)
            p = p.rest

        return ''.join('{}(rest='.format(n) for n in names) + 'One()' + ')' * len(names)

@attr.s(frozen=True, slots=True, eq=False, repr=False)
class One(UnsignedBits):
    pass

@attr.s(frozen=True, slots=True, eq=False, repr=False)
class Bit0(UnsignedBits):
    rest = attr.ib(validator=attr.validators.instance_of(UnsignedBits))

@attr.s(frozen=True, slots=True, eq=False, repr=False)
class Bit1(UnsignedBits):
    rest = attr.ib(validator=attr.validators.instance_of(UnsignedBits))

class Unsigned:
    '''Zero or some UnsignedBits
    '''
    __slots__ = ()

    def __int__(self):
        return to_natural(self)

    def __str__(self):
        return str(to_natural(self))

    def __eq__(self, other):
        if not isinstance(other, Unsigned):
            return NotImplemented
        elif isinstance(self, Zero) or isinstance(other, Zero):
            return type(self) is type(other)

        return self.bits == other.bits

    def __hash__(self):
        return hash((Unsigned, to_natural(self)))

    def __repr__(self):
        if isinstance(self, Zero):
            return 'Zero()'
        return 'Pos(bits={!r})'.format(self.bits)

@attr.s(frozen=True, slots=True, eq=False, repr=False)
class Zero(Unsigned):
    pass

@attr.s(frozen=True, slots=True, eq=False, repr=False)
class Pos(Unsigned):
    bits = attr.ib(validator=attr.validators.instance_of(UnsignedBits))

ONE = One()
ZERO = Zero()

def from_natural(n):
    '''Canonical Unsigned of the int `n'
    '''
    check_natural('from_natural', n)
    if n == 0:
        return ZERO

    # peel LSBs until only the leading 1 is left
    lsbs = []
    while n > 1:
        lsbs.append(n & 1)
        n >>= 1

    p = ONE
    for b in reversed(lsbs):
        p = Bit1(p) if b else Bit0(p)

    return Pos(p)

def to_natural(u):
    '''int value of some Unsigned or UnsignedBits
    '''
    if isinstance(u, Zero):
        return 0
    elif isinstance(u, Pos):
        u = u.bits

    lsbs = []
    while not isinstance(u, One):
        if isinstance(u, Bit0):
            lsbs.append(0)
        elif isinstance(u, Bit1):
            lsbs.append(1)
        else:
            raise MalformedValueError('Unsigned', u)
        u = u.rest

    n = 1
    for b in reversed(lsbs):
        n = 2 * n + b

    return n

def _check_bits(*ps):
    for p in ps:
        if not isinstance(p, UnsignedBits):
            raise MalformedValueError('UnsignedBits', p)

def succ(p):
    _check_bits(p)

    # the carry runs through the trailing Bit1s
    ones = 0
    while isinstance(p, Bit1):
        ones += 1
        p = p.rest

    r = Bit0(ONE) if isinstance(p, One) else Bit1(p.rest)
    for _ in range(ones):
        r = Bit0(r)

    return r

def pred(p):
    '''p - 1, which may be Zero
    '''
    _check_bits(p)

    # the borrow runs through the trailing Bit0s, 2r - 1 = 2(r - 1) + 1
    zeros = 0
    while isinstance(p, Bit0):
        zeros += 1
        p = p.rest

    r = ZERO if isinstance(p, One) else Pos(Bit0(p.rest))
    for _ in range(zeros):
        r = bit1(r)

    return r

def bit0(u):
    '''2u
    '''
    if isinstance(u, Zero):
        return ZERO
    elif isinstance(u, Pos):
        return Pos(Bit0(u.bits))

    raise MalformedValueError('Unsigned', u)

def bit1(u):
    '''2u + 1
    '''
    if isinstance(u, Zero):
        return Pos(ONE)
    elif isinstance(u, Pos):
        return Pos(Bit1(u.bits))

    raise MalformedValueError('Unsigned', u)

def bit_length(u):
    if isinstance(u, Zero):
        return 0
    elif isinstance(u, Pos):
        u = u.bits

    n = 1
    while not isinstance(u, One):
        if not isinstance(u, (Bit0, Bit1)):
            raise MalformedValueError('Unsigned', u)
        n += 1
        u = u.rest

    return n

def _compare_bits(p, q):
    pairs = []
    while not isinstance(p, One) and not isinstance(q, One):
        pairs.append((p, q))
        p, q = p.rest, q.rest

    if isinstance(p, One):
        c = 0 if isinstance(q, One) else -1
    else:
        c = 1

    # higher bits decide, on a tie the lowest differing bit does
    for p, q in reversed(pairs):
        if type(p) is type(q):
            continue
        elif isinstance(p, Bit0):
            c = 1 if c > 0 else -1
        else:
            c = -1 if c < 0 else 1

    return c

def compare(a, b):
    '''-1, 0 or 1 as a is less than, equal to or greater than b
    '''
    for u in (a, b):
        if not isinstance(u, Unsigned):
            raise MalformedValueError('Unsigned', u)

    if isinstance(a, Zero):
        return 0 if isinstance(b, Zero) else -1
    elif isinstance(b, Zero):
        return 1

    return _compare_bits(a.bits, b.bits)
