# strategies.py - Exhaustive enumeration of representation values
'''Every representation value up to some depth (number of tree nodes),
smallest first, so properties can be checked exhaustively against the
host int

i.e.
    list(values(2, Unsigned)) ->
        [Zero(), Pos(bits=One()), Pos(bits=Bit0(rest=One())), Pos(bits=Bit1(rest=One()))]
'''
import logging
import itertools
import collections

from .bit import Bit
from .unsigned import UnsignedBits, Unsigned, Bit0, Bit1, Pos, ONE, ZERO
from .signed import SignedBits, Signed, Edge, Cons, NonConstant, S_ZERO, S_MINUS_ONE, sign
from .error_types import MissingStrategyError, check_natural

log = logging.getLogger('strategies')

__all__ = [
    'register',
    'values',
    'value_args',
    'naturals',
    'integers',
    'unsigned_bits',
    'unsigned',
    'signed_bits',
    'signed',
]

_STRATEGIES = {}

def register(t):
    '''Register the decorated generator function as the strategy for type `t'
    '''
    def decorator(f):
        _STRATEGIES[t] = f
        return f
    return decorator

def values(depth, t):
    check_natural('depth', depth)
    try:
        strat = _STRATEGIES[t]
    except KeyError:
        raise MissingStrategyError('no strategy for {!r}'.format(t)) from None

    log.debug('values({}, {})'.format(depth, t.__name__))
    yield from strat(depth)

def value_args(depth, *types):
    '''All tuples of values of `types'
    i.e.
        value_args(1, int, Unsigned) ->
            (0, Zero())
            (0, Pos(bits=One()))
            (1, Zero())
            ...
    '''
    yield from itertools.product(*[list(values(depth, t)) for t in types])

def _intersperse(*its):
    iters = collections.deque(map(iter, its))
    while iters:
        i = iters.popleft()
        try:
            yield next(i)
        except StopIteration:
            continue
        iters.append(i)

def naturals(depth):
    yield from range(2 ** depth)

@register(int)
def integers(depth):
    '''0, 1, -1, 2, -2, ... down to -2**depth
    '''
    yield 0
    for i in range(1, 2 ** depth):
        yield i
        yield -i
    yield -2 ** depth

def _levels(first, grow, depth):
    level = list(first)
    for _ in range(depth):
        yield level
        level = [q for p in level for q in grow(p)]

@register(UnsignedBits)
def unsigned_bits(depth):
    for level in _levels([ONE], lambda p: (Bit0(p), Bit1(p)), depth):
        yield from level

@register(Unsigned)
def unsigned(depth):
    yield ZERO
    for p in unsigned_bits(depth):
        yield Pos(p)

def _signed_levels(depth):
    first = [Edge(Bit.ONE), Edge(Bit.ZERO)]
    return _levels(first, lambda p: (Cons(Bit.ZERO, p), Cons(Bit.ONE, p)), depth)

@register(SignedBits)
def signed_bits(depth):
    for level in _signed_levels(depth):
        yield from level

@register(Signed)
def signed(depth):
    yield S_ZERO
    yield S_MINUS_ONE

    for level in _signed_levels(depth):
        positives = [NonConstant(p) for p in level if sign(p) is Bit.ZERO]
        negatives = [NonConstant(p) for p in level if sign(p) is Bit.ONE]
        yield from _intersperse(positives, negatives)
