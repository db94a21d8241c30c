class BitnumError(Exception):
    pass

class NotANaturalError(BitnumError, ValueError):
    def __init__(self, what, n):
        super().__init__('{} must be a natural number, got {!r}'.format(what, n))
        self.n = n

class MalformedValueError(BitnumError, TypeError):
    def __init__(self, expected, v):
        super().__init__('expected {}, got {!r}'.format(expected, v))
        self.value = v

def check_natural(what, n):
    '''Check `n' is a non-negative int, raise otherwise
    '''
    if not isinstance(n, int):
        raise MalformedValueError('int', n)

    if n < 0:
        raise NotANaturalError(what, n)

    return n

class MissingStrategyError(BitnumError, LookupError):
    pass
