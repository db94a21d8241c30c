# bit.py - The two-valued Bit shared by the unsigned and signed families
import enum

__all__ = [
    'Bit',
]

class Bit(enum.IntEnum):
    '''A single binary digit

    Integer valued so carries can be summed directly,
    ~b toggles it (rather than int's bitwise complement)
    '''
    ZERO = 0
    ONE = 1

    def __invert__(self):
        return Bit.ONE if self is Bit.ZERO else Bit.ZERO

    def __repr__(self):
        return 'Bit.{}'.format(self.name)

    def __str__(self):
        return str(self.value)

    @classmethod
    def of(cls, b):
        '''Bit of some truthy/falsy value
        '''
        return cls.ONE if b else cls.ZERO
