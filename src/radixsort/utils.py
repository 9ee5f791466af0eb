from array import array
from collections import namedtuple
from bitstring import BitArray


class IntType(namedtuple('IntType', ['width', 'signed'])):
    """
    A fixed-width integer type.

    width: size of one element in bytes
    signed: True if the most significant bit is a two's complement sign bit
    """
    __slots__ = ()

    @property
    def bits(self):
        return self.width * 8

    @property
    def top_byte(self):
        return self.width - 1

    @property
    def min_value(self):
        if self.signed:
            return -(1 << (self.bits - 1))
        return 0

    @property
    def max_value(self):
        if self.signed:
            return (1 << (self.bits - 1)) - 1
        return (1 << self.bits) - 1

    def contains(self, value):
        return self.min_value <= value <= self.max_value


INT8 = IntType(1, True)
UINT8 = IntType(1, False)
INT16 = IntType(2, True)
UINT16 = IntType(2, False)
INT32 = IntType(4, True)
UINT32 = IntType(4, False)
INT64 = IntType(8, True)
UINT64 = IntType(8, False)

# Integer type codes of array.array. Widths of 'i', 'l' and friends are
# platform dependent, so they are read off the interpreter.
integer_typecodes = 'bBhHiIlLqQ'

typecode_int_types = {
    code: IntType(array(code).itemsize, code.islower())
    for code in integer_typecodes
}


def int_type_of(seq):
    """
    Return the IntType of the elements of seq, or None if seq does not
    declare a fixed-width integer element type.
    """
    return typecode_int_types.get(getattr(seq, 'typecode', None))


def extract_byte(value, byte_index):
    """
    Return byte number byte_index of value, counting from the least
    significant byte. Negative values give the bytes of their two's
    complement representation.
    """
    return (value >> (byte_index * 8)) & 0xff


def random_integers(int_type, size, rng):
    """
    Return a list of size uniformly random values of int_type.
    rng: random.Random used as the byte source
    """
    if size == 0:
        return []
    bits = BitArray(rng.randbytes(int_type.width * size))
    if int_type.signed:
        return [field.int for field in bits.cut(int_type.bits)]
    return [field.uint for field in bits.cut(int_type.bits)]
