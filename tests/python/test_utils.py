import unittest
import random
from array import array
from bitstring import BitArray
from src.radixsort.utils import (IntType, INT8, UINT8, INT16, INT64, UINT64,
                                 extract_byte, int_type_of, random_integers)


class TestUtils(unittest.TestCase):
    def test_int_type_bounds(self):
        assert(INT8.min_value == -128)
        assert(INT8.max_value == 127)
        assert(UINT8.min_value == 0)
        assert(UINT8.max_value == 255)
        assert(INT64.min_value == -2**63)
        assert(UINT64.max_value == 2**64 - 1)
        assert(INT16.bits == 16)
        assert(INT64.top_byte == 7)
        assert(IntType(3, False).max_value == 2**24 - 1)

    def test_contains(self):
        assert INT8.contains(-128)
        assert not INT8.contains(128)
        assert UINT64.contains(2**64 - 1)
        assert not UINT64.contains(-1)

    def test_int_type_of(self):
        assert(int_type_of(array('q')) == INT64)
        assert(int_type_of(array('Q')) == UINT64)
        assert(int_type_of(array('b')) == INT8)
        assert(int_type_of(array('H')) == IntType(2, False))
        assert(int_type_of(array('d')) is None)
        assert(int_type_of([1, 2, 3]) is None)
        for code in 'iIlL':
            assert(int_type_of(array(code)).width == array(code).itemsize)

    def test_extract_byte(self):
        value = BitArray(hex='0x0102030405060708').uint
        for i in range(8):
            assert(extract_byte(value, i) == 8 - i)
        assert(extract_byte(value, 8) == 0)

    def test_extract_byte_negative(self):
        for value in (-1, -2, -129, -2**63, -123456789):
            raw = BitArray(int=value, length=64).bytes
            for i in range(8):
                assert(extract_byte(value, i) == raw[7 - i])

    def test_random_integers(self):
        for int_type in (INT8, UINT8, INT64, UINT64):
            values = random_integers(int_type, 2000, random.Random(1))
            assert(len(values) == 2000)
            assert(all(int_type.contains(v) for v in values))
        signed = random_integers(INT8, 2000, random.Random(1))
        assert(min(signed) < 0 < max(signed))

    def test_random_integers_seeded(self):
        a = random_integers(INT64, 100, random.Random(42))
        b = random_integers(INT64, 100, random.Random(42))
        assert(a == b)
        assert(random_integers(UINT64, 0, random.Random(42)) == [])

    def test_random_integers_fields(self):
        class FixedBytes():
            def randbytes(self, n):
                return bytes([0x01, 0x80, 0xff, 0x7f])[:n]

        assert(random_integers(UINT8, 4, FixedBytes()) == [1, 128, 255, 127])
        assert(random_integers(INT8, 4, FixedBytes()) == [1, -128, -1, 127])
        assert(random_integers(INT16, 2, FixedBytes()) == [0x0180, -129])


if __name__ == '__main__':
    unittest.main()
