import argparse
import random
import time
from array import array
from collections import namedtuple

from .radix_sort import sort, SORT_THRESHOLD
from .utils import INT64, UINT64, random_integers

DEFAULT_SIZE = 100000

ProfileResult = namedtuple('ProfileResult',
                           ['title', 'baseline_ms', 'radix_ms', 'equal'])


def random_unsigned_array(size, rng):
    return array('Q', random_integers(UINT64, size, rng))


def random_signed_array(size, rng):
    return array('q', random_integers(INT64, size, rng))


def random_unsigned_list(size, rng):
    return random_integers(UINT64, size, rng)


def random_signed_list(size, rng):
    return random_integers(INT64, size, rng)


def _copy(data):
    if isinstance(data, array):
        return array(data.typecode, data)
    return list(data)


def _milliseconds(begin, end):
    return int((end - begin) * 1000)


def profile(title, data, int_type=None, threshold=SORT_THRESHOLD):
    """
    Sort two copies of data, one with sorted() and one with the radix sort,
    and print how long each took and whether they agree.
    data is left untouched.
    """
    print("---", title, "---")
    data2 = _copy(data)

    begin = time.perf_counter()
    data1 = sorted(data)
    end = time.perf_counter()
    baseline_ms = _milliseconds(begin, end)
    print("sorted() in", baseline_ms, "milliseconds.")

    begin = time.perf_counter()
    sort(data2, int_type=int_type, threshold=threshold)
    end = time.perf_counter()
    radix_ms = _milliseconds(begin, end)
    print("Radix sort in", radix_ms, "milliseconds.")

    equal = data1 == list(data2)
    print("Equal:", equal)
    return ProfileResult(title, baseline_ms, radix_ms, equal)


def run(size, rng, threshold=SORT_THRESHOLD):
    """
    Profile unsigned and signed 64-bit inputs, first as arrays, then as
    lists, and return the four ProfileResults.
    """
    results = [
        profile("Unsigned array", random_unsigned_array(size, rng),
                threshold=threshold),
        profile("Signed array", random_signed_array(size, rng),
                threshold=threshold),
        profile("Unsigned list", random_unsigned_list(size, rng),
                int_type=UINT64, threshold=threshold),
        profile("Signed list", random_signed_list(size, rng),
                int_type=INT64, threshold=threshold),
    ]
    print("Bye!")
    return results


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Compare the radix sort against sorted() on random "
                    "64-bit integers.")
    parser.add_argument("--size", type=int, default=DEFAULT_SIZE,
                        help="number of elements per run")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for the input generator")
    parser.add_argument("--threshold", type=int, default=SORT_THRESHOLD,
                        help="range length below which sorted() is used")
    args = parser.parse_args(argv)

    if args.size < 0:
        parser.error("--size must not be negative")
    if args.threshold < 1:
        parser.error("--threshold must be at least 1")

    run(args.size, random.Random(args.seed), args.threshold)


if __name__ == '__main__':
    main()
