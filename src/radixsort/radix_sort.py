from array import array
from collections.abc import Mapping
from numbers import Integral

from .utils import extract_byte, int_type_of

BUCKET_AMOUNT = 256
SORT_THRESHOLD = 256


def sort(seq, int_type=None, threshold=SORT_THRESHOLD):
    """
    Sort seq in place, in ascending order.

    seq: mutable random access sequence (list, array.array, ...)
    int_type: IntType of the elements. If None, it is read from the type
              code of an array.array; any other sequence is sorted with
              the comparison sort.
    threshold: ranges shorter than this are comparison sorted instead of
               being split further into buckets. Any value >= 1 sorts
               correctly.
    """
    if isinstance(seq, Mapping) or not all(
            hasattr(seq, attr) for attr in ('__len__', '__getitem__', '__setitem__')):
        raise TypeError("sort() needs a mutable random access sequence, "
                        "got %s" % type(seq).__name__)
    if not isinstance(threshold, Integral) or threshold < 1:
        raise ValueError("threshold must be an integer >= 1, got %r"
                         % (threshold,))

    if int_type is None:
        int_type = int_type_of(seq)
    else:
        if not isinstance(int_type.width, Integral) or int_type.width < 1:
            raise ValueError("integer width must be at least 1 byte, got %r"
                             % (int_type.width,))
        _check_elements(seq, int_type)

    if len(seq) < 2:
        return

    if int_type is None:
        # Not fixed-width integers, delegate to the comparison sort.
        _write_sorted(seq, 0, len(seq))
        return

    aux = _allocate_aux(seq)
    assert len(aux) == len(seq)

    if int_type.signed:
        _signed_radix_sort(seq, aux, 0, len(seq), int_type.top_byte, threshold)
    else:
        _unsigned_radix_sort(seq, aux, 0, len(seq), int_type.top_byte, threshold)

    # The result sits in the buffer that was the target at byte 0. For an
    # even top byte index that is aux.
    if int_type.top_byte & 1 == 0:
        for i in range(len(seq)):
            seq[i] = aux[i]


def _check_elements(seq, int_type):
    if isinstance(seq, array) and int_type_of(seq) == int_type:
        return
    for value in seq:
        if not isinstance(value, Integral):
            raise TypeError("%r is not an integer" % (value,))
        if not int_type.contains(value):
            raise ValueError("%d does not fit in %d %s bytes" % (
                value, int_type.width,
                "signed" if int_type.signed else "unsigned"))


def _allocate_aux(seq):
    if isinstance(seq, array):
        return array(seq.typecode, seq)
    return list(seq)


def _write_sorted(seq, begin, end):
    for i, value in enumerate(sorted(seq[k] for k in range(begin, end)), begin):
        seq[i] = value


def _sort_base_case(source, target, begin, end, byte_index):
    _write_sorted(source, begin, end)
    if byte_index & 1 == 0:
        # source holds the sorted range, but the caller expects it in target.
        for i in range(begin, end):
            target[i] = source[i]


def _bucket_sizes(source, begin, end, byte_index):
    sizes = [0] * BUCKET_AMOUNT
    for i in range(begin, end):
        sizes[extract_byte(source[i], byte_index)] += 1
    return sizes


def _distribute(source, target, begin, end, byte_index, starts):
    filled = [0] * BUCKET_AMOUNT
    for i in range(begin, end):
        element = source[i]
        bucket = extract_byte(element, byte_index)
        target[starts[bucket] + filled[bucket]] = element
        filled[bucket] += 1


def _recurse_into_buckets(source, target, byte_index, sizes, starts, threshold):
    # Roles swap: the buckets now live in target, source becomes scratch.
    for b in range(BUCKET_AMOUNT):
        if sizes[b] != 0:
            _unsigned_radix_sort(target, source, starts[b], starts[b] + sizes[b],
                                 byte_index - 1, threshold)


def _unsigned_radix_sort(source, target, begin, end, byte_index, threshold):
    """
    Sort source[begin:end] by bytes byte_index .. 0.

    The sorted range ends up in target if byte_index is even and in source
    if it is odd.
    """
    if end - begin < threshold:
        _sort_base_case(source, target, begin, end, byte_index)
        return

    sizes = _bucket_sizes(source, begin, end, byte_index)
    starts = [begin] * BUCKET_AMOUNT
    for b in range(1, BUCKET_AMOUNT):
        starts[b] = starts[b - 1] + sizes[b - 1]

    _distribute(source, target, begin, end, byte_index, starts)
    if byte_index > 0:
        _recurse_into_buckets(source, target, byte_index, sizes, starts, threshold)


def _signed_radix_sort(source, target, begin, end, byte_index, threshold):
    """
    Like _unsigned_radix_sort, but byte_index is the byte holding the sign
    bit. Buckets 128..255 (negative) are laid out before buckets 0..127.
    Lower bytes compare as unsigned magnitudes within each bucket.
    """
    if end - begin < threshold:
        _sort_base_case(source, target, begin, end, byte_index)
        return

    sizes = _bucket_sizes(source, begin, end, byte_index)
    half = BUCKET_AMOUNT >> 1
    starts = [0] * BUCKET_AMOUNT
    starts[half] = begin
    for b in range(half + 1, BUCKET_AMOUNT):
        starts[b] = starts[b - 1] + sizes[b - 1]
    starts[0] = starts[BUCKET_AMOUNT - 1] + sizes[BUCKET_AMOUNT - 1]
    for b in range(1, half):
        starts[b] = starts[b - 1] + sizes[b - 1]

    _distribute(source, target, begin, end, byte_index, starts)
    if byte_index > 0:
        _recurse_into_buckets(source, target, byte_index, sizes, starts, threshold)
