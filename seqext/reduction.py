"""Reductions of a sequence to a single item."""

import functools

from .errors import EmptySequenceError

_missing = object()


def reduce_or_none(sequence, reducer):
    """Reduce `sequence` from left to right, or return None if it is empty.

    None is also returned when `reducer` is None. A single item is
    returned as is without calling `reducer`.

    Example:

        >>> seqext.reduce_or_none([], lambda a, b: b) is None
        True
        >>> seqext.reduce_or_none([0, 1, 2], lambda a, b: a + b)
        3
    """
    if reducer is None:
        return None

    iterator = iter(sequence)
    first = next(iterator, _missing)
    if first is _missing:
        return None

    return functools.reduce(reducer, iterator, first)


def _indexed(combine):
    index = 0

    def reducer(acc, x):
        nonlocal index
        index += 1
        return combine(index, acc, x)

    return reducer


def reduce_indexed(sequence, combine):
    """Reduce `sequence` with a combinator that also receives a step index.

    `combine(index, acc, item)` is called for the second item onwards with
    `index` starting at 1.

    Raises:
        EmptySequenceError: if `sequence` is empty.

    Example:

        >>> seqext.reduce_indexed([0, 1, 2], lambda i, a, b: i + a + b)
        6
    """
    iterator = iter(sequence)
    first = next(iterator, _missing)
    if first is _missing:
        raise EmptySequenceError("reduce_indexed() of empty sequence")

    return functools.reduce(_indexed(combine), iterator, first)


def reduce_indexed_or_none(sequence, combine):
    """Same as :func:`reduce_indexed` but return None for empty sequences."""
    return reduce_or_none(sequence, _indexed(combine))


def max_with(sequence, comparator):
    """Return the first largest item according to `comparator`, or None.

    `comparator(a, b)` returns a negative number, zero or a positive number
    as for :func:`functools.cmp_to_key`.

    Example:

        >>> seqext.max_with([0, 1, 2], lambda a, b: a - b)
        2
    """
    return reduce_or_none(
        sequence, lambda acc, x: acc if comparator(acc, x) >= 0 else x)


def min_with(sequence, comparator):
    """Return the first smallest item according to `comparator`, or None."""
    return reduce_or_none(
        sequence, lambda acc, x: acc if comparator(acc, x) <= 0 else x)


def _best_by(sequence, selector, better):
    best = best_key = _missing
    for x in sequence:
        key = selector(x)
        if best is _missing or better(key, best_key):
            best, best_key = x, key

    return None if best is _missing else best


def max_by(sequence, selector):
    """Return the first item yielding the largest `selector` value, or None.

    `selector` is evaluated once per item.

    Example:

        >>> data = {'World': 1, 'Hello': 0}
        >>> seqext.max_by(data, lambda k: data[k])
        'World'
    """
    return _best_by(sequence, selector, lambda key, best: key > best)


def min_by(sequence, selector):
    """Return the first item yielding the smallest `selector` value, or None."""
    return _best_by(sequence, selector, lambda key, best: key < best)


def smax(sequence):
    """Return the first largest item, or None if `sequence` is empty.

    Unlike :func:`python:max`, an empty sequence is not an error.
    """
    return reduce_or_none(sequence, lambda acc, x: x if x > acc else acc)


def smin(sequence):
    """Return the first smallest item, or None if `sequence` is empty."""
    return reduce_or_none(sequence, lambda acc, x: x if x < acc else acc)
