"""Positional access and membership helpers tolerant of missing sequences."""

from collections import abc

_missing = object()


def is_none_or_empty(sequence):
    """Return wether `sequence` is None or has no item.

    Sized containers are checked with :func:`len`, other iterables by
    fetching their first item, which consumes it on one-shot iterators.
    """
    if sequence is None:
        return True
    if isinstance(sequence, abc.Sized):
        try:
            return len(sequence) == 0
        except TypeError:  # view over an unsized iterable
            pass

    return next(iter(sequence), _missing) is _missing


def first_or_none(sequence):
    """Return the first item, or None if `sequence` is empty or None.

    Example:

        >>> seqext.first_or_none([0, 1, 2])
        0
        >>> seqext.first_or_none(None) is None
        True
    """
    if sequence is None:
        return None

    return next(iter(sequence), None)


def last_or_none(sequence):
    """Return the last item, or None if `sequence` is empty or None."""
    if sequence is None:
        return None
    if isinstance(sequence, abc.Sequence):
        return sequence[-1] if len(sequence) > 0 else None

    last = None
    for last in sequence:
        pass

    return last


def contains_all(sequence, elements):
    """Return wether every item of `elements` equals an item of `sequence`.

    Example:

        >>> seqext.contains_all([0, 1, 2], [0, 1])
        True
        >>> seqext.contains_all([0, 1, 3], [0, 1, 4])
        False
    """
    # other containers (str, set, dict) define `in` differently
    if not isinstance(sequence, (list, tuple, range)):
        sequence = list(sequence)

    return all(x in sequence for x in elements)


def for_each_indexed(sequence, action):
    """Call `action(index, item)` on every item, index starting at 0.

    Example:

        >>> seqext.for_each_indexed(['Hello', 'World'],
        ...                         lambda i, s: print(s, i))
        Hello 0
        World 1
    """
    for i, x in enumerate(sequence):
        action(i, x)
