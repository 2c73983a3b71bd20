"""Eager operations building mappings or pairs out of a sequence.

Mappings are plain dicts: their keys are ordered by first occurrence in
the source sequence and a later duplicate key replaces the value without
moving the entry.
"""

from collections import namedtuple


Pair = namedtuple('Pair', ['first', 'second'])
Pair.__doc__ = "Immutable pair of related values."


def associate(sequence, transform):
    """Return a dict merging the entries returned by `transform`.

    `transform` returns, for each item, a mapping or an iterable of
    `(key, value)` pairs. A single item may therefore contribute several
    entries.

    Example:

        >>> seqext.associate([0, 1, 2, 3], lambda i: {i: str(i)})
        {0: '0', 1: '1', 2: '2', 3: '3'}
        >>> seqext.associate([0, 1], lambda i: {i: str(i), -i: str(i)})
        {0: '0', 1: '1', -1: '1'}
    """
    output = {}
    for x in sequence:
        output.update(transform(x))

    return output


def associate_by(sequence, key, value=None):
    """Return a dict of `value(item)` indexed by `key(item)`.

    Args:
        sequence (Iterable): source items
        key (Callable): key selector
        value (Optional[Callable]): value selector, defaults to the item
            itself.

    Example:

        >>> seqext.associate_by([0, 1, 2, 3], key=lambda i: i * 5,
        ...                     value=lambda i: -i)
        {0: 0, 5: -1, 10: -2, 15: -3}
    """
    if value is None:
        return {key(x): x for x in sequence}

    return {key(x): value(x) for x in sequence}


def associate_with(sequence, value_selector):
    """Return a dict mapping each item to `value_selector(item)`.

    Example:

        >>> seqext.associate_with(['a', 'abc', 'ab'], len)
        {'a': 1, 'abc': 3, 'ab': 2}
    """
    return {x: value_selector(x) for x in sequence}


def group_by(sequence, key_selector):
    """Group items by the value of `key_selector`.

    Each key is associated with the list of its items, in the order in
    which they appear in `sequence`.

    Example:

        >>> seqext.group_by(['a', 'abc', 'ab', 'def', 'abcd'], len)
        {1: ['a'], 3: ['abc', 'def'], 2: ['ab'], 4: ['abcd']}
    """
    output = {}
    for x in sequence:
        output.setdefault(key_selector(x), []).append(x)

    return output


def partition(sequence, predicate):
    """Split items into those matching `predicate` and the others.

    Returns:
        Pair: a pair of lists `(matching, non_matching)`.

    Example:

        >>> seqext.partition([0, 1, 2, 3], lambda i: i > 1)
        Pair(first=[2, 3], second=[0, 1])
    """
    matching, others = [], []
    for x in sequence:
        (matching if predicate(x) else others).append(x)

    return Pair(matching, others)
