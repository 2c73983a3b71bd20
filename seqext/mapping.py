"""Lazy transformations producing one or several items per source item."""

from .errors import format_stack, raise_evaluation_error
from .filtering import where_not_none
from .utils import basic_getitem, check_callable


class Mapping(object):
    def __init__(self, f, sequence, indexed=False):
        check_callable(f, "f")

        self.sequence = sequence
        self.f = f
        self.indexed = indexed
        self.stack = format_stack(2)

    def _apply(self, i, x):
        return self.f(i, x) if self.indexed else self.f(x)

    def __len__(self):
        return len(self.sequence)

    def __iter__(self):
        i = 0
        try:
            for x in self.sequence:
                yield self._apply(i, x)
                i += 1

        except Exception as error:
            raise_evaluation_error(error, i, self)

    @basic_getitem
    def __getitem__(self, item):
        try:
            return self._apply(item, self.sequence[item])

        except Exception as error:
            raise_evaluation_error(error, item, self)


class FlatMapping(object):
    def __init__(self, f, sequence):
        check_callable(f, "transform")

        self.sequence = sequence
        self.f = f
        self.stack = format_stack(2)

    def __iter__(self):
        i = 0
        try:
            for x in self.sequence:
                for y in self.f(x):
                    yield y
                i += 1

        except Exception as error:
            raise_evaluation_error(error, i, self)


def map_indexed(sequence, transform):
    """Return a mapping of `transform` over the items and their index.

    Equivalent to :code:`[transform(i, x) for i, x in enumerate(sequence)]`
    with on-demand evaluation. Indexing the result only evaluates the
    requested items, with their position passed as index.

    Example:

        >>> m = seqext.map_indexed(['Hello', 'World'],
        ...                        lambda i, s: '{} {}'.format(s, i))
        >>> list(m)
        ['Hello 0', 'World 1']
        >>> m[1]
        'World 1'
    """
    return Mapping(transform, sequence, indexed=True)


def map_not_none(sequence, transform):
    """Return a lazy view on the non-None results of `transform`.

    Items are not checked for None before `transform` is applied.

    Example:

        >>> list(seqext.map_not_none([0, 1, 2, 3],
        ...                          lambda i: i if i % 2 else None))
        [1, 3]
    """
    return where_not_none(Mapping(transform, sequence))


def map_indexed_not_none(sequence, transform):
    """Like :func:`map_indexed` but drops the None results.

    Example:

        >>> def f(i, s):
        ...     return None if s == 'Foo' else '{} {}'.format(s, i)
        ...
        >>> list(seqext.map_indexed_not_none(['Hello', 'Foo', 'World'], f))
        ['Hello 0', 'World 2']
    """
    return where_not_none(Mapping(transform, sequence, indexed=True))


def flat_map(sequence, transform):
    """Return a lazy concatenation of the iterables returned by `transform`.

    Example:

        >>> list(seqext.flat_map([0, 1, 2], lambda i: [i, i + 5]))
        [0, 5, 1, 6, 2, 7]
    """
    return FlatMapping(transform, sequence)
