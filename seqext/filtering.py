"""Lazy views keeping a subset of the items of a sequence."""

from .errors import format_stack, raise_evaluation_error
from .utils import check_callable, get_logger

logger = get_logger(__name__)


class Filtering(object):
    def __init__(self, predicate, sequence, indexed=False, negate=False):
        check_callable(predicate, "predicate")

        self.sequence = sequence
        self.predicate = predicate
        self.indexed = indexed
        self.negate = negate
        self.stack = format_stack(2)

    def __iter__(self):
        i = 0
        try:
            for x in self.sequence:
                keep = self.predicate(i, x) if self.indexed else self.predicate(x)
                if bool(keep) != self.negate:
                    yield x
                i += 1

        except Exception as error:
            raise_evaluation_error(error, i, self)


def _is_not_none(x):
    return x is not None


def where_indexed(sequence, predicate):
    """Return a lazy view on the items for which `predicate(index, item)` holds.

    Example:

        >>> list(seqext.where_indexed(['Hello', 'World', 'Foo'],
        ...                           lambda i, s: i == 0 or s == 'World'))
        ['Hello', 'World']
    """
    return Filtering(predicate, sequence, indexed=True)


def where_is_not_none(sequence, transform):
    """Return a lazy view on the items whose `transform` result is not None.

    Items are not checked for None before `transform` is applied.

    Example:

        >>> list(seqext.where_is_not_none([0, 1], lambda i: None if i == 0 else i))
        [1]
    """
    check_callable(transform, "transform")
    return Filtering(lambda x: transform(x) is not None, sequence)


def where_not(sequence, predicate):
    """Return a lazy view on the items not matching `predicate`.

    Example:

        >>> list(seqext.where_not([0, 1, 2, 3], lambda i: i == 2))
        [0, 1, 3]
    """
    return Filtering(predicate, sequence, negate=True)


def filter_not(sequence, predicate):
    logger.warning(
        "Call to deprecated function filter_not, use where_not instead",
        stacklevel=2)
    return Filtering(predicate, sequence, negate=True)


def where_not_none(sequence):
    """Return a lazy view on the items that are not None.

    Example:

        >>> list(seqext.where_not_none([0, None, 1]))
        [0, 1]
    """
    if isinstance(sequence, Filtering) and sequence.predicate is _is_not_none:
        return sequence

    return Filtering(_is_not_none, sequence)
