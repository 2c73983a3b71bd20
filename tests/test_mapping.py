import random

import pytest

from expect import expect_equals, expect_fails_with
from seqext import (
    EvaluationError,
    flat_map,
    map_indexed,
    map_indexed_not_none,
    map_not_none,
    seterr,
)


def test_map_indexed_basics():
    n = 100
    data = [random.random() for _ in range(n)]

    def do(i, x):
        do.call_cnt += 1
        return i + x

    do.call_cnt = 0

    result = map_indexed(data, do)
    assert len(result) == len(data)
    assert do.call_cnt == 0
    assert list(result) == [i + x for i, x in enumerate(data)]
    assert do.call_cnt == n
    assert list(result) == [i + x for i, x in enumerate(data)]
    assert do.call_cnt == 2 * n

    # indexing
    assert [result[i] for i in range(len(result))] == [i + x for i, x in enumerate(data)]
    assert result[-1] == n - 1 + data[-1]
    assert list(result[:]) == [i + x for i, x in enumerate(data)]
    assert list(result[10:50:3]) == [i + x for i, x in enumerate(data)][10:50:3]

    with pytest.raises(IndexError):
        result[n]

    with pytest.raises(TypeError):
        result[1.]


def test_map_indexed_text():
    result = map_indexed(['Hello', 'World'], lambda i, s: '{} {}'.format(s, i))
    expect_equals(list(result), ['Hello 0', 'World 1'])
    expect_equals(result[1], 'World 1')


def test_map_indexed_generator_source():
    result = map_indexed((x * 2 for x in range(3)), lambda i, x: (i, x))
    assert list(result) == [(0, 0), (1, 2), (2, 4)]
    # the source generator is exhausted
    assert list(result) == []


class CustomException(Exception):
    pass


@pytest.mark.parametrize('evaluation', ['wrap', 'passthrough'])
def test_mapping_exceptions(evaluation):
    def do(i, x):
        if i == 3:
            raise CustomException
        return x

    data = [random.random() for _ in range(10)]
    m = map_indexed(data, do)

    seterr(evaluation)
    error_t = EvaluationError if evaluation == "wrap" else CustomException

    assert m[2] == data[2]

    with pytest.raises(error_t):
        m[3]

    with pytest.raises(error_t):
        list(m)

    with pytest.raises(TypeError):
        map_indexed(data, None)


def test_wrapped_error_message():
    m = map_not_none([1, 2, 0, 4], lambda x: 1 / x)
    error = expect_fails_with(EvaluationError, lambda: list(m))
    assert "item 2" in str(error)
    assert "Mapping" in str(error)
    assert isinstance(error.__cause__, ZeroDivisionError)


def test_map_not_none():
    def do(x):
        do.call_cnt += 1
        return x if x % 2 else None

    do.call_cnt = 0

    result = map_not_none([0, 1, 2, 3], do)
    assert do.call_cnt == 0
    assert list(result) == [1, 3]
    assert list(result) == [1, 3]
    assert do.call_cnt == 8

    # items are not checked before the transform
    assert list(map_not_none([None, 1], lambda x: 0 if x is None else None)) == [0]


def test_map_indexed_not_none():
    def do(i, s):
        return None if s == 'Foo' else '{} {}'.format(s, i)

    result = map_indexed_not_none(['Hello', 'Foo', 'World'], do)
    assert list(result) == ['Hello 0', 'World 2']

    with pytest.raises(TypeError):
        map_indexed_not_none([], 1)


def test_flat_map():
    data = [random.randint(0, 5) for _ in range(50)]

    result = flat_map(data, lambda n: range(n))
    assert list(result) == [x for n in data for x in range(n)]
    assert list(result) == [x for n in data for x in range(n)]

    assert list(flat_map([0, 1, 2], lambda i: [i, i + 5])) == [0, 5, 1, 6, 2, 7]
    assert list(flat_map([], lambda i: [i])) == []

    with pytest.raises(EvaluationError):
        list(flat_map([0, 1], lambda i: i))

    with pytest.raises(TypeError):
        flat_map([0, 1], None)
