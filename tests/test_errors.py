import threading

import pytest

from seqext import EvaluationError, filter_not, map_indexed, map_indexed_not_none, seterr


def test_seterr():
    assert seterr() == 'wrap'
    assert seterr('passthrough') == 'passthrough'
    assert seterr() == 'passthrough'
    assert seterr('wrap') == 'wrap'

    with pytest.raises(ValueError):
        seterr('ignore')


def test_seterr_is_thread_local():
    seterr('passthrough')
    seen = []
    thread = threading.Thread(target=lambda: seen.append(seterr()))
    thread.start()
    thread.join()
    assert seen == ['wrap']


def test_creation_stack_in_message():
    def make_view():
        return map_indexed([1], lambda i, x: x.missing_attribute)

    view = make_view()
    with pytest.raises(EvaluationError) as excinfo:
        view[0]

    assert "make_view" in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, AttributeError)


@pytest.mark.parametrize('build', [
    lambda data: map_indexed_not_none(data, lambda i, x: x.missing_attribute),
    lambda data: filter_not(data, lambda x: x.missing_attribute),
])
def test_creation_stack_skips_library_frames(build):
    def make_view():
        return build([1])

    view = make_view()
    with pytest.raises(EvaluationError) as excinfo:
        list(view)

    message = str(excinfo.value)
    assert "in make_view\n" in message
    assert "in map_indexed_not_none\n" not in message
    assert "in filter_not\n" not in message
