import pytest

from seqext import seterr


@pytest.fixture(autouse=True)
def restore_error_mode():
    mode = seterr()
    yield
    seterr(mode)
