import pytest

from kgtools.services import reset_locator


@pytest.fixture(autouse=True)
def _fresh_global_locator():
    reset_locator()
    yield
    reset_locator()
