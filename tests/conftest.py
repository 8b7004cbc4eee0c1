import pytest

from tests.pages import make_page


@pytest.fixture
def page_factory():
    return make_page
