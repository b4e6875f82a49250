import pytest
from bs4 import BeautifulSoup

from formmaker import Form, set_default_renderer
from formmaker.config import reload_settings


class StubRequest:
    """Minimal request exposing what Form needs for its default action."""

    def __init__(self, path="/signup", host="http://testserver"):
        self.path = path
        self.host = host

    def build_absolute_uri(self, location):
        return f"{self.host}{location}"


@pytest.fixture(autouse=True)
def reset_shared_state():
    reload_settings()
    set_default_renderer(None)
    yield
    reload_settings()
    set_default_renderer(None)


@pytest.fixture
def form():
    form = Form()
    form.add_fields(["name", "email", "age"])
    form.set_display_fields(["name", "email", "age"])
    return form


@pytest.fixture
def stub_request():
    return StubRequest()


@pytest.fixture
def parse_html():
    def parse(markup):
        return BeautifulSoup(str(markup), "html.parser")
    return parse
