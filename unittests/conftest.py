# pylint: disable=redefined-outer-name
import io
import sys

import logbook
import munch
import pytest
from jinja2 import DictLoader, Environment, StrictUndefined

from error_pages.app import create_app

ERROR_TEMPLATE = "Generic template"
NOT_FOUND_TEMPLATE = "404 template"
WRONG_TEMPLATE = "Wrong template"


@pytest.fixture
def request_stub():
    return munch.Munch(method="GET", url="http://example.com/foo", path="/foo")


@pytest.fixture
def make_env():
    def _make(templates):
        return Environment(loader=DictLoader(templates), autoescape=True, undefined=StrictUndefined)

    return _make


@pytest.fixture
def templates(make_env):
    return make_env({"error": ERROR_TEMPLATE, "404": NOT_FOUND_TEMPLATE})


@pytest.fixture
def wrong_templates(make_env):
    return make_env({"wrong": WRONG_TEMPLATE})


@pytest.fixture
def failing_templates(make_env):
    return make_env({"error": "{{ error.missing }}"})


@pytest.fixture
def caplog():
    sio = io.StringIO()
    handler = logbook.StreamHandler(sio)
    handler.push_application()
    yield sio
    handler.pop_application()


@pytest.fixture
def app_config(monkeypatch):
    monkeypatch.delenv("ERROR_PAGES_CONFIG_DIRECTORY", raising=False)
    return {"TESTING": True}


@pytest.fixture
def app(app_config):
    app = create_app(config=app_config)
    logs = logbook.StreamHandler(sys.stdout, bubble=True)
    logs.push_application()
    yield app
    logs.pop_application()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def default_output():
    return """<!DOCTYPE html>
<html lang="en">
<head>
	<meta charset="utf-8">
	<title>404 Not Found: Foo bar</title>
</head>
<body>
	<h1>404 Not Found</h1>
	<p>Foo bar</p>
</body>
</html>"""
