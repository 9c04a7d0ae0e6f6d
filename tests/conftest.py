"""
Shared fixtures: the saved pcs pages and a stand-in for requests.get
"""
import logging
from pathlib import Path

import pytest
import requests

from pcsdump.constants import LOG
from pcsdump.get_resources import make_soup

PAGES_DIR = Path(__file__).parent / "fixtures" / "pages"


def read_page(name):
    return (PAGES_DIR / f"{name}.html").read_text(encoding="utf-8")


class FakeResponse:

    def __init__(self, text="", status_code=200, reason="OK"):
        self.text = text
        self.status_code = status_code
        self.reason = reason


@pytest.fixture
def page():
    return read_page


@pytest.fixture
def startlist_soup():
    return make_soup(read_page("startlist"))


@pytest.fixture
def stage_soup():
    return make_soup(read_page("stage"))


@pytest.fixture
def ttt_soup():
    return make_soup(read_page("ttt"))


@pytest.fixture
def fake_get(monkeypatch):
    """
    Replace requests.get, returns the list the calls get recorded in.

        calls = fake_get(text=html)
        calls = fake_get(status_code=404, reason="Not Found")
        calls = fake_get(exc=requests.ConnectionError("down"))
    """

    def install(text="", status_code=200, reason="OK", exc=None):
        calls = []

        def get(url, headers=None, timeout=None):
            calls.append({"url": url, "headers": headers, "timeout": timeout})
            if exc is not None:
                raise exc
            return FakeResponse(text, status_code, reason)

        monkeypatch.setattr(requests, "get", get)
        return calls

    return install


@pytest.fixture(autouse=True)
def reset_log():
    """
    main() hangs handlers on the package logger, drop them between tests
    """
    yield
    for handler in LOG.handlers:
        handler.close()
    LOG.handlers.clear()
    LOG.setLevel(logging.NOTSET)
