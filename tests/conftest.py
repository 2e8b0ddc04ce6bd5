from unittest.mock import MagicMock
from urllib.parse import parse_qsl

import pytest
import requests

from ga_collect import api_client


@pytest.fixture(autouse=True)
def _reset_default_session():
    """Reset the cached default session between tests."""
    api_client._default_session = None
    yield
    api_client._default_session = None


@pytest.fixture
def response():
    resp = MagicMock(name="response")
    resp.status_code = 200
    return resp


@pytest.fixture
def session(response):
    s = requests.Session()
    s.send = MagicMock(name="send", return_value=response)
    return s


@pytest.fixture
def sent_params(session):
    """Decode the form body of the single request sent through ``session``."""

    def _decode():
        (req,), _ = session.send.call_args
        return dict(parse_qsl(req.body, keep_blank_values=True))

    return _decode
