import json
import logging
from unittest.mock import MagicMock, patch

import pytest
import requests

from openai_tools.config import constants

ENV_NAMES = [
    constants.ENV_OPENAI_API_KEY,
    constants.ENV_OPENAI_BASE_URL,
    constants.ENV_AZURE_API_KEY,
    constants.ENV_AZURE_TOKEN,
    constants.ENV_AZURE_DEPLOYMENT,
    constants.ENV_AZURE_ENDPOINT,
    constants.ENV_AZURE_RESOURCE,
    constants.ENV_AZURE_API_VERSION,
    constants.ENV_LOG_DIR,
]


@pytest.fixture(autouse=True)
def reset_logging():
    """Reset the library logger before each test"""
    library_logger = logging.getLogger(constants.LOGGER_NAME)
    for handler in library_logger.handlers[:]:
        library_logger.removeHandler(handler)
    library_logger.setLevel(logging.NOTSET)
    library_logger.propagate = True
    yield


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Hide real credentials and any .env file in the working directory."""
    for name in ENV_NAMES:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    yield


@pytest.fixture
def api_key(monkeypatch):
    """Provide an OpenAI API key through the environment."""
    monkeypatch.setenv(constants.ENV_OPENAI_API_KEY, "sk-test")
    return "sk-test"


def make_response(body=None, status=200, content=None):
    """Build a fake requests.Response."""
    response = MagicMock()
    response.status_code = status
    if isinstance(body, (dict, list)):
        response.text = json.dumps(body)
    else:
        response.text = body if body is not None else ""
    response.content = content if content is not None else response.text.encode()
    return response


@pytest.fixture
def mock_request():
    """Patch the session request used by HttpClient."""
    with patch.object(requests.Session, "request") as mock:
        mock.return_value = make_response({})
        yield mock


def sent_json(mock):
    """JSON body of the last request."""
    return mock.call_args.kwargs["json"]


def sent_url(mock):
    return mock.call_args.args[1]


def sent_method(mock):
    return mock.call_args.args[0]
