"""Shared fixtures for chat-bridge tests."""

import pytest
import requests

from translator import AnthropicClient


class RecordingBackend:
    """Stands in for MessagesBackend; records every call."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def create_message(self, payload, timeout=None):
        self.calls.append({'payload': payload, 'timeout': timeout})
        if self.error is not None:
            raise self.error
        return self.response


def make_messages_response(texts=('Hello!',), stop_reason='end_turn', input_tokens=10, output_tokens=5):
    return {
        'id': 'msg_01XYZ',
        'type': 'message',
        'role': 'assistant',
        'model': 'claude-sonnet-4-5',
        'content': [{'type': 'text', 'text': t} for t in texts],
        'stop_reason': stop_reason,
        'stop_sequence': None,
        'usage': {'input_tokens': input_tokens, 'output_tokens': output_tokens},
    }


def make_http_error(status_code, body):
    response = requests.Response()
    response.status_code = status_code
    response._content = body
    return requests.exceptions.HTTPError(f'{status_code} Error', response=response)


@pytest.fixture
def backend():
    return RecordingBackend(response=make_messages_response())


@pytest.fixture
def client(backend):
    return AnthropicClient(backend)


@pytest.fixture
def app(monkeypatch, client):
    monkeypatch.setenv('PROXY_ACCESS_TOKEN', 'test-token')
    monkeypatch.setenv('ANTHROPIC_API_KEY', 'sk-ant-test')
    monkeypatch.setenv('BACKEND_TIMEOUT', '30')

    from app import create_app
    from config import Config

    flask_app = create_app(config=Config(), client=client)
    flask_app.config['TESTING'] = True
    return flask_app


@pytest.fixture
def http(app):
    return app.test_client()


@pytest.fixture
def auth_headers():
    return {'Authorization': 'Bearer test-token'}
