import json

import httpx
import pytest

QUOTE_BODY = {'type': 'success', 'value': {'id': 10, 'quote': 'x'}}
GREETING_BODY = {'id': 11, 'content': 'Hello, Allison!'}


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    '''Keep RESTFETCH_* settings from the developer's shell out of tests.'''
    for var in (
        'RESTFETCH_QUOTE_URL',
        'RESTFETCH_GREETING_URL',
        'RESTFETCH_NAME',
        'RESTFETCH_FOLLOW_REDIRECTS',
        'RESTFETCH_USER_AGENT',
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def make_client():
    '''
    Build an httpx.Client backed by a dict of path -> (status, body).
    Requests are recorded on client.seen.
    '''
    clients = []

    def _make(routes):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            status, body = routes.get(request.url.path, (404, {'error': 'not found'}))
            content = body if isinstance(body, (bytes, str)) else json.dumps(body)
            return httpx.Response(status, content=content, headers={'Content-Type': 'application/json'})

        client = httpx.Client(transport=httpx.MockTransport(handler))
        client.seen = seen
        clients.append(client)
        return client

    yield _make
    for c in clients:
        c.close()
