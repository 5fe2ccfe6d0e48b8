import httpx
import pytest

from restfetch.config import FetchConfig
from restfetch.errors import TransportError
from restfetch.fetchers import create_client, expand_url, fetch_http


def test_fetch_returns_raw_body(make_client):
    client = make_client({'/api/random': (200, b'{"raw": true}')})
    assert fetch_http('http://svc/api/random', client) == b'{"raw": true}'
    assert client.seen[0].method == 'GET'


def test_fetch_passes_params(make_client):
    client = make_client({'/greeting': (200, '{}')})
    fetch_http('http://svc/greeting', client, params={'name': 'Allison'})
    assert client.seen[0].url.params['name'] == 'Allison'


@pytest.mark.parametrize('status', [301, 404, 500, 503])
def test_non_2xx_is_transport_error(make_client, status):
    client = make_client({'/api/random': (status, {'type': 'success'})})
    with pytest.raises(TransportError) as excinfo:
        fetch_http('http://svc/api/random', client)
    assert excinfo.value.status_code == status
    assert excinfo.value.url == 'http://svc/api/random'


def test_network_failure_is_transport_error():
    def handler(request):
        raise httpx.ConnectError('connection refused', request=request)

    with httpx.Client(transport=httpx.MockTransport(handler)) as client:
        with pytest.raises(TransportError) as excinfo:
            fetch_http('http://svc/api/random', client)
    assert excinfo.value.status_code is None
    assert isinstance(excinfo.value.__cause__, httpx.ConnectError)


def test_unsupported_scheme_is_transport_error():
    with httpx.Client() as client:
        with pytest.raises(TransportError):
            fetch_http('ftp://svc/api/random', client)


def test_expand_url_encodes_values():
    url = expand_url('http://svc/greeting?name={name}', name='Ann Lee&co')
    assert url == 'http://svc/greeting?name=Ann%20Lee%26co'


def test_create_client_uses_config():
    cfg = FetchConfig(follow_redirects=False, user_agent='tester/1')
    with create_client(cfg) as client:
        assert client.follow_redirects is False
        assert client.headers['User-Agent'] == 'tester/1'


@pytest.mark.parametrize('template', [
    'http://svc/greeting?name={name}&f={fmt}',
    'http://svc/greeting?name={0}',
    'http://svc/greeting?name={name',
])
def test_expand_url_bad_template_is_transport_error(template):
    with pytest.raises(TransportError) as excinfo:
        expand_url(template, name='Allison')
    assert excinfo.value.url == template
    assert 'bad URL template' in str(excinfo.value)
