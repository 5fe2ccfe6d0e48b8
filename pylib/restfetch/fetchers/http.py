'''HTTP fetcher using httpx.'''

from urllib.parse import quote

import httpx
import structlog

from restfetch.config import FetchConfig
from restfetch.errors import TransportError


logger = structlog.get_logger()


def create_client(config: FetchConfig) -> httpx.Client:
    '''
    Build the client passed to fetch_http. Caller owns it and should close it
    (use as a context manager). Proxy env vars are honoured by httpx.
    '''
    return httpx.Client(
        follow_redirects=config.follow_redirects,
        headers={'User-Agent': config.user_agent, 'Accept': 'application/json'},
    )


def expand_url(template: str, **params: str) -> str:
    '''
    Fill {placeholders} in a URL template, percent-encoding each value.
    Raises TransportError if the template names an unknown placeholder or has a stray brace.
    '''
    try:
        return template.format(**{k: quote(str(v), safe='') for k, v in params.items()})
    except (KeyError, IndexError, ValueError) as e:
        raise TransportError(template, f'bad URL template: {type(e).__name__}: {e}') from e


def fetch_http(url: str, client: httpx.Client, params: dict[str, str] | None = None) -> bytes:
    '''
    GET url and return the raw body. Read-only; no retries.

    Raises TransportError on network failure or any non-2xx status.
    '''
    try:
        resp = client.get(url, params=params)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise TransportError(url, f'{type(e).__name__}: {e}') from e
    if not resp.is_success:
        raise TransportError(str(resp.url), resp.reason_phrase or 'HTTP error', status_code=resp.status_code)
    logger.debug('fetched', url=str(resp.url), status=resp.status_code, size=len(resp.content))
    return resp.content
