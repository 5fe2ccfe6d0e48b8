'''
Main runner: fetch the quote and the greeting, decode each, log each.
'''

from collections.abc import Callable
from dataclasses import dataclass, field

import httpx
import structlog

from restfetch.config import FetchConfig
from restfetch.errors import RestFetchError
from restfetch.fetchers import expand_url, fetch_http
from restfetch.models import Greeting, Quote
from restfetch.schema import Record, decode


def fetch_quote(client: httpx.Client, url: str) -> Quote:
    '''GET the quote service and decode the body.'''
    return decode(fetch_http(url, client), Quote)


def fetch_greeting(client: httpx.Client, url_template: str, name: str) -> Greeting:
    '''GET the greeting service for name and decode the body.'''
    return decode(fetch_http(expand_url(url_template, name=name), client), Greeting)


@dataclass
class RunResult:
    '''Records decoded in one run, plus (job, error) for each failed fetch.'''

    records: list[Record] = field(default_factory=list)
    failures: list[tuple[str, RestFetchError]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


def run_once(client: httpx.Client, config: FetchConfig, keep_going: bool = False) -> RunResult:
    '''
    Fetch and log the quote, then the greeting.
    By default the first failure propagates and the second fetch is not made.
    With keep_going, each failure is logged and recorded and the next job still runs.
    '''
    log = structlog.get_logger()
    jobs: list[tuple[str, str, Callable[[], Record]]] = [
        ('quote', config.quote_url, lambda: fetch_quote(client, config.quote_url)),
        ('greeting', config.greeting_url, lambda: fetch_greeting(client, config.greeting_url, config.name)),
    ]
    result = RunResult()
    for job_id, url, job in jobs:
        try:
            record = job()
        except RestFetchError as e:
            if not keep_going:
                raise
            log.error('fetch failed', job_id=job_id, url=url, error=str(e))
            result.failures.append((job_id, e))
            continue
        log.info(job_id, record=str(record), url=url)
        result.records.append(record)
    return result
