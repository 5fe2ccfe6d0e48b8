'''CLI: fetch the quote and greeting services and log the decoded records.'''

from collections.abc import Callable

import fire
import structlog
from rich.console import Console

from restfetch.config import FetchConfig
from restfetch.errors import RestFetchError
from restfetch.fetchers import create_client
from restfetch.runner import fetch_greeting, fetch_quote, run_once
from restfetch.schema import Record


def _configure_plain_tracebacks() -> None:
    '''Use standard Python tracebacks instead of Rich's fancy format.'''
    from structlog.contextvars import merge_contextvars
    from structlog.dev import ConsoleRenderer, plain_traceback, set_exc_info
    from structlog.processors import StackInfoRenderer, TimeStamper, add_log_level

    structlog.configure(
        processors=[
            merge_contextvars,
            add_log_level,
            StackInfoRenderer(),
            set_exc_info,
            TimeStamper(fmt='%Y-%m-%d %H:%M:%S', utc=False),
            ConsoleRenderer(exception_formatter=plain_traceback),
        ],
    )


def main() -> None:
    '''restfetch: consume the quote and greeting REST services.'''
    _configure_plain_tracebacks()
    fire.Fire({
        'run': run,
        'quote': quote,
        'greeting': greeting,
    })


def run(
    env_file: str = '.env',
    quote_url: str = '',
    greeting_url: str = '',
    name: str = '',
    keep_going: bool = False,
) -> None:
    '''
    Fetch the quote, then the greeting; log each decoded record.
    env_file: optional dotenv file with RESTFETCH_* settings
    quote_url: quote service URL. Default from RESTFETCH_QUOTE_URL.
    greeting_url: greeting URL template containing {name}. Default from RESTFETCH_GREETING_URL.
    name: name passed to the greeting service. Default from RESTFETCH_NAME.
    keep_going: run the greeting even if the quote fails (exit status is still 1).
    '''
    log = structlog.get_logger()
    cfg = FetchConfig.from_env(
        env_file=env_file,
        quote_url=_opt(quote_url),
        greeting_url=_opt(greeting_url),
        name=_opt(name),
    )
    try:
        with create_client(cfg) as client:
            result = run_once(client, cfg, keep_going=keep_going)
    except RestFetchError as e:
        log.error('run failed', error=str(e))
        raise SystemExit(1)
    if not result.ok:
        raise SystemExit(1)


def quote(url: str = '', env_file: str = '.env') -> None:
    '''Fetch one quote and print it.'''
    cfg = FetchConfig.from_env(env_file=env_file, quote_url=_opt(url))
    with create_client(cfg) as client:
        record = _or_exit(lambda: fetch_quote(client, cfg.quote_url))
    Console().print(str(record), markup=False, highlight=False)


def greeting(name: str = '', url: str = '', env_file: str = '.env') -> None:
    '''Fetch one greeting for name and print it.'''
    cfg = FetchConfig.from_env(env_file=env_file, greeting_url=_opt(url), name=_opt(name))
    with create_client(cfg) as client:
        record = _or_exit(lambda: fetch_greeting(client, cfg.greeting_url, cfg.name))
    Console().print(str(record), markup=False, highlight=False)


def _opt(value: object) -> str | None:
    '''Fire parses --name=0 as an int; only the empty default means unset.'''
    return None if value == '' else str(value)


def _or_exit(call: Callable[[], Record]) -> Record:
    try:
        return call()
    except RestFetchError as e:
        structlog.get_logger().error('fetch failed', error=str(e))
        raise SystemExit(1)
