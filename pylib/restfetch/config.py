'''
Endpoint configuration.

Precedence: explicit arguments, then environment variables, then an
optional .env file, then defaults.
'''

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import dotenv_values

from restfetch import __version__

DEFAULT_QUOTE_URL = 'http://localhost:8080/api/random'
DEFAULT_GREETING_URL = 'http://localhost:8080/greeting?name={name}'
DEFAULT_NAME = 'World'

_TRUE = {'1', 'true', 'yes', 'on'}
_FALSE = {'0', 'false', 'no', 'off'}


def _parse_bool(raw: str, var: str) -> bool:
    low = raw.strip().lower()
    if low in _TRUE:
        return True
    if low in _FALSE:
        return False
    raise ValueError(f'{var} must be a boolean (true/false), got {raw!r}')


@dataclass
class FetchConfig:
    '''Where to fetch from and how to build the HTTP client.'''

    quote_url: str = DEFAULT_QUOTE_URL
    greeting_url: str = DEFAULT_GREETING_URL  # {name} is substituted
    name: str = DEFAULT_NAME
    follow_redirects: bool = True
    user_agent: str = f'restfetch/{__version__}'

    @classmethod
    def from_env(
        cls,
        env_file: str | Path | None = None,
        quote_url: str | None = None,
        greeting_url: str | None = None,
        name: str | None = None,
    ) -> FetchConfig:
        '''Build config from RESTFETCH_* env vars, with optional overrides.'''
        file_vals: dict[str, str] = {}
        if env_file is not None and Path(env_file).exists():
            file_vals = {k: v for k, v in dotenv_values(env_file).items() if v is not None}

        def get(var: str) -> str | None:
            return os.environ.get(var) or file_vals.get(var) or None

        redirects = get('RESTFETCH_FOLLOW_REDIRECTS')
        return cls(
            quote_url=quote_url or get('RESTFETCH_QUOTE_URL') or DEFAULT_QUOTE_URL,
            greeting_url=greeting_url or get('RESTFETCH_GREETING_URL') or DEFAULT_GREETING_URL,
            name=name or get('RESTFETCH_NAME') or DEFAULT_NAME,
            follow_redirects=_parse_bool(redirects, 'RESTFETCH_FOLLOW_REDIRECTS') if redirects else True,
            user_agent=get('RESTFETCH_USER_AGENT') or f'restfetch/{__version__}',
        )
