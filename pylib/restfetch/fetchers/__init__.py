'''Fetchers: plain HTTP GET through an explicit httpx client.'''

from restfetch.fetchers.http import create_client, expand_url, fetch_http

__all__ = ['create_client', 'expand_url', 'fetch_http']
