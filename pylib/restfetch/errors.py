'''Errors raised while fetching and decoding.'''


class RestFetchError(Exception):
    '''Base class for restfetch errors.'''


class TransportError(RestFetchError):
    '''
    The HTTP call failed: network, DNS, invalid URL, or a non-2xx status.
    status_code is None when no response was received.
    '''

    def __init__(self, url: str, reason: str, status_code: int | None = None):
        prefix = f'{status_code} ' if status_code is not None else ''
        super().__init__(f'{prefix}{reason} | url={url}')
        self.url = url
        self.reason = reason
        self.status_code = status_code


class DecodeError(RestFetchError):
    '''The body is not valid JSON, or a value does not match the field's kind.'''

    def __init__(self, message: str, path: str = ''):
        super().__init__(f'{path}: {message}' if path else message)
        self.message = message
        self.path = path
