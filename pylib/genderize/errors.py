'''Errors raised along the fetch path. All fetch errors are fatal at the CLI.'''


class GenderizeError(Exception):
    '''Base class for fetch errors.'''


class RequestBuildError(GenderizeError):
    '''The request could not be built (e.g. malformed URL). No network I/O attempted.'''


class TransportError(GenderizeError):
    '''Sending the request or reading its body failed. Wraps the httpx error.'''


class FetchTimeoutError(GenderizeError):
    '''The deadline passed before a result arrived.'''

    def __init__(self, timeout: float):
        super().__init__(f'request timed out after {timeout:.3f}s')
        self.timeout = timeout
