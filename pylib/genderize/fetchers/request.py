'''Request dispatcher: builds the GET for a name lookup.'''

import httpx

from genderize.errors import RequestBuildError


def build_request(base_url: str, name: str) -> httpx.Request:
    '''
    Build a GET request for base_url + name. The name is appended as is, unescaped.
    Raises RequestBuildError for a malformed URL, before any network I/O.
    '''
    url = base_url + name
    try:
        request = httpx.Request('GET', url)
    except httpx.InvalidURL as e:
        raise RequestBuildError(f'invalid URL {url!r}: {e}') from e
    if request.url.scheme not in ('http', 'https') or not request.url.host:
        raise RequestBuildError(f'invalid URL {url!r}: expected an absolute http(s) URL')
    return request
