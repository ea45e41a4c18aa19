'''Fetch path: request building, HTTP execution, timeout race.'''

from genderize.fetchers.http import execute_request
from genderize.fetchers.race import FetchResult, fetch_data, race_request
from genderize.fetchers.request import build_request

__all__ = [
    'FetchResult',
    'build_request',
    'execute_request',
    'fetch_data',
    'race_request',
]
