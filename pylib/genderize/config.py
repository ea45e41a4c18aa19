'''
Fetch configuration. Durations are explicit milliseconds; seconds are derived.
'''

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_BASE_URL = 'https://api.genderize.io?name='
DEFAULT_TIMEOUT_MS = 5000
DEFAULT_POLL_INTERVAL_MS = 130


def _env_ms(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f'{var} must be an integer number of milliseconds, got {raw!r}') from None


def _as_ms(field: str, value) -> int:
    '''Coerce a millisecond value (CLI input may arrive as a string).'''
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f'{field} must be an integer number of milliseconds, got {value!r}') from None


@dataclass(frozen=True)
class FetchConfig:
    '''Configuration for one fetch.'''

    base_url: str = DEFAULT_BASE_URL
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    poll_interval_ms: int = DEFAULT_POLL_INTERVAL_MS

    def __post_init__(self):
        # Frozen, so coerced values go through object.__setattr__
        for field in ('timeout_ms', 'poll_interval_ms'):
            object.__setattr__(self, field, _as_ms(field, getattr(self, field)))
        if self.timeout_ms <= 0:
            raise ValueError(f'timeout_ms must be positive, got {self.timeout_ms}')
        if self.poll_interval_ms <= 0:
            raise ValueError(f'poll_interval_ms must be positive, got {self.poll_interval_ms}')

    @property
    def timeout(self) -> float:
        '''Timeout in seconds.'''
        return self.timeout_ms / 1000

    @property
    def poll_interval(self) -> float:
        '''Progress frame interval in seconds.'''
        return self.poll_interval_ms / 1000

    @classmethod
    def from_env(
        cls,
        base_url: str | None = None,
        timeout_ms: int | None = None,
        poll_interval_ms: int | None = None,
    ) -> FetchConfig:
        '''Build config from env vars. Explicit arguments win over env.'''
        return cls(
            base_url=base_url or os.environ.get('GENDERIZE_BASE_URL') or DEFAULT_BASE_URL,
            timeout_ms=timeout_ms if timeout_ms is not None else _env_ms('GENDERIZE_TIMEOUT_MS', DEFAULT_TIMEOUT_MS),
            poll_interval_ms=(
                poll_interval_ms if poll_interval_ms is not None
                else _env_ms('GENDERIZE_POLL_INTERVAL_MS', DEFAULT_POLL_INTERVAL_MS)
            ),
        )
