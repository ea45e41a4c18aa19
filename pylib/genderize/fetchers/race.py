'''
Timeout-raced fetch: run the HTTP call as a background task and race it
against a deadline, animating a progress line while waiting.
'''

import asyncio
from dataclasses import dataclass

import httpx
import structlog

from genderize.config import FetchConfig
from genderize.errors import FetchTimeoutError, TransportError
from genderize.fetchers.http import execute_request
from genderize.fetchers.request import build_request
from genderize.ui.progress import ProgressIndicator


logger = structlog.get_logger()


@dataclass
class FetchResult:
    '''Outcome of the background request: body bytes or an error, never both.'''

    url: str
    data: bytes = b''
    error: Exception | None = None

    def __post_init__(self):
        if self.error is not None and self.data:
            raise ValueError('FetchResult cannot carry both data and an error')

    @property
    def success(self) -> bool:
        return self.error is None


async def _request_task(client: httpx.AsyncClient, request: httpx.Request) -> FetchResult:
    url = str(request.url)
    try:
        data = await execute_request(client, request)
    except TransportError as e:
        return FetchResult(url=url, error=e)
    return FetchResult(url=url, data=data)


async def race_request(
    request: httpx.Request,
    client: httpx.AsyncClient,
    timeout: float,
    poll_interval: float,
    progress: ProgressIndicator | None = None,
) -> FetchResult:
    '''
    Race the request against a deadline of now + timeout seconds.

    Each iteration checks, in order: deadline passed (timeout error), request
    done (its result), otherwise draw a progress frame and wait up to
    poll_interval for the request. The wait ends early when the request
    completes. On return the request task is cancelled if still running,
    which aborts the connection.
    '''
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout
    task = asyncio.create_task(_request_task(client, request))
    try:
        while True:
            now = loop.time()
            if now >= deadline:
                logger.warning('request timed out', url=str(request.url), timeout=timeout)
                return FetchResult(url=str(request.url), error=FetchTimeoutError(timeout))
            if task.done():
                return task.result()
            if progress:
                progress.tick()
            await asyncio.wait({task}, timeout=min(poll_interval, deadline - now))
    finally:
        if not task.done():
            task.cancel()
            try:
                await task
            except asyncio.CancelledError:
                pass


async def fetch_data(
    name: str,
    config: FetchConfig | None = None,
    progress: ProgressIndicator | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> bytes:
    '''
    Look up a name and return the raw response body.
    Raises RequestBuildError, TransportError or FetchTimeoutError.
    '''
    config = config or FetchConfig()
    request = build_request(config.base_url, name)
    # The race deadline bounds the request, so httpx's own timeouts are off
    async with httpx.AsyncClient(timeout=None, transport=transport) as client:
        result = await race_request(
            request,
            client,
            timeout=config.timeout,
            poll_interval=config.poll_interval,
            progress=progress,
        )
    if result.error is not None:
        raise result.error
    logger.debug('fetched', url=result.url, size=len(result.data))
    return result.data
