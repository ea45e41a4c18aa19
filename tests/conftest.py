import asyncio

import httpx
import pytest


SAM_PAYLOAD = b'{"name":"sam","gender":"male","probability":0.97}'


class TrackingStream(httpx.AsyncByteStream):
    '''Response body stream that records whether it was closed.'''

    def __init__(self, chunks: list[bytes], fail: bool = False) -> None:
        self.chunks = chunks
        self.fail = fail
        self.closed = False

    async def __aiter__(self):
        for chunk in self.chunks:
            yield chunk
        if self.fail:
            raise httpx.ReadError('connection reset by peer')

    async def aclose(self) -> None:
        self.closed = True


class SlowEndpoint:
    '''MockTransport handler that answers after a delay and records calls and cancellation.'''

    def __init__(self, delay: float, body: bytes = SAM_PAYLOAD) -> None:
        self.delay = delay
        self.body = body
        self.calls: list[str] = []
        self.cancelled = False

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request.url.params.get('name'))
        try:
            await asyncio.sleep(self.delay)
        except asyncio.CancelledError:
            self.cancelled = True
            raise
        return httpx.Response(200, content=self.body)


@pytest.fixture
def sam_endpoint():
    return SlowEndpoint(delay=0)
