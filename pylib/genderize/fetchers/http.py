'''HTTP execution using httpx.'''

import httpx

from genderize.errors import TransportError


async def execute_request(client: httpx.AsyncClient, request: httpx.Request) -> bytes:
    '''
    Send the request and read the whole body into memory.
    The response is always closed, whether or not reading the body succeeds.
    HTTP status codes are not checked; any body is returned.
    '''
    try:
        response = await client.send(request, stream=True)
    except httpx.HTTPError as e:
        raise TransportError(f'{request.method} {request.url} failed: {e}') from e
    try:
        return await response.aread()
    except httpx.HTTPError as e:
        raise TransportError(f'reading response from {request.url} failed: {e}') from e
    finally:
        await response.aclose()
