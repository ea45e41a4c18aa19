'''CLI: look up a name on genderize.io and pretty-print the JSON answer.'''

import asyncio
import logging
import sys
import time

import fire
import structlog
from rich.console import Console

from genderize.config import FetchConfig
from genderize.errors import GenderizeError
from genderize.fetchers import fetch_data
from genderize.formatting import format_json
from genderize.ui.progress import ProgressIndicator


def _configure_logging() -> None:
    '''Plain console logging to stderr, standard Python tracebacks.'''
    from structlog.contextvars import merge_contextvars
    from structlog.dev import ConsoleRenderer, plain_traceback, set_exc_info
    from structlog.processors import StackInfoRenderer, TimeStamper, add_log_level

    structlog.configure(
        processors=[
            merge_contextvars,
            add_log_level,
            StackInfoRenderer(),
            set_exc_info,
            TimeStamper(fmt='%Y-%m-%d %H:%M:%S', utc=False),
            ConsoleRenderer(exception_formatter=plain_traceback),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.INFO),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
    )


def format_duration(seconds: float) -> str:
    '''Human-readable elapsed time, e.g. 812.4ms or 1.503s.'''
    if seconds < 1:
        return f'{seconds * 1000:.1f}ms'
    return f'{seconds:.3f}s'


def run(
    name: str = 'sam',
    timeout_ms: int | None = None,
    poll_interval_ms: int | None = None,
    base_url: str = '',
) -> None:
    '''
    Fetch the prediction for NAME and print it.
    timeout_ms: overall deadline (default 5000, or GENDERIZE_TIMEOUT_MS).
    poll_interval_ms: progress animation interval (default 130, or GENDERIZE_POLL_INTERVAL_MS).
    base_url: URL the name is appended to (default https://api.genderize.io?name=).
    '''
    log = structlog.get_logger()
    console = Console(soft_wrap=True, emoji=False)
    start = time.perf_counter()
    try:
        config = FetchConfig.from_env(
            base_url=base_url or None,
            timeout_ms=timeout_ms,
            poll_interval_ms=poll_interval_ms,
        )
    except ValueError as e:
        log.error('invalid configuration', error=str(e))
        sys.exit(2)

    try:
        body = asyncio.run(fetch_data(str(name), config, progress=ProgressIndicator(console.file)))
    except GenderizeError as e:
        console.file.write('\r')
        log.error('an error occurred when fetching data', error=str(e), error_type=type(e).__name__)
        sys.exit(1)

    formatted = format_json(body)
    console.print('\n Result: ' + formatted, markup=False, highlight=False)
    console.print('Took: ' + format_duration(time.perf_counter() - start), markup=False, highlight=False)


def main() -> None:
    '''genderize: timeout-bounded lookup against the genderize.io API.'''
    _configure_logging()
    fire.Fire(run)
