'''JSON pretty-printing for API payloads.'''

import json

import structlog


logger = structlog.get_logger()


def _reject_constant(name: str):
    raise ValueError(f'{name} is not valid JSON')


def format_json(data: bytes | str, indent: int = 1) -> str:
    '''
    Re-serialize a JSON document with the given indent step (default one space).
    Malformed input is logged, not raised; returns an empty string in that case.

    The document is parsed and dumped again, so the output is not byte-faithful:
    number spellings are normalized (1e5 becomes 100000.0) and duplicate keys
    collapse to the last value.
    '''
    try:
        doc = json.loads(data, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        # ValueError covers JSONDecodeError, UnicodeDecodeError and NaN/Infinity
        logger.warning('could not format response as JSON', error=str(e) or type(e).__name__, size=len(data))
        return ''
    return json.dumps(doc, indent=indent, ensure_ascii=False)
