"""
JSON encoding and API Gateway response helpers.

FaunaDB documents carry driver objects (``Ref``, ``FaunaTime``, ``Query``,
dates and bytes). They are written out in the tagged Fauna wire form, the
same shape the database sends them in.
"""

import json
from base64 import urlsafe_b64encode
from datetime import date, datetime
from typing import Any, Dict

JSON_CONTENT_TYPE = 'application/json'


def fauna_json_default(obj: Any) -> Any:
    """``json.dumps`` default hook for FaunaDB driver values."""
    if hasattr(obj, 'to_fauna_json'):
        return obj.to_fauna_json()
    # datetime first, it is a date subclass
    if isinstance(obj, datetime):
        return {'@ts': obj.isoformat()}
    if isinstance(obj, date):
        return {'@date': obj.isoformat()}
    if isinstance(obj, (bytes, bytearray)):
        return {'@bytes': urlsafe_b64encode(bytes(obj)).decode('ascii')}
    raise TypeError(f'Object of type {type(obj).__name__} is not JSON serializable')


def to_json(value: Any) -> str:
    return json.dumps(value, default=fauna_json_default)


def build_response(
    status_code: int,
    body: Any,
    request_id: str,
    allow_origin: str = '*',
) -> Dict[str, Any]:
    """
    Build an API Gateway proxy response with a JSON body.

    Args:
        status_code: HTTP status code
        body: Value to encode as the JSON body
        request_id: Lambda request id echoed in X-Request-ID
        allow_origin: Value for Access-Control-Allow-Origin

    Returns:
        API Gateway response dictionary
    """
    headers = {
        'Content-Type': JSON_CONTENT_TYPE,
        'Access-Control-Allow-Origin': allow_origin,
        'X-Request-ID': request_id,
    }
    return {
        'statusCode': status_code,
        'headers': headers,
        'body': to_json(body),
    }
