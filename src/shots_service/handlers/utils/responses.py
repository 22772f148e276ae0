"""
API Gateway proxy response builders.

Every response carries a JSON body and a JSON content-type header.
"""

import json
from http import HTTPStatus
from typing import Any, Dict

from shots_service.handlers.utils.observability import logger

JSON_HEADERS = {'Content-Type': 'application/json'}


def json_response(status_code: int, payload: Any) -> Dict[str, Any]:
    """
    Create an API Gateway proxy response with ``payload`` serialized as JSON.

    Serialization is best effort: a payload that cannot be encoded produces an
    empty body with the requested status code.
    """
    try:
        body = json.dumps(payload)
    except (TypeError, ValueError) as exc:
        logger.error('Failed to serialize response payload', extra={'error': str(exc), 'status_code': int(status_code)})
        body = ''

    return {
        'statusCode': int(status_code),
        'headers': dict(JSON_HEADERS),
        'body': body,
    }


def client_error(message: str) -> Dict[str, Any]:
    return json_response(HTTPStatus.BAD_REQUEST, {'error': message})


def server_error(message: str) -> Dict[str, Any]:
    return json_response(HTTPStatus.INTERNAL_SERVER_ERROR, {'error': message})


def not_found() -> Dict[str, Any]:
    return json_response(HTTPStatus.NOT_FOUND, {'message': 'Not Found'})
