"""API Gateway (Lambda Proxy) response builders

Every response carries the CORS headers needed by the browser frontend and
a JSON body. Error bodies have the shape:

    {"message": "<Reason> (<details>)", "errorCode": "<ERROR_CODE>"}

Example:
    >>> response_404(message="short url https://sho.rt/abc123XY doesn't exist", error_code='SHORT_URL_NOT_FOUND')
    {'statusCode': 404, 'headers': {...}, 'body': '{"message": "Not Found (short url ...)", "errorCode": "SHORT_URL_NOT_FOUND"}'}
"""

import json
from typing import Any

from shortlinks.types import HttpHeaders, LambdaResponse


CORS_HEADERS: HttpHeaders = {
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Headers': 'Content-Type',
    'Access-Control-Allow-Methods': 'OPTIONS,POST,GET',
}


def _response(status_code: int, body: Any, headers: HttpHeaders | None = None) -> LambdaResponse:
    return {
        'statusCode': status_code,
        'headers': {'Content-Type': 'application/json', **CORS_HEADERS, **(headers or {})},
        'body': json.dumps(body),
    }


def _error(status_code: int, base: str, message: str | None, error_code: str | None) -> LambdaResponse:
    body = {'message': base if not message else f'{base} ({message})'}
    if error_code:
        body['errorCode'] = error_code
    return _response(status_code, body)


def response_200(body: Any) -> LambdaResponse:
    return _response(200, body)


def response_201(body: Any) -> LambdaResponse:
    return _response(201, body)


def response_302(*, location: str) -> LambdaResponse:
    return _response(302, {}, headers={'Location': location})  # no body needed for redirects


def response_400(message: str | None = None, error_code: str | None = None) -> LambdaResponse:
    return _error(400, 'Bad Request', message, error_code)


def response_404(message: str | None = None, error_code: str | None = None) -> LambdaResponse:
    return _error(404, 'Not Found', message, error_code)


def response_500(message: str | None = None, error_code: str | None = None) -> LambdaResponse:
    return _error(500, 'Internal Server Error', message, error_code)


def response_503(message: str | None = None, error_code: str | None = None) -> LambdaResponse:
    return _error(503, 'Service Unavailable', message, error_code)
