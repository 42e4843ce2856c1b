"""Unit tests for helper functions in helpers.py.

Test coverage includes:

1. base_url() correct extraction
   - 1.1. Ensures URLs include the stage (e.g., `/Prod`) when invoked via AWS.
   - 1.2. Ensures URLs do NOT include stage information for custom domains.
   - 1.3. Ensures local hosts are served over plain HTTP.
   - 1.4. Confirms a proper localhost fallback when API Gateway data is missing.

2. get_short_url() retrieves short URL string representation

3. require_environment() decorator behavior
   - 3.1. Ensures decorated functions execute when all env vars are present.
   - 3.2. Ensures missing or empty env vars raise MissingEnvironmentVariableError.

4. guarantee_500_response() decorator behavior
"""

import json

import pytest

from shortlinks.exceptions import MissingEnvironmentVariableError
from shortlinks.utils.helpers import (
    base_url,
    get_short_url,
    require_environment,
    guarantee_500_response,
)


# -------------------------------
# 1.1. AWS default domain handling
# -------------------------------


@pytest.mark.parametrize(
    'domain, stage, expected',
    [
        ('abc123.execute-api.us-east-1.amazonaws.com', 'Dev', 'https://abc123.execute-api.us-east-1.amazonaws.com/Dev'),
        ('abc123.execute-api.us-east-1.amazonaws.com', 'Prod', 'https://abc123.execute-api.us-east-1.amazonaws.com/Prod'),
    ],
)
def test_base_url_with_aws_domain(domain, stage, expected):
    """Ensure base_url() appends stage for default AWS execute-api domains."""
    event = {'requestContext': {'domainName': domain, 'stage': stage}}
    assert base_url(event) == expected


# -------------------------------
# 1.2. Custom domain handling
# -------------------------------


@pytest.mark.parametrize(
    'domain, stage, expected',
    [
        ('sho.rt', 'Prod', 'https://sho.rt'),
        ('links.example.com', 'Dev', 'https://links.example.com'),
    ],
)
def test_base_url_with_custom_domain(domain, stage, expected):
    """Ensure base_url() skips stage for custom domains."""
    event = {'requestContext': {'domainName': domain, 'stage': stage}}
    assert base_url(event) == expected


# -------------------------------
# 1.3. Local hosts
# -------------------------------


@pytest.mark.parametrize(
    'domain, expected',
    [
        ('localhost:3000', 'http://localhost:3000'),
        ('127.0.0.1:3000', 'http://127.0.0.1:3000'),
        ('localhost', 'http://localhost'),
    ],
)
def test_base_url_with_local_host(domain, expected):
    event = {'requestContext': {'domainName': domain, 'stage': 'Prod'}}
    assert base_url(event) == expected


# -------------------------------
# 1.4. Fallback
# -------------------------------


@pytest.mark.parametrize(
    'event',
    [
        {},
        {'requestContext': None},
        {'requestContext': {}},
        {'requestContext': {'stage': 'Prod'}},
    ],
)
def test_base_url_local_fallback(event):
    """Ensure base_url() falls back to the local base URL."""
    assert base_url(event) == 'http://localhost:3000'


# -------------------------------
# 2. get_short_url()
# -------------------------------


@pytest.mark.parametrize(
    'shortcode, domain, stage, expected',
    [
        ('abc123XY', 'sho.rt', 'Prod', 'https://sho.rt/abc123XY'),
        ('XyZ7890', 'abc123.execute-api.us-east-1.amazonaws.com', 'Dev', 'https://abc123.execute-api.us-east-1.amazonaws.com/Dev/XyZ7890'),
    ],
)
def test_get_short_url(shortcode, domain, stage, expected):
    event = {'requestContext': {'domainName': domain, 'stage': stage}}
    assert get_short_url(shortcode, event) == expected


def test_get_short_url_local_fallback():
    assert get_short_url('abc123XY', {}) == 'http://localhost:3000/abc123XY'


# -------------------------------
# 3. require_environment()
# -------------------------------


def test_require_environment_happy_path(monkeypatch):
    """3.1. Decorated function runs when all env vars are set."""
    monkeypatch.setenv('FIRST_VAR', 'one')
    monkeypatch.setenv('SECOND_VAR', 'two')

    @require_environment('FIRST_VAR', 'SECOND_VAR')
    def sample_function(value: int) -> int:
        return value * 2

    assert sample_function(21) == 42


@pytest.mark.parametrize(
    'env_setup, missing_names',
    [
        ({'FIRST_VAR': 'one'}, ["'SECOND_VAR'"]),
        ({'FIRST_VAR': '', 'SECOND_VAR': 'two'}, ["'FIRST_VAR'"]),
        ({}, ["'FIRST_VAR'", "'SECOND_VAR'"]),
    ],
)
def test_require_environment_missing_or_empty(monkeypatch, env_setup, missing_names):
    """3.2. Missing or empty env vars raise MissingEnvironmentVariableError."""
    monkeypatch.delenv('FIRST_VAR', raising=False)
    monkeypatch.delenv('SECOND_VAR', raising=False)
    for name, value in env_setup.items():
        monkeypatch.setenv(name, value)

    @require_environment('FIRST_VAR', 'SECOND_VAR')
    def sample_function() -> None:
        pass

    expected_message = f'Missing required environment variables: {", ".join(missing_names)}'
    with pytest.raises(MissingEnvironmentVariableError, match=expected_message):
        sample_function()


# -------------------------------
# 4. guarantee_500_response()
# -------------------------------


def test_guarantee_500_response(monkeypatch):
    """4.1. Faulty lambda handler returns 500 response when not running locally."""
    monkeypatch.setattr('shortlinks.utils.helpers.running_locally', lambda: False)

    @guarantee_500_response
    def faulty_lambda_handler(event, context):
        raise RuntimeError('boom')

    response = faulty_lambda_handler({}, None)
    body = json.loads(response['body'])

    assert response['statusCode'] == 500
    assert body['message'] == 'Internal Server Error'
    assert body['errorCode'] == 'UNKNOWN_INTERNAL_SERVER_ERROR'
    assert response['headers']['Access-Control-Allow-Origin'] == '*'


def test_guarantee_500_response_reraises_when_running_locally(monkeypatch):
    """4.2. Faulty lambda handler reraises the original exception when running locally."""
    monkeypatch.setattr('shortlinks.utils.helpers.running_locally', lambda: True)

    @guarantee_500_response
    def faulty_lambda_handler(event, context):
        raise RuntimeError('boom')

    with pytest.raises(RuntimeError, match='boom'):
        faulty_lambda_handler({}, None)


def test_guarantee_500_response_passes_through_responses():
    @guarantee_500_response
    def lambda_handler(event, context):
        return {'statusCode': 200, 'body': '{}'}

    assert lambda_handler({}, None) == {'statusCode': 200, 'body': '{}'}
