"""Unit tests for validate_url() in validators.py."""

import pytest

from shortlinks.utils.validators import validate_url
from shortlinks.exceptions import MissingUrlError, InvalidUrlError


@pytest.mark.parametrize(
    'url, expected',
    [
        ('https://example.com', 'https://example.com'),
        ('  https://example.com/page  ', 'https://example.com/page'),
        ('\thttp://localhost:3000/path?q=1#top\n', 'http://localhost:3000/path?q=1#top'),
        ('ftp://files.example.com/archive.zip', 'ftp://files.example.com/archive.zip'),
        ('https://[::1]:8080/', 'https://[::1]:8080/'),
        ('http://example.com:65535/', 'http://example.com:65535/'),
    ],
)
def test_valid_urls(url, expected):
    assert validate_url(url) == expected


@pytest.mark.parametrize('url', [None, '', '   ', '\n\t'])
def test_missing_url(url):
    with pytest.raises(MissingUrlError, match='URL is required'):
        validate_url(url)


@pytest.mark.parametrize(
    'url',
    [
        'not a url',
        'example.com',
        '/relative/path',
        'https://',
        'mailto:someone@example.com',
        'https://exa mple.com',
        'http://[::1',
        'http://example.com:abc',
        'http://example.com:99999',
    ],
)
def test_invalid_url(url):
    with pytest.raises(InvalidUrlError, match='Invalid URL format'):
        validate_url(url)


@pytest.mark.parametrize('url', [123, ['https://example.com'], {'url': 'https://example.com'}])
def test_non_string_url(url):
    with pytest.raises(InvalidUrlError, match='URL must be a string'):
        validate_url(url)


def test_errors_carry_client_error_codes():
    assert MissingUrlError.error_code == 'client:missing_url'
    assert InvalidUrlError.error_code == 'client:invalid_url'
