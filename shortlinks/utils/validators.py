"""Validation utilities for URLs submitted for shortening.

Functions:
    validate_url(url) -> str
        Trim and validate an absolute URL, raising MissingUrlError or InvalidUrlError.

Example:
    >>> validate_url('  https://example.com/page  ')
    'https://example.com/page'
    >>> validate_url('not a url')
    Traceback (most recent call last):
        ...
    shortlinks.exceptions.InvalidUrlError: Invalid URL format: 'not a url'
"""

from urllib.parse import urlparse

from shortlinks.exceptions import MissingUrlError, InvalidUrlError


def validate_url(url: object) -> str:
    """Return the trimmed URL if it is an absolute URL with a scheme and a host.

    Args:
        url (object):
            Raw value received from the caller.

    Returns:
        str: The URL with surrounding whitespace removed.

    Raises:
        MissingUrlError:
            If the value is None, empty or whitespace only.
        InvalidUrlError:
            If the value is not a string, cannot be parsed, lacks a scheme or host, or has a bad port.
    """
    if url is None or (isinstance(url, str) and not url.strip()):
        raise MissingUrlError('URL is required')
    if not isinstance(url, str):
        raise InvalidUrlError(f'URL must be a string (given type: {type(url)}).')

    url = url.strip()
    try:
        components = urlparse(url)
        hostname = components.hostname
        components.port  # raises on non-numeric or out-of-range ports
    except ValueError as e:
        raise InvalidUrlError(f'Invalid URL format: {url!r}') from e

    if not components.scheme or not hostname:
        raise InvalidUrlError(f'Invalid URL format: {url!r}')
    if any(char.isspace() for char in url):
        raise InvalidUrlError(f'Invalid URL format: {url!r}')

    return url
