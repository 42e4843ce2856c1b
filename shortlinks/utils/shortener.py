"""Shortcode generation utility

This module provides a helper function for generating short, random,
Base62-safe shortcodes for URL slugs.

Functions:
    generate_shortcode(length=8):
        Generate a random shortcode suitable for use as a URL slug.

Example:
    >>> from shortlinks.utils import generate_shortcode
    >>> generate_shortcode()
    'q3ZbT0aK'
"""

import secrets
import string

from shortlinks.constants import Shortcode


ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits
BASE = len(ALPHABET)  # 26 lowercase + 26 uppercase + 10 digits


def generate_shortcode(length: int = Shortcode.LENGTH) -> str:
    """Generate a random, fixed-length Base62 shortcode.

    A uniformly random integer from the Base62 space of the requested length
    is drawn from the operating system's CSPRNG and encoded into exactly
    `length` characters (A-Z, a-z, 0-9).

    The function keeps no state and has no side effects, so it is safe to call
    repeatedly inside a collision-retry loop.

    Args:
        length (int, optional):
            Exact length of the resulting shortcode, between 7 and 14.
            Defaults to 8 (62**8 ~ 2.2e14 possible codes).

    Returns:
        str: A random alphanumeric shortcode.

    Example:
        >>> len(generate_shortcode(length=10))
        10

    NOTE:
        - Collisions are rare but possible. Callers must let the data store
          reject duplicates and retry with a fresh shortcode.
        - The alphabet is Base62 safe: [a-zA-Z0-9].
    """
    if not isinstance(length, int) or isinstance(length, bool):
        raise TypeError(f'Length must be of type integer (given type: {type(length)}).')
    if not Shortcode.MIN_LENGTH <= length <= Shortcode.MAX_LENGTH:
        raise ValueError(f'Length must be between {Shortcode.MIN_LENGTH} and {Shortcode.MAX_LENGTH} (given value: {length}).')

    value = secrets.randbelow(BASE**length)

    # Custom base62 encoding algorithm:
    # 1- Encode the random value into base62 (list comprehension)
    # 2- Reverse order to ensure most significant digit is first (reversed())
    # 3- Join characters into a single string (''.join())
    return ''.join(reversed([ALPHABET[(value // BASE**i) % BASE] for i in range(length)]))
