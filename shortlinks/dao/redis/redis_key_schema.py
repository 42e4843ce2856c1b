import functools
from collections.abc import Callable

import xxhash


__all__ = ['RedisKeySchema']  # hide internal decorator prefix_key from imports


def prefix_key(func: Callable) -> Callable:
    @functools.wraps(func)
    def wrapper(self, *args, **kwargs) -> str:
        key = func(self, *args, **kwargs)
        return f'{self.prefix}:{key}' if self.prefix is not None else key

    return wrapper


class RedisKeySchema:
    """Provide standardized Redis keys for storing URL records.

    An optional prefix can be provided to namespace all generated keys.
    It is highly encouraged to set a custom prefix for each app and environment,
    e.g. "shortlinks:prod" or "shortlinks:dev".
    """

    def __init__(self, prefix: str | None = None):
        if prefix is not None and not isinstance(prefix, str):
            raise TypeError(f'Prefix must be of type string (given type: {type(prefix)}).')

        self.prefix = prefix

    @prefix_key
    def record_key(self, shortcode: str) -> str:
        return f'links:code:{shortcode}'

    @prefix_key
    def url_index_key(self, original_url: str) -> str:
        # Original URLs may be up to several KB long; index them by digest
        digest = xxhash.xxh3_128_hexdigest(original_url.encode('utf-8'))
        return f'links:by-url:{digest}'

    @prefix_key
    def created_index_key(self) -> str:
        return 'links:created'

    @prefix_key
    def clicks_total_key(self) -> str:
        return 'links:clicks'
