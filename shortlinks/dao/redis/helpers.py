import functools
import redis
from typing import TypeVar, Any
from collections.abc import Callable

from shortlinks.dao.exceptions import DataStoreError


__all__ = []

F = TypeVar('F', bound=Callable[..., Any])


def _redis_address(client: redis.Redis) -> str:
    info = client.connection_pool.connection_kwargs
    return f'{info.get("host")}:{info.get("port")}/{info.get("db")}'


def handle_redis_connection_error[F](method: F) -> F:
    """Wrap Redis-interacting DAO methods to handle connectivity errors

    Connection failures, command timeouts and server-side errors (OOM, READONLY
    replicas, script errors) all mean the data store is unavailable for this
    request.

    Args:
        method (Callable[..., Any]):
            DAO method performing Redis operations which may raise
            any redis.exceptions.RedisError.

    Returns:
        Callable[..., Any]:
            Wrapped method which raises DataStoreError on any Redis failure.

    Example:
        >>> @handle_redis_connection_error
        ... def count(self):
        ...     return self.redis.zcard('links:created')
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except redis.exceptions.ConnectionError as e:
            raise DataStoreError(f"Can't connect to Redis at {_redis_address(self.redis)}.") from e
        except redis.exceptions.TimeoutError as e:
            raise DataStoreError(f'Timed out waiting for Redis at {_redis_address(self.redis)}.') from e
        except redis.exceptions.RedisError as e:
            raise DataStoreError(f'Redis at {_redis_address(self.redis)} failed the command: {e}') from e

    return wrapper
