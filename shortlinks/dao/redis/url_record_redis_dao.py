"""Data Access Object (DAO) implementation for managing URL records in Redis

This module provides a Redis-based implementation of UrlRecordBaseDAO for
CRUD-like operations with UrlRecordModel instances.

Responsibilities:
    - Atomically insert URL records, enforcing unique shortcodes and unique original URLs;
    - Retrieve URL records by shortcode or by original URL;
    - Atomically count clicks per record and globally;
    - List records newest first and aggregate totals;
    - Raise appropriate DAO exceptions on missing records and connectivity issues.

Data layout (all keys carry the optional `<app>:<env>` prefix):
    links:code:<shortcode>    HASH    url, clicks, created_at, last_accessed
    links:by-url:<digest>     STRING  shortcode owning the original URL
    links:created             ZSET    shortcodes scored by creation epoch
    links:clicks              STRING  global click total

Classes:
    UrlRecordRedisDAO:
        DAO for storing and retrieving UrlRecordModel in a Redis datastore.

Example:
    >>> from datetime import datetime, UTC
    >>> from shortlinks.models import UrlRecordModel
    >>> from shortlinks.dao.redis import UrlRecordRedisDAO

    >>> dao = UrlRecordRedisDAO(prefix="shortlinks:dev")

    >>> record = UrlRecordModel(
    ...     original_url="https://example.com/page",
    ...     shortcode="abc123XY",
    ...     created_at=datetime.now(UTC),
    ... )
    >>> dao.insert(record)
    <UrlRecordRedisDAO>

    >>> dao.hit("abc123XY").clicks
    1
    >>> dao.total_clicks()
    1
"""

from datetime import datetime, UTC

from beartype import beartype

from shortlinks.models import UrlRecordModel
from shortlinks.dao.base import UrlRecordBaseDAO
from shortlinks.dao.redis.mixins import RedisClientMixin
from shortlinks.dao.redis.helpers import handle_redis_connection_error
from shortlinks.dao.exceptions import (
    ShortCodeAlreadyExistsError,
    OriginalUrlAlreadyExistsError,
    UrlRecordNotFoundError,
)


# Insert outcomes reported by INSERT_URL_RECORD_SCRIPT
INSERTED = 0
SHORTCODE_TAKEN = 1
ORIGINAL_URL_TAKEN = 2

# KEYS[1]: record hash, KEYS[2]: original URL index, KEYS[3]: creation index, KEYS[4]: click total
# ARGV[1]: shortcode, ARGV[2]: original URL, ARGV[3]: created_at (ISO 8601), ARGV[4]: created_at (epoch),
# ARGV[5]: initial clicks, ARGV[6]: record key prefix (record key minus the shortcode)
#
# The URL index is keyed by digest. An index entry only counts as a duplicate when the owner's
# stored URL matches ARGV[2]; on a digest collision the record is written and the index keeps
# its first owner.
INSERT_URL_RECORD_SCRIPT = """
if redis.call('EXISTS', KEYS[1]) == 1 then
    return {1, ARGV[1]}
end
local owner = redis.call('GET', KEYS[2])
if owner and redis.call('HGET', ARGV[6] .. owner, 'url') == ARGV[2] then
    return {2, owner}
end
redis.call('HSET', KEYS[1], 'url', ARGV[2], 'clicks', ARGV[5], 'created_at', ARGV[3])
if not owner then
    redis.call('SET', KEYS[2], ARGV[1])
end
redis.call('ZADD', KEYS[3], ARGV[4], ARGV[1])
redis.call('INCRBY', KEYS[4], ARGV[5])
return {0, ARGV[1]}
"""


class UrlRecordRedisDAO(RedisClientMixin, UrlRecordBaseDAO):
    """Redis-based Data Access Object (DAO) for managing URL records

    This class implements the UrlRecordBaseDAO interface using Redis as a data store.

    Attributes (see RedisClientMixin):
        redis (redis.Redis):
            Redis client used to communicate with the Redis datastore.
        keys (RedisKeySchema):
            Key schema helper for generating namespaced Redis keys.

    Methods:
        insert(url_record: UrlRecordModel, **kwargs) -> UrlRecordRedisDAO:
            Insert a URL record via a single Lua script (atomic uniqueness checks + writes).
            Raises ShortCodeAlreadyExistsError when the shortcode is taken.
            Raises OriginalUrlAlreadyExistsError when the original URL is already mapped.
            Raises DataStoreError on connectivity issues with Redis.

        get(shortcode: str, **kwargs) -> UrlRecordModel:
            Retrieve a URL record by shortcode.
            Raises UrlRecordNotFoundError when the shortcode doesn't exist.

        find_by_original_url(original_url: str, **kwargs) -> UrlRecordModel | None:
            Retrieve a URL record by original URL, None when missing.

        hit(shortcode: str, accessed_at: datetime | None = None, **kwargs) -> UrlRecordModel:
            Atomically increment the record's clicks and the global click total.
            Raises UrlRecordNotFoundError when the shortcode doesn't exist.

        list_all(**kwargs) -> list[UrlRecordModel]:
            All records, newest first.

        count(**kwargs) -> int:
            Number of records.

        total_clicks(**kwargs) -> int:
            Sum of clicks across all records.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._insert_script = self.redis.register_script(INSERT_URL_RECORD_SCRIPT)

    @handle_redis_connection_error
    @beartype
    def insert(self, url_record: UrlRecordModel, **kwargs) -> 'UrlRecordRedisDAO':
        """Insert a URL record into Redis

        The uniqueness checks and the writes run inside one Lua script, which
        Redis executes atomically. Two concurrent inserts can therefore never
        both claim the same shortcode or the same original URL, and a rejected
        insert writes nothing.

        Args:
            url_record (UrlRecordModel):
                UrlRecordModel instance representing the shortened URL mapping.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            UrlRecordRedisDAO: self (for method chaining)

        Raises:
            ShortCodeAlreadyExistsError:
                If a record with the same shortcode already exists.
            OriginalUrlAlreadyExistsError:
                If the original URL is already mapped to a shortcode.
            DataStoreError:
                If a Redis connection issue occurs.
        """
        shortcode = url_record.shortcode
        # fmt: off
        status, owner = self._insert_script(
            keys=[
                self.keys.record_key(shortcode),
                self.keys.url_index_key(url_record.original_url),
                self.keys.created_index_key(),
                self.keys.clicks_total_key(),
            ],
            args=[
                shortcode,
                url_record.original_url,
                url_record.created_at.isoformat(),
                url_record.created_at.timestamp(),
                url_record.clicks,
                self.keys.record_key(''),
            ],
        )
        # fmt: on

        if int(status) == SHORTCODE_TAKEN:
            raise ShortCodeAlreadyExistsError(f"Short URL with code '{shortcode}' already exists.")
        if int(status) == ORIGINAL_URL_TAKEN:
            raise OriginalUrlAlreadyExistsError(
                f"URL '{url_record.original_url}' is already shortened to '{owner}'.",
                shortcode=owner,
            )
        return self

    @handle_redis_connection_error
    @beartype
    def get(self, shortcode: str, **kwargs) -> UrlRecordModel:
        """Retrieve a stored URL record by shortcode

        Args:
            shortcode (str):
                The shortcode identifier for the shortened URL.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            UrlRecordModel:
                The retrieved UrlRecordModel instance.

        Raises:
            UrlRecordNotFoundError:
                If the shortcode does not exist in Redis.
            DataStoreError:
                If Redis connectivity issues occur.

        Example:
            >>> dao.get('abc123XY')
            UrlRecordModel(original_url='https://example.com', shortcode='abc123XY', ...)
        """
        fields = self.redis.hgetall(self.keys.record_key(shortcode))
        if not fields:
            raise UrlRecordNotFoundError(f"Short URL with code '{shortcode}' not found.")
        return self._to_model(shortcode, fields)

    @handle_redis_connection_error
    @beartype
    def find_by_original_url(self, original_url: str, **kwargs) -> UrlRecordModel | None:
        shortcode = self.redis.get(self.keys.url_index_key(original_url))
        if shortcode is None:
            return None

        fields = self.redis.hgetall(self.keys.record_key(shortcode))
        # NOTE: the index is keyed by a digest, so compare the stored URL to rule out digest collisions
        if not fields or fields.get('url') != original_url:
            return None
        return self._to_model(shortcode, fields)

    @handle_redis_connection_error
    @beartype
    def hit(self, shortcode: str, accessed_at: datetime | None = None, **kwargs) -> UrlRecordModel:
        """Record one resolution of a shortcode.

        NOTE: the existence check is not part of the transaction. This is safe
              because records are never deleted: once a record exists, it exists
              for good.

        Args:
            shortcode (str):
                The shortcode being resolved.
            accessed_at (datetime | None):
                Moment of the resolution. Defaults to now (UTC).
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            UrlRecordModel:
                The record after the increment.

        Raises:
            UrlRecordNotFoundError:
                If no record with the given shortcode exists.
            DataStoreError:
                If Redis connectivity issues occur.

        Example:
            >>> dao.hit('abc123XY').clicks
            4
        """
        record_key = self.keys.record_key(shortcode)
        if not self.redis.exists(record_key):
            raise UrlRecordNotFoundError(f"Short URL with code '{shortcode}' not found.")

        accessed_at = accessed_at or datetime.now(UTC)

        # NOTE: HINCRBY and INCR are server-side increments, so concurrent hits
        #       are never lost. MULTI keeps the per-record counter and the global
        #       total in step with each other.
        with self.redis.pipeline(transaction=True) as pipe:
            pipe.hincrby(record_key, 'clicks', 1)
            pipe.hset(record_key, 'last_accessed', accessed_at.isoformat())
            pipe.incr(self.keys.clicks_total_key())
            pipe.hgetall(record_key)
            *_, fields = pipe.execute()

        return self._to_model(shortcode, fields)

    @handle_redis_connection_error
    def list_all(self, **kwargs) -> list[UrlRecordModel]:
        shortcodes = self.redis.zrevrange(self.keys.created_index_key(), 0, -1)
        if not shortcodes:
            return []

        with self.redis.pipeline(transaction=False) as pipe:
            for shortcode in shortcodes:
                pipe.hgetall(self.keys.record_key(shortcode))
            rows = pipe.execute()

        return [self._to_model(shortcode, fields) for shortcode, fields in zip(shortcodes, rows) if fields]

    @handle_redis_connection_error
    def count(self, **kwargs) -> int:
        return int(self.redis.zcard(self.keys.created_index_key()))

    @handle_redis_connection_error
    def total_clicks(self, **kwargs) -> int:
        return int(self.redis.get(self.keys.clicks_total_key()) or 0)

    @staticmethod
    def _to_model(shortcode: str, fields: dict[str, str]) -> UrlRecordModel:
        last_accessed = fields.get('last_accessed')
        return UrlRecordModel(
            original_url=fields['url'],
            shortcode=shortcode,
            clicks=int(fields.get('clicks', 0)),
            created_at=datetime.fromisoformat(fields['created_at']),
            last_accessed=datetime.fromisoformat(last_accessed) if last_accessed else None,
        )
