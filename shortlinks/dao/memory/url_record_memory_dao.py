"""In-process implementation of UrlRecordBaseDAO

Keeps URL records in dictionaries guarded by a lock owned by the store, so
uniqueness and click increments behave exactly as the Redis implementation
does for threads sharing one instance. Records live only as long as the
instance; use it for tests and local experiments, never across processes.

Example:
    >>> dao = UrlRecordMemoryDAO()
    >>> dao.insert(UrlRecordModel(original_url='https://example.com', shortcode='abc123XY', created_at=datetime.now(UTC)))
    <UrlRecordMemoryDAO>
    >>> dao.count()
    1
"""

import threading
from dataclasses import replace
from datetime import datetime, UTC

from beartype import beartype

from shortlinks.models import UrlRecordModel
from shortlinks.dao.base import UrlRecordBaseDAO
from shortlinks.dao.exceptions import (
    ShortCodeAlreadyExistsError,
    OriginalUrlAlreadyExistsError,
    UrlRecordNotFoundError,
)


class UrlRecordMemoryDAO(UrlRecordBaseDAO):
    def __init__(self):
        self._lock = threading.Lock()
        self._records: dict[str, UrlRecordModel] = {}
        self._shortcodes_by_url: dict[str, str] = {}
        self._total_clicks = 0

    @beartype
    def insert(self, url_record: UrlRecordModel, **kwargs) -> 'UrlRecordMemoryDAO':
        with self._lock:
            if url_record.shortcode in self._records:
                raise ShortCodeAlreadyExistsError(f"Short URL with code '{url_record.shortcode}' already exists.")
            owner = self._shortcodes_by_url.get(url_record.original_url)
            if owner is not None:
                raise OriginalUrlAlreadyExistsError(
                    f"URL '{url_record.original_url}' is already shortened to '{owner}'.",
                    shortcode=owner,
                )
            self._records[url_record.shortcode] = url_record
            self._shortcodes_by_url[url_record.original_url] = url_record.shortcode
            self._total_clicks += url_record.clicks
        return self

    @beartype
    def get(self, shortcode: str, **kwargs) -> UrlRecordModel:
        with self._lock:
            try:
                return self._records[shortcode]
            except KeyError:
                raise UrlRecordNotFoundError(f"Short URL with code '{shortcode}' not found.") from None

    @beartype
    def find_by_original_url(self, original_url: str, **kwargs) -> UrlRecordModel | None:
        with self._lock:
            shortcode = self._shortcodes_by_url.get(original_url)
            return None if shortcode is None else self._records[shortcode]

    @beartype
    def hit(self, shortcode: str, accessed_at: datetime | None = None, **kwargs) -> UrlRecordModel:
        with self._lock:
            record = self._records.get(shortcode)
            if record is None:
                raise UrlRecordNotFoundError(f"Short URL with code '{shortcode}' not found.")

            record = replace(record, clicks=record.clicks + 1, last_accessed=accessed_at or datetime.now(UTC))
            self._records[shortcode] = record
            self._total_clicks += 1
            return record

    def list_all(self, **kwargs) -> list[UrlRecordModel]:
        with self._lock:
            return sorted(self._records.values(), key=lambda record: record.created_at, reverse=True)

    def count(self, **kwargs) -> int:
        with self._lock:
            return len(self._records)

    def total_clicks(self, **kwargs) -> int:
        with self._lock:
            return self._total_clicks
