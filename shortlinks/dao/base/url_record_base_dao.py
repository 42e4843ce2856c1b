"""Abstract base class for UrlRecord data access objects (DAOs).

This class establishes a consistent contract for all UrlRecord DAO implementations,
regardless of the underlying storage mechanism (e.g., Redis, in-memory, PostgreSQL).

Responsibilities:
    - Provide an interface for inserting, retrieving and hitting UrlRecordModel objects.
    - Enforce uniqueness of both shortcodes and original URLs at the store level.
    - Standardize error handling across multiple data store implementations.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from datetime import datetime, UTC
        >>> from shortlinks.models import UrlRecordModel
        >>> from shortlinks.dao.redis import UrlRecordRedisDAO

        >>> dao = UrlRecordRedisDAO(...)

        >>> record = UrlRecordModel(
        ...     original_url="https://example.com/blog/article-123",
        ...     shortcode="a1b2c3d4",
        ...     created_at=datetime.now(UTC),
        ... )
        >>> dao.insert(record)

        >>> dao.hit("a1b2c3d4").clicks
        1

        >>> dao.find_by_original_url("https://example.com/blog/article-123").shortcode
        'a1b2c3d4'
"""

from abc import ABC, abstractmethod
from datetime import datetime

from shortlinks.models import UrlRecordModel


class UrlRecordBaseDAO(ABC):
    """Interface for UrlRecord data access objects (DAOs).

    Methods:
        insert(url_record: UrlRecordModel, **kwargs) -> UrlRecordBaseDAO:
            Atomically insert a new UrlRecordModel into the data store.
            Raises ShortCodeAlreadyExistsError if the shortcode already exists.
            Raises OriginalUrlAlreadyExistsError if the original URL already has a record.
            Raises DataStoreError on connection or write failure.

        get(shortcode: str, **kwargs) -> UrlRecordModel:
            Retrieve a UrlRecordModel by shortcode.
            Raises UrlRecordNotFoundError if the entry does not exist.

        find_by_original_url(original_url: str, **kwargs) -> UrlRecordModel | None:
            Retrieve a UrlRecordModel by original URL. Returns None if not found.

        hit(shortcode: str, accessed_at: datetime | None, **kwargs) -> UrlRecordModel:
            Atomically record one resolution of a shortcode.
            Raises UrlRecordNotFoundError if the entry does not exist.

        list_all(**kwargs) -> list[UrlRecordModel]:
            Return every record, newest first.

        count(**kwargs) -> int:
            Return the number of records.

        total_clicks(**kwargs) -> int:
            Return the sum of clicks across all records.

    Subclassing:
        Datastore-specific implementations (e.g., UrlRecordRedisDAO or
        UrlRecordMemoryDAO) must extend this class and implement all
        abstract methods.

    NOTE:
        - Records are never deleted. The DAO does not provide an interface
          to delete entries.
        - Uniqueness must be enforced by the data store itself, never by a
          check-then-insert sequence in the application.
    """

    @abstractmethod
    def insert(self, url_record: UrlRecordModel, **kwargs) -> 'UrlRecordBaseDAO':
        """Insert a new UrlRecordModel into the data store.

        The uniqueness checks for the shortcode and the original URL and the
        write itself must happen as one atomic step. A failed insert must not
        leave a partial record behind.

        Args:
            url_record (UrlRecordModel):
                The UrlRecordModel instance to be inserted.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            UrlRecordBaseDAO: self (for method chaining)

        Raises:
            ShortCodeAlreadyExistsError:
                If a record with the same shortcode already exists.

            OriginalUrlAlreadyExistsError:
                If a record with the same original URL already exists.
                The exception carries the existing record's shortcode.

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def get(self, shortcode: str, **kwargs) -> UrlRecordModel:
        """Retrieve a UrlRecordModel from the data store by its shortcode.

        Args:
            shortcode (str):
                The shortcode of the UrlRecordModel to be retrieved.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            UrlRecordModel: The stored record.

        Raises:
            UrlRecordNotFoundError:
                If no record with the given shortcode exists.

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def find_by_original_url(self, original_url: str, **kwargs) -> UrlRecordModel | None:
        """Retrieve a UrlRecordModel from the data store by its original URL.

        Args:
            original_url (str):
                The exact (trimmed) original URL.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            UrlRecordModel | None: The stored record if found, otherwise None.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def hit(self, shortcode: str, accessed_at: datetime | None = None, **kwargs) -> UrlRecordModel:
        """Record one resolution of a shortcode.

        Increments the record's clicks by exactly 1, sets its last_accessed
        timestamp and increments the global click total. The increments must
        be atomic in the data store (no read-modify-write), so concurrent hits
        are never lost.

        Args:
            shortcode (str):
                The shortcode being resolved.

            accessed_at (datetime | None):
                Moment of the resolution. Defaults to now (UTC).

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            UrlRecordModel: The record after the update.

        Raises:
            UrlRecordNotFoundError:
                If no record with the given shortcode exists. Nothing is mutated.

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def list_all(self, **kwargs) -> list[UrlRecordModel]:
        """Return all records sorted by created_at, newest first.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def count(self, **kwargs) -> int:
        """Return the total number of records.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def total_clicks(self, **kwargs) -> int:
        """Return the sum of clicks across all records (0 when there are none).

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass
