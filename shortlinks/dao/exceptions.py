"""Exceptions related to Data Access Objects (DAO) operations.

Classes:
    DAOError:
        Generic base class for DAO-related exceptions.

    UrlRecordNotFoundError:
        Raised when a UrlRecordModel is not found in the data store.

    ShortCodeAlreadyExistsError:
        Raised when attempting to insert a UrlRecordModel whose shortcode is taken.

    OriginalUrlAlreadyExistsError:
        Raised when attempting to insert a UrlRecordModel whose original URL
        is already mapped to another shortcode.

    DataStoreError:
        Raised when there is an error in the data store (e.g., connection issues, timeouts, OOM, etc.).

Example:
    >>> from shortlinks.dao.exceptions import UrlRecordNotFoundError
    >>> raise UrlRecordNotFoundError("Short URL with code 'abc123XY' not found.")
    Traceback (most recent call last):
        ...
    shortlinks.dao.exceptions.UrlRecordNotFoundError: Short URL with code 'abc123XY' not found.
"""


class DAOError(Exception):
    """Generic base class for DAO-related exceptions."""

    pass


class UrlRecordNotFoundError(DAOError):
    """Exception raised when a UrlRecordModel is not found in the data store."""

    pass


class ShortCodeAlreadyExistsError(DAOError):
    """Exception raised when attempting to insert a UrlRecordModel with an already taken shortcode."""

    pass


class OriginalUrlAlreadyExistsError(DAOError):
    """Exception raised when attempting to insert a UrlRecordModel for an already shortened URL.

    Attributes:
        shortcode (str | None):
            Shortcode of the record which already owns the original URL.
    """

    def __init__(self, message: str = '', shortcode: str | None = None):
        super().__init__(message)
        self.shortcode = shortcode


class DataStoreError(DAOError):
    """Exception raised when there is an error in the data store.

    e.g. connection issues, timeouts, OOM, etc.
    """

    pass
