from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class UrlRecordModel:
    """Represent a shortened URL mapping and its usage metadata.

    Attributes:
        original_url (str):
            The original long URL that the shortcode redirects to.
        shortcode (str):
            The unique short identifier representing the shortened URL.
        created_at (datetime):
            UTC moment the record was created. Never changes.
        clicks (int):
            Number of successful resolutions of the shortcode.
        last_accessed (datetime | None):
            UTC moment of the latest resolution, None until the first one.

    Example:
        >>> from datetime import datetime, UTC
        >>> record = UrlRecordModel(
        ...     original_url="https://example.com/article/123",
        ...     shortcode="abc123XY",
        ...     created_at=datetime.now(UTC),
        ... )
        >>> record.clicks
        0
        >>> record.last_accessed is None
        True
    """

    original_url: str
    shortcode: str
    created_at: datetime
    clicks: int = 0
    last_accessed: datetime | None = None


# fmt: off
@dataclass(frozen=True)
class ShortenResult:
    original_url: str   # Trimmed original URL
    shortcode: str      # Shortcode mapped to the original URL
    created: bool       # False when an existing mapping was returned
# fmt: on


@dataclass(frozen=True)
class UrlStats:
    """Aggregate usage totals across all URL records."""

    total_urls: int
    total_clicks: int
