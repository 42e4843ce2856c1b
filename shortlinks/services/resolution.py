import logging

from shortlinks.dao.base import UrlRecordBaseDAO
from shortlinks.dao.exceptions import UrlRecordNotFoundError


logger = logging.getLogger(__name__)


class ResolutionService:
    """Resolve shortcodes back to their original URLs, counting each visit."""

    def __init__(self, dao: UrlRecordBaseDAO):
        self.dao = dao

    def resolve(self, shortcode: str) -> str:
        """Return the original URL for a shortcode and record the visit.

        Every successful call adds exactly one click to the record and sets its
        last_accessed timestamp. Unknown shortcodes mutate nothing.

        Raises:
            UrlRecordNotFoundError:
                If no record with the given shortcode exists.
            DataStoreError:
                If the data store is unreachable.
        """
        if not shortcode:
            raise UrlRecordNotFoundError('Short URL with an empty code not found.')

        url_record = self.dao.hit(shortcode)
        logger.debug('Resolved shortcode.', extra={'shortcode': shortcode, 'clicks': url_record.clicks})
        return url_record.original_url
