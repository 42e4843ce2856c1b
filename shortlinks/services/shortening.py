"""Shortening service: map a long URL to an existing or newly minted shortcode.

Example:
    >>> from shortlinks.dao.memory import UrlRecordMemoryDAO
    >>> service = ShorteningService(UrlRecordMemoryDAO())
    >>> first = service.shorten('https://example.com/blog/article-123')
    >>> first.created
    True
    >>> again = service.shorten('https://example.com/blog/article-123')
    >>> (again.shortcode == first.shortcode, again.created)
    (True, False)
"""

import logging
from datetime import datetime, UTC
from collections.abc import Callable

from shortlinks.constants import Shortcode
from shortlinks.dao.base import UrlRecordBaseDAO
from shortlinks.dao.exceptions import ShortCodeAlreadyExistsError, OriginalUrlAlreadyExistsError
from shortlinks.exceptions import GenerationExhaustedError
from shortlinks.models import UrlRecordModel, ShortenResult
from shortlinks.utils.shortener import generate_shortcode
from shortlinks.utils.validators import validate_url


logger = logging.getLogger(__name__)


class ShorteningService:
    """Idempotently shorten URLs.

    Attributes:
        dao (UrlRecordBaseDAO):
            Data store holding URL records. It enforces shortcode and original
            URL uniqueness, the service only reacts to its verdicts.
        generator (Callable[[], str]):
            Produces candidate shortcodes.
        max_attempts (int):
            Number of candidates tried before giving up.
    """

    def __init__(
        self,
        dao: UrlRecordBaseDAO,
        generator: Callable[[], str] = generate_shortcode,
        max_attempts: int = Shortcode.MAX_GENERATION_ATTEMPTS,
    ):
        if max_attempts < 1:
            raise ValueError(f'max_attempts must be a positive integer (given value: {max_attempts}).')

        self.dao = dao
        self.generator = generator
        self.max_attempts = max_attempts

    def shorten(self, original_url: str) -> ShortenResult:
        """Return the shortcode for a URL, minting one if the URL is new.

        Procedure:
        - Step 1: Trim and validate the URL
        - Step 2: Return the existing record's shortcode, if any
        - Step 3: Insert a record under a fresh candidate shortcode, retrying on collisions
        - Step 4: Return the newly inserted shortcode

        Args:
            original_url (str):
                Absolute URL to shorten. Surrounding whitespace is ignored.

        Returns:
            ShortenResult:
                The trimmed URL, its shortcode and whether this call created the record.

        Raises:
            MissingUrlError:
                If the URL is empty or missing.
            InvalidUrlError:
                If the URL has no scheme or host.
            GenerationExhaustedError:
                If every candidate shortcode collided with an existing one.
            DataStoreError:
                If the data store is unreachable.
        """
        # 1- Trim and validate the URL
        original_url = validate_url(original_url)

        # 2- Idempotent fast path: the URL was shortened before
        existing = self.dao.find_by_original_url(original_url)
        if existing is not None:
            logger.debug('URL already shortened.', extra={'shortcode': existing.shortcode})
            return ShortenResult(original_url=existing.original_url, shortcode=existing.shortcode, created=False)

        # 3- Mint a new shortcode, letting the data store reject duplicates
        for attempt in range(1, self.max_attempts + 1):
            candidate = self.generator()
            url_record = UrlRecordModel(original_url=original_url, shortcode=candidate, created_at=datetime.now(UTC))

            try:
                self.dao.insert(url_record)
            except ShortCodeAlreadyExistsError:
                logger.info('Shortcode collision. Retrying with a new candidate.', extra={'shortcode': candidate, 'attempt': attempt})
                continue
            except OriginalUrlAlreadyExistsError as e:
                # A concurrent request shortened the same URL first
                logger.info('URL shortened concurrently. Reusing its shortcode.', extra={'shortcode': e.shortcode})
                return ShortenResult(original_url=original_url, shortcode=e.shortcode, created=False)

            # 4- Return the newly minted shortcode
            logger.info('Shortened URL.', extra={'shortcode': candidate, 'attempt': attempt})
            return ShortenResult(original_url=original_url, shortcode=candidate, created=True)

        logger.error('Shortcode generation exhausted.', extra={'attempts': self.max_attempts})
        raise GenerationExhaustedError(f'Unable to generate a unique shortcode after {self.max_attempts} attempts.')
