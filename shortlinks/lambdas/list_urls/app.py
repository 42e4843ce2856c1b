import logging
from typing import Any

from shortlinks.types import LambdaEvent, LambdaContext, LambdaResponse
from shortlinks.constants import DATA_STORE_UNAVAILABLE
from shortlinks.exceptions import ConfigurationError
from shortlinks.models import UrlRecordModel
from shortlinks.dao.redis import UrlRecordRedisDAO
from shortlinks.dao.exceptions import DataStoreError
from shortlinks.services import StatsService
from shortlinks.utils import load_config, get_short_url, app_prefix, guarantee_500_response
from shortlinks.utils.responses import response_200, response_500, response_503
from shortlinks.lambdas.list_urls.constants import LIST_URLS_SUCCESS


logger = logging.getLogger(__name__)


def serialize_url_record(url_record: UrlRecordModel, event: LambdaEvent) -> dict[str, Any]:
    return {
        'originalUrl': url_record.original_url,
        'shortCode': url_record.shortcode,
        'shortUrl': get_short_url(url_record.shortcode, event),
        'clicks': url_record.clicks,
        'createdAt': url_record.created_at.isoformat(),
        'lastAccessed': url_record.last_accessed.isoformat() if url_record.last_accessed else None,
    }


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle admin requests listing every shortened URL

    HTTP responses:
        200: JSON array of URL records, newest first
            originalUrl, shortCode, shortUrl, clicks, createdAt, lastAccessed
        500: Internal server error
        503: Service unavailable (data store can't be reached)

    Example:
        >>> response = lambda_handler({}, None)
        >>> json.loads(response['body'])[0]['shortUrl']
        'http://localhost:3000/q3ZbT0aK'
    """
    # 0- Get application's config
    try:
        app_config = load_config('list_urls')
        redis_config = {f'redis_{k}': v for k, v in app_config['redis'].items()}
    except (ConfigurationError, KeyError):
        logger.exception('Failed to load AppConfig for list URLs function. Responding with 500.')
        return response_500()

    # 1- Fetch all records
    try:
        short_url_dao = UrlRecordRedisDAO(**redis_config, prefix=app_prefix())
        url_records = StatsService(short_url_dao).list_all()
    except DataStoreError:
        logger.exception('Data store unavailable. Responding with 503.', extra={'event': DATA_STORE_UNAVAILABLE})
        return response_503(error_code=DATA_STORE_UNAVAILABLE)

    # 2- Respond with the serialized records
    logger.info('Listed URL records. Responding with 200.', extra={'count': len(url_records), 'event': LIST_URLS_SUCCESS})
    return response_200([serialize_url_record(url_record, event) for url_record in url_records])
