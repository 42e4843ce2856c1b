import logging

from shortlinks.types import LambdaEvent, LambdaContext, LambdaResponse
from shortlinks.constants import DATA_STORE_UNAVAILABLE
from shortlinks.exceptions import ConfigurationError
from shortlinks.dao.redis import UrlRecordRedisDAO
from shortlinks.dao.exceptions import DataStoreError
from shortlinks.services import StatsService
from shortlinks.utils import load_config, app_prefix, guarantee_500_response
from shortlinks.utils.responses import response_200, response_500, response_503
from shortlinks.lambdas.url_stats.constants import URL_STATS_SUCCESS


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle admin requests for aggregate usage statistics

    HTTP responses:
        200: Aggregate totals
            totalUrls: number of shortened URLs
            totalClicks: sum of clicks across all shortened URLs
        500: Internal server error
        503: Service unavailable (data store can't be reached)
    """
    # 0- Get application's config
    try:
        app_config = load_config('url_stats')
        redis_config = {f'redis_{k}': v for k, v in app_config['redis'].items()}
    except (ConfigurationError, KeyError):
        logger.exception('Failed to load AppConfig for URL stats function. Responding with 500.')
        return response_500()

    # 1- Aggregate totals
    try:
        short_url_dao = UrlRecordRedisDAO(**redis_config, prefix=app_prefix())
        stats = StatsService(short_url_dao).stats()
    except DataStoreError:
        logger.exception('Data store unavailable. Responding with 503.', extra={'event': DATA_STORE_UNAVAILABLE})
        return response_503(error_code=DATA_STORE_UNAVAILABLE)

    # 2- Respond with the totals
    logger.info(
        'Computed URL stats. Responding with 200.',
        extra={'totalUrls': stats.total_urls, 'totalClicks': stats.total_clicks, 'event': URL_STATS_SUCCESS},
    )
    return response_200({'totalUrls': stats.total_urls, 'totalClicks': stats.total_clicks})
