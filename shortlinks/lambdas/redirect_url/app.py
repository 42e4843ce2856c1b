import logging

from shortlinks.types import LambdaEvent, LambdaContext, LambdaResponse
from shortlinks.constants import DATA_STORE_UNAVAILABLE
from shortlinks.exceptions import ConfigurationError
from shortlinks.dao.redis import UrlRecordRedisDAO
from shortlinks.dao.exceptions import DataStoreError, UrlRecordNotFoundError
from shortlinks.services import ResolutionService
from shortlinks.utils import load_config, get_short_url, app_prefix, guarantee_500_response
from shortlinks.utils.responses import response_302, response_400, response_404, response_500, response_503
from shortlinks.lambdas.redirect_url.constants import (
    MISSING_SHORTCODE,
    SHORT_URL_NOT_FOUND,
    REDIRECT_SUCCESS,
)


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle incoming API Gateway requests to redirect URLs

    This Lambda handler follows this procedure to redirect URLs:
    - Step 1: Extract shortcode from request path
    - Step 2: Resolve the shortcode (counting the click)
    - Step 3: Redirect client to original URL

    HTTP responses:
        302: Successful redirect
            headers:
                Location: original URL destination
        400: Bad client request
            message: missing shortcode in path parameters
        404: Not found
            message: no short URL with this shortcode
        500: Internal server error
            message: server experienced an internal error
        503: Service unavailable
            message: data store can't be reached

    Args:
        event (LambdaEvent):
            API Gateway event payload containing the shortcode path parameter.
        context (LambdaContext):
            AWS Lambda runtime context object (not used directly).

    Returns:
        LambdaResponse:
            API Gateway-compatible response including statusCode, headers, and body.

    Example:
        >>> event = {'pathParameters': {'shortcode': 'q3ZbT0aK'}}
        >>> response = lambda_handler(event, None)
        >>> response['statusCode']
        302
        >>> response['headers']['Location']
        'https://example.com/my-page'
    """
    # 0- Get application's config
    try:
        app_config = load_config('redirect_url')
        redis_config = {f'redis_{k}': v for k, v in app_config['redis'].items()}
    except (ConfigurationError, KeyError):
        logger.exception('Failed to load AppConfig for redirect URL function. Responding with 500.')
        return response_500()

    # 1- Extract shortcode from request's path
    shortcode = (event.get('pathParameters') or {}).get('shortcode')
    if not shortcode:
        logger.info('Missing "shortcode" in path. Responding with 400.', extra={'event': MISSING_SHORTCODE})
        return response_400(message="missing 'shortcode' in path", error_code=MISSING_SHORTCODE)
    logger.debug('Client requested short URL %s.', get_short_url(shortcode, event))

    # 2- Resolve the shortcode and count the click
    try:
        short_url_dao = UrlRecordRedisDAO(**redis_config, prefix=app_prefix())
        original_url = ResolutionService(short_url_dao).resolve(shortcode)
    except UrlRecordNotFoundError:
        logger.info(
            'Short URL record not found in database. Responding with 404.',
            extra={'shortcode': shortcode, 'event': SHORT_URL_NOT_FOUND},
        )
        return response_404(message=f"short url {get_short_url(shortcode, event)} doesn't exist", error_code=SHORT_URL_NOT_FOUND)
    except DataStoreError:
        logger.exception('Data store unavailable. Responding with 503.', extra={'event': DATA_STORE_UNAVAILABLE})
        return response_503(error_code=DATA_STORE_UNAVAILABLE)

    # 3- Redirect client to original URL
    logger.info(
        'Redirecting client to original URL. Responding with 302.',
        extra={'shortcode': shortcode, 'event': REDIRECT_SUCCESS},
    )
    return response_302(location=original_url)
