import json
import logging

from shortlinks.types import LambdaEvent, LambdaContext, LambdaResponse
from shortlinks.constants import DATA_STORE_UNAVAILABLE
from shortlinks.exceptions import ConfigurationError, MissingUrlError, InvalidUrlError, GenerationExhaustedError
from shortlinks.dao.redis import UrlRecordRedisDAO
from shortlinks.dao.exceptions import DataStoreError
from shortlinks.services import ShorteningService
from shortlinks.utils import load_config, get_short_url, app_prefix, guarantee_500_response
from shortlinks.utils.responses import response_200, response_201, response_400, response_500, response_503
from shortlinks.lambdas.shorten_url.constants import (
    INVALID_JSON,
    MISSING_URL,
    INVALID_URL,
    GENERATION_EXHAUSTED,
    SHORTEN_SUCCESS,
)


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle incoming API Gateway requests to shorten URLs

    This Lambda handler follows this procedure to shorten URLs:
    - Step 1: Extract original URL from request body
    - Step 2: Shorten the URL (reusing the existing shortcode for known URLs)
    - Step 3: Respond with the short URL

    HTTP responses:
        201: URL shortened for the first time
        200: URL was already shortened; the existing short URL is returned
            message: success message
            originalUrl: original url (trimmed)
            shortUrl: short url
            shortCode: shortcode
        400: Bad client request
            message: indicate cause of bad request (invalid JSON, missing or invalid URL)
        500: Internal server error
            message: indicate the server experienced an internal error
        503: Service unavailable
            message: data store can't be reached

    Args:
        event (LambdaEvent):
            API Gateway event payload in Lambda Proxy format.
        context (LambdaContext):
            AWS Lambda context object containing runtime information.

    Returns:
        LambdaResponse:
            API Gateway-compatible response including statusCode, headers, and body.

    Example:
        >>> event = {'body': '{"originalUrl": "https://example.com"}'}
        >>> response = lambda_handler(event, None)
        >>> response['statusCode']
        201
        >>> json.loads(response['body'])['shortUrl']
        'http://localhost:3000/q3ZbT0aK'
    """
    # 0- Get application's config
    try:
        app_config = load_config('shorten_url')
        redis_config = {f'redis_{k}': v for k, v in app_config['redis'].items()}
    except (ConfigurationError, KeyError):
        logger.exception('Failed to load AppConfig for shorten URL function. Responding with 500.')
        return response_500()

    # 1- Extract original URL from request body
    try:
        request_body = json.loads(event.get('body') or '{}')
    except json.JSONDecodeError:
        logger.info('Invalid JSON body. Responding with 400.', extra={'event': INVALID_JSON})
        return response_400(message='invalid JSON body', error_code=INVALID_JSON)
    if not isinstance(request_body, dict):
        logger.info('JSON body is not an object. Responding with 400.', extra={'event': INVALID_JSON})
        return response_400(message='JSON body must be an object', error_code=INVALID_JSON)

    original_url = request_body.get('originalUrl', request_body.get('original_url', request_body.get('url')))

    # 2- Shorten the URL
    try:
        short_url_dao = UrlRecordRedisDAO(**redis_config, prefix=app_prefix())
        result = ShorteningService(short_url_dao).shorten(original_url)
    except MissingUrlError:
        logger.info('Missing URL in request body. Responding with 400.', extra={'event': MISSING_URL})
        return response_400(message="missing 'originalUrl' in JSON body", error_code=MISSING_URL)
    except InvalidUrlError:
        logger.info('Invalid URL in request body. Responding with 400.', extra={'event': INVALID_URL})
        return response_400(message='invalid URL format', error_code=INVALID_URL)
    except GenerationExhaustedError:
        logger.exception('Could not mint a unique shortcode. Responding with 500.', extra={'event': GENERATION_EXHAUSTED})
        return response_500(message='unable to generate a unique shortcode', error_code=GENERATION_EXHAUSTED)
    except DataStoreError:
        logger.exception('Data store unavailable. Responding with 503.', extra={'event': DATA_STORE_UNAVAILABLE})
        return response_503(error_code=DATA_STORE_UNAVAILABLE)

    # 3- Respond with the short URL
    short_url = get_short_url(result.shortcode, event)
    body = {
        'message': f'Successfully shortened {result.original_url} to {short_url}',
        'originalUrl': result.original_url,
        'shortUrl': short_url,
        'shortCode': result.shortcode,
    }
    logger.info(
        'Shortened URL. Responding with %s.',
        201 if result.created else 200,
        extra={'shortcode': result.shortcode, 'created': result.created, 'event': SHORTEN_SUCCESS},
    )
    return response_201(body) if result.created else response_200(body)
