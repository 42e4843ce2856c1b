import logging
from datetime import datetime, UTC

from shortlinks.types import LambdaEvent, LambdaContext, LambdaResponse
from shortlinks.utils import guarantee_500_response
from shortlinks.utils.responses import response_200


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Report that the API is up. Does not touch the data store."""
    timestamp = datetime.now(UTC).isoformat(timespec='milliseconds').replace('+00:00', 'Z')
    logger.debug('Healthcheck requested.')
    return response_200({'status': 'OK', 'timestamp': timestamp})
