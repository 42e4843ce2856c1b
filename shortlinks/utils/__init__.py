from shortlinks.utils.config import app_env, app_name, app_prefix, load_config
from shortlinks.utils.helpers import base_url, get_short_url, require_environment, guarantee_500_response
from shortlinks.utils.shortener import generate_shortcode
from shortlinks.utils.validators import validate_url
from shortlinks.utils.logging import initialize_logging


__all__ = [
    'generate_shortcode',
    'validate_url',
    'app_env',
    'app_name',
    'app_prefix',
    'load_config',
    'base_url',
    'get_short_url',
    'require_environment',
    'guarantee_500_response',
    'initialize_logging',
]
