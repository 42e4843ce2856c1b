from enum import StrEnum


class Shortcode:
    """Shortcode generation defaults."""

    LENGTH = 8  # Default shortcode length
    MIN_LENGTH = 7
    MAX_LENGTH = 14
    MAX_GENERATION_ATTEMPTS = 10  # Collision retries before giving up


class Timeout:
    """Timeouts in seconds."""

    REDIS_SOCKET = 5  # Applies to every Redis command and connection attempt
    APPCONFIG_AGENT = 5


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        APP_NAME = 'APP_NAME'
        AWS_SAM_LOCAL = 'AWS_SAM_LOCAL'
        LOG_LEVEL = 'LOG_LEVEL'

    class AppConfig(StrEnum):
        APP_ID = 'APPCONFIG_APP_ID'
        ENV_ID = 'APPCONFIG_ENV_ID'
        PROFILE_ID = 'APPCONFIG_PROFILE_ID'
        AGENT_URL = 'APPCONFIG_AGENT_URL'
        PROFILE_NAME = 'APPCONFIG_PROFILE_NAME'


# Fallback public base URL for short links (local invocations, tests)
LOCAL_BASE_URL = 'http://localhost:3000'

# Error codes
UNKNOWN_INTERNAL_SERVER_ERROR = 'UNKNOWN_INTERNAL_SERVER_ERROR'
DATA_STORE_UNAVAILABLE = 'DATA_STORE_UNAVAILABLE'
