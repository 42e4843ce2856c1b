class ShortLinksError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:shortlinks_error'


class ShortenError(ShortLinksError):
    """Base exception for errors raised while shortening a URL."""

    error_code = 'app:shorten_error'


class MissingUrlError(ShortenError):
    """Raised when the URL to shorten is empty or missing."""

    error_code = 'client:missing_url'


class InvalidUrlError(ShortenError):
    """Raised when the URL to shorten is not an absolute URL with a scheme and host."""

    error_code = 'client:invalid_url'


class GenerationExhaustedError(ShortenError):
    """Raised when no unique shortcode could be minted within the retry budget."""

    error_code = 'app:generation_exhausted'


class ConfigurationError(ShortLinksError):
    """Base exception for all configuration errors."""

    error_code = 'config:configuration_error'


class MissingEnvironmentVariableError(ConfigurationError):
    """Raised when a required environment variable is missing."""

    error_code = 'config:missing_environment_variable_error'


class BadConfigurationError(ConfigurationError):
    """Raised when the application is configured with invalid parameters."""

    error_code = 'config:bad_configuration_error'
