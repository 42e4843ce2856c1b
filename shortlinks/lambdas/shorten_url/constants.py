# Log events and error codes
INVALID_JSON = 'INVALID_JSON'
MISSING_URL = 'MISSING_URL'
INVALID_URL = 'INVALID_URL'
GENERATION_EXHAUSTED = 'GENERATION_EXHAUSTED'
SHORTEN_SUCCESS = 'SHORTEN_SUCCESS'
