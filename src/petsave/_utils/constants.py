# Environment variables
ENV_API_SCHEME = "PETSAVE_API_SCHEME"
ENV_API_HOST = "PETSAVE_API_HOST"
ENV_TOKEN_PATH = "PETSAVE_TOKEN_PATH"
ENV_CLIENT_ID = "PETSAVE_CLIENT_ID"
ENV_CLIENT_SECRET = "PETSAVE_CLIENT_SECRET"
ENV_TIMEOUT = "PETSAVE_TIMEOUT"

# Defaults
DEFAULT_SCHEME = "https"
DEFAULT_HOST = "api.petfinder.com"
DEFAULT_TOKEN_PATH = "/v2/oauth2/token"
DEFAULT_TIMEOUT = 30.0

# Headers
HEADER_AUTHORIZATION = "Authorization"
HEADER_CONTENT_TYPE = "Content-Type"

# Content types
CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_FORM = "application/x-www-form-urlencoded"
CONTENT_TYPE_OCTET_STREAM = "application/octet-stream"

# Logger
LOGGER_NAME = "petsave"
