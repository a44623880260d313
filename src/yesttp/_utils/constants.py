# Environment variables
ENV_BASE_URL = "YESTTP_BASE_URL"
ENV_CREDENTIALS = "YESTTP_CREDENTIALS"

# Headers
HEADER_CONTENT_TYPE = "Content-Type"

# Content types
APPLICATION_JSON = "application/json"

# Logging
LOGGER_NAME = "yesttp"
LOG_PREFIX = "[Yesttp]"
