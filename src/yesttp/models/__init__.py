from .errors import ConfigurationError, ResponseError
from .response import Response

__all__ = [
    "ConfigurationError",
    "Response",
    "ResponseError",
]
