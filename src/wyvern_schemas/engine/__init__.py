from .exceptions import (
    BaseException,
    EncodingError,
    UnsupportedTypeError,
    ParameterEncodingError,
    ValidationError,
    SchemaLookupError,
    ConfigurationError,
)

__all__ = [
    "BaseException",
    "EncodingError",
    "UnsupportedTypeError",
    "ParameterEncodingError",
    "ValidationError",
    "SchemaLookupError",
    "ConfigurationError",
]
