from .constants import EncoderSettings, get_settings, configure_logging, init_logging
from .engine.exceptions import (
    BaseException,
    EncodingError,
    UnsupportedTypeError,
    ParameterEncodingError,
    ValidationError,
    SchemaLookupError,
    ConfigurationError,
)
from .schemas import (
    FunctionInputKind,
    FunctionInput,
    FunctionABI,
    AnnotatedFunctionInput,
    AnnotatedFunctionABI,
    SchemaField,
    SchemaFunctions,
    Schema,
    LimitedCallSpec,
    CallSpec,
)
from .encoders import (
    generate_default_value,
    encode_call,
    method_id,
    encode_replacement_pattern,
    pack_bits,
    get_transfer_function,
    encode_default_call,
    encode_sell,
    encode_buy,
    guarded_array_replace,
    masked_equal,
    calldata_can_match,
)

init_logging()

__all__ = [
    "EncoderSettings",
    "get_settings",
    "configure_logging",
    "init_logging",
    "BaseException",
    "EncodingError",
    "UnsupportedTypeError",
    "ParameterEncodingError",
    "ValidationError",
    "SchemaLookupError",
    "ConfigurationError",
    "FunctionInputKind",
    "FunctionInput",
    "FunctionABI",
    "AnnotatedFunctionInput",
    "AnnotatedFunctionABI",
    "SchemaField",
    "SchemaFunctions",
    "Schema",
    "LimitedCallSpec",
    "CallSpec",
    "generate_default_value",
    "encode_call",
    "method_id",
    "encode_replacement_pattern",
    "pack_bits",
    "get_transfer_function",
    "encode_default_call",
    "encode_sell",
    "encode_buy",
    "guarded_array_replace",
    "masked_equal",
    "calldata_can_match",
]
