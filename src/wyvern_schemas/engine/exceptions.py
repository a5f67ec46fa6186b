"""
Exception and Error Definitions Module

Defines the custom exception hierarchy raised while turning asset schemas into
call specifications. All exceptions inherit from BaseException for unified
exception handling.

Exception Hierarchy:
    BaseException (root)
    ├── EncodingError
    │   ├── UnsupportedTypeError
    │   └── ParameterEncodingError
    ├── ValidationError
    ├── SchemaLookupError
    └── ConfigurationError

Every error is terminal for the encode call that raised it. Encoding is a
deterministic computation, so callers should treat any of these as "this
asset/schema pair cannot be traded" and reject the order.
"""


class BaseException(Exception):
    """
    Root exception class for all project-specific exceptions.

    All custom exceptions should inherit from this class to enable
    unified exception handling and centralized error processing.
    """
    pass


class EncodingError(BaseException):
    """
    Base exception for failures while producing calldata or replacement patterns.

    Parent class for all errors raised by the ABI encoding layer.
    """
    pass


class UnsupportedTypeError(EncodingError):
    """
    Raised when an ABI input type has no defined default value.

    This includes scenarios such as:
    - Dynamic-length types (``bytes``, ``string``, arrays)
    - Elementary types outside the supported table (e.g. ``int128``)
    - Tuples / structs

    Attributes:
        abi_type: The offending ABI type string
    """

    def __init__(self, abi_type: str):
        self.abi_type = abi_type
        super().__init__(f"Default value not yet implemented for type: {abi_type}")


class ParameterEncodingError(EncodingError):
    """
    Raised when the ABI codec rejects a parameter value.

    This includes scenarios such as:
    - Integer out of range for its ``uintN`` width
    - Malformed address strings
    - ``bytes32`` values of the wrong length
    """
    pass


class ValidationError(BaseException, ValueError):
    """
    Raised when a structural precondition is violated before encoding.

    This includes scenarios such as:
    - Buy-side transfer function with zero or several replaceable inputs
    - Parameter count not matching the function inputs
    - Asset input without a value
    - Calldata and mask of different lengths
    - Non-checksummed address while strict address checking is enabled
    """
    pass


class SchemaLookupError(BaseException, LookupError):
    """
    Raised when a schema defines neither ``transferFrom`` nor ``transfer``.

    Attributes:
        schema_name: Name of the schema that was searched
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        super().__init__(f"Schema {schema_name!r} defines neither transferFrom nor transfer")


class ConfigurationError(BaseException):
    """
    Raised when configuration is missing or invalid.

    This includes scenarios such as:
    - Unknown log level names
    - Non-boolean values for boolean switches
    """
    pass
