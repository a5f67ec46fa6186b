"""
Call Encoder

Builds contract calldata from a function ABI and ordered parameter values:
the 4-byte method selector followed by the standard fixed-width encoding of
every parameter.

Exported helpers
----------------
encode_call
    Selector + encoded parameters as a 0x-prefixed lowercase hex string.

method_id
    First 4 bytes of the keccak-256 hash of the canonical signature.

encode_parameters
    Raw parameter encoding, one 32-byte slot per supported type.

normalize_value
    Coerce an asset-supplied value (decimal/hex strings, any-case
    addresses) into the form the codec accepts.
"""

import logging
import re
from typing import Any, Dict, Sequence, Union

from eth_abi import encode as abi_encode
from eth_abi.exceptions import EncodingError as ABIEncodingError
from eth_utils import encode_hex, is_checksum_address, is_checksum_formatted_address, is_hex_address, to_bytes
from web3 import Web3

from .defaults import canonical_type
from ..constants import get_settings
from ..engine.exceptions import ParameterEncodingError, ValidationError
from ..schemas.abi import FunctionABI

logger = logging.getLogger(__name__)

_INT_TYPES = {"int", "uint", "int256", "uint8", "uint16", "uint32", "uint64", "uint256"}
_DECIMAL_RE = re.compile(r"-?[0-9]+")
_HEX_RE = re.compile(r"-?0[xX][0-9a-fA-F]+")


def hex_to_bytes32(hexstr: str) -> bytes:
    """Decode a hex string of at most 32 bytes, right-padded like any ``bytesN`` value."""
    data = to_bytes(hexstr=hexstr)
    if len(data) > 32:
        raise ParameterEncodingError(f"bytes32 value too long: {len(data)} bytes")
    return data.ljust(32, b"\x00")


def method_id(name: str, types: Sequence[str]) -> bytes:
    """
    Compute the 4-byte selector of a function.

    Args:
        name: Function name.
        types: Input types in declaration order; ``int``/``uint`` are
            normalised to their 256-bit form before hashing.

    Returns:
        bytes: First 4 bytes of ``keccak256("name(type1,type2,...)")``.

    Example::

        method_id("transfer", ["address", "uint256"]).hex()  # 'a9059cbb'
    """
    signature = f"{name}({','.join(canonical_type(t) for t in types)})"
    return bytes(Web3.keccak(text=signature)[:4])


def encode_parameters(types: Sequence[str], values: Sequence[Any]) -> bytes:
    """
    Encode parameter values with the standard ABI codec.

    Raises:
        ValidationError: If the number of values differs from the number of types.
        ParameterEncodingError: If the codec rejects a value.
    """
    if len(types) != len(values):
        raise ValidationError(f"Expected {len(types)} parameters, got {len(values)}")
    canonical = [canonical_type(t) for t in types]
    try:
        return abi_encode(canonical, list(values))
    except ABIEncodingError as e:
        raise ParameterEncodingError(f"Cannot encode parameters {values!r} as {canonical}: {e}") from e


def encode_call(abi: Union[FunctionABI, Dict[str, Any]], parameters: Sequence[Any]) -> str:
    """
    Encode a complete contract call.

    Args:
        abi: Function ABI (a ``FunctionABI`` or an equivalent JSON ABI dict).
        parameters: Values in input order, already in codec-acceptable form.

    Returns:
        str: ``0x`` + selector + encoded parameters, lowercase hex.

    Raises:
        UnsupportedTypeError: If an input type is not a supported elementary type.
        ValidationError: On parameter count mismatch.
        ParameterEncodingError: If the codec rejects a value.
    """
    if not isinstance(abi, FunctionABI):
        abi = FunctionABI.model_validate(abi)
    types = abi.input_types()
    calldata = encode_hex(method_id(abi.name, types) + encode_parameters(types, parameters))
    logger.debug("Encoded %s -> %s", abi.signature(), calldata)
    return calldata


def _normalize_address(value: Any) -> str:
    if isinstance(value, (bytes, bytearray)) and len(value) == 20:
        return Web3.to_checksum_address(bytes(value))
    if not isinstance(value, str) or not is_hex_address(value):
        raise ParameterEncodingError(f"Invalid address: {value!r}")
    if get_settings().strict_addresses and is_checksum_formatted_address(value) and not is_checksum_address(value):
        raise ValidationError(f"Address fails EIP-55 checksum: {value}")
    return Web3.to_checksum_address(value)


def _normalize_int(value: Any) -> int:
    if isinstance(value, bool):
        raise ParameterEncodingError(f"Expected integer, got bool {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        if _HEX_RE.fullmatch(text):
            return int(text, 16)
        if _DECIMAL_RE.fullmatch(text):
            return int(text, 10)
        raise ParameterEncodingError(f"Invalid integer: {value!r}")
    raise ParameterEncodingError(f"Expected integer, got {type(value).__name__}")


def _normalize_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    raise ParameterEncodingError(f"Expected bool, got {value!r}")


def _normalize_bytes32(value: Any) -> bytes:
    if isinstance(value, (bytes, bytearray)):
        if len(value) > 32:
            raise ParameterEncodingError(f"bytes32 value too long: {len(value)} bytes")
        return bytes(value).ljust(32, b"\x00")
    if isinstance(value, str):
        try:
            return hex_to_bytes32(value)
        except ValueError:
            raise ParameterEncodingError(f"Invalid bytes32 hex string: {value!r}") from None
    raise ParameterEncodingError(f"Expected bytes32, got {type(value).__name__}")


def normalize_value(abi_type: str, value: Any) -> Any:
    """
    Coerce a caller-supplied value into the form the codec accepts.

    * ``address``: bytes or hex string of any case → EIP-55 checksum string.
    * integer types: ``int`` or decimal / ``0x`` hex string → ``int``.
    * ``bool``: ``bool`` or ``"true"`` / ``"false"``.
    * ``bytes32``: bytes, or hex string, right-padded to 32 bytes.

    Raises:
        UnsupportedTypeError: If the type is not supported.
        ValidationError: For a bad checksum while strict address checking is on.
        ParameterEncodingError: If the value cannot be coerced.
    """
    abi_type = canonical_type(abi_type)
    if abi_type == "address":
        return _normalize_address(value)
    if abi_type == "bool":
        return _normalize_bool(value)
    if abi_type == "bytes32":
        return _normalize_bytes32(value)
    if abi_type in _INT_TYPES:
        return _normalize_int(value)
    raise ParameterEncodingError(f"No normalisation rule for type {abi_type}")
