"""
Default Value Generator

Canonical placeholder values for the elementary ABI types the encoders
support. Placeholders fill inputs whose real value is not known to the
encoding party, and give the replacement-pattern encoder the width of each
parameter slot.

Only fixed-width types are supported: a replacement pattern is computed from
placeholders, so every type must encode to the same width whatever its value.
"""

from typing import Any, Dict

from eth_abi.grammar import normalize

from ..constants import DEFAULT_ADDRESS, DEFAULT_BYTES32
from ..engine.exceptions import UnsupportedTypeError

_DEFAULT_VALUES: Dict[str, Any] = {
    "address": DEFAULT_ADDRESS,
    "bytes32": DEFAULT_BYTES32,
    "bool": False,
    "int": 0,
    "uint": 0,
    "uint8": 0,
    "uint16": 0,
    "uint32": 0,
    "uint64": 0,
    "uint256": 0,
}


def is_supported_type(abi_type: str) -> bool:
    return abi_type in _DEFAULT_VALUES


def generate_default_value(abi_type: str) -> Any:
    """
    Return the canonical placeholder for an elementary ABI type.

    Args:
        abi_type: Type string exactly as declared in the ABI (``uint`` and
            ``uint256`` are both accepted).

    Returns:
        ``0x1111...1111`` for ``address``, 32 zero bytes for ``bytes32``,
        ``False`` for ``bool`` and ``0`` for the integer types.

    Raises:
        UnsupportedTypeError: For arrays, dynamic bytes, strings and any
            other type not in the table.
    """
    try:
        return _DEFAULT_VALUES[abi_type]
    except KeyError:
        raise UnsupportedTypeError(abi_type) from None


def canonical_type(abi_type: str) -> str:
    """
    Return the type string used in signatures and by the codec.

    Bare ``int`` / ``uint`` become ``int256`` / ``uint256``.

    Raises:
        UnsupportedTypeError: If the type has no default value.
    """
    if not is_supported_type(abi_type):
        raise UnsupportedTypeError(abi_type)
    return normalize(abi_type)
