"""
Replacement Pattern Encoder

A replacement pattern is a byte mask with one mask byte per calldata byte.
Mask bytes of ``0xff`` cover calldata a counter-party may fill in; ``0x00``
bytes must match exactly. The matcher accepts two calls as equal when
``(a XOR b) AND NOT mask == 0``.

The mask is computed from default values rather than from the real call, so
every input type must have a statically known encoded width. This is why
dynamic-length types are rejected by the default-value generator.
"""

import logging
from typing import Iterable

from eth_abi import encode as abi_encode
from eth_utils import encode_hex

from .defaults import canonical_type, generate_default_value
from ..constants import MASK_KEEP, MASK_REPLACE, SELECTOR_LENGTH
from ..engine.exceptions import ValidationError
from ..schemas.abi import AnnotatedFunctionABI, AnnotatedFunctionInput, FunctionInputKind

logger = logging.getLogger(__name__)


def slot_width(abi_input: AnnotatedFunctionInput) -> int:
    """Width in bytes of an input's encoding, measured on its default value."""
    return len(abi_encode([canonical_type(abi_input.type)], [generate_default_value(abi_input.type)]))


def encode_replacement_pattern(
    abi: AnnotatedFunctionABI,
    replace_kind: FunctionInputKind = FunctionInputKind.Replaceable,
) -> str:
    """
    Build the replacement pattern of an annotated function.

    The selector bytes are never replaceable. Each input contributes a span
    as wide as its encoded default value, set to ``0xff`` when the input's
    kind equals ``replace_kind``.

    Args:
        abi: Annotated function ABI.
        replace_kind: Role whose slots are left open.

    Returns:
        str: 0x-prefixed hex mask, same byte length as the encoded call.

    Raises:
        UnsupportedTypeError: If an input type has no default value.
        ValidationError: If ``replace_kind`` is not a ``FunctionInputKind``.
    """
    if not isinstance(replace_kind, FunctionInputKind):
        raise ValidationError(f"Unknown input kind: {replace_kind!r}")
    widths = [slot_width(i) for i in abi.inputs]
    mask = bytearray([MASK_KEEP]) * (SELECTOR_LENGTH + sum(widths))
    offset = SELECTOR_LENGTH
    for abi_input, width in zip(abi.inputs, widths):
        if abi_input.kind == replace_kind:
            mask[offset:offset + width] = bytes([MASK_REPLACE]) * width
        offset += width
    pattern = encode_hex(bytes(mask))
    logger.debug("Replacement pattern for %s (%s): %s", abi.signature(), replace_kind.value, pattern)
    return pattern


def pack_bits(bits: Iterable[int]) -> bytes:
    """
    Pack a sequence of bits into bytes, most significant bit first.

    Bits are grouped 8 at a time; the final partial group is right-padded
    with zeros.

    Example::

        pack_bits([1, 0, 1])  # b'\\xa0'
    """
    packed = bytearray()
    current = 0
    count = 0
    for bit in bits:
        current = (current << 1) | (1 if bit else 0)
        count += 1
        if count == 8:
            packed.append(current)
            current = 0
            count = 0
    if count:
        packed.append(current << (8 - count))
    return bytes(packed)
