from .defaults import generate_default_value, canonical_type, is_supported_type
from .calls import encode_call, encode_parameters, method_id, normalize_value
from .patterns import encode_replacement_pattern, pack_bits, slot_width
from .orders import (
    get_transfer_function,
    encode_default_call,
    encode_sell,
    encode_buy,
)
from .matching import guarded_array_replace, masked_equal, calldata_can_match

__all__ = [
    "generate_default_value",
    "canonical_type",
    "is_supported_type",
    "encode_call",
    "encode_parameters",
    "method_id",
    "normalize_value",
    "encode_replacement_pattern",
    "pack_bits",
    "slot_width",
    "get_transfer_function",
    "encode_default_call",
    "encode_sell",
    "encode_buy",
    "guarded_array_replace",
    "masked_equal",
    "calldata_can_match",
]
