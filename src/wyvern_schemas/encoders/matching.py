"""
Calldata Matching

Verifier-side counterpart of the replacement patterns: the byte-wise logic an
on-chain exchange runs before executing a matched pair of orders.

Each side's pattern is applied to its own calldata with the other side's
calldata as the replacement source; the orders match when the results are
equal.
"""

from typing import Union

from eth_utils import decode_hex

from ..engine.exceptions import ValidationError
from ..schemas.calls import CallSpec

HexOrBytes = Union[str, bytes]


def _as_bytes(value: HexOrBytes) -> bytes:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    return decode_hex(value)


def guarded_array_replace(array: HexOrBytes, desired: HexOrBytes, mask: HexOrBytes) -> bytes:
    """
    Replace the bytes of ``array`` selected by ``mask`` with those of ``desired``.

    Computes ``(array & ~mask) | (desired & mask)`` byte by byte.

    Raises:
        ValidationError: If the three inputs differ in length.
    """
    array, desired, mask = _as_bytes(array), _as_bytes(desired), _as_bytes(mask)
    if not len(array) == len(desired) == len(mask):
        raise ValidationError(
            f"Length mismatch: array={len(array)}, desired={len(desired)}, mask={len(mask)}"
        )
    return bytes((a & ~m) | (d & m) for a, d, m in zip(array, desired, mask))


def masked_equal(a: HexOrBytes, b: HexOrBytes, mask: HexOrBytes) -> bool:
    """Return True when ``(a XOR b) AND NOT mask`` is zero on every byte."""
    a, b, mask = _as_bytes(a), _as_bytes(b), _as_bytes(mask)
    if not len(a) == len(b) == len(mask):
        raise ValidationError(f"Length mismatch: a={len(a)}, b={len(b)}, mask={len(mask)}")
    return all(((x ^ y) & ~m) & 0xFF == 0 for x, y, m in zip(a, b, mask))


def calldata_can_match(buy: CallSpec, sell: CallSpec) -> bool:
    """
    Check whether a buy-side and a sell-side call resolve to the same call.

    An empty pattern leaves its calldata untouched. Calls of different
    lengths or targets never match.
    """
    if buy.target.lower() != sell.target.lower():
        return False
    buy_calldata = decode_hex(buy.calldata)
    sell_calldata = decode_hex(sell.calldata)
    if len(buy_calldata) != len(sell_calldata):
        return False
    if buy.has_pattern():
        buy_calldata = guarded_array_replace(buy_calldata, sell_calldata, buy.replacement_pattern)
    if sell.has_pattern():
        sell_calldata = guarded_array_replace(sell_calldata, buy_calldata, sell.replacement_pattern)
    return buy_calldata == sell_calldata
