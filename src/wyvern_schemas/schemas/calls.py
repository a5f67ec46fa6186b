"""
Call Specification Models

``CallSpec`` is the output handed to the order construction layer: the
contract to call, the exact calldata, and the replacement pattern telling the
matcher which calldata bytes the counter-party may fill in.
"""

from eth_utils import decode_hex, is_hex
from pydantic import Field, field_validator, model_validator

from .bases import CanonicalModel
from ..constants import EMPTY_PATTERN


def _check_hex(value: str) -> str:
    if not value.startswith("0x") or not is_hex(value) or len(value) % 2:
        raise ValueError(f"Expected 0x-prefixed even-length hex string, got {value!r}")
    return value.lower()


class LimitedCallSpec(CanonicalModel):
    """
    Target and calldata of a contract call.

    Attributes:
        target: Contract address (0x-prefixed, 42 chars).
        calldata: Selector followed by encoded parameters, 0x-prefixed hex.
    """
    target: str = Field(..., description="Contract address")
    calldata: str = Field(..., description="0x-prefixed calldata")

    @field_validator("calldata")
    @classmethod
    def _calldata_is_hex(cls, value: str) -> str:
        return _check_hex(value)


class CallSpec(LimitedCallSpec):
    """
    Call specification with its replacement pattern.

    The pattern holds one mask byte per calldata byte; ``0xff`` marks a byte
    the counter-party may replace. The empty pattern ``0x`` requires an exact
    match on every byte.

    Attributes:
        replacement_pattern: Mask, 0x-prefixed hex (wire name ``replacementPattern``).
    """
    replacement_pattern: str = Field(
        default=EMPTY_PATTERN, alias="replacementPattern", description="0x-prefixed replacement mask"
    )

    @field_validator("replacement_pattern")
    @classmethod
    def _pattern_is_hex(cls, value: str) -> str:
        return _check_hex(value)

    @model_validator(mode="after")
    def _pattern_matches_calldata(self) -> "CallSpec":
        if self.replacement_pattern == EMPTY_PATTERN:
            return self
        calldata_len = len(decode_hex(self.calldata))
        pattern_len = len(decode_hex(self.replacement_pattern))
        if calldata_len != pattern_len:
            raise ValueError(
                f"replacementPattern length {pattern_len} does not match calldata length {calldata_len}"
            )
        return self

    def has_pattern(self) -> bool:
        return self.replacement_pattern != EMPTY_PATTERN
