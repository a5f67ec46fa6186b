"""
Sell-side and Buy-side Call Encoding

Turns a schema and a concrete asset into the ``CallSpec`` each side of a
trade signs.

Seller
    Calls the transfer function with its own address in ``Owner`` slots and
    a placeholder in the ``Replaceable`` (recipient) slot, which it leaves
    open in the replacement pattern.

Buyer
    Puts its own address in the ``Replaceable`` slot and placeholders in
    ``Owner`` slots, which it leaves open so they can take the seller's
    values.

Applying each pattern with the other side's calldata yields the same call
on both sides (see ``matching.calldata_can_match``).
"""

import logging
from typing import Any, List

from .calls import encode_call, normalize_value
from .defaults import generate_default_value
from .patterns import encode_replacement_pattern
from ..constants import EMPTY_PATTERN
from ..engine.exceptions import SchemaLookupError, ValidationError
from ..schemas.abi import AnnotatedFunctionABI, AnnotatedFunctionInput, FunctionInputKind
from ..schemas.calls import CallSpec
from ..schemas.schema import Schema, TransferFunction

logger = logging.getLogger(__name__)


def get_transfer_function(schema: Schema) -> TransferFunction:
    """
    Return the schema's transfer builder, preferring ``transferFrom``.

    Raises:
        SchemaLookupError: If the schema defines neither function.
    """
    functions = schema.functions
    transfer = functions.transfer_from or functions.transfer
    if transfer is None:
        raise SchemaLookupError(schema.name)
    return transfer


def _resolve_transfer(schema: Schema, asset: Any) -> AnnotatedFunctionABI:
    transfer = get_transfer_function(schema)(asset)
    logger.debug("Resolved %s transfer function %s on %s", schema.name, transfer.signature(), transfer.target)
    return transfer


def _asset_value(abi_input: AnnotatedFunctionInput) -> Any:
    if abi_input.value is None:
        raise ValidationError(f"Asset input {abi_input.name!r} has no value")
    return normalize_value(abi_input.type, abi_input.value)


def _sell_parameter(abi_input: AnnotatedFunctionInput, address: str) -> Any:
    kind = abi_input.kind
    if kind is FunctionInputKind.Asset:
        return _asset_value(abi_input)
    if kind is FunctionInputKind.Replaceable:
        return generate_default_value(abi_input.type)
    if kind is FunctionInputKind.Owner:
        return normalize_value(abi_input.type, address)
    raise ValidationError(f"Unknown input kind {kind!r} for input {abi_input.name!r}")


def _buy_parameter(abi_input: AnnotatedFunctionInput, address: str) -> Any:
    kind = abi_input.kind
    if kind is FunctionInputKind.Asset:
        return _asset_value(abi_input)
    if kind is FunctionInputKind.Replaceable:
        return normalize_value(abi_input.type, address)
    if kind is FunctionInputKind.Owner:
        return generate_default_value(abi_input.type)
    raise ValidationError(f"Unknown input kind {kind!r} for input {abi_input.name!r}")


def encode_default_call(abi: AnnotatedFunctionABI, address: str) -> str:
    """
    Encode a call the way the seller does.

    ``Asset`` inputs take their value, ``Replaceable`` inputs a placeholder
    and ``Owner`` inputs ``address``.
    """
    parameters: List[Any] = [_sell_parameter(i, address) for i in abi.inputs]
    return encode_call(abi, parameters)


def encode_sell(schema: Schema, asset: Any, address: str) -> CallSpec:
    """
    Encode the seller's side of a trade.

    Args:
        schema: Asset schema.
        asset: Asset object understood by the schema's functions.
        address: Seller address, used for ``Owner`` inputs.

    Returns:
        CallSpec: Target, calldata and a pattern open over the
        ``Replaceable`` slots.

    Raises:
        SchemaLookupError: If the schema has no transfer function.
        UnsupportedTypeError: If an input type has no default value.
    """
    transfer = _resolve_transfer(schema, asset)
    return CallSpec(
        target=transfer.target,
        calldata=encode_default_call(transfer, address),
        replacement_pattern=encode_replacement_pattern(transfer),
    )


def encode_buy(schema: Schema, asset: Any, address: str) -> CallSpec:
    """
    Encode the buyer's side of a trade.

    Args:
        schema: Asset schema.
        asset: Asset object understood by the schema's functions.
        address: Buyer address, placed in the single ``Replaceable`` input.

    Returns:
        CallSpec: Target, calldata and a pattern open over the ``Owner``
        slots, or ``0x`` when there are none.

    Raises:
        SchemaLookupError: If the schema has no transfer function.
        ValidationError: Unless exactly one input is ``Replaceable``.
        UnsupportedTypeError: If an input type has no default value.
    """
    transfer = _resolve_transfer(schema, asset)
    replaceables = transfer.inputs_of_kind(FunctionInputKind.Replaceable)
    owner_inputs = transfer.inputs_of_kind(FunctionInputKind.Owner)

    if len(replaceables) != 1:
        raise ValidationError(
            f"Only 1 input can match transfer destination, but instead {len(replaceables)} did"
        )

    parameters = [_buy_parameter(i, address) for i in transfer.inputs]
    calldata = encode_call(transfer, parameters)

    replacement_pattern = EMPTY_PATTERN
    if owner_inputs:
        replacement_pattern = encode_replacement_pattern(transfer, FunctionInputKind.Owner)

    return CallSpec(
        target=transfer.target,
        calldata=calldata,
        replacement_pattern=replacement_pattern,
    )
