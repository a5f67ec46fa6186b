"""
Encoder Test Mocks Module

Provides mock data and helpers shared by the encoder test suites.

Key Components:
    - Deterministic seller / buyer addresses derived from fixed private keys
    - Known selectors and expected encodings
    - Factories for annotated ABIs and schemas

Usage:
    from test_mocks import (
        MOCK_SELLER_ADDRESS,
        create_annotated_abi,
        create_schema,
    )
"""

from typing import Any, Dict, List, Optional, Tuple

from eth_account import Account

# Import schemas from the main codebase
import sys
from pathlib import Path
src_path = Path(__file__).parent.parent.parent / "src"
sys.path.insert(0, str(src_path))

from wyvern_schemas.schemas.abi import (
    AnnotatedFunctionABI,
    AnnotatedFunctionInput,
    FunctionInputKind,
)
from wyvern_schemas.schemas.schema import Schema, SchemaFunctions


# ========================================================================
# Mock Blockchain Constants
# ========================================================================

_seller_account = Account.from_key("0x1234567890123456789012345678901234567890123456789012345678901234")
_buyer_account = Account.from_key("0x4321432143214321432143214321432143214321432143214321432143214321")

MOCK_SELLER_ADDRESS = _seller_account.address
MOCK_BUYER_ADDRESS = _buyer_account.address
MOCK_TOKEN_ADDRESS = "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"

TRANSFER_SELECTOR = "a9059cbb"          # transfer(address,uint256)
TRANSFER_FROM_SELECTOR = "23b872dd"     # transferFrom(address,address,uint256)

DEFAULT_ADDRESS_SLOT = "00" * 12 + "11" * 20
ZERO_SLOT = "00" * 32
OPEN_SLOT = "ff" * 32
SELECTOR_MASK = "00" * 4


def address_slot(address: str) -> str:
    """32-byte hex slot holding a left-padded address."""
    return "00" * 12 + address[2:].lower()


def uint_slot(value: int) -> str:
    return format(value, "064x")


# ========================================================================
# Factories
# ========================================================================

def create_annotated_abi(
    inputs: List[Tuple[str, FunctionInputKind, Optional[Any]]],
    name: str = "transfer",
    target: str = MOCK_TOKEN_ADDRESS,
) -> AnnotatedFunctionABI:
    """
    Build an annotated ABI from ``(type, kind, value)`` triples.

    Inputs are named ``arg0``, ``arg1``, ... in order.
    """
    return AnnotatedFunctionABI(
        name=name,
        target=target,
        inputs=[
            AnnotatedFunctionInput(name=f"arg{i}", type=abi_type, kind=kind, value=value)
            for i, (abi_type, kind, value) in enumerate(inputs)
        ],
    )


def create_transfer_abi(amount: Any = 5) -> AnnotatedFunctionABI:
    """``transfer(address to, uint256 amount)`` with ``to`` replaceable."""
    return create_annotated_abi([
        ("address", FunctionInputKind.Replaceable, None),
        ("uint256", FunctionInputKind.Asset, amount),
    ])


def create_schema(
    transfer: Optional[AnnotatedFunctionABI] = None,
    transfer_from: Optional[AnnotatedFunctionABI] = None,
    name: str = "MockSchema",
) -> Schema:
    """Schema whose builders ignore the asset and return fixed ABIs."""
    functions: Dict[str, Any] = {}
    if transfer is not None:
        functions["transfer"] = lambda asset: transfer
    if transfer_from is not None:
        functions["transfer_from"] = lambda asset: transfer_from
    return Schema(name=name, functions=SchemaFunctions(**functions))
