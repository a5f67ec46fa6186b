"""
Standard Asset Schemas

Ready-made schemas for common token standards, with the asset models their
transfer builders consume.

Usage:
    from wyvern_schemas.standards import ERC721_SCHEMA, ERC721Asset
    from wyvern_schemas import encode_sell

    asset = ERC721Asset(address="0x06012c8cf97BEaD5deAe237070F9587f8E7A266d", id=1)
    spec = encode_sell(ERC721_SCHEMA, asset, seller_address)
"""

from pydantic import Field

from .schemas.abi import AnnotatedFunctionABI, AnnotatedFunctionInput, FunctionInputKind, FunctionOutput
from .schemas.bases import CanonicalModel
from .schemas.schema import Schema, SchemaField, SchemaFunctions

CRYPTOKITTIES_ADDRESS = "0x06012c8cf97BEaD5deAe237070F9587f8E7A266d"


class ERC20Asset(CanonicalModel):
    """Fungible token balance: contract address and quantity in base units."""
    address: str = Field(..., description="Token contract address")
    quantity: int = Field(..., ge=0, description="Amount in the token's smallest unit")


class ERC721Asset(CanonicalModel):
    """Non-fungible token: contract address and token id."""
    address: str = Field(..., description="Token contract address")
    id: int = Field(..., ge=0, description="Token ID")


def get_erc20_transfer_abi(asset: ERC20Asset) -> AnnotatedFunctionABI:
    """
    Get the annotated ABI for ERC20 `transfer(to, value)`.

    Example:
        abi = get_erc20_transfer_abi(ERC20Asset(address=token, quantity=5))
        # abi.inputs[0] is the Replaceable recipient, abi.inputs[1] carries 5
    """
    return AnnotatedFunctionABI(
        name="transfer",
        target=asset.address,
        inputs=[
            AnnotatedFunctionInput(name="_to", type="address", kind=FunctionInputKind.Replaceable),
            AnnotatedFunctionInput(name="_value", type="uint256", kind=FunctionInputKind.Asset, value=asset.quantity),
        ],
        outputs=[FunctionOutput(name="success", type="bool")],
    )


def get_erc721_transfer_from_abi(asset: ERC721Asset) -> AnnotatedFunctionABI:
    """
    Get the annotated ABI for ERC721 `transferFrom(from, to, tokenId)`.

    `_from` is the current owner: the seller fills it, the buyer leaves it open.
    """
    return AnnotatedFunctionABI(
        name="transferFrom",
        target=asset.address,
        inputs=[
            AnnotatedFunctionInput(name="_from", type="address", kind=FunctionInputKind.Owner),
            AnnotatedFunctionInput(name="_to", type="address", kind=FunctionInputKind.Replaceable),
            AnnotatedFunctionInput(name="_tokenId", type="uint256", kind=FunctionInputKind.Asset, value=asset.id),
        ],
    )


def get_cryptokitties_transfer_abi(asset: ERC721Asset) -> AnnotatedFunctionABI:
    """Get the annotated ABI for the CryptoKitties `transfer(to, tokenId)`."""
    return AnnotatedFunctionABI(
        name="transfer",
        target=CRYPTOKITTIES_ADDRESS,
        inputs=[
            AnnotatedFunctionInput(name="_to", type="address", kind=FunctionInputKind.Replaceable),
            AnnotatedFunctionInput(name="_tokenId", type="uint256", kind=FunctionInputKind.Asset, value=asset.id),
        ],
    )


ERC20_SCHEMA = Schema(
    name="ERC20",
    description="Items conforming to the ERC20 spec, using transfer",
    fields=[
        SchemaField(name="Address", type="address", description="Asset Contract Address"),
        SchemaField(name="Quantity", type="uint256", description="Quantity to transfer"),
    ],
    functions=SchemaFunctions(transfer=get_erc20_transfer_abi),
)

ERC721_SCHEMA = Schema(
    name="ERC721",
    description="Items conforming to the ERC721 spec, using transferFrom",
    fields=[
        SchemaField(name="ID", type="uint256", description="Asset Token ID"),
        SchemaField(name="Address", type="address", description="Asset Contract Address"),
    ],
    functions=SchemaFunctions(transfer_from=get_erc721_transfer_from_abi),
)

CRYPTOKITTIES_SCHEMA = Schema(
    name="CryptoKitties",
    description="The virtual kitties that started the craze",
    fields=[
        SchemaField(name="ID", type="uint256", description="CryptoKitty number"),
    ],
    functions=SchemaFunctions(transfer=get_cryptokitties_transfer_abi),
)

__all__ = [
    "CRYPTOKITTIES_ADDRESS",
    "ERC20Asset",
    "ERC721Asset",
    "get_erc20_transfer_abi",
    "get_erc721_transfer_from_abi",
    "get_cryptokitties_transfer_abi",
    "ERC20_SCHEMA",
    "ERC721_SCHEMA",
    "CRYPTOKITTIES_SCHEMA",
]
