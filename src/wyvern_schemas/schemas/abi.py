"""
Function ABI Models

Pydantic models describing contract functions, plain and annotated.

An annotated function tags every input with a ``FunctionInputKind`` role which
decides how the input is filled on each side of a trade and which bytes of
the encoded call are left open to the counter-party:

* ``Asset``: fixed value supplied by the asset (token id, amount).
* ``Replaceable``: the recipient slot the buyer's address will occupy.
* ``Owner``: the current owner; the seller fills it, the buyer defaults it.

Input order is significant: both sides of a trade must encode the inputs in
the same order for the calldata to line up.
"""

from enum import Enum
from typing import Any, List, Literal, Optional

from pydantic import Field

from .bases import CanonicalModel


class FunctionInputKind(str, Enum):
    Replaceable = "replaceable"
    Asset = "asset"
    Owner = "owner"


class FunctionInput(CanonicalModel):
    """Single ABI input: a name and an elementary type string."""
    name: str = Field(default="", description="Parameter name")
    type: str = Field(..., description="Elementary ABI type (e.g. address, uint256)")


class FunctionOutput(CanonicalModel):
    name: str = Field(default="", description="Return value name")
    type: str = Field(..., description="ABI type of the return value")


class FunctionABI(CanonicalModel):
    """
    Contract function description as found in a JSON ABI.

    Attributes:
        type: Always ``"function"``.
        name: Function name used for the selector.
        inputs: Ordered parameter list.
        outputs: Return values (not used for encoding).
        constant: Whether the function is read-only.
        payable: Whether the function accepts ether.
    """
    type: Literal["function"] = Field(default="function", description="ABI entry type")
    name: str = Field(..., description="Function name")
    inputs: List[FunctionInput] = Field(default_factory=list, description="Ordered inputs")
    outputs: List[FunctionOutput] = Field(default_factory=list, description="Outputs")
    constant: bool = Field(default=False, description="Read-only function")
    payable: bool = Field(default=False, description="Accepts ether")

    def input_types(self) -> List[str]:
        """Return the input type strings in declaration order."""
        return [i.type for i in self.inputs]

    def signature(self) -> str:
        """Return the human-readable signature, e.g. ``transfer(address,uint256)``."""
        return f"{self.name}({','.join(self.input_types())})"


class AnnotatedFunctionInput(FunctionInput):
    """
    Function input tagged with its trade role.

    Attributes:
        kind: Role of the input in a trade.
        value: Concrete value; required when ``kind`` is ``Asset``.
    """
    kind: FunctionInputKind = Field(..., description="Trade role of the input")
    value: Optional[Any] = Field(default=None, description="Concrete value for Asset inputs")


class AnnotatedFunctionABI(FunctionABI):
    """
    Function ABI bound to a target contract with annotated inputs.

    Produced by a schema's transfer function for one concrete asset.

    Example::

        abi = AnnotatedFunctionABI(
            name="transfer",
            target="0x06012c8cf97BEaD5deAe237070F9587f8E7A266d",
            inputs=[
                AnnotatedFunctionInput(name="_to", type="address", kind=FunctionInputKind.Replaceable),
                AnnotatedFunctionInput(name="_tokenId", type="uint256", kind=FunctionInputKind.Asset, value=1),
            ],
        )
    """
    target: str = Field(..., description="Address of the contract to call")
    inputs: List[AnnotatedFunctionInput] = Field(default_factory=list, description="Ordered annotated inputs")

    def inputs_of_kind(self, kind: FunctionInputKind) -> List[AnnotatedFunctionInput]:
        return [i for i in self.inputs if i.kind == kind]
