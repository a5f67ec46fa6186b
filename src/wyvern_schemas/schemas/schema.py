"""
Asset Schema Model

A schema describes one kind of tradeable asset (an ERC-20 balance, an ERC-721
token, ...) and how to build calls against it. Each entry in ``functions`` is
a callable taking an asset object and returning the ``AnnotatedFunctionABI``
for that asset, with ``Asset`` inputs already carrying their values.

Only the transfer functions matter to the encoders: ``transferFrom`` is
preferred, ``transfer`` is the fallback.
"""

from typing import Any, Callable, List, Optional

from pydantic import Field

from .abi import AnnotatedFunctionABI
from .bases import CanonicalModel

TransferFunction = Callable[[Any], AnnotatedFunctionABI]


class SchemaField(CanonicalModel):
    """Descriptive field of an asset (shown to users, not used for encoding)."""
    name: str = Field(..., description="Field name, e.g. 'ID'")
    type: str = Field(..., description="ABI type of the field")
    description: str = Field(default="", description="Human-readable description")


class SchemaFunctions(CanonicalModel):
    """
    Named function builders of a schema.

    Attributes:
        transfer_from: Builder for ``transferFrom`` (wire name ``transferFrom``).
        transfer: Builder for ``transfer``.
    """
    transfer_from: Optional[TransferFunction] = Field(
        default=None, alias="transferFrom", exclude=True, description="transferFrom builder"
    )
    transfer: Optional[TransferFunction] = Field(
        default=None, exclude=True, description="transfer builder"
    )


class Schema(CanonicalModel):
    """
    Tradeable asset schema.

    Attributes:
        version: Schema revision.
        name: Unique schema name (e.g. ``ERC721``).
        description: Human-readable description.
        fields: Descriptive asset fields.
        functions: Function builders used for encoding.
    """
    version: int = Field(default=1, ge=1, description="Schema revision")
    name: str = Field(..., description="Schema name")
    description: str = Field(default="", description="Schema description")
    fields: List[SchemaField] = Field(default_factory=list, description="Asset fields")
    functions: SchemaFunctions = Field(default_factory=SchemaFunctions, description="Function builders")
