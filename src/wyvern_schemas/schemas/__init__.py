from .bases import CanonicalModel
from .abi import FunctionInputKind, FunctionInput, FunctionOutput, FunctionABI, AnnotatedFunctionInput, AnnotatedFunctionABI
from .schema import SchemaField, SchemaFunctions, Schema, TransferFunction
from .calls import LimitedCallSpec, CallSpec

__all__ = [
    "CanonicalModel",
    "FunctionInputKind",
    "FunctionInput",
    "FunctionOutput",
    "FunctionABI",
    "AnnotatedFunctionInput",
    "AnnotatedFunctionABI",
    "SchemaField",
    "SchemaFunctions",
    "Schema",
    "TransferFunction",
    "LimitedCallSpec",
    "CallSpec",
]
