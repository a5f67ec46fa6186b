"""
Schema Model Test Suite

Validation and serialization of ABI, schema and call specification models.

Usage:
    pytest tests/test_schemas/test_models.py -v
"""

import pytest
import pydantic

import sys
from pathlib import Path
src_path = Path(__file__).parent.parent.parent / "src"
sys.path.insert(0, str(src_path))

from wyvern_schemas.schemas.abi import (
    AnnotatedFunctionABI,
    AnnotatedFunctionInput,
    FunctionABI,
    FunctionInputKind,
)
from wyvern_schemas.schemas.calls import CallSpec, LimitedCallSpec
from wyvern_schemas.schemas.schema import Schema, SchemaFunctions
from wyvern_schemas.standards import (
    ERC20_SCHEMA,
    ERC721_SCHEMA,
    ERC721Asset,
    get_erc721_transfer_from_abi,
)

TOKEN = "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"


class TestFunctionABI:

    def test_signature_and_types(self):
        abi = FunctionABI.model_validate({
            "name": "transfer",
            "inputs": [{"name": "to", "type": "address"}, {"name": "value", "type": "uint256"}],
        })
        assert abi.type == "function"
        assert abi.input_types() == ["address", "uint256"]
        assert abi.signature() == "transfer(address,uint256)"

    def test_kind_parsed_from_wire_value(self):
        abi = AnnotatedFunctionABI.model_validate({
            "name": "transfer",
            "target": TOKEN,
            "inputs": [
                {"name": "_to", "type": "address", "kind": "replaceable"},
                {"name": "_value", "type": "uint256", "kind": "asset", "value": "5"},
            ],
        })
        assert abi.inputs[0].kind is FunctionInputKind.Replaceable
        assert [i.name for i in abi.inputs_of_kind(FunctionInputKind.Asset)] == ["_value"]

    def test_unknown_kind_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            AnnotatedFunctionInput(name="x", type="address", kind="recipient")

    def test_kind_is_required(self):
        with pytest.raises(pydantic.ValidationError):
            AnnotatedFunctionInput(name="x", type="address")

    def test_canonical_json_is_sorted_and_compact(self):
        abi = get_erc721_transfer_from_abi(ERC721Asset(address=TOKEN, id=3))
        text = abi.to_canonical_json()
        assert " " not in text
        assert text.index('"constant"') < text.index('"inputs"') < text.index('"name"')
        assert '"kind":"owner"' in text


class TestCallSpec:

    def test_wire_name_accepted(self):
        spec = CallSpec.model_validate({"target": TOKEN, "calldata": "0x01", "replacementPattern": "0xff"})
        assert spec.replacement_pattern == "0xff"
        assert spec.has_pattern()

    def test_empty_pattern_is_default(self):
        spec = CallSpec(target=TOKEN, calldata="0x0102")
        assert spec.replacement_pattern == "0x"

    def test_pattern_length_must_match_calldata(self):
        with pytest.raises(pydantic.ValidationError):
            CallSpec(target=TOKEN, calldata="0x0102", replacement_pattern="0xff")

    def test_hex_is_lowercased(self):
        spec = LimitedCallSpec(target=TOKEN, calldata="0xABCD")
        assert spec.calldata == "0xabcd"

    @pytest.mark.parametrize("calldata", ["0102", "0x123", "0xzz"])
    def test_malformed_hex_rejected(self, calldata):
        with pytest.raises(pydantic.ValidationError):
            LimitedCallSpec(target=TOKEN, calldata=calldata)


class TestSchema:

    def test_transfer_from_alias(self):
        functions = SchemaFunctions.model_validate({"transferFrom": get_erc721_transfer_from_abi})
        assert functions.transfer_from is get_erc721_transfer_from_abi
        assert functions.transfer is None

    def test_builders_must_be_callable(self):
        with pytest.raises(pydantic.ValidationError):
            SchemaFunctions(transfer="transfer")

    def test_functions_excluded_from_json(self):
        text = ERC721_SCHEMA.to_canonical_json()
        assert '"name":"ERC721"' in text
        assert '"functions":{}' in text

    def test_standard_schemas(self):
        assert ERC20_SCHEMA.functions.transfer is not None
        assert ERC20_SCHEMA.functions.transfer_from is None
        assert ERC721_SCHEMA.functions.transfer_from is not None

    def test_defaults(self):
        schema = Schema(name="Bare")
        assert schema.version == 1
        assert schema.fields == []
        assert schema.functions.transfer is None
