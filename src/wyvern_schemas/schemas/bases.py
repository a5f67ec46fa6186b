"""
Base Schema Models for wyvern_schemas

This module defines the base model every other schema model inherits from.
It provides consistent validation and a deterministic JSON form, so that two
parties serialising the same call specification produce identical text.

Core Classes:
    - CanonicalModel: RFC8785-style Pydantic base model

Dependencies:
    - pydantic: For data validation and serialization
"""

import json
from typing import Dict, Any

from pydantic import BaseModel, ConfigDict


class CanonicalModel(BaseModel):
    """
    RFC8785-style Pydantic base model with canonical JSON serialization.

    Features:
        - Field aliases (camelCase wire names) accepted on input and used on output
        - Deterministic key sorting in JSON output
        - No extra whitespace, suitable for hashing and order signing

    Example:
        class MyModel(CanonicalModel):
            name: str
            value: int

        model = MyModel(name="test", value=123)
        canonical_json = model.to_canonical_json()  # '{"name":"test","value":123}'
    """

    model_config = ConfigDict(populate_by_name=True)

    def to_canonical_json(self) -> str:
        """
        Convert model to a canonical JSON string.

        ``model_dump(mode="json", by_alias=True)`` turns enums and bytes into
        plain types under their wire names; ``json.dumps`` with sorted keys and
        compact separators fixes the textual form.

        Returns:
            str: JSON string with sorted keys and no extra whitespace.
        """
        data = self.model_dump(mode="json", by_alias=True)
        return json.dumps(
            data,
            separators=(",", ":"),
            sort_keys=True,
            ensure_ascii=False
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert model to dictionary representation using wire names.

        Returns:
            Dict[str, Any]: Dictionary with all model fields.
        """
        return self.model_dump(by_alias=True)
