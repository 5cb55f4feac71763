"""
svckit: Shared Schema Base
=============================

What:  Base model for every request/response body on the wire.
How:   JSON object keys are matched to field names (or aliases) without
       regard to case, so {"S": "x"} decodes like {"s": "x"}. Missing keys
       and keys set to null fall back to field defaults, a null body
       decodes like {}, and unknown keys are ignored.
"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, model_validator


class KitModel(BaseModel):
    """Base for all wire models: case-insensitive keys, aliases on output."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def fold_key_case(cls, data: Any) -> Any:
        if data is None:
            return {}
        if not isinstance(data, dict):
            return data

        keys: Dict[str, str] = {}
        for name, field in cls.model_fields.items():
            key = field.alias or name
            keys[name.lower()] = key
            keys[key.lower()] = key

        # Later duplicates win, the same as a streaming JSON decoder
        folded: Dict[Any, Any] = {}
        for key, value in data.items():
            if isinstance(key, str):
                key = keys.get(key.lower(), key)
            if value is None:
                # null leaves whatever value the field already holds
                continue
            folded[key] = value
        return folded
