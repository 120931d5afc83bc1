import math
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator


def check_finite(value: Any, location: str):
    """Raise ValueError for NaN or infinite numbers anywhere in a JSON value

    JSON has no spelling for them, a document holding one could not be
    written back as it was read.
    """
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError(f"{location} is not a finite number: {value}")
    if isinstance(value, dict):
        for key, item in value.items():
            check_finite(item, f"{location}.{key}")
    elif isinstance(value, list):
        for idx, item in enumerate(value):
            check_finite(item, f"{location}[{idx}]")


class OpenModel(BaseModel):
    """A schema record that keeps the fields it does not know"""

    model_config = ConfigDict(extra="allow", validate_assignment=True)

    @model_validator(mode="after")
    def validate_extra_fields(self):
        for key, value in (self.model_extra or {}).items():
            check_finite(value, key)
        return self
