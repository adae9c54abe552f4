from typing import Any

from pydantic import BaseModel, ConfigDict


class Template(BaseModel):
    """A named TensorZero template with its arguments.

    Unlike the text content types, unknown keys are rejected.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    arguments: dict[str, Any]
