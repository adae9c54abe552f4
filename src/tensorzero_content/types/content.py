from collections.abc import Mapping
from typing import Any

from pydantic import model_validator

from tensorzero_content.types.variants import BaseTextContent, Text, decode_variant


class TextContent(BaseTextContent):
    """Standalone text content value.

    Besides the wire object, a bare string is accepted and becomes literal
    text, so ``TextContent("hi")`` holds ``Text(text="hi")``.
    """

    @model_validator(mode="before")
    @classmethod
    def _decode(cls, data: Any) -> Any:
        if isinstance(data, str):
            return Text(text=data)
        if isinstance(data, Mapping):
            return decode_variant(data)
        return data
