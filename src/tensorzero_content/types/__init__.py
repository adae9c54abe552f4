from tensorzero_content.types.content import TextContent
from tensorzero_content.types.content_part import ContentPartText, ContentPartTextBuilder
from tensorzero_content.types.template import Template
from tensorzero_content.types.variants import (
    TENSORZERO_ARGUMENTS_KEY,
    TEXT_KEY,
    TensorZeroArguments,
    Text,
)

__all__ = [
    "TENSORZERO_ARGUMENTS_KEY",
    "TEXT_KEY",
    "ContentPartText",
    "ContentPartTextBuilder",
    "Template",
    "TensorZeroArguments",
    "Text",
    "TextContent",
]
