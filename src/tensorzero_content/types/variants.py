from collections.abc import Mapping
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    RootModel,
    SerializationInfo,
    model_serializer,
    model_validator,
)

from tensorzero_content._exclusive import (
    ExclusiveKey,
    exclusive_json_schema,
    select_exclusive_key,
)

TEXT_KEY = "text"
TENSORZERO_ARGUMENTS_KEY = "tensorzero::arguments"

_TEXT = ExclusiveKey(TEXT_KEY, str, "a string", "string")
_TENSORZERO_ARGUMENTS = ExclusiveKey(TENSORZERO_ARGUMENTS_KEY, dict, "an object", "object")


class Text(BaseModel):
    """Plain literal text: ``{"text": "Some content"}``."""

    model_config = ConfigDict(frozen=True)

    text: str


class TensorZeroArguments(BaseModel):
    """Template arguments: ``{"tensorzero::arguments": {"custom_key": "custom_val"}}``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    tensorzero_arguments: dict[str, Any] = Field(alias=TENSORZERO_ARGUMENTS_KEY)


TextVariant = Text | TensorZeroArguments


def decode_variant(data: Mapping[str, Any]) -> TextVariant:
    key, value = select_exclusive_key(data, _TEXT, _TENSORZERO_ARGUMENTS)
    if key == TEXT_KEY:
        return Text(text=value)
    return TensorZeroArguments(tensorzero_arguments=value)


def encode_variant(variant: TextVariant, info: SerializationInfo | None = None) -> dict[str, Any]:
    mode = info.mode if info is not None else "python"
    return variant.model_dump(mode=mode, by_alias=True)


def _empty_text() -> Text:
    return Text(text="")


class BaseTextContent(RootModel[Text | TensorZeroArguments]):
    """A "text" block holding either literal text or TensorZero arguments.

    The wire form is a flat object with exactly one of the ``text`` or
    ``tensorzero::arguments`` keys. The ``"type"`` discriminator belongs to
    the enclosing message and any other key is ignored on decode.
    """

    model_config = ConfigDict(frozen=True)

    root: Text | TensorZeroArguments = Field(default_factory=_empty_text)

    @model_validator(mode="before")
    @classmethod
    def _decode(cls, data: Any) -> Any:
        if isinstance(data, Mapping):
            return decode_variant(data)
        return data

    @model_serializer(mode="plain")
    def _encode(self, info: SerializationInfo) -> dict[str, Any]:
        return encode_variant(self.root, info)

    @property
    def is_text(self) -> bool:
        return isinstance(self.root, Text)

    @property
    def is_tensorzero_arguments(self) -> bool:
        return isinstance(self.root, TensorZeroArguments)

    @classmethod
    def wire_json_schema(cls) -> dict:
        schema = exclusive_json_schema(_TEXT, _TENSORZERO_ARGUMENTS)
        schema["title"] = cls.__name__
        return schema
