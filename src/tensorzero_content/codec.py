import logging
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from tensorzero_content.exceptions import DecodeError
from tensorzero_content.types import ContentPartText, Template, TextContent

LOGGER = logging.getLogger(__name__)

TModel = TypeVar("TModel", bound=BaseModel)

JSONInput = Mapping[str, Any] | str | bytes


def _decode(model: type[TModel], data: JSONInput) -> TModel:
    # str and bytes are raw JSON documents, not literal text
    try:
        if isinstance(data, str | bytes):
            return model.model_validate_json(data)
        return model.model_validate(data)
    except ValidationError as e:
        LOGGER.debug("Failed to decode %s: %s", model.__name__, e)
        raise DecodeError.from_validation_error(model.__name__, e) from e


def decode_text_content(data: JSONInput) -> TextContent:
    """Decode a JSON object into a :class:`TextContent`.

    Raises:
        TypeMismatchError: ``text`` is not a string or ``tensorzero::arguments``
            is not an object.
        MutualExclusionError: both keys are present.
        MissingFieldError: neither key is present.
        DecodeError: the input is not a JSON object.

    """
    return _decode(TextContent, data)


def decode_content_part(data: JSONInput) -> ContentPartText:
    return _decode(ContentPartText, data)


def decode_template(data: JSONInput) -> Template:
    """Decode a JSON object into a :class:`Template`.

    Raises:
        UnknownFieldError: a key other than ``name`` or ``arguments`` is present.
        MissingFieldError: ``name`` or ``arguments`` is absent.
        DecodeError: any other validation failure.

    """
    return _decode(Template, data)


def encode_text_content(value: TextContent) -> dict[str, Any]:
    return value.model_dump()


def encode_content_part(value: ContentPartText) -> dict[str, Any]:
    return value.model_dump()
