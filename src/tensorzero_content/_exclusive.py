"""Decision table for objects carrying exactly one of two alternative keys.

A declarative model cannot express "exactly one of keys A or B, each with its
own value type", so wrappers decode into a plain mapping first and let
:func:`select_exclusive_key` pick the populated key.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pydantic_core import PydanticCustomError

from tensorzero_content._errors import ErrorKind

LOGGER = logging.getLogger(__name__)

_MISSING: Any = object()


@dataclass(frozen=True)
class ExclusiveKey:
    """One of the two alternative keys of an object.

    Attributes:
        name: The key as it appears on the wire.
        value_type: The Python type a JSON value must decode to for this key.
        kind: Human readable JSON kind used in error messages.
        json_type: The JSON Schema type of the value.

    """

    name: str
    value_type: type
    kind: str
    json_type: str

    def check(self, value: Any) -> Any:
        # JSON object keys are always strings
        if not isinstance(value, self.value_type) or (
            isinstance(value, dict) and not all(isinstance(key, str) for key in value)
        ):
            raise PydanticCustomError(
                ErrorKind.TYPE_MISMATCH.value,
                "{key} must be {kind}",
                {"key": self.name, "kind": self.kind},
            )
        return value


def select_exclusive_key(
    data: Mapping[str, Any],
    first: ExclusiveKey,
    second: ExclusiveKey,
) -> tuple[str, Any]:
    """Return the populated key of ``data`` and its type checked value.

    Keys other than ``first`` and ``second`` are ignored. ``data`` is not
    modified.

    Raises:
        PydanticCustomError: ``type_mismatch`` when the populated key holds the
            wrong kind of value, ``mutual_exclusion`` when both keys are present
            and ``missing_field`` when neither is.

    """
    remaining = dict(data)
    first_value = remaining.pop(first.name, _MISSING)
    second_value = remaining.pop(second.name, _MISSING)

    if remaining:
        LOGGER.debug("Ignoring unrecognized keys: %s", ", ".join(remaining))

    match (first_value is not _MISSING, second_value is not _MISSING):
        case (True, False):
            return first.name, first.check(first_value)
        case (False, True):
            return second.name, second.check(second_value)
        case (True, True):
            raise PydanticCustomError(
                ErrorKind.MUTUAL_EXCLUSION.value,
                "Only one of {first} or {second} can be set",
                {"first": first.name, "second": second.name},
            )
        case _:
            raise PydanticCustomError(
                ErrorKind.MISSING_FIELD.value,
                "Either {first} or {second} must be set",
                {"first": first.name, "second": second.name},
            )



def exclusive_json_schema(first: ExclusiveKey, second: ExclusiveKey) -> dict[str, Any]:
    """Return a JSON schema accepting objects with exactly one of two keys.

    Each ``oneOf`` branch requires its own key and forbids the other one, so
    an object carrying both keys is rejected whatever their values are.
    Other keys are allowed, as on decode.
    """
    return {
        "type": "object",
        "properties": {
            first.name: {"type": first.json_type},
            second.name: {"type": second.json_type},
        },
        "oneOf": [
            {"required": [first.name], "not": {"required": [second.name]}},
            {"required": [second.name], "not": {"required": [first.name]}},
        ],
    }
