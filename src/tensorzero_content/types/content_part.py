from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Self

from tensorzero_content.types.variants import BaseTextContent, TensorZeroArguments, Text


class ContentPartText(BaseTextContent):
    """Text entry of a chat message content array.

    Build it from a variant or with :class:`ContentPartTextBuilder`.
    """


@dataclass
class ContentPartTextBuilder:
    """Builder for :class:`ContentPartText`.

    ``text`` and ``tensorzero_arguments`` are mutually exclusive: setting one
    clears the other, so the last call wins. Building with neither set gives
    empty text.
    """

    _text: str | None = field(default=None, init=False)
    _tensorzero_arguments: dict[str, Any] | None = field(default=None, init=False)

    def text(self, text: str) -> Self:
        self._text = text
        self._tensorzero_arguments = None
        return self

    def tensorzero_arguments(self, arguments: Mapping[str, Any]) -> Self:
        self._tensorzero_arguments = dict(arguments)
        self._text = None
        return self

    def build(self) -> ContentPartText:
        if self._text is not None:
            return ContentPartText(Text(text=self._text))
        if self._tensorzero_arguments is not None:
            return ContentPartText(
                TensorZeroArguments(tensorzero_arguments=self._tensorzero_arguments),
            )
        return ContentPartText()
