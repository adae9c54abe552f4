from enum import StrEnum

from pydantic import BaseModel, Field, computed_field


class ErrorKind(StrEnum):
    TYPE_MISMATCH = "type_mismatch"
    MUTUAL_EXCLUSION = "mutual_exclusion"
    MISSING_FIELD = "missing_field"
    UNKNOWN_FIELD = "extra_forbidden"
    INVALID = "invalid"


class Error(BaseModel):
    kind: ErrorKind
    description: str | None = Field(default=None, exclude=True)
    details: list[dict] | None = Field(default=None)

    @computed_field # type: ignore[prop-decorator]
    @property
    def message(self) -> str:
        if self.description:
            return self.description
        return self.kind.name.replace("_", " ").capitalize()
