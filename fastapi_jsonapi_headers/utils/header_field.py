"""A single HTTP header name/value pair."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

from fastapi_jsonapi_headers.core.errors import FormatError, InvalidArgumentError

DELIMITER = ":"


class HeaderField(BaseModel):
    """An immutable HTTP header in the form ``name:value``.

    A single value is always assumed. Headers carrying several values must be
    split by the caller, one ``HeaderField`` per value.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    name: str
    value: str

    @field_validator("name")
    @classmethod
    def _reject_delimiter(cls, name: str) -> str:
        if DELIMITER in name:
            raise ValueError("Delimiter found in header name.")
        return name

    @classmethod
    def parse(cls, raw: str) -> HeaderField:
        """Split ``raw`` at its first colon; the value may contain more."""
        name, sep, value = raw.partition(DELIMITER)
        if not sep:
            raise FormatError(raw, "Missing header delimiter")
        return cls(name=name.strip(), value=value.strip())

    @classmethod
    def create(cls, name: str, value: str) -> HeaderField:
        """Build a header from a name and a value; the name must not contain a colon."""
        if DELIMITER in name:
            raise InvalidArgumentError(name)
        return cls(name=name.strip(), value=value.strip())

    def format(self) -> str:
        """Return ``name:value`` with no whitespace around the colon."""
        return f"{self.name}{DELIMITER}{self.value}"

    def __str__(self) -> str:
        return self.format()
