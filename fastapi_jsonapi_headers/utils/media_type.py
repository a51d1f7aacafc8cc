"""Structured media-type header values (``type/subtype; name=value``)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from fastapi_jsonapi_headers.core.errors import FormatError

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "abcdefghijklmnopqrstuvwxyz",
)


def ascii_lower(value: str) -> str:
    """Lower-case ASCII letters only, leaving any other character untouched."""
    return value.translate(_ASCII_LOWER)


def _split_unquoted(value: str, separator: str) -> list[str]:
    """Split ``value`` on ``separator`` outside double-quoted strings."""
    parts: list[str] = []
    current: list[str] = []
    quoted = False
    escaped = False
    for char in value:
        if escaped:
            escaped = False
        elif quoted and char == "\\":
            escaped = True
        elif char == '"':
            quoted = not quoted
        elif char == separator and not quoted:
            parts.append("".join(current))
            current = []
            continue
        current.append(char)
    parts.append("".join(current))
    return parts


def split_header_values(value: str) -> list[str]:
    """Split a comma-separated header such as ``Accept`` into its members."""
    return [part.strip() for part in _split_unquoted(value, ",") if part.strip()]


class MediaTypeParameter(BaseModel):
    """A media-type parameter. Surrounding quotes are part of ``value``."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: str

    def matches(self, name: str) -> bool:
        """Compare names ASCII case-insensitively."""
        return ascii_lower(self.name) == ascii_lower(name)

    def __str__(self) -> str:
        if not self.value:
            return self.name
        return f"{self.name}={self.value}"


class MediaTypeHeader(BaseModel):
    """A media type followed by an ordered list of parameters."""

    media_type: str
    parameters: list[MediaTypeParameter] = Field(default_factory=list)

    @classmethod
    def parse(cls, raw: str) -> MediaTypeHeader:
        """Parse ``type/subtype; name=value; ...``.

        A parameter without ``=`` gets an empty value. Only an empty media type
        or an empty parameter name raise ``FormatError``.
        """
        parts = [part.strip() for part in _split_unquoted(raw, ";")]
        media_type = ascii_lower(parts[0])
        if not media_type:
            raise FormatError(raw, "Missing media type")
        header = cls(media_type=media_type)
        for part in parts[1:]:
            if not part:
                continue
            name, _, value = part.partition("=")
            if not name.strip():
                raise FormatError(raw, "Malformed media type parameter")
            header.add_parameter(name.strip(), value.strip())
        return header

    def add_parameter(self, name: str, value: str) -> MediaTypeHeader:
        """Append a parameter and return the header for chaining."""
        self.parameters.append(MediaTypeParameter(name=name, value=value))
        return self

    def get_parameter(self, name: str) -> MediaTypeParameter | None:
        """Return the first parameter called ``name``, if any."""
        return next((param for param in self.parameters if param.matches(name)), None)

    def format(self) -> str:
        """Return the wire form, parameters joined by ``"; "``."""
        return "; ".join([self.media_type, *(str(param) for param in self.parameters)])

    def __str__(self) -> str:
        return self.format()

