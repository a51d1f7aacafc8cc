"""Shared JSON:API header constants."""

MEDIA_TYPE = "application/vnd.api+json"

EXTENSIONS_PARAMETER = "ext"
PROFILES_PARAMETER = "profile"
QUALITY_PARAMETER = "q"
LEGAL_PARAMETERS = frozenset({EXTENSIONS_PARAMETER, PROFILES_PARAMETER, QUALITY_PARAMETER})

CONTENT_TYPE_HEADER = "Content-Type"
ACCEPT_HEADER = "Accept"

ILLEGAL_MEDIA_TYPE_MESSAGE = (
    "Invalid media type. See https://jsonapi.org/format/#jsonapi-media-type"
)
ILLEGAL_PARAMETERS_MESSAGE = (
    "Only `ext`, `profile` and `q` parameters are allowed. "
    "See https://jsonapi.org/format/#media-type-parameter-rules"
)
