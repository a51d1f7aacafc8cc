import pytest

from fastapi_jsonapi_headers import (
    FormatError,
    IllegalParameterError,
    InvalidArgumentError,
    InvalidMediaTypeError,
    InvalidUriError,
    JSONAPIErrorBuilder,
    JSONAPIHeaderError,
)


@pytest.mark.parametrize(
    "exc, status",
    [
        (FormatError("Content-Type", "Missing header delimiter"), "400"),
        (InvalidArgumentError("a:b"), "400"),
        (InvalidMediaTypeError("image/png"), "415"),
        (IllegalParameterError("charset"), "415"),
        (InvalidUriError("not-a-uri"), "400"),
    ],
)
def test_header_errors(exc: JSONAPIHeaderError, status: str) -> None:
    assert isinstance(exc, ValueError)
    assert exc.status == status
    error = JSONAPIErrorBuilder().from_exception(exc)
    assert error["status"] == status
    assert error["code"] == type(exc).__name__
    assert error["detail"] == str(exc)


def test_messages_name_offending_input() -> None:
    assert "image/png" in str(InvalidMediaTypeError("image/png"))
    assert "https://jsonapi.org/format/#media-type-parameter-rules" in str(IllegalParameterError("charset"))
    assert "`q`" in str(IllegalParameterError("charset"))


class TestJSONAPIErrorBuilder:
    def test_error_object(self) -> None:
        error = JSONAPIErrorBuilder().error_object(status="415", title="Unsupported Media Type")
        assert error == {"status": "415", "title": "Unsupported Media Type"}

    def test_error_object_requires_a_field(self) -> None:
        with pytest.raises(ValueError):
            JSONAPIErrorBuilder().error_object()

    def test_error_document(self) -> None:
        assert JSONAPIErrorBuilder().error_document([{"status": "406"}]) == {"errors": [{"status": "406"}]}
