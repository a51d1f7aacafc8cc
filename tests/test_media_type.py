import pytest

from fastapi_jsonapi_headers import FormatError, MediaTypeHeader, MediaTypeParameter
from fastapi_jsonapi_headers.utils import split_header_values


class TestMediaTypeHeader:
    def test_parse_media_type_only(self) -> None:
        header = MediaTypeHeader.parse("application/vnd.api+json")
        assert header.media_type == "application/vnd.api+json"
        assert header.parameters == []

    def test_parse_lowercases_media_type(self) -> None:
        assert MediaTypeHeader.parse(" Application/VND.API+JSON ").media_type == "application/vnd.api+json"

    def test_parse_parameters(self) -> None:
        header = MediaTypeHeader.parse(
            'application/vnd.api+json; ext="http://ext1.com/ http://ext2.com/";profile=x; q=0.5'
        )
        assert header.parameters == [
            MediaTypeParameter(name="ext", value='"http://ext1.com/ http://ext2.com/"'),
            MediaTypeParameter(name="profile", value="x"),
            MediaTypeParameter(name="q", value="0.5"),
        ]

    def test_parse_keeps_separator_inside_quotes(self) -> None:
        header = MediaTypeHeader.parse('application/vnd.api+json; profile="http://example.com/a;b"')
        assert header.parameters == [
            MediaTypeParameter(name="profile", value='"http://example.com/a;b"'),
        ]

    def test_parse_ignores_empty_segments(self) -> None:
        header = MediaTypeHeader.parse("text/plain;; charset=utf-8;")
        assert [str(param) for param in header.parameters] == ["charset=utf-8"]

    @pytest.mark.parametrize("raw", ["", "  ", "; ext=x", "text/plain; =utf-8", "text/plain; = "])
    def test_parse_malformed(self, raw: str) -> None:
        with pytest.raises(FormatError):
            MediaTypeHeader.parse(raw)

    def test_parse_parameter_without_value(self) -> None:
        header = MediaTypeHeader.parse("text/plain; charset; q=1")
        assert header.parameters == [
            MediaTypeParameter(name="charset", value=""),
            MediaTypeParameter(name="q", value="1"),
        ]
        assert header.format() == "text/plain; charset; q=1"

    def test_format(self) -> None:
        header = MediaTypeHeader(media_type="application/vnd.api+json")
        header.add_parameter("ext", '"http://ext1.com/"').add_parameter("q", "0.9")
        assert header.format() == 'application/vnd.api+json; ext="http://ext1.com/"; q=0.9'
        assert str(header) == header.format()

    def test_get_parameter_is_case_insensitive(self) -> None:
        header = MediaTypeHeader.parse("application/vnd.api+json; EXT=a; ext=b")
        parameter = header.get_parameter("ext")
        assert parameter is not None
        assert parameter.value == "a"
        assert header.get_parameter("profile") is None

    def test_matches_ascii_only(self) -> None:
        # U+212A KELVIN SIGN lower-cases to "k" with str.lower().
        assert not MediaTypeParameter(name="\u212a", value="").matches("k")
        assert MediaTypeParameter(name="Profile", value="").matches("pROFILE")


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("", []),
        ("*/*", ["*/*"]),
        ("text/html, application/vnd.api+json;q=0.9", ["text/html", "application/vnd.api+json;q=0.9"]),
        ('application/vnd.api+json; ext="a,b", */*', ['application/vnd.api+json; ext="a,b"', "*/*"]),
        (" , text/html ,", ["text/html"]),
    ],
)
def test_split_header_values(raw: str, expected: list) -> None:
    assert split_header_values(raw) == expected
