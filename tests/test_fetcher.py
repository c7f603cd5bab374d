import httpx
import pytest

from src.domain.exceptions import ImageNotValidError, ImageTooLargeError
from src.infrastructure.http.fetcher import ImageFetcher, format_size

ALLOWED = {"image/jpeg": "jpg", "image/png": "png"}


def fetcher_for(handler, **kwargs) -> ImageFetcher:
    return ImageFetcher(transport=httpx.MockTransport(handler), **kwargs)


def test_fetch_returns_content_and_extension():
    def handler(request):
        return httpx.Response(200, headers={"Content-Type": "image/png"}, content=b"png-bytes")

    fetched = fetcher_for(handler, allowed_mime_types=ALLOWED).fetch("http://example.com/a.png")

    assert fetched.content == b"png-bytes"
    assert fetched.mime_type == "image/png"
    assert fetched.extension == "png"


def test_user_agent_sent():
    seen = {}

    def handler(request):
        seen["ua"] = request.headers["User-Agent"]
        return httpx.Response(200, content=b"x")

    fetcher_for(handler, user_agent="TestAgent/1.0").fetch("http://example.com/a.jpg")

    assert seen["ua"] == "TestAgent/1.0"


def test_mime_type_not_allowed():
    def handler(request):
        return httpx.Response(200, headers={"Content-Type": "application/zip"}, content=b"zip")

    with pytest.raises(ImageNotValidError):
        fetcher_for(handler, allowed_mime_types=ALLOWED).fetch("http://example.com/image.zip")


def test_any_mime_type_when_no_allow_list():
    def handler(request):
        return httpx.Response(200, headers={"Content-Type": "image/jpeg; charset=binary"}, content=b"x")

    fetched = fetcher_for(handler).fetch("http://example.com/a")

    assert fetched.mime_type == "image/jpeg"
    assert fetched.extension == "jpg"


def test_content_length_too_big():
    def handler(request):
        return httpx.Response(200, headers={"Content-Length": "2048"}, content=b"x" * 2048)

    with pytest.raises(ImageTooLargeError, match="2 KB"):
        fetcher_for(handler, max_image_size=1024).fetch("http://example.com/image.jpg")


def test_streamed_body_too_big():
    def handler(request):
        return httpx.Response(200, content=iter([b"x" * 600, b"x" * 600]))

    with pytest.raises(ImageTooLargeError):
        fetcher_for(handler, max_image_size=1024).fetch("http://example.com/image.jpg")


def test_http_error_propagates():
    def handler(request):
        return httpx.Response(404)

    with pytest.raises(httpx.HTTPStatusError):
        fetcher_for(handler).fetch("http://example.com/missing.jpg")


def test_redirects_followed():
    def handler(request):
        if request.url.path == "/old.png":
            return httpx.Response(302, headers={"Location": "http://example.com/new.png"})
        return httpx.Response(200, headers={"Content-Type": "image/png"}, content=b"new")

    fetched = fetcher_for(handler).fetch("http://example.com/old.png")

    assert fetched.content == b"new"


@pytest.mark.parametrize("num_bytes,expected", [
    (512, "512 B"),
    (1024, "1 KB"),
    (2048, "2 KB"),
    (1536, "1.5 KB"),
    (3 * 1024 * 1024, "3 MB"),
])
def test_format_size(num_bytes, expected):
    assert format_size(num_bytes) == expected
