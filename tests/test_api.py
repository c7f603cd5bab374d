from io import BytesIO

import httpx
import numpy as np
import pytest
from fastapi.testclient import TestClient
from PIL import Image as PILImage

from src.application.transform_image import TransformImageUseCase
from src.domain.exceptions import ImageTooLargeError
from src.domain.interfaces.image_fetcher import IImageFetcher, FetchedImage
from src.infrastructure.image.codec import ImageCodec
from src.presentation.api import routes
from src.presentation.api.main import create_app


def png_bytes(pil_image) -> bytes:
    buffer = BytesIO()
    pil_image.save(buffer, format="PNG")
    return buffer.getvalue()


class StaticFetcher(IImageFetcher):
    """Serves one fixed payload, or raises a fixed error"""

    def __init__(self, content=b"", extension="png", error=None):
        self._content = content
        self._extension = extension
        self._error = error
        self.calls = 0

    def fetch(self, url):
        self.calls += 1
        if self._error is not None:
            raise self._error
        return FetchedImage(content=self._content, mime_type="image/png", extension=self._extension)


@pytest.fixture
def client():
    app = create_app()
    yield TestClient(app)
    routes.set_use_case(None)


def install(fetcher):
    routes.set_use_case(TransformImageUseCase(fetcher=fetcher, codec=ImageCodec()))
    return fetcher


def decode(response):
    return PILImage.open(BytesIO(response.content))


def test_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["docs"] == "/docs"


def test_health(client):
    assert client.get("/health").json()["status"] == "not_ready"

    install(StaticFetcher())
    body = client.get("/health").json()

    assert body["status"] == "ok"
    assert "tint" in body["processors"]


def test_not_initialized(client):
    response = client.get("/api/image", params={"url": "http://example.com/a.png"})

    assert response.status_code == 500


def test_tint_greyscale(client):
    source = PILImage.fromarray(np.array([[0, 255]], dtype=np.uint8))
    install(StaticFetcher(png_bytes(source)))

    response = client.get("/api/image", params={"url": "http://example.com/a.png", "tint": "#c83264"})

    assert response.status_code == 200
    assert response.headers["content-type"] == "image/png"
    assert np.asarray(decode(response)).tolist() == [[[0, 0, 0], [200, 50, 100]]]


def test_tint_keeps_alpha_and_forces_png(client):
    source = PILImage.new("RGBA", (1, 1), (100, 150, 200, 77))
    install(StaticFetcher(png_bytes(source), extension="gif"))

    response = client.get("/api/image", params={"url": "http://example.com/a.gif", "tint": "red"})

    assert response.status_code == 200
    assert response.headers["content-type"] == "image/png"
    assert np.asarray(decode(response))[0, 0, 3] == 77


def test_output_jpg(client):
    source = PILImage.new("RGB", (4, 4), (10, 200, 30))
    install(StaticFetcher(png_bytes(source)))

    response = client.get(
        "/api/image",
        params={"url": "http://example.com/a.png", "filt": "greyscale", "output": "jpg", "q": "70"},
    )

    assert response.status_code == 200
    assert response.headers["content-type"] == "image/jpeg"
    assert decode(response).size == (4, 4)


def test_invalid_tint_is_bad_request_and_nothing_fetched(client):
    fetcher = install(StaticFetcher(png_bytes(PILImage.new("L", (1, 1)))))

    response = client.get("/api/image", params={"url": "http://example.com/a.png", "tint": "#12"})

    assert response.status_code == 400
    assert fetcher.calls == 0


def test_unsupported_image_kind(client):
    source = PILImage.new("CMYK", (1, 1))
    buffer = BytesIO()
    source.save(buffer, format="JPEG")
    install(StaticFetcher(buffer.getvalue(), extension="jpg"))

    response = client.get("/api/image", params={"url": "http://example.com/a.jpg", "tint": "red"})

    assert response.status_code == 422


def test_unreadable_image(client):
    install(StaticFetcher(b"not an image"))

    response = client.get("/api/image", params={"url": "http://example.com/a.png"})

    assert response.status_code == 400


def test_too_large(client):
    install(StaticFetcher(error=ImageTooLargeError("Image size 2 KB - max size 1 KB")))

    response = client.get("/api/image", params={"url": "http://example.com/a.png"})

    assert response.status_code == 413
    assert "2 KB" in response.json()["detail"]


def test_fetch_failure(client):
    install(StaticFetcher(error=httpx.ConnectError("boom")))

    response = client.get("/api/image", params={"url": "http://example.com/a.png"})

    assert response.status_code == 400
    assert response.json()["detail"].startswith("Failed to fetch image")


def test_url_required(client):
    install(StaticFetcher())

    assert client.get("/api/image").status_code == 422
