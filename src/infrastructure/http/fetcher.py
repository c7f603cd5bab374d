from typing import Dict, Optional
import httpx

from src.domain.exceptions import ImageNotValidError, ImageTooLargeError
from src.domain.interfaces.image_fetcher import IImageFetcher, FetchedImage


def format_size(num_bytes: int) -> str:
    """Human readable size, e.g. 2048 -> '2 KB'"""
    size = float(num_bytes)
    for unit in ("B", "KB", "MB", "GB"):
        if size < 1024 or unit == "GB":
            return f"{round(size, 2):g} {unit}"
        size /= 1024


class ImageFetcher(IImageFetcher):
    """Remote image fetcher built on httpx"""

    DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; ImageFetcher/1.0)"

    # Used to name the source format when no allow-list is configured
    KNOWN_MIME_TYPES = {
        "image/jpeg": "jpg",
        "image/png": "png",
        "image/gif": "gif",
        "image/bmp": "bmp",
        "image/tiff": "tiff",
        "image/webp": "webp",
        "image/x-icon": "ico",
        "image/vnd.microsoft.icon": "ico",
    }

    def __init__(
        self,
        user_agent: str = None,
        connect_timeout: float = 5.0,
        timeout: float = 10.0,
        max_image_size: int = 0,
        max_redirects: int = 10,
        allowed_mime_types: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize image fetcher

        Args:
            user_agent: User-Agent header sent with every request
            connect_timeout: Connect timeout in seconds
            timeout: Overall read/write timeout in seconds
            max_image_size: Maximum body size in bytes (0: no limit)
            max_redirects: Maximum number of redirects to follow
            allowed_mime_types: Mapping mime type -> extension (empty: allow all)
            transport: Optional httpx transport (used by tests)
        """
        self._user_agent = user_agent or self.DEFAULT_USER_AGENT
        self._timeout = httpx.Timeout(timeout, connect=connect_timeout)
        self._max_image_size = max_image_size
        self._max_redirects = max_redirects
        self._allowed_mime_types = allowed_mime_types or {}
        self._transport = transport

    @property
    def user_agent(self) -> str:
        return self._user_agent

    def fetch(self, url: str) -> FetchedImage:
        print(f"[Fetcher] Fetching image from: {url[:80]}...", flush=True)

        with httpx.Client(
            timeout=self._timeout,
            follow_redirects=True,
            max_redirects=self._max_redirects,
            headers={"User-Agent": self._user_agent},
            transport=self._transport,
        ) as client:
            with client.stream("GET", url) as response:
                response.raise_for_status()

                mime_type = response.headers.get("content-type", "").split(";")[0].strip().lower()
                extension = self._check_mime_type(mime_type)

                content_length = response.headers.get("content-length")
                if content_length and content_length.isdigit():
                    self._check_size(int(content_length))

                chunks = []
                received = 0
                for chunk in response.iter_bytes():
                    received += len(chunk)
                    self._check_size(received)
                    chunks.append(chunk)

        content = b"".join(chunks)
        print(f"[Fetcher] Downloaded {len(content)} bytes ({mime_type or 'unknown type'})", flush=True)

        return FetchedImage(content=content, mime_type=mime_type, extension=extension)

    def _check_mime_type(self, mime_type: str) -> str:
        """Return the extension for a mime type, or raise if it is not allowed"""
        if not self._allowed_mime_types:
            return self.KNOWN_MIME_TYPES.get(mime_type, "")

        if mime_type not in self._allowed_mime_types:
            raise ImageNotValidError(
                f"The request image is not a valid (supported) image. Supported images are: "
                f"{', '.join(sorted(set(self._allowed_mime_types.values())))}"
            )
        return self._allowed_mime_types[mime_type]

    def _check_size(self, num_bytes: int):
        if self._max_image_size and num_bytes > self._max_image_size:
            raise ImageTooLargeError(
                f"The image is too big to be downloaded. "
                f"Image size {format_size(num_bytes)} - max size {format_size(self._max_image_size)}"
            )
