from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class FetchedImage:
    """Raw bytes of a remote image plus what the server said about them"""
    content: bytes
    mime_type: str = ""
    extension: str = ""


class IImageFetcher(ABC):
    """Abstract interface for retrieving remote images"""

    @abstractmethod
    def fetch(self, url: str) -> FetchedImage:
        """
        Fetch an image

        Args:
            url: Image URL

        Returns:
            FetchedImage

        Raises:
            httpx.HTTPError: If the transfer fails
            ImageNotValidError: If the mime type is not allowed
            ImageTooLargeError: If the image is bigger than allowed
        """
        pass
