from abc import ABC, abstractmethod

from ..entities.image import Image
from ..entities.output_options import OutputOptions


class IImageCodec(ABC):
    """Abstract interface for image decoding and encoding"""

    @abstractmethod
    def load_from_bytes(self, image_bytes: bytes) -> Image:
        """Decode image bytes"""
        pass

    @abstractmethod
    def save_to_bytes(self, image: Image, options: OutputOptions) -> bytes:
        """Encode an image with the given output options"""
        pass
