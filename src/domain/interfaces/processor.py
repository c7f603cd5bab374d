from abc import ABC, abstractmethod

from ..entities.image import Image


class IProcessor(ABC):
    """
    Abstract interface for a single image transformation

    A processor is configured once at construction time and is then a pure
    function of its input: it returns a new Image, leaves the input as it
    was, performs no I/O and keeps no state between calls.
    """

    @abstractmethod
    def process(self, image: Image) -> Image:
        """
        Transform an image

        Args:
            image: Input image (not modified)

        Returns:
            New Image

        Raises:
            UnsupportedImageKindError: If the band count or sample format
                cannot be handled by this processor
        """
        pass

    @abstractmethod
    def get_name(self) -> str:
        """Return processor identifier"""
        pass
