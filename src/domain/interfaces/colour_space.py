from abc import ABC, abstractmethod
from typing import Optional, Tuple
import numpy as np

from ..entities.image import Image


class IColourSpace(ABC):
    """Abstract interface for colour space conversions used by processors"""

    @abstractmethod
    def to_luminance(self, image: Image) -> Image:
        """Return a single-band B_W image holding each pixel's luminance"""
        pass

    @abstractmethod
    def split_alpha(self, image: Image) -> Tuple[Image, Optional[np.ndarray]]:
        """Separate colour bands from the alpha band (None if no alpha)"""
        pass

    @abstractmethod
    def join_alpha(self, image: Image, alpha: Optional[np.ndarray]) -> Image:
        """Append an alpha band to a colour image"""
        pass

    @abstractmethod
    def to_srgb(self, image: Image) -> Image:
        """Promote a greyscale image to sRGB, keeping alpha"""
        pass

    @abstractmethod
    def to_greyscale(self, image: Image) -> Image:
        """Convert an sRGB image to B_W, keeping alpha"""
        pass
