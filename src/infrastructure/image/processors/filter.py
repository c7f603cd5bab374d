from typing import Optional
import numpy as np

from src.domain.entities.image import Image
from src.domain.enums.image_kind import FilterType, Interpretation
from src.domain.exceptions import AllocationError
from src.domain.interfaces.colour_space import IColourSpace
from src.domain.interfaces.processor import IProcessor
from src.infrastructure.image.colour_space import ColourSpace

from .support import require_colour_image


class Filter(IProcessor):
    """Greyscale, sepia and negate filters. Alpha is always passed through."""

    SEPIA_MATRIX = np.array([
        [0.3588, 0.7044, 0.1368],
        [0.2990, 0.5870, 0.1140],
        [0.2392, 0.4696, 0.0912],
    ])

    def __init__(self, filter_type: FilterType, colour_space: Optional[IColourSpace] = None):
        self._filter_type = filter_type
        self._colour_space = colour_space or ColourSpace()

    @property
    def filter_type(self) -> FilterType:
        return self._filter_type

    def process(self, image: Image) -> Image:
        require_colour_image(image, self.get_name())

        try:
            if self._filter_type == FilterType.GREYSCALE:
                return self._colour_space.to_greyscale(image)
            if self._filter_type == FilterType.SEPIA:
                return self._sepia(image)
            return self._negate(image)
        except MemoryError as e:
            raise AllocationError(
                f"Cannot allocate {image.width}x{image.height} {self._filter_type.value} output"
            ) from e

    def _sepia(self, image: Image) -> Image:
        colour, alpha = self._colour_space.split_alpha(self._colour_space.to_srgb(image))

        recombined = colour.data.astype(np.float64) @ self.SEPIA_MATRIX.T
        recombined = np.clip(np.rint(recombined), 0, image.max_value)

        result = Image(recombined.astype(image.dtype), Interpretation.SRGB)
        return self._colour_space.join_alpha(result, alpha)

    def _negate(self, image: Image) -> Image:
        colour, alpha = self._colour_space.split_alpha(image)
        negated = (image.max_value - colour.data).astype(colour.dtype)
        return self._colour_space.join_alpha(Image(negated, colour.interpretation), alpha)

    def get_name(self) -> str:
        return f"filter:{self._filter_type.value}"
