from typing import Optional
import numpy as np

from src.domain.entities.color import TintParameters
from src.domain.entities.image import Image
from src.domain.enums.image_kind import Interpretation
from src.domain.exceptions import AllocationError, InvalidParameterError
from src.domain.interfaces.colour_space import IColourSpace
from src.domain.interfaces.processor import IProcessor
from src.infrastructure.image.colour_space import ColourSpace

from .support import require_colour_image


class Tint(IProcessor):
    """
    Recolour an image toward a target colour, keeping each pixel's luminance

    For every pixel with luminance Y (0..max_value):

        out_channel = tint_channel * Y / max_value

    so black stays black, full white becomes exactly the tint colour and
    everything in between is interpolated linearly. Greyscale input is
    promoted to sRGB. The alpha band, if present, is copied through
    untouched.
    """

    MAX_COMPONENT = 255

    def __init__(self, parameters: TintParameters, colour_space: Optional[IColourSpace] = None):
        """
        Initialize tint processor

        Args:
            parameters: Tint colour (8-bit components)
            colour_space: Colour space engine (default: ColourSpace)

        Raises:
            InvalidParameterError: If a colour component is outside 0..255
        """
        for name, value in zip(("red", "green", "blue"), parameters.color.to_rgb()):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise InvalidParameterError(f"Tint {name} must be an integer, got {value!r}")
            if not 0 <= value <= self.MAX_COMPONENT:
                raise InvalidParameterError(
                    f"Tint {name} must be within 0..{self.MAX_COMPONENT}, got {value}"
                )

        self._color = parameters.color
        self._colour_space = colour_space or ColourSpace()

    @property
    def color(self):
        return self._color

    def process(self, image: Image) -> Image:
        require_colour_image(image, self.get_name())

        max_value = image.max_value
        # Scale 8-bit tint to the sample format: x1 for 8-bit, x257 for 16-bit
        tint = np.array(self._color.to_rgb(), dtype=np.int64) * max_value // self.MAX_COMPONENT

        try:
            colour, alpha = self._colour_space.split_alpha(image)
            luminance = self._colour_space.to_luminance(colour)

            y = luminance.data.astype(np.int64)
            # Round half up: floor((2 * tint * y + max) / (2 * max))
            rgb = (2 * y * tint + max_value) // (2 * max_value)
            result = Image(rgb.astype(image.dtype), Interpretation.SRGB)
            return self._colour_space.join_alpha(result, alpha)
        except MemoryError as e:
            raise AllocationError(
                f"Cannot allocate {image.width}x{image.height} tint output"
            ) from e

    def get_name(self) -> str:
        return "tint"
