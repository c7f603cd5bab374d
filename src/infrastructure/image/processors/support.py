import numpy as np

from src.domain.entities.image import Image
from src.domain.enums.image_kind import Interpretation
from src.domain.exceptions import UnsupportedImageKindError

SUPPORTED_DTYPES = (np.dtype(np.uint8), np.dtype(np.uint16))
SUPPORTED_INTERPRETATIONS = (Interpretation.B_W, Interpretation.SRGB)


def require_colour_image(image: Image, processor_name: str) -> None:
    """
    Check that an image is 8/16-bit greyscale or sRGB, with or without alpha

    Raises:
        UnsupportedImageKindError: For any other band count or sample format
    """
    if image.dtype not in SUPPORTED_DTYPES:
        raise UnsupportedImageKindError(
            f"{processor_name}: unsupported sample format {image.dtype}"
        )

    if image.interpretation not in SUPPORTED_INTERPRETATIONS:
        raise UnsupportedImageKindError(
            f"{processor_name}: unsupported {image.bands}-band "
            f"{image.interpretation.value} image"
        )
