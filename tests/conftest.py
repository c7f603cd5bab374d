import numpy as np
import pytest

from src.domain.entities.image import Image
from src.domain.enums.image_kind import Interpretation


def make_image(pixels, interpretation=Interpretation.SRGB, dtype=np.uint8) -> Image:
    """Build an Image from nested lists shaped (height, width, bands)"""
    return Image(np.array(pixels, dtype=dtype), interpretation)


@pytest.fixture
def grey_ramp():
    """2x1 greyscale image: black, white"""
    return make_image([[[0], [255]]], Interpretation.B_W)


@pytest.fixture
def rgba_pixel():
    return make_image([[[100, 150, 200, 77]]])
