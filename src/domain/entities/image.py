from dataclasses import dataclass
from typing import Tuple

import numpy as np

from ..enums.image_kind import Interpretation, COLOUR_BANDS


@dataclass(frozen=True, eq=False)
class Image:
    """
    In-memory raster image

    Pixel data is a numpy array of shape (height, width, bands). The array is
    copied on construction and `data` is read-only, so an Image never shares
    writable memory with its caller; processors build new images instead of
    writing into an existing one.
    """
    data: np.ndarray
    interpretation: Interpretation

    def __post_init__(self):
        if not isinstance(self.data, np.ndarray):
            raise ValueError("Image data must be a numpy array")
        if self.data.ndim != 3:
            raise ValueError(
                f"Image data must have shape (height, width, bands), got {self.data.shape}"
            )

        height, width, bands = self.data.shape
        if width < 1 or height < 1 or bands < 1:
            raise ValueError(f"Image dimensions must be positive, got {self.data.shape}")

        colour_bands = COLOUR_BANDS.get(self.interpretation)
        if colour_bands is not None and bands not in (colour_bands, colour_bands + 1):
            raise ValueError(
                f"{bands}-band image cannot be interpreted as {self.interpretation.value}"
            )

        owned = np.array(self.data, copy=True)
        owned.flags.writeable = False
        object.__setattr__(self, "data", owned)

    @property
    def width(self) -> int:
        return self.data.shape[1]

    @property
    def height(self) -> int:
        return self.data.shape[0]

    @property
    def bands(self) -> int:
        return self.data.shape[2]

    @property
    def size(self) -> Tuple[int, int]:
        """(width, height), same order as PIL"""
        return (self.width, self.height)

    @property
    def dtype(self) -> np.dtype:
        """Sample format"""
        return self.data.dtype

    @property
    def max_value(self):
        """Largest representable sample value for this sample format"""
        if np.issubdtype(self.dtype, np.integer):
            return int(np.iinfo(self.dtype).max)
        return 1.0

    @property
    def has_alpha(self) -> bool:
        """Whether the last band is an alpha band"""
        colour_bands = COLOUR_BANDS.get(self.interpretation)
        return colour_bands is not None and self.bands == colour_bands + 1

    def band(self, index: int) -> np.ndarray:
        """Return a single band as a 2D read-only array"""
        return self.data[:, :, index]
