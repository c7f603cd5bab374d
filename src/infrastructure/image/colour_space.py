from typing import Optional, Tuple
import numpy as np

from src.domain.entities.image import Image
from src.domain.enums.image_kind import Interpretation
from src.domain.exceptions import UnsupportedImageKindError
from src.domain.interfaces.colour_space import IColourSpace


class ColourSpace(IColourSpace):
    """
    Colour space engine

    Luminance is ITU-R BT.601 luma computed on the stored (gamma encoded)
    samples. For integer sample formats it is evaluated in integer
    arithmetic with fixed weights so results are bit-reproducible:

        Y = (299 * R + 587 * G + 114 * B + 500) // 1000

    All methods are pure; one instance can be shared between threads.
    """

    WEIGHTS = (299, 587, 114)
    WEIGHT_SCALE = 1000

    def to_luminance(self, image: Image) -> Image:
        colour, _ = self.split_alpha(image)

        if colour.interpretation == Interpretation.B_W:
            return colour

        if colour.interpretation != Interpretation.SRGB:
            raise UnsupportedImageKindError(
                f"Cannot derive luminance from {colour.interpretation.value} image"
            )

        if np.issubdtype(colour.dtype, np.integer):
            samples = colour.data.astype(np.int64)
            weighted = (
                self.WEIGHTS[0] * samples[:, :, 0]
                + self.WEIGHTS[1] * samples[:, :, 1]
                + self.WEIGHTS[2] * samples[:, :, 2]
            )
            luma = (weighted + self.WEIGHT_SCALE // 2) // self.WEIGHT_SCALE
        else:
            weights = np.array(self.WEIGHTS, dtype=np.float64) / self.WEIGHT_SCALE
            luma = colour.data.astype(np.float64) @ weights

        return Image(luma.astype(colour.dtype)[:, :, np.newaxis], Interpretation.B_W)

    def split_alpha(self, image: Image) -> Tuple[Image, Optional[np.ndarray]]:
        if not image.has_alpha:
            return image, None

        colour = Image(image.data[:, :, :-1].copy(), image.interpretation)
        alpha = image.data[:, :, -1].copy()
        return colour, alpha

    def join_alpha(self, image: Image, alpha: Optional[np.ndarray]) -> Image:
        if alpha is None:
            return image

        data = np.concatenate([image.data, alpha[:, :, np.newaxis]], axis=2)
        return Image(data, image.interpretation)

    def to_srgb(self, image: Image) -> Image:
        if image.interpretation == Interpretation.SRGB:
            return Image(image.data, image.interpretation)
        if image.interpretation != Interpretation.B_W:
            raise UnsupportedImageKindError(
                f"Cannot convert {image.interpretation.value} image to srgb"
            )

        colour, alpha = self.split_alpha(image)
        rgb = np.repeat(colour.data, 3, axis=2)
        return self.join_alpha(Image(rgb, Interpretation.SRGB), alpha)

    def to_greyscale(self, image: Image) -> Image:
        if image.interpretation == Interpretation.B_W:
            return Image(image.data, image.interpretation)

        _, alpha = self.split_alpha(image)
        return self.join_alpha(self.to_luminance(image), alpha)
