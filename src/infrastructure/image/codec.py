from io import BytesIO
import numpy as np
from PIL import Image as PILImage, UnidentifiedImageError

from src.domain.entities.image import Image
from src.domain.entities.output_options import OutputOptions
from src.domain.enums.image_kind import Interpretation, OutputFormat, PIL_FORMATS
from src.domain.exceptions import ImageNotReadableError, UnsupportedImageKindError
from src.domain.interfaces.image_codec import IImageCodec


class ImageCodec(IImageCodec):
    """Pillow based image codec"""

    # Pillow modes that map directly onto an interpretation
    MODE_TO_INTERPRETATION = {
        "L": Interpretation.B_W,
        "LA": Interpretation.B_W,
        "RGB": Interpretation.SRGB,
        "RGBA": Interpretation.SRGB,
        "CMYK": Interpretation.CMYK,
    }

    SIXTEEN_BIT_MODES = ("I;16", "I;16L", "I;16B", "I")

    def load_from_bytes(self, image_bytes: bytes) -> Image:
        """
        Load image from bytes

        Raises:
            ImageNotReadableError: If the bytes are not a decodable image
        """
        try:
            pil_image = PILImage.open(BytesIO(image_bytes))
            pil_image.load()
        except (UnidentifiedImageError, OSError) as e:
            raise ImageNotReadableError("Image not readable. Is it a valid image?") from e

        image = self.from_pil(pil_image)
        print(f"[ImageCodec] Image loaded: {image.size}, bands: {image.bands}, format: {image.dtype}")
        return image

    def from_pil(self, pil_image: PILImage.Image) -> Image:
        """Convert a Pillow image to an Image"""
        mode = pil_image.mode

        if mode in self.SIXTEEN_BIT_MODES:
            data = np.clip(np.asarray(pil_image, dtype=np.int64), 0, 65535).astype(np.uint16)
            return Image(data[:, :, np.newaxis], Interpretation.B_W)

        if mode == "1":
            pil_image = pil_image.convert("L")
            mode = pil_image.mode

        if mode not in self.MODE_TO_INTERPRETATION:
            has_transparency = mode.endswith(("A", "a")) or "transparency" in pil_image.info
            pil_image = pil_image.convert("RGBA" if has_transparency else "RGB")
            mode = pil_image.mode

        data = np.asarray(pil_image, dtype=np.uint8)
        if data.ndim == 2:
            data = data[:, :, np.newaxis]
        return Image(data, self.MODE_TO_INTERPRETATION[mode])

    def to_pil(self, image: Image) -> PILImage.Image:
        """Convert an Image to an 8-bit Pillow image"""
        data = image.data
        if data.dtype == np.uint16:
            data = (data >> 8).astype(np.uint8)
        elif data.dtype != np.uint8:
            if np.issubdtype(data.dtype, np.integer):
                raise UnsupportedImageKindError(f"Cannot encode sample format {data.dtype}")
            data = np.clip(np.rint(data * 255.0), 0, 255).astype(np.uint8)

        if image.interpretation == Interpretation.B_W:
            mode = "LA" if image.has_alpha else "L"
        elif image.interpretation == Interpretation.SRGB:
            mode = "RGBA" if image.has_alpha else "RGB"
        elif image.interpretation == Interpretation.CMYK:
            mode = "CMYK"
            data = data[:, :, :4]
        else:
            raise UnsupportedImageKindError(
                f"Cannot encode {image.bands}-band {image.interpretation.value} image"
            )

        return PILImage.frombytes(mode, image.size, np.ascontiguousarray(data).tobytes())

    def save_to_bytes(self, image: Image, options: OutputOptions) -> bytes:
        """
        Encode image

        JPEG cannot carry alpha, so it is dropped there. CMYK is only kept
        for JPEG. 16-bit samples are reduced to 8-bit.
        """
        pil_image = self.to_pil(image)
        output_format = options.output_format

        if output_format == OutputFormat.JPG and pil_image.mode in ("LA", "RGBA"):
            pil_image = pil_image.convert(pil_image.mode[:-1])
        if output_format != OutputFormat.JPG and pil_image.mode == "CMYK":
            pil_image = pil_image.convert("RGB")

        save_kwargs = {}
        if output_format in (OutputFormat.JPG, OutputFormat.WEBP):
            save_kwargs["quality"] = options.quality
        if output_format == OutputFormat.JPG:
            save_kwargs["progressive"] = options.interlace
        if output_format == OutputFormat.PNG:
            save_kwargs["compress_level"] = options.compression_level

        buffer = BytesIO()
        pil_image.save(buffer, format=PIL_FORMATS[output_format], **save_kwargs)
        return buffer.getvalue()
