from enum import Enum


class Interpretation(Enum):
    """How the bands of an image are to be read"""
    B_W = "b-w"              # Greyscale, optional alpha
    SRGB = "srgb"            # Red, green, blue, optional alpha
    CMYK = "cmyk"            # Cyan, magenta, yellow, black, optional alpha
    MULTIBAND = "multiband"  # Anything else


class FilterType(Enum):
    """Filters supported by the `filt` parameter"""
    GREYSCALE = "greyscale"
    SEPIA = "sepia"
    NEGATE = "negate"


class OutputFormat(Enum):
    """Encodings the service can write"""
    JPG = "jpg"
    PNG = "png"
    WEBP = "webp"


# Colour band count (without alpha) for each interpretation
COLOUR_BANDS = {
    Interpretation.B_W: 1,
    Interpretation.SRGB: 3,
    Interpretation.CMYK: 4,
}

MIME_TYPES = {
    OutputFormat.JPG: "image/jpeg",
    OutputFormat.PNG: "image/png",
    OutputFormat.WEBP: "image/webp",
}

# Pillow format names used when saving
PIL_FORMATS = {
    OutputFormat.JPG: "JPEG",
    OutputFormat.PNG: "PNG",
    OutputFormat.WEBP: "WEBP",
}


def get_mime_type(output_format: OutputFormat) -> str:
    """Get the mime type for an output format"""
    return MIME_TYPES[output_format]
