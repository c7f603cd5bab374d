"""
Processor Factory

Builds the ordered processor chain and the output options for one request
from its query parameters.
"""
from typing import List, Mapping, Optional

from src.domain.entities.color import Color, TintParameters
from src.domain.entities.output_options import OutputOptions
from src.domain.enums.image_kind import FilterType, OutputFormat
from src.domain.exceptions import InvalidParameterError
from src.domain.interfaces.colour_space import IColourSpace
from src.domain.interfaces.processor import IProcessor
from src.infrastructure.image.colour_space import ColourSpace
from src.infrastructure.image.processors import Filter, Tint

DEFAULT_QUALITY = 85
DEFAULT_COMPRESSION_LEVEL = 6

# Formats that can carry an alpha band
ALPHA_FORMATS = (OutputFormat.PNG, OutputFormat.WEBP)


class ProcessorFactory:
    """Creates processors from request parameters"""

    def __init__(self, colour_space: Optional[IColourSpace] = None):
        self._colour_space = colour_space or ColourSpace()

    def create_filter(self, value: Optional[str]) -> Optional[Filter]:
        """Create filter processor, None if `filt` is missing or unknown"""
        try:
            filter_type = FilterType(value)
        except ValueError:
            return None
        return Filter(filter_type, self._colour_space)

    def create_tint(self, value: Optional[str]) -> Optional[Tint]:
        """
        Create tint processor, None if `tint` is missing

        Raises:
            InvalidParameterError: If the colour cannot be parsed
        """
        if value is None:
            return None

        color = Color.parse(value)
        if color is None:
            raise InvalidParameterError(f"Invalid tint colour: {value!r}")

        return Tint(TintParameters(color=color), self._colour_space)

    def create_processors(self, params: Mapping[str, str]) -> List[IProcessor]:
        """
        Build the processor chain in execution order: filter, then tint

        Args:
            params: Request query parameters

        Returns:
            List of configured processors (possibly empty)
        """
        candidates = [
            self.create_filter(params.get("filt")),
            self.create_tint(params.get("tint")),
        ]
        return [processor for processor in candidates if processor is not None]


def _bounded_int(value: Optional[str], low: int, high: int, default: int) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    if number < low or number > high:
        return default
    return number


def resolve_output_options(params: Mapping[str, str], extension: str, has_alpha: bool) -> OutputOptions:
    """
    Decide the output encoding

    An explicit `output` wins. Otherwise images with alpha become PNG unless
    the source format can already carry alpha, and anything we cannot write
    becomes JPG.
    """
    try:
        output_format = OutputFormat(params.get("output"))
    except ValueError:
        try:
            output_format = OutputFormat(extension)
        except ValueError:
            output_format = None

        if has_alpha and output_format not in ALPHA_FORMATS:
            output_format = OutputFormat.PNG
        elif output_format is None:
            output_format = OutputFormat.JPG

    return OutputOptions(
        output_format=output_format,
        quality=_bounded_int(params.get("q"), 0, 100, DEFAULT_QUALITY),
        compression_level=_bounded_int(params.get("level"), 0, 9, DEFAULT_COMPRESSION_LEVEL),
        interlace="il" in params,
    )
