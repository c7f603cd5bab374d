from dataclasses import dataclass

from ..enums.image_kind import OutputFormat, get_mime_type


@dataclass(frozen=True)
class OutputOptions:
    """Resolved encoder settings for one response"""
    output_format: OutputFormat
    quality: int = 85          # jpg / webp
    compression_level: int = 6  # png zlib level
    interlace: bool = False     # jpg / png

    @property
    def extension(self) -> str:
        return self.output_format.value

    @property
    def mime_type(self) -> str:
        return get_mime_type(self.output_format)
