from .processor import IProcessor
from .colour_space import IColourSpace
from .image_codec import IImageCodec
from .image_fetcher import IImageFetcher, FetchedImage

__all__ = ["IProcessor", "IColourSpace", "IImageCodec", "IImageFetcher", "FetchedImage"]
