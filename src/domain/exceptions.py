"""
Error taxonomy shared by processors, codec and fetcher
"""


class ImageServiceError(Exception):
    """Base class for all service errors"""


class InvalidParameterError(ImageServiceError):
    """A processor parameter is out of range; raised before any image is touched"""


class UnsupportedImageKindError(ImageServiceError):
    """The image band count or sample format cannot be handled by a processor"""


class AllocationError(ImageServiceError):
    """The output buffer could not be allocated"""


class ImageNotReadableError(ImageServiceError):
    """The fetched bytes could not be decoded as an image"""


class ImageNotValidError(ImageServiceError):
    """The remote resource is not an allowed image type"""


class ImageTooLargeError(ImageServiceError):
    """The remote image exceeds the configured size limit"""
