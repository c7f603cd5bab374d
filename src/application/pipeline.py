from typing import Sequence

from src.domain.entities.image import Image
from src.domain.interfaces.processor import IProcessor


class Pipeline:
    """
    Runs processors in order, each on the output of the previous one

    The first failing processor aborts the chain; its exception propagates
    unchanged and no later processor runs.
    """

    def __init__(self, processors: Sequence[IProcessor]):
        self._processors = list(processors)

    @property
    def processors(self):
        return list(self._processors)

    def run(self, image: Image) -> Image:
        for processor in self._processors:
            image = processor.process(image)
        return image
