import pytest

from src.application.pipeline import Pipeline
from src.domain.entities.color import Color, TintParameters
from src.domain.enums.image_kind import FilterType, Interpretation
from src.domain.exceptions import UnsupportedImageKindError
from src.domain.interfaces.processor import IProcessor
from src.infrastructure.image.processors import Filter, Tint

from conftest import make_image


class RecordingProcessor(IProcessor):
    def __init__(self, calls):
        self._calls = calls

    def process(self, image):
        self._calls.append(self.get_name())
        return image

    def get_name(self):
        return "recording"


class FailingProcessor(IProcessor):
    def process(self, image):
        raise UnsupportedImageKindError("nope")

    def get_name(self):
        return "failing"


def test_runs_in_order():
    image = make_image([[[200, 200, 200]]])
    pipeline = Pipeline([
        Filter(FilterType.NEGATE),
        Tint(TintParameters(color=Color(255, 255, 255))),
    ])

    result = pipeline.run(image)

    # negate -> 55, tint white keeps luminance
    assert result.data[0, 0].tolist() == [55, 55, 55]


def test_empty_pipeline_returns_input():
    image = make_image([[[1]]], Interpretation.B_W)

    assert Pipeline([]).run(image) is image


def test_short_circuits_on_failure():
    calls = []
    pipeline = Pipeline([RecordingProcessor(calls), FailingProcessor(), RecordingProcessor(calls)])

    with pytest.raises(UnsupportedImageKindError):
        pipeline.run(make_image([[[1]]], Interpretation.B_W))

    assert calls == ["recording"]
