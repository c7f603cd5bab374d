from dataclasses import dataclass
from typing import Mapping, Optional
import traceback

from src.domain.exceptions import ImageServiceError
from src.domain.interfaces.image_codec import IImageCodec
from src.domain.interfaces.image_fetcher import IImageFetcher
from src.application.pipeline import Pipeline
from src.application.processor_factory import ProcessorFactory, resolve_output_options


@dataclass
class TransformResult:
    """Encoded output of one request"""
    content: bytes
    mime_type: str
    extension: str


class TransformImageUseCase:
    """
    Main use case for image transformation

    Flow:
    1. Build processors from parameters (fails fast on bad parameters)
    2. Fetch image from URL
    3. Decode
    4. Run processors in order
    5. Encode with resolved output options
    """

    def __init__(
        self,
        fetcher: IImageFetcher,
        codec: IImageCodec,
        factory: Optional[ProcessorFactory] = None
    ):
        self._fetcher = fetcher
        self._codec = codec
        self._factory = factory or ProcessorFactory()

    def execute(self, image_url: str, params: Mapping[str, str]) -> TransformResult:
        """Execute transformation"""
        print(f"[UseCase] Starting transformation...", flush=True)

        # Step 1: Processors are built before anything is downloaded
        processors = self._factory.create_processors(params)
        print(f"[UseCase] Processors: {[p.get_name() for p in processors] or 'none'}", flush=True)

        # Step 2-3: Fetch and decode
        try:
            fetched = self._fetcher.fetch(image_url)
            image = self._codec.load_from_bytes(fetched.content)
        except ImageServiceError as e:
            print(f"[UseCase] Cannot load image: {e}", flush=True)
            raise
        except Exception as e:
            print(f"[UseCase] ERROR loading image: {e}", flush=True)
            traceback.print_exc()
            raise

        # Step 4: Processors
        try:
            image = Pipeline(processors).run(image)
        except ImageServiceError as e:
            print(f"[UseCase] Processing rejected: {e}", flush=True)
            raise
        except Exception as e:
            print(f"[UseCase] ERROR processing image: {e}", flush=True)
            traceback.print_exc()
            raise

        # Step 5: Encode
        options = resolve_output_options(params, fetched.extension, image.has_alpha)
        content = self._codec.save_to_bytes(image, options)

        print(f"[UseCase] Done: {image.size} -> {options.extension}, {len(content)} bytes", flush=True)
        return TransformResult(
            content=content,
            mime_type=options.mime_type,
            extension=options.extension
        )
