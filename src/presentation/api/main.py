import os
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import routes
from .routes import router, set_use_case
from .schemas import HealthResponse, ServiceInfoResponse
from src.domain.enums.image_kind import FilterType
from src.infrastructure.http.fetcher import ImageFetcher
from src.infrastructure.image.codec import ImageCodec
from src.application.transform_image import TransformImageUseCase

VERSION = "1.0.0"

# Global instances
use_case = None

ALLOWED_MIME_TYPES = {
    "image/jpeg": "jpg",
    "image/png": "png",
    "image/gif": "gif",
    "image/bmp": "bmp",
    "image/tiff": "tiff",
    "image/webp": "webp",
    "image/x-icon": "ico",
    "image/vnd.microsoft.icon": "ico",
}


def create_fetcher() -> ImageFetcher:
    """Create fetcher from environment"""
    return ImageFetcher(
        user_agent=os.getenv("FETCH_USER_AGENT") or None,
        connect_timeout=float(os.getenv("FETCH_CONNECT_TIMEOUT", "5")),
        timeout=float(os.getenv("FETCH_TIMEOUT", "10")),
        max_image_size=int(os.getenv("MAX_IMAGE_SIZE", "0")),
        max_redirects=int(os.getenv("MAX_REDIRECTS", "10")),
        allowed_mime_types=ALLOWED_MIME_TYPES,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler"""
    global use_case

    print("\n" + "=" * 50)
    print("Image Tint Service")
    print("=" * 50 + "\n")

    print("[Startup] Creating fetcher and codec...")
    fetcher = create_fetcher()
    codec = ImageCodec()

    use_case = TransformImageUseCase(fetcher=fetcher, codec=codec)

    # Set use case for routes
    set_use_case(use_case)

    print("\n[Startup] Service ready!")
    print(f"[Startup] User agent: {fetcher.user_agent}")
    print(f"[Startup] Max image size: {os.getenv('MAX_IMAGE_SIZE', '0')} bytes (0 = unlimited)")
    print("=" * 50 + "\n")

    yield

    # Shutdown
    print("\n[Shutdown] Cleaning up...")


def create_app() -> FastAPI:
    """Create FastAPI application"""

    app = FastAPI(
        title="Image Tint Service",
        description="Image transformation service: fetch, filter and tint remote images",
        version=VERSION,
        lifespan=lifespan
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routes
    app.include_router(router, prefix="/api", tags=["Images"])

    @app.get("/", response_model=ServiceInfoResponse, tags=["Root"])
    async def root():
        """Root endpoint"""
        return ServiceInfoResponse(
            message="Image Tint Service",
            version=VERSION,
            docs="/docs"
        )

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health():
        """Health check endpoint"""
        return HealthResponse(
            status="ok" if routes.transform_use_case is not None else "not_ready",
            processors=[f"filter:{f.value}" for f in FilterType] + ["tint"]
        )

    return app


# Create app instance
app = create_app()
