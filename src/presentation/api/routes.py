from fastapi import APIRouter, HTTPException, Query, Request, Response
import httpx
import traceback

from src.domain.exceptions import (
    ImageNotReadableError,
    ImageNotValidError,
    ImageTooLargeError,
    InvalidParameterError,
    UnsupportedImageKindError,
)
from .schemas import ErrorResponse

router = APIRouter()

# Global reference to use case (set by main.py)
transform_use_case = None


def set_use_case(use_case):
    """Set the transformation use case (called by main.py)"""
    global transform_use_case
    transform_use_case = use_case


@router.get(
    "/image",
    response_class=Response,
    responses={
        200: {"content": {"image/jpeg": {}, "image/png": {}, "image/webp": {}}},
        400: {"model": ErrorResponse, "description": "Bad Request"},
        413: {"model": ErrorResponse, "description": "Image Too Large"},
        422: {"model": ErrorResponse, "description": "Unsupported Image"},
        500: {"model": ErrorResponse, "description": "Server Error"},
    }
)
def transform_image(request: Request, url: str = Query(..., description="Source image URL")):
    """
    Fetch an image and transform it

    - **url**: Source image URL
    - **filt**: greyscale, sepia or negate
    - **tint**: Tint colour (hex like `#ff0000`, or a colour name)
    - **output**: jpg, png or webp
    - **q**: Quality 0-100 (jpg/webp, default 85)
    - **level**: zlib compression level 0-9 (png, default 6)
    - **il**: Interlaced / progressive output
    """
    if transform_use_case is None:
        raise HTTPException(
            status_code=500,
            detail="Image service not initialized"
        )

    params = dict(request.query_params)

    try:
        print(f"\n[API] Transforming image: {url[:80]}...")
        result = transform_use_case.execute(url, params)

    except InvalidParameterError as e:
        print(f"[API] Invalid parameter: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    except (ImageNotValidError, ImageNotReadableError) as e:
        print(f"[API] Invalid image: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    except ImageTooLargeError as e:
        print(f"[API] Image too large: {e}")
        raise HTTPException(status_code=413, detail=str(e))

    except UnsupportedImageKindError as e:
        print(f"[API] Unsupported image: {e}")
        raise HTTPException(status_code=422, detail=str(e))

    except (httpx.HTTPError, httpx.InvalidURL) as e:
        print(f"[API] HTTP Error: {e}")
        raise HTTPException(
            status_code=400,
            detail=f"Failed to fetch image: {str(e)}"
        )

    except Exception as e:
        print(f"[API] Error: {e}", flush=True)
        traceback.print_exc()
        raise HTTPException(
            status_code=500,
            detail=f"Transformation failed: {str(e)}"
        )

    print(f"[API] Result: {result.mime_type}, {len(result.content)} bytes")
    return Response(content=result.content, media_type=result.mime_type)
