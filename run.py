"""
Image Tint Service

Run with: python run.py

Environment (also read from .env):
    HOST, PORT             bind address (default 0.0.0.0:8080)
    ENV                    "development" enables auto reload
    FETCH_USER_AGENT       User-Agent sent when fetching source images
    FETCH_CONNECT_TIMEOUT  connect timeout in seconds (default 5)
    FETCH_TIMEOUT          read timeout in seconds (default 10)
    MAX_IMAGE_SIZE         largest source image in bytes, 0 = unlimited
    MAX_REDIRECTS          redirects followed per fetch (default 10)

Then open /api/image?url=...&tint=...&filt=...
"""

import os
import uvicorn
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

if __name__ == "__main__":
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8080"))
    reload = os.getenv("ENV", "development") == "development"

    print(f"\nStarting server on http://{host}:{port}")
    print(f"API Docs: http://{host}:{port}/docs")
    print(f"Reload: {reload}\n")

    uvicorn.run(
        "src.presentation.api.main:app",
        host=host,
        port=port,
        reload=reload
    )
