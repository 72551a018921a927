#!/usr/bin/env python3
"""
Start the WaterWise API server with Swagger documentation.
"""
import sys
import threading
import time
import webbrowser
from pathlib import Path

import uvicorn

# Add the project root to the Python path
sys.path.append(str(Path(__file__).parent))

from waterwise.core.config import settings


def start_server():
    """Start the server and open Swagger documentation."""
    docs_url = f"http://localhost:8000{settings.api_prefix}/docs"
    print("Starting WaterWise API...")
    print(f"Swagger UI will be available at: {docs_url}")
    print(f"OpenAPI JSON: http://localhost:8000{settings.api_prefix}/openapi.json")

    if settings.debug:

        def open_browser():
            time.sleep(2)
            webbrowser.open(docs_url)

        browser_thread = threading.Thread(target=open_browser)
        browser_thread.daemon = True
        browser_thread.start()

    uvicorn.run(
        "waterwise.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
        access_log=True,
    )


if __name__ == "__main__":
    start_server()
