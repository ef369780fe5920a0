#!/usr/bin/env python3
"""
Development server launcher for the DSAGenie API.

This script starts the FastAPI server with uvicorn. PORT defaults to 3000,
matching the browser extension's default backend URL.
"""

import logging
import os

import uvicorn
from dotenv import load_dotenv

if __name__ == "__main__":
    load_dotenv()
    port = int(os.getenv("PORT", "3000"))
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger(__name__).info(f"DSAGenie backend running on port {port} (docs at /docs)")

    uvicorn.run(
        "dsagenie.api.main:app",
        host="0.0.0.0",  # Accept connections from any IP
        port=port,
        reload=os.getenv("RELOAD", "").lower() in {"1", "true", "yes"},
        log_level="info"
    )
