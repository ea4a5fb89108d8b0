"""
Shared helpers for Wide Angu examples.

Handles the health check so each example can focus on its own flow.
"""

import os
import sys

import httpx

SERVER = os.environ.get("WIDEANGU_API_URL", "http://localhost:3000").rstrip("/")
BASE = f"{SERVER}/api/v1"


def check_backend() -> dict:
    """Verify the backend is reachable and return its health payload."""
    try:
        resp = httpx.get(f"{SERVER}/health", timeout=5)
    except httpx.ConnectError:
        print(f"ERROR: Backend not reachable at {SERVER}")
        print("Start it with:  wideangu   (or: uvicorn wideangu.main:app --port 3000)")
        sys.exit(1)

    if resp.status_code != 200:
        print(f"ERROR: Health check returned {resp.status_code}")
        sys.exit(1)

    health = resp.json()
    print(f"{health['service']}: {health['status']}")
    print(f"  Professional types: {health['professionals_types']}")
    print(f"  Categories:         {health['categories']}")
    return health
