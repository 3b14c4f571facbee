#!/usr/bin/env python3
"""Reset a running development server's catalog to the seed data."""
import argparse
import logging
import os
from typing import Optional

import httpx

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8000")


def trigger_reseed(base_url: str, client: Optional[httpx.Client] = None) -> str:
    """POST to the dev reseed endpoint and return the server's message.

    Raises:
        httpx.HTTPStatusError: if the server refuses (e.g. not in development)
    """
    owns_client = client is None
    client = client or httpx.Client(timeout=30)
    try:
        logger.info(f"Reseeding catalog at {base_url}...")
        response = client.post(f"{base_url.rstrip('/')}/api/v1/dev/reseed")
        response.raise_for_status()
        message = response.json()["message"]
        logger.info(message)
        return message
    finally:
        if owns_client:
            client.close()


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--base-url", default=DEFAULT_BASE_URL, help="API server root URL")
    args = parser.parse_args()
    trigger_reseed(args.base_url)


if __name__ == "__main__":
    main()
