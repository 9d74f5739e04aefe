#!/usr/bin/env python3
"""
Seed script to populate the media store via API endpoints.

Run:
    python seed/seed_media.py \
      --api-id <API-ID> \
      --token <ANY-TOKEN>
"""

import argparse
import io
import sys
from typing import Any, cast

from aws_lambda_powertools import Logger
from PIL import Image
import requests

logger = Logger(service="seed")


API_BASE_URL = "http://localhost:4566/restapis/{0}/snd/_user_request_"

# (file name, Pillow format, MIME type, size, colour)
SAMPLE_IMAGES: tuple[tuple[str, str, str, tuple[int, int], str], ...] = (
    ("sunset.jpg", "JPEG", "image/jpeg", (640, 480), "orange"),
    ("forest.png", "PNG", "image/png", (320, 240), "green"),
    ("ocean.webp", "WEBP", "image/webp", (800, 600), "blue"),
    ("snow.gif", "GIF", "image/gif", (120, 90), "white"),
)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed media via the Media API")

    parser.add_argument(
        "--api-id",
        default=None,
        help="Base API ID (e.g. LocalStack API Gateway ID)",
    )
    parser.add_argument(
        "--base-url",
        default=None,
        help="Full API base URL; overrides --api-id",
    )
    parser.add_argument(
        "--token",
        default="seed",
        help="Value sent in the Authorization header",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=len(SAMPLE_IMAGES),
        help="Number of images to seed",
    )

    args = parser.parse_args(argv)
    if not args.base_url and not args.api_id:
        parser.error("one of --api-id or --base-url is required")

    return args


def render_sample(pil_format: str, size: tuple[int, int], colour: str) -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", size, colour).save(buffer, format=pil_format)
    return buffer.getvalue()


def upload_sample(
    session: requests.Session,
    upload_url: str,
    sample: tuple[str, str, str, tuple[int, int], str],
) -> dict[str, Any] | None:
    name, pil_format, mime_type, size, colour = sample

    response = session.post(
        upload_url,
        files={"file": (name, render_sample(pil_format, size, colour), mime_type)},
        timeout=30,
    )

    response_json = cast(dict[str, Any], response.json())

    if response.status_code == 201:
        media = cast(dict[str, Any], response_json.get("media", {}))
        logger.info(
            "Seeded media",
            extra={"file": name, "media_id": media.get("id")},
        )
        return media

    logger.error(
        "Failed to seed media",
        extra={
            "file": name,
            "status": response.status_code,
            "response": response_json,
        },
    )
    return None


def seed_media(argv: list[str] | None = None) -> None:
    try:
        args = parse_args(argv)
        base_url = (args.base_url or API_BASE_URL.format(args.api_id)).rstrip("/")

        session = requests.Session()
        session.headers["Authorization"] = args.token

        logger.info("Starting seeding process", extra={"api_base_url": base_url})

        for sample in SAMPLE_IMAGES[: args.limit]:
            upload_sample(session, f"{base_url}/media/upload", sample)

        logger.info("Seeding completed")

        list_response = session.get(f"{base_url}/media", timeout=30)

        logger.info(
            "List media response",
            extra={
                "status": list_response.status_code,
                "response": list_response.json() if list_response.ok else list_response.text,
            },
        )

    except Exception as exc:
        logger.exception("Seeding failed", exc_info=exc)
        sys.exit(1)


if __name__ == "__main__":
    seed_media()
