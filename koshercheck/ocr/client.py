"""
OCR Client

Client for the external OCR service. Images are sent as base64 JSON;
the service answers with {"text": "..."}.
"""

import base64
import logging
from pathlib import Path
from typing import Optional

import requests

logger = logging.getLogger(__name__)

DEFAULT_OCR_API_URL = "http://localhost:4000/ocr"


class OCRError(Exception):
    """Raised when the OCR service rejects a request or cannot be reached."""


class OCRClient:
    """
    Sends label photos to the OCR service.

    Usage:
        with OCRClient("http://localhost:4000/ocr") as client:
            text = client.recognize_file("label.jpg")
    """

    def __init__(
        self,
        api_url: str = DEFAULT_OCR_API_URL,
        session: Optional[requests.Session] = None,
        timeout: float = 30,
    ):
        self.api_url = api_url
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"Content-Type": "application/json"})

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.session.close()

    def close(self):
        self.session.close()

    def recognize_bytes(self, image: bytes) -> str:
        """
        Run OCR on raw image bytes.

        Args:
            image: Encoded image (JPEG/PNG)

        Returns:
            Recognized text, empty string if the service returned none

        Raises:
            OCRError: On network failure or a non-2xx response
        """
        payload = {"imageBase64": base64.b64encode(image).decode("ascii")}
        try:
            response = self.session.post(self.api_url, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            raise OCRError(f"OCR request failed: {e}") from e

        if not response.ok:
            raise OCRError(f"OCR request failed: HTTP {response.status_code}")

        try:
            data = response.json()
        except ValueError as e:
            raise OCRError(f"OCR response is not JSON: {e}") from e

        text = data.get("text") if isinstance(data, dict) else None
        logger.debug("OCR returned %d characters", len(text or ""))
        return text or ""

    def recognize_file(self, path: str | Path) -> str:
        """Run OCR on an image file."""
        return self.recognize_bytes(Path(path).read_bytes())
