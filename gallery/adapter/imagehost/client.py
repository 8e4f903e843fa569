"""Image host client implementation.

Uploads design images to an imgbb-compatible host and returns the public
URL the gallery stores on the design.
"""

import base64
import hashlib
from abc import ABC, abstractmethod

import httpx
import logfire

from gallery.adapter.error import ImageHostError


class ImageHostClient(ABC):
    """Base class for image host clients.

    Provides type distinction for dependency injection.
    """

    @abstractmethod
    async def upload(self, data: bytes, filename: str | None = None) -> str:
        """Upload image bytes.

        Args:
            data: Raw image bytes
            filename: Original file name, if known

        Returns:
            Public URL of the hosted image

        Raises:
            UploadFailedError: If the upload is rejected or fails
        """
        pass


def check_payload(data: bytes, max_bytes: int) -> None:
    """Reject empty or oversized payloads before any network call.

    Raises:
        ImageHostError: If the payload is empty or too large
    """
    if not data:
        raise ImageHostError("Image is empty")
    if len(data) > max_bytes:
        raise ImageHostError(
            f"Image is {len(data)} bytes, larger than the {max_bytes} byte limit"
        )


class RealImageHostClient(ImageHostClient):
    """imgbb upload client.

    Posts base64-encoded image data as the multipart field ``image`` to
    ``{upload_url}?key={api_key}`` and reads ``data.url`` from the reply.
    """

    def __init__(
        self,
        api_key: str,
        upload_url: str,
        timeout_seconds: float = 30.0,
        max_upload_bytes: int = 16 * 1024 * 1024,
    ) -> None:
        """Initialize image host client.

        Args:
            api_key: Image host API key
            upload_url: Upload endpoint
            timeout_seconds: Request timeout
            max_upload_bytes: Largest accepted payload
        """
        self.api_key = api_key
        self.upload_url = upload_url
        self.timeout_seconds = timeout_seconds
        self.max_upload_bytes = max_upload_bytes

    async def upload(self, data: bytes, filename: str | None = None) -> str:
        """Upload image bytes to the host.

        Raises:
            ImageHostError: On empty/oversized payloads, non-2xx replies,
                transport errors, timeouts or malformed responses
        """
        check_payload(data, self.max_upload_bytes)

        with logfire.span(
            "image_host.upload", size=len(data), filename=filename
        ):
            encoded = base64.b64encode(data).decode("ascii")

            try:
                async with httpx.AsyncClient() as client:
                    response = await client.post(
                        self.upload_url,
                        params={"key": self.api_key},
                        files={"image": (None, encoded)},
                        data={"name": filename} if filename else None,
                        timeout=self.timeout_seconds,
                    )
            except httpx.TimeoutException as e:
                logfire.error("Image upload timed out", error=str(e))
                raise ImageHostError(f"Image upload timed out: {e}")
            except httpx.HTTPError as e:
                logfire.error("Image upload HTTP error", error=str(e))
                raise ImageHostError(f"HTTP error during image upload: {e}")

            if not 200 <= response.status_code < 300:
                logfire.error(
                    "Image upload rejected",
                    status_code=response.status_code,
                    error=response.text,
                )
                raise ImageHostError(
                    f"Image upload failed: {response.status_code}",
                    status_code=response.status_code,
                )

            try:
                url = response.json()["data"]["url"]
            except (ValueError, KeyError, TypeError) as e:
                logfire.error("Malformed image host response", error=str(e))
                raise ImageHostError("Image host returned a malformed response")

            if not isinstance(url, str) or not url:
                raise ImageHostError("Image host returned no URL")

            logfire.info("Image uploaded", url=url, size=len(data))
            return url


class MockImageHostClient(ImageHostClient):
    """Mock image host client for testing.

    Returns deterministic URLs derived from the payload without making
    real API calls.
    """

    def __init__(self, max_upload_bytes: int = 16 * 1024 * 1024) -> None:
        self.max_upload_bytes = max_upload_bytes
        self.uploads: list[bytes] = []

    async def upload(self, data: bytes, filename: str | None = None) -> str:
        """Return a mock URL for the payload."""
        check_payload(data, self.max_upload_bytes)
        self.uploads.append(data)
        digest = hashlib.sha256(data).hexdigest()[:16]
        return f"https://i.example.com/{digest}/{filename or 'image'}"
