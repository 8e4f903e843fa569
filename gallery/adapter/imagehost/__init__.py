"""Image host adapter."""

from .client import ImageHostClient, MockImageHostClient, RealImageHostClient

__all__ = ["ImageHostClient", "MockImageHostClient", "RealImageHostClient"]
