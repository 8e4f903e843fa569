"""Image host infrastructure providers."""

from dishka import Scope, provide

from gallery.adapter.imagehost import ImageHostClient, RealImageHostClient
from gallery.config import Settings
from gallery.util.di.base import ProviderBase
from gallery.util.error import ConfigurationError

PLACEHOLDER_API_KEY = "CHANGE_ME_IN_PRODUCTION"


class ImageHostProvider(ProviderBase):
    """Image host component base."""

    __mock_component__ = "imagehost"


class ProdImageHostProvider(ImageHostProvider):
    """Production image host provider (imgbb)."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_image_host_client(self, settings: Settings) -> ImageHostClient:
        """Provide image host client.

        Raises:
            ConfigurationError: If the API key is missing, or still the
                placeholder in production
        """
        image_host = settings.image_host
        if not image_host.api_key:
            raise ConfigurationError("Image host API key must be configured")
        if (
            settings.environment == "production"
            and image_host.api_key == PLACEHOLDER_API_KEY
        ):
            raise ConfigurationError(
                "IMAGE_HOST__API_KEY must be set in production"
            )

        return RealImageHostClient(
            api_key=image_host.api_key,
            upload_url=image_host.upload_url,
            timeout_seconds=image_host.timeout_seconds,
            max_upload_bytes=image_host.max_upload_bytes,
        )
