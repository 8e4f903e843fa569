"""Mock image host providers for testing."""

from dishka import Scope, provide

from gallery.adapter.imagehost import ImageHostClient, MockImageHostClient
from gallery.config import Settings
from gallery.util.di.infrastructure.imagehost import ImageHostProvider


class MockImageHostProvider(ImageHostProvider):
    """Mock image host provider using the deterministic mock client."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_image_host_client(self, settings: Settings) -> ImageHostClient:
        """Provide mock image host client."""
        return MockImageHostClient(
            max_upload_bytes=settings.image_host.max_upload_bytes
        )
