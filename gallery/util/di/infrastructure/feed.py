"""Gallery feed provider."""

from dishka import Scope, provide

from gallery.config import RankingSettings
from gallery.domain.service import GalleryFeed
from gallery.util.di.base import ProviderBase


class FeedProvider(ProviderBase):
    """Provider for the in-process snapshot feed.

    APP scope: every request and WebSocket shares one feed per process.
    """

    scope = Scope.APP

    @provide
    def get_gallery_feed(self, ranking_settings: RankingSettings) -> GalleryFeed:
        """Provide the gallery snapshot feed."""
        return GalleryFeed(top_n=ranking_settings.top_n)
