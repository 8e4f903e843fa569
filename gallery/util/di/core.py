"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from gallery.config import (
    AuthSettings,
    ImageHostSettings,
    ModerationSettings,
    RankingSettings,
    Settings,
    VotingSettings,
)
from gallery.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    Each nested section is exposed on its own so services depend only on
    what they read.
    """

    scope = Scope.APP

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize provider.

        Args:
            settings: Fixed settings to serve instead of loading from the
                environment (used by tests and scripts)
        """
        super().__init__()
        self._settings = settings

    @provide
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return self._settings if self._settings is not None else Settings()

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def provide_image_host_settings(self, settings: Settings) -> ImageHostSettings:
        return settings.image_host

    @provide
    def provide_moderation_settings(self, settings: Settings) -> ModerationSettings:
        return settings.moderation

    @provide
    def provide_voting_settings(self, settings: Settings) -> VotingSettings:
        return settings.voting

    @provide
    def provide_ranking_settings(self, settings: Settings) -> RankingSettings:
        return settings.ranking
