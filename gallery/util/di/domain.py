"""Domain layer DI providers."""

from dishka import Scope, provide

from gallery.config import AuthSettings, ModerationSettings, VotingSettings
from gallery.domain.repository import DesignRepository, TrashRepository, VoteRepository
from gallery.domain.service import (
    DesignService,
    JWTService,
    ModerationService,
    VoteService,
)
from gallery.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_design_service(self, design_repository: DesignRepository) -> DesignService:
        """Provide design domain service."""
        return DesignService(design_repository=design_repository)

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        design_service: DesignService,
        voting_settings: VotingSettings,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            design_service=design_service,
            voting_settings=voting_settings,
        )

    @provide
    def get_moderation_service(
        self,
        design_repository: DesignRepository,
        vote_repository: VoteRepository,
        trash_repository: TrashRepository,
        moderation_settings: ModerationSettings,
    ) -> ModerationService:
        """Provide moderation domain service."""
        return ModerationService(
            design_repository=design_repository,
            vote_repository=vote_repository,
            trash_repository=trash_repository,
            moderation_settings=moderation_settings,
        )
