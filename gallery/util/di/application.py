"""Application layer DI providers."""

from dishka import Scope, provide

from gallery.adapter.imagehost import ImageHostClient
from gallery.application.usecase.auth import GetCurrentUserUseCase
from gallery.application.usecase.design import (
    GetDesignUseCase,
    GetTopDesignsUseCase,
    ListDesignsUseCase,
    SubmitDesignUseCase,
)
from gallery.application.usecase.moderation import (
    DeleteDesignUseCase,
    ListTrashUseCase,
    PurgeDesignUseCase,
    RestoreDesignUseCase,
)
from gallery.application.usecase.vote import CastVoteUseCase, RetractVoteUseCase
from gallery.config import RankingSettings
from gallery.domain.repository import UnitOfWork
from gallery.domain.service import (
    DesignService,
    GalleryFeed,
    JWTService,
    ModerationService,
    VoteService,
)
from gallery.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, jwt_service: JWTService, moderation_service: ModerationService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(
            jwt_service=jwt_service, moderation_service=moderation_service
        )

    # Design use cases
    @provide(scope=Scope.REQUEST)
    def get_submit_design_use_case(
        self,
        design_service: DesignService,
        image_host: ImageHostClient,
        feed: GalleryFeed,
        unit_of_work: UnitOfWork,
    ) -> SubmitDesignUseCase:
        """Provide submit design use case."""
        return SubmitDesignUseCase(
            design_service=design_service,
            image_host=image_host,
            feed=feed,
            unit_of_work=unit_of_work,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_designs_use_case(
        self,
        design_service: DesignService,
        vote_service: VoteService,
        ranking_settings: RankingSettings,
    ) -> ListDesignsUseCase:
        """Provide list designs use case."""
        return ListDesignsUseCase(
            design_service=design_service,
            vote_service=vote_service,
            ranking_settings=ranking_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_design_use_case(
        self, design_service: DesignService, vote_service: VoteService
    ) -> GetDesignUseCase:
        """Provide get design use case."""
        return GetDesignUseCase(design_service=design_service, vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_get_top_designs_use_case(
        self, design_service: DesignService, ranking_settings: RankingSettings
    ) -> GetTopDesignsUseCase:
        """Provide ranking view use case."""
        return GetTopDesignsUseCase(
            design_service=design_service, ranking_settings=ranking_settings
        )

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(
        self,
        vote_service: VoteService,
        design_service: DesignService,
        feed: GalleryFeed,
        unit_of_work: UnitOfWork,
    ) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(
            vote_service=vote_service,
            design_service=design_service,
            feed=feed,
            unit_of_work=unit_of_work,
        )

    @provide(scope=Scope.REQUEST)
    def get_retract_vote_use_case(
        self,
        vote_service: VoteService,
        design_service: DesignService,
        feed: GalleryFeed,
        unit_of_work: UnitOfWork,
    ) -> RetractVoteUseCase:
        """Provide retract vote use case."""
        return RetractVoteUseCase(
            vote_service=vote_service,
            design_service=design_service,
            feed=feed,
            unit_of_work=unit_of_work,
        )

    # Moderation use cases
    @provide(scope=Scope.REQUEST)
    def get_delete_design_use_case(
        self,
        moderation_service: ModerationService,
        design_service: DesignService,
        feed: GalleryFeed,
        unit_of_work: UnitOfWork,
    ) -> DeleteDesignUseCase:
        """Provide delete design use case."""
        return DeleteDesignUseCase(
            moderation_service=moderation_service,
            design_service=design_service,
            feed=feed,
            unit_of_work=unit_of_work,
        )

    @provide(scope=Scope.REQUEST)
    def get_restore_design_use_case(
        self,
        moderation_service: ModerationService,
        design_service: DesignService,
        feed: GalleryFeed,
        unit_of_work: UnitOfWork,
    ) -> RestoreDesignUseCase:
        """Provide restore design use case."""
        return RestoreDesignUseCase(
            moderation_service=moderation_service,
            design_service=design_service,
            feed=feed,
            unit_of_work=unit_of_work,
        )

    @provide(scope=Scope.REQUEST)
    def get_purge_design_use_case(
        self, moderation_service: ModerationService
    ) -> PurgeDesignUseCase:
        """Provide purge design use case."""
        return PurgeDesignUseCase(moderation_service=moderation_service)

    @provide(scope=Scope.REQUEST)
    def get_list_trash_use_case(
        self, moderation_service: ModerationService
    ) -> ListTrashUseCase:
        """Provide list trash use case."""
        return ListTrashUseCase(moderation_service=moderation_service)
