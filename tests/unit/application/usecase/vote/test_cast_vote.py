"""Unit tests for CastVoteUseCase and RetractVoteUseCase."""

from uuid import uuid4

import pytest

from gallery.application.usecase.vote import (
    CastVoteRequest,
    CastVoteUseCase,
    RetractVoteRequest,
    RetractVoteUseCase,
)
from gallery.domain.error import (
    NotFoundError,
    StoreUnavailableError,
    UnauthenticatedError,
)
from gallery.domain.repository import DesignRepository, UnitOfWork
from gallery.domain.service import DesignService, GalleryFeed, VoteService
from gallery.domain.value import Reaction
from tests.conftest import make_design, make_principal
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class FailingUnitOfWork(UnitOfWork):
    """Commit that the store rejects."""

    async def commit(self) -> None:
        raise StoreUnavailableError("commit rejected")


class RecordingUnitOfWork(UnitOfWork):
    """Records what the feed held when the commit happened."""

    def __init__(self, feed: GalleryFeed) -> None:
        self.feed = feed
        self.latest_at_commit: list = []

    async def commit(self) -> None:
        self.latest_at_commit.append(self.feed.latest)


async def _cast_vote_use_case(unit_env, unit_of_work: UnitOfWork) -> CastVoteUseCase:
    return CastVoteUseCase(
        vote_service=await unit_env.get(VoteService),
        design_service=await unit_env.get(DesignService),
        feed=await unit_env.get(GalleryFeed),
        unit_of_work=unit_of_work,
    )


class TestCastVoteUseCase:
    """Tests for CastVoteUseCase."""

    @pytest.mark.asyncio
    async def test_like_returns_new_score_and_publishes(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CastVoteUseCase)
        design_repo = await unit_env.get(DesignRepository)
        feed = await unit_env.get(GalleryFeed)
        design = await design_repo.save(make_design())

        # Act
        response = await use_case.execute(
            CastVoteRequest(
                design_id=str(design.id),
                reaction=Reaction.LIKE,
                principal=make_principal(),
            )
        )

        # Assert
        assert response.reaction == Reaction.LIKE
        assert response.score == 1
        assert response.delta == 1
        assert feed.latest is not None
        assert feed.latest.designs[0].score == 1
        assert feed.latest.top[0].id == design.id
        unit_of_work = await unit_env.get(UnitOfWork)
        assert unit_of_work.commits == 1

    @pytest.mark.asyncio
    async def test_repeat_reaction_retracts(self, unit_env):
        use_case = await unit_env.get(CastVoteUseCase)
        design_repo = await unit_env.get(DesignRepository)
        design = await design_repo.save(make_design())
        voter = make_principal()
        request = CastVoteRequest(
            design_id=str(design.id), reaction=Reaction.DISLIKE, principal=voter
        )

        await use_case.execute(request)
        response = await use_case.execute(request)

        assert response.reaction is None
        assert response.score == 0

    @pytest.mark.asyncio
    async def test_anonymous_vote_is_rejected(self, unit_env):
        use_case = await unit_env.get(CastVoteUseCase)
        design_repo = await unit_env.get(DesignRepository)
        design = await design_repo.save(make_design())

        with pytest.raises(UnauthenticatedError):
            await use_case.execute(
                CastVoteRequest(design_id=str(design.id), reaction=Reaction.LIKE)
            )

    @pytest.mark.asyncio
    async def test_missing_design_publishes_nothing(self, unit_env):
        use_case = await unit_env.get(CastVoteUseCase)
        feed = await unit_env.get(GalleryFeed)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CastVoteRequest(
                    design_id=str(uuid4()),
                    reaction=Reaction.LIKE,
                    principal=make_principal(),
                )
            )

        assert feed.latest is None


    @pytest.mark.asyncio
    async def test_commit_happens_before_publish(self, unit_env):
        feed = await unit_env.get(GalleryFeed)
        unit_of_work = RecordingUnitOfWork(feed)
        use_case = await _cast_vote_use_case(unit_env, unit_of_work)
        design_repo = await unit_env.get(DesignRepository)
        design = await design_repo.save(make_design())

        await use_case.execute(
            CastVoteRequest(
                design_id=str(design.id),
                reaction=Reaction.LIKE,
                principal=make_principal(),
            )
        )

        assert unit_of_work.latest_at_commit == [None]
        assert feed.latest.designs[0].score == 1

    @pytest.mark.asyncio
    async def test_failed_commit_publishes_nothing(self, unit_env):
        # Arrange
        feed = await unit_env.get(GalleryFeed)
        use_case = await _cast_vote_use_case(unit_env, FailingUnitOfWork())
        design_repo = await unit_env.get(DesignRepository)
        design = await design_repo.save(make_design())

        # Act
        with pytest.raises(StoreUnavailableError):
            await use_case.execute(
                CastVoteRequest(
                    design_id=str(design.id),
                    reaction=Reaction.LIKE,
                    principal=make_principal(),
                )
            )

        # Assert
        assert feed.latest is None

class TestRetractVoteUseCase:
    """Tests for RetractVoteUseCase."""

    @pytest.mark.asyncio
    async def test_retract_publishes_when_score_changes(self, unit_env):
        cast = await unit_env.get(CastVoteUseCase)
        retract = await unit_env.get(RetractVoteUseCase)
        design_repo = await unit_env.get(DesignRepository)
        feed = await unit_env.get(GalleryFeed)
        design = await design_repo.save(make_design())
        voter = make_principal()
        await cast.execute(
            CastVoteRequest(
                design_id=str(design.id), reaction=Reaction.LIKE, principal=voter
            )
        )
        version_before = feed.latest.version

        response = await retract.execute(
            RetractVoteRequest(design_id=str(design.id), principal=voter)
        )

        assert response.delta == -1
        assert response.score == 0
        assert feed.latest.version == version_before + 1

    @pytest.mark.asyncio
    async def test_retract_without_vote_publishes_nothing(self, unit_env):
        retract = await unit_env.get(RetractVoteUseCase)
        design_repo = await unit_env.get(DesignRepository)
        feed = await unit_env.get(GalleryFeed)
        design = await design_repo.save(make_design(score=0))

        response = await retract.execute(
            RetractVoteRequest(design_id=str(design.id), principal=make_principal())
        )

        assert response.delta == 0
        assert response.reaction is None
        assert feed.latest is None

    @pytest.mark.asyncio
    async def test_anonymous_retract_is_rejected(self, unit_env):
        retract = await unit_env.get(RetractVoteUseCase)

        with pytest.raises(UnauthenticatedError):
            await retract.execute(RetractVoteRequest(design_id=str(uuid4())))
