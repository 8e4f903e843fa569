"""Unit tests for the design query use cases."""

from uuid import uuid4

import pytest

from gallery.application.usecase.design import (
    GetDesignRequest,
    GetDesignUseCase,
    GetTopDesignsRequest,
    GetTopDesignsUseCase,
    ListDesignsRequest,
    ListDesignsUseCase,
)
from gallery.domain.error import NotFoundError
from gallery.domain.repository import DesignRepository
from gallery.domain.service import VoteService
from gallery.domain.value import Reaction, UserId
from tests.conftest import make_design
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestListDesignsUseCase:
    """Tests for ListDesignsUseCase."""

    @pytest.mark.asyncio
    async def test_lists_newest_first_with_top(self, unit_env, staggered_designs):
        # Arrange
        use_case = await unit_env.get(ListDesignsUseCase)
        design_repo = await unit_env.get(DesignRepository)
        vote_service = await unit_env.get(VoteService)
        for design in staggered_designs:
            await design_repo.save(design)
        await vote_service.cast_or_toggle_vote(
            UserId(str(uuid4())), staggered_designs[2].id, Reaction.LIKE
        )

        # Act
        response = await use_case.execute(ListDesignsRequest())

        # Assert
        assert response.total == 5
        assert [d.design_id for d in response.designs] == [
            str(d.id) for d in reversed(staggered_designs)
        ]
        # Default leaderboard is three: the liked design, then oldest ties
        assert [d.design_id for d in response.top] == [
            str(staggered_designs[2].id),
            str(staggered_designs[0].id),
            str(staggered_designs[1].id),
        ]

    @pytest.mark.asyncio
    async def test_includes_callers_reactions(self, unit_env):
        use_case = await unit_env.get(ListDesignsUseCase)
        design_repo = await unit_env.get(DesignRepository)
        vote_service = await unit_env.get(VoteService)
        liked = await design_repo.save(make_design("Liked"))
        other = await design_repo.save(make_design("Other"))
        user_id = UserId(str(uuid4()))
        await vote_service.cast_or_toggle_vote(user_id, liked.id, Reaction.LIKE)

        mine = await use_case.execute(ListDesignsRequest(user_id=str(user_id)))
        anonymous = await use_case.execute(ListDesignsRequest())

        reactions = {d.design_id: d.my_reaction for d in mine.designs}
        assert reactions == {str(liked.id): Reaction.LIKE, str(other.id): None}
        assert all(d.my_reaction is None for d in anonymous.designs)

    @pytest.mark.asyncio
    async def test_empty_gallery(self, unit_env):
        use_case = await unit_env.get(ListDesignsUseCase)

        response = await use_case.execute(ListDesignsRequest(user_id=str(uuid4())))

        assert response.designs == []
        assert response.top == []
        assert response.total == 0


class TestGetDesignUseCase:
    """Tests for GetDesignUseCase."""

    @pytest.mark.asyncio
    async def test_returns_design_with_reaction(self, unit_env):
        use_case = await unit_env.get(GetDesignUseCase)
        design_repo = await unit_env.get(DesignRepository)
        vote_service = await unit_env.get(VoteService)
        design = await design_repo.save(make_design())
        user_id = UserId(str(uuid4()))
        await vote_service.cast_or_toggle_vote(user_id, design.id, Reaction.DISLIKE)

        item = await use_case.execute(
            GetDesignRequest(design_id=str(design.id), user_id=str(user_id))
        )

        assert item.score == -1
        assert item.my_reaction == Reaction.DISLIKE

    @pytest.mark.asyncio
    async def test_missing_design_raises_not_found(self, unit_env):
        use_case = await unit_env.get(GetDesignUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetDesignRequest(design_id=str(uuid4())))


class TestGetTopDesignsUseCase:
    """Tests for GetTopDesignsUseCase."""

    @pytest.mark.asyncio
    async def test_defaults_to_configured_size(self, unit_env):
        use_case = await unit_env.get(GetTopDesignsUseCase)
        design_repo = await unit_env.get(DesignRepository)
        for score in (1, 2, 3, 4):
            await design_repo.save(make_design(score=score))

        response = await use_case.execute(GetTopDesignsRequest())

        assert response.n == 3
        assert [d.score for d in response.designs] == [4, 3, 2]

    @pytest.mark.asyncio
    async def test_explicit_n(self, unit_env):
        use_case = await unit_env.get(GetTopDesignsUseCase)
        design_repo = await unit_env.get(DesignRepository)
        for score in (1, 2, 3):
            await design_repo.save(make_design(score=score))

        top_one = await use_case.execute(GetTopDesignsRequest(n=1))
        top_none = await use_case.execute(GetTopDesignsRequest(n=0))

        assert [d.score for d in top_one.designs] == [3]
        assert top_none.designs == []
