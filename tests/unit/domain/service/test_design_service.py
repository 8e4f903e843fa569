"""Unit tests for DesignService."""

from uuid import uuid4

import pytest

from gallery.domain.error import NotFoundError, ValidationError
from gallery.domain.repository import DesignRepository
from gallery.domain.service import DesignService
from gallery.domain.value import DesignId
from tests.conftest import make_design, make_principal
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestSubmitDesign:
    """Tests for submit_design."""

    @pytest.mark.asyncio
    async def test_submit_creates_design_with_zero_score(self, unit_env):
        """A new design should start at score 0 with the owner copied in."""
        # Arrange
        design_service = await unit_env.get(DesignService)
        design_repo = await unit_env.get(DesignRepository)
        owner = make_principal("Ada")

        # Act
        design = await design_service.submit_design(
            owner, "Helmet-1", "https://i.example.com/helmet.png"
        )

        # Assert
        assert design.score == 0
        assert design.owner_id == owner.id
        assert design.owner_display_name == "Ada"
        assert await design_repo.find_by_id(design.id) == design

    @pytest.mark.asyncio
    async def test_title_is_stripped(self, unit_env):
        design_service = await unit_env.get(DesignService)

        design = await design_service.submit_design(
            make_principal(), "  Helmet-2  ", "https://i.example.com/h.png"
        )

        assert design.title == "Helmet-2"

    @pytest.mark.asyncio
    async def test_blank_title_is_rejected(self, unit_env):
        """Whitespace-only titles should raise ValidationError."""
        design_service = await unit_env.get(DesignService)
        design_repo = await unit_env.get(DesignRepository)

        with pytest.raises(ValidationError):
            await design_service.submit_design(
                make_principal(), "   ", "https://i.example.com/h.png"
            )

        assert await design_repo.find_all() == []

    @pytest.mark.asyncio
    async def test_relative_image_url_is_rejected(self, unit_env):
        design_service = await unit_env.get(DesignService)

        with pytest.raises(ValidationError, match="image_url"):
            await design_service.submit_design(
                make_principal(), "Helmet", "/uploads/helmet.png"
            )


class TestQueries:
    """Tests for lookups and listing."""

    @pytest.mark.asyncio
    async def test_get_design_by_id_returns_none_when_missing(self, unit_env):
        design_service = await unit_env.get(DesignService)

        assert await design_service.get_design_by_id(DesignId(uuid4())) is None

    @pytest.mark.asyncio
    async def test_get_by_id_raises_when_missing(self, unit_env):
        design_service = await unit_env.get(DesignService)

        with pytest.raises(NotFoundError):
            await design_service.get_by_id(DesignId(uuid4()))

    @pytest.mark.asyncio
    async def test_list_designs_newest_first(self, unit_env, staggered_designs):
        """Listing should return designs by creation time, newest first."""
        design_service = await unit_env.get(DesignService)
        design_repo = await unit_env.get(DesignRepository)
        for design in staggered_designs:
            await design_repo.save(design)

        listed = await design_service.list_designs()

        assert [d.id for d in listed] == [d.id for d in reversed(staggered_designs)]


class TestAdjustScore:
    """Tests for adjust_score and set_score."""

    @pytest.mark.asyncio
    async def test_adjust_score_applies_signed_delta(self, unit_env):
        design_service = await unit_env.get(DesignService)
        design_repo = await unit_env.get(DesignRepository)
        design = await design_repo.save(make_design(score=3))

        assert await design_service.adjust_score(design.id, -2) == 1
        assert await design_service.adjust_score(design.id, -3) == -2

    @pytest.mark.asyncio
    async def test_adjust_score_on_missing_design_returns_none(self, unit_env):
        design_service = await unit_env.get(DesignService)

        assert await design_service.adjust_score(DesignId(uuid4()), 1) is None

    @pytest.mark.asyncio
    async def test_set_score_overwrites(self, unit_env):
        design_service = await unit_env.get(DesignService)
        design_repo = await unit_env.get(DesignRepository)
        design = await design_repo.save(make_design(score=9))

        assert await design_service.set_score(design.id, 4) == 4
        stored = await design_repo.find_by_id(design.id)
        assert stored is not None and stored.score == 4
