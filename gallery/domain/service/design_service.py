"""Design domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from gallery.domain.error import NotFoundError, ValidationError
from gallery.domain.model.design import Design
from gallery.domain.repository import DesignRepository
from gallery.domain.value import DesignId, Principal

from .base import Service


class DesignService(Service):
    """Domain service for design operations."""

    def __init__(self, design_repository: DesignRepository) -> None:
        """Initialize design service.

        Args:
            design_repository: Design repository
        """
        self.design_repository = design_repository

    async def submit_design(
        self, principal: Principal, title: str, image_url: str
    ) -> Design:
        """Create a new design owned by the principal.

        The design starts with a score of 0. No vote is cast on behalf of
        the submitter.

        Args:
            principal: Authenticated submitter
            title: Design title (non-blank)
            image_url: URL returned by the image host

        Returns:
            The saved design

        Raises:
            ValidationError: If title or image URL is invalid
        """
        with logfire.span(
            "design_service.submit_design", owner_id=str(principal.id), title=title
        ):
            try:
                design = Design(
                    id=DesignId(uuid4()),
                    title=title,
                    image_url=image_url,
                    score=0,
                    owner_id=principal.id,
                    owner_display_name=principal.display_name,
                    owner_avatar_url=principal.avatar_url,
                    created_at=datetime.now(),
                )
            except PydanticValidationError as e:
                logfire.warn("Invalid design submission", error=str(e))
                raise ValidationError(_first_error_message(e))

            saved = await self.design_repository.save(design)
            logfire.info("Design submitted", design_id=str(saved.id))
            return saved

    async def get_design_by_id(self, design_id: DesignId) -> Optional[Design]:
        """Get a design by ID.

        Args:
            design_id: Design ID

        Returns:
            Design if found, None otherwise
        """
        with logfire.span("design_service.get_design_by_id", design_id=str(design_id)):
            design = await self.design_repository.find_by_id(design_id)

            if not design:
                logfire.warn("Design not found", design_id=str(design_id))

            return design

    async def get_by_id(self, design_id: DesignId) -> Design:
        """Get a design by ID.

        Raises:
            NotFoundError: If the design does not exist
        """
        design = await self.get_design_by_id(design_id)
        if design is None:
            raise NotFoundError("Design", str(design_id))
        return design

    async def list_designs(self) -> list[Design]:
        """List all live designs, newest first."""
        return await self.design_repository.find_all()

    async def adjust_score(self, design_id: DesignId, delta: int) -> Optional[int]:
        """Atomically apply a signed delta to a design's score.

        Args:
            design_id: Design ID
            delta: Signed amount to add

        Returns:
            New score, or None if the design no longer exists
        """
        with logfire.span(
            "design_service.adjust_score", design_id=str(design_id), delta=delta
        ):
            new_score = await self.design_repository.adjust_score(design_id, delta)
            if new_score is not None:
                logfire.info(
                    "Design score adjusted",
                    design_id=str(design_id),
                    delta=delta,
                    score=new_score,
                )
            return new_score

    async def set_score(self, design_id: DesignId, score: int) -> Optional[int]:
        """Overwrite a design's score."""
        return await self.design_repository.set_score(design_id, score)


def _first_error_message(error: PydanticValidationError) -> str:
    """Human-readable message for the first pydantic error."""
    first = error.errors()[0]
    field = ".".join(str(part) for part in first.get("loc", ()))
    message = first.get("msg", "Invalid value")
    return f"{field}: {message}" if field else message
