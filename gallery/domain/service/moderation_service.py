"""Moderation domain service."""

from datetime import datetime

import logfire

from gallery.config import ModerationSettings
from gallery.domain.error import (
    BusinessRuleViolationError,
    ForbiddenError,
    NotFoundError,
)
from gallery.domain.model.design import Design
from gallery.domain.model.trash import TrashedDesign
from gallery.domain.repository import DesignRepository, TrashRepository, VoteRepository
from gallery.domain.value import DesignId, Principal

from .base import Service


class ModerationService(Service):
    """Domain service for administrator actions.

    Deleted designs are moved to the trash together with their votes so
    they can be restored unchanged. Erasing a trash entry is permanent.
    """

    def __init__(
        self,
        design_repository: DesignRepository,
        vote_repository: VoteRepository,
        trash_repository: TrashRepository,
        moderation_settings: ModerationSettings,
    ) -> None:
        """Initialize moderation service.

        Args:
            design_repository: Design repository
            vote_repository: Vote repository
            trash_repository: Trash repository
            moderation_settings: Administrator allow-list
        """
        self.design_repository = design_repository
        self.vote_repository = vote_repository
        self.trash_repository = trash_repository
        self.moderation_settings = moderation_settings

    def is_admin(self, principal: Principal | None) -> bool:
        """Check the principal against the administrator allow-list.

        Matches the user ID or the email exactly.
        """
        if principal is None:
            return False
        admins = set(self.moderation_settings.admins)
        if str(principal.id) in admins:
            return True
        return principal.email is not None and principal.email in admins

    def require_admin(self, principal: Principal, action: str) -> None:
        """Raise ForbiddenError unless the principal is an administrator."""
        if not self.is_admin(principal):
            logfire.warn(
                "Non-admin attempted admin action",
                user_id=str(principal.id),
                action=action,
            )
            raise ForbiddenError(action, str(principal.id))

    async def delete_design(
        self, design_id: DesignId, actor: Principal
    ) -> TrashedDesign:
        """Move a design and its votes to the trash.

        Args:
            design_id: Design to delete
            actor: Acting administrator

        Returns:
            The trash entry

        Raises:
            ForbiddenError: If actor is not an administrator
            NotFoundError: If the design does not exist
        """
        with logfire.span(
            "moderation_service.delete_design",
            design_id=str(design_id),
            actor_id=str(actor.id),
        ):
            self.require_admin(actor, "delete designs")

            design = await self.design_repository.find_by_id(design_id)
            if design is None:
                raise NotFoundError("Design", str(design_id))

            votes = await self.vote_repository.find_by_design(design_id)
            entry = TrashedDesign(
                design=design,
                votes=votes,
                deleted_at=datetime.now(),
                deleted_by=actor.id,
            )

            # Trash entry first so a failure never loses the design
            saved = await self.trash_repository.save(entry)
            await self.vote_repository.delete_by_design(design_id)
            await self.design_repository.delete(design_id)

            logfire.info(
                "Design moved to trash",
                design_id=str(design_id),
                votes=len(votes),
                actor_id=str(actor.id),
            )
            return saved

    async def restore_design(self, design_id: DesignId, actor: Principal) -> Design:
        """Reinstate a trashed design and its votes unchanged.

        Args:
            design_id: Design to restore
            actor: Acting administrator

        Returns:
            The restored design

        Raises:
            ForbiddenError: If actor is not an administrator
            NotFoundError: If the design is not in the trash
            BusinessRuleViolationError: If a live design with this ID exists
        """
        with logfire.span(
            "moderation_service.restore_design",
            design_id=str(design_id),
            actor_id=str(actor.id),
        ):
            self.require_admin(actor, "restore designs")

            entry = await self.trash_repository.find_by_id(design_id)
            if entry is None:
                raise NotFoundError("Trashed design", str(design_id))

            if await self.design_repository.find_by_id(design_id) is not None:
                raise BusinessRuleViolationError(
                    f"Design {design_id} already exists in the gallery"
                )

            restored = await self.design_repository.save(entry.design)
            for vote in entry.votes:
                await self.vote_repository.save(vote)
            await self.trash_repository.delete(design_id)

            logfire.info(
                "Design restored",
                design_id=str(design_id),
                votes=len(entry.votes),
                actor_id=str(actor.id),
            )
            return restored

    async def purge_design(
        self, design_id: DesignId, actor: Principal, confirm: bool = False
    ) -> None:
        """Permanently erase a trashed design.

        Args:
            design_id: Design to erase
            actor: Acting administrator
            confirm: Must be True; erasure cannot be undone

        Raises:
            ForbiddenError: If actor is not an administrator
            BusinessRuleViolationError: If not confirmed
            NotFoundError: If the design is not in the trash
        """
        with logfire.span(
            "moderation_service.purge_design",
            design_id=str(design_id),
            actor_id=str(actor.id),
        ):
            self.require_admin(actor, "erase designs")

            if not confirm:
                raise BusinessRuleViolationError(
                    "Permanent erasure must be explicitly confirmed"
                )

            deleted = await self.trash_repository.delete(design_id)
            if not deleted:
                raise NotFoundError("Trashed design", str(design_id))

            logfire.info(
                "Design permanently erased",
                design_id=str(design_id),
                actor_id=str(actor.id),
            )

    async def list_trash(self, actor: Principal) -> list[TrashedDesign]:
        """List trashed designs, most recently deleted first.

        Raises:
            ForbiddenError: If actor is not an administrator
        """
        self.require_admin(actor, "view the trash")
        return await self.trash_repository.find_all()
