"""Vote domain service."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Sequence
from uuid import uuid4

import logfire

from gallery.config import VotingSettings
from gallery.domain.error import (
    BusinessRuleViolationError,
    NotFoundError,
    StoreUnavailableError,
    ValidationError,
)
from gallery.domain.model.vote import Vote
from gallery.domain.repository import VoteRepository
from gallery.domain.value import DesignId, Reaction, UserId, VoteId, reaction_weight

from .base import Service
from .design_service import DesignService


@dataclass(frozen=True)
class VoteOutcome:
    """Result of a vote operation.

    Attributes:
        design_id: Design voted on
        reaction: The user's reaction after the operation (None if retracted)
        score: Design score after the delta was applied
        delta: Signed change applied to the score
    """

    design_id: DesignId
    reaction: Optional[Reaction]
    score: int
    delta: int


class VoteService(Service):
    """Domain service for vote operations.

    Keeps each design's score equal to the signed sum of its votes. The
    vote record and the score are written separately; the score is changed
    with a store-side increment so concurrent voters do not overwrite each
    other.
    """

    def __init__(
        self,
        vote_repository: VoteRepository,
        design_service: DesignService,
        voting_settings: VotingSettings,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            design_service: Design domain service
            voting_settings: Reaction mode and flip policy
        """
        self.vote_repository = vote_repository
        self.design_service = design_service
        self.voting_settings = voting_settings

    async def cast_or_toggle_vote(
        self, user_id: UserId, design_id: DesignId, reaction: Reaction
    ) -> VoteOutcome:
        """Cast, change or retract a vote.

        Repeating the user's current reaction retracts it. Any other
        reaction replaces the current one and moves the score by the
        difference of the two weights (LIKE -> DISLIKE moves it by -2).

        Args:
            user_id: Voting user
            design_id: Design to vote on
            reaction: Requested reaction

        Returns:
            Vote outcome with the new score

        Raises:
            NotFoundError: If the design does not exist
            ValidationError: If dislikes are disabled
            BusinessRuleViolationError: If direct flips are disabled
            StoreUnavailableError: If the store fails
        """
        with logfire.span(
            "vote_service.cast_or_toggle_vote",
            design_id=str(design_id),
            user_id=str(user_id),
            reaction=reaction.value,
        ):
            if reaction is Reaction.DISLIKE and not self.voting_settings.allow_dislike:
                raise ValidationError("Dislikes are disabled")

            design = await self.design_service.get_design_by_id(design_id)
            if not design:
                logfire.warn("Vote on non-existent design", design_id=str(design_id))
                raise NotFoundError("Design", str(design_id))

            existing = await self.vote_repository.find_by_user_and_design(
                user_id, design_id
            )
            old_reaction = existing.reaction if existing else None

            if old_reaction is reaction:
                # Same reaction again: retraction
                await self.vote_repository.delete_by_user_and_design(
                    user_id, design_id
                )
                new_reaction = None
            else:
                if (
                    old_reaction is not None
                    and not self.voting_settings.allow_direct_flip
                ):
                    raise BusinessRuleViolationError(
                        "Retract your current vote before switching reaction"
                    )

                vote = Vote(
                    id=existing.id if existing else VoteId(uuid4()),
                    user_id=user_id,
                    design_id=design_id,
                    reaction=reaction,
                    voted_at=datetime.now(),
                )
                await self.vote_repository.save(vote)
                new_reaction = reaction

            delta = reaction_weight(new_reaction) - reaction_weight(old_reaction)
            score = await self._apply_delta(user_id, design_id, delta, new_reaction)

            logfire.info(
                "Vote applied",
                design_id=str(design_id),
                user_id=str(user_id),
                old_reaction=old_reaction.value if old_reaction else None,
                new_reaction=new_reaction.value if new_reaction else None,
                delta=delta,
                score=score,
            )

            return VoteOutcome(
                design_id=design_id, reaction=new_reaction, score=score, delta=delta
            )

    async def retract_vote(self, user_id: UserId, design_id: DesignId) -> VoteOutcome:
        """Retract the user's vote on a design.

        Retracting a vote that does not exist is a no-op.

        Args:
            user_id: Voting user
            design_id: Design ID

        Returns:
            Vote outcome (delta 0 if there was nothing to retract)

        Raises:
            NotFoundError: If the design does not exist
        """
        with logfire.span(
            "vote_service.retract_vote", design_id=str(design_id), user_id=str(user_id)
        ):
            design = await self.design_service.get_design_by_id(design_id)
            if not design:
                logfire.warn(
                    "Vote retraction on non-existent design", design_id=str(design_id)
                )
                raise NotFoundError("Design", str(design_id))

            existing = await self.vote_repository.find_by_user_and_design(
                user_id, design_id
            )
            if existing is None:
                logfire.info(
                    "No vote to retract",
                    design_id=str(design_id),
                    user_id=str(user_id),
                )
                return VoteOutcome(
                    design_id=design_id, reaction=None, score=design.score, delta=0
                )

            await self.vote_repository.delete_by_user_and_design(user_id, design_id)
            delta = -existing.reaction.weight
            score = await self._apply_delta(user_id, design_id, delta, None)

            logfire.info(
                "Vote retracted",
                design_id=str(design_id),
                user_id=str(user_id),
                delta=delta,
                score=score,
            )
            return VoteOutcome(
                design_id=design_id, reaction=None, score=score, delta=delta
            )

    async def get_user_votes(
        self, user_id: UserId, design_ids: Sequence[DesignId]
    ) -> dict[DesignId, Reaction]:
        """Map each design the user reacted to onto their reaction.

        Args:
            user_id: User ID
            design_ids: Designs to check

        Returns:
            Dictionary of design ID to reaction (designs without a vote are absent)
        """
        if not design_ids:
            return {}

        # Batch query to fetch all votes at once (avoid N+1)
        votes = await self.vote_repository.find_by_user_and_designs(
            user_id=user_id, design_ids=design_ids
        )
        return {vote.design_id: vote.reaction for vote in votes}

    async def reconcile_score(self, design_id: DesignId) -> int:
        """Recompute a design's score from its votes and store it.

        Repairs drift left by a failed score write.

        Args:
            design_id: Design ID

        Returns:
            The recomputed score

        Raises:
            NotFoundError: If the design does not exist
        """
        with logfire.span("vote_service.reconcile_score", design_id=str(design_id)):
            design = await self.design_service.get_by_id(design_id)
            expected = await self.vote_repository.sum_weights_by_design(design_id)

            if design.score != expected:
                logfire.warn(
                    "Design score drifted from votes",
                    design_id=str(design_id),
                    stored=design.score,
                    expected=expected,
                )
                stored = await self.design_service.set_score(design_id, expected)
                if stored is None:
                    raise NotFoundError("Design", str(design_id))

            return expected

    async def _apply_delta(
        self,
        user_id: UserId,
        design_id: DesignId,
        delta: int,
        new_reaction: Optional[Reaction],
    ) -> int:
        """Apply the score delta after the vote record was written.

        Raises:
            NotFoundError: If the design was deleted after the vote write
            StoreUnavailableError: If the score write failed
        """
        try:
            score = await self.design_service.adjust_score(design_id, delta)
        except StoreUnavailableError as e:
            # Vote record already written; score stays stale until reconciled
            logfire.error(
                "Vote recorded but score update failed",
                design_id=str(design_id),
                user_id=str(user_id),
                delta=delta,
                reaction=new_reaction.value if new_reaction else None,
                error=str(e),
            )
            raise

        if score is None:
            logfire.warn(
                "Design deleted during vote, skipping score update",
                design_id=str(design_id),
                user_id=str(user_id),
                delta=delta,
            )
            if new_reaction is not None:
                await self.vote_repository.delete_by_user_and_design(
                    user_id, design_id
                )
            raise NotFoundError("Design", str(design_id))

        return score
