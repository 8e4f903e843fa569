"""Vote routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request
from pydantic import BaseModel

from gallery.application.usecase.vote import (
    CastVoteRequest,
    CastVoteUseCase,
    RetractVoteRequest,
    RetractVoteUseCase,
    VoteResponse,
)
from gallery.config import AuthSettings
from gallery.domain.service import JWTService
from gallery.domain.value import Reaction
from gallery.interface.api.session import current_principal

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


class VoteAPIRequest(BaseModel):
    """API request for voting on a design."""

    reaction: Reaction = Reaction.LIKE


@router.post("/designs/{design_id}/vote", response_model=VoteResponse)
async def cast_vote(
    design_id: UUID,
    body: VoteAPIRequest,
    request: Request,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
) -> VoteResponse:
    """Like or dislike a design.

    Requires authentication. Sending the reaction you already have removes
    it; sending the other reaction switches to it.

    Args:
        design_id: Design UUID
        body: Requested reaction

    Returns:
        Your reaction after the call and the design's new score
    """
    principal = current_principal(request, jwt_service, auth_settings)
    return await cast_vote_use_case.execute(
        CastVoteRequest(
            design_id=str(design_id), reaction=body.reaction, principal=principal
        )
    )


@router.delete("/designs/{design_id}/vote", response_model=VoteResponse)
async def retract_vote(
    design_id: UUID,
    request: Request,
    retract_vote_use_case: FromDishka[RetractVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
) -> VoteResponse:
    """Remove your vote from a design.

    Requires authentication. Removing a vote you do not have is a no-op.
    """
    principal = current_principal(request, jwt_service, auth_settings)
    return await retract_vote_use_case.execute(
        RetractVoteRequest(design_id=str(design_id), principal=principal)
    )
