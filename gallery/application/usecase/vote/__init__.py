"""Vote use cases."""

from .cast_vote import CastVoteRequest, CastVoteUseCase, VoteResponse
from .retract_vote import RetractVoteRequest, RetractVoteUseCase

__all__ = [
    "CastVoteRequest",
    "CastVoteUseCase",
    "RetractVoteRequest",
    "RetractVoteUseCase",
    "VoteResponse",
]
