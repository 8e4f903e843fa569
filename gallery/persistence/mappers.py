"""Mappers for converting between database rows and domain models.

Rows are validated into strict domain models here. Rows that do not fit
the model are skipped with a warning rather than handed to the domain.
"""

from typing import Any, Callable, Dict, Iterable, List, TypeVar
from uuid import UUID

import logfire
from pydantic import ValidationError

from gallery.domain.model import Design, TrashedDesign, Vote
from gallery.domain.value import DesignId, Reaction, UserId, VoteId

T = TypeVar("T")


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_design(row: Dict[str, Any]) -> Design:
    """Convert database row to Design domain model.

    Raises:
        ValidationError: If the row does not describe a valid design
    """
    return Design(
        id=DesignId(_uuid(row["id"])),
        title=row["title"],
        image_url=row["image_url"],
        score=row["score"],
        owner_id=UserId(row["owner_id"]),
        owner_display_name=row["owner_display_name"],
        owner_avatar_url=row.get("owner_avatar_url"),
        created_at=row["created_at"],
    )


def design_to_dict(design: Design) -> Dict[str, Any]:
    """Convert Design domain model to database dict."""
    return design.model_dump()


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Raises:
        ValidationError: If the row does not describe a valid vote
    """
    return Vote(
        id=VoteId(_uuid(row["id"])),
        user_id=UserId(row["user_id"]),
        design_id=DesignId(_uuid(row["design_id"])),
        reaction=Reaction(row["reaction"]),
        voted_at=row["voted_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    data = vote.model_dump()
    data["reaction"] = vote.reaction.value
    return data


def row_to_trashed_design(row: Dict[str, Any]) -> TrashedDesign:
    """Convert database row (JSONB payloads) to TrashedDesign."""
    return TrashedDesign(
        design=Design.model_validate(row["design"]),
        votes=[Vote.model_validate(v) for v in row["votes"] or []],
        deleted_at=row["deleted_at"],
        deleted_by=UserId(row["deleted_by"]),
    )


def trashed_design_to_dict(entry: TrashedDesign) -> Dict[str, Any]:
    """Convert TrashedDesign to database dict with JSON payloads."""
    return {
        "design_id": entry.design.id,
        "design": entry.design.model_dump(mode="json"),
        "votes": [v.model_dump(mode="json") for v in entry.votes],
        "deleted_at": entry.deleted_at,
        "deleted_by": entry.deleted_by,
    }


def map_valid_rows(
    rows: Iterable[Dict[str, Any]], mapper: Callable[[Dict[str, Any]], T]
) -> List[T]:
    """Map rows, skipping any that fail validation."""
    result: List[T] = []
    for row in rows:
        try:
            result.append(mapper(row))
        except (ValidationError, KeyError, ValueError) as e:
            logfire.warn(
                "Skipping malformed row",
                mapper=mapper.__name__,
                row_id=str(row.get("id") or row.get("design_id")),
                error=str(e),
            )
    return result
