"""Strongly typed identifiers for gallery domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.

UserId is whatever opaque string the identity provider issues; it is never
parsed.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", str)
DesignId = NewType("DesignId", UUID)
VoteId = NewType("VoteId", UUID)
