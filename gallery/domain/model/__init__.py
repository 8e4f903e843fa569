"""Domain model entities for the gallery."""

from gallery.domain.model.design import Design
from gallery.domain.model.trash import TrashedDesign
from gallery.domain.model.vote import Vote

__all__ = [
    "Design",
    "TrashedDesign",
    "Vote",
]
