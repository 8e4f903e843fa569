"""Ranking of designs by score."""

from typing import Iterable

from gallery.domain.model.design import Design


def ranking_key(design: Design) -> tuple:
    """Sort key: higher score first, then older design, then ID."""
    return (-design.score, design.created_at, str(design.id))


def top_n(designs: Iterable[Design], n: int) -> list[Design]:
    """Return the n highest-scoring designs.

    Ties on score go to the design submitted first, then to the smaller
    ID, so the order never depends on input order. The input is not
    modified.

    Args:
        designs: Designs to rank
        n: Maximum number of designs to return

    Returns:
        At most n designs ordered by score, highest first
    """
    if n <= 0:
        return []
    return sorted(designs, key=ranking_key)[:n]
