"""
Ranking helpers for participant lists.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from shared.types import Participant


@dataclass(frozen=True)
class BoardSummary:
    """Totals shown under the board."""

    participant_count: int
    total_points: int
    leader: Optional[Participant] = None


def rank(participants: Iterable[Participant]) -> list[Participant]:
    """
    Returns participants ordered by score, highest first.

    The sort is stable, so equal scores keep their previous relative order.
    """
    return sorted(participants, key=lambda p: p.score, reverse=True)


def find_by_id(participants: Iterable[Participant], participant_id: str) -> Participant | None:
    for participant in participants:
        if participant.id == participant_id:
            return participant
    return None


def name_taken(participants: Iterable[Participant], name: str) -> bool:
    """Case-insensitive name lookup."""
    wanted = name.strip().casefold()
    return any(p.name.strip().casefold() == wanted for p in participants)


def summarize(participants: Iterable[Participant]) -> BoardSummary:
    """
    Count, total score and current leader of a board.

    The leader is the first entry of the ranked order, or None for an empty
    board.
    """
    ranked = rank(participants)
    return BoardSummary(
        participant_count=len(ranked),
        total_points=sum(p.score for p in ranked),
        leader=ranked[0] if ranked else None,
    )
