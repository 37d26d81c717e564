"""Handicap stroke ("pops") allocation."""

from __future__ import annotations

from typing import Dict, Mapping, Optional, Sequence

from golfwager.games.schemas import CoreRoundData, Course, HoleDetail

STROKES_PER_CYCLE = 18


def allocate_pops(handicap: float, course: Course) -> Dict[int, int]:
    """Return handicap strokes received on each hole of ``course``.

    Every hole gets ``handicap // 18`` strokes, and holes whose stroke index
    is within ``handicap % 18`` get one more, hardest holes first.
    """

    strokes = max(0, int(handicap))
    base, extra = divmod(strokes, STROKES_PER_CYCLE)
    return {
        hole: base + (1 if course.stroke_index(hole) <= extra else 0)
        for hole in course.hole_numbers()
    }


def pops_for_players(
    handicaps: Mapping[str, float], course: Course
) -> Dict[str, Dict[int, int]]:
    return {
        player_id: allocate_pops(handicap, course)
        for player_id, handicap in handicaps.items()
    }


def build_round_data(
    scores: Mapping[str, Sequence[int]],
    handicaps: Optional[Mapping[str, float]] = None,
    course: Optional[Course] = None,
    hole_details: Optional[Mapping[str, Mapping[int, HoleDetail]]] = None,
) -> CoreRoundData:
    """Build a round snapshot from per-player score lists (index 0 is hole 1).

    Zero entries are treated as unplayed and left out of ``strokes``.
    """

    resolved_course = course or Course()
    handicaps = handicaps or {}
    strokes: Dict[str, Dict[int, int]] = {}
    for player_id, player_scores in scores.items():
        strokes[player_id] = {
            index + 1: score for index, score in enumerate(player_scores) if score
        }

    pops = pops_for_players(
        {player_id: handicaps.get(player_id, 0) for player_id in scores},
        resolved_course,
    )
    details = {
        player_id: dict(player_details)
        for player_id, player_details in (hole_details or {}).items()
    }
    return CoreRoundData(
        players=list(scores),
        strokes=strokes,
        pops=pops,
        course=resolved_course,
        hole_details=details,
    )


__all__ = ["allocate_pops", "build_round_data", "pops_for_players"]
