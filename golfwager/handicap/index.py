"""World Handicap System style index calculation from round differentials."""

from __future__ import annotations

from typing import List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from golfwager.games.ranking import round_half_up

DEFAULT_COURSE_RATING = 72.0
DEFAULT_SLOPE = 113
SOFT_CAP = 0.96

Method = Literal["best-2-of-5", "best-3-of-10", "best-8-of-20", "insufficient"]

METHOD_DESCRIPTIONS = {
    "best-2-of-5": "Best 2 of your last 5 rounds",
    "best-3-of-10": "Best 3 of your last 10 rounds",
    "best-8-of-20": "Best 8 of your last 20 rounds (USGA/WHS standard)",
    "insufficient": "Not enough rounds to calculate",
}


class RoundDifferential(BaseModel):
    round_id: str = Field(serialization_alias="roundId")
    gross: int
    course_rating: float = Field(
        default=DEFAULT_COURSE_RATING, serialization_alias="courseRating"
    )
    slope: int = DEFAULT_SLOPE
    differential: float

    model_config = ConfigDict(populate_by_name=True)


class HandicapResult(BaseModel):
    index: Optional[float]
    rounds_used: int = Field(serialization_alias="roundsUsed")
    rounds_available: int = Field(serialization_alias="roundsAvailable")
    best_differentials: List[RoundDifferential] = Field(
        default_factory=list, serialization_alias="bestDifferentials"
    )
    method: Method
    description: str = ""
    minimum_rounds_needed: int = Field(serialization_alias="minimumRoundsNeeded")

    model_config = ConfigDict(populate_by_name=True)


def calculate_differential(gross: float, course_rating: float, slope: float) -> float:
    if slope <= 0 or course_rating <= 0:
        return 0.0
    return (gross - course_rating) * 113 / slope


def make_differential(
    round_id: str,
    gross: int,
    course_rating: float = DEFAULT_COURSE_RATING,
    slope: int = DEFAULT_SLOPE,
) -> RoundDifferential:
    return RoundDifferential(
        round_id=round_id,
        gross=gross,
        course_rating=course_rating,
        slope=slope,
        differential=calculate_differential(gross, course_rating, slope),
    )


def calculation_method(round_count: int) -> Tuple[Method, int, int]:
    """Return ``(method, best_count, rounds_needed_for_next_tier)``."""

    if round_count >= 20:
        return "best-8-of-20", 8, 0
    if round_count >= 10:
        return "best-3-of-10", 3, 20 - round_count
    if round_count >= 5:
        return "best-2-of-5", 2, 10 - round_count
    return "insufficient", 0, 5 - round_count


def handicap_index(differentials: List[RoundDifferential]) -> HandicapResult:
    round_count = len(differentials)
    method, best_count, needed = calculation_method(round_count)
    if best_count == 0:
        return HandicapResult(
            index=None,
            rounds_used=0,
            rounds_available=round_count,
            method=method,
            description=METHOD_DESCRIPTIONS[method],
            minimum_rounds_needed=needed,
        )

    best = sorted(differentials, key=lambda d: d.differential)[:best_count]
    average = sum(d.differential for d in best) / best_count
    return HandicapResult(
        index=round_half_up(average * SOFT_CAP, 1),
        rounds_used=best_count,
        rounds_available=round_count,
        best_differentials=best,
        method=method,
        description=METHOD_DESCRIPTIONS[method],
        minimum_rounds_needed=needed,
    )


def course_handicap(index: float, slope: int = DEFAULT_SLOPE) -> int:
    """Playing strokes for a course of the given slope."""

    return max(0, int(round(index * (slope / 113.0))))


__all__ = [
    "HandicapResult",
    "METHOD_DESCRIPTIONS",
    "RoundDifferential",
    "calculate_differential",
    "calculation_method",
    "course_handicap",
    "handicap_index",
    "make_differential",
]
