from __future__ import annotations

from typing import Dict, List

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field

from golfwager.games.schemas import Course
from golfwager.handicap import (
    HandicapResult,
    allocate_pops,
    course_handicap,
    handicap_index,
    make_differential,
)
from golfwager.security import require_api_key

router = APIRouter(
    prefix="/api/handicap", tags=["handicap"], dependencies=[Depends(require_api_key)]
)


class PopsRequest(BaseModel):
    handicap: float = Field(ge=0)
    course: Course = Field(default_factory=Course)


class RoundEntry(BaseModel):
    round_id: str = Field(alias="roundId")
    gross: int
    course_rating: float = Field(default=72.0, alias="courseRating")
    slope: int = 113

    model_config = ConfigDict(populate_by_name=True)


class IndexRequest(BaseModel):
    rounds: List[RoundEntry]
    slope: int | None = None


class IndexResponse(HandicapResult):
    course_handicap: int | None = Field(
        default=None, serialization_alias="courseHandicap"
    )


@router.post("/pops")
def handicap_pops(payload: PopsRequest) -> Dict[int, int]:
    return allocate_pops(payload.handicap, payload.course)


@router.post("/index", response_model=IndexResponse)
def compute_index(payload: IndexRequest) -> IndexResponse:
    result = handicap_index(
        [
            make_differential(entry.round_id, entry.gross, entry.course_rating, entry.slope)
            for entry in payload.rounds
        ]
    )
    playing = None
    if result.index is not None and payload.slope:
        playing = course_handicap(result.index, payload.slope)
    return IndexResponse(**result.model_dump(), course_handicap=playing)
