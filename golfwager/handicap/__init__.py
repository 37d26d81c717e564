"""Handicap allocation and index helpers."""

from .index import (  # noqa: F401
    HandicapResult,
    RoundDifferential,
    calculate_differential,
    calculation_method,
    course_handicap,
    handicap_index,
    make_differential,
)
from .pops import allocate_pops, build_round_data, pops_for_players  # noqa: F401
