from __future__ import annotations

import math
from typing import List, Mapping, Tuple


def rank_scores(
    scores: Mapping[str, int], *, descending: bool = False
) -> List[Tuple[str, int, int]]:
    """Return ``(player_id, position, score)`` using standard competition ranking.

    Equal scores share a position; the next distinct score takes
    ``1 + number of strictly better entries``. Ties keep the input order.
    """

    ordered = sorted(
        scores.items(), key=lambda item: -item[1] if descending else item[1]
    )
    ranked: List[Tuple[str, int, int]] = []
    position = 1
    for index, (player_id, score) in enumerate(ordered):
        if index > 0 and score != ordered[index - 1][1]:
            position = index + 1
        ranked.append((player_id, position, score))
    return ranked


def round_half_up(value: float, digits: int = 1) -> float:
    """Round to ``digits`` decimals with halves going up, not to even."""

    scale = 10**digits
    return math.floor(value * scale + 0.5) / scale


__all__ = ["rank_scores", "round_half_up"]
