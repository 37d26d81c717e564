"""Integer pot splitting with an explicit remainder policy."""

from __future__ import annotations

from typing import List, Sequence, Tuple

from .schemas import SplitPolicy


def split_amount(
    total: int, recipients: Sequence[str], policy: SplitPolicy
) -> Tuple[List[Tuple[str, int]], int]:
    """Split ``total`` sats across ``recipients``.

    Returns the per-recipient shares and the undistributed remainder.
    ``floor`` gives everyone ``total // n`` and drops the remainder;
    ``distribute`` hands one extra sat to the first ``total % n`` recipients
    so the shares always sum to ``total``.
    """

    if not recipients:
        return [], total
    base, remainder = divmod(total, len(recipients))
    if policy == "floor":
        return [(recipient, base) for recipient in recipients], remainder
    shares = [
        (recipient, base + (1 if index < remainder else 0))
        for index, recipient in enumerate(recipients)
    ]
    return shares, 0


__all__ = ["split_amount"]
