"""Telemetry helpers for settlement instrumentation."""

from __future__ import annotations

import logging
import time
from typing import Callable, Dict, Mapping, MutableMapping, Optional, Sequence

SettlementTelemetryEmitter = Callable[[str, Mapping[str, object]], None]

_emitter: Optional[SettlementTelemetryEmitter] = None
_logger = logging.getLogger("golfwager.telemetry.events")


def set_settlement_telemetry_emitter(
    candidate: SettlementTelemetryEmitter | None,
) -> None:
    """Register a telemetry emitter used for settlement instrumentation."""

    global _emitter
    _emitter = candidate if callable(candidate) else None


def _safe_emit(event: str, payload: MutableMapping[str, object]) -> None:
    if not _emitter:
        _logger.debug("telemetry emitter not configured for event %s", event)
        return
    try:
        _emitter(event, dict(payload))
    except Exception:  # pragma: no cover - defensive logging only
        _logger.exception("failed to emit telemetry event %s", event)


def _now_ms() -> int:
    return int(time.time() * 1000)


def record_round_settled(
    *,
    modes: Sequence[str],
    players: int,
    ledger_size: int,
    transfers: int,
    volume_sats: int,
) -> None:
    payload: Dict[str, object] = {
        "modes": list(modes),
        "players": players,
        "ledgerSize": ledger_size,
        "transfers": transfers,
        "volumeSats": volume_sats,
        "ts": _now_ms(),
    }
    _safe_emit("round.settled", payload)


__all__ = ["record_round_settled", "set_settlement_telemetry_emitter"]
