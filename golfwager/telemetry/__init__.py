"""Telemetry hooks for settlement instrumentation."""

from .events import record_round_settled, set_settlement_telemetry_emitter  # noqa: F401
