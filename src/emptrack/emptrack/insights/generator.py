from __future__ import annotations

import time
from typing import Callable, Protocol

from ..core.constants import INSIGHT_LATENCY_SECONDS


class InsightGenerator(Protocol):
    def generate(self, summary: dict) -> str:
        raise NotImplementedError


class SimulatedInsightGenerator(InsightGenerator):
    """Stand-in for a hosted model: fixed latency, canned analysis of the summary."""

    def __init__(self, *, latency: float = INSIGHT_LATENCY_SECONDS, sleep: Callable[[float], None] = time.sleep):
        self._latency = max(float(latency), 0.0)
        self._sleep = sleep

    def generate(self, summary: dict) -> str:
        if self._latency:
            self._sleep(self._latency)

        active = summary["total_active_sessions"]
        completed = summary["completed_sessions_today"]
        stores = summary["store_count"]
        samples = summary["sample_recent_events"]

        rssi = [e["rssi"] for e in samples if e.get("rssi") is not None]
        weakest = min(rssi) if rssi else None
        exits = sum(1 for e in samples if e["type"] == "EXIT")

        lines = [
            f"- Staffing: {active} active session(s) across {stores} location(s), {completed} completed today.",
        ]
        if weakest is None:
            lines.append("- Signal quality: no RSSI samples in the recent window.")
        elif weakest < -70:
            lines.append(f"- Signal quality: weakest sample at {weakest} dBm; check access point placement.")
        else:
            lines.append(f"- Signal quality: all samples at or above {weakest} dBm, coverage looks healthy.")
        if exits:
            lines.append(f"- Patterns: {exits} exit(s) among the last {len(samples)} events; review early departures.")
        else:
            lines.append(f"- Patterns: no exits among the last {len(samples)} events.")
        return "\n".join(lines)
