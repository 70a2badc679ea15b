"""Prometheus metrics for the Barragoon engine.

This module centralises counters and histograms so that move generation and
move application can record lightweight telemetry without each caller
managing its own metric instances. Nothing here exposes an endpoint; a host
process that wants to scrape them mounts ``prometheus_client`` itself.
"""

from __future__ import annotations

from typing import Final

from prometheus_client import Counter, Histogram


MOVE_GENERATION_LATENCY: Final[Histogram] = Histogram(
    "barragoon_move_generation_seconds",
    "Time spent generating the legal move set of one position, in seconds.",
    # A capture that can relocate the barragoon anywhere produces around a
    # thousand moves; buckets cover that tail as well as the quiet positions.
    buckets=(
        0.001,
        0.005,
        0.01,
        0.05,
        0.1,
        0.5,
        1.0,
    ),
)

MOVES_GENERATED: Final[Counter] = Counter(
    "barragoon_moves_generated_total",
    "Total number of legal moves generated, labeled by move kind.",
    labelnames=("kind",),
)

MOVES_APPLIED: Final[Counter] = Counter(
    "barragoon_moves_applied_total",
    "Total number of make_move calls, labeled by outcome (applied/rejected).",
    labelnames=("outcome",),
)
