# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Metric instrument definitions for safeguards."""

from __future__ import annotations

import logging
from typing import Mapping

from .runtime import meter

logger = logging.getLogger(__name__)

error_created_total = meter.create_counter(
    name="safeguards.error.created.total",
    description="Counts logged errors constructed, partitioned by kind.",
    unit="1",
)

guard_failure_total = meter.create_counter(
    name="safeguards.guard.failure.total",
    description="Counts assertion guards that rejected their value.",
    unit="1",
)

sanitize_replacement_total = meter.create_counter(
    name="safeguards.sanitize.replacement.total",
    description="Counts sensitive values masked by output sanitization, partitioned by rule.",
    unit="1",
)


def safe_add(counter, amount: int, attributes: Mapping[str, str]) -> None:
    """Add to *counter*, swallowing exporter errors.

    Telemetry must never interfere with the caller's control flow.
    """

    try:
        counter.add(amount, dict(attributes))
    except Exception:
        logger.debug("Failed to record metric", exc_info=True)


__all__ = [
    "error_created_total",
    "guard_failure_total",
    "sanitize_replacement_total",
    "safe_add",
]
