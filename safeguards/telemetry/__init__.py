# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Telemetry package - OpenTelemetry instruments."""

from .metrics import (
    error_created_total,
    guard_failure_total,
    safe_add,
    sanitize_replacement_total,
)
from .runtime import meter

__all__ = [
    "error_created_total",
    "guard_failure_total",
    "meter",
    "safe_add",
    "sanitize_replacement_total",
]
