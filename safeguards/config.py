# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Environment-driven settings.

``SAFEGUARDS_DIAGNOSTIC_SINK``
    Where self-reported errors are written: ``stderr`` (default),
    ``logging`` or ``none``.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Final, Optional

logger = logging.getLogger(__name__)

DIAGNOSTIC_SINK_ENV: Final[str] = "SAFEGUARDS_DIAGNOSTIC_SINK"
DIAGNOSTIC_SINK_CHOICES: Final[tuple[str, ...]] = ("stderr", "logging", "none")


@dataclass(frozen=True)
class Settings:
    diagnostic_sink: str = "stderr"


_settings: Optional[Settings] = None


def load_settings() -> Settings:
    """Read settings from the environment."""

    raw = os.getenv(DIAGNOSTIC_SINK_ENV, "").strip().lower()
    if not raw:
        return Settings()

    if raw not in DIAGNOSTIC_SINK_CHOICES:
        logger.warning(
            "Ignoring unknown %s=%r; expected one of %s",
            DIAGNOSTIC_SINK_ENV,
            raw,
            ", ".join(DIAGNOSTIC_SINK_CHOICES),
        )
        return Settings()

    return Settings(diagnostic_sink=raw)


def get_settings() -> Settings:
    """Return cached settings, loading them on first use."""

    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def reload_settings() -> Settings:
    """Discard cached settings and read the environment again."""

    global _settings
    _settings = load_settings()
    return _settings


__all__ = [
    "DIAGNOSTIC_SINK_CHOICES",
    "DIAGNOSTIC_SINK_ENV",
    "Settings",
    "get_settings",
    "load_settings",
    "reload_settings",
]
