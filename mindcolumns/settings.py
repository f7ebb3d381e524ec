"""Navigation settings for mindcolumns."""

import json
import logging
import os
from dataclasses import dataclass, asdict, replace
from typing import Optional

logger = logging.getLogger(__name__)

SCROLL_DELAY_ENV = "MINDCOLUMNS_SCROLL_DELAY_MS"


@dataclass
class NavigationSettings:
    """Settings for the column navigation view."""
    scroll_delay_ms: int = 100
    column_width_fraction: float = 0.5  # share of the viewport one column takes

    def to_json(self) -> str:
        return json.dumps(asdict(self))

    @classmethod
    def from_json(cls, data: Optional[str]) -> "NavigationSettings":
        if not data:
            return cls()
        try:
            d = json.loads(data)
            # Filter to only known fields to handle schema evolution
            known = {f.name for f in cls.__dataclass_fields__.values()}
            return cls(**{k: v for k, v in d.items() if k in known})
        except (json.JSONDecodeError, TypeError, AttributeError):
            return cls()

    @classmethod
    def from_env(cls, base: Optional["NavigationSettings"] = None) -> "NavigationSettings":
        """Apply environment overrides on top of `base` (or the defaults)."""
        settings = base or cls()
        raw = os.environ.get(SCROLL_DELAY_ENV)
        if raw is None:
            return settings
        try:
            delay = int(raw)
        except ValueError:
            logger.warning("Ignoring %s=%r: not an integer", SCROLL_DELAY_ENV, raw)
            return settings
        if delay < 0:
            logger.warning("Ignoring %s=%r: must not be negative", SCROLL_DELAY_ENV, raw)
            return settings
        return replace(settings, scroll_delay_ms=delay)
