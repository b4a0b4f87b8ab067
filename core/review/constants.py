"""
Review Constants and Interval Policies

All configurable parameters for review scheduling in one place.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import timedelta
from typing import Union

from dotenv import load_dotenv

from core.review.errors import ConfigurationError
from core.schemas import ReviewSchedule, WordStatus

# Load environment
load_dotenv()


Interval = Union[timedelta, ReviewSchedule]


@dataclass(frozen=True)
class IntervalConfig:
    """
    Time from last review to next eligibility, per status.

    ReviewSchedule.NEVER marks an infinite interval: entries with that status
    are never due again. Excluded entries have no interval at all.
    """
    unknown: Interval
    partial: Interval
    known: Interval

    def __post_init__(self):
        for status in (WordStatus.UNKNOWN, WordStatus.PARTIAL, WordStatus.KNOWN):
            value = getattr(self, status.value)
            if isinstance(value, ReviewSchedule):
                continue
            if not isinstance(value, timedelta) or value < timedelta(0):
                raise ConfigurationError(
                    f"Interval for '{status.value}' must be a non-negative timedelta "
                    f"or ReviewSchedule.NEVER, got {value!r}"
                )

    def interval_for(self, status: WordStatus) -> Interval:
        """Look up the interval for a status (excluded has none)."""
        status = WordStatus(status)
        if status == WordStatus.EXCLUDED:
            raise ConfigurationError(
                "Status 'excluded' has no review interval; "
                "excluded entries must be filtered out before scheduling"
            )
        return getattr(self, status.value)

    def is_retired(self, status: WordStatus) -> bool:
        """True if entries with this status are never reviewed again."""
        status = WordStatus(status)
        if status == WordStatus.EXCLUDED:
            return True
        return self.interval_for(status) == ReviewSchedule.NEVER


# ---- Interval Presets ----

# "Known" means never review again
NEVER_AGAIN_INTERVALS = IntervalConfig(
    unknown=timedelta(minutes=5),
    partial=timedelta(days=1),
    known=ReviewSchedule.NEVER,
)

# "Known" comes back after a week
WEEKLY_INTERVALS = IntervalConfig(
    unknown=timedelta(hours=1),
    partial=timedelta(days=1),
    known=timedelta(weeks=1),
)

INTERVAL_POLICIES = {
    "never": NEVER_AGAIN_INTERVALS,
    "weekly": WEEKLY_INTERVALS,
}

DEFAULT_POLICY = "never"


def load_interval_config(policy: str | None = None) -> IntervalConfig:
    """
    Resolve the interval preset.

    Uses KNOWN_REVIEW_POLICY from the environment when no policy is given.

    Raises:
        ConfigurationError: If the policy name is not recognised
    """
    if policy is None:
        policy = os.getenv("KNOWN_REVIEW_POLICY", DEFAULT_POLICY)
    key = policy.strip().lower()
    try:
        return INTERVAL_POLICIES[key]
    except KeyError:
        raise ConfigurationError(
            f"Unknown KNOWN_REVIEW_POLICY '{policy}'. "
            f"Expected one of: {', '.join(sorted(INTERVAL_POLICIES))}"
        ) from None
