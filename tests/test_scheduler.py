"""
Tests for the review scheduler.

Tests cover:
- Interval presets and policy loading
- Next review computation, including the infinite interval
- Due predicate
- Manual status changes
"""

from datetime import datetime, timedelta, timezone

import pytest

from core import review
from core.review import (
    NEVER_AGAIN_INTERVALS,
    WEEKLY_INTERVALS,
    ConfigurationError,
    IntervalConfig,
    ReviewSchedule,
    WordStatus,
)


class TestIntervalConfig:
    """Interval presets and lookups."""

    def test_never_again_preset(self):
        assert NEVER_AGAIN_INTERVALS.interval_for(WordStatus.UNKNOWN) == timedelta(minutes=5)
        assert NEVER_AGAIN_INTERVALS.interval_for(WordStatus.PARTIAL) == timedelta(days=1)
        assert NEVER_AGAIN_INTERVALS.interval_for(WordStatus.KNOWN) == ReviewSchedule.NEVER

    def test_weekly_preset(self):
        assert WEEKLY_INTERVALS.interval_for(WordStatus.UNKNOWN) == timedelta(hours=1)
        assert WEEKLY_INTERVALS.interval_for(WordStatus.PARTIAL) == timedelta(days=1)
        assert WEEKLY_INTERVALS.interval_for(WordStatus.KNOWN) == timedelta(weeks=1)

    def test_excluded_has_no_interval(self):
        with pytest.raises(ConfigurationError):
            NEVER_AGAIN_INTERVALS.interval_for(WordStatus.EXCLUDED)

    def test_lookup_accepts_plain_values(self):
        assert WEEKLY_INTERVALS.interval_for("partial") == timedelta(days=1)

    def test_negative_interval_rejected(self):
        with pytest.raises(ConfigurationError):
            IntervalConfig(
                unknown=timedelta(minutes=-1),
                partial=timedelta(days=1),
                known=ReviewSchedule.NEVER,
            )

    def test_retired_statuses(self):
        assert NEVER_AGAIN_INTERVALS.is_retired(WordStatus.KNOWN)
        assert NEVER_AGAIN_INTERVALS.is_retired(WordStatus.EXCLUDED)
        assert not NEVER_AGAIN_INTERVALS.is_retired(WordStatus.PARTIAL)
        assert not WEEKLY_INTERVALS.is_retired(WordStatus.KNOWN)


class TestLoadIntervalConfig:
    """Policy selection from the environment."""

    def test_default_is_never_again(self):
        assert review.load_interval_config() is NEVER_AGAIN_INTERVALS

    def test_env_selects_weekly(self, monkeypatch):
        monkeypatch.setenv("KNOWN_REVIEW_POLICY", "Weekly")
        assert review.load_interval_config() is WEEKLY_INTERVALS

    def test_explicit_policy_wins(self, monkeypatch):
        monkeypatch.setenv("KNOWN_REVIEW_POLICY", "weekly")
        assert review.load_interval_config("never") is NEVER_AGAIN_INTERVALS

    def test_unknown_policy_fails_fast(self, monkeypatch):
        monkeypatch.setenv("KNOWN_REVIEW_POLICY", "monthly")
        with pytest.raises(ConfigurationError, match="monthly"):
            review.load_interval_config()


class TestComputeNextReview:
    """Next review = last review + interval(status)."""

    @pytest.mark.parametrize("config", [NEVER_AGAIN_INTERVALS, WEEKLY_INTERVALS])
    @pytest.mark.parametrize("status", [WordStatus.UNKNOWN, WordStatus.PARTIAL])
    def test_finite_interval_added(self, config, status, now):
        last = now - timedelta(hours=3)
        result = review.compute_next_review(status, last, now, config)
        assert result == last + config.interval_for(status)

    def test_weekly_known(self, now):
        result = review.compute_next_review(WordStatus.KNOWN, now, now, WEEKLY_INTERVALS)
        assert result == now + timedelta(weeks=1)

    @pytest.mark.parametrize("status", [WordStatus.UNKNOWN, WordStatus.PARTIAL, WordStatus.KNOWN])
    def test_never_reviewed_is_due_now(self, status, now):
        assert review.compute_next_review(status, None, now, NEVER_AGAIN_INTERVALS) == now

    def test_infinite_interval_returns_sentinel(self, now):
        result = review.compute_next_review(WordStatus.KNOWN, now, now, NEVER_AGAIN_INTERVALS)
        assert result == ReviewSchedule.NEVER

    def test_infinite_interval_never_overflows(self):
        last = datetime.max.replace(tzinfo=timezone.utc) - timedelta(seconds=1)
        result = review.compute_next_review(WordStatus.KNOWN, last, last, NEVER_AGAIN_INTERVALS)
        assert result == ReviewSchedule.NEVER

    def test_excluded_is_a_contract_violation(self, now):
        with pytest.raises(ConfigurationError):
            review.compute_next_review(WordStatus.EXCLUDED, now, now, NEVER_AGAIN_INTERVALS)
        with pytest.raises(ConfigurationError):
            review.compute_next_review(WordStatus.EXCLUDED, None, now, NEVER_AGAIN_INTERVALS)

    def test_deterministic(self, now):
        first = review.compute_next_review(WordStatus.PARTIAL, now, now, WEEKLY_INTERVALS)
        second = review.compute_next_review(WordStatus.PARTIAL, now, now, WEEKLY_INTERVALS)
        assert first == second

    def test_uses_configured_policy_by_default(self, monkeypatch, now):
        monkeypatch.setenv("KNOWN_REVIEW_POLICY", "weekly")
        assert review.compute_next_review(WordStatus.UNKNOWN, now, now) == now + timedelta(hours=1)


class TestIsDue:
    """Due predicate."""

    def test_never_reviewed_entry_is_due(self, make_entry, now):
        entry = make_entry(status=WordStatus.UNKNOWN)
        assert review.is_due(entry, now, NEVER_AGAIN_INTERVALS)
        assert review.is_due(entry, now + timedelta(days=365), NEVER_AGAIN_INTERVALS)

    @pytest.mark.parametrize("offset_days", [-400, 0, 400])
    def test_excluded_is_never_due(self, make_entry, now, offset_days):
        entry = make_entry(
            status=WordStatus.EXCLUDED,
            last_reviewed_at=now - timedelta(days=500),
            next_review_at=now - timedelta(days=500),
        )
        check_at = now + timedelta(days=offset_days)
        assert not review.is_due(entry, check_at, NEVER_AGAIN_INTERVALS)
        assert not review.is_due(entry, check_at, WEEKLY_INTERVALS)

    def test_known_never_due_under_never_again(self, make_entry, now):
        # Even with a stale next_review_at from another policy
        entry = make_entry(
            status=WordStatus.KNOWN,
            last_reviewed_at=now - timedelta(days=30),
            next_review_at=now - timedelta(days=23),
        )
        assert not review.is_due(entry, now, NEVER_AGAIN_INTERVALS)

    def test_known_cycles_back_under_weekly(self, make_entry, now):
        entry = make_entry(
            status=WordStatus.KNOWN,
            last_reviewed_at=now,
            next_review_at=now + timedelta(weeks=1),
        )
        assert not review.is_due(entry, now + timedelta(days=6), WEEKLY_INTERVALS)
        assert review.is_due(entry, now + timedelta(weeks=1), WEEKLY_INTERVALS)

    def test_due_at_exact_boundary(self, make_entry, now):
        entry = make_entry(status=WordStatus.PARTIAL, last_reviewed_at=now - timedelta(days=1), next_review_at=now)
        assert review.is_due(entry, now, NEVER_AGAIN_INTERVALS)
        assert not review.is_due(entry, now - timedelta(seconds=1), NEVER_AGAIN_INTERVALS)

    def test_never_sentinel_is_not_due_while_retired(self, make_entry, now):
        entry = make_entry(status=WordStatus.KNOWN, last_reviewed_at=now, next_review_at=ReviewSchedule.NEVER)
        assert not review.is_due(entry, now + timedelta(days=10_000), NEVER_AGAIN_INTERVALS)

    def test_stale_never_rederived_after_switching_to_weekly(self, make_entry, now):
        entry = make_entry(
            status=WordStatus.KNOWN,
            last_reviewed_at=now - timedelta(days=30),
            next_review_at=ReviewSchedule.NEVER,
        )
        assert review.is_due(entry, now, WEEKLY_INTERVALS)

    def test_stale_never_waits_for_weekly_interval(self, make_entry, now):
        entry = make_entry(status=WordStatus.KNOWN, last_reviewed_at=now, next_review_at=ReviewSchedule.NEVER)
        assert not review.is_due(entry, now + timedelta(days=6), WEEKLY_INTERVALS)
        assert review.is_due(entry, now + timedelta(weeks=1), WEEKLY_INTERVALS)

    def test_naive_now_treated_as_utc(self, make_entry, now):
        entry = make_entry(status=WordStatus.PARTIAL, last_reviewed_at=now, next_review_at=now + timedelta(days=1))
        naive = (now + timedelta(days=2)).replace(tzinfo=None)
        assert review.is_due(entry, naive, NEVER_AGAIN_INTERVALS)

    def test_idempotent(self, make_entry, now):
        entry = make_entry(status=WordStatus.PARTIAL, last_reviewed_at=now, next_review_at=now + timedelta(days=1))
        snapshot = entry.model_copy()
        first = review.is_due(entry, now, NEVER_AGAIN_INTERVALS)
        second = review.is_due(entry, now, NEVER_AGAIN_INTERVALS)
        assert first == second
        assert entry == snapshot

    def test_filter_due_preserves_order(self, make_entry, now):
        entries = [
            make_entry(status=WordStatus.PARTIAL),
            make_entry(status=WordStatus.EXCLUDED),
            make_entry(status=WordStatus.UNKNOWN),
        ]
        due = review.filter_due(entries, now, NEVER_AGAIN_INTERVALS)
        assert [e.id for e in due] == [entries[0].id, entries[2].id]


class TestReassignStatus:
    """Manual status changes from the entry form."""

    def test_keeps_history_and_rederives(self, make_entry, now):
        entry = make_entry(
            status=WordStatus.UNKNOWN,
            last_reviewed_at=now,
            next_review_at=now + timedelta(minutes=5),
            review_count=3,
        )
        updated = review.reassign_status(entry, WordStatus.PARTIAL, NEVER_AGAIN_INTERVALS)
        assert updated.status == WordStatus.PARTIAL
        assert updated.next_review_at == now + timedelta(days=1)
        assert updated.review_count == 3
        assert updated.last_reviewed_at == now

    def test_excluding_clears_next_review(self, make_entry, now):
        entry = make_entry(status=WordStatus.PARTIAL, last_reviewed_at=now, next_review_at=now + timedelta(days=1))
        updated = review.reassign_status(entry, WordStatus.EXCLUDED, NEVER_AGAIN_INTERVALS)
        assert updated.next_review_at is None
        assert not review.is_due(updated, now + timedelta(days=5), NEVER_AGAIN_INTERVALS)

    def test_never_reviewed_stays_immediately_due(self, make_entry, now):
        entry = make_entry(status=WordStatus.EXCLUDED)
        updated = review.reassign_status(entry, WordStatus.UNKNOWN, NEVER_AGAIN_INTERVALS)
        assert updated.next_review_at is None
        assert review.is_due(updated, now, NEVER_AGAIN_INTERVALS)
