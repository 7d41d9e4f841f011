"""Tests for milestone tracking."""

from goldclicker.data.balance import BALANCE
from goldclicker.engine.milestones import MilestoneTracker


def test_default_thresholds():
    assert MilestoneTracker().thresholds == BALANCE.milestones.thresholds


def test_below_first_threshold_unlocks_nothing():
    tracker = MilestoneTracker()
    assert tracker.evaluate(99.9) == []
    assert tracker.unlocked == ()


def test_threshold_fires_exactly_once():
    tracker = MilestoneTracker()
    assert tracker.evaluate(100) == [100]
    assert tracker.evaluate(100) == []
    assert tracker.evaluate(150) == []
    assert tracker.is_unlocked(100)


def test_several_thresholds_crossed_at_once_are_ascending():
    tracker = MilestoneTracker([10_000, 100, 1_000])
    assert tracker.evaluate(20_000) == [100, 1_000, 10_000]


def test_unlocks_survive_gold_dropping():
    tracker = MilestoneTracker()
    tracker.evaluate(1_500)
    assert tracker.evaluate(0) == []
    assert tracker.evaluate(1_500) == []
    assert tracker.unlocked == (100, 1_000)


def test_never_returns_a_threshold_twice():
    tracker = MilestoneTracker()
    seen = []
    for gold in [0, 50, 120, 80, 999, 1_000, 5, 50_000, 200_000, 10]:
        seen.extend(tracker.evaluate(gold))
    assert seen == [100, 1_000, 10_000, 100_000]


def test_duplicate_thresholds_are_collapsed():
    tracker = MilestoneTracker([100, 100, 50])
    assert tracker.thresholds == (50, 100)
    assert tracker.evaluate(100) == [50, 100]


def test_reset_relocks_everything():
    tracker = MilestoneTracker()
    tracker.evaluate(1_000)
    tracker.reset()
    assert tracker.unlocked == ()
    assert tracker.evaluate(1_000) == [100, 1_000]
