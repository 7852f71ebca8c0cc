from dataclasses import FrozenInstanceError
from datetime import datetime, timedelta, timezone

import pytest

from arenamatch.controllers import MatchLedger
from arenamatch.exceptions import (
    InvalidPairingException,
    InvalidResultException,
    MatchNotFoundException,
)
from arenamatch.models import MatchStatus


def _ticking_clock(step_seconds=1):
    start = datetime(2025, 1, 1, tzinfo=timezone.utc)
    ticks = iter(range(10_000))
    return lambda: start + timedelta(seconds=step_seconds * next(ticks))


def test_schedule_match_is_pending_and_prepended():
    ledger = MatchLedger()
    first = ledger.schedule_match("a", "b")
    second = ledger.schedule_match("c", "d")

    assert first.status is MatchStatus.PENDING
    assert first.score1 is None and first.score2 is None
    assert ledger.matches == [second, first]


def test_self_pairing_rejected():
    ledger = MatchLedger()
    with pytest.raises(InvalidPairingException):
        ledger.schedule_match("a", "a")
    assert len(ledger) == 0


def test_unregistered_ids_are_accepted():
    ledger = MatchLedger()
    match = ledger.schedule_match("ghost", "b")
    assert match.player1_id == "ghost"


def test_record_result_completes_match():
    ledger = MatchLedger()
    match = ledger.schedule_match("a", "b")

    completed = ledger.record_result(match.id, 3, 1)

    assert completed.status is MatchStatus.COMPLETED
    assert (completed.score1, completed.score2) == (3, 1)
    assert completed.id == match.id
    assert ledger.get(match.id) == completed
    assert match.is_pending


def test_record_draw():
    ledger = MatchLedger()
    match = ledger.schedule_match("a", "b")
    completed = ledger.record_result(match.id, 2, 2)

    assert completed.is_completed
    assert completed.score1 == completed.score2 == 2


def test_record_result_overwrites_completed_match():
    ledger = MatchLedger()
    match = ledger.schedule_match("a", "b")
    ledger.record_result(match.id, 1, 0)
    ledger.record_result(match.id, 0, 4)

    stored = ledger.get(match.id)
    assert (stored.score1, stored.score2) == (0, 4)
    assert stored.is_completed
    assert len(ledger) == 1


def test_record_result_unknown_match():
    ledger = MatchLedger()
    ledger.schedule_match("a", "b")

    with pytest.raises(MatchNotFoundException):
        ledger.record_result("missing", 1, 0)


def test_negative_score_leaves_match_untouched():
    ledger = MatchLedger()
    match = ledger.schedule_match("a", "b")

    with pytest.raises(InvalidResultException):
        ledger.record_result(match.id, 2, -1)

    stored = ledger.get(match.id)
    assert stored.is_pending
    assert stored.score1 is None and stored.score2 is None


def test_delete_match_any_status():
    ledger = MatchLedger()
    pending = ledger.schedule_match("a", "b")
    done = ledger.schedule_match("c", "d")
    ledger.record_result(done.id, 1, 1)

    assert ledger.delete_match(pending.id) is True
    assert ledger.delete_match(done.id) is True
    assert ledger.delete_match("missing") is False
    assert len(ledger) == 0


def test_purge_pending_keeps_completed_history():
    ledger = MatchLedger()
    pending_home = ledger.schedule_match("bob", "carol")
    pending_away = ledger.schedule_match("alice", "bob")
    finished = ledger.schedule_match("bob", "alice")
    unrelated = ledger.schedule_match("alice", "carol")
    ledger.record_result(finished.id, 0, 1)

    removed = ledger.purge_pending_for("bob")

    assert {m.id for m in removed} == {pending_home.id, pending_away.id}
    assert [m.id for m in ledger.matches] == [unrelated.id, finished.id]


def test_pending_and_history_views():
    ledger = MatchLedger(clock=_ticking_clock())
    oldest = ledger.schedule_match("a", "b")
    middle = ledger.schedule_match("c", "d")
    newest = ledger.schedule_match("e", "f")
    ledger.record_result(oldest.id, 1, 0)
    ledger.record_result(newest.id, 2, 0)

    assert ledger.pending_matches() == [middle]
    assert [m.id for m in ledger.completed_matches()] == [newest.id, oldest.id]
    assert ledger.pending_count == 1


def test_history_ties_keep_newest_created_first():
    ledger = MatchLedger(clock=_ticking_clock(step_seconds=0))
    first = ledger.schedule_match("a", "b")
    second = ledger.schedule_match("c", "d")
    ledger.record_result(first.id, 1, 0)
    ledger.record_result(second.id, 1, 0)

    assert [m.id for m in ledger.completed_matches()] == [second.id, first.id]


def test_matches_cannot_be_modified_outside_the_ledger():
    ledger = MatchLedger()
    match = ledger.schedule_match("a", "b")
    version = ledger.version

    with pytest.raises(FrozenInstanceError):
        match.score1 = 3
    with pytest.raises(FrozenInstanceError):
        match.player1_id = "c"

    copy = match.completed(3, 1)

    assert copy.is_completed
    assert ledger.get(match.id).is_pending
    assert ledger.version == version


def test_completed_copy_rejects_bad_scores():
    match = MatchLedger().schedule_match("a", "b")

    with pytest.raises(InvalidResultException):
        match.completed(-1, 0)
    with pytest.raises(InvalidResultException):
        match.completed(1, True)
