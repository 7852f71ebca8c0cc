import random

import pytest

from arenamatch.exceptions import InvalidPairingException, MatchNotFoundException
from arenamatch.models import MatchStatus
from arenamatch.tournament import Tournament, compute_stats


def _tournament(*names, seed=0):
    tournament = Tournament(rng=random.Random(seed))
    players = [tournament.add_player(name) for name in names]
    return tournament, players


def _by_name(stats):
    return {row.name: row for row in stats}


def test_scenario_win():
    tournament, (alice, bob) = _tournament("Alice", "Bob")
    match = tournament.schedule_match(alice.id, bob.id)
    tournament.record_result(match.id, 3, 1)

    stats = _by_name(tournament.stats)
    assert (stats["Alice"].played, stats["Alice"].wins) == (1, 1)
    assert (stats["Alice"].points, stats["Alice"].goal_difference) == (3, 2)
    assert (stats["Bob"].played, stats["Bob"].losses) == (1, 1)
    assert (stats["Bob"].points, stats["Bob"].goal_difference) == (0, -2)


def test_scenario_draw():
    tournament, (alice, bob) = _tournament("Alice", "Bob")
    match = tournament.schedule_match(alice.id, bob.id)
    tournament.record_result(match.id, 2, 2)

    for row in tournament.stats:
        assert (row.played, row.draws, row.points, row.goal_difference) == (1, 1, 1, 0)


def test_scenario_remove_player_deletes_pending_match():
    tournament, (alice, bob) = _tournament("Alice", "Bob")
    tournament.schedule_match(alice.id, bob.id)

    tournament.remove_player(bob.id)

    assert tournament.matches == []
    assert tournament.pending_matches() == []
    assert tournament.match_history() == []


def test_scenario_remove_player_keeps_completed_match():
    tournament, (alice, bob) = _tournament("Alice", "Bob")
    match = tournament.schedule_match(alice.id, bob.id)
    completed = tournament.record_result(match.id, 1, 0)

    tournament.remove_player(bob.id)

    assert tournament.match_history() == [completed]
    stats = _by_name(tournament.stats)
    assert set(stats) == {"Alice"}
    # only matches between two registered players count
    assert stats["Alice"].played == 0
    assert stats["Alice"].wins == 0
    assert tournament.player_name(bob.id) == "Unknown"


def test_scenario_self_pairing():
    tournament, (alice,) = _tournament("Alice")

    with pytest.raises(InvalidPairingException):
        tournament.schedule_match(alice.id, alice.id)
    assert tournament.matches == []


def test_record_result_unknown_match_raises():
    tournament, _ = _tournament("Alice", "Bob")
    with pytest.raises(MatchNotFoundException):
        tournament.record_result("missing", 1, 0)


def test_remove_and_delete_unknown_ids_are_noops():
    tournament, _ = _tournament("Alice")
    version = tournament.version

    assert tournament.remove_player("missing") is False
    assert tournament.delete_match("missing") is False
    assert tournament.version == version


def test_stats_always_match_full_recompute():
    tournament, (alice, bob, carol) = _tournament("Alice", "Bob", "Carol")
    first = tournament.schedule_match(alice.id, bob.id)
    assert tournament.stats == compute_stats(tournament.players, tournament.matches)

    tournament.record_result(first.id, 0, 2)
    assert tournament.stats == compute_stats(tournament.players, tournament.matches)

    tournament.record_result(first.id, 5, 0)
    assert tournament.stats == compute_stats(tournament.players, tournament.matches)

    tournament.remove_player(carol.id)
    assert tournament.stats == compute_stats(tournament.players, tournament.matches)


def test_stats_copies_cannot_corrupt_memo():
    tournament, (alice, bob) = _tournament("Alice", "Bob")
    tournament.stats[0].points = 99

    assert all(row.points == 0 for row in tournament.stats)


def test_standings_are_ranked():
    tournament, (alice, bob, carol) = _tournament("Alice", "Bob", "Carol")
    match = tournament.schedule_match(carol.id, alice.id)
    tournament.record_result(match.id, 3, 0)

    assert tournament.standings[0].name == "Carol"
    assert tournament.standings[-1].name == "Alice"


def test_quick_match_schedules_pending_match():
    tournament, players = _tournament("Alice", "Bob", "Carol")

    match = tournament.quick_match()

    assert match.status is MatchStatus.PENDING
    assert match.player1_id != match.player2_id
    assert tournament.pending_count == 1


def test_quick_match_with_one_player():
    tournament, _ = _tournament("Alice")
    assert tournament.quick_match() is None
    assert tournament.matches == []


def test_generate_round_schedules_disjoint_matches():
    tournament, players = _tournament("A", "B", "C", "D", "E")

    scheduled = tournament.generate_round()

    assert len(scheduled) == 2
    assert tournament.pending_count == 2
    ids = [pid for m in scheduled for pid in (m.player1_id, m.player2_id)]
    assert len(ids) == len(set(ids)) == 4


def test_signals_fire_on_mutations():
    tournament = Tournament()
    events = []
    tournament.players_changed.connect(lambda: events.append("players"))
    tournament.matches_changed.connect(lambda: events.append("matches"))
    tournament.standings_changed.connect(
        lambda rows: events.append(("standings", [r.name for r in rows]))
    )

    alice = tournament.add_player("Alice")
    bob = tournament.add_player("Bob")
    match = tournament.schedule_match(alice.id, bob.id)
    tournament.remove_player(bob.id)

    assert events == [
        "players",
        ("standings", ["Alice"]),
        "players",
        ("standings", ["Alice", "Bob"]),
        "matches",
        ("standings", ["Alice", "Bob"]),
        "players",
        "matches",
        ("standings", ["Alice"]),
    ]
    assert tournament.ledger.get(match.id) is None


def test_summary():
    tournament, (alice, bob, carol) = _tournament("Alice", "Bob", "Carol")
    done = tournament.schedule_match(bob.id, alice.id)
    tournament.schedule_match(alice.id, carol.id)
    tournament.record_result(done.id, 2, 1)

    summary = tournament.summary()

    assert summary.player_count == 3
    assert summary.match_count == 2
    assert summary.pending_count == 1
    assert summary.leader.name == "Bob"


def test_summary_empty():
    summary = Tournament().summary()
    assert summary.leader is None
    assert summary.to_dict()["player_count"] == 0


def test_direct_store_edits_refresh_stats():
    tournament, (alice, bob) = _tournament("Alice", "Bob")
    assert all(row.played == 0 for row in tournament.stats)

    match = tournament.ledger.schedule_match(alice.id, bob.id)
    tournament.ledger.record_result(match.id, 0, 1)

    assert _by_name(tournament.stats)["Bob"].wins == 1


def test_stats_never_stale_across_mutation_paths():
    tournament, (alice, bob, carol) = _tournament("Alice", "Bob", "Carol")

    def _fresh():
        return compute_stats(tournament.players, tournament.matches)

    match = tournament.schedule_match(alice.id, bob.id)
    assert tournament.stats == _fresh()

    # a completed copy made outside the ledger changes nothing
    match.completed(3, 1)
    assert tournament.stats == _fresh()
    assert all(row.played == 0 for row in tournament.stats)

    tournament.record_result(match.id, 3, 1)
    assert tournament.stats == _fresh()

    tournament.ledger.record_result(match.id, 0, 2)
    assert tournament.stats == _fresh()
    assert _by_name(tournament.stats)["Bob"].wins == 1

    tournament.generate_round()
    assert tournament.stats == _fresh()

    tournament.registry.remove_player(carol.id)
    assert tournament.stats == _fresh()

    tournament.delete_match(match.id)
    assert tournament.stats == _fresh()
    assert all(row.played == 0 for row in tournament.stats)
